"""Shared fixtures: an app wired to a temporary index.html and public directory."""
import io

import pytest
from PIL import Image

pytest.importorskip("fastapi")

from fastapi.testclient import TestClient

from annotation_ui.config import load_settings
from annotation_ui.main import create_app

INDEX_HTML = "<!DOCTYPE html>\n<html><body><div id=\"viewer\"></div></body></html>\n"


def make_png(width: int, height: int, fmt: str = "PNG") -> bytes:
    """Encode a solid image of the given size."""
    buf = io.BytesIO()
    Image.new("RGB", (width, height), (200, 30, 30)).save(buf, format=fmt)
    return buf.getvalue()


def make_oriented_jpeg(width: int, height: int, orientation: int) -> bytes:
    """Encode a JPEG stored as width x height with an EXIF Orientation tag."""
    exif = Image.Exif()
    exif[0x0112] = orientation
    buf = io.BytesIO()
    Image.new("RGB", (width, height), (30, 200, 30)).save(buf, format="JPEG", exif=exif.tobytes())
    return buf.getvalue()


@pytest.fixture
def settings(tmp_path):
    index = tmp_path / "index.html"
    index.write_text(INDEX_HTML, encoding="utf-8")
    public = tmp_path / "public"
    public.mkdir()
    (public / "app.js").write_text("console.log('annotate');\n" * 200, encoding="utf-8")
    (public / "tiny.css").write_text("body{}", encoding="utf-8")
    return load_settings(INDEX_HTML=str(index), PUBLIC_DIR=str(public))


@pytest.fixture
def client(settings):
    """Create test client for a fresh FastAPI app."""
    return TestClient(create_app(settings))
