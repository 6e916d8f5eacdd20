"""
Static File Server Tests
========================
GET / serves the HTML entry point, /public serves assets, responses are gzipped.
"""
from pathlib import Path

import pytest

from annotation_ui.config import DEFAULT_PUBLIC_DIR

from conftest import INDEX_HTML


class TestHomePage:
    """Tests for GET /"""

    def test_home_returns_200(self, client):
        response = client.get("/")
        assert response.status_code == 200

    def test_home_returns_document_unmodified(self, client):
        response = client.get("/")
        assert response.text == INDEX_HTML
        assert response.headers["content-type"].startswith("text/html")


class TestPublicAssets:
    """Tests for GET /public/*"""

    def test_existing_asset_returns_200(self, client, settings):
        response = client.get("/public/app.js")
        assert response.status_code == 200
        expected = (Path(settings.PUBLIC_DIR) / "app.js").read_text(encoding="utf-8")
        assert response.text == expected

    def test_missing_asset_returns_404(self, client):
        response = client.get("/public/missing.png")
        assert response.status_code == 404

    def test_large_asset_is_gzipped(self, client):
        response = client.get("/public/app.js", headers={"Accept-Encoding": "gzip"})
        assert response.headers.get("content-encoding") == "gzip"

    def test_small_asset_is_not_gzipped(self, client):
        response = client.get("/public/tiny.css", headers={"Accept-Encoding": "gzip"})
        assert "content-encoding" not in response.headers

    def test_no_gzip_without_accept_encoding(self, client):
        response = client.get("/public/app.js", headers={"Accept-Encoding": "identity"})
        assert "content-encoding" not in response.headers


class TestHealth:

    def test_health_returns_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestBundledPortsScript:
    """The shipped public/ports.js honours the server's download metadata."""

    @pytest.fixture
    def script(self):
        return (Path(DEFAULT_PUBLIC_DIR) / "ports.js").read_text(encoding="utf-8")

    def test_download_name_comes_from_header(self, script):
        assert 'res.headers.get( "Content-Disposition" )' in script
        assert "filename\\*=UTF-8''" in script

    def test_failed_export_is_not_saved(self, script):
        assert "if ( !res.ok ) throw" in script
