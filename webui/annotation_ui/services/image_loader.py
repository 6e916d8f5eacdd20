"""
Image loading for the annotation WebUI
Author: Cascade (AI assistant)

Turns an uploaded file into something the front-end can display:
- Files whose declared type is not an image are ignored (no reply)
- Raster images are decoded with Pillow; the reported size follows the EXIF
  orientation, as the browser displays it
- SVG images are sized from their width/height attributes or viewBox
- The original bytes are exposed through an object URL bound to a slot
"""

import io
import logging
import re
import xml.etree.ElementTree as ET
from typing import BinaryIO, Optional, Tuple

from PIL import Image, ImageOps, UnidentifiedImageError

from ..errors import ImageDecodeError, ImageTooLargeError
from ..ports.messages import ImageLoaded, LoadImageFile
from .object_urls import ObjectUrlStore

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"

# Browser default size of a replaced element with no intrinsic dimensions
DEFAULT_SVG_SIZE = (300, 150)

# CSS pixels per unit
SVG_UNITS = {
    "": 1.0,
    "px": 1.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
    "pt": 96.0 / 72.0,
    "pc": 16.0,
}
_LENGTH_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)\s*([a-z]*)\s*$")


def read_limited(stream: BinaryIO, max_bytes: Optional[int]) -> bytes:
    """Read an upload, stopping one byte past `max_bytes` so oversize input is detectable."""
    if max_bytes is None:
        return stream.read()
    return stream.read(max_bytes + 1)


def natural_size(data: bytes) -> Tuple[int, int]:
    """Return the displayed (width, height) of the encoded raster image in `data`."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            # Force a full decode so truncated files fail here, not in the browser
            img.load()
            # Browsers apply EXIF orientation, so rotated photos report swapped sizes
            return ImageOps.exif_transpose(img).size
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise ImageDecodeError(f"Could not decode image: {e}") from e


def _svg_length(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    match = _LENGTH_RE.match(value)
    if match is None or match.group(2) not in SVG_UNITS:
        # Percentages and font-relative units have no intrinsic size
        return None
    return float(match.group(1)) * SVG_UNITS[match.group(2)]


def _svg_viewbox(value: Optional[str]) -> Optional[Tuple[float, float]]:
    if not value:
        return None
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        width, height = float(parts[2]), float(parts[3])
    except ValueError:
        return None
    if width <= 0 or height <= 0:
        return None
    return width, height


def svg_size(data: bytes) -> Tuple[int, int]:
    """Return the intrinsic (width, height) of an SVG document."""
    if b"<!ENTITY" in data:
        raise ImageDecodeError("SVG documents with entity declarations are not accepted")
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise ImageDecodeError(f"Could not parse SVG: {e}") from e
    if root.tag.rsplit("}", 1)[-1] != "svg":
        raise ImageDecodeError(f"Root element is <{root.tag}>, not <svg>")

    width = _svg_length(root.get("width"))
    height = _svg_length(root.get("height"))
    viewbox = _svg_viewbox(root.get("viewBox"))

    if width is None and height is None:
        if viewbox is None:
            return DEFAULT_SVG_SIZE
        width, height = viewbox
    elif width is None:
        width = height * viewbox[0] / viewbox[1] if viewbox else DEFAULT_SVG_SIZE[0]
    elif height is None:
        height = width * viewbox[1] / viewbox[0] if viewbox else DEFAULT_SVG_SIZE[1]

    return int(round(width)), int(round(height))


def load_image_file(
    request: LoadImageFile,
    urls: ObjectUrlStore,
    max_bytes: Optional[int] = None,
) -> Optional[ImageLoaded]:
    """
    Decode an uploaded image and allocate an object URL for it.
    Returns None when the file is not declared as an image.
    """
    if not request.is_image:
        logger.debug(
            "Ignoring %r: declared type %r is not an image",
            request.filename, request.content_type,
        )
        return None

    if max_bytes is not None and len(request.data) > max_bytes:
        raise ImageTooLargeError(
            f"{request.filename or 'Image'} exceeds the {max_bytes} byte limit"
        )

    if request.content_type.split(";")[0].strip().lower() == SVG_MEDIA_TYPE:
        width, height = svg_size(request.data)
    else:
        width, height = natural_size(request.data)
    uri = urls.create(request.data, request.content_type, slot=request.slot)
    logger.info("Loaded %s (%dx%d) as %s", request.filename or "image", width, height, uri)
    return ImageLoaded(uri=uri, width=width, height=height)
