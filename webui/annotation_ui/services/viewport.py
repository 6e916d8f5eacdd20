"""
Viewport reporting for the annotation WebUI
Author: Cascade (AI assistant)

The front-end measures its own elements after each animation frame and posts
the rendered size here. The reporter answers `askViewerSize` from the most
recent measurement of the viewer element.
"""

import logging
import threading
from typing import Dict, Tuple

from ..errors import ElementNotFoundError, InvalidLayoutError
from ..ports.messages import ViewerSize

logger = logging.getLogger(__name__)


class LayoutDocument:
    """Last reported (width, height) of each measured element, keyed by id."""

    def __init__(self):
        self._sizes: Dict[str, Tuple[int, int]] = {}
        self._lock = threading.Lock()

    def report(self, element_id: str, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise InvalidLayoutError(
                f"Element '{element_id}' reported a negative size ({width}x{height})"
            )
        with self._lock:
            self._sizes[element_id] = (width, height)
        logger.debug("Layout of #%s is %dx%d", element_id, width, height)

    def client_size(self, element_id: str) -> Tuple[int, int]:
        with self._lock:
            size = self._sizes.get(element_id)
        if size is None:
            raise ElementNotFoundError(element_id)
        return size


def ask_viewer_size(document: LayoutDocument, element_id: str = "viewer") -> ViewerSize:
    """Return the rendered size of `element_id` as a viewerSize reply."""
    width, height = document.client_size(element_id)
    return ViewerSize(width=width, height=height)
