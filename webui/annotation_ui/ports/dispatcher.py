"""
Request dispatch for the front-end ports
Author: Cascade (AI assistant)

Every inbound request variant has exactly one handler. Handlers receive the
request and the explicit PortEnvironment (layout document, object URL store,
settings) and return the outbound reply, or None when there is nothing to send.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Type

from ..config import Settings
from ..services.export import export_annotations
from ..services.image_loader import load_image_file
from ..services.object_urls import ObjectUrlStore
from ..services.viewport import LayoutDocument, ask_viewer_size
from .messages import AskViewerSize, ExportAnnotations, LoadImageFile, Reply


@dataclass
class PortEnvironment:
    """Everything the handlers may touch. One instance per running app."""

    settings: Settings
    document: LayoutDocument = field(default_factory=LayoutDocument)
    urls: ObjectUrlStore = field(default_factory=ObjectUrlStore)


def _on_ask_viewer_size(request: AskViewerSize, env: PortEnvironment) -> Reply:
    return ask_viewer_size(env.document, env.settings.VIEWER_ELEMENT_ID)


def _on_load_image_file(request: LoadImageFile, env: PortEnvironment) -> Optional[Reply]:
    return load_image_file(request, env.urls, max_bytes=env.settings.MAX_IMAGE_BYTES)


def _on_export_annotations(request: ExportAnnotations, env: PortEnvironment) -> Reply:
    return export_annotations(
        request,
        filename=env.settings.EXPORT_FILENAME,
        media_type=env.settings.EXPORT_MEDIA_TYPE,
    )


HANDLERS: Dict[Type, Callable] = {
    AskViewerSize: _on_ask_viewer_size,
    LoadImageFile: _on_load_image_file,
    ExportAnnotations: _on_export_annotations,
}


def dispatch(request, env: PortEnvironment) -> Optional[Reply]:
    """Run the handler registered for the request's variant."""
    handler = HANDLERS.get(type(request))
    if handler is None:
        raise TypeError(f"No handler for port request {type(request).__name__}")
    return handler(request, env)
