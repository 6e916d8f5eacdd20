"""
Typed messages exchanged between the front-end and its environment
Author: Cascade (AI assistant)

Inbound requests and outbound replies are each a tagged union keyed on the
`port` field, which carries the channel name used by the front-end:

- askViewerSize     -> viewerSize
- loadImageFile     -> imageLoaded (or nothing for non-image files)
- exportAnnotations -> download
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Inbound
# ---------------------------------------------------------------------------

class AskViewerSize(BaseModel):
    port: Literal["askViewerSize"] = "askViewerSize"


class LoadImageFile(BaseModel):
    port: Literal["loadImageFile"] = "loadImageFile"
    filename: str = ""
    content_type: str = ""
    data: bytes = b""
    slot: str = "viewer"

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image")


class ExportAnnotations(BaseModel):
    port: Literal["exportAnnotations"] = "exportAnnotations"
    content: str


Request = Annotated[
    Union[AskViewerSize, LoadImageFile, ExportAnnotations],
    Field(discriminator="port"),
]


# ---------------------------------------------------------------------------
# Outbound
# ---------------------------------------------------------------------------

class ViewerSize(BaseModel):
    port: Literal["viewerSize"] = "viewerSize"
    width: int = Field(ge=0)
    height: int = Field(ge=0)


class ImageLoaded(BaseModel):
    port: Literal["imageLoaded"] = "imageLoaded"
    uri: str
    width: int = Field(ge=0)
    height: int = Field(ge=0)


class Download(BaseModel):
    port: Literal["download"] = "download"
    filename: str
    media_type: str
    content: bytes


Reply = Annotated[
    Union[ViewerSize, ImageLoaded, Download],
    Field(discriminator="port"),
]


class LayoutReport(BaseModel):
    """Rendered size of a DOM element, measured by the front-end after paint."""

    element_id: str = "viewer"
    width: int = Field(ge=0)
    height: int = Field(ge=0)
