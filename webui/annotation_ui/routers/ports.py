"""
API router exposing the front-end ports over HTTP
Author: Cascade (AI assistant)

Provides one endpoint per channel:
- POST /ports/viewerLayout       (front-end reports a measured element size)
- POST /ports/askViewerSize      -> viewerSize
- POST /ports/loadImageFile      -> imageLoaded, or 204 for non-image files
- POST /ports/exportAnnotations  -> attachment download

Each endpoint builds the typed request, hands it to the dispatcher and maps
PortError failures to HTTP errors.
"""

from fastapi import APIRouter, File, Form, HTTPException, Request, Response, UploadFile

from ..errors import PortError
from ..ports.dispatcher import PortEnvironment, dispatch
from ..ports.messages import (
    AskViewerSize,
    ExportAnnotations,
    ImageLoaded,
    LayoutReport,
    LoadImageFile,
    ViewerSize,
)
from ..services.export import content_disposition
from ..services.image_loader import read_limited

ports_router = APIRouter()


def port_environment(request: Request) -> PortEnvironment:
    return request.app.state.ports


def raise_http(exc: PortError):
    raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc


@ports_router.post("/viewerLayout", status_code=204)
def report_layout(report: LayoutReport, request: Request) -> Response:
    env = port_environment(request)
    try:
        env.document.report(report.element_id, report.width, report.height)
    except PortError as e:
        raise_http(e)
    return Response(status_code=204)


@ports_router.post("/askViewerSize", response_model=ViewerSize)
def ask_viewer_size(request: Request):
    try:
        return dispatch(AskViewerSize(), port_environment(request))
    except PortError as e:
        raise_http(e)


@ports_router.post("/loadImageFile", response_model=ImageLoaded, responses={204: {"description": "Not an image; ignored"}})
def load_image_file(
    request: Request,
    file: UploadFile = File(...),
    slot: str = Form("viewer"),
):
    env = port_environment(request)
    message = LoadImageFile(
        filename=file.filename or "",
        content_type=file.content_type or "",
        data=read_limited(file.file, env.settings.MAX_IMAGE_BYTES),
        slot=slot,
    )
    try:
        reply = dispatch(message, env)
    except PortError as e:
        raise_http(e)
    if reply is None:
        return Response(status_code=204)
    return reply


@ports_router.post("/exportAnnotations")
async def export_annotations(request: Request) -> Response:
    body = await request.body()
    try:
        content = body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Annotations must be UTF-8 text")

    try:
        reply = dispatch(ExportAnnotations(content=content), port_environment(request))
    except PortError as e:
        raise_http(e)
    return Response(
        content=reply.content,
        media_type=reply.media_type,
        headers={"Content-Disposition": content_disposition(reply.filename)},
    )
