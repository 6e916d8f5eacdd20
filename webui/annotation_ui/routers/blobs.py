"""
Object URL endpoints
Author: Cascade (AI assistant)

- GET    /blobs/{token}  serves the blob behind an object URL
- DELETE /blobs/{token}  releases it
"""

from fastapi import APIRouter, HTTPException, Request, Response

from ..errors import ObjectUrlNotFoundError

blobs_router = APIRouter()


@blobs_router.get("/{token}")
def get_blob(token: str, request: Request) -> Response:
    try:
        blob = request.app.state.ports.urls.resolve(token)
    except ObjectUrlNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(content=blob.data, media_type=blob.media_type,
                    headers={"Cache-Control": "no-store"})


@blobs_router.delete("/{token}", status_code=204)
def revoke_blob(token: str, request: Request) -> Response:
    try:
        request.app.state.ports.urls.revoke(token)
    except ObjectUrlNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=204)
