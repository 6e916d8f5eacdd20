"""
FastAPI application entrypoint for the annotation WebUI
Author: Cascade (AI assistant)

What this file does:
- Creates the FastAPI app with gzip compression on every response
- Serves the HTML entry point at / and static assets under /public
- Includes the port routers (/ports) and object URL routes (/blobs)
- Reads settings from .env (e.g., HOST, PORT, PUBLIC_DIR)

Run with:
    python -m annotation_ui.main
"""

import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from . import __version__
from .config import Settings, settings as default_settings
from .logging_setup import configure_logging
from .ports.dispatcher import PortEnvironment
from .routers.blobs import blobs_router
from .routers.ports import ports_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="Annotation WebUI", version=__version__)
    app.state.ports = PortEnvironment(settings=settings)

    app.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MINIMUM_SIZE)

    # Static assets
    if not os.path.exists(settings.PUBLIC_DIR):
        os.makedirs(settings.PUBLIC_DIR, exist_ok=True)
    app.mount("/public", StaticFiles(directory=settings.PUBLIC_DIR), name="public")

    app.include_router(ports_router, prefix="/ports", tags=["Ports"])
    app.include_router(blobs_router, prefix="/blobs", tags=["Blobs"])

    @app.get("/", response_class=FileResponse)
    async def home():
        """Return the HTML entry point of the client application."""
        return FileResponse(settings.INDEX_HTML, media_type="text/html")

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "version": __version__}

    return app


# Create app
app = create_app()


class ListeningServer(uvicorn.Server):
    """uvicorn server that announces the port only once the socket is bound."""

    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Listening on port %d", self.config.port)


def run(settings: Optional[Settings] = None) -> None:
    """Serve the app until interrupted. A port already in use exits the process."""
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)
    config = uvicorn.Config(
        app if settings is default_settings else create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    ListeningServer(config).run()


# For running directly: python -m annotation_ui.main
if __name__ == "__main__":
    run()
