"""
Annotation WebUI package
Author: Cascade (AI assistant)

This package contains the FastAPI application, port handlers, services, the HTML
entry point and public assets that connect the browser-side annotation tool to
its environment (viewer size, image loading, annotation export).
"""

__version__ = "0.1.0"
