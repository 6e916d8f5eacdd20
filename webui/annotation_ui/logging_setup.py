"""
Logging setup for the annotation WebUI
Author: Cascade (AI assistant)

Modules log through logging.getLogger(__name__); configure_logging() attaches
the one stream handler for the package when the server starts.
"""

import logging
import sys

PACKAGE_LOGGER = "annotation_ui"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger and set its level.

    Safe to call more than once: the handler is only installed the first time.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if not any(getattr(h, "_annotation_ui", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._annotation_ui = True
        logger.addHandler(handler)
        logger.propagate = False

    return logger
