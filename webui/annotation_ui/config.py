"""
Settings for the annotation WebUI
Author: Cascade (AI assistant)

This module provides:
- The package-relative locations of the HTML entry point and public assets
- A Settings dataclass whose fields can be overridden from the environment
- A module-level `settings` instance used by the app factory

Environment variables are read after loading a .env file if present.
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env if present (project root)
load_dotenv()

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_INDEX_HTML = os.path.join(PACKAGE_DIR, "index.html")
DEFAULT_PUBLIC_DIR = os.path.join(PACKAGE_DIR, "public")


@dataclass
class Settings:
    """WebUI configuration. Environment variables override the defaults."""

    # Server
    HOST: str = "localhost"
    PORT: int = 8001
    LOG_LEVEL: str = "INFO"

    # Static files
    INDEX_HTML: str = DEFAULT_INDEX_HTML
    PUBLIC_DIR: str = DEFAULT_PUBLIC_DIR
    GZIP_MINIMUM_SIZE: int = 500

    # Ports
    VIEWER_ELEMENT_ID: str = "viewer"
    EXPORT_FILENAME: str = "annotations.json"
    EXPORT_MEDIA_TYPE: str = "text/plain"
    MAX_IMAGE_BYTES: int = 50 * 1024 * 1024

    def __post_init__(self):
        """Load overrides from environment variables, coerced by field type."""
        for f in fields(self):
            env_value = os.getenv(f.name)
            if env_value is None:
                continue
            if f.type in (int, "int"):
                setattr(self, f.name, int(env_value))
            else:
                setattr(self, f.name, env_value)


def load_settings(**overrides: Optional[object]) -> Settings:
    """Build settings from the environment, then apply explicit keyword overrides."""
    current = Settings()
    for key, value in overrides.items():
        if value is None:
            continue
        if not hasattr(current, key):
            raise TypeError(f"Unknown setting: {key}")
        setattr(current, key, value)
    return current


# Global settings instance
settings = Settings()
