"""Server-side proxy between the student page and the Gemini API."""

from .app import create_app
from .config import Settings, configure_logging

__all__ = ["create_app", "Settings", "configure_logging"]
