"""Configuration read from the server's environment variables."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_MODEL = "gemini-2.5-flash-preview-05-20"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    cors_origins: tuple = ("*",)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None):
        """Build settings from the environment (Vercel project variables)."""
        if environ is None:
            environ = os.environ

        # Strip any whitespace pasted along with the key
        api_key = (environ.get("GEMINI_API_KEY") or "").strip() or None
        model = (environ.get("GEMINI_MODEL") or "").strip() or DEFAULT_MODEL

        origins = [o.strip() for o in (environ.get("CORS_ORIGINS") or "*").split(",")]
        origins = tuple(o for o in origins if o) or ("*",)

        log_level = (environ.get("LOG_LEVEL") or "INFO").strip().upper()

        return cls(api_key=api_key, model=model, cors_origins=origins, log_level=log_level)


def configure_logging(level="INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
