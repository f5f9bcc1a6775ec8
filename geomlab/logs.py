"""Viewer logging setup."""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level_name(default: str = "INFO") -> str:
    """Log level from GEOMLAB_LOG_LEVEL, falling back to LOG_LEVEL."""
    value = os.getenv("GEOMLAB_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def configure_logging(level_name: str) -> None:
    """Replace root handlers with a single console handler."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)


def setup_logging(level_name: str | None = None) -> None:
    """Configure console logging unless the host already did."""
    root = logging.getLogger()
    if root.handlers:
        return
    configure_logging(level_name or resolve_log_level_name())
