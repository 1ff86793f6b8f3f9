"""Central logging configuration for the notification relay."""
from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path

from pydantic import ValidationError

from .config import RelaySettings, get_settings

_configured = False


def _default_config(level: str, log_dir: Path | None) -> dict:
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": level,
        },
    }
    if log_dir is not None:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(log_dir / "relay.log"),
            "encoding": "utf-8",
            "formatter": "standard",
            "level": level,
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": fmt,
            },
        },
        "handlers": handlers,
        "root": {
            "level": level,
            "handlers": list(handlers),
        },
    }


def configure_logging(settings: RelaySettings | None = None) -> None:
    """Configure relay logging once per process."""

    global _configured
    if _configured:
        return

    if settings is None:
        try:
            settings = get_settings()
        except ValidationError:
            # Broken env config still gets console logging so the error is visible.
            settings = None

    level = settings.log_level if settings is not None else "INFO"
    log_dir = settings.log_dir if settings is not None else None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

    dictConfig(_default_config(level, log_dir))
    _configured = True
