from __future__ import annotations

import logging
from logging.config import dictConfig

from app.core.config import Settings


LOG_FORMAT = "%(levelname)s %(asctime)s %(name)s %(message)s"


def configure_logging(settings: Settings) -> None:
    formatters: dict[str, dict[str, object]] = {
        "standard": {
            "format": LOG_FORMAT,
        }
    }

    if settings.log_json:
        formatters["standard"] = {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "fmt": LOG_FORMAT,
            "rename_fields": {"levelname": "level", "asctime": "time", "name": "logger"},
            "json_ensure_ascii": False,
        }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": formatters,
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                }
            },
            "root": {
                "level": settings.log_level,
                "handlers": ["default"],
            },
            "loggers": {
                "openai": {"level": "WARNING"},
                "httpx": {"level": "WARNING"},
            },
        }
    )

    logging.getLogger("uvicorn.error").setLevel(settings.log_level)
    logging.getLogger("apscheduler").setLevel(settings.log_level)
