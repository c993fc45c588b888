from __future__ import annotations

import logging
from logging.config import dictConfig

from pythonjsonlogger import jsonlogger

from villagerdb.config import settings


class ServiceNameFilter(logging.Filter):
    """Tag each log record with the emitting service."""

    def __init__(self, service: str = "villagerdb") -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self.service
        return True


def configure_logging(level: str | None = None, service: str = "villagerdb") -> None:
    level = level or settings.log_level
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "with_service": {"()": ServiceNameFilter, "service": service}
            },
            "formatters": {
                "json": {
                    "()": jsonlogger.JsonFormatter,
                    "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s %(service)s",
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "filters": ["with_service"],
                }
            },
            "root": {"handlers": ["default"], "level": level},
            "loggers": {
                "villagerdb": {"level": level, "propagate": True},
            },
        }
    )
    logging.getLogger(__name__).debug("Logging configured at %s", level)
