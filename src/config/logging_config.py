"""Logging configuration."""

from logging.config import dictConfig

from pythonjsonlogger import jsonlogger


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure root and uvicorn loggers.

    Args:
        level: Log level name applied to the root logger
        fmt: ``json`` for structured output, ``text`` for plain lines

    """
    formatters = {
        "json": {
            "()": jsonlogger.JsonFormatter,
            "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
        "text": {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        },
    }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": formatters,
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": fmt,
                }
            },
            "root": {"handlers": ["default"], "level": level.upper()},
            "loggers": {
                "uvicorn.error": {"handlers": ["default"], "level": level.upper(), "propagate": False},
                "uvicorn.access": {"handlers": ["default"], "level": level.upper(), "propagate": False},
            },
        }
    )
