"""Loguru logging configuration for page-attributes.

The library itself only emits records through `loguru.logger`. Applications
call configure_logging() once at startup to decide where those records go.
"""
import logging
import os
import sys
from collections.abc import Iterable
from typing import Any

from loguru import logger


DEFAULT_LEVEL = "INFO"

# Loggers that requests pulls in while fetching a URL handle. urllib3 logs
# every connection at DEBUG; charset_normalizer logs each encoding guess.
FETCH_LOGGERS = ("urllib3", "charset_normalizer")

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward standard library records from requests and urllib3 to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging's own frames so Loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _resolve_level(log_level: str | None) -> str:
    name = (log_level or os.getenv("LOG_LEVEL") or DEFAULT_LEVEL).upper()
    try:
        logger.level(name)
    except ValueError:
        return DEFAULT_LEVEL
    return name


def configure_logging(
    log_level: str | None = None,
    enable_json: bool = False,
    quiet_loggers: Iterable[str] = FETCH_LOGGERS,
    sink: Any = None,
) -> None:
    """
    Route page-attributes and fetch logs to a single Loguru sink.

    Args:
        log_level: Loguru level name. Defaults to LOG_LEVEL env var or INFO;
                   unknown names fall back to INFO.
        enable_json: Emit JSON structured records instead of text
        quiet_loggers: Standard library loggers limited to WARNING and above
        sink: Loguru sink, stderr by default

    Example:
        from page_attributes.config.log_config import configure_logging

        configure_logging(log_level="DEBUG", quiet_loggers=())
    """
    level = _resolve_level(log_level)

    logger.remove()
    logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=LOG_FORMAT,
        serialize=enable_json,
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug(f"Logging configured: level={level}, json={enable_json}")


__all__ = ["logger", "configure_logging", "InterceptHandler"]
