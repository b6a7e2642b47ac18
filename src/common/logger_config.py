# src/common/logger_config.py
"""Application-wide logging configuration."""

import logging

from rich.logging import RichHandler

from src.common.config.settings import settings

NOISY_LOGGERS = ("mysql.connector",)


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str | None = None) -> None:
    """Routes every log record through one rich console handler.

    ``level`` overrides ``settings.LOG_LEVEL``; unknown names mean INFO.
    Calling it again replaces the handler instead of stacking another one.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level or settings.LOG_LEVEL))
    root_logger.handlers = [
        RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            tracebacks_suppress=[logging],
        )
    ]

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
