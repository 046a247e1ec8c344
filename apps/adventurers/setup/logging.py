"""Logging configuration."""

from __future__ import annotations

import logging
import sys

import ecs_logging

from apps.adventurers.setup.config import Settings

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(settings: Settings) -> None:
    """Configure the root logger.

    ``log_format == "json"`` emits ECS JSON lines for log shipping; otherwise a
    plain text format is used.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if settings.environment == "local":
        level = min(level, logging.DEBUG)

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        handler.setFormatter(ecs_logging.StdlibFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Quiet noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
