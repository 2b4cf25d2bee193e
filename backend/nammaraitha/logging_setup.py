"""loguru configuration, including routing of stdlib logging into loguru.

Flask, Werkzeug and SQLAlchemy log through the standard ``logging`` module;
``InterceptHandler`` forwards those records so every message ends up in the
same sinks. Configuration happens at most once per process.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} [{level}] {name}: {message}"
_configured = False


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    global _configured
    if _configured:
        return

    level = level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT)
    if logfile:
        logger.add(logfile, level=level, format=_FORMAT, rotation="10 MB", encoding="utf-8")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    _configured = True
