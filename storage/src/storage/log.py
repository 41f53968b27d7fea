"""Loguru configuration shared by the API and the CLI."""

import os
import sys

from loguru import logger

_configured = False


def setup_logging(level: str = None) -> None:
    global _configured
    if _configured:
        return
    level = (level or os.getenv("YARUKOTO_LOG_LEVEL", "INFO")).upper()
    logger.remove()
    logger.add(sys.stderr, level=level)
    _configured = True
