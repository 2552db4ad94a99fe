"""Logging configuration."""

import logging
import os
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Send log records to a stream (stdout by default) with timestamps.

    The level comes from the argument, then LOG_LEVEL, then defaults to WARNING
    so that CLI output stays readable.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "WARNING")).upper()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level_name, logging.WARNING))

    # Reduce noise from HTTP clients used by pydantic-ai
    for name in ("httpx", "httpcore", "openai"):
        logging.getLogger(name).setLevel(logging.WARNING)
