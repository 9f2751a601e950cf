"""
Logging setup

Host applications call setup_logging() once at startup.
"""
from typing import Optional
import logging
import sys

from translatable.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for the application.

    Args:
        level: Log level name; defaults to settings.LOG_LEVEL (DEBUG when settings.DEBUG)
    """
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper())

    # SQL echo is too noisy outside of debugging
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
