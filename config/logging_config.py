"""
Logging setup shared by every module.

Usage::

    from config.logging_config import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys

_configured = False


def setup_logging(level: str = None, fmt: str = None) -> None:
    """Attach a single stream handler to the root logger.

    Level and format default to the values in ``config.settings``
    (``LOG_LEVEL`` / ``LOG_FORMAT`` environment variables).
    """
    global _configured

    if level is None or fmt is None:
        from config.settings import settings
        level = level or settings.log_level
        fmt = fmt or settings.log_format

    root = logging.getLogger()
    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)
        _configured = True
    root.setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring logging on first use."""
    if not _configured:
        setup_logging()
    return logging.getLogger(name)
