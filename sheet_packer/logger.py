"""
Logging setup for applications embedding the sheet packer.

The library itself only emits records through module loggers; handlers are
installed here on request.
"""

import logging
import sys
from typing import Optional

from . import globs

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(log_level: Optional[int] = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        log_level: Level to use. Defaults to DEBUG when the debug switch
            in globs is on, INFO otherwise.

    Returns:
        The configured package logger.
    """
    if log_level is None:
        log_level = logging.DEBUG if globs.debug else logging.INFO

    logger = logging.getLogger(globs.LOGGER_NAME)
    logger.setLevel(log_level)

    # Repeated calls must not stack handlers
    for handler in logger.handlers:
        if getattr(handler, '_sheet_packer_handler', False):
            handler.setLevel(log_level)
            return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    console_handler._sheet_packer_handler = True
    logger.addHandler(console_handler)

    logger.debug("sheet_packer logging initialized")
    return logger
