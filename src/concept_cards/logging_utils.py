"""
Logging utilities for the command line front end.

Library modules only create loggers; handlers are attached here.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(levelname)s] %(message)s"
VERBOSE_LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    verbose: bool = False,
    stream: Optional[TextIO] = None,
    logger_name: Optional[str] = "concept_cards",
) -> logging.Handler:
    """
    Attach a console handler to the package logger.

    Args:
        verbose: Log DEBUG messages with logger names
        stream: Output stream (default: stderr)
        logger_name: Logger to configure. None = root logger.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(VERBOSE_LOG_FORMAT if verbose else LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler


def detach_handler(handler: logging.Handler, logger_name: Optional[str] = "concept_cards") -> None:
    """Remove a handler attached by configure_logging()."""
    logging.getLogger(logger_name).removeHandler(handler)
