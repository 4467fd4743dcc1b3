#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/logging_utils.py
"""Logging setup for applications that embed somedoc.

Library modules only create loggers with ``logging.getLogger(__name__)``, all
of them children of the ``somedoc`` package logger. :func:`configure_logging`
attaches handlers to that package logger only, so an application's own root
logging configuration is left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER_NAME = "somedoc"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Set on handlers installed here so a later call replaces only those.
_HANDLER_MARKER = "_somedoc_handler"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _remove_installed_handlers(package_logger: logging.Logger) -> None:
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
    propagate: bool = False,
) -> logging.Logger:
    """Configure handlers on the ``somedoc`` package logger.

    Calling it again replaces the handlers a previous call installed; handlers
    added to the package logger by other code are kept.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG"); unknown names
        fall back to INFO
    log_file : str, optional
        Optional path to a log file that receives the same records
    trace_mode : bool, default False
        When true, emit timestamps and logger names
    stream : IO[str], optional
        Console stream; defaults to ``sys.stderr``
    propagate : bool, default False
        Whether records also reach the handlers of ancestor loggers

    Returns
    -------
    logging.Logger
        The configured ``somedoc`` logger.

    """
    resolved_level = _resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolved_level)
    package_logger.propagate = propagate
    _remove_installed_handlers(package_logger)

    format_str = TRACE_FORMAT if trace_mode else SIMPLE_FORMAT
    date_format = TRACE_DATE_FORMAT if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    def install(handler: logging.Handler) -> None:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        package_logger.addHandler(handler)

    install(logging.StreamHandler(stream if stream is not None else sys.stderr))

    if log_file:
        try:
            install(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
            package_logger.info("Logging to file: %s", log_file)
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)

    return package_logger


__all__ = ["configure_logging"]
