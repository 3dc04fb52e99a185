"""Named loggers used by the library; output goes only to registered sinks."""

from __future__ import annotations

import logging

__all__ = [
    "UTILS_NAME",
    "FILE_NAME",
    "QATERIAL_NAME",
    "UTILS",
    "FILE",
    "QATERIAL",
    "LOGGERS",
    "register_sink",
    "unregister_sink",
    "debug",
    "info",
    "warn",
    "error",
]

UTILS_NAME = "qaterial.utils"
FILE_NAME = "qaterial.file"
QATERIAL_NAME = "qaterial"


def _make_logger(name: str) -> logging.Logger:
    log = logging.getLogger(name)
    log.setLevel(logging.INFO)
    # Each logger writes only to the sinks registered on it.
    log.propagate = False
    if not any(isinstance(handler, logging.NullHandler) for handler in log.handlers):
        log.addHandler(logging.NullHandler())
    return log


UTILS = _make_logger(UTILS_NAME)
FILE = _make_logger(FILE_NAME)
QATERIAL = _make_logger(QATERIAL_NAME)

LOGGERS = (UTILS, FILE, QATERIAL)


def register_sink(handler: logging.Handler) -> None:
    """Attach *handler* to every library logger."""
    for log in LOGGERS:
        log.addHandler(handler)


def unregister_sink(handler: logging.Handler) -> None:
    """Detach *handler* from every library logger it is attached to."""
    for log in LOGGERS:
        log.removeHandler(handler)


def debug(message: str) -> None:
    """Log *message* at debug level on the main library logger."""
    QATERIAL.debug(message)


def info(message: str) -> None:
    """Log *message* at info level on the main library logger."""
    QATERIAL.info(message)


def warn(message: str) -> None:
    """Log *message* at warning level on the main library logger."""
    QATERIAL.warning(message)


def error(message: str) -> None:
    """Log *message* at error level on the main library logger."""
    QATERIAL.error(message)