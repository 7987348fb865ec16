"""Package-wide logging for ridematch.

Modules log through ``get_logger(__name__)``. Those loggers carry no handlers
and defer to the ``ridematch`` package logger, which owns a single stdout
handler. The starting level is INFO unless ``RIDEMATCH_LOG_LEVEL`` names
another one (``DEBUG``, ``WARNING``, ...).
"""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "RIDEMATCH_LOG_LEVEL"

_PACKAGE_LOGGER = "ridematch"
_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by ``RIDEMATCH_LOG_LEVEL``, or ``default``.

    Unknown names fall back to ``default``.
    """
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    value = getattr(logging, name.strip().upper(), None)
    return value if isinstance(value, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``ridematch`` logger once.

    Later calls are no-ops until ``reset_logging()``.

    Args:
        level: Starting level; taken from ``RIDEMATCH_LOG_LEVEL`` (default
            INFO) when omitted.
        format_string: Record format; timestamp, logger, level and message
            by default.
        handler: Destination; a stdout ``StreamHandler`` by default.
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(level_from_env() if level is None else level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # pytest's caplog listens on the root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a ridematch module (pass ``__name__``)."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler so the next setup starts clean (tests)."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
