"""Centralized logging configuration for augflow.

All package loggers hang off the ``augflow`` root logger, which owns a single
console handler. The handler looks up ``sys.stdout`` or ``sys.stderr`` on
every record, so redirected or captured streams are always honoured and the
CLI can move log output off stdout when stdout carries a machine-readable
result.

The initial level comes from the ``AUGFLOW_LOG_LEVEL`` environment variable
(a level name such as ``DEBUG`` or ``WARNING``) and defaults to INFO.
"""

import logging
import os
import sys
from typing import Optional

# Flag to track if we've already set up the root logger
_ROOT_LOGGER_CONFIGURED = False

ROOT_LOGGER_NAME = "augflow"
LOG_LEVEL_ENV_VAR = "AUGFLOW_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_CONSOLE_STREAMS = ("stdout", "stderr")


class ConsoleHandler(logging.StreamHandler):
    """Stream handler bound to a standard stream by name, not by object.

    Args:
        target: ``"stdout"`` or ``"stderr"``.
    """

    def __init__(self, target: str = "stdout") -> None:
        self.target = _check_target(target)
        super().__init__()

    @property
    def stream(self):
        return getattr(sys, self.target)

    @stream.setter
    def stream(self, value) -> None:
        # StreamHandler.__init__ assigns a stream; the target name wins.
        pass


def _check_target(target: str) -> str:
    if target not in _CONSOLE_STREAMS:
        raise ValueError(
            f"Unknown console stream {target!r}. Valid values are: "
            f"{', '.join(_CONSOLE_STREAMS)}"
        )
    return target


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by ``AUGFLOW_LOG_LEVEL``, or ``default``.

    Unknown names fall back to ``default``.
    """
    name = os.getenv(LOG_LEVEL_ENV_VAR)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root augflow logger with a single handler.

    Repeated calls are no-ops until ``reset_logging()`` is called.

    Args:
        level: Logging level. Defaults to ``level_from_env()``.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout
            `ConsoleHandler`).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level_from_env() if level is None else level)
    root_logger.handlers.clear()

    if handler is None:
        handler = ConsoleHandler("stdout")
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Let logs propagate to root logger so pytest can capture them
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits the package root configuration.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Configured logger instance.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    # Child loggers carry no handlers of their own; level comes from the root.
    logger.setLevel(logging.NOTSET)

    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all augflow loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        handler.setLevel(level)


def set_console_stream(target: str) -> None:
    """Send console log output to ``"stdout"`` or ``"stderr"``.

    Custom handlers passed to ``setup_root_logger`` are left alone.
    """
    _check_target(target)
    setup_root_logger()

    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        if isinstance(handler, ConsoleHandler):
            handler.target = target


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
