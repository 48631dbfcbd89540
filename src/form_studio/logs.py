"""
Logging configuration for Form Studio.

All modules log through ``logging.getLogger(__name__)`` so everything sits
under the ``form_studio`` logger namespace. This module attaches handlers to
that namespace.
"""

import logging

from form_studio.config import get_config

LOGGER_NAME = "form_studio"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _package_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def setup_logging(
    enabled: bool = True,
    console: bool = True,
    verbose: bool = False,
    file_path: str | None = None,
) -> logging.Logger:
    """
    Configure logging for the Form Studio package.

    Args:
        enabled: Whether logging is enabled.
        console: Whether to log to the console (stderr).
        verbose: Log at DEBUG level instead of the configured level.
        file_path: Optional file path to also write log records to.

    Returns:
        The package logger.

    Example:
        >>> from form_studio.logs import setup_logging
        >>> setup_logging(console=True, verbose=True)
    """
    logger = _package_logger()

    if not enabled:
        disable_logging()
        return logger

    enable_logging()

    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, get_config().log_level, logging.INFO)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = []

    if console:
        handlers.append(logging.StreamHandler())

    if file_path:
        handlers.append(logging.FileHandler(file_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = not handlers
    return logger


def disable_logging() -> None:
    """Silence all Form Studio logging."""
    _package_logger().disabled = True


def enable_logging() -> None:
    """Re-enable Form Studio logging."""
    _package_logger().disabled = False
