"""
Logging Configuration
Attaches console and file handlers to the package logger.

Library modules only call ``logging.getLogger(__name__)``; nothing is printed
until an application (or :mod:`algokit.main`) calls :func:`setup_logging`.
"""
import logging
import sys
from typing import Optional

from algokit import config


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    namespace: str = "algokit",
    append: bool = False,
) -> logging.Logger:
    """
    Route records of `namespace` to stdout and, optionally, to a file.

    Calling it again replaces the previous handlers and closes them, so an
    earlier log file is flushed and released.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        namespace: Logger to configure; children such as
            ``algokit.graphs.traversal`` inherit the handlers.
        append: Append to `log_file` instead of truncating it.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(namespace)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a" if append else "w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
