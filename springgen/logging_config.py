"""Logging configuration for springgen.

All modules obtain their logger through :func:`get_logger` so that every
record lives under the ``springgen`` namespace and shares one set of handlers.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "springgen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger placed under the ``springgen`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: str | int = "WARNING",
    log_file: str | Path | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Configure handlers for the ``springgen`` logger.

    Console output goes through rich; an optional plain-text file handler
    records everything at DEBUG level.

    Args:
        level: Console log level name or number.
        log_file: Optional path of a log file.
        console: Rich console to log to (defaults to stderr).

    Returns:
        The configured root ``springgen`` logger.
    """
    global _configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    if _configured:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(Path(log_file), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG if log_file else level)
    _configured = True

    logger.debug("Logging configured (level=%s, file=%s)", level, log_file)
    return logger
