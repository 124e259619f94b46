"""
Logging configuration for repo-pulse.

All modules log under the ``repo_pulse`` namespace. ``setup_logging`` attaches
a rich handler on stderr (and optionally a plain-text file handler) to that
namespace logger. Calling it again replaces the handlers it installed, so the
API can be invoked repeatedly in one process without duplicated output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "repo_pulse"

VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers owned by setup_logging
_OWNED = "_repo_pulse_owned"


def level_for(verbosity: str) -> int:
    """Map a configured verbosity name to a logging level."""
    try:
        return VERBOSITY_LEVELS[verbosity]
    except KeyError:
        raise ValueError(f"unknown verbosity '{verbosity}'") from None


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the repo_pulse logger for one run.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings and up) or
            "verbose" (debug, with source paths and traceback locals)
        log_file: Optional file path that also receives every record

    Returns:
        The repo_pulse namespace logger
    """
    level = level_for(verbosity)
    verbose = verbosity == "verbose"

    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the repo_pulse namespace.

    Args:
        name: Module name (e.g., 'repo_pulse.analyzer'); a bare name is
              prefixed. None returns the namespace logger itself.
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
