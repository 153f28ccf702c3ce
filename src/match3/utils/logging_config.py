"""Logging configuration for the match-three core."""

import logging
import sys


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Set up logging for an application embedding the core.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: "simple" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    }
    log_format = formats.get(format_style, formats["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # blinker is quiet, but keep third-party noise out of debug sessions
    logging.getLogger("blinker").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with a shortened name for package modules.

    Args:
        name: Module name (typically ``__name__``), e.g. 'match3.systems.move_engine'

    Returns:
        Logger named without the package prefix, e.g. 'systems.move_engine'
    """
    if name.startswith("match3."):
        name = name[len("match3."):]
    return logging.getLogger(name)
