"""Project-wide logger for seqops.

The sequence operations themselves never log; the logger is used by the
roster loader and the demonstration pipeline.
"""

import logging
import os
import sys
import typing as tp

__all__ = ["logger", "setup_logger", "set_level"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "seqops",
    level: str | None = None,
    format_string: str | None = None,
    stream: tp.TextIO | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a stream handler on first use.

    Args:
        name: Logger name, ``seqops`` or one of its children
        level: Log level name, falls back to the LOG_LEVEL environment variable
        format_string: Record format, defaults to DEFAULT_FORMAT
        stream: Output stream, defaults to stdout

    Returns:
        The configured logger. Calling again with the same name returns it
        untouched.
    """
    named = logging.getLogger(name)
    if named.handlers:
        return named

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    named.addHandler(handler)
    named.propagate = False
    set_level(level or os.getenv("LOG_LEVEL", "INFO"), named)
    return named


def set_level(level: str, target: logging.Logger | None = None) -> None:
    """Change the level of ``target`` (the project logger by default).

    Raises:
        ValueError: If ``level`` is not a registered level name.
    """
    (target or logger).setLevel(level.upper())


logger = setup_logger()
