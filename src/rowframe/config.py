"""Configuration of the rowframe library.

Provides the logger used by all rowframe modules and the
options that control how frames and series are displayed.

Logging is silent by default (``WARNING`` level), to see what
the engine is doing enable debug logging::

    >>> from rowframe import config
    >>> config.enable_debug()
    >>> config.disable_debug()

Display options can be changed globally or temporarily:

    >>> config.options.display_max_rows
    20
    >>> with config.option_context(display_max_rows=2):
    ...     config.options.display_max_rows
    2
    >>> config.options.display_max_rows
    20
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, fields
from typing import Iterator, Optional

LOGGER_NAME = "rowframe"

LOG_FORMATS = {
    "simple": "%(levelname).1s %(message)s",
    "verbose": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

_logger: Optional[logging.Logger] = None
_log_level: int = logging.WARNING
_log_format: str = "simple"


@dataclass
class Options:
    """Display options.

    :param display_max_rows: How many rows to print when a frame or series
                             is converted to text, the others are summarized.
    :param display_max_width: Longest text representation of a value
                              before it gets truncated.
    """

    display_max_rows: int = 20
    display_max_width: int = 30


options = Options()


def _get_formatter() -> logging.Formatter:
    fmt = LOG_FORMATS[_log_format]
    if _log_format == "verbose":
        return logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S")
    return logging.Formatter(fmt)


def get_logger() -> logging.Logger:
    """Get the rowframe logger, creating it on first use."""
    global _logger

    if _logger is None:
        _logger = logging.getLogger(LOGGER_NAME)
        _logger.setLevel(_log_level)

        if not _logger.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(_log_level)
            handler.setFormatter(_get_formatter())
            _logger.addHandler(handler)

    return _logger


def set_log_level(level: int) -> None:
    """Set the logging level, for example ``logging.DEBUG``."""
    global _log_level

    _log_level = level
    if _logger is not None:
        _logger.setLevel(level)
        for handler in _logger.handlers:
            handler.setLevel(level)


def enable_debug() -> None:
    """Shortcut for ``set_log_level(logging.DEBUG)``."""
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    """Shortcut for ``set_log_level(logging.WARNING)``."""
    set_log_level(logging.WARNING)


def set_log_format(format_name: str) -> None:
    """Set the log output format, ``"simple"`` or ``"verbose"``."""
    global _log_format

    if format_name not in LOG_FORMATS:
        raise ValueError(f"Unknown format: {format_name}. Use 'simple' or 'verbose'")

    _log_format = format_name
    if _logger is not None:
        for handler in _logger.handlers:
            handler.setFormatter(_get_formatter())


@contextmanager
def option_context(**overrides: int) -> Iterator[Options]:
    """Temporarily change display options.

    The previous values are restored when the block exits,
    even in case of errors.
    """
    known = {f.name for f in fields(Options)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown options: {', '.join(sorted(unknown))}")

    previous = {name: getattr(options, name) for name in overrides}
    for name, value in overrides.items():
        setattr(options, name, value)
    try:
        yield options
    finally:
        for name, value in previous.items():
            setattr(options, name, value)
