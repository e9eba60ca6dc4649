"""Logging setup for netmodel.

Every module logs through a child of the ``netmodel`` package logger. The
package logger owns one handler bound to stdout, because unreachable-demand
warnings are part of the tool's console output alongside the report
messages. Its level is capped at WARNING: verbosity flags can add detail
but can never hide a routing warning.
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "netmodel"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

#: Highest level the package logger accepts; routing warnings stay visible.
MAX_LEVEL = logging.WARNING

# Handler installed on the package logger, None until setup_root_logger runs
_handler: Optional[logging.Handler] = None


def _cap(level: int) -> int:
    return min(level, MAX_LEVEL)


def setup_root_logger(
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    format_string: Optional[str] = None,
) -> logging.Handler:
    """Install the console handler on the package logger.

    Only the first call configures anything; later calls return the
    installed handler unchanged until reset_logging() is used.

    Args:
        level: Initial level, capped at WARNING.
        stream: Output stream. Defaults to sys.stdout at call time.
        format_string: Record format. Defaults to DEFAULT_FORMAT.

    Returns:
        The handler attached to the package logger.
    """
    global _handler

    if _handler is not None:
        return _handler

    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(_cap(level))
    # pytest's caplog listens on the root logger
    package_logger.propagate = True

    _handler = handler
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package logger.

    Names outside the ``netmodel`` namespace are nested under it, so every
    record reaches the console handler.
    """
    setup_root_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a level; verbose wins over quiet."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def set_global_log_level(level: int) -> int:
    """Set the package logger and its handler to level, capped at WARNING.

    Returns:
        The level actually applied.
    """
    handler = setup_root_logger()
    applied = _cap(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(applied)
    handler.setLevel(applied)
    return applied


def reset_logging() -> None:
    """Detach the console handler and clear the package level (for tests)."""
    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    _handler = None
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
