"""Package-wide logging for algograph.

Every solver module obtains its logger through :func:`get_logger` so records
flow through a single ``algograph`` logger. Solvers only emit DEBUG records
(one summary line per run) and WARNING records for degenerate inputs, so the
default INFO level keeps them quiet.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "algograph"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_root_handler: Optional[logging.Handler] = None


def setup_root_logger(
    level: int = logging.INFO, handler: Optional[logging.Handler] = None
) -> None:
    """Attach one handler to the ``algograph`` logger.

    Repeated calls are no-ops until :func:`reset_logging` runs. A handler
    passed in without a formatter gets ``LOG_FORMAT``; the default handler
    writes to stdout.
    """
    global _root_handler

    if _root_handler is not None:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    if handler.formatter is None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)
    # Propagation stays on so caplog sees solver records.
    root.propagate = True

    _root_handler = handler


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, e.g. ``get_logger(__name__)``.

    The logger carries no handlers or level of its own, so it follows
    whatever is set on the ``algograph`` logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``algograph`` logger and its handler."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show per-run solver summaries."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the installed handler so the next setup call starts fresh."""
    global _root_handler
    _root_handler = None

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
