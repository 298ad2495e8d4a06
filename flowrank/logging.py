"""Logger setup shared by every flowrank module.

Modules call ``get_logger(__name__)``. All loggers hang off the ``flowrank``
logger, which owns a single handler; engines only emit DEBUG records.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "flowrank"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    force: bool = False,
) -> logging.Logger:
    """Attach one handler to the ``flowrank`` logger.

    Once a handler is attached, later calls leave the logger alone unless
    ``force`` is set, in which case the existing handlers are replaced.

    Args:
        level: Logger level (default: INFO).
        format_string: Record format. Defaults to ``DEFAULT_FORMAT``.
        handler: Output handler. Defaults to a stdout ``StreamHandler``.
        force: Replace an existing configuration.

    Returns:
        The ``flowrank`` logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if root_logger.handlers and not force:
        return root_logger

    root_logger.handlers.clear()
    root_logger.setLevel(level)

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # caplog listens on the stdlib root logger
    root_logger.propagate = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger that takes its level from the ``flowrank`` logger."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def enable_debug_logging() -> None:
    """Let DEBUG records from the engines through."""
    root_logger = setup_root_logger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers:
        handler.setLevel(logging.DEBUG)


setup_root_logger()
