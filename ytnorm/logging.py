"""Logging setup for ytnorm.

Library modules log through the shared loguru ``logger``: pattern matches,
debounce timers and batch chunks at DEBUG, contained listener failures at
WARNING. Nothing is emitted until configure_logging() installs a handler.
"""

import sys
from typing import TextIO

from loguru import logger

logger.remove()

# verbose -> format; verbose output names the emitting module and keeps
# milliseconds so debounce timers can be followed
_FORMATS = {
    False: "<level>{level: <7}</level> | {message}",
    True: "<dim>{time:HH:mm:ss.SSS}</dim> | <level>{level: <7}</level> | <cyan>{name}</cyan> | {message}",
}


def configure_logging(verbose: bool = False, sink: TextIO | None = None) -> int:
    """Route ytnorm logs to stderr, or to sink if given.

    Args:
        verbose: Show DEBUG with timestamps and module names. Otherwise INFO and up.
        sink: Stream to write to instead of stderr (written uncolored)

    Returns:
        Handler id, usable with ``logger.remove()``
    """
    logger.remove()
    handler_id: int = logger.add(
        sink if sink is not None else sys.stderr,
        format=_FORMATS[verbose],
        level="DEBUG" if verbose else "INFO",
        colorize=False if sink is not None else None,
    )
    return handler_id


__all__ = ["logger", "configure_logging"]
