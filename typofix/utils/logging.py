"""Logger configuration."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the global loguru logger.

    Enables the package's own messages, removes the default handler and
    installs a single stderr sink whose level depends on the flags: DEBUG
    with ``debug``, INFO with ``verbose``, WARNING otherwise.

    Args:
        verbose: Show progress and summary messages
        debug: Show per-word tracing
    """
    logger.remove()
    logger.enable("typofix")

    if debug:
        level = "DEBUG"
        fmt = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
    elif verbose:
        level = "INFO"
        fmt = "{message}"
    else:
        level = "WARNING"
        fmt = "<level>{level}</level>: {message}"

    logger.add(sys.stderr, level=level, format=fmt, colorize=None)
