"""
Logging for cmc-api.

Every module logs under the ``cmc_api`` namespace. The library only
attaches a NullHandler; applications opt into console output with
setup_logging().
"""

import logging
from typing import TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

ROOT_LOGGER_NAME = "cmc_api"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(
    level: int = logging.INFO,
    verbose: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Send cmc-api log records to a stream.

    Calling it again replaces the handler installed by the previous call.

    Usage:
        from utils.logging import setup_logging
        setup_logging(verbose=True)  # logs every GET URL and credit count

    Args:
        level: Logging level (default: INFO)
        verbose: If True, use DEBUG level and the detailed format
        stream: Target stream (default: stderr)

    Returns:
        The ``cmc_api`` logger
    """
    if verbose:
        level = logging.DEBUG

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, "_cmc_console", False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        logging.Formatter(LOG_FORMAT if verbose else CONSOLE_FORMAT, LOG_DATE_FORMAT)
    )
    handler._cmc_console = True
    logger.addHandler(handler)

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger under the ``cmc_api`` namespace.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
