"""Log utilities."""

import logging

from rich.logging import RichHandler

from learnhub.config import settings


def get_logger(name: str) -> logging.Logger:
    """Get a logger configured for Rich console output.

    The logger level comes from the LOG_LEVEL setting, its handlers are
    replaced with a single RichHandler and propagation is disabled.

    Args:
        name: Name of the logger to retrieve or create.

    Returns:
        The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(settings.log_level.upper())
    logger.handlers = [RichHandler()]
    logger.propagate = False
    return logger
