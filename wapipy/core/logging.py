"""Logging utilities for wapipy modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    The logger propagates to the root logger, and only gets a default
    level of WARNING when basicConfig() has not been called yet.

    Args:
        name: Logger name (typically ``wapipy.<area>``)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger
