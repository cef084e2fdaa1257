"""Logging utilities for b2fs modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.
    
    The logger propagates to the root logger, so ``basicConfig()`` (as done
    by the CLI) is enough to route its output. When the root logger has no
    handlers yet the level defaults to WARNING, which keeps diagnostic
    payloads such as raw response bodies out of default output.
    
    Args:
        name: Logger name (typically under the ``b2fs`` namespace)
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)
    
    return logger
