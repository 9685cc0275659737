"""Minimal logging utilities for Escapade.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications decide where records go.

Example:
    >>> from escapade.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Dropped U+%04X", 0xFFFE)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "escapade." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'escapade.mymodule'
    """
    # Ensure escapade prefix for consistent namespacing
    if not (name == "escapade" or name.startswith("escapade.")):
        name = f"escapade.{name}"
    return logging.getLogger(name)
