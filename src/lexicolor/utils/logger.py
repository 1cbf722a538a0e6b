"""Logging helper for lexicolor.

Loggers live under the "lexicolor." namespace so applications can tune
them with one ``logging.getLogger("lexicolor")`` call. The library never
installs handlers; that is left to the application (or the CLI).

Example:
    >>> from lexicolor.utils.logger import get_logger
    >>> get_logger("lexer").name
    'lexicolor.lexer'
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "lexicolor"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "lexicolor".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + ".")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
