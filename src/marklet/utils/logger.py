"""Logging helpers for marklet.

The library never configures handlers; applications decide where records go.

Example:
    >>> from marklet.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("tokenized %d tokens", 12)
"""

from __future__ import annotations

import logging

_ROOT = "marklet"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``marklet``.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("lexer").name
        'marklet.lexer'
        >>> get_logger("marklet.parser").name
        'marklet.parser'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
