"""Logger lookup for minilex modules.

Every minilex logger lives under the ``minilex`` namespace, so an
application can turn on scanner diagnostics with one call:

    >>> import logging
    >>> logging.getLogger("minilex").setLevel(logging.DEBUG)

No handlers are installed here; where records go is the application's call.
"""

from __future__ import annotations

import logging

_ROOT = "minilex"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a minilex module.

    Module names from inside the package (``minilex.lexer.core``) are used
    as is. Any other name is nested under ``minilex.`` so its records still
    reach handlers attached to the package logger.

    Example:
        >>> get_logger("minilex.lexer.core").name
        'minilex.lexer.core'
        >>> get_logger("demo").name
        'minilex.demo'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
