"""Namespaced loggers for dotdash.

Every module logs under ``dotdash.*``, so one logger controls the whole
package. The library never attaches handlers; the ``dotdash`` CLI calls
``logging.basicConfig`` and ``-v`` switches it to DEBUG.

Decoder diagnostics go to ``dotdash.morse``; raise its level to silence
them without touching the rest of the package.
"""

from __future__ import annotations

import logging

_ROOT = "dotdash"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a dotdash module or subsystem.

    Module names (``__name__``) are already namespaced and pass through.
    Short names such as ``"morse"`` are placed under ``dotdash.``.

    Example:
        >>> get_logger("dotdash.morse.encoder").name
        'dotdash.morse.encoder'
        >>> get_logger("morse").name
        'dotdash.morse'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
