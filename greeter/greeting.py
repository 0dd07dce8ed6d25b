"""Greeting construction.

Everything here is side-effect free apart from debug logging, so a single
``Greeter`` can be shared freely across callers and threads.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

#: Greeting returned when no usable name is given.
DEFAULT_GREETING = "Hello, World!"


class Greeter:
    """Produce greeting strings."""

    def greet(self, name: str | None = None) -> str:
        """Return a greeting, personalized when a non-blank name is given.

        Args:
            name: Name to greet. ``None``, empty and whitespace-only values
                fall back to the default greeting.

        Returns:
            ``"Hello, <name>!"`` with ``name`` kept verbatim, or
            ``"Hello, World!"``.
        """
        if name is None or not name.strip():
            logger.debug("No usable name given, using default greeting")
            return DEFAULT_GREETING
        return f"Hello, {name}!"


_default_greeter = Greeter()


def greet(name: str | None = None) -> str:
    """Greet ``name`` using the shared :class:`Greeter`."""
    return _default_greeter.greet(name)
