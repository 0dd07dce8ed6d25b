"""Top-level package for `greeter`.

This module exposes package metadata and the greeting API.
"""

from .__about__ import __version__
from .greeting import DEFAULT_GREETING, Greeter, greet

__all__ = ["DEFAULT_GREETING", "Greeter", "__version__", "greet"]
