"""
Core layer: exception hierarchy, working-directory lifecycle
and the composite result type
"""

from .exceptions import (
    ConfigError,
    ScWishboneError,
    WishboneExecutionError,
    WishboneOutputError,
)
from .result import WishboneResult
from .workdir import working_directory

__all__ = [
    "ConfigError",
    "ScWishboneError",
    "WishboneExecutionError",
    "WishboneOutputError",
    "WishboneResult",
    "working_directory",
]
