"""
Top-level package for sc_wishbone.

Runs Wishbone trajectory inference as an external program and returns
its branch assignment, pseudotime and diffusion-map embedding as tables.
Most code only needs:
    sc_wishbone.run_wishbone
    sc_wishbone.WishboneParams
"""

from sc_wishbone.config.model import RuntimeConfig, WishboneParams
from sc_wishbone.config.io import load_params
from sc_wishbone.core.exceptions import (
    ConfigError,
    ScWishboneError,
    WishboneExecutionError,
    WishboneOutputError,
)
from sc_wishbone.core.result import WishboneResult
from sc_wishbone.validation.errors import ValidationError, ValidationIssue
from sc_wishbone.wishbone import run_wishbone

__all__ = [
    "ConfigError",
    "RuntimeConfig",
    "ScWishboneError",
    "ValidationError",
    "ValidationIssue",
    "WishboneExecutionError",
    "WishboneOutputError",
    "WishboneParams",
    "WishboneResult",
    "load_params",
    "run_wishbone",
]
