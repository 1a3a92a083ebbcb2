"""
Config package for sc_wishbone.

Responsible for:
- parameter and runtime models (WishboneParams, RuntimeConfig)
- parameter file I/O (load_params)
"""

from .model import RuntimeConfig, WishboneParams
from .io import load_params
