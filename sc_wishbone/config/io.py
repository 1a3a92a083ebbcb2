from __future__ import annotations

import json
import logging
from pathlib import Path

from sc_wishbone.config.model import WishboneParams
from sc_wishbone.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_params(path: Path) -> WishboneParams:
    """
    Load Wishbone parameters from a JSON file.

    The file holds a single object whose keys are WishboneParams fields;
    missing keys fall back to defaults.

    :param path: Path to the JSON parameter file.
    :return: A WishboneParams instance.
    :raises FileNotFoundError: if the file does not exist.
    :raises ConfigError: if the file is not a JSON object or has unknown keys.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found at {path}")

    with path.open() as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in parameter file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Parameter file {path} must contain a JSON object")

    params = WishboneParams.from_raw(raw)
    logger.info("Loaded Wishbone parameters", extra={"params_path": str(path)})
    return params
