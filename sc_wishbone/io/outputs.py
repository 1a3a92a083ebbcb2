from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from sc_wishbone.core.exceptions import WishboneOutputError

logger = logging.getLogger(__name__)

BRANCH_FILE = "branch.json"
TRAJECTORY_FILE = "trajectory.json"
SPACE_FILE = "dm.csv"

# Coordinate cells that mean "no value"; cell ids are never coerced
MISSING_COORDINATES = ["", "NA", "NaN", "nan", "N/A", "NULL", "null"]


def _read_flat_json(path: Path) -> Dict[str, Any]:
    """
    Read a JSON object mapping cell id -> scalar.
    """
    try:
        with path.open() as f:
            raw = json.load(f)
    except FileNotFoundError as exc:
        raise WishboneOutputError(f"Wishbone output missing: {path}") from exc
    except json.JSONDecodeError as exc:
        raise WishboneOutputError(f"Malformed JSON in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise WishboneOutputError(
            f"{path.name} must be a JSON object keyed by cell id, got {type(raw).__name__}"
        )

    nested = [k for k, v in raw.items() if isinstance(v, (dict, list))]
    if nested:
        raise WishboneOutputError(
            f"{path.name} must map cell ids to scalars; nested values for {nested[:5]}"
        )

    return raw


def read_branch_assignment(path: Path) -> pd.DataFrame:
    raw = _read_flat_json(Path(path))
    return pd.DataFrame({"cell_id": list(raw.keys()), "branch": list(raw.values())})


def read_trajectory(path: Path) -> pd.DataFrame:
    raw = _read_flat_json(Path(path))
    try:
        times = [float(v) for v in raw.values()]
    except (TypeError, ValueError) as exc:
        raise WishboneOutputError(f"Non-numeric time value in {path}: {exc}") from exc
    return pd.DataFrame({"cell_id": list(raw.keys()), "time": times})


def read_space(path: Path, n_components: Optional[int] = None) -> pd.DataFrame:
    """
    Read the diffusion-map embedding.

    The header line is discarded; columns are renamed cell_id, Comp1..CompN.

    :param path: dm.csv path
    :param n_components: expected number of coordinate columns, if known
    :raises WishboneOutputError: missing file, unparseable CSV or wrong column count
    """
    path = Path(path)
    try:
        # Read everything as text so ids like "NA" survive verbatim
        raw = pd.read_csv(path, header=None, skiprows=1, dtype=str, keep_default_na=False)
    except FileNotFoundError as exc:
        raise WishboneOutputError(f"Wishbone output missing: {path}") from exc
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise WishboneOutputError(f"Malformed CSV in {path}: {exc}") from exc

    n_coords = raw.shape[1] - 1
    if n_coords < 1:
        raise WishboneOutputError(f"{path.name} has no coordinate columns")
    if n_components is not None and n_coords != n_components:
        raise WishboneOutputError(
            f"{path.name} has {n_coords} coordinate column(s), expected {n_components}"
        )

    comp_cols = [f"Comp{i}" for i in range(1, n_coords + 1)]
    raw.columns = ["cell_id"] + comp_cols

    coords = raw[comp_cols].astype(object).replace(MISSING_COORDINATES, np.nan)
    try:
        coords = coords.apply(pd.to_numeric)
    except (TypeError, ValueError) as exc:
        raise WishboneOutputError(f"Non-numeric coordinate in {path}: {exc}") from exc

    return pd.concat([raw[["cell_id"]], coords], axis=1)


def read_outputs(work_dir: Path, n_components: Optional[int] = None) -> Dict[str, pd.DataFrame]:
    """Parse all three Wishbone artefacts from a working directory."""
    tables = {
        "branch_assignment": read_branch_assignment(work_dir / BRANCH_FILE),
        "trajectory": read_trajectory(work_dir / TRAJECTORY_FILE),
        "space": read_space(work_dir / SPACE_FILE, n_components=n_components),
    }
    logger.info(
        "Parsed Wishbone outputs",
        extra={name: len(df) for name, df in tables.items()},
    )
    return tables
