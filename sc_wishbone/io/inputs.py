from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

import anndata as ad
import pandas as pd

from sc_wishbone.config.model import WishboneParams

logger = logging.getLogger(__name__)

COUNTS_FILE = "counts.tsv"
PARAMS_FILE = "params.json"


def as_counts_frame(counts: Union[pd.DataFrame, ad.AnnData]) -> pd.DataFrame:
    """
    Normalise the counts input to a cells x features DataFrame.

    AnnData is converted with .to_df() so sparse X is densified;
    obs_names become the cell ids and var_names the feature names.
    """
    if isinstance(counts, ad.AnnData):
        return counts.to_df()
    if isinstance(counts, pd.DataFrame):
        return counts
    raise TypeError(
        f"counts must be a pandas DataFrame or AnnData, got {type(counts).__name__}"
    )


def write_counts(counts: pd.DataFrame, work_dir: Path) -> Path:
    """Write counts verbatim as TSV: header row, cell ids as row labels."""
    path = work_dir / COUNTS_FILE
    counts.to_csv(path, sep="\t")
    logger.debug(
        "Wrote counts",
        extra={"path": str(path), "n_cells": counts.shape[0], "n_features": counts.shape[1]},
    )
    return path


def write_params(params: WishboneParams, start_cell_id: str, work_dir: Path) -> Path:
    """Write the single-line params.json document."""
    path = work_dir / PARAMS_FILE
    doc = params.to_document(start_cell_id)
    path.write_text(json.dumps(doc) + "\n")
    logger.debug("Wrote params", extra={"path": str(path), "params": doc})
    return path
