from __future__ import annotations

from numbers import Integral, Real
from typing import Any, Optional

import pandas as pd
from pandas.api.types import is_numeric_dtype

from sc_wishbone.config.model import WishboneParams
from sc_wishbone.validation.errors import ValidationIssue, ValidationError


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool) and value > 0


def validate_inputs(
        counts: pd.DataFrame,
        start_cell_id: str,
        params: WishboneParams,
        num_cores: Optional[int] = None,
) -> None:
    issues: list[ValidationIssue] = []

    # counts matrix shape / ids
    if counts.shape[0] == 0 or counts.shape[1] == 0:
        issues.append(ValidationIssue("COUNTS_EMPTY", f"Counts matrix is empty (shape {counts.shape})."))

    if not counts.index.is_unique:
        dupes = counts.index[counts.index.duplicated()].unique()
        issues.append(
            ValidationIssue(
                "COUNTS_DUPLICATE_CELLS",
                f"Cell ids must be unique; duplicated: {list(dupes[:5])}",
            )
        )

    non_numeric = [str(c) for c in counts.columns if not is_numeric_dtype(counts[c])]
    if non_numeric:
        issues.append(
            ValidationIssue("COUNTS_NON_NUMERIC", f"Non-numeric feature column(s): {non_numeric[:5]}")
        )

    if start_cell_id not in counts.index:
        issues.append(
            ValidationIssue("START_CELL_MISSING", f"start_cell_id '{start_cell_id}' not found among cell ids.")
        )

    # algorithm parameters
    for name in ("knn", "n_diffusion_components", "n_pca_components", "k", "num_waypoints"):
        value = getattr(params, name)
        if not _is_positive_int(value):
            issues.append(ValidationIssue("PARAM_POSITIVE", f"{name} must be a positive integer, got {value!r}."))

    if not isinstance(params.epsilon, Real) or isinstance(params.epsilon, bool) or params.epsilon <= 0:
        issues.append(ValidationIssue("PARAM_EPSILON", f"epsilon must be positive, got {params.epsilon!r}."))

    if num_cores is not None and not _is_positive_int(num_cores):
        issues.append(ValidationIssue("NUM_CORES", f"num_cores must be a positive integer, got {num_cores!r}."))

    if issues:
        raise ValidationError(issues)
