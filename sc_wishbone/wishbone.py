from __future__ import annotations

import dataclasses
import logging
from typing import Any, Optional, Union

import anndata as ad
import pandas as pd

from sc_wishbone.config.model import RuntimeConfig, WishboneParams
from sc_wishbone.core.exceptions import ConfigError
from sc_wishbone.core.result import WishboneResult
from sc_wishbone.core.workdir import working_directory
from sc_wishbone.io.inputs import as_counts_frame, write_counts, write_params
from sc_wishbone.io.outputs import read_outputs
from sc_wishbone.runner.command import build_command, build_environment
from sc_wishbone.runner.process import run_process
from sc_wishbone.validation.inputs import validate_inputs

logger = logging.getLogger(__name__)


def _resolve_params(params: Optional[WishboneParams], overrides: dict[str, Any]) -> WishboneParams:
    base = params if params is not None else WishboneParams()
    if not overrides:
        return base
    unknown = sorted(set(overrides) - set(WishboneParams.field_names()))
    if unknown:
        raise ConfigError(
            f"Unknown Wishbone parameter(s): {unknown}. "
            f"Available: {WishboneParams.field_names()}"
        )
    return dataclasses.replace(base, **overrides)


def run_wishbone(
        counts: Union[pd.DataFrame, ad.AnnData],
        start_cell_id: str,
        params: Optional[WishboneParams] = None,
        *,
        num_cores: Optional[int] = 1,
        runtime: Optional[RuntimeConfig] = None,
        echo: bool = False,
        **overrides: Any,
) -> WishboneResult:
    """
    Run Wishbone trajectory inference on a counts matrix.

    The counts and parameters are written into a private temporary
    directory, the external Wishbone program is run on it as a child
    process, and its outputs are parsed back. The directory is removed
    on every exit path; no partial result is ever returned.

    :param counts: cells x features counts (DataFrame indexed by cell id, or AnnData)
    :param start_cell_id: id of the cell the trajectory starts from
    :param params: algorithm parameters; defaults to WishboneParams()
    :param num_cores: thread limit exported to the child (MKL/NumExpr/OpenMP); None exports nothing
    :param runtime: location of the external program; defaults to RuntimeConfig.from_env()
    :param echo: log the child's output line by line while it runs
    :param overrides: individual WishboneParams fields, e.g. knn=20
    :return: WishboneResult with branch_assignment, trajectory and space tables
    :raises ValidationError: invalid counts or parameters (nothing is run)
    :raises WishboneExecutionError: the program exited with a non-zero status
    :raises WishboneOutputError: an output file is missing or malformed
    """
    params = _resolve_params(params, overrides)
    counts_df = as_counts_frame(counts)
    validate_inputs(counts_df, start_cell_id, params, num_cores=num_cores)

    if runtime is None:
        runtime = RuntimeConfig.from_env()

    with working_directory() as work_dir:
        write_counts(counts_df, work_dir)
        write_params(params, start_cell_id, work_dir)

        command = build_command(runtime, work_dir)
        env = build_environment(num_cores)

        logger.info(
            "Running Wishbone",
            extra={
                "command": command,
                "num_cores": num_cores,
                "n_cells": counts_df.shape[0],
                "n_features": counts_df.shape[1],
            },
        )
        run_process(command, env=env, echo=echo)

        tables = read_outputs(work_dir, n_components=params.n_diffusion_components)

    return WishboneResult(**tables)
