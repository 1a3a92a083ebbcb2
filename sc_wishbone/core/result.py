from __future__ import annotations

from dataclasses import dataclass
from typing import List

import anndata as ad
import numpy as np
import pandas as pd


@dataclass
class WishboneResult:
    """
    Canonical Wishbone result: three tables keyed by cell id.

    Tables:
    - branch_assignment   cell_id, branch
    - trajectory          cell_id, time
    - space               cell_id, Comp1..CompN (diffusion components)
    """

    branch_assignment: pd.DataFrame
    trajectory: pd.DataFrame
    space: pd.DataFrame

    @property
    def component_columns(self) -> List[str]:
        return [c for c in self.space.columns if c != "cell_id"]

    @property
    def n_cells(self) -> int:
        return len(self.trajectory)

    def annotate(self, adata: ad.AnnData, prefix: str = "wishbone") -> ad.AnnData:
        """
        Attach results to an AnnData whose obs_names are the Wishbone cell ids.

        Writes:
        - obs[f"{prefix}_branch"]
        - obs[f"{prefix}_time"]
        - obsm[f"X_{prefix}"]   diffusion components in obs_names order

        Mutates and returns the same object.
        """
        cells = pd.Index(adata.obs_names.astype(str))

        branch = self.branch_assignment.set_index("cell_id")["branch"]
        time = self.trajectory.set_index("cell_id")["time"]
        space = self.space.set_index("cell_id")[self.component_columns]

        for name, index in (("branch_assignment", branch.index), ("trajectory", time.index), ("space", space.index)):
            missing = cells.difference(index.astype(str))
            if len(missing) > 0:
                raise ValueError(
                    f"{len(missing)} cell(s) missing from Wishbone {name}, "
                    f"e.g. {list(missing[:5])}"
                )

        adata.obs[f"{prefix}_branch"] = branch.reindex(cells).to_numpy()
        adata.obs[f"{prefix}_time"] = time.reindex(cells).to_numpy()
        adata.obsm[f"X_{prefix}"] = np.asarray(space.reindex(cells).to_numpy(), dtype=float)

        return adata
