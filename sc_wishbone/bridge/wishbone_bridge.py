"""
Wishbone bridge program.

Runs inside an environment where the `wishbone` library is installed;
sc_wishbone never imports this module. Usage:

    python wishbone_bridge.py <work_dir>

Reads counts.tsv and params.json from work_dir and writes
branch.json, trajectory.json and dm.csv back into it.
"""

import json
import sys
from pathlib import Path

import pandas as pd
import wishbone


def main(work_dir: Path) -> None:
    with (work_dir / "params.json").open() as f:
        p = json.load(f)

    scdata = wishbone.wb.SCData.from_csv(
        str(work_dir / "counts.tsv"),
        data_type="sc-seq",
        normalize=p["normalize"],
    )
    scdata.run_pca()
    scdata.run_diffusion_map(
        knn=p["knn"],
        epsilon=p["epsilon"],
        n_diffusion_components=p["n_diffusion_components"],
        n_pca_components=p["n_pca_components"],
        markers=p["markers"],
    )

    wb = wishbone.wb.Wishbone(scdata)
    wb.run_wishbone(
        start_cell=p["start_cell_id"],
        components_list=p["components_list"],
        num_waypoints=p["num_waypoints"],
        branch=p["branch"],
        k=p["k"],
    )

    wb.trajectory.to_json(str(work_dir / "trajectory.json"))
    if p["branch"]:
        wb.branch.to_json(str(work_dir / "branch.json"))
    else:
        # Linear run: every cell on a single branch
        pd.Series(1, index=wb.trajectory.index).to_json(str(work_dir / "branch.json"))
    wb.scdata.diffusion_eigenvectors.to_csv(str(work_dir / "dm.csv"))


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: wishbone_bridge.py <work_dir>")
    main(Path(sys.argv[1]))
