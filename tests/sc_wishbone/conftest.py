from __future__ import annotations

import sys
import tempfile
import textwrap
from pathlib import Path

import pandas as pd
import pytest

from sc_wishbone.config.model import RuntimeConfig

# Deterministic stand-in for the Wishbone program.
#   STUB_RECORD   file to dump work_dir / params / counts / thread env into
#   STUB_EXIT     non-zero exit status to fail with
#   STUB_SKIP_DM  "1" to leave dm.csv unwritten
STUB_PROGRAM = textwrap.dedent(
    """
    import json
    import os
    import sys
    from pathlib import Path

    work_dir = Path(sys.argv[1])

    record = os.environ.get("STUB_RECORD")
    if record:
        Path(record).write_text(json.dumps({
            "work_dir": str(work_dir),
            "params_raw": (work_dir / "params.json").read_text(),
            "counts": (work_dir / "counts.tsv").read_text(),
            "env": {
                k: os.environ.get(k)
                for k in ("MKL_NUM_THREADS", "NUMEXPR_NUM_THREADS", "OMP_NUM_THREADS")
            },
        }))

    print("stub wishbone running", flush=True)

    exit_code = int(os.environ.get("STUB_EXIT", "0"))
    if exit_code:
        print("boom: diffusion map failed", file=sys.stderr, flush=True)
        sys.exit(exit_code)

    (work_dir / "branch.json").write_text('{"A":0,"B":1}')
    (work_dir / "trajectory.json").write_text('{"A":0.1,"B":0.9}')
    if os.environ.get("STUB_SKIP_DM") != "1":
        (work_dir / "dm.csv").write_text("cell_id,Comp1,Comp2\\nA,0.0,0.0\\nB,1.0,1.0\\n")
    """
)


@pytest.fixture()
def stub_runtime(tmp_path: Path) -> RuntimeConfig:
    script = tmp_path / "stub_wishbone.py"
    script.write_text(STUB_PROGRAM)
    return RuntimeConfig(python=sys.executable, script=script)


@pytest.fixture()
def record_path(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "record.json"
    monkeypatch.setenv("STUB_RECORD", str(path))
    return path


@pytest.fixture()
def temp_root(tmp_path: Path, monkeypatch) -> Path:
    """Redirect tempfile so leftover working directories are observable."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture()
def counts() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "g1": [1, 0],
            "g2": [3, 5],
            "g3": [0, 7],
        },
        index=["A", "B"],
    )
