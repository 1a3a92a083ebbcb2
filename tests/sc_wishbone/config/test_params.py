from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from sc_wishbone.config.io import load_params
from sc_wishbone.config.model import BRIDGE_SCRIPT, RuntimeConfig, WishboneParams
from sc_wishbone.core.exceptions import ConfigError


@pytest.mark.parametrize("n", [1, 2, 5])
def test_components_list_is_zero_based_range(n):
    params = WishboneParams(n_diffusion_components=n)
    assert params.components_list == list(range(n))
    assert params.to_document("c1")["components_list"] == list(range(n))


def test_document_defaults():
    doc = WishboneParams().to_document("c1")

    assert doc == {
        "start_cell_id": "c1",
        "knn": 10,
        "n_diffusion_components": 2,
        "n_pca_components": 15,
        "markers": "~",
        "branch": True,
        "k": 15,
        "num_waypoints": 50,
        "normalize": True,
        "epsilon": 1,
        "verbose": False,
        "components_list": [0, 1],
    }


def test_document_markers_sequence_becomes_list():
    doc = WishboneParams(markers=("CD34", "GATA1")).to_document("c1")
    assert doc["markers"] == ["CD34", "GATA1"]
    json.dumps(doc)


def test_load_params_from_file(tmp_path: Path):
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"knn": 25, "branch": False, "markers": ["CD34"]}))

    params = load_params(path)

    assert params.knn == 25
    assert params.branch is False
    assert list(params.markers) == ["CD34"]
    # untouched fields keep defaults
    assert params.num_waypoints == 50


def test_load_params_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_params(tmp_path / "nope.json")


def test_load_params_unknown_key(tmp_path: Path):
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"knn": 5, "num_cores": 4}))

    with pytest.raises(ConfigError, match="num_cores"):
        load_params(path)


@pytest.mark.parametrize("content", ["[1, 2]", "{not json"])
def test_load_params_bad_document(tmp_path: Path, content):
    path = tmp_path / "params.json"
    path.write_text(content)

    with pytest.raises(ConfigError):
        load_params(path)


def test_runtime_defaults(monkeypatch):
    for var in ("SC_WISHBONE_PYTHON", "SC_WISHBONE_VENV", "SC_WISHBONE_SCRIPT"):
        monkeypatch.delenv(var, raising=False)

    runtime = RuntimeConfig.from_env()

    assert runtime.resolve_python() == sys.executable
    assert runtime.resolve_script() == BRIDGE_SCRIPT
    assert BRIDGE_SCRIPT.is_file()


def test_runtime_env_resolution(monkeypatch, tmp_path: Path):
    script = tmp_path / "wrapper.py"
    script.write_text("")
    monkeypatch.delenv("SC_WISHBONE_PYTHON", raising=False)
    monkeypatch.setenv("SC_WISHBONE_VENV", str(tmp_path / "venv"))
    monkeypatch.setenv("SC_WISHBONE_SCRIPT", str(script))

    runtime = RuntimeConfig.from_env()

    assert runtime.resolve_python() == str(tmp_path / "venv" / "bin" / "python")
    assert runtime.resolve_script() == script


def test_runtime_explicit_python_beats_env_and_venv(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("SC_WISHBONE_PYTHON", "/env/python")

    runtime = RuntimeConfig.from_env(python="/explicit/python", venv=tmp_path)

    assert runtime.resolve_python() == "/explicit/python"


def test_runtime_missing_script(tmp_path: Path):
    runtime = RuntimeConfig(script=tmp_path / "missing.py")

    with pytest.raises(ConfigError, match="not found"):
        runtime.resolve_script()
