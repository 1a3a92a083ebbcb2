from __future__ import annotations

import os
import sys
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from sc_wishbone.core.exceptions import ConfigError

BRIDGE_SCRIPT = Path(__file__).resolve().parent.parent / "bridge" / "wishbone_bridge.py"


@dataclass(frozen=True)
class WishboneParams:
    """
    Immutable algorithm parameters forwarded to Wishbone.

    Field names are the keys of params.json; the start cell travels
    alongside them but is supplied per run.
    """

    knn: int = 10
    n_diffusion_components: int = 2
    n_pca_components: int = 15
    markers: Union[str, Sequence[str]] = "~"
    branch: bool = True
    k: int = 15
    num_waypoints: int = 50
    normalize: bool = True
    epsilon: float = 1
    verbose: bool = False

    @property
    def components_list(self) -> List[int]:
        return list(range(self.n_diffusion_components))

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> WishboneParams:
        unknown = sorted(set(raw) - set(cls.field_names()))
        if unknown:
            raise ConfigError(
                f"Unknown Wishbone parameter(s): {unknown}. "
                f"Available: {cls.field_names()}"
            )
        return cls(**raw)

    def to_document(self, start_cell_id: str) -> Dict[str, Any]:
        """
        Build the params.json document for one run.
        """
        doc: Dict[str, Any] = {"start_cell_id": start_cell_id}
        doc.update(asdict(self))
        if not isinstance(self.markers, str):
            doc["markers"] = list(self.markers)
        doc["components_list"] = self.components_list
        return doc


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Where the external Wishbone program lives.

    - python   interpreter of the environment that has `wishbone` installed
    - venv     virtualenv directory; its bin/python is used when python is unset
    - script   program run with the working directory as its only argument
    """

    python: Optional[str] = None
    venv: Optional[Path] = None
    script: Optional[Path] = None

    @classmethod
    def from_env(
            cls,
            python: Optional[str] = None,
            venv: Optional[Path] = None,
            script: Optional[Path] = None,
    ) -> RuntimeConfig:
        """
        Resolve each field: explicit argument > SC_WISHBONE_* env var > unset.
        """
        venv_raw = venv if venv is not None else os.environ.get("SC_WISHBONE_VENV")
        script_raw = script if script is not None else os.environ.get("SC_WISHBONE_SCRIPT")
        return cls(
            python=python or os.environ.get("SC_WISHBONE_PYTHON"),
            venv=Path(venv_raw) if venv_raw else None,
            script=Path(script_raw) if script_raw else None,
        )

    def resolve_python(self) -> str:
        if self.python:
            return self.python
        if self.venv is not None:
            return str(Path(self.venv) / "bin" / "python")
        return sys.executable

    def resolve_script(self) -> Path:
        script = Path(self.script) if self.script is not None else BRIDGE_SCRIPT
        if not script.is_file():
            raise ConfigError(f"Wishbone program not found at {script}")
        return script
