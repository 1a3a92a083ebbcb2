from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from sc_wishbone.config.model import RuntimeConfig

THREAD_ENV_VARS = ("MKL_NUM_THREADS", "NUMEXPR_NUM_THREADS", "OMP_NUM_THREADS")


def build_environment(
        num_cores: Optional[int],
        base: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Child-process environment.

    With num_cores set, every thread-count variable is set to str(num_cores);
    with num_cores None, all of them are removed so the child sees none.
    """
    env = dict(os.environ if base is None else base)
    for var in THREAD_ENV_VARS:
        if num_cores is None:
            env.pop(var, None)
        else:
            env[var] = str(num_cores)
    return env


def build_command(runtime: RuntimeConfig, work_dir: Path) -> List[str]:
    return [runtime.resolve_python(), str(runtime.resolve_script()), str(work_dir)]
