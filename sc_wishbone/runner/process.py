from __future__ import annotations

import logging
import subprocess
from typing import List, Mapping, Optional, Sequence

from sc_wishbone.core.exceptions import WishboneExecutionError

logger = logging.getLogger(__name__)


def run_process(
        command: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
        echo: bool = False,
) -> str:
    """
    Run a command to completion and return its combined stdout/stderr.

    Output is decoded as UTF-8 with undecodable bytes replaced, and read
    line by line; with echo=True each line is also logged as it arrives.
    Launch failures (OSError) propagate unchanged.

    :raises WishboneExecutionError: on non-zero exit, with the captured output
    """
    lines: List[str] = []

    with subprocess.Popen(
        list(command),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        env=dict(env) if env is not None else None,
        encoding="utf-8",
        errors="replace",
    ) as proc:
        for line in proc.stdout:
            lines.append(line)
            if echo:
                logger.info(line.rstrip("\n"), extra={"pid": proc.pid})
        returncode = proc.wait()

    output = "".join(lines)
    if returncode != 0:
        logger.error(
            "Wishbone process exited with non-zero status",
            extra={"returncode": returncode, "command": list(command)},
        )
        raise WishboneExecutionError(returncode, command, output)

    return output
