from __future__ import annotations

from typing import Sequence


class ScWishboneError(Exception):
    """Base exception for all sc_wishbone errors"""
    pass

class ConfigError(ScWishboneError):
    """Invalid parameter file, unknown parameter or unresolvable runtime"""
    pass

class WishboneExecutionError(ScWishboneError):
    """
    The external Wishbone program exited with a non-zero status.
    Keeps the combined stdout/stderr for diagnostics.
    """

    TAIL_LINES = 20

    def __init__(self, returncode: int, command: Sequence[str], output: str):
        self.returncode = returncode
        self.command = list(command)
        self.output = output
        tail = "\n".join(output.strip().splitlines()[-self.TAIL_LINES:])
        super().__init__(
            f"Wishbone execution failed. Exit code: {returncode}. "
            f"Command: {' '.join(self.command)}. OUTPUT: {tail}"
        )

class WishboneOutputError(ScWishboneError):
    """
    An output artefact written by Wishbone is missing or malformed
    (bad JSON, unexpected shape, wrong column count, etc)
    """
    pass
