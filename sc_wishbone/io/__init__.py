"""
File formats exchanged with the external Wishbone program.
"""

from .inputs import as_counts_frame, write_counts, write_params
from .outputs import read_branch_assignment, read_outputs, read_space, read_trajectory

__all__ = [
    "as_counts_frame",
    "write_counts",
    "write_params",
    "read_branch_assignment",
    "read_outputs",
    "read_space",
    "read_trajectory",
]
