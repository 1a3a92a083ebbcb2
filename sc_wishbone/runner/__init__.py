"""
Child-process plumbing: environment, command line and execution.
"""

from .command import THREAD_ENV_VARS, build_command, build_environment
from .process import run_process

__all__ = ["THREAD_ENV_VARS", "build_command", "build_environment", "run_process"]
