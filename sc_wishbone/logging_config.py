from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

PACKAGE_LOGGER = "sc_wishbone"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: Union[int, str, None]) -> int:
    """
    Level from the argument, else SC_WISHBONE_LOG_LEVEL, else INFO.
    Accepts ints or names ("debug", "WARNING", ...).
    """
    raw = level if level is not None else os.getenv("SC_WISHBONE_LOG_LEVEL", "INFO")
    if isinstance(raw, int):
        return raw

    resolved = logging.getLevelName(str(raw).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {raw!r}")
    return resolved


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
        child_output: bool = True,
) -> logging.Logger:
    """
    Configure logging for Wishbone runs and return the package logger.

    Modes:
    - JSON (default) for batch / pipeline use
    - plain text (dev mode)

    Selection Order (format):
        1) force_format argument ("json" or "plain") if provided
        2) env var SC_WISHBONE_LOG_FORMAT
        3) default = "json"

    The level applies to the root logger and to the `sc_wishbone` logger.
    child_output=False silences the echoed Wishbone output
    (`sc_wishbone.runner.process` INFO lines) while keeping its errors.
    """

    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv("SC_WISHBONE_LOG_FORMAT", "json").lower()

    resolved_level = _resolve_level(level)

    root = logging.getLogger()
    root.setLevel(resolved_level)

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved_level)

    process_logger = logging.getLogger(f"{PACKAGE_LOGGER}.runner.process")
    process_logger.setLevel(logging.NOTSET if child_output else logging.WARNING)

    return package_logger
