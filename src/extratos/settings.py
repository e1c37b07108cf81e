"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import os
from pathlib import Path

OUTPUT_DIR_ENV_VAR = "EXTRATOS_OUTPUT_DIR"
LOG_DIR_ENV_VAR = "EXTRATOS_LOG_DIR"

DEFAULT_OUTPUT_DIR = Path("Extratos")
DEFAULT_LOG_DIR = Path("work") / "logs"
LOG_FILENAME = "extratos.log"


def resolve_output_dir() -> Path:
    """Return the folder where persisted statements are written."""

    candidate = os.getenv(OUTPUT_DIR_ENV_VAR)
    if candidate:
        return Path(candidate).expanduser()
    return DEFAULT_OUTPUT_DIR


def resolve_log_dir() -> Path:
    candidate = os.getenv(LOG_DIR_ENV_VAR)
    if candidate:
        return Path(candidate).expanduser()
    return DEFAULT_LOG_DIR


__all__ = [
    "DEFAULT_LOG_DIR",
    "DEFAULT_OUTPUT_DIR",
    "LOG_DIR_ENV_VAR",
    "LOG_FILENAME",
    "OUTPUT_DIR_ENV_VAR",
    "resolve_log_dir",
    "resolve_output_dir",
]
