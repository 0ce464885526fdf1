from __future__ import annotations

import sys
from pathlib import Path


def app_base_dir() -> Path:
    """
    Returns the directory that holds runtime files (.env, artifacts).

    - From source: the repository root
    - Frozen build: the directory containing the executable
    """
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys.executable).resolve().parent

    # .../src/tui_booking_e2e/config/paths.py -> repo root is 3 parents up
    return Path(__file__).resolve().parents[3]


def env_file_path() -> Path:
    return app_base_dir() / ".env"


def artifacts_path(artifacts_dir: str) -> Path:
    """Relative artifact dirs are resolved against the base dir."""
    p = Path(artifacts_dir)
    return p if p.is_absolute() else app_base_dir() / p
