"""Locate ``hrtracker.toml``.

``HRTRACKER_CONFIG`` names the file outright; otherwise the directories
from the start point up to the filesystem root are searched in order.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "hrtracker.toml"
CONFIG_ENV_VAR = "HRTRACKER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies at *start* (default: cwd), if any.

    A ``HRTRACKER_CONFIG`` that points at a missing file disables the
    search instead of falling back to it.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
