"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, hrtracker.toml only contains
overrides. No config file is needed at all for everyday use.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

DEFAULT_DIRNAME = ".hrtracker"


def default_schedule_dir() -> Path:
    """``~/.hrtracker``, the directory used when nothing else is configured."""
    return Path.home() / DEFAULT_DIRNAME


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    directory: Path | None = None
    create_missing: bool = True

