"""The schedule directory: one record file per schedule, named after it.

INVARIANT: the file name is the schedule name. Names are single path
components and always resolve inside the store root.
"""

from __future__ import annotations

import logging
from pathlib import Path

from hrtracker.infrastructure.records import RegularSchedule

logger = logging.getLogger(__name__)


def validate_name(name: str) -> str:
    """Check that *name* can be used as a schedule file name."""
    if not name:
        msg = "a schedule name must be specified"
        raise ValueError(msg)
    if "/" in name or "\\" in name:
        msg = f"schedule name must not contain a path separator: {name!r}"
        raise ValueError(msg)
    if name in (".", ".."):
        msg = f"schedule name {name!r} is reserved"
        raise ValueError(msg)
    return name


def resolve_schedule_path(root: Path, name: str) -> Path:
    """Resolve the file path for schedule *name* under *root*."""
    result = root / validate_name(name)

    # Guard against anything that still escapes the root (symlinked root etc.)
    if not result.resolve().is_relative_to(root.resolve()):
        msg = f"Path escapes schedule directory: {result}"
        raise ValueError(msg)
    return result


class ScheduleStore:
    """File-per-schedule storage rooted at one directory."""

    def __init__(self, root: Path, *, create_missing: bool = True) -> None:
        self.root = root
        self._create_missing = create_missing

    def ensure_root(self) -> Path:
        """Create the root directory if configured to, and return it."""
        if self._create_missing and not self.root.exists():
            logger.debug("Creating schedule directory %s", self.root)
            self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    def path_for(self, name: str) -> Path:
        return resolve_schedule_path(self.root, name)

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def names(self) -> list[str]:
        """Sorted names of every entry in the root.

        Nothing is filtered: an entry that is not a schedule file fails on
        open and is reported there.
        """
        root = self.ensure_root()
        return sorted(p.name for p in root.iterdir())

    def open(self, name: str) -> RegularSchedule:
        return RegularSchedule.open(self.path_for(name))

    def save(self, name: str, schedule: RegularSchedule) -> Path:
        self.ensure_root()
        path = self.path_for(name)
        schedule.save(path)
        return path

    def remove(self, name: str) -> Path:
        path = self.path_for(name)
        path.unlink()
        return path
