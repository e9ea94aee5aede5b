"""ScheduleService — the list/new/step/next/remove actions.

Every action opens, reads or writes, and closes a schedule file within
the call. Nothing is locked: two concurrent steps on the same schedule
can lose one update.
"""

from __future__ import annotations

import logging
from typing import Any

from hrtracker.domain.temporal import Duration, Timestamp, format_interval
from hrtracker.errors import HrtrackerError
from hrtracker.infrastructure.records import RegularSchedule
from hrtracker.services.base import BaseService
from hrtracker.services.result import ServiceResult

logger = logging.getLogger(__name__)

# Everything an action can hit below the service edge.
_ACTION_ERRORS = (OSError, HrtrackerError, ValueError)


def describe(name: str, schedule: RegularSchedule, now: Timestamp) -> dict[str, Any]:
    """JSON-ready summary of one schedule as seen at *now*."""
    remaining = schedule.remaining(now)
    return {
        "name": name,
        "next": str(schedule.next_trigger),
        "next_iso": schedule.next_trigger.isoformat(),
        "remaining": format_interval(remaining),
        "remaining_ns": remaining.nanoseconds,
        "interval": format_interval(schedule.interval),
        "interval_ns": schedule.interval.nanoseconds,
        "overdue": remaining < Duration.zero(),
        "format_version": str(schedule.version),
    }


class ScheduleService(BaseService):
    """Actions over the schedule directory."""

    # ------------------------------------------------------------------
    # Read-only
    # ------------------------------------------------------------------

    def list_schedules(self, *, now: Timestamp | None = None) -> ServiceResult:
        """Describe every readable schedule; unreadable files become warnings."""
        op = "list_schedules"
        current = now or Timestamp.now()
        try:
            names = self._store.names()
        except OSError as exc:
            return self._failure(op, exc, directory=str(self._store.root))

        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        for name in names:
            try:
                schedule = self._store.open(name)
            except _ACTION_ERRORS as exc:
                logger.debug("Skipping unreadable schedule %s", name, exc_info=True)
                warnings.append(f"unable to open {name}: {exc}")
                continue
            items.append(describe(name, schedule, current))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "directory": str(self._store.root),
                "count": len(items),
                "items": items,
            },
            warnings=warnings,
        )

    def next_schedule(self, name: str, *, now: Timestamp | None = None) -> ServiceResult:
        """Report when *name* fires next. No mutation."""
        op = "next_schedule"
        try:
            schedule = self._store.open(name)
        except _ACTION_ERRORS as exc:
            return self._failure(op, exc, name=name)
        return ServiceResult(ok=True, op=op, data=describe(name, schedule, now or Timestamp.now()))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def new_schedule(
        self,
        name: str,
        start: Timestamp,
        every: Duration,
        *,
        overwrite: bool = True,
        now: Timestamp | None = None,
    ) -> ServiceResult:
        """Create and save a schedule; replaces an existing one unless *overwrite* is False."""
        op = "new_schedule"
        schedule = RegularSchedule.create(start, every)
        try:
            if not overwrite and self._store.exists(name):
                msg = f"schedule {name!r} already exists"
                raise FileExistsError(msg)
            path = self._store.save(name, schedule)
        except _ACTION_ERRORS as exc:
            return self._failure(op, exc, name=name)

        logger.info("Created schedule %s at %s", name, path)
        data = describe(name, schedule, now or Timestamp.now())
        data["path"] = str(path)
        return ServiceResult(ok=True, op=op, data=data)

    def step(
        self,
        name: str,
        *,
        times: int = 1,
        now: Timestamp | None = None,
    ) -> ServiceResult:
        """Open *name*, advance it *times* intervals, and save it back."""
        op = "step_schedule"
        try:
            schedule = self._store.open(name)
            previous = schedule.next_trigger
            schedule.advance(times)
            self._store.save(name, schedule)
        except _ACTION_ERRORS as exc:
            return self._failure(op, exc, name=name)

        logger.info("Stepped schedule %s from %s to %s", name, previous, schedule.next_trigger)
        data = describe(name, schedule, now or Timestamp.now())
        data["previous"] = str(previous)
        data["steps"] = times
        return ServiceResult(ok=True, op=op, data=data)

    def remove(self, name: str) -> ServiceResult:
        """Delete the schedule file for *name*."""
        op = "remove_schedule"
        try:
            path = self._store.remove(name)
        except _ACTION_ERRORS as exc:
            return self._failure(op, exc, name=name)
        logger.info("Removed schedule %s", name)
        return ServiceResult(ok=True, op=op, data={"name": name, "path": str(path)})
