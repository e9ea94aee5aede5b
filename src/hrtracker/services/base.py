"""BaseService — foundation for hrtracker services.

Every service receives a :class:`ScheduleStore` at construction time and
translates the exceptions raised below it into :class:`ServiceError`
payloads, so callers only ever see ServiceResult.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hrtracker.errors import BoundsError, FormatError, InvalidDataError
from hrtracker.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from hrtracker.infrastructure.store import ScheduleStore

logger = logging.getLogger(__name__)


def error_for(exc: Exception) -> ServiceError:
    """Map a core exception to its ServiceError code."""
    if isinstance(exc, InvalidDataError):
        code = "INVALID_DATA"
    elif isinstance(exc, BoundsError):
        code = "OUT_OF_RANGE"
    elif isinstance(exc, FormatError):
        code = "INVALID_FORMAT"
    elif isinstance(exc, FileNotFoundError):
        code = "NOT_FOUND"
    elif isinstance(exc, FileExistsError):
        code = "ALREADY_EXISTS"
    elif isinstance(exc, ValueError):
        code = "INVALID_NAME"
    else:
        code = "IO_ERROR"
    return ServiceError(code=code, message=str(exc), detail={"type": type(exc).__name__})


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ScheduleService(BaseService):
            def next_schedule(self, name: str) -> ServiceResult:
                try:
                    schedule = self._store.open(name)
                except (OSError, InvalidDataError) as exc:
                    return self._failure("next_schedule", exc, name=name)
                ...
    """

    def __init__(self, store: ScheduleStore) -> None:
        self._store = store

    def _failure(self, op: str, exc: Exception, **detail: str) -> ServiceResult:
        error = error_for(exc)
        logger.debug("%s failed: %s", op, exc, exc_info=True)
        return ServiceResult(
            ok=False,
            op=op,
            error=error.model_copy(update={"detail": {**error.detail, **detail}}),
        )
