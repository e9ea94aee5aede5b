"""structlog configuration for hrtracker.

Logs always go to stderr so stdout stays clean for results:
- Human (default): console renderer, colored on a TTY
- JSON (--log-json): one JSON object per line

Commands bind the action and schedule name as context variables, so
every record logged while an action runs carries them.
"""

from __future__ import annotations

import logging
import sys

import structlog

_PACKAGE_LOGGER = "hrtracker"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Args:
        verbose: Enable DEBUG for hrtracker loggers. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    shared = _shared_processors()
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_action(action: str, name: str | None = None) -> None:
    """Attach the running action (and schedule name) to subsequent log records."""
    structlog.contextvars.clear_contextvars()
    if name is None:
        structlog.contextvars.bind_contextvars(action=action)
    else:
        structlog.contextvars.bind_contextvars(action=action, schedule=name)
