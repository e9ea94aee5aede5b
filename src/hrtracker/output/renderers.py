"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from hrtracker.output.console import create_console, get_output, style_for_remaining

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from hrtracker.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list_schedules":
        return "\n".join(str(item["name"]) for item in result.data.get("items", []))
    if "next_iso" in result.data:
        return str(result.data["next_iso"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="hrt.ok")
    op = Text(f"  {result.op}", style="hrt.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="hrt.key")
    if key == "name":
        v = Text(str(value), style="hrt.name")
    elif key == "path":
        v = Text(str(value), style="hrt.path")
    elif key in ("next", "previous"):
        v = Text(str(value), style="hrt.when")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _remaining(data: dict[str, Any]) -> Text:
    style = style_for_remaining(bool(data.get("overdue")))
    return Text(str(data.get("remaining", "")), style=style)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="hrt.error")
    op = Text(f"  {result.op}", style="hrt.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Schedule renderers ────────────────────────────────────────────────


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """One row per schedule: name, next trigger, time remaining, interval."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text(f"No schedules in {result.data.get('directory', '')}", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Schedule", style="hrt.name", no_wrap=True)
    table.add_column("Next", style="hrt.when")
    table.add_column("In", justify="right")
    table.add_column("Every", justify="right")
    if verbose:
        table.add_column("Format", style="dim")

    for item in items:
        row: list[str | Text] = [
            str(item["name"]),
            str(item["next"]),
            _remaining(item),
            str(item["interval"]),
        ]
        if verbose:
            row.append(str(item.get("format_version", "")))
        table.add_row(*row)
    console.print(table)


def _render_next(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """``<next> (in <remaining>)``."""
    d = result.data
    console.print(Text(str(d["next"]), style="hrt.when"), " (in ", _remaining(d), ")", sep="")
    if verbose:
        _field(console, "interval", d["interval"])
        _field(console, "format_version", d["format_version"])


def _render_step(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """``now in <remaining>`` followed by the new trigger time."""
    d = result.data
    console.print("now in ", _remaining(d), sep="")
    _field(console, "next", d["next"])
    if verbose:
        _field(console, "previous", d["previous"])
        _field(console, "steps", d["steps"])


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render new/remove results."""
    _status_line(console, result)
    for key in ("name", "next", "remaining", "interval", "path"):
        if key in result.data:
            _field(console, key, result.data[key])


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "list_schedules": _render_list,
    "next_schedule": _render_next,
    "step_schedule": _render_step,
    "new_schedule": _render_mutation,
    "remove_schedule": _render_mutation,
}
