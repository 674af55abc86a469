"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from graphcheck.output.console import create_console, get_output, verdict_style

if TYPE_CHECKING:
    from rich.console import Console

    from graphcheck.services.result import ServiceResult

_DECISION_OPS = ("hamiltonian_path", "hamiltonian_cycle", "eulerian_path", "eulerian_cycle")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _OP_RENDERERS.get(result.op, _render_generic)(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: verdicts as true/false, lists one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op in _DECISION_OPS:
        return _yes_no(result.data.get("exists", False))
    if result.op == "check":
        lines = []
        for reading, row in result.data.get("readings", {}).items():
            for op in _DECISION_OPS:
                lines.append(f"{reading} {op} {_yes_no(row.get(op, False))}")
        return "\n".join(lines)
    if result.op == "neighbors":
        return "\n".join(str(v) for v in result.data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _yes_no(value: Any) -> str:
    return "true" if value else "false"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="gc.ok"), Text(f"  {result.op}", style="gc.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}:", style="gc.key")
    if isinstance(value, bool):
        v = Text(_yes_no(value), style=verdict_style(value))
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":"), default=str))
    else:
        v = Text(str(value))
    console.print(k, v)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = Text(" " * indent)
    line.append(f"{duration:>9.3f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    notes = span.get("annotations") or {}
    if notes:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="gc.error"),
        Text(f"  {result.op}", style="gc.op"),
        Text(" — "),
        Text(msg),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Verdict matrix: one column per reading, one row per property."""
    _status_line(console, result)
    _field(console, "source", result.data.get("source", ""))
    readings: dict[str, dict[str, Any]] = result.data.get("readings", {})

    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Property")
    for name in readings:
        table.add_column(name.title(), justify="center")
    for label, key in (("Vertices", "vertices"), ("Edges", "edges")):
        table.add_row(label, *(str(row.get(key, "")) for row in readings.values()))
    for op in _DECISION_OPS:
        cells = []
        for row in readings.values():
            value = bool(row.get(op))
            cells.append(Text(_yes_no(value), style=verdict_style(value)))
        table.add_row(op.replace("_", " ").title(), *cells)
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_decision(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("source", "directed", "vertices", "edges", "exists"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_degrees(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    directed = result.data.get("directed", True)
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Vertex", style="gc.vertex", no_wrap=True)
    if directed:
        table.add_column("In", justify="right")
        table.add_column("Out", justify="right")
    else:
        table.add_column("Degree", justify="right")
    for item in result.data.get("items", []):
        if directed:
            table.add_row(Text(str(item["vertex"])), str(item["in"]), str(item["out"]))
        else:
            table.add_row(Text(str(item["vertex"])), str(item["degree"]))
    console.print(table)
    key = "unbalanced" if directed else "odd"
    _field(console, key, result.data.get(key, []))
    if verbose:
        _render_meta(console, result)


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    text = result.data.get("text", "")
    if text:
        console.print(Text(text))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "check": _render_check,
    "hamiltonian_path": _render_decision,
    "hamiltonian_cycle": _render_decision,
    "eulerian_path": _render_decision,
    "eulerian_cycle": _render_decision,
    "degrees": _render_degrees,
    "show": _render_show,
    # summary, neighbors, export_* use the generic key/value layout
}
