"""Format a ServiceResult as JSON, quiet text, or Rich tables.

Renderers are dispatched by ``result.op``; unknown ops fall through to
a generic key-value listing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from aggregen.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from aggregen.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)


def render_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    return f"OK: {result.op} ({result.data.get('count', 0)})"


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="agg.ok"), Text(f"  {result.op}", style="agg.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="agg.key"), Text(str(value)))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="agg.error"), Text(f"  {result.op}", style="agg.op"), msg)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("strategy", "seed", "steps", "count"):
        _field(console, key, d.get(key))

    for item in d.get("items", []):
        console.print()
        title = (
            f"solution {item['index']}: "
            f"{item['node_count']} points, {item['edge_count']} edges"
        )
        table = Table(title=title, show_header=True, pad_edge=False, expand=False)
        table.add_column("Point", style="agg.point", no_wrap=True)
        table.add_column("Connector", style="agg.connector")
        table.add_column("Point", style="agg.point", no_wrap=True)
        table.add_column("Connector", style="agg.connector")
        for row in _edge_rows(item):
            table.add_row(*row)
        console.print(table)
        if verbose:
            _field(console, "points", ", ".join(item.get("points", [])))


def _edge_rows(item: dict[str, Any]) -> list[tuple[str, str, str, str]]:
    rows: list[tuple[str, str, str, str]] = []
    for edge in item.get("edges", []):
        a, b = edge["ends"]
        rows.append((a["point"], a["connector"], b["point"], b["connector"]))
    return rows


def _render_library(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "sections", d.get("sections"))
    _field(console, "pole_pairs", ", ".join(d.get("pole_pairs", [])))

    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Connector", style="agg.connector", no_wrap=True)
    table.add_column("Sections", justify="right")
    table.add_column("Total weight", justify="right")
    table.add_column("Mates")
    for item in d.get("items", []):
        table.add_row(
            item["connector"],
            str(item["sections"]),
            f"{item['total_weight']:.2f}",
            ", ".join(item["mates"]) or "-",
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "generate": _render_generate,
    "library": _render_library,
}
