"""Operation-specific Rich renderers for ServiceResult.

Renderers write to a StringIO-backed Console; :func:`render_result`
dispatches on ``result.op`` and falls back to a key/value listing for
unknown ops.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dobcheck.output.console import create_console, get_output, verdict_style

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from dobcheck.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One-line output for ``--quiet``; verification results print the verdict."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "of_age" in result.data:
        return "true" if result.data["of_age"] else "false"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="dob.ok"), Text(f"  {result.op}", style="dob.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="dob.key")
    if isinstance(value, bool):
        v = Text(str(value).lower(), style=verdict_style(value))
    elif isinstance(value, (int, float)):
        v = Text(f"{value:g}" if isinstance(value, float) else str(value), style="dob.number")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error / generic ───────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="dob.error"),
        Text(f"  {result.op}", style="dob.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Verification ──────────────────────────────────────────────────────

_VERIFY_KEYS = (
    "mode",
    "reference",
    "birth",
    "threshold",
    "reference_utc",
    "threshold_utc",
    "minimum_age",
    "age",
    "force_march_1",
)


def _render_verify(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in _VERIFY_KEYS:
        if key in d and (verbose or not key.endswith("_utc")):
            _field(console, key, d[key])
    of_age = bool(d.get("of_age"))
    console.print()
    console.print(
        "Is of required minimum age: ",
        Text(str(of_age).lower(), style=verdict_style(of_age)),
        sep="",
    )


# ── Calendar ──────────────────────────────────────────────────────────


def _render_new_year(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    marker = "" if d.get("accuracy") == "verified" else "¹"
    console.print(f"Chinese New Year date for the year {d.get('year')}")
    console.print(
        Text("  is ", style="bold white on red"),
        Text(f" {d.get('date')}{marker} ", style="dob.date"),
        sep="",
    )
    if verbose:
        _field(console, "accuracy", d.get("accuracy"))
        if "expected" in d:
            _field(console, "expected", d["expected"])


# ── Benchmark ─────────────────────────────────────────────────────────


def _render_bench_unique(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    console.print(f"Captured {d.get('entries', 0):,} {d.get('source')} entries")
    console.print(
        f"Unique {d.get('source')} entries: ",
        Text(f"{d.get('unique', 0):,}", style="dob.number"),
        sep="",
    )
    if verbose:
        _render_meta(console, result)


def _render_bench_compare(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    console.print(
        f"Captured {d.get('iterations')} iterations of {d.get('entries', 0):,} entries "
        f"({d.get('clock')} and {d.get('instant')} each)"
    )
    console.print(
        "Orders of magnitude difference: ",
        Text(f"{d.get('orders_of_magnitude', 0.0):.2f}", style="dob.number"),
        sep="",
    )
    if verbose:
        _render_meta(console, result)


def _render_bench_sources(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Family", style="dob.op")
    table.add_column("Key", no_wrap=True)
    table.add_column("Source")
    table.add_column("Sample", style="dob.number", justify="right")
    table.add_column("Notes", style="dim")
    for item in result.data.get("items", []):
        table.add_row(
            str(item.get("family", "")),
            str(item.get("key", "")),
            str(item.get("label", "")),
            str(item.get("sample", "")),
            str(item.get("note", "")),
        )
    console.print(table)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "verify": _render_verify,
    "new_year": _render_new_year,
    "bench_unique": _render_bench_unique,
    "bench_compare": _render_bench_compare,
    "bench_sources": _render_bench_sources,
}
