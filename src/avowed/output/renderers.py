"""Human-readable rendering of ServiceResult, one renderer per operation.

Successful results are drawn by the renderer registered for ``result.op``
(falling back to a plain key/value listing); failures share one renderer
that prints the error and, for ``check``, a table of failing records.
Strings coming from records or annotations are wrapped in ``Text`` so Rich
never interprets them as markup.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from avowed.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from avowed.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console", bool], None]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Rich rendering of *result* as a string (plain text when not on a terminal)."""
    console = create_console()
    if result.ok:
        _RENDERERS.get(result.op, _render_generic)(result, console, verbose)
    else:
        _render_error(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One status line, or just the item names for listing operations."""
    if not result.ok:
        message = result.error.message if result.error else "unknown error"
        return f"ERROR: {result.op}: {message}"
    items = result.data.get("items")
    if isinstance(items, list) and items:
        return "\n".join(str(item.get("name", "")) for item in items if isinstance(item, dict))
    return f"OK: {result.op}"


def _line(console: Console, *parts: Text) -> None:
    console.print(Text.assemble(*parts))


def _kv(console: Console, key: str, value: Any, style: str = "") -> None:
    _line(console, Text(f"  {key}: ", style="avw.key"), Text(str(value), style=style))


def _meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    _line(console, Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        _line(console, Text(f"    {key}: {value}"))


def _table(*columns: str) -> Table:
    table = Table(show_header=True, pad_edge=False, expand=False)
    for column in columns:
        table.add_column(column)
    return table


def _failures_table(failures: Iterable[dict[str, Any]]) -> Table:
    table = _table("Record", "Field", "Code", "Message")
    table.columns[0].justify = "right"
    table.columns[1].style = "avw.field"
    table.columns[2].style = "avw.code"
    for item in failures:
        table.add_row(
            Text(str(item.get("index", ""))),
            Text(str(item.get("field") or "")),
            Text(str(item.get("code") or "")),
            Text(str(item.get("message") or "")),
        )
    return table


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    error = result.error
    _line(
        console,
        Text("ERROR", style="avw.error"),
        Text(f"  {result.op}", style="avw.op"),
        Text(": "),
        Text(error.message if error else "unknown error"),
    )
    detail = error.detail if error else {}
    failures = detail.get("failures")
    if isinstance(failures, list):
        console.print(_failures_table(failures))
    else:
        for key, value in detail.items():
            _kv(console, key, value)
    if verbose:
        _meta(console, result)


def _ok_header(console: Console, result: ServiceResult) -> None:
    _line(console, Text("OK", style="avw.ok"), Text(f"  {result.op}", style="avw.op"))


def _render_generic(result: ServiceResult, console: Console, verbose: bool) -> None:
    _ok_header(console, result)
    for key, value in result.data.items():
        _kv(console, key, value)
    if verbose:
        _meta(console, result)


def _render_check(result: ServiceResult, console: Console, verbose: bool) -> None:
    _ok_header(console, result)
    _kv(console, "records", result.data.get("count", 0))
    _kv(console, "passed", result.data.get("passed", 0))
    if verbose:
        _kv(console, "fields", ", ".join(result.data.get("fields", [])))
        _meta(console, result)


def _render_parse(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    _ok_header(console, result)
    _kv(console, "directive", data.get("name", ""))
    for key, value in data.get("params", []):
        _kv(console, f"param {key}", value)
    kind = data.get("kind")
    if kind:
        _kv(console, "kind", kind, style=style_for_kind(kind))
        _kv(console, "validator", data.get("validator", ""))


def _render_directives(result: ServiceResult, console: Console, verbose: bool) -> None:
    _ok_header(console, result)
    columns = ["Directive", "Kind", "Usage"] + (["Description"] if verbose else [])
    table = _table(*columns)
    for item in result.data.get("items", []):
        kind = str(item.get("kind", ""))
        row = [
            Text(str(item.get("name", "")), style="bold"),
            Text(kind, style=style_for_kind(kind)),
            Text(str(item.get("usage", "")), style="dim"),
        ]
        if verbose:
            row.append(Text(str(item.get("summary", ""))))
        table.add_row(*row)
    console.print(table)


_RENDERERS: dict[str, Renderer] = {
    "check": _render_check,
    "parse": _render_parse,
    "directives": _render_directives,
}
