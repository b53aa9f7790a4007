"""Human-readable rendering of ServiceResults, plus the ``--quiet`` form.

:func:`render_result` looks up a renderer by ``result.op``; ops without
one get a plain key/value listing. Every renderer prints into a fresh
console from :func:`~notectl.output.console.create_console`.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from notectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from notectl.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console", bool], None]

# Field order for single-note results; absent or None fields are skipped.
_NOTE_FIELDS = (
    "id",
    "title",
    "categories",
    "filename",
    "source",
    "target",
    "marker",
    "path",
    "source_path",
    "target_path",
)

_SEVERITY_STYLES = {"error": "note.error", "warning": "note.warning"}


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a terminal (plain text when there is none)."""
    console = create_console()
    if result.ok:
        _RENDERERS.get(result.op, _generic)(result, console, verbose)
    else:
        _error(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Bare values for shell pipelines.

    One line per list item (its filename when the item is a note), else
    the path a result points at, else ``OK: <op>``.
    """
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {message}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(_item_name(item) for item in items)
    if result.data.get("path"):
        return str(result.data["path"])
    return f"OK: {result.op}"


def _item_name(item: Any) -> str:
    if isinstance(item, dict):
        return str(item.get("filename", item.get("id", "")))
    return str(item)


def _style_for(key: str) -> str:
    if key == "id" or key.endswith("_id"):
        return "note.id"
    if key == "path" or key.endswith("_path"):
        return "note.path"
    return {"title": "note.title", "categories": "note.category"}.get(key, "")


def _kv(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v) for v in value)
    console.print(Text.assemble((f"  {key}: ", "note.key"), (str(value), _style_for(key))))


def _ok_line(console: Console, op: str) -> None:
    console.print(Text.assemble(("OK", "note.ok"), (f"  {op}", "note.op")))


def _error(result: ServiceResult, console: Console, verbose: bool) -> None:
    err = result.error
    console.print(
        Text.assemble(
            ("ERROR", "note.error"),
            (f"  {result.op}", "note.op"),
            ": ",
            err.message if err else "Unknown error",
        )
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(Text(f"    {key}: {value}"))


def _note_fields(result: ServiceResult, console: Console, verbose: bool) -> None:
    _ok_line(console, result.op)
    for key in _NOTE_FIELDS:
        if result.data.get(key) is not None:
            _kv(console, key, result.data[key])


def _note_table(result: ServiceResult, console: Console, verbose: bool) -> None:
    items = result.data.get("items", [])
    table = Table(pad_edge=False)
    table.add_column("ID", style="note.id", no_wrap=True)
    table.add_column("Categories", style="note.category")
    table.add_column("Slug", style="note.title")
    if verbose:
        table.add_column("Filename", style="note.path")
    for item in items:
        cells = [
            item.get("id", ""),
            ", ".join(item.get("categories", [])),
            item.get("slug", ""),
        ]
        if verbose:
            cells.append(item.get("filename", ""))
        table.add_row(*(str(c) for c in cells))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} notes")


def _category_list(result: ServiceResult, console: Console, verbose: bool) -> None:
    items = result.data.get("items", [])
    for category in items:
        console.print(Text(str(category), style="note.category"))
    console.print(f"\n{result.data.get('count', len(items))} categories")


def _link_list(result: ServiceResult, console: Console, verbose: bool) -> None:
    items = result.data.get("items", [])
    direction = result.data.get("direction", "incoming")
    style = "note.outgoing" if direction == "outgoing" else "note.incoming"
    console.print(Text(f"{result.data.get('source', '')} ({direction})", style="note.title"))
    for filename in items:
        console.print(Text(f"  {filename}", style=style))
    console.print(f"\n{result.data.get('count', len(items))} links")


def _check_report(result: ServiceResult, console: Console, verbose: bool) -> None:
    issues: list[dict[str, Any]] = result.data.get("issues", [])
    if not issues:
        console.print(Text.assemble(("OK", "note.ok"), "  No issues found."))
        return

    grouped: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        grouped.setdefault(str(issue.get("category", "unknown")), []).append(issue)

    for category, group in grouped.items():
        console.print()
        console.print(Text(category, style="bold"))
        for issue in group:
            severity = str(issue.get("severity", "warning"))
            console.print(
                Text.assemble(
                    "  ",
                    (severity, _SEVERITY_STYLES.get(severity, "")),
                    f" [{issue.get('filename', '')}]: {issue.get('message', '')}",
                )
            )
            if verbose and issue.get("fix_action"):
                console.print(Text(f"    fix: {issue['fix_action']}"))

    errors = sum(1 for issue in issues if issue.get("severity") == "error")
    console.print(f"\n{errors} errors, {len(issues) - errors} warnings")


def _fix_report(result: ServiceResult, console: Console, verbose: bool) -> None:
    fixes = result.data.get("fixes", [])
    _ok_line(console, result.op)
    _kv(console, "fixes_applied", result.data.get("count", len(fixes)))
    if verbose:
        for fix in fixes:
            console.print(Text(f"  - {fix}"))


def _generic(result: ServiceResult, console: Console, verbose: bool) -> None:
    _ok_line(console, result.op)
    for key, value in result.data.items():
        if isinstance(value, dict):
            value = json.dumps(value, separators=(",", ":"))
        _kv(console, key, value)


_RENDERERS: dict[str, Renderer] = {
    "create_note": _note_fields,
    "insert_link": _note_fields,
    "find_note": _note_fields,
    "follow_link": _note_fields,
    "list_notes": _note_table,
    "list_categories": _category_list,
    "list_links": _link_list,
    "check": _check_report,
    "fix": _fix_report,
}
