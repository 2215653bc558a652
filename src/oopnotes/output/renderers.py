"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall through to a generic key-value renderer. Text that comes
from notes or lessons is always wrapped in ``Text`` (or printed with
``markup=False``) because lesson output like ``[x] remember me`` would
otherwise be parsed as Rich markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markdown import Markdown
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from oopnotes.output.console import (
    create_console,
    get_output,
    style_for_category,
    style_for_status,
)

if TYPE_CHECKING:
    from rich.console import Console

    from oopnotes.services.result import ServiceResult


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
    """Minimal output for ``--quiet``: ids for lists, a status line otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    if result.op in ("list_topics", "verify"):
        key = "items" if result.op == "list_topics" else "results"
        return "\n".join(str(item.get("id", "")) for item in result.data.get(key, []))
    if result.op == "run":
        return "\n".join(result.data.get("output", []))
    if result.op == "quiz":
        return "\n".join(item["question"] for item in result.data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "oop.ok"), (f"  {result.op}", "oop.op")))


def _field(console: Console, key: str, value: Any) -> None:
    style = "oop.id" if key == "id" else "oop.title" if key == "title" else ""
    console.print(Text.assemble((f"  {key}: ", "oop.key"), (str(value), style)))


def _print_lines(console: Console, lines: list[str], *, indent: int = 2) -> None:
    prefix = " " * indent
    for line in lines:
        console.print(Text(f"{prefix}{line}"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "oop.error"), (f"  {result.op}", "oop.op"), f": {msg}")
    )
    # verify and run still carry a useful payload when they fail
    if result.op == "verify" and result.data.get("results"):
        _render_verify_table(result, console, verbose=True)
    elif result.op == "run" and result.data.get("output") is not None:
        _render_run_output(result, console)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Catalog ───────────────────────────────────────────────────────────


def _render_topic_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="oop.id", no_wrap=True)
    table.add_column("Title", style="oop.title")
    table.add_column("Category")
    table.add_column("Lesson", justify="center")
    if verbose:
        table.add_column("Tags", style="dim")
        table.add_column("Source", style="dim")

    for item in items:
        category = str(item.get("category", ""))
        row: list[Any] = [
            Text(str(item.get("id", ""))),
            Text(str(item.get("title", ""))),
            Text(category, style=style_for_category(category)),
            "yes" if item.get("has_lesson") else "-",
        ]
        if verbose:
            row.append(Text(", ".join(item.get("tags", []))))
            row.append(Text(str(item.get("source", ""))))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} topics")


def _render_topic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    category = str(d.get("category", ""))
    header = Text.assemble(
        (str(d.get("title", "")), "oop.title"),
        "  ",
        (str(d.get("category_label", category)), style_for_category(category)),
    )
    console.print(header)
    if d.get("summary"):
        console.print(Text(str(d["summary"]), style="italic"))
    if d.get("tags"):
        console.print(Text(f"tags: {', '.join(d['tags'])}", style="oop.key"))
    if verbose:
        _field(console, "path", d.get("path", ""))
        if d.get("lesson"):
            _field(console, "lesson", d["lesson"])
    console.print()
    console.print(Markdown(str(d.get("body", ""))))

    code = d.get("code")
    if code:
        console.print()
        console.print(
            Panel(
                Syntax(code, "python", theme="ansi_dark", line_numbers=False),
                title=Text(str(d.get("lesson", "lesson"))),
                border_style="dim",
                expand=False,
            )
        )


# ── Lessons ───────────────────────────────────────────────────────────


def _render_run_output(result: ServiceResult, console: Console) -> None:
    console.print(Text("  output:", style="oop.key"))
    _print_lines(console, result.data.get("output", []), indent=4)


def _render_run(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "id", d.get("id", ""))
    _field(console, "title", d.get("title", ""))
    if verbose:
        _field(console, "lesson", d.get("lesson", ""))
        if result.meta:
            _field(console, "duration_ms", result.meta.get("duration_ms", ""))
    _render_run_output(result, console)

    matches = d.get("matches_expected")
    if matches is None:
        console.print(Text("  no documented output to compare against", style="dim"))
    elif matches:
        console.print(Text("  matches the documented output", style="oop.status.pass"))
    else:
        console.print(Text("  differs from the documented output", style="oop.status.fail"))
        console.print(Text("  expected:", style="oop.key"))
        _print_lines(console, d.get("expected") or [], indent=4)


def _render_verify_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    results = result.data.get("results", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="oop.id", no_wrap=True)
    table.add_column("Status")
    table.add_column("Message")
    for entry in results:
        status = str(entry.get("status", ""))
        table.add_row(
            Text(str(entry.get("id", ""))),
            Text(status, style=style_for_status(status)),
            Text(str(entry.get("message", ""))),
        )
    console.print(table)

    if verbose:
        for entry in results:
            for line in entry.get("diff", []):
                console.print(Text(line), markup=False)

    counts = result.data.get("counts", {})
    summary = ", ".join(f"{n} {status}" for status, n in counts.items() if n)
    console.print(f"\n{summary or 'nothing to verify'}")


def _render_verify(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _render_verify_table(result, console, verbose=verbose)


# ── Export / quiz / glossary ──────────────────────────────────────────


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if "content" in d:
        # written to stdout as-is so it can be redirected to a file
        console.print(Text(d["content"].rstrip("\n")), soft_wrap=True)
        return
    _status_line(console, result)
    for key in ("path", "topics", "bytes"):
        if key in d:
            _field(console, key, d[key])
    _field(console, "categories", ", ".join(d.get("categories", [])))


def _render_quiz(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    for number, item in enumerate(items, start=1):
        console.print(
            Text.assemble((f"{number}. ", "bold"), item["question"]),
        )
        console.print(Text(f"   ({item['topic']})", style="dim"))
    if verbose:
        console.print(f"\n{len(items)} of {result.data.get('pool_size', len(items))} questions")


def _render_glossary(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Term", style="oop.title", no_wrap=True)
    table.add_column("Definition")
    if verbose:
        table.add_column("Topic", style="oop.id")
    for entry in items:
        row = [Text(entry["term"]), Text(entry["definition"])]
        if verbose:
            row.append(Text(entry.get("topic_id") or "-"))
        table.add_row(*row)
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "list_topics": _render_topic_table,
    "show_topic": _render_topic,
    "run": _render_run,
    "verify": _render_verify,
    "export": _render_export,
    "quiz": _render_quiz,
    "glossary": _render_glossary,
}
