"""Schema comparison report generation and display."""

import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from schema_compare.reporting.colors import DiffColors
from schema_compare.schema.models import (
    Category,
    ChangedPair,
    ChangeKind,
    ComparisonReport,
    DiffResult,
    Record,
)
from schema_compare.utils.logging import get_logger

logger = get_logger(__name__)

VIEW_DIFFERENCES = "differences"
VIEW_SIMILARITIES = "similarities"
VIEWS = (VIEW_DIFFERENCES, VIEW_SIMILARITIES)

REPORT_FORMATS = ("text", "json")

SECTION_TITLES = {
    ChangeKind.ADDED: "Added",
    ChangeKind.REMOVED: "Removed",
    ChangeKind.CHANGED: "Changed",
    ChangeKind.SIMILAR: "Similar",
}

SECTION_ICONS = {
    ChangeKind.ADDED: "➕",
    ChangeKind.REMOVED: "➖",
    ChangeKind.CHANGED: "🔄",
    ChangeKind.SIMILAR: "✓",
}

SUMMARY_PREFIXES = {
    ChangeKind.ADDED: "+",
    ChangeKind.REMOVED: "-",
    ChangeKind.CHANGED: "~",
    ChangeKind.SIMILAR: "=",
}


def format_header(key: str) -> str:
    """Turn an attribute name into a column header (``join_name`` -> ``Join Name``)."""
    return " ".join(word[:1].upper() + word[1:] for word in key.split("_"))


def format_value(value: Any) -> str:
    """Render an attribute value for display."""
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "Yes" if value else "No"
    return str(value)


def view_kinds(view: str) -> list[ChangeKind]:
    """Get the diff kinds shown by a report view."""
    if view == VIEW_SIMILARITIES:
        return [ChangeKind.SIMILAR]
    return [ChangeKind.ADDED, ChangeKind.REMOVED, ChangeKind.CHANGED]


def record_columns(record: Record) -> list[str]:
    """Get the attributes shown for a record.

    ``type`` is skipped, as are null and nested values.
    """
    return [
        key
        for key, value in record.items()
        if key != "type" and value is not None and not isinstance(value, (dict, list, tuple))
    ]


def is_column_change(pairs: Sequence[ChangedPair]) -> bool:
    """Check whether changed pairs describe columns (they carry table and name)."""
    if not pairs:
        return False
    first = pairs[0].old
    return bool(first.get("table") and first.get("name"))


def changed_headers(pairs: Sequence[ChangedPair]) -> list[str]:
    """Get the header row for a table of property changes."""
    if is_column_change(pairs):
        return ["Table", "Column", "Property", "Old Value", "New Value"]
    return ["Table", "Property", "Old Value", "New Value"]


def changed_rows(pairs: Sequence[ChangedPair]) -> list[list[str]]:
    """Flatten changed pairs into one display row per property change.

    Column changes are located by table and column name; anything else by
    the record's own name.
    """
    rows = []
    column_shape = is_column_change(pairs)

    for pair in pairs:
        if column_shape:
            location = [
                format_value(pair.old.get("table") or pair.new.get("table") or None),
                format_value(pair.old.get("name") or pair.new.get("name") or None),
            ]
        else:
            location = [format_value(pair.old.get("name") or pair.new.get("name") or None)]

        for change in pair.property_changes():
            rows.append(
                location
                + [
                    format_header(change.key),
                    format_value(change.old_value),
                    format_value(change.new_value),
                ]
            )

    return rows


def record_rows(records: Sequence[Record]) -> tuple[list[str], list[list[str]]]:
    """Get headers and rows for a flat table of records.

    Columns are taken from the first record.
    """
    if not records:
        return [], []
    keys = record_columns(records[0])
    headers = [format_header(key) for key in keys]
    rows = [[format_value(record.get(key)) for key in keys] for record in records]
    return headers, rows


def section_items(result: DiffResult, kind: ChangeKind) -> list[Any]:
    """Get the records (or changed pairs) of one section of a diff result."""
    return getattr(result, kind.value)


def _section_heading(result: DiffResult, kind: ChangeKind) -> str:
    """Get the heading printed above a section table."""
    color = DiffColors.for_kind(kind)
    count = len(section_items(result, kind))
    return (
        f"{SECTION_ICONS[kind]} {SECTION_TITLES[kind]} {result.category.value} "
        f"[{color}]({count})[/{color}]"
    )


def _build_section_table(
    result: DiffResult, kind: ChangeKind, max_value_width: int | None
) -> Table:
    items = section_items(result, kind)
    color = DiffColors.for_kind(kind)
    table = Table(border_style=DiffColors.BORDER)

    if kind == ChangeKind.CHANGED:
        headers = changed_headers(items)
        rows = changed_rows(items)
        for header in headers:
            if header == "Old Value":
                table.add_column(header, style=DiffColors.OLD_VALUE, max_width=max_value_width)
            elif header == "New Value":
                table.add_column(header, style=DiffColors.NEW_VALUE, max_width=max_value_width)
            else:
                table.add_column(header, style=DiffColors.LABEL, no_wrap=True)
    else:
        headers, rows = record_rows(items)
        for header in headers:
            table.add_column(header, style=color, max_width=max_value_width)

    for row in rows:
        table.add_row(*[escape(cell) for cell in row])

    return table


def display_comparison_summary(report: ComparisonReport, console: Console | None = None) -> None:
    """Display totals of added, removed, changed, and similar records.

    Args:
        report: Comparison report
        console: Rich console (created if None)
    """
    if console is None:
        console = Console()

    totals = report.get_summary()

    table = Table(title="🔍 Schema Comparison Summary", header_style=DiffColors.HEADER)
    table.add_column("Category", style=DiffColors.LABEL, no_wrap=True)
    for kind in ChangeKind:
        table.add_column(
            SECTION_TITLES[kind], justify="right", style=DiffColors.for_kind(kind)
        )

    for category, result in report.results().items():
        counts = result.counts()
        table.add_row(category.value, *[str(counts[kind.value]) for kind in ChangeKind])

    console.print(table)

    line = "   ".join(
        f"[{DiffColors.for_kind(kind)}]{SUMMARY_PREFIXES[kind]}{totals[kind.value]} "
        f"{SECTION_TITLES[kind]}[/{DiffColors.for_kind(kind)}]"
        for kind in ChangeKind
    )
    console.print(line)


def display_category(
    result: DiffResult,
    view: str = VIEW_DIFFERENCES,
    console: Console | None = None,
    max_value_width: int | None = None,
) -> None:
    """Display the sections of one category for a report view.

    Args:
        result: Diff result of the category
        view: ``differences`` (added/removed/changed) or ``similarities``
        console: Rich console (created if None)
        max_value_width: Optional width cap for value columns
    """
    if console is None:
        console = Console()

    title = f"📋 {result.category.value.upper()}"
    sections = [kind for kind in view_kinds(view) if section_items(result, kind)]

    if not sections:
        message = (
            f"No differences in {result.category.value}"
            if view == VIEW_DIFFERENCES
            else f"No similar {result.category.value}"
        )
        console.print(
            Panel.fit(
                message, title=title, style=DiffColors.EMPTY, border_style=DiffColors.EMPTY
            )
        )
        return

    console.print(Panel.fit(title, border_style=DiffColors.BORDER))
    for kind in sections:
        console.print(_section_heading(result, kind))
        console.print(_build_section_table(result, kind, max_value_width))
        console.print()


def display_report(
    report: ComparisonReport,
    view: str = VIEW_DIFFERENCES,
    categories: Iterable[Category] | None = None,
    console: Console | None = None,
    max_value_width: int | None = None,
) -> None:
    """Display the summary followed by each selected category.

    Args:
        report: Comparison report
        view: Report view
        categories: Categories to show (all if None)
        console: Rich console (created if None)
        max_value_width: Optional width cap for value columns
    """
    if console is None:
        console = Console()

    display_comparison_summary(report, console)
    console.print()

    selected = list(categories) if categories else list(Category)
    for category in selected:
        display_category(report.result(category), view, console, max_value_width)


def generate_report_text(
    report: ComparisonReport,
    view: str = VIEW_DIFFERENCES,
    categories: Iterable[Category] | None = None,
) -> str:
    """Generate text report of a schema comparison.

    Args:
        report: Comparison report
        view: Report view
        categories: Categories to include (all if None)

    Returns:
        Multi-line text report
    """
    totals = report.get_summary()
    lines = [
        "=" * 80,
        "Schema Comparison Report",
        "=" * 80,
        "",
        "SUMMARY:",
    ]
    lines.extend(
        f"  {SUMMARY_PREFIXES[kind]}{totals[kind.value]} {SECTION_TITLES[kind]}"
        for kind in ChangeKind
    )
    lines.append("")

    selected = list(categories) if categories else list(Category)
    for category in selected:
        result = report.result(category)
        lines.extend(["-" * 80, f"Category: {category.value.upper()}", "-" * 80])

        sections = [kind for kind in view_kinds(view) if section_items(result, kind)]
        if not sections:
            lines.extend(["  (nothing to report)", ""])
            continue

        for kind in sections:
            items = section_items(result, kind)
            lines.append(f"{SECTION_TITLES[kind]} ({len(items)}):")

            if kind == ChangeKind.CHANGED:
                headers = changed_headers(items)
                rows = changed_rows(items)
            else:
                headers, rows = record_rows(items)

            for row in rows:
                lines.append(
                    "  • " + ", ".join(f"{header}: {cell}" for header, cell in zip(headers, row))
                )
            lines.append("")

    lines.extend(["=" * 80, ""])

    return "\n".join(lines)


def save_report(
    report: ComparisonReport,
    output_path: str | Path,
    view: str = VIEW_DIFFERENCES,
    fmt: str = "text",
    categories: Iterable[Category] | None = None,
) -> Path:
    """Save a comparison report to file.

    Args:
        report: Comparison report
        output_path: Path to output file
        view: Report view (text format only)
        fmt: ``text`` or ``json``
        categories: Categories to include in the text format (all if None)

    Returns:
        Path of the written file
    """
    if fmt not in REPORT_FORMATS:
        raise ValueError(f"Report format must be one of: {', '.join(REPORT_FORMATS)}")

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "json":
        content = json.dumps(report.to_dict(), indent=2, default=str)
    else:
        content = generate_report_text(report, view, categories)

    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info("report_saved", path=str(path), format=fmt, view=view)

    return path
