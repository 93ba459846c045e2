"""Rendering of schema comparison reports."""

from schema_compare.reporting.schema_report import (
    display_category,
    display_comparison_summary,
    display_report,
    generate_report_text,
    save_report,
)

__all__ = [
    "display_category",
    "display_comparison_summary",
    "display_report",
    "generate_report_text",
    "save_report",
]
