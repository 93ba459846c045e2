"""Schema comparison CLI command."""

from pathlib import Path

import click

from schema_compare.cli.context import CompareContext
from schema_compare.cli.decorators import handle_errors, pass_context
from schema_compare.cli.utils import (
    console,
    echo_info,
    echo_success,
    echo_warning,
    format_file_size,
    step_progress,
    validate_archive_path,
)
from schema_compare.loader.archive import load_snapshot
from schema_compare.reporting.schema_report import (
    REPORT_FORMATS,
    VIEWS,
    display_report,
    save_report,
)
from schema_compare.schema.models import Category
from schema_compare.utils.logging import get_logger

logger = get_logger(__name__)


@click.command(name="compare")
@click.argument("old_archive", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("new_archive", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--view",
    type=click.Choice(VIEWS, case_sensitive=False),
    default=None,
    help="Show differences or similarities (default from configuration: differences)",
)
@click.option(
    "--category",
    "categories",
    type=click.Choice([category.value for category in Category], case_sensitive=False),
    multiple=True,
    help="Only display these categories (repeatable)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Save the report to this file",
)
@click.option(
    "--format",
    "report_format",
    type=click.Choice(REPORT_FORMATS, case_sensitive=False),
    default="text",
    show_default=True,
    help="Format of the saved report",
)
@click.option(
    "--fail-on-changes",
    is_flag=True,
    help="Exit with status 1 when anything was added, removed, or changed",
)
@pass_context
@handle_errors
def compare(
    ctx: CompareContext,
    old_archive: Path,
    new_archive: Path,
    view: str | None,
    categories: tuple[str, ...],
    output: Path | None,
    report_format: str,
    fail_on_changes: bool,
) -> None:
    """Compare two schema archives (OLD_ARCHIVE -> NEW_ARCHIVE).

    Each archive must be a .zip export containing a *_schema.xml document.

    Examples:

        schema-compare compare v1.zip v2.zip

        schema-compare compare v1.zip v2.zip --category columns --view similarities

        schema-compare compare v1.zip v2.zip -o diff.json --format json
    """
    validate_archive_path(old_archive)
    validate_archive_path(new_archive)

    settings = ctx.config
    effective_view = (view or settings.report.view).lower()
    selected = [Category(value.lower()) for value in categories] or None

    logger.info(
        "comparison_requested",
        old_archive=str(old_archive),
        new_archive=str(new_archive),
        view=effective_view,
    )

    for label, path in (("Old", old_archive), ("New", new_archive)):
        echo_info(f"{label}: {path.name} ({format_file_size(path.stat().st_size)})")

    # Both snapshots are loaded before comparing so a failure leaves no partial report
    with step_progress("Loading schemas"):
        old_snapshot = load_snapshot(old_archive, settings.loader.schema_marker)
        new_snapshot = load_snapshot(new_archive, settings.loader.schema_marker)

    report = ctx.comparator.compare(old_snapshot, new_snapshot)

    click.echo()
    display_report(
        report,
        view=effective_view,
        categories=selected,
        console=console,
        max_value_width=settings.report.max_value_width,
    )

    if output:
        saved = save_report(
            report,
            output,
            view=effective_view,
            fmt=report_format.lower(),
            categories=selected,
        )
        echo_success(f"Report saved to {saved}")

    if report.has_differences:
        if fail_on_changes:
            echo_warning("Schema differences found")
            raise click.exceptions.Exit(1)
    else:
        echo_success("Schemas are identical")
