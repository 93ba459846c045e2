"""
Configuration management commands.

This module provides commands for validating and inspecting the
comparison configuration.
"""

from pathlib import Path

import click

from schema_compare.cli.context import CompareContext
from schema_compare.cli.decorators import handle_errors, pass_context
from schema_compare.cli.utils import echo_info, echo_success, print_table
from schema_compare.config import ComparisonConfig, config_to_yaml, load_config_from_yaml
from schema_compare.utils.logging import get_logger

logger = get_logger(__name__)


@click.group(name="config")
def config() -> None:
    """Configuration management commands."""
    pass


def _display_config_summary(settings: ComparisonConfig) -> None:
    """Display configuration summary."""
    rows = [
        [f"{category.value.title()} Key", spec.separator.join(spec.fields)]
        for category, spec in settings.keys.key_specs().items()
    ]
    rows.extend(
        [
            ["Schema Marker", settings.loader.schema_marker],
            ["Default View", settings.report.view],
            ["Console Log Level", settings.logging.level],
            ["Log File", settings.logging.file or "-"],
        ]
    )

    print_table("Configuration Summary", ["Setting", "Value"], rows)


@config.command(name="validate")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@handle_errors
def validate(config_file: Path) -> None:
    """Validate a configuration file.

    Examples:

        schema-compare config validate schema-compare.yaml
    """
    echo_info(f"Validating configuration: {config_file}")

    settings = load_config_from_yaml(config_file)

    click.echo()
    _display_config_summary(settings)

    click.echo()
    echo_success("Configuration is valid!")


@config.command(name="show")
@click.option("--yaml", "as_yaml", is_flag=True, help="Print the full configuration as YAML")
@pass_context
@handle_errors
def show(ctx: CompareContext, as_yaml: bool) -> None:
    """Display the effective configuration.

    Examples:

        schema-compare --config schema-compare.yaml config show --yaml
    """
    if as_yaml:
        click.echo(config_to_yaml(ctx.config))
        return

    _display_config_summary(ctx.config)
