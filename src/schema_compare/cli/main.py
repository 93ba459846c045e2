"""
Main CLI entry point for Schema Compare.

This module provides the command-line interface for comparing two
exported schema archives.
"""

import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from schema_compare import __version__
from schema_compare.cli.commands import compare as compare_commands
from schema_compare.cli.commands import config as config_commands
from schema_compare.cli.context import CompareContext
from schema_compare.config import ComparisonConfig, load_config_from_yaml
from schema_compare.exceptions import ConfigurationError
from schema_compare.utils.logging import configure_logging, get_logger

# Load environment variables from .env file
load_dotenv()

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="schema-compare")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
    envvar="SCHEMA_COMPARE_CONFIG",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Set console logging level (overrides the configuration file)",
    envvar="SCHEMA_COMPARE_LOG_LEVEL",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write logs to this file",
    envvar="SCHEMA_COMPARE_LOG_FILE",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    log_level: str | None,
    log_file: Path | None,
) -> None:
    """Schema Compare - Diff two versions of an exported schema.

    Compares the tables, columns, and joins of two schema archives and
    reports what was added, removed, changed, or left unchanged.

    Examples:

        # Show differences between two exports
        schema-compare compare old.zip new.zip

        # Show what stayed the same
        schema-compare compare old.zip new.zip --view similarities

        # Save a JSON report and fail when anything changed
        schema-compare compare old.zip new.zip -o report.json --format json --fail-on-changes
    """
    try:
        settings = load_config_from_yaml(config) if config else ComparisonConfig()
    except ConfigurationError as e:
        click.echo(f"Configuration Error: {e}", err=True)
        raise click.exceptions.Exit(2) from e

    effective_level = log_level or settings.logging.level
    effective_log_file = str(log_file) if log_file else settings.logging.file

    configure_logging(
        level=effective_level,
        log_format=settings.logging.format,
        log_file=effective_log_file,
        file_level=settings.logging.file_level,
    )

    ctx.obj = CompareContext(
        config_path=config,
        log_level=effective_level,
        log_file=Path(effective_log_file) if effective_log_file else None,
        settings=settings,
    )

    logger.debug(
        "CLI initialized",
        config=str(config) if config else None,
        log_level=effective_level,
    )


# Register commands
cli.add_command(compare_commands.compare)
cli.add_command(config_commands.config)


def main() -> int:
    """Main entry point for CLI."""
    try:
        # Without standalone mode click returns the code of an Exit instead of raising it
        result = cli(standalone_mode=False)
        return result if isinstance(result, int) else 0
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except Exception as e:
        logger.error("Unexpected error", error=str(e), exc_info=True)
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
