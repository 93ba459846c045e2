"""
Decorators for CLI commands.

This module provides decorators for error handling and context passing.
"""

import functools
from collections.abc import Callable

import click

from schema_compare.cli.context import CompareContext
from schema_compare.exceptions import (
    ArchiveError,
    ConfigurationError,
    FormatError,
    SchemaParseError,
)
from schema_compare.utils.logging import get_logger, log_error

logger = get_logger(__name__)


def pass_context(f: Callable) -> Callable:
    """
    Decorator to pass CompareContext to command function.

    Usage:
        @click.command()
        @pass_context
        def my_command(ctx: CompareContext):
            print(ctx.config)
    """

    @click.pass_context
    @functools.wraps(f)
    def wrapper(click_ctx: click.Context, *args, **kwargs):
        compare_ctx: CompareContext = click_ctx.obj
        return f(compare_ctx, *args, **kwargs)

    return wrapper


def handle_errors(f: Callable) -> Callable:
    """
    Decorator to handle common errors in CLI commands.

    Any failure aborts the command with a single message; no partial
    results are printed.

    Exit codes:
        0: Success
        1: General error (or differences found with --fail-on-changes)
        2: Configuration error
        3: Archive/format error
        4: Schema parse error
    """

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)

        except (click.exceptions.Exit, click.ClickException):
            raise

        except ConfigurationError as e:
            logger.error("Configuration error", error=str(e))
            click.echo(f"Configuration Error: {e}", err=True)
            click.echo("\nPlease check your configuration file.", err=True)
            raise click.exceptions.Exit(2) from e

        except ArchiveError as e:
            logger.error("Archive error", error=str(e))
            click.echo(f"Archive Error: {e}", err=True)
            click.echo("\nPlease check that the input is a valid .zip export.", err=True)
            raise click.exceptions.Exit(3) from e

        except FormatError as e:
            logger.error("Format error", error=str(e))
            click.echo(f"Format Error: {e}", err=True)
            click.echo(
                "\nThe archive does not contain a schema document. "
                "Please check the file formats.",
                err=True,
            )
            raise click.exceptions.Exit(3) from e

        except SchemaParseError as e:
            logger.error("Schema parse error", error=str(e), member=e.member)
            click.echo(f"Parse Error: {e}", err=True)
            click.echo("\nThe schema document is not well-formed XML.", err=True)
            raise click.exceptions.Exit(4) from e

        except Exception as e:
            log_error(logger, e, context=f.__name__)
            click.echo(f"Unexpected Error: {e}", err=True)
            click.echo(
                "\nAn unexpected error occurred. Please check the logs for details.",
                err=True,
            )
            raise click.exceptions.Exit(1) from e

    return wrapper
