# deepvalidate/cli/cli.py

"""Command-line interface for running the bundled validation examples."""

import logging
import sys

import click

from deepvalidate import __version__, errors, validate
from deepvalidate.cli.output import Style
from deepvalidate.env import get_log_level
from deepvalidate.examples import EXAMPLES

logger = logging.getLogger(__name__)


def set_debug_logging(debug: bool) -> None:
    """Configure logging for the deepvalidate package."""
    package_logger = logging.getLogger("deepvalidate")
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
        package_logger.addHandler(handler)

    if debug:
        package_logger.setLevel(logging.DEBUG)
        click.echo(Style.notice("Debug mode enabled - logging=DEBUG"), err=True)
    else:
        try:
            level = get_log_level()
        except ValueError as e:
            raise click.UsageError(str(e)) from e
        package_logger.setLevel(level)


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug mode with verbose logging")
def cli(debug: bool) -> None:
    """Deep validation of nested Python values."""
    set_debug_logging(debug)


@cli.group()
def examples() -> None:
    """Run the bundled examples."""
    pass


@examples.command("list")
def list_examples() -> None:
    """List available examples."""
    for name in EXAMPLES:
        click.echo(name)


@examples.command("run")
@click.argument("name")
def run_example(name: str) -> None:
    """Validate the NAME example and print every failure found."""
    build = EXAMPLES.get(name)
    if build is None:
        available = ", ".join(EXAMPLES)
        raise click.BadParameter(
            f"Unknown example '{name}' (available: {available})", param_hint="NAME"
        )

    logger.debug("Running example '%s'", name)
    failures = errors(validate(build()))
    if not failures:
        click.echo(Style.valid(f"Example '{name}' is valid"))
        return

    click.echo(Style.invalid(f"Example '{name}'", len(failures)))
    for failure in failures:
        click.echo(Style.failure(str(failure)))
    sys.exit(1)
