"""Command-line entry point.

`randpass` prints one password of 16 characters; `randpass COUNT LENGTH`
prints COUNT passwords of LENGTH characters, one per line. Every failure exits
with status 1.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, List, Optional

import click
import typer
from typer.core import TyperCommand

from adapters.entropy_sources import build_entropy_source
from cli.arguments import parse_arguments
from cli.ui_components import build_error_console, print_error, print_usage
from core.config import GeneratorSettings
from core.errors import PasswordGenError, UsageError
from core.logging_utils import get_logger, setup_logging
from core.services.password_pipeline import generate_passwords

app = typer.Typer(add_completion=False, help="Generate random passwords from the OS entropy source.")

logger = get_logger("cli")


class PasswordCommand(TyperCommand):
    """Click command that reports its own usage errors and exits with status 1 on any failure."""

    def main(self, *args: Any, standalone_mode: bool = True, **kwargs: Any) -> Any:
        try:
            rv = super().main(*args, standalone_mode=False, **kwargs)
        except click.exceptions.ClickException as exc:
            print_error(build_error_console(), exc.format_message())
            rv = 1
        except click.exceptions.Abort:
            print_error(build_error_console(), "aborted")
            rv = 1

        exit_code = rv if isinstance(rv, int) else 0
        if not standalone_mode:
            return exit_code
        sys.exit(exit_code)


@app.command(
    cls=PasswordCommand,
    context_settings={"ignore_unknown_options": True},
)
def generate(
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="[COUNT LENGTH]",
        show_default=False,
        help="Number of passwords (1-10) and characters per password (1-256).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log entropy reads to stderr."),
    device: Optional[Path] = typer.Option(
        None,
        "--device",
        help="Read entropy from this device file (e.g. /dev/urandom) instead of os.urandom.",
    ),
) -> None:
    """Generate random passwords."""

    setup_logging(verbose)
    console = build_error_console()

    try:
        request = parse_arguments(list(args or []))
    except UsageError as exc:
        logger.debug("usage error: %s", exc)
        print_usage(console)
        raise typer.Exit(code=exc.exit_code)
    except PasswordGenError as exc:
        print_error(console, str(exc))
        raise typer.Exit(code=exc.exit_code)

    settings = GeneratorSettings(entropy_device=device)
    source = build_entropy_source(settings)
    try:
        source.check()
        for password in generate_passwords(request, source, settings):
            typer.echo(password)
    except PasswordGenError as exc:
        logger.debug("generation aborted", exc_info=True)
        print_error(console, str(exc))
        raise typer.Exit(code=exc.exit_code)


def run() -> None:
    app()
