"""Typer-based CLI application for `greeter`."""
from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from .__about__ import __version__
from .config import Settings, get_settings
from .greeting import DEFAULT_GREETING, greet
from .logging_setup import configure_logging

app = typer.Typer(help="greeter command-line interface")
console = Console()
err_console = Console(stderr=True)

#: (description, positional arguments to ``greet``, expected greeting) checked by ``selftest``.
SELF_CHECKS: list[tuple[str, tuple[Optional[str], ...], str]] = [
    ("Basic greeting", (), DEFAULT_GREETING),
    ("Personalized greeting", ("Alice",), "Hello, Alice!"),
    ("Null name", (None,), DEFAULT_GREETING),
    ("Empty name", ("",), DEFAULT_GREETING),
    ("Whitespace name", ("   ",), DEFAULT_GREETING),
]


def version_callback(value: bool) -> None:
    """Print the package version and exit if requested.

    Args:
        value: Whether the ``--version`` flag was provided.
    """
    if value:
        console.print(f"greeter {__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(  # noqa: UP007 - Optional for clarity in help
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    log_level: Optional[str] = typer.Option(  # noqa: UP007
        None,
        "--log-level",
        help="Override GREETER_LOG_LEVEL for this run.",
    ),
) -> None:
    """Root command callback.

    Loads settings and configures logging before any subcommand runs.

    Args:
        ctx: Typer context object.
        version: If provided, prints version and exits.
        log_level: Optional log level overriding the configured one.
    """
    try:
        settings = get_settings()
        if log_level is not None:
            settings = Settings.model_validate({**settings.model_dump(), "log_level": log_level})
    except ValidationError as exc:
        err_console.print(f"Invalid configuration: {exc}", markup=False)
        raise typer.Exit(2) from exc

    configure_logging(settings.log_level)
    ctx.ensure_object(dict)


@app.command()
def hello(
    name: Optional[str] = typer.Argument(None, help="Name to greet"),  # noqa: UP007
) -> None:
    """Greet a user by name, or the world when no name is given.

    Args:
        name: The name to greet.
    """
    console.print(greet(name), markup=False, highlight=False)


@app.command()
def demo() -> None:
    """Print the default and a personalized greeting."""
    console.print(greet(), markup=False, highlight=False)
    console.print(greet("Alice"), markup=False, highlight=False)


@app.command()
def selftest() -> None:
    """Run the built-in greeting checks."""
    for number, (description, args, expected) in enumerate(SELF_CHECKS, start=1):
        if greet(*args) != expected:
            err_console.print(f"✗ Check {number} failed: {description}", markup=False)
            raise typer.Exit(1)
        console.print(f"✓ Check {number} passed: {description}", markup=False, highlight=False)

    console.print()
    console.print("All checks passed!", markup=False, highlight=False)


if __name__ == "__main__":  # pragma: no cover
    app()
