#!/usr/bin/env python3
"""
stk - runstreak CLI

A terminal-native CLI for tracking your running streak.

Usage:
    stk                  # Show current streak
    stk stats            # Totals per sport
    stk runs             # List activities
    stk pace 4:30        # Pace calculator
    stk step 4:30 -c 0   # Step the minutes of a pace
"""

import typer
from rich.console import Console

from cli import __version__
from cli.commands import pace, stats
from shared.config import get_settings
from shared.logging_config import configure_logging

# Create the main app
app = typer.Typer(
    name="stk",
    help="Track your running streak from the terminal.",
    no_args_is_help=False,
    add_completion=True,
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"stk version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, help="Show version"
    ),
) -> None:
    """
    stk - Track your running streak from the terminal.

    Run without arguments to see your current streak.
    """
    configure_logging(get_settings().log_level)
    if ctx.invoked_subcommand is None:
        # Default action: show streak
        stats.streak(file=None, today=None, json_output=False)


# Register commands directly on the app
app.command(name="streak")(stats.streak)
app.command(name="stats")(stats.overall)
app.command(name="runs")(stats.list_runs)
app.command(name="pace")(pace.pace)
app.command(name="step")(pace.step)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
