"""CLI for the linecalc line calculator.

Usage:
    python -m linecalc run                    # Read commands from stdin until EOF
    python -m linecalc eval sum 5 5 6 8.5     # Process a single command
    python -m linecalc commands               # Show recognized keywords
"""

from __future__ import annotations

import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from linecalc.config import Settings, load_settings
from linecalc.logging_setup import configure_logging
from linecalc.models import AGGREGATES, Divide, Keyword
from linecalc.pipeline import process, process_lines
from linecalc.renderer import TEMPLATES

app = typer.Typer(
    name="linecalc",
    help="Line-oriented command calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _settings(verbose: bool, skip_blank: Optional[bool] = None) -> Settings:
    """Environment settings with CLI flags applied on top."""
    settings = load_settings()
    if verbose:
        settings = Settings(log_level="DEBUG", skip_blank=settings.skip_blank)
    if skip_blank is not None:
        settings = Settings(log_level=settings.log_level, skip_blank=skip_blank)
    configure_logging(settings.level_number, console)
    return settings


@app.command("run")
def cmd_run(
    skip_blank: Optional[bool] = typer.Option(
        None, "--skip-blank/--no-skip-blank", help="Ignore whitespace-only lines"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline stages to stderr"),
) -> None:
    """Read commands from stdin and print one result per line."""
    settings = _settings(verbose, skip_blank)
    for output in process_lines(sys.stdin, settings):
        typer.echo(output)


@app.command(
    "eval",
    context_settings={"ignore_unknown_options": True},
)
def cmd_eval(
    words: List[str] = typer.Argument(help="Command and operands (e.g., 'divide 4 5')"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline stages to stderr"),
) -> None:
    """Process a single command given on the command line."""
    _settings(verbose)
    output = process(" ".join(words))
    typer.echo(output)
    if output.startswith("Error: "):
        raise typer.Exit(1)


@app.command("commands")
def cmd_commands() -> None:
    """Show recognized command keywords."""
    table = Table(title="Commands", show_header=True, header_style="bold")
    table.add_column("Keyword", style="green", min_width=8)
    table.add_column("Operands", justify="right")
    table.add_column("Output")

    for keyword in Keyword:
        if keyword is Keyword.DIVIDE:
            arity, template = "2", TEMPLATES[Divide]
        else:
            arity, template = "1+", TEMPLATES[AGGREGATES[keyword]]
        table.add_row(keyword.value, arity, template)

    console.print()
    console.print(table)
    console.print()


if __name__ == "__main__":
    app()
