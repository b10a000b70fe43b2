"""Command line interface for ultralist."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from ultralist import __version__
from ultralist.config import ConfigError, get_config
from ultralist.grouping import GROUP_BY_CHOICES, group_todos
from ultralist.printers import ScreenPrinter
from ultralist.store import TodoFileError, load_todos
from ultralist.utils.dates import parse_fuzzy_date

# Stderr console for errors (doesn't interfere with piped output)
stderr_console = Console(stderr=True, highlight=False)


def _fail(message: str) -> NoReturn:
    stderr_console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__, prog_name="ultralist")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """Show todo lists grouped by project or context."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )


@cli.command("list")
@click.argument(
    "todos_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--group-by",
    "-g",
    type=click.Choice(GROUP_BY_CHOICES),
    help="Group todos by project, context, or not at all",
)
@click.option(
    "--notes/--no-notes",
    "-n",
    default=None,
    help="Show notes attached to each todo",
)
@click.option("--today", "today_text", help="Treat this date as today")
@click.option("--no-color", is_flag=True, help="Disable colored output")
def list_todos(
    todos_file: Path | None,
    group_by: str | None,
    notes: bool | None,
    today_text: str | None,
    no_color: bool,
) -> None:
    """List todos from TODOS_FILE (defaults to the configured todos file)."""
    try:
        config = get_config()
        palette = config.palette
    except (ConfigError, ValueError) as e:
        _fail(str(e))

    today = None
    if today_text:
        today = parse_fuzzy_date(today_text)
        if today is None:
            raise click.BadParameter(
                f"Could not parse date '{today_text}'", param_hint="--today"
            )

    try:
        todos = load_todos(todos_file or config.todos_file)
    except TodoFileError as e:
        _fail(str(e))

    grouped = group_todos(todos, group_by or config.group_by)
    print_notes = config.print_notes if notes is None else notes

    console = (
        Console(highlight=False, color_system=None)
        if no_color
        else Console(highlight=False)
    )
    printer = ScreenPrinter(console=console, palette=palette, today=today)
    if not printer.print(grouped, print_notes=print_notes):
        raise SystemExit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
