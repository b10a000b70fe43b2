"""Screen printer: grouped todos rendered as an aligned, colored table."""

from __future__ import annotations

import logging
from datetime import date

from rich.console import Console
from rich.text import Text

from ultralist.models import GroupedTodos, Todo

from .formatters import format_completed, format_due, format_id, format_subject
from .styles import DEFAULT_PALETTE, Palette
from .table import TableWriter

_logger = logging.getLogger(__name__)


class ScreenPrinter:
    """Print grouped todos to a terminal.

    Args:
        console: Console to write to (defaults to stdout without highlighting).
        palette: Colors for each part of a row.
        today: Date used for the today/tomorrow/overdue labels. Defaults to
            the current date at print time.
    """

    def __init__(
        self,
        console: Console | None = None,
        palette: Palette = DEFAULT_PALETTE,
        today: date | None = None,
    ) -> None:
        self.console = console if console is not None else Console(highlight=False)
        self.palette = palette
        self.today = today

    def print(self, grouped: GroupedTodos, print_notes: bool = False) -> bool:
        """Print every group in key order, followed by a blank line each.

        Returns True when the output was written, False if the stream failed.
        """
        today = self.today or date.today()
        table = TableWriter()
        table.add_line()
        for key in grouped.sorted_keys:
            table.add_line(Text(key, style=self.palette.style("group")))
            for todo in grouped.groups[key]:
                self._add_todo(table, todo, print_notes, today)
            table.add_line()

        _logger.debug(
            "Printing %d todos in %d groups", len(grouped), len(grouped.groups)
        )
        return table.print(self.console)

    def _add_todo(
        self, table: TableWriter, todo: Todo, print_notes: bool, today: date
    ) -> None:
        p = self.palette
        table.add_line(
            format_id(todo.id, todo.is_priority, p),
            format_completed(todo.completed, p),
            format_due(todo.due, todo.is_priority, todo.completed, p, today=today),
            format_subject(todo.subject, todo.is_priority, p),
        )
        if not print_notes:
            return
        for note_id, note in todo.sorted_notes:
            table.add_line(
                Text("  ") + Text(str(note_id), style=p.style("note_id")),
                Text("", style=p.style("marker")),
                Text("", style=p.style("marker")),
                Text("", style=p.style("marker")),
                Text(note, style=p.style("note")),
            )
