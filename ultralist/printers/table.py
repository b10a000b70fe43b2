"""Column-aligned output of styled rows."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.text import Text

_logger = logging.getLogger(__name__)


class TableWriter:
    """Buffer rows of cells and print them with aligned columns.

    The last cell of a row is never padded and does not count towards any
    column width, so single-cell rows (group headers) and blank rows leave
    the columns of the todo rows untouched. Widths are measured across all
    buffered rows when the table is printed.
    """

    def __init__(self, padding: int = 2) -> None:
        self.padding = padding
        self.rows: list[list[Text]] = []

    def add_line(self, *cells: Text | str) -> None:
        self.rows.append([Text(c) if isinstance(c, str) else c for c in cells])

    def _column_widths(self) -> list[int]:
        widths: list[int] = []
        for row in self.rows:
            for i, cell in enumerate(row[:-1]):
                if i == len(widths):
                    widths.append(0)
                widths[i] = max(widths[i], cell.cell_len)
        return widths

    def render_lines(self) -> list[Text]:
        """Join the buffered rows into padded lines."""
        widths = self._column_widths()
        lines = []
        for row in self.rows:
            line = Text()
            for i, cell in enumerate(row):
                line.append_text(cell)
                if i < len(row) - 1:
                    line.append(" " * (widths[i] - cell.cell_len + self.padding))
            lines.append(line)
        return lines

    def print(self, console: Console) -> bool:
        """Write every buffered row to the console in one pass.

        Rows are rendered into a capture and written to the console's file
        directly, so stream errors surface here as OSError. Returns False if
        the stream failed; the error is logged rather than raised.
        """
        lines = self.render_lines()
        with console.capture() as capture:
            for line in lines:
                console.print(line, soft_wrap=True)
        try:
            console.file.write(capture.get())
            console.file.flush()
        except OSError as e:
            _logger.error("Failed to write todo table: %s", e)
            return False
        return True
