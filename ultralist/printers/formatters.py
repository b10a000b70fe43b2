"""Cell formatting for todo rows.

Each function is pure: it maps todo fields to a ``rich.text.Text`` cell
using the palette it is given.
"""

from __future__ import annotations

from datetime import date

from rich.text import Text

from ultralist.utils.dates import (
    format_due_date,
    is_past_due,
    is_today,
    is_tomorrow,
    parse_due_date,
)
from ultralist.utils.patterns import TagKind, classify_token

from .styles import Palette

# Width of the due column; labels shorter than this are padded with spaces
DUE_WIDTH = 10

TAG_ROLES = {
    TagKind.PROJECT: "project",
    TagKind.CONTEXT: "context",
    TagKind.WORD: "word",
}


def format_id(todo_id: int, is_priority: bool, palette: Palette) -> Text:
    return Text(str(todo_id), style=palette.style("id", bold=is_priority))


def format_completed(completed: bool, palette: Palette) -> Text:
    return Text("[x]" if completed else "[ ]", style=palette.style("marker"))


def format_due(
    due: str,
    is_priority: bool,
    completed: bool,
    palette: Palette,
    today: date | None = None,
) -> Text:
    """Format the due date label for a todo.

    Today and tomorrow get a word label, everything else the weekday and
    date. Past dates on open todos use the overdue color. Priority todos
    get the bold variant of whichever style applies.
    """
    due_date = parse_due_date(due)
    if due_date is None:
        return Text(" " * DUE_WIDTH, style=palette.style("marker"))

    role = "due"
    if is_today(due_date, today):
        label = "today"
    elif is_tomorrow(due_date, today):
        label = "tomorrow"
    else:
        label = format_due_date(due_date)
        if is_past_due(due_date, today) and not completed:
            role = "overdue"

    return Text(label.ljust(DUE_WIDTH), style=palette.style(role, bold=is_priority))


def format_subject(subject: str, is_priority: bool, palette: Palette) -> Text:
    """Color project and context tags inside a subject.

    Splitting and joining both use a single space, so empty tokens from
    repeated spaces survive and the original spacing is kept.
    """
    result = Text()
    for i, word in enumerate(subject.split(" ")):
        if i:
            result.append(" ")
        role = TAG_ROLES[classify_token(word)]
        result.append(word, style=palette.style(role, bold=is_priority))
    return result
