"""Due date parsing and comparison utilities."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta

from dateutil import parser as dateutil_parser

_logger = logging.getLogger(__name__)

# Storage format for due dates
DUE_DATE_FORMAT = "%Y-%m-%d"

# Display format for due dates that are not today/tomorrow, e.g. "Mon Jan 02"
DUE_DISPLAY_FORMAT = "%a %b %d"

# Named date shortcuts
NAMED_DATES: dict[str, Callable[[], date]] = {
    "today": lambda: date.today(),
    "yesterday": lambda: date.today() - timedelta(days=1),
    "tomorrow": lambda: date.today() + timedelta(days=1),
}


def parse_due_date(text: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` due date.

    Returns None when there is no due date. A malformed value never raises:
    it yields ``date.min`` so the todo still renders.
    """
    if not text:
        return None
    try:
        return datetime.strptime(text, DUE_DATE_FORMAT).date()
    except ValueError:
        _logger.debug("Malformed due date %r, using %s", text, date.min)
        return date.min


def is_today(due: date, today: date | None = None) -> bool:
    """Check if a due date falls on today."""
    if today is None:
        today = date.today()
    return due == today


def is_tomorrow(due: date, today: date | None = None) -> bool:
    """Check if a due date falls on the day after today."""
    if today is None:
        today = date.today()
    return due == today + timedelta(days=1)


def is_past_due(due: date, today: date | None = None) -> bool:
    """Check if a due date is strictly before today."""
    if today is None:
        today = date.today()
    return due < today


def format_due_date(due: date) -> str:
    """Format a due date as weekday, month and day (e.g. ``Mon Jan 02``)."""
    return due.strftime(DUE_DISPLAY_FORMAT)


def parse_fuzzy_date(text: str) -> date | None:
    """Parse a fuzzy date expression into a date object.

    Supports:
    - Named dates: "today", "yesterday", "tomorrow"
    - ISO format: "2025-11-20"
    - Natural language: "nov 20", "november 20 2025"

    Returns None if parsing fails.
    """
    if not text:
        return None

    text = text.strip().lower()
    if not text:
        return None

    if text in NAMED_DATES:
        return NAMED_DATES[text]()

    try:
        parsed = dateutil_parser.parse(text, dayfirst=False)
        return parsed.date()
    except (ValueError, OverflowError):
        pass

    return None
