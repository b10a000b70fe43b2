"""Tests for ultralist.printers.formatters and styles."""

from __future__ import annotations

from datetime import date

import pytest
from rich.style import Style

from ultralist.printers.formatters import (
    DUE_WIDTH,
    format_completed,
    format_due,
    format_id,
    format_subject,
)
from ultralist.printers.styles import DEFAULT_PALETTE, Palette

TODAY = date(2024, 6, 15)
P = DEFAULT_PALETTE


class TestPalette:
    """Tests for the Palette style table."""

    def test_plain_and_bold_variants(self):
        assert P.style("due") == Style(color="blue")
        assert P.style("due", bold=True) == Style(color="blue", bold=True)

    def test_from_colors_overrides(self):
        palette = Palette.from_colors({"project": "green", "overdue": "#ff0000"})
        assert palette.project == "green"
        assert palette.overdue == "#ff0000"
        assert palette.context == "red"

    def test_unknown_role(self):
        with pytest.raises(ValueError, match="Unknown color role"):
            Palette.from_colors({"tags": "green"})

    def test_invalid_color(self):
        with pytest.raises(ValueError, match="Invalid color"):
            Palette.from_colors({"project": "not-a-color"})


class TestFormatIdAndCompleted:
    """Tests for format_id and format_completed."""

    def test_id(self):
        text = format_id(42, False, P)
        assert text.plain == "42"
        assert text.style == P.style("id")

    def test_priority_id_is_bold(self):
        assert format_id(42, True, P).style == P.style("id", bold=True)

    def test_completed_marker(self):
        assert format_completed(True, P).plain == "[x]"
        assert format_completed(False, P).plain == "[ ]"


class TestFormatDue:
    """Tests for format_due."""

    def test_no_due_date(self):
        text = format_due("", False, False, P, today=TODAY)
        assert text.plain == " " * DUE_WIDTH

    def test_today(self):
        text = format_due("2024-06-15", False, False, P, today=TODAY)
        assert text.plain == "today     "
        assert text.style == P.style("due")

    def test_tomorrow(self):
        text = format_due("2024-06-16", False, False, P, today=TODAY)
        assert text.plain == "tomorrow  "
        assert text.style == P.style("due")

    def test_overdue_open(self):
        text = format_due("2024-06-10", False, False, P, today=TODAY)
        assert text.plain == "Mon Jun 10"
        assert text.style == P.style("overdue")

    def test_overdue_completed_is_neutral(self):
        text = format_due("2024-06-10", False, True, P, today=TODAY)
        assert text.plain == "Mon Jun 10"
        assert text.style == P.style("due")

    def test_future(self):
        text = format_due("2024-07-01", False, False, P, today=TODAY)
        assert text.plain == "Mon Jul 01"
        assert text.style == P.style("due")

    @pytest.mark.parametrize(
        ("due", "completed", "role"),
        [
            ("2024-06-15", False, "due"),
            ("2024-06-16", False, "due"),
            ("2024-06-10", False, "overdue"),
            ("2024-06-10", True, "due"),
            ("2024-07-01", False, "due"),
        ],
    )
    def test_priority_uses_bold_variant(self, due: str, completed: bool, role: str):
        plain = format_due(due, False, completed, P, today=TODAY)
        bold = format_due(due, True, completed, P, today=TODAY)
        assert bold.plain == plain.plain
        assert bold.style == P.style(role, bold=True)

    def test_labels_are_fixed_width(self):
        for due in ("", "2024-06-15", "2024-06-16", "2024-06-10"):
            assert len(format_due(due, False, False, P, today=TODAY).plain) == DUE_WIDTH

    def test_malformed_date_renders(self):
        text = format_due("someday", False, False, P, today=TODAY)
        assert text.plain == "Mon Jan 01"
        assert text.style == P.style("overdue")

    def test_defaults_to_current_date(self, fixed_today: date):
        assert format_due("2024-06-15", False, False, P).plain == "today     "


class TestFormatSubject:
    """Tests for format_subject."""

    def _styles(self, text) -> list[tuple[str, Style]]:
        return [(text.plain[s.start : s.end], s.style) for s in text.spans]

    def test_tags_colored(self):
        text = format_subject("Buy +Groceries @store", False, P)
        assert text.plain == "Buy +Groceries @store"
        assert self._styles(text) == [
            ("Buy", P.style("word")),
            ("+Groceries", P.style("project")),
            ("@store", P.style("context")),
        ]

    def test_priority_is_bold(self):
        text = format_subject("Buy +Groceries @store", True, P)
        assert self._styles(text) == [
            ("Buy", P.style("word", bold=True)),
            ("+Groceries", P.style("project", bold=True)),
            ("@store", P.style("context", bold=True)),
        ]

    def test_project_wins_over_context(self):
        text = format_subject("+Work@home", False, P)
        assert self._styles(text) == [("+Work@home", P.style("project"))]

    def test_spacing_preserved(self):
        assert format_subject("a  b   c", False, P).plain == "a  b   c"
        assert format_subject(" leading", False, P).plain == " leading"

    def test_empty_subject(self):
        assert format_subject("", False, P).plain == ""
