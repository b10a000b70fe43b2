"""Shared fixtures for ultralist tests."""

from __future__ import annotations

import io
from collections.abc import Callable, Generator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from ultralist import config as config_module
from ultralist.models import GroupedTodos, Todo

# Fixed "today" used across rendering tests (a Saturday)
TODAY = date(2024, 6, 15)


@pytest.fixture
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> date:
    """Fix date.today() to a known value for deterministic tests."""

    class MockDate(date):
        @classmethod
        def today(cls) -> date:
            return TODAY

    monkeypatch.setattr("ultralist.utils.dates.date", MockDate)
    monkeypatch.setattr("ultralist.printers.screen.date", MockDate)
    return TODAY


@pytest.fixture
def plain_console() -> Console:
    """Console writing uncolored text to an in-memory buffer."""
    return Console(
        file=io.StringIO(), color_system=None, width=200, highlight=False
    )


@pytest.fixture
def color_console() -> Console:
    """Console writing ANSI-colored text to an in-memory buffer."""
    return Console(
        file=io.StringIO(),
        color_system="standard",
        force_terminal=True,
        width=200,
        highlight=False,
    )


@pytest.fixture
def console_output() -> Callable[[Console], str]:
    """Return everything written to an in-memory console."""

    def _output(console: Console) -> str:
        return console.file.getvalue()

    return _output


@pytest.fixture
def sample_grouped() -> GroupedTodos:
    """A few groups with a mix of due dates, priorities and notes."""
    return GroupedTodos(
        groups={
            "work": [
                Todo(id=3, subject="Ship release +Work", due="2024-06-15"),
                Todo(
                    id=12,
                    subject="Plan offsite +Work @office",
                    due="2024-06-10",
                    is_priority=True,
                    notes={1: "book rooms", 0: "ask Sam"},
                ),
            ],
            "home": [
                Todo(id=7, subject="Fix sink @home", due="2024-06-16", completed=True),
            ],
            "errands": [
                Todo(id=1, subject="Buy +Groceries @store"),
            ],
        }
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path]:
    """Point ULTRALIST_CONFIG at a fresh path and clear the cached config."""
    config_path = tmp_path / "config.yaml"
    monkeypatch.setenv("ULTRALIST_CONFIG", str(config_path))
    config_module.reset_config()
    yield config_path
    config_module.reset_config()
