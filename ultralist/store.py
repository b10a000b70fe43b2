"""Read-only loading of todos from a ``.todos.json`` file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ultralist.models import Todo

_logger = logging.getLogger(__name__)

DEFAULT_TODOS_FILE = ".todos.json"


class TodoFileError(Exception):
    """Raised when a todos file cannot be read or decoded."""


def _todo_from_dict(data: dict[str, Any]) -> Todo:
    """Build a Todo from one JSON object.

    Notes are stored as a list; their position is used as the note id.
    """
    raw_notes = data.get("notes") or []
    return Todo(
        id=int(data.get("id", 0)),
        subject=str(data.get("subject") or ""),
        due=str(data.get("due") or ""),
        completed=bool(data.get("completed", False)),
        is_priority=bool(data.get("is_priority", False)),
        notes={i: str(note) for i, note in enumerate(raw_notes)},
    )


def load_todos(path: Path) -> list[Todo]:
    """Load all todos from a JSON file.

    Raises:
        TodoFileError: If the file is missing, unreadable, or not a JSON list
            of objects.
    """
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise TodoFileError(f"Todos file not found: {path}") from e
    except OSError as e:
        raise TodoFileError(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise TodoFileError(f"Invalid JSON in {path}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
        raise TodoFileError(f"Expected a list of todo objects in {path}")

    try:
        todos = [_todo_from_dict(d) for d in data]
    except (TypeError, ValueError) as e:
        raise TodoFileError(f"Invalid todo record in {path}: {e}") from e

    _logger.debug("Loaded %d todos from %s", len(todos), path)
    return todos
