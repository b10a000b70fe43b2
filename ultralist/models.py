"""Data models for ultralist."""

from __future__ import annotations

from dataclasses import dataclass, field

from ultralist.utils.patterns import extract_contexts, extract_projects


@dataclass
class Todo:
    """A single todo item."""

    id: int
    subject: str
    due: str = ""  # YYYY-MM-DD, empty when there is no due date
    completed: bool = False
    is_priority: bool = False
    notes: dict[int, str] = field(default_factory=dict)  # note id -> text

    @property
    def projects(self) -> list[str]:
        """Project tags found in the subject, without the ``+`` sigil."""
        return extract_projects(self.subject)

    @property
    def contexts(self) -> list[str]:
        """Context tags found in the subject, without the ``@`` sigil."""
        return extract_contexts(self.subject)

    @property
    def sorted_notes(self) -> list[tuple[int, str]]:
        """Notes as ``(id, text)`` pairs in ascending id order."""
        return sorted(self.notes.items())


@dataclass
class GroupedTodos:
    """Todos bucketed by a group key such as a project or context name.

    Todo order inside each group is kept exactly as given.
    """

    groups: dict[str, list[Todo]] = field(default_factory=dict)

    @property
    def sorted_keys(self) -> list[str]:
        """Group keys in ascending lexical order."""
        return sorted(self.groups)

    def __len__(self) -> int:
        return sum(len(todos) for todos in self.groups.values())
