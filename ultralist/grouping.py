"""Grouping of todos by project, by context, or into one bucket."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ultralist.models import GroupedTodos, Todo

NO_PROJECTS_KEY = "No projects"
NO_CONTEXTS_KEY = "No contexts"
ALL_KEY = "all"

GROUP_BY_CHOICES = ("project", "context", "none")


def _group_by_tags(
    todos: Iterable[Todo], get_tags: Callable[[Todo], list[str]], fallback: str
) -> GroupedTodos:
    groups: dict[str, list[Todo]] = {}
    for todo in todos:
        tags = get_tags(todo) or [fallback]
        for tag in tags:
            groups.setdefault(tag, []).append(todo)
    return GroupedTodos(groups=groups)


def group_by_project(todos: Iterable[Todo]) -> GroupedTodos:
    """Group todos by project. A todo with several projects lands in each."""
    return _group_by_tags(todos, lambda t: t.projects, NO_PROJECTS_KEY)


def group_by_context(todos: Iterable[Todo]) -> GroupedTodos:
    """Group todos by context. A todo with several contexts lands in each."""
    return _group_by_tags(todos, lambda t: t.contexts, NO_CONTEXTS_KEY)


def group_all(todos: Iterable[Todo]) -> GroupedTodos:
    """Put every todo into a single group."""
    return GroupedTodos(groups={ALL_KEY: list(todos)})


def group_todos(todos: Iterable[Todo], by: str = "project") -> GroupedTodos:
    """Group todos using one of ``GROUP_BY_CHOICES``."""
    if by == "project":
        return group_by_project(todos)
    elif by == "context":
        return group_by_context(todos)
    elif by == "none":
        return group_all(todos)
    raise ValueError(
        f"Invalid grouping '{by}'. Valid: {', '.join(GROUP_BY_CHOICES)}"
    )
