"""Regex patterns for recognizing tags inside todo subjects.

Project tags are written ``+name`` and context tags ``@name``, where the name
is one or more letters, digits or underscores (Unicode letters included).
"""

from __future__ import annotations

import re
from enum import Enum

# Project tag: "+" followed by word characters (letters, digits, underscore)
PROJECT_PATTERN = re.compile(r"\+(\w+)")

# Context tag: "@" followed by word characters
CONTEXT_PATTERN = re.compile(r"@(\w+)")


class TagKind(Enum):
    """Classification of a single subject token."""

    PROJECT = "project"
    CONTEXT = "context"
    WORD = "word"


def classify_token(token: str) -> TagKind:
    """Classify one whitespace-delimited token of a subject.

    The pattern only has to occur somewhere in the token, and project tags
    win over context tags, so ``+Work@home`` is a project tag.
    """
    if PROJECT_PATTERN.search(token):
        return TagKind.PROJECT
    if CONTEXT_PATTERN.search(token):
        return TagKind.CONTEXT
    return TagKind.WORD


def _unique(names: list[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result


def extract_projects(subject: str) -> list[str]:
    """Return project names in a subject, without the ``+`` sigil."""
    return _unique(PROJECT_PATTERN.findall(subject))


def extract_contexts(subject: str) -> list[str]:
    """Return context names in a subject, without the ``@`` sigil."""
    return _unique(CONTEXT_PATTERN.findall(subject))
