"""Style table used when rendering todos.

Every formatter takes a ``Palette`` explicitly instead of reaching for
module-level color objects, so tests can render with any palette and any
console.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from rich.color import Color, ColorParseError
from rich.style import Style


@dataclass(frozen=True)
class Palette:
    """Color for each semantic role; bold variants are derived on demand."""

    group: str = "cyan"
    id: str = "yellow"
    marker: str = "white"
    due: str = "blue"
    overdue: str = "red"
    project: str = "magenta"
    context: str = "red"
    word: str = "white"
    note_id: str = "cyan"
    note: str = "white"

    @classmethod
    def roles(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_colors(cls, colors: dict[str, str]) -> Palette:
        """Build a palette from role -> color overrides.

        Raises:
            ValueError: On an unknown role or a color Rich cannot parse.
        """
        valid_roles = cls.roles()
        for role, color in colors.items():
            if role not in valid_roles:
                raise ValueError(
                    f"Unknown color role '{role}'. Valid: {', '.join(valid_roles)}"
                )
            try:
                Color.parse(color)
            except ColorParseError as e:
                raise ValueError(f"Invalid color '{color}' for '{role}'") from e
        return replace(cls(), **colors)

    def style(self, role: str, bold: bool = False) -> Style:
        """Return the Rich style for a role, bold for priority todos."""
        return Style(color=getattr(self, role), bold=bold or None)


DEFAULT_PALETTE = Palette()
