"""Terminal printers for grouped todos."""

from __future__ import annotations

from .screen import ScreenPrinter
from .styles import DEFAULT_PALETTE, Palette

__all__ = ["DEFAULT_PALETTE", "Palette", "ScreenPrinter"]
