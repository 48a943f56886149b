"""
World grid - the character buffer every entity draws into.

The grid is also the hit-test surface for the player's projectile: a hit
only registers when the cell ahead of the projectile held an opaque glyph
in the previous frame.
"""

import math
from typing import List

import numpy as np


BLANK = " "

# Glyphs a projectile passes through: blank, shield glyphs, enemy fire.
TRANSPARENT_GLYPHS = "*#=- "


def to_cell(value: float) -> int:
    """Round a screen coordinate to its cell, halves away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


class WorldGrid:
    """Fixed-size 2D character buffer (height rows x width columns)."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._cells = np.full((height, width), BLANK, dtype="<U1")

    def clear(self) -> None:
        """Reset every cell to blank."""
        self._cells.fill(BLANK)

    def write(self, row: int, col: int, glyph: str) -> None:
        """Set one cell. Callers keep row/col in range."""
        self._cells[row, col] = glyph

    def write_text(self, row: int, col: int, text: str) -> None:
        """Write a run of glyphs starting at (row, col)."""
        for k, glyph in enumerate(text):
            self._cells[row, col + k] = glyph

    def read_at(self, row: int, col: int) -> str:
        """Return the glyph at (row, col)."""
        return str(self._cells[row, col])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_transparent(self, row: int, col: int) -> bool:
        """True if a projectile would pass through the glyph at (row, col)."""
        return self.read_at(row, col) in TRANSPARENT_GLYPHS

    def is_blank(self) -> bool:
        return bool(np.all(self._cells == BLANK))

    def lines(self) -> List[str]:
        """The frame as one string per row."""
        return ["".join(row) for row in self._cells]

    def to_string(self) -> str:
        return "\n".join(self.lines())
