"""
Destructible shields protecting the player.
"""

from typing import Iterable

import numpy as np

from .world import WorldGrid


# Indexed by remaining strength: 0 = gone, MAX_STRENGTH = intact.
SHIELD_GLYPHS = " -=#"


class Shield:
    """
    A block of cover made of independently damaged cells.

    Each cell starts at MAX_STRENGTH and loses one point per absorbed hit.
    A cell at strength 0 no longer blocks anything.
    """

    LENGTH = 8
    HEIGHT = 3
    MAX_STRENGTH = 3

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.strength = np.full((self.HEIGHT, self.LENGTH), self.MAX_STRENGTH, dtype=np.int8)

    def contains(self, col: int, row: int) -> bool:
        """True if (col, row) lies inside this shield's footprint."""
        return self.x <= col < self.x + self.LENGTH and self.y <= row < self.y + self.HEIGHT

    def hit(self, col: int, row: int) -> bool:
        """
        Apply a projectile hit at screen cell (col, row).

        Returns:
            True if the hit was absorbed, False if it missed the shield or
            struck a cell with no strength left
        """
        if not self.contains(col, row):
            return False
        r, c = row - self.y, col - self.x
        if self.strength[r, c] <= 0:
            return False
        self.strength[r, c] -= 1
        return True

    def glyph_at(self, r: int, c: int) -> str:
        """Glyph for shield-local cell (r, c)."""
        return SHIELD_GLYPHS[int(self.strength[r, c])]

    def total_strength(self) -> int:
        return int(self.strength.sum())

    def draw(self, world: WorldGrid) -> None:
        """Write the shield footprint into the world grid."""
        for r in range(self.HEIGHT):
            for c in range(self.LENGTH):
                world.write(self.y + r, self.x + c, self.glyph_at(r, c))

    def to_dict(self):
        return {"x": self.x, "y": self.y, "strength": self.strength.tolist()}


def hit_any(shields: Iterable[Shield], col: int, row: int) -> bool:
    """Offer a hit to each shield in turn; stop at the first that absorbs it."""
    for shield in shields:
        if shield.hit(col, row):
            return True
    return False


def create_shields(count: int, spacing: int, row: int):
    """Create shields at x = spacing, 2*spacing, ... on the given row."""
    return [Shield((i + 1) * spacing, row) for i in range(count)]
