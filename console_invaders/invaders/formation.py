"""
Enemy formation - a rigid block of enemies that marches, descends and
animates as one unit.
"""

import logging
from enum import IntEnum
from typing import Dict, Any, Iterator, List, Optional, Tuple

import numpy as np

from .world import WorldGrid


logger = logging.getLogger(__name__)


class CellState(IntEnum):
    """Life cycle of a single enemy."""
    ALIVE = 0
    EXPLODING = 1
    DEAD = 2


# Two animation frames per row type, each GLYPH_WIDTH characters.
ENEMY_GLYPHS = ["<o>>o<", "}O{-O-", "[T]]+[", "(+)-x-"]
EXPLOSION_GLYPH = "xxx"
GLYPH_WIDTH = 3
COLUMN_SPACING = 2 * GLYPH_WIDTH  # Screen columns between enemy origins
ROW_SPACING = 2  # Screen rows between enemy rows
EXPLOSION_DURATION = 0.6


class EnemyFormation:
    """
    Grid of enemy states sharing one origin and one step direction.

    Enemy (row, col) occupies screen row y + 2*row and the three columns
    starting at x + 6*col. At most one enemy is EXPLODING at a time; that
    enemy is held in the ``exploding`` slot with its own timer.
    """

    def __init__(
        self,
        cols: int = 10,
        rows: int = 4,
        x: int = 2,
        y: int = 2,
        anim_delay: float = 0.35,
        anim_delay_step: float = 0.05,
        anim_delay_floor: float = 0.1,
        explosion_duration: float = EXPLOSION_DURATION,
    ):
        self.cols = cols
        self.rows = rows
        self.x = x
        self.y = y
        self.direction = 1
        self.frame_offset = 0
        self.anim_delay = anim_delay
        self.anim_delay_step = anim_delay_step
        self.anim_delay_floor = anim_delay_floor
        self.explosion_duration = explosion_duration
        self.states = np.full((rows, cols), CellState.ALIVE, dtype=np.int8)
        self.exploding: Optional[Tuple[int, int]] = None
        self.explosion_elapsed = 0.0

    # Geometry

    @property
    def block_width(self) -> int:
        """Horizontal extent used for the edge test."""
        return self.cols * COLUMN_SPACING

    @property
    def block_height(self) -> int:
        """Rendered height in screen rows."""
        return ROW_SPACING * self.rows - 1

    def screen_position(self, row: int, col: int) -> Tuple[int, int]:
        """Top-left screen (row, col) of an enemy's footprint."""
        return self.y + ROW_SPACING * row, self.x + COLUMN_SPACING * col

    def fire_origin(self, row: int, col: int) -> Tuple[float, float]:
        """Screen (x, y) where an enemy's projectile appears."""
        screen_row, screen_col = self.screen_position(row, col)
        return float(screen_col + 1), float(screen_row + 1)

    def has_landed(self, screen_height: int) -> bool:
        """True once the block has reached the bottom of the screen."""
        return self.y + self.block_height >= screen_height

    # Movement

    def march(self, screen_width: int) -> bool:
        """
        Take one formation step. Call on each animation tick.

        Returns:
            True if the formation reversed and descended this step
        """
        at_right = self.x + self.block_width >= screen_width
        at_left = self.x <= 0
        if at_right or at_left:
            self.direction = -self.direction
            self.y += 1
            self.x += -1 if at_right else 1
            self.anim_delay = max(self.anim_delay_floor, self.anim_delay - self.anim_delay_step)
            logger.debug("Formation descended to row %d, delay %.2f", self.y, self.anim_delay)
            return True
        self.x += self.direction
        return False

    def animate(self) -> None:
        """Switch to the other animation frame."""
        self.frame_offset = GLYPH_WIDTH if self.frame_offset == 0 else 0

    # Life cycle

    def state(self, row: int, col: int) -> CellState:
        return CellState(int(self.states[row, col]))

    def explode(self, row: int, col: int) -> None:
        """Move an ALIVE enemy to EXPLODING, finishing any explosion in flight."""
        if self.state(row, col) != CellState.ALIVE:
            return
        if self.exploding is not None:
            self._finish_explosion()
        self.states[row, col] = CellState.EXPLODING
        self.exploding = (row, col)
        self.explosion_elapsed = 0.0

    def advance_explosion(self, elapsed: float) -> None:
        """Accumulate explosion time; the enemy dies once the duration has passed."""
        if self.exploding is None:
            return
        self.explosion_elapsed += elapsed
        if self.explosion_elapsed >= self.explosion_duration:
            self._finish_explosion()

    def _finish_explosion(self) -> None:
        row, col = self.exploding
        self.states[row, col] = CellState.DEAD
        self.exploding = None
        self.explosion_elapsed = 0.0

    # Queries

    def alive_cells(self) -> Iterator[Tuple[int, int]]:
        """(row, col) of every ALIVE enemy in row-major order."""
        rows, cols = np.nonzero(self.states == CellState.ALIVE)
        return zip(rows.tolist(), cols.tolist())

    def alive_count(self) -> int:
        return int(np.count_nonzero(self.states == CellState.ALIVE))

    def exploding_count(self) -> int:
        return int(np.count_nonzero(self.states == CellState.EXPLODING))

    def is_cleared(self) -> bool:
        """True when every enemy is DEAD."""
        return bool(np.all(self.states == CellState.DEAD))

    def footprint_at(self, col: int, row: int) -> Optional[Tuple[int, int]]:
        """Grid index of the first footprint (row-major) covering screen cell (col, row), in any state."""
        for i in range(self.rows):
            for j in range(self.cols):
                screen_row, screen_col = self.screen_position(i, j)
                if screen_row == row and screen_col <= col < screen_col + GLYPH_WIDTH:
                    return i, j
        return None

    def cell_at(self, col: int, row: int) -> Optional[Tuple[int, int]]:
        """
        Find the ALIVE enemy whose footprint covers screen cell (col, row).

        Returns:
            (row, col) grid index of the enemy, or None
        """
        cell = self.footprint_at(col, row)
        if cell is not None and self.states[cell] == CellState.ALIVE:
            return cell
        return None

    def live_columns(self) -> List[int]:
        """Screen column of every grid column with a live enemy."""
        columns = np.nonzero(np.any(self.states == CellState.ALIVE, axis=0))[0]
        return [self.x + COLUMN_SPACING * int(j) for j in columns]

    # Rendering

    def draw(self, world: WorldGrid) -> None:
        """Write every non-dead enemy into the world grid."""
        for i in range(self.rows):
            glyphs = ENEMY_GLYPHS[i % len(ENEMY_GLYPHS)]
            frame = glyphs[self.frame_offset:self.frame_offset + GLYPH_WIDTH]
            for j in range(self.cols):
                state = self.states[i, j]
                if state == CellState.DEAD:
                    continue
                screen_row, screen_col = self.screen_position(i, j)
                world.write_text(
                    screen_row,
                    screen_col,
                    frame if state == CellState.ALIVE else EXPLOSION_GLYPH,
                )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "direction": self.direction,
            "frame_offset": self.frame_offset,
            "anim_delay": self.anim_delay,
            "states": self.states.tolist(),
            "exploding": list(self.exploding) if self.exploding else None,
        }
