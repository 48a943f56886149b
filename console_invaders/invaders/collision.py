"""
Collision resolution for projectiles against shields, enemies and the player.
"""

from typing import List, Optional, Tuple

from .formation import CellState, EnemyFormation
from .projectiles import Projectile
from .shield import Shield, hit_any
from .world import WorldGrid, to_cell


PLAYER_WIDTH = 3


class CollisionResolver:
    """
    Maps projectile positions to what they struck.

    The world grid passed in holds the previous frame. Shields are always
    consulted before enemies or the player.
    """

    def __init__(self, world: WorldGrid, formation: EnemyFormation, shields: List[Shield]):
        self.world = world
        self.formation = formation
        self.shields = shields

    def absorbed_by_shield(self, projectile: Projectile) -> bool:
        """Offer the projectile's cell to the shields; True if one absorbed it."""
        col, row = projectile.cell
        return hit_any(self.shields, col, row)

    def enemy_hit(self, projectile: Projectile) -> Optional[Tuple[int, int]]:
        """
        Find the enemy struck by an upward projectile.

        The target is the cell one row above the projectile. It only counts
        when the previous frame drew an opaque glyph there; the enemy is then
        identified from the formation footprints. An EXPLODING enemy is
        returned too, since its glyph still stops the shot; DEAD ones are not.

        Returns:
            (row, col) grid index of the struck enemy, or None
        """
        if projectile.y <= 0:
            return None
        col = to_cell(projectile.x)
        row = to_cell(projectile.y) - 1
        if not self.world.in_bounds(row, col) or self.world.is_transparent(row, col):
            return None
        cell = self.formation.footprint_at(col, row)
        if cell is None or self.formation.state(*cell) == CellState.DEAD:
            return None
        return cell

    def player_hit(self, projectile: Projectile, player_x: float, player_row: int) -> bool:
        """True if a downward projectile has reached the player row inside the player's footprint."""
        col, row = projectile.cell
        left = to_cell(player_x)
        return row >= player_row and left <= col < left + PLAYER_WIDTH
