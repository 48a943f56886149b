"""
Projectiles - the player's single reusable shot and the enemies' fixed pool.
"""

from dataclasses import dataclass
from typing import Dict, Any, Iterator, List

from .world import WorldGrid, to_cell


PLAYER_PROJECTILE_GLYPH = "|"
ENEMY_PROJECTILE_GLYPH = "*"


@dataclass
class Projectile:
    """A shot moving vertically at a fixed speed (negative = upward)."""
    glyph: str
    speed: float
    x: float = 0.0
    y: float = 0.0
    visible: bool = False

    def launch(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def advance(self, elapsed: float) -> None:
        """Move by speed * elapsed."""
        self.y += self.speed * elapsed

    @property
    def cell(self):
        """Rounded (col, row) screen cell."""
        return to_cell(self.x), to_cell(self.y)

    def draw(self, world: WorldGrid) -> None:
        if not self.visible:
            return
        col, row = self.cell
        if world.in_bounds(row, col):
            world.write(row, col, self.glyph)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "visible": self.visible, "glyph": self.glyph}


class ProjectilePool:
    """
    Fixed number of enemy projectile slots.

    Firing claims a free slot; when every slot is in flight the shot is
    simply dropped.
    """

    def __init__(self, capacity: int = 5, glyph: str = ENEMY_PROJECTILE_GLYPH, speed: float = 20.0):
        self.slots: List[Projectile] = [Projectile(glyph, speed) for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def claim(self, x: float, y: float) -> bool:
        """Launch the first free slot at (x, y). Returns False if the pool is full."""
        for projectile in self.slots:
            if not projectile.visible:
                projectile.launch(x, y)
                return True
        return False

    def active(self) -> Iterator[Projectile]:
        return (p for p in self.slots if p.visible)

    def active_count(self) -> int:
        return sum(1 for p in self.slots if p.visible)

    def clear(self) -> None:
        for projectile in self.slots:
            projectile.hide()

    def draw(self, world: WorldGrid) -> None:
        for projectile in self.active():
            projectile.draw(world)

    def to_list(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.active()]


class FireLatch:
    """
    Debounce for the fire key.

    A press triggers only while armed; the latch re-arms only after the
    key has been observed released.
    """

    def __init__(self):
        self.armed = True

    def observe(self, pressed: bool) -> None:
        """Re-arm if the key is up."""
        if not pressed:
            self.armed = True

    def try_trigger(self, pressed: bool) -> bool:
        """Consume an armed press. Returns True if a shot may be fired."""
        self.observe(pressed)
        if pressed and self.armed:
            self.armed = False
            return True
        return False
