"""
Console Invaders game configuration.
"""

from dataclasses import dataclass, asdict, fields
from typing import Dict, Any


@dataclass
class InvadersConfig:
    """Configuration for the Console Invaders simulation."""

    # Screen dimensions (character cells)
    width: int = 120
    height: int = 30

    # Player settings (speeds in cells per second)
    player_speed: float = 12.0
    player_bullet_speed: float = -20.0  # Negative = upward
    player_start_lives: int = 3
    player_explosion_duration: float = 1.0
    kill_score: int = 100

    # Formation settings
    enemy_cols: int = 10
    enemy_rows: int = 4
    enemy_start_x: int = 2
    enemy_start_y: int = 2
    anim_delay: float = 0.35  # Seconds between formation steps
    anim_delay_step: float = 0.05  # Speed-up applied on each descent
    anim_delay_floor: float = 0.1
    enemy_explosion_duration: float = 0.6

    # Enemy fire
    enemy_bullet_speed: float = 20.0
    max_enemy_projectiles: int = 5
    fire_probability: float = 0.02  # Per live enemy, per frame
    aimed_fire_probability: float = 0.20  # When aligned with the player

    # Shields
    shield_count: int = 3
    shield_spacing: int = 30  # Shield i sits at x = (i + 1) * spacing
    shield_offset_from_bottom: int = 6

    def validate(self) -> None:
        """Raise ValueError if the layout cannot fit on the screen or a shot speed points the wrong way."""
        block_width = 2 * self.enemy_cols * 3
        if self.enemy_start_x < 0 or self.enemy_start_x + block_width > self.width:
            raise ValueError(
                f"Formation of {self.enemy_cols} columns does not fit in width {self.width}"
            )
        if self.enemy_start_y < 1 or self.enemy_start_y + 2 * self.enemy_rows - 1 >= self.height:
            raise ValueError(
                f"Formation of {self.enemy_rows} rows does not fit in height {self.height}"
            )
        if self.shield_count * self.shield_spacing + 8 > self.width:
            raise ValueError("Shields do not fit in the screen width")
        if not 3 <= self.shield_offset_from_bottom < self.height:
            raise ValueError("Shield row is outside the screen")
        if self.max_enemy_projectiles < 0:
            raise ValueError("max_enemy_projectiles must be non-negative")
        if self.player_bullet_speed >= 0:
            raise ValueError("player_bullet_speed must be negative (shots travel upward)")
        if self.enemy_bullet_speed <= 0:
            raise ValueError("enemy_bullet_speed must be positive (shots travel downward)")
        if self.anim_delay_floor <= 0 or self.anim_delay < self.anim_delay_floor:
            raise ValueError("anim_delay must be at least anim_delay_floor, which must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InvadersConfig":
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
