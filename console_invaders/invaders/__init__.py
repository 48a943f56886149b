"""
Console Invaders game module.

The simulation core lives in world, shield, formation, projectiles,
collision and game; session, input and renderer make up the shell.
"""

from .config import InvadersConfig
from .formation import CellState, EnemyFormation
from .game import GamePhase, InvadersGame, RoundOutcome, RoundOverReason, RoundState
from .projectiles import FireLatch, Projectile, ProjectilePool
from .shield import Shield
from .world import WorldGrid

__all__ = [
    "InvadersConfig",
    "InvadersGame",
    "RoundState",
    "RoundOutcome",
    "RoundOverReason",
    "GamePhase",
    "EnemyFormation",
    "CellState",
    "Shield",
    "WorldGrid",
    "Projectile",
    "ProjectilePool",
    "FireLatch",
]
