"""
Console Invaders Game Core - Frame stepper implementing GameInterface.

One call to step() runs a whole frame: input, movement, firing, collision,
explosion timers, bookkeeping, and a fresh render into the world grid.
All speeds and durations are scaled by the measured frame time.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Any, List, Optional, Tuple

from ..core.game_interface import GameInterface, GameMetadata
from ..core.input_interface import KeyState
from .collision import CollisionResolver, PLAYER_WIDTH
from .config import InvadersConfig
from .formation import CellState, EnemyFormation
from .projectiles import (
    ENEMY_PROJECTILE_GLYPH,
    PLAYER_PROJECTILE_GLYPH,
    FireLatch,
    Projectile,
    ProjectilePool,
)
from .shield import Shield, create_shields
from .world import WorldGrid, to_cell


logger = logging.getLogger(__name__)

PLAYER_GLYPH = "<I>"
PLAYER_HIT_GLYPH = "XXX"


class GamePhase(IntEnum):
    """Frame stepper states."""
    PLAYING = 0
    PLAYER_EXPLODING = 1
    ROUND_OVER = 2
    QUIT = 3


class RoundOverReason(IntEnum):
    """Why a round ended."""
    LIVES_EXHAUSTED = 0
    FORMATION_LANDED = 1


@dataclass
class RoundOutcome:
    """Final snapshot handed to the shell when a round ends."""
    reason: RoundOverReason
    score: int
    lives: int
    wave: int


@dataclass
class Player:
    """The player's ship on the bottom row."""
    x: float
    row: int
    lives: int = 3
    hit: bool = False
    hit_elapsed: float = 0.0
    width: int = PLAYER_WIDTH

    def draw(self, world: WorldGrid) -> None:
        glyph = PLAYER_HIT_GLYPH if self.hit else PLAYER_GLYPH
        world.write_text(self.row, to_cell(self.x), glyph)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "row": self.row,
            "lives": self.lives,
            "hit": self.hit,
            "width": self.width,
        }


@dataclass
class RoundState:
    """Everything that changes during a round."""
    player: Player
    formation: EnemyFormation
    shields: List[Shield]
    player_projectile: Projectile
    enemy_projectiles: ProjectilePool
    fire_latch: FireLatch = field(default_factory=FireLatch)
    score: int = 0
    wave: int = 1
    phase: GamePhase = GamePhase.PLAYING
    anim_elapsed: float = 0.0
    frame_count: int = 0
    outcome: Optional[RoundOutcome] = None

    @property
    def is_over(self) -> bool:
        return self.phase in (GamePhase.ROUND_OVER, GamePhase.QUIT)


class InvadersGame(GameInterface):
    """
    Core Console Invaders logic implementing GameInterface.

    The player moves along the bottom row and fires upward at a formation
    that sweeps side to side, descending a row at each screen edge. Enemies
    fire back at random, more eagerly when lined up with the player. Three
    shields soak up hits from either side until worn through.
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about Console Invaders."""
        return GameMetadata(
            name="Console Invaders",
            id="invaders",
            description="Defend the bottom row against a descending formation",
            version="1.0.0",
        )

    def __init__(
        self,
        config: Optional[InvadersConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the game.

        Args:
            config: Simulation constants (defaults to the classic layout)
            rng: Random source for enemy fire decisions
        """
        self.config = config or InvadersConfig()
        self.config.validate()
        self.rng = rng or random.Random()
        self.width = self.config.width
        self.height = self.config.height
        self.player_row = self.height - 1
        self.world = WorldGrid(self.width, self.height)
        self.state: Optional[RoundState] = None
        self.reset()

    def _create_formation(self) -> EnemyFormation:
        c = self.config
        return EnemyFormation(
            cols=c.enemy_cols,
            rows=c.enemy_rows,
            x=c.enemy_start_x,
            y=c.enemy_start_y,
            anim_delay=c.anim_delay,
            anim_delay_step=c.anim_delay_step,
            anim_delay_floor=c.anim_delay_floor,
            explosion_duration=c.enemy_explosion_duration,
        )

    def _create_round(self) -> RoundState:
        c = self.config
        return RoundState(
            player=Player(
                x=(self.width - PLAYER_WIDTH) / 2.0,
                row=self.player_row,
                lives=c.player_start_lives,
            ),
            formation=self._create_formation(),
            shields=create_shields(
                c.shield_count, c.shield_spacing, self.height - c.shield_offset_from_bottom
            ),
            player_projectile=Projectile(PLAYER_PROJECTILE_GLYPH, c.player_bullet_speed),
            enemy_projectiles=ProjectilePool(
                c.max_enemy_projectiles, ENEMY_PROJECTILE_GLYPH, c.enemy_bullet_speed
            ),
        )

    def reset(self) -> Dict[str, Any]:
        """
        Start a new round: all enemies alive, shields whole, score and lives reset.

        Returns:
            Dictionary containing the initial game state
        """
        self.state = self._create_round()
        self._render()
        logger.info("Round started")
        return self.get_state()

    @property
    def outcome(self) -> Optional[RoundOutcome]:
        return self.state.outcome

    def step(self, keys: KeyState, elapsed: float) -> Tuple[Dict[str, Any], bool, Dict[str, Any]]:
        """
        Execute one frame.

        Args:
            keys: Logical key state for this frame
            elapsed: Seconds since the previous frame

        Returns:
            Tuple of (state, done, info)
        """
        s = self.state
        if s.is_over:
            return self.get_state(), True, self._info(elapsed)

        s.frame_count += 1
        s.anim_elapsed += elapsed
        anim_tick = s.anim_elapsed >= s.formation.anim_delay

        if keys.quit:
            s.phase = GamePhase.QUIT
            logger.info("Quit requested at score %d", s.score)
            return self.get_state(), True, self._info(elapsed)

        resolver = CollisionResolver(self.world, s.formation, s.shields)

        self._move_player(keys, elapsed)
        self._update_player_projectile(keys.fire, elapsed, resolver)

        if s.formation.has_landed(self.height):
            self._end_round(RoundOverReason.FORMATION_LANDED)
        else:
            if anim_tick:
                s.formation.march(self.width)
            self._enemies_fire()
            self._update_enemy_projectiles(elapsed, resolver)
            self._advance_timers(elapsed)
            if not s.is_over and s.formation.is_cleared():
                self._start_next_wave()

        self._render()
        if anim_tick:
            s.formation.animate()
            s.anim_elapsed = 0.0

        return self.get_state(), s.is_over, self._info(elapsed)

    def _move_player(self, keys: KeyState, elapsed: float) -> None:
        """Move the ship sideways, clamped to the screen. Frozen while exploding."""
        s = self.state
        if s.phase == GamePhase.PLAYER_EXPLODING:
            return
        dx = self.config.player_speed * elapsed
        max_x = float(self.width - PLAYER_WIDTH)
        if keys.left:
            s.player.x = max(0.0, s.player.x - dx)
        if keys.right:
            s.player.x = min(max_x, s.player.x + dx)

    def _update_player_projectile(self, fire: bool, elapsed: float, resolver: CollisionResolver) -> None:
        """Advance and resolve the player's shot, or fire a new one."""
        s = self.state
        shot = s.player_projectile
        if not shot.visible:
            if s.phase != GamePhase.PLAYER_EXPLODING and s.fire_latch.try_trigger(fire):
                shot.launch(s.player.x + 1.0, float(self.height - 2))
            else:
                s.fire_latch.observe(fire)
            return

        s.fire_latch.observe(fire)
        shot.advance(elapsed)
        if resolver.absorbed_by_shield(shot):
            shot.hide()
            return
        _, row = shot.cell
        if row <= 0:
            shot.hide()
            return
        struck = resolver.enemy_hit(shot)
        if struck is None:
            return
        shot.hide()
        if s.formation.state(*struck) == CellState.ALIVE:
            s.formation.explode(*struck)
            s.score += self.config.kill_score
            logger.debug("Enemy %s destroyed, score %d", struck, s.score)

    def _enemies_fire(self) -> None:
        """Give every live enemy a chance to fire this frame."""
        s = self.state
        player_col = to_cell(s.player.x)
        for row, col in s.formation.alive_cells():
            _, screen_col = s.formation.screen_position(row, col)
            if screen_col == player_col:
                probability = self.config.aimed_fire_probability
            else:
                probability = self.config.fire_probability
            if self.rng.random() < probability:
                s.enemy_projectiles.claim(*s.formation.fire_origin(row, col))

    def _update_enemy_projectiles(self, elapsed: float, resolver: CollisionResolver) -> None:
        """Advance enemy shots; resolve shields, then the bottom row."""
        s = self.state
        for shot in list(s.enemy_projectiles.active()):
            shot.advance(elapsed)
            if resolver.absorbed_by_shield(shot):
                shot.hide()
                continue
            _, row = shot.cell
            if row < self.player_row:
                continue
            if not s.player.hit and resolver.player_hit(shot, s.player.x, self.player_row):
                self._player_struck()
            shot.hide()

    def _player_struck(self) -> None:
        s = self.state
        s.player.lives = max(0, s.player.lives - 1)
        s.player.hit = True
        s.player.hit_elapsed = 0.0
        s.phase = GamePhase.PLAYER_EXPLODING
        logger.debug("Player hit, %d lives left", s.player.lives)
        if s.player.lives == 0:
            self._end_round(RoundOverReason.LIVES_EXHAUSTED)

    def _advance_timers(self, elapsed: float) -> None:
        """Run the enemy explosion and the player's hit window."""
        s = self.state
        s.formation.advance_explosion(elapsed)
        if s.player.hit:
            s.player.hit_elapsed += elapsed
            if s.player.hit_elapsed >= self.config.player_explosion_duration:
                s.player.hit = False
                s.player.hit_elapsed = 0.0
                if s.phase == GamePhase.PLAYER_EXPLODING:
                    s.phase = GamePhase.PLAYING

    def _start_next_wave(self) -> None:
        """Replace a cleared formation; score, lives and shield damage carry over."""
        s = self.state
        s.wave += 1
        s.formation = self._create_formation()
        s.player_projectile.hide()
        s.enemy_projectiles.clear()
        s.anim_elapsed = 0.0
        logger.info("Wave %d begins", s.wave)

    def _end_round(self, reason: RoundOverReason) -> None:
        s = self.state
        s.phase = GamePhase.ROUND_OVER
        s.outcome = RoundOutcome(
            reason=reason, score=s.score, lives=s.player.lives, wave=s.wave
        )
        logger.info("Round over (%s): score %d, wave %d", reason.name, s.score, s.wave)

    def _render(self) -> None:
        """Redraw every live entity into a cleared world grid."""
        s = self.state
        self.world.clear()
        for shield in s.shields:
            shield.draw(self.world)
        s.formation.draw(self.world)
        s.player.draw(self.world)
        s.player_projectile.draw(self.world)
        s.enemy_projectiles.draw(self.world)

    def _info(self, elapsed: float) -> Dict[str, Any]:
        s = self.state
        return {
            "score": s.score,
            "lives": s.player.lives,
            "wave": s.wave,
            "phase": s.phase.name,
            "fps": 1.0 / elapsed if elapsed > 0 else 0.0,
            "reason": s.outcome.reason.name if s.outcome else None,
        }

    def frame(self) -> List[str]:
        """The most recently rendered frame."""
        return self.world.lines()

    def get_state(self) -> Dict[str, Any]:
        """Get current game state for rendering or inspection."""
        s = self.state
        return {
            "player": s.player.to_dict(),
            "formation": s.formation.to_dict(),
            "shields": [shield.to_dict() for shield in s.shields],
            "player_projectile": (
                s.player_projectile.to_dict() if s.player_projectile.visible else None
            ),
            "enemy_projectiles": s.enemy_projectiles.to_list(),
            "score": s.score,
            "lives": s.player.lives,
            "wave": s.wave,
            "phase": s.phase.name,
            "game_over": s.is_over,
            "frame": s.frame_count,
            "width": self.width,
            "height": self.height,
            "enemies_alive": s.formation.alive_count(),
            "total_enemies": s.formation.rows * s.formation.cols,
        }

    def get_score(self) -> int:
        """Get current game score."""
        return self.state.score
