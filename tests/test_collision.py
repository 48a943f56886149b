"""
Tests for collision resolution against shields, enemies and the player.
"""

from console_invaders.invaders.collision import CollisionResolver
from console_invaders.invaders.formation import CellState, EnemyFormation
from console_invaders.invaders.projectiles import Projectile
from console_invaders.invaders.shield import Shield, create_shields
from console_invaders.invaders.world import WorldGrid


def make_resolver():
    world = WorldGrid(120, 30)
    formation = EnemyFormation()
    shields = create_shields(3, 30, 24)
    formation.draw(world)
    for shield in shields:
        shield.draw(world)
    return CollisionResolver(world, formation, shields), formation, shields


def shot_at(x, y, speed=-20.0):
    shot = Projectile("|", speed)
    shot.launch(x, y)
    return shot


class TestEnemyHits:
    """Tests for upward projectiles against the formation."""

    def test_hits_enemy_in_row_above(self):
        resolver, _, _ = make_resolver()

        assert resolver.enemy_hit(shot_at(3.0, 3.0)) == (0, 0)
        assert resolver.enemy_hit(shot_at(15.0, 9.0)) == (3, 2)

    def test_gap_between_enemies(self):
        """Test a blank cell ahead of the projectile is a miss."""
        resolver, _, _ = make_resolver()

        assert resolver.enemy_hit(shot_at(6.0, 3.0)) is None

    def test_top_row_never_hits(self):
        resolver, _, _ = make_resolver()

        assert resolver.enemy_hit(shot_at(3.0, 0.0)) is None

    def test_exploding_enemy_blocks_shot(self):
        """Test an explosion glyph still stops the shot at its enemy."""
        resolver, formation, _ = make_resolver()
        formation.explode(0, 0)
        formation.draw(resolver.world)

        assert resolver.enemy_hit(shot_at(3.0, 3.0)) == (0, 0)
        assert formation.state(0, 0) == CellState.EXPLODING

    def test_stale_glyph_with_dead_enemy(self):
        """Test the previous frame's glyph is ignored once the enemy is gone."""
        resolver, formation, _ = make_resolver()
        formation.states[0, 0] = CellState.DEAD

        assert resolver.enemy_hit(shot_at(3.0, 3.0)) is None

    def test_shield_glyph_is_transparent(self):
        resolver, _, _ = make_resolver()

        assert resolver.enemy_hit(shot_at(33.0, 25.0)) is None


class TestShieldHits:
    """Tests for shield absorption."""

    def test_absorbed_by_shield(self):
        resolver, _, shields = make_resolver()

        assert resolver.absorbed_by_shield(shot_at(62.0, 25.0)) is True
        assert shields[1].strength[1, 2] == Shield.MAX_STRENGTH - 1

    def test_not_absorbed_outside_shields(self):
        resolver, _, shields = make_resolver()

        assert resolver.absorbed_by_shield(shot_at(50.0, 25.0)) is False
        assert all(s.total_strength() == 72 for s in shields)


class TestPlayerHits:
    """Tests for downward projectiles reaching the bottom row."""

    def test_inside_footprint(self):
        resolver, _, _ = make_resolver()

        for x in (59.0, 60.0, 61.0):
            assert resolver.player_hit(shot_at(x, 29.0, 20.0), 58.5, 29)

    def test_outside_footprint(self):
        resolver, _, _ = make_resolver()

        assert not resolver.player_hit(shot_at(58.0, 29.0, 20.0), 58.5, 29)
        assert not resolver.player_hit(shot_at(62.0, 29.0, 20.0), 58.5, 29)

    def test_above_player_row(self):
        resolver, _, _ = make_resolver()

        assert not resolver.player_hit(shot_at(60.0, 28.0, 20.0), 58.5, 29)
