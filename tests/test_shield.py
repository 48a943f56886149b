"""
Tests for destructible shields.
"""

import random

from console_invaders.invaders.shield import Shield, create_shields, hit_any
from console_invaders.invaders.world import WorldGrid


class TestShieldHits:
    """Tests for Shield.hit damage model."""

    def test_starts_at_full_strength(self):
        """Test every cell starts at MAX_STRENGTH."""
        shield = Shield(30, 24)

        assert shield.strength.shape == (Shield.HEIGHT, Shield.LENGTH)
        assert (shield.strength == Shield.MAX_STRENGTH).all()
        assert shield.total_strength() == Shield.LENGTH * Shield.HEIGHT * Shield.MAX_STRENGTH

    def test_hit_outside_footprint(self):
        """Test hits outside the footprint are ignored."""
        shield = Shield(30, 24)

        assert shield.hit(29, 24) is False
        assert shield.hit(38, 24) is False
        assert shield.hit(30, 23) is False
        assert shield.hit(30, 27) is False
        assert (shield.strength == Shield.MAX_STRENGTH).all()

    def test_hit_decrements_one_cell(self):
        """Test an absorbed hit removes one point from one cell."""
        shield = Shield(30, 24)

        assert shield.hit(33, 25) is True
        assert shield.strength[1, 3] == Shield.MAX_STRENGTH - 1
        assert shield.total_strength() == Shield.LENGTH * Shield.HEIGHT * Shield.MAX_STRENGTH - 1

    def test_absorbs_exactly_max_strength_hits(self):
        """Test a cell absorbs MAX_STRENGTH hits, then lets everything through."""
        shield = Shield(0, 0)

        results = [shield.hit(2, 1) for _ in range(Shield.MAX_STRENGTH + 3)]

        assert results == [True] * Shield.MAX_STRENGTH + [False] * 3
        assert shield.strength[1, 2] == 0

    def test_strength_stays_in_range(self):
        """Test random bombardment never drives strength outside [0, MAX]."""
        shield = Shield(10, 10)
        rng = random.Random(7)
        previous = shield.strength.copy()

        for _ in range(500):
            shield.hit(rng.randint(8, 19), rng.randint(9, 14))
            assert (shield.strength >= 0).all()
            assert (shield.strength <= Shield.MAX_STRENGTH).all()
            assert (shield.strength <= previous).all()
            previous = shield.strength.copy()


class TestShieldRendering:
    """Tests for shield glyphs and drawing."""

    def test_glyph_tracks_strength(self):
        """Test glyphs wear from '#' through '=' and '-' to blank."""
        shield = Shield(0, 0)
        glyphs = [shield.glyph_at(0, 0)]
        for _ in range(Shield.MAX_STRENGTH):
            shield.hit(0, 0)
            glyphs.append(shield.glyph_at(0, 0))

        assert glyphs == ["#", "=", "-", " "]

    def test_draw_writes_footprint(self):
        """Test drawing writes the whole footprint at the shield position."""
        world = WorldGrid(120, 30)
        shield = Shield(30, 24)
        shield.hit(31, 24)
        shield.draw(world)

        assert world.lines()[24][30:38] == "#=######"
        assert world.lines()[26][30:38] == "########"
        assert world.read_at(24, 29) == " "


class TestShieldGroup:
    """Tests for shield creation and short-circuit hits."""

    def test_three_shields_at_fixed_offsets(self):
        """Test shields are spaced across the screen on one row."""
        shields = create_shields(3, 30, 24)

        assert [(s.x, s.y) for s in shields] == [(30, 24), (60, 24), (90, 24)]

    def test_hit_any_stops_at_first_absorber(self):
        """Test at most one shield absorbs a given hit."""
        first = Shield(0, 0)
        second = Shield(0, 0)

        assert hit_any([first, second], 1, 1) is True
        assert first.strength[1, 1] == Shield.MAX_STRENGTH - 1
        assert second.strength[1, 1] == Shield.MAX_STRENGTH

    def test_hit_any_passes_through_worn_cell(self):
        """Test a worn-out cell in the first shield lets the next shield absorb."""
        first = Shield(0, 0)
        second = Shield(0, 0)
        first.strength[1, 1] = 0

        assert hit_any([first, second], 1, 1) is True
        assert second.strength[1, 1] == Shield.MAX_STRENGTH - 1

    def test_hit_any_misses_everything(self):
        shields = create_shields(3, 30, 24)

        assert hit_any(shields, 5, 5) is False
