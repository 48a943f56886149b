"""
Tests for key state snapshots and the keyboard-free input sources.
"""

import random

from console_invaders.core.input_interface import Key, KeyState
from console_invaders.invaders.config import InvadersConfig
from console_invaders.invaders.game import InvadersGame
from console_invaders.invaders.input import AutopilotInput, ScriptedInput


def quiet_game():
    config = InvadersConfig(fire_probability=0.0, aimed_fire_probability=0.0)
    return InvadersGame(config, rng=random.Random(0))


class TestKeyState:
    """Tests for KeyState snapshots."""

    def test_from_keys(self):
        keys = KeyState.from_keys(Key.LEFT, Key.FIRE)

        assert keys.left and keys.fire
        assert not keys.right and not keys.quit and not keys.pause

    def test_is_held(self):
        keys = KeyState(right=True, pause=True)

        assert keys.is_held(Key.RIGHT)
        assert keys.is_held(Key.PAUSE)
        assert not keys.is_held(Key.LEFT)

    def test_default_is_nothing_held(self):
        assert not any(KeyState().is_held(key) for key in Key)


class TestScriptedInput:
    """Tests for scripted playback."""

    def test_plays_frames_in_order(self):
        source = ScriptedInput([KeyState(left=True), KeyState(fire=True)])

        assert source.sample().left
        assert source.sample().fire

    def test_repeats_last_frame(self):
        source = ScriptedInput([KeyState(right=True)])
        source.sample()

        assert source.sample().right
        assert source.sample().right

    def test_quit_when_done(self):
        source = ScriptedInput([KeyState()], quit_when_done=True)
        source.sample()

        assert source.sample().quit

    def test_empty_script(self):
        assert ScriptedInput([]).sample() == KeyState()

    def test_was_released(self):
        """Test release detection compares the last two samples."""
        source = ScriptedInput([KeyState(fire=True), KeyState(), KeyState()])

        source.sample()
        assert not source.was_released(Key.FIRE)
        source.sample()
        assert source.was_released(Key.FIRE)
        source.sample()
        assert not source.was_released(Key.FIRE)


class TestAutopilot:
    """Tests for the demo pilot."""

    def test_steers_toward_nearest_column(self):
        game = quiet_game()
        pilot = AutopilotInput(game)

        # Player starts at column 59; the nearest live column is 56.
        keys = pilot.sample()
        assert keys.left and not keys.fire

        game.state.player.x = 0.0
        assert pilot.sample().right

    def test_taps_fire_when_aligned(self):
        """Test fire is pressed and released on alternate frames."""
        game = quiet_game()
        game.state.player.x = 8.0
        pilot = AutopilotInput(game)

        presses = [pilot.sample().fire for _ in range(4)]

        assert presses == [True, False, True, False]

    def test_taps_fire_between_rounds(self):
        game = quiet_game()
        game.state.formation.y = 23
        game.step(KeyState(), 0.05)
        pilot = AutopilotInput(game)

        presses = [pilot.sample().fire for _ in range(2)]

        assert presses == [True, False]

    def test_overlay_quit(self):
        """Test a real keyboard overlay can still end the demo."""
        overlay = ScriptedInput([KeyState(quit=True)])
        pilot = AutopilotInput(quiet_game(), overlay=overlay)

        assert pilot.sample().quit

    def test_plays_a_round(self):
        """Test the pilot scores against a formation that holds still."""
        config = InvadersConfig(
            fire_probability=0.0, aimed_fire_probability=0.0, anim_delay=100.0
        )
        game = InvadersGame(config, rng=random.Random(0))
        pilot = AutopilotInput(game)

        for _ in range(200):
            _, done, _ = game.step(pilot.sample(), 1.0 / 30)
            if done:
                break

        assert game.get_score() > 0
