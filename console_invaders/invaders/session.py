"""
Game session - the shell around the frame stepper.

Measures frame time, feeds input into the game, hands each finished frame
to a sink, and after a round runs the slower restart-or-quit poll.
"""

import logging
import time
from typing import Callable, List, Optional

from ..core.input_interface import InputSource
from ..core.renderer_interface import RendererInterface
from .game import InvadersGame, RoundOutcome, RoundOverReason
from .projectiles import FireLatch


logger = logging.getLogger(__name__)

ROUND_OVER_POLL_INTERVAL = 0.005  # seconds

REASON_MESSAGES = {
    RoundOverReason.LIVES_EXHAUSTED: "GAME OVER! Your ship was destroyed.",
    RoundOverReason.FORMATION_LANDED: "GAME OVER! The invaders have landed.",
}


class FrameClock:
    """Monotonic clock reporting seconds elapsed between ticks."""

    def __init__(self, time_fn: Callable[[], float] = time.perf_counter):
        self._time_fn = time_fn
        self._last = time_fn()

    def restart(self) -> None:
        self._last = self._time_fn()

    def tick(self) -> float:
        """Seconds since the previous tick (or restart)."""
        now = self._time_fn()
        elapsed = max(0.0, now - self._last)
        self._last = now
        return elapsed


class GameSession:
    """
    Runs rounds of InvadersGame against a sink and an input source.

    Single-threaded: each frame runs to completion before the next is
    measured, so a slow sink simply shows up as a longer elapsed time.
    """

    def __init__(
        self,
        game: InvadersGame,
        sink: RendererInterface,
        source: InputSource,
        clock: Optional[FrameClock] = None,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            game: Frame stepper to drive
            sink: Receives every finished frame
            source: Logical key state, sampled once per frame
            clock: Frame timer (defaults to a perf_counter clock)
            sleep_fn: Used between samples of the round-over poll
        """
        self.game = game
        self.sink = sink
        self.source = source
        self.clock = clock or FrameClock()
        self.sleep_fn = sleep_fn
        self.high_score = 0
        self.outcomes: List[RoundOutcome] = []

    def play_round(self) -> Optional[RoundOutcome]:
        """
        Play one round to completion.

        Returns:
            The round outcome, or None if the player quit mid-round
        """
        self.game.reset()
        self.clock.restart()
        done = False
        while not done:
            elapsed = self.clock.tick()
            keys = self.source.sample()
            _, done, info = self.game.step(keys, elapsed)
            self.sink.present(self.game.frame(), info)

        outcome = self.game.outcome
        if outcome is not None:
            self.outcomes.append(outcome)
            if outcome.score > self.high_score:
                self.high_score = outcome.score
                print(f"[Session] New high score: {outcome.score}")
        return outcome

    def wait_for_restart(self) -> bool:
        """
        Poll for the restart decision after a round.

        A fresh press of fire restarts (a key still held from the round does
        not count); quit ends the session.

        Returns:
            True to play another round, False to quit
        """
        latch = FireLatch()
        latch.armed = False
        while True:
            keys = self.source.sample()
            if keys.quit:
                return False
            if latch.try_trigger(keys.fire):
                return True
            self.sleep_fn(ROUND_OVER_POLL_INTERVAL)

    def run(self, max_rounds: int = 0) -> List[RoundOutcome]:
        """
        Play rounds until the player quits.

        Args:
            max_rounds: Stop after this many rounds (0 = unlimited)

        Returns:
            Outcomes of every completed round
        """
        rounds = 0
        while True:
            outcome = self.play_round()
            rounds += 1
            if outcome is None:
                break
            self.sink.show_message(
                f"{REASON_MESSAGES[outcome.reason]} Score {outcome.score}. "
                "Press Fire to restart."
            )
            if max_rounds and rounds >= max_rounds:
                break
            if not self.wait_for_restart():
                break
        logger.info("Session ended after %d round(s), high score %d", rounds, self.high_score)
        return self.outcomes
