"""
Input sources that need no keyboard: scripted playback and the demo pilot.
"""

from typing import Iterable, List, Optional

from ..core.input_interface import InputSource, Key, KeyState
from .world import to_cell


class ScriptedInput(InputSource):
    """
    Replays a fixed sequence of key states, one per poll.

    Once the script runs out the last state repeats, or QUIT is reported
    if ``quit_when_done`` is set.
    """

    def __init__(self, frames: Iterable[KeyState], quit_when_done: bool = False):
        super().__init__()
        self.frames: List[KeyState] = list(frames)
        self.quit_when_done = quit_when_done
        self.position = 0

    def poll(self) -> KeyState:
        if self.position < len(self.frames):
            state = self.frames[self.position]
            self.position += 1
            return state
        if self.quit_when_done:
            return KeyState(quit=True)
        return self.frames[-1] if self.frames else KeyState()


class AutopilotInput(InputSource):
    """
    Demo-mode pilot.

    Steers toward the nearest column that still has a live enemy and taps
    fire (press, release) whenever it is lined up. Between rounds it taps
    fire to restart. An optional overlay source (a real keyboard) is polled
    too, so the viewer can still quit.
    """

    def __init__(self, game, overlay: Optional[InputSource] = None):
        super().__init__()
        self.game = game
        self.overlay = overlay
        self._fired_last = False

    def _target_column(self) -> Optional[int]:
        state = self.game.state
        columns = state.formation.live_columns()
        if not columns:
            return None
        # Same left edge as the enemy puts the shot through its centre.
        player_col = to_cell(state.player.x)
        return min(columns, key=lambda c: abs(c - player_col))

    def _tap_fire(self) -> bool:
        self._fired_last = not self._fired_last
        return self._fired_last

    def poll(self) -> KeyState:
        quit_requested = self.overlay.sample().quit if self.overlay is not None else False
        keys = [Key.QUIT] if quit_requested else []

        target = self._target_column()
        if self.game.state.is_over:
            if self._tap_fire():
                keys.append(Key.FIRE)
        elif target is not None:
            player_col = to_cell(self.game.state.player.x)
            if target < player_col:
                keys.append(Key.LEFT)
                self._fired_last = False
            elif target > player_col:
                keys.append(Key.RIGHT)
                self._fired_last = False
            elif self._tap_fire():
                keys.append(Key.FIRE)
        return KeyState.from_keys(*keys)

    def close(self) -> None:
        if self.overlay is not None:
            self.overlay.close()
