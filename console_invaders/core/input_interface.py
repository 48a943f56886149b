"""
Abstract input interface for Console Invaders.

Input sources report which logical keys are currently held. They never
report raw device events; the simulation only consumes key-down state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum


class Key(IntEnum):
    """Logical keys consumed by the game."""
    LEFT = 0
    RIGHT = 1
    FIRE = 2
    QUIT = 3
    PAUSE = 4  # Defined for completeness, unused by the simulation


@dataclass(frozen=True)
class KeyState:
    """Snapshot of held keys for one frame."""
    left: bool = False
    right: bool = False
    fire: bool = False
    quit: bool = False
    pause: bool = False

    def is_held(self, key: Key) -> bool:
        """Return True if the given logical key is held."""
        return (self.left, self.right, self.fire, self.quit, self.pause)[int(key)]

    @classmethod
    def from_keys(cls, *keys: Key) -> "KeyState":
        """Build a snapshot with exactly the given keys held."""
        held = set(keys)
        return cls(
            left=Key.LEFT in held,
            right=Key.RIGHT in held,
            fire=Key.FIRE in held,
            quit=Key.QUIT in held,
            pause=Key.PAUSE in held,
        )


class InputSource(ABC):
    """
    Abstract source of logical key state.

    Subclasses implement poll(); callers use sample(), which also keeps the
    previous snapshot so a key release can be detected.
    """

    def __init__(self):
        self._previous = KeyState()
        self._current = KeyState()

    @abstractmethod
    def poll(self) -> KeyState:
        """
        Read the current held state of every logical key.

        Returns:
            KeyState snapshot
        """
        pass

    def sample(self) -> KeyState:
        """Poll the source and remember the previous snapshot."""
        self._previous = self._current
        self._current = self.poll()
        return self._current

    def was_released(self, key: Key) -> bool:
        """True if the key was held one sample ago and is not held now."""
        return self._previous.is_held(key) and not self._current.is_held(key)

    def close(self) -> None:
        """Release any resources held by the source."""
        pass
