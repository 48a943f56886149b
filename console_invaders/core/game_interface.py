"""
Abstract game interface for Console Invaders.

The game implements GameInterface and provides GameMetadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Tuple

from .input_interface import KeyState


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Console Invaders")
    id: str                             # Unique identifier (e.g., "invaders")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version
    supports_human: bool = True         # Can humans play?
    supports_demo: bool = True          # Has a self-playing attract mode?


class GameInterface(ABC):
    """
    Abstract base class for real-time games in Console Invaders.

    Games handle the core logic, rules, and state management.
    They are separate from the shell that polls input and presents frames.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Start a fresh round.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def step(self, keys: KeyState, elapsed: float) -> Tuple[Dict[str, Any], bool, Dict[str, Any]]:
        """
        Advance the simulation by one frame.

        Args:
            keys: Logical key state sampled for this frame
            elapsed: Wall-clock seconds since the previous frame

        Returns:
            Tuple of (state, done, info)
            - state: Current game state dictionary
            - done: Whether the round has ended (or quit was requested)
            - info: Additional information dictionary
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state.

        Returns:
            Dictionary containing all state needed for rendering or inspection
        """
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
