"""
Abstract renderer interface for Console Invaders.

Renderers are sinks: they receive a finished character grid each frame and
blit it in full. They never draw entities themselves.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Sequence, Tuple


class RendererInterface(ABC):
    """
    Abstract sink for finished frames.

    A frame is a sequence of equal-length strings, one per screen row.
    """

    @abstractmethod
    def present(self, rows: Sequence[str], hud: Dict[str, Any]) -> None:
        """
        Display a complete frame.

        Args:
            rows: Character grid, one string per row
            hud: Score, lives, wave and fps for the status line
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the grid size this sink was built for.

        Returns:
            Tuple of (width, height) in characters
        """
        pass

    def show_message(self, message: str) -> None:
        """
        Show a message over the last presented frame (e.g. round over).

        Args:
            message: Text to display
        """
        pass

    def close(self) -> None:
        """Release the display."""
        pass
