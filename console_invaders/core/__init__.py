"""
Core abstractions for Console Invaders.

Provides abstract interfaces that the game, input sources, and render sinks must implement.
"""

from .game_interface import GameInterface, GameMetadata
from .input_interface import InputSource, Key, KeyState
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'InputSource',
    'Key',
    'KeyState',
    'RendererInterface',
]
