"""
Visualization module for Console Invaders.

Contains the Rich-based terminal sink.
"""

from .terminal_display import TerminalDisplay

__all__ = ['TerminalDisplay']
