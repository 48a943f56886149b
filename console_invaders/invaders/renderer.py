"""
Console Invaders window - Pygame-based sink and keyboard source.

The window blits the finished character grid one row at a time in a
monospace font; it never draws entities itself.
"""

import pygame
from typing import Dict, Any, Optional, Sequence, Tuple

from ..core.input_interface import InputSource, KeyState
from ..core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
GREEN = (0, 255, 0)
WHITE = (255, 255, 255)
RED = (255, 100, 100)
TEXT_COLOR = (220, 220, 220)

HUD_HEIGHT = 30


class PygameRenderer(RendererInterface):
    """
    Renders character frames in a standalone Pygame window.

    Used for human play mode; owns the window and the frame-rate cap.
    """

    def __init__(
        self,
        grid_width: int = 120,
        grid_height: int = 30,
        font_size: int = 18,
        fps: int = 60,
        title: str = "Console Invaders",
    ):
        """
        Initialize the renderer with its own window.

        Args:
            grid_width: Frame width in characters
            grid_height: Frame height in characters
            font_size: Monospace font size in points
            fps: Frame-rate cap (0 = uncapped)
            title: Window title
        """
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.fps = fps

        pygame.init()
        self.font = pygame.font.SysFont("couriernew,dejavusansmono,monospace", font_size)
        self.cell_width, self.cell_height = self.font.size("W")

        self.window_width = grid_width * self.cell_width
        self.window_height = grid_height * self.cell_height + HUD_HEIGHT
        self.surface = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(title)

        self.clock = pygame.time.Clock()
        self.closed = False

    def get_preferred_size(self) -> Tuple[int, int]:
        """Grid size in characters."""
        return (self.grid_width, self.grid_height)

    def pump_events(self) -> None:
        """Drain the event queue; note a window close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True

    def present(self, rows: Sequence[str], hud: Dict[str, Any]) -> None:
        """
        Blit a complete frame and the status line.

        Args:
            rows: Character grid, one string per row
            hud: Score, lives, wave and fps
        """
        if len(rows) != self.grid_height or any(len(r) != self.grid_width for r in rows):
            raise ValueError(
                f"Frame must be {self.grid_width}x{self.grid_height} characters"
            )

        self.pump_events()
        self.surface.fill(BLACK)

        for y, row in enumerate(rows):
            text = self.font.render(row, True, GREEN)
            self.surface.blit(text, (0, y * self.cell_height))

        status = self.font.render(
            f"Score: {hud.get('score', 0):6d}   Lives: {hud.get('lives', 0):2d}   "
            f"Wave: {hud.get('wave', 1):2d}   FPS: {hud.get('fps', 0.0):.1f}",
            True, TEXT_COLOR
        )
        self.surface.blit(status, (8, self.grid_height * self.cell_height + 6))

        pygame.display.flip()
        if self.fps > 0:
            self.clock.tick(self.fps)

    def show_message(self, message: str) -> None:
        """Draw a centred banner over the current frame."""
        text = self.font.render(message, True, RED)
        self.surface.blit(
            text,
            (self.window_width // 2 - text.get_width() // 2,
             self.window_height // 2 - text.get_height() // 2)
        )
        pygame.display.flip()

    def close(self) -> None:
        """Close the window and pygame."""
        pygame.quit()


class PygameKeyboard(InputSource):
    """
    Reads held keys from pygame.

    Arrows move, space fires, escape quits, P pauses. Closing the window
    counts as quit.
    """

    def __init__(self, renderer: Optional[PygameRenderer] = None):
        super().__init__()
        self.renderer = renderer

    def poll(self) -> KeyState:
        if self.renderer is not None:
            self.renderer.pump_events()
            window_closed = self.renderer.closed
        else:
            pygame.event.pump()
            window_closed = False

        pressed = pygame.key.get_pressed()
        return KeyState(
            left=bool(pressed[pygame.K_LEFT]),
            right=bool(pressed[pygame.K_RIGHT]),
            fire=bool(pressed[pygame.K_SPACE]),
            quit=bool(pressed[pygame.K_ESCAPE]) or window_closed,
            pause=bool(pressed[pygame.K_p]),
        )
