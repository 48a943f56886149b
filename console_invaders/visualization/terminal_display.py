"""
Terminal Display - Rich-based in-place terminal sink for Console Invaders.

Provides a clean terminal view with:
- The character frame inside a panel, updating in place without scrolling
- A status line (score, lives, wave, frame rate)
- A message area for round-over banners
- A session summary table once play ends
"""

import time
from collections import deque
from typing import Dict, Any, List, Optional, Sequence, Tuple

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.renderer_interface import RendererInterface


class TerminalDisplay(RendererInterface):
    """
    Rich-based terminal sink.

    Each present() replaces the whole panel; refreshes are throttled to
    ``update_interval`` so a fast simulation does not flood the terminal.
    """

    def __init__(
        self,
        grid_width: int = 120,
        grid_height: int = 30,
        title: str = "Console Invaders",
        update_interval: float = 1.0 / 30,
        fps: int = 60,
        console: Optional[Console] = None,
        sleep_fn=time.sleep,
    ):
        """
        Initialize the terminal display.

        Args:
            grid_width: Frame width in characters
            grid_height: Frame height in characters
            title: Panel title
            update_interval: Minimum seconds between screen refreshes
            fps: Frame-rate cap (0 = uncapped)
            console: Console to draw on (defaults to the real terminal)
        """
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.title = title
        self.update_interval = update_interval
        self.fps = fps
        self.sleep_fn = sleep_fn
        self._last_frame = time.perf_counter()

        # Force UTF-8 encoding for Windows compatibility
        self.console = console or Console(force_terminal=True, legacy_windows=False, markup=True)
        self.live: Optional[Live] = None

        self.rows: List[str] = [" " * grid_width] * grid_height
        self.hud: Dict[str, Any] = {}
        self.last_update = 0.0
        self.frames_presented = 0

        # Messages queue for round events
        self.messages: deque = deque(maxlen=3)

    def start(self):
        """Start the live display."""
        self.live = Live(
            self._build_display(),
            console=self.console,
            refresh_per_second=30,
            transient=False,
        )
        self.live.start()

    def stop(self):
        """Stop the live display."""
        if self.live:
            self.live.stop()
            self.live = None

    def close(self) -> None:
        self.stop()

    def get_preferred_size(self) -> Tuple[int, int]:
        return (self.grid_width, self.grid_height)

    def present(self, rows: Sequence[str], hud: Dict[str, Any]) -> None:
        """
        Take a complete frame; refresh the terminal if enough time has passed.

        Args:
            rows: Character grid, one string per row
            hud: Score, lives, wave and fps
        """
        if len(rows) != self.grid_height or any(len(r) != self.grid_width for r in rows):
            raise ValueError(
                f"Frame must be {self.grid_width}x{self.grid_height} characters"
            )
        self.rows = list(rows)
        self.hud = dict(hud)
        self.frames_presented += 1

        now = time.time()
        if self.live and (now - self.last_update) >= self.update_interval:
            self.live.update(self._build_display())
            self.last_update = now
        self._limit_frame_rate()

    def _limit_frame_rate(self) -> None:
        """Sleep off the rest of the frame when a cap is set."""
        if self.fps <= 0:
            return
        remaining = 1.0 / self.fps - (time.perf_counter() - self._last_frame)
        if remaining > 0:
            self.sleep_fn(remaining)
        self._last_frame = time.perf_counter()

    def show_message(self, message: str) -> None:
        """Add a message below the frame and refresh immediately."""
        self.messages.append(message)
        if self.live:
            self.live.update(self._build_display())
        else:
            self.console.print(f"[bold red]{message}[/]")

    def _build_status(self) -> Text:
        status = Text()
        status.append(f"Score: {self.hud.get('score', 0):6d}", style="bold yellow")
        status.append(f"   Lives: {self.hud.get('lives', 0):2d}", style="bold green")
        status.append(f"   Wave: {self.hud.get('wave', 1):2d}", style="cyan")
        status.append(f"   FPS: {self.hud.get('fps', 0.0):.1f}", style="dim")
        return status

    def _build_display(self) -> Panel:
        """Build the complete display panel."""
        frame = Text("\n".join(self.rows), style="green", no_wrap=True)
        parts = [self._build_status(), frame]
        if self.messages:
            parts.append(Text("\n".join(self.messages), style="bold red"))
        return Panel(Group(*parts), title=self.title, border_style="blue", expand=False)

    def print_summary(self, outcomes: Sequence[Any], high_score: int) -> None:
        """Print a table of finished rounds."""
        table = Table(title="Session Summary", border_style="yellow")
        table.add_column("Round", style="cyan", justify="right")
        table.add_column("Score", style="white", justify="right")
        table.add_column("Wave", justify="right")
        table.add_column("Ended By")

        for i, outcome in enumerate(outcomes, start=1):
            reason = outcome.reason.name.replace("_", " ").lower()
            table.add_row(str(i), str(outcome.score), str(outcome.wave), reason)

        self.console.print(table)
        self.console.print(f"High Score: [bold yellow]{high_score}[/]")
