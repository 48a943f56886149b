#!/usr/bin/env python3
"""
Console Invaders - Play Script

Play in a Pygame window or in the terminal, or watch the demo pilot.

Usage:
    python scripts/play.py                       # Play in a Pygame window
    python scripts/play.py --demo                # Watch the demo pilot
    python scripts/play.py --display terminal --demo
    python scripts/play.py --config my_config.yaml --seed 42

Controls (Pygame window):
    Left/Right arrows: Move
    Space: Fire (press again to restart after a round)
    ESC: Quit
"""
import sys
import os
import argparse
import random
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

from console_invaders.invaders.game import InvadersGame
from console_invaders.invaders.input import AutopilotInput
from console_invaders.invaders.session import GameSession
from console_invaders.utils.config_loader import load_config
from console_invaders.utils.logging_setup import setup_logging


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Console Invaders - defend the bottom row",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py                         # Play in a Pygame window
  python scripts/play.py --demo                  # Watch the demo pilot
  python scripts/play.py --display terminal --demo --rounds 3
"""
    )

    parser.add_argument(
        "--display",
        choices=["pygame", "terminal"],
        default=None,
        help="Where to draw frames (default: from config)"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Let the demo pilot play"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file (default: config.yaml)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for enemy fire decisions"
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=0,
        help="Number of rounds to play (0 = until quit)"
    )

    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()
    config = load_config(args.config)
    setup_logging(config.logging)

    backend = args.display or config.display.backend
    print("\n" + "=" * 50)
    print("Console Invaders" + (" - Demo" if args.demo else ""))
    print("=" * 50)
    print("Controls:")
    print("  Left/Right: Move")
    print("  Space: Fire / restart")
    print("  ESC: Quit (Ctrl+C in the terminal display)")
    print("=" * 50 + "\n")

    game = InvadersGame(config.game, rng=random.Random(args.seed))
    width, height = game.width, game.height

    if backend == "terminal":
        from console_invaders.visualization.terminal_display import TerminalDisplay

        if not args.demo:
            print("[Play] The terminal display has no keyboard input; use --demo")
            return 1
        sink = TerminalDisplay(
            grid_width=width,
            grid_height=height,
            update_interval=1.0 / max(1, config.display.terminal_refresh),
            fps=config.display.fps,
        )
        sink.start()
        # The terminal sink has no keyboard; quit with Ctrl+C.
        source = AutopilotInput(game)
    else:
        from console_invaders.invaders.renderer import PygameKeyboard, PygameRenderer

        sink = PygameRenderer(
            grid_width=width,
            grid_height=height,
            font_size=config.display.font_size,
            fps=config.display.fps,
            title="Console Invaders" + (" (Demo)" if args.demo else ""),
        )
        keyboard = PygameKeyboard(sink)
        source = AutopilotInput(game, overlay=keyboard) if args.demo else keyboard

    session = GameSession(game, sink, source)
    try:
        session.run(max_rounds=args.rounds)
    except KeyboardInterrupt:
        print("\n[Play] Interrupted")
    finally:
        sink.close()
        source.close()

    if backend == "terminal":
        sink.print_summary(session.outcomes, session.high_score)
    else:
        print(f"\nFinal High Score: {session.high_score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
