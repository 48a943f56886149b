"""
Pytest configuration and fixtures for Console Invaders tests.

This module sets up pygame mocking so the window sink and keyboard source
can be tested without a display, and provides deterministic game fixtures.
"""

import random
import sys
from collections import defaultdict
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


def create_mock_pygame():
    """Create a mock of the parts of pygame the sink and keyboard use."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.fill.return_value = None
    mock_surface.blit.return_value = None
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts (monospace cell of 10x20 pixels)
    mock_text = MagicMock()
    mock_text.get_width.return_value = 200
    mock_text.get_height.return_value = 20
    mock_font = MagicMock()
    mock_font.render.return_value = mock_text
    mock_font.size.return_value = (10, 20)
    mock_pygame.font.Font.return_value = mock_font
    mock_pygame.font.SysFont.return_value = mock_font

    # Events
    mock_pygame.event.get.return_value = []
    mock_pygame.event.pump.return_value = None

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_SPACE = 32
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_p = 112

    # Keyboard: nothing held
    mock_pygame.key.get_pressed.return_value = defaultdict(bool)

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before the window sink module is imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def quiet_config():
    """Classic layout with enemy fire switched off."""
    from console_invaders.invaders.config import InvadersConfig

    return InvadersConfig(fire_probability=0.0, aimed_fire_probability=0.0)


@pytest.fixture
def game(quiet_config):
    """A fresh round with no enemy fire."""
    from console_invaders.invaders.game import InvadersGame

    return InvadersGame(quiet_config, rng=random.Random(0))


@pytest.fixture
def frozen_game():
    """A round whose formation never moves and never fires."""
    from console_invaders.invaders.config import InvadersConfig
    from console_invaders.invaders.game import InvadersGame

    config = InvadersConfig(
        fire_probability=0.0,
        aimed_fire_probability=0.0,
        anim_delay=100.0,
    )
    return InvadersGame(config, rng=random.Random(0))


@pytest.fixture
def no_keys():
    from console_invaders.core.input_interface import KeyState

    return KeyState()
