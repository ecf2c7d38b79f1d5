"""
Pytest configuration and fixtures for Grid Snake tests.

This module sets up pygame mocking so the renderer and keyboard can be
tested without a display, plus in-memory stand-ins for the renderer and
input source used by the game loop.
"""

import sys
from collections import deque
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))

from gridsnake.core.input_interface import InputSource
from gridsnake.core.renderer_interface import RendererInterface
from gridsnake.game.session import GameSession


def create_mock_pygame():
    """Create a mock of the parts of pygame the game uses."""
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

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()  # Returns a surface
    mock_pygame.font.Font.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.KEYUP = 769
    mock_pygame.K_ESCAPE = 27

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    Modules that import pygame are imported inside the tests, after this
    fixture has installed the mock.
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
def pygame_events(mock_pygame_module):
    """Queue pygame events for a single test; cleared afterwards."""
    def key_event(unicode="", key=0):
        return MagicMock(type=mock_pygame_module.KEYDOWN, key=key, unicode=unicode)

    def quit_event():
        return MagicMock(type=mock_pygame_module.QUIT)

    def set_events(*events):
        mock_pygame_module.event.get.return_value = list(events)

    set_events.key = key_event
    set_events.quit = quit_event

    yield set_events

    mock_pygame_module.event.get.return_value = []


class RecordingRenderer(RendererInterface):
    """Keeps every rendered state instead of drawing it."""

    def __init__(self):
        self.frames = []
        self.close_calls = 0

    def render(self, game_state):
        self.frames.append(game_state)

    def get_preferred_size(self):
        return (0, 0)

    def close(self):
        self.close_calls += 1


class ScriptedInput(InputSource):
    """Hands out one scripted key per poll, then None."""

    def __init__(self, keys=()):
        self.keys = deque(keys)
        self.polls = 0
        self.closed = False

    def poll_key(self):
        self.polls += 1
        if not self.keys:
            return None
        return self.keys.popleft()

    def close(self):
        self.closed = True


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def scripted_input():
    return ScriptedInput


@pytest.fixture
def session():
    """Default 20x20 session with a fixed seed."""
    return GameSession(width=20, height=20, seed=12345)


@pytest.fixture
def make_session():
    """Build a session and optionally pin its snake, food and heading."""
    def make(snake=None, food=None, direction=None, width=20, height=20,
             seed=42, allow_tail_chase=True):
        from gridsnake.game.board import Board
        from gridsnake.game.direction import DirectionController, Point

        s = GameSession(width=width, height=height, seed=seed,
                        allow_tail_chase=allow_tail_chase)
        if snake is not None:
            s.snake = deque(Point(x, y) for x, y in snake)
            s.board = Board(width, height)
            s.board.occupy_all(s.snake)
        if food is not None:
            s.food = Point(*food)
        elif snake is not None and s.food in s.snake:
            s.food = s.board.free_cell_at(0)
        if direction is not None:
            s.controller = DirectionController(direction)
        return s
    return make
