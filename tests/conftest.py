"""Shared fixtures: a recording render/input port and seeded sessions."""
import random
from typing import List, Optional

import pytest

from flappy_dragon.data_models import KeySymbol
from flappy_dragon.game_session import GameSession
from flappy_dragon.physics_core import PhysicsCore


class FakeConsole:
    """Render/input port double fed with scripted frames."""

    def __init__(self):
        self.elapsed_ms = 0.0
        self.key: Optional[KeySymbol] = None
        self.quit_requested = False
        self.glyphs: List[tuple] = []
        self.texts: List[tuple] = []
        self.clears: List[object] = []

    def feed(self, elapsed_ms: float = 0.0, key: Optional[KeySymbol] = None):
        self.elapsed_ms = elapsed_ms
        self.key = key
        self.glyphs.clear()
        self.texts.clear()
        self.clears.clear()

    def frame(self, session, elapsed_ms: float = 0.0, key: Optional[KeySymbol] = None):
        """Feeds one frame of input and ticks the session once."""
        self.feed(elapsed_ms, key)
        session.tick(self)

    def clear_screen(self):
        self.clears.append(None)

    def clear_screen_with_background(self, color):
        self.clears.append(color)

    def draw_glyph(self, x, y, foreground, background, glyph):
        self.glyphs.append((x, y, foreground, background, glyph))

    def draw_text(self, x, y, text):
        self.texts.append((x, y, text))

    def draw_text_centered(self, y, text):
        self.texts.append((None, y, text))

    def elapsed_ms_since_last_tick(self):
        return self.elapsed_ms

    def poll_key(self):
        key, self.key = self.key, None
        return key

    def request_quit(self):
        self.quit_requested = True


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def core():
    return PhysicsCore(rng=random.Random(1234))


@pytest.fixture
def session(core):
    return GameSession(core=core)
