#!/usr/bin/env python3
"""
flappy_client.py

Pygame host: an 80x50 character grid implementing the render/input port,
plus the frame loop that drives a GameSession.
"""

import logging
import sys
from typing import Dict, Optional, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CELL_SIZE, WINDOW_TITLE, RENDER_FPS, BLACK, WHITE
)
from .data_models import KeySymbol
from .game_session import GameSession
from .ports import Color

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    pygame.K_p: KeySymbol.PLAY,
    pygame.K_q: KeySymbol.QUIT,
    pygame.K_SPACE: KeySymbol.FLAP,
}


class DisplayInitError(RuntimeError):
    """The window or font could not be created."""


def map_key(key: int) -> KeySymbol:
    return KEY_BINDINGS.get(key, KeySymbol.OTHER)


class PygameConsole:
    """Character-grid window drawing glyphs with pygame."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 cell_size: int = CELL_SIZE, title: str = WINDOW_TITLE, fps: int = RENDER_FPS):
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.fps = fps

        try:
            pygame.init()
            self.screen = pygame.display.set_mode((width * cell_size, height * cell_size))
            pygame.display.set_caption(title)
            self.font = pygame.font.Font(None, cell_size + cell_size // 3)
        except pygame.error as e:
            pygame.quit()
            raise DisplayInitError(f"Could not open {width}x{height} display: {e}") from e

        self.clock = pygame.time.Clock()
        self.quit_requested = False

        # Per frame input & timing
        self.pending_key: Optional[KeySymbol] = None
        self.frame_time_ms = 0.0
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    # ---------- Frame Loop ----------

    def begin_frame(self):
        """Waits for the next frame, then collects timing and the first key press."""
        self.frame_time_ms = float(self.clock.tick(self.fps))
        self.pending_key = None

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.request_quit()
            elif event.type == pygame.KEYDOWN and self.pending_key is None:
                self.pending_key = map_key(event.key)

    def present(self):
        pygame.display.flip()

    def close(self):
        pygame.quit()

    # ---------- Render/Input Port ----------

    def clear_screen(self):
        self.screen.fill(BLACK)

    def clear_screen_with_background(self, color: Color):
        self.screen.fill(color)

    def draw_glyph(self, x: int, y: int, foreground: Color, background: Color, glyph: str):
        if not (0 <= x < self.width and 0 <= y < self.height):
            return

        cell = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
        pygame.draw.rect(self.screen, background, cell)

        surface = self._glyph(glyph, foreground)
        self.screen.blit(surface, surface.get_rect(center=cell.center))

    def draw_text(self, x: int, y: int, text: str):
        for offset, char in enumerate(text):
            self.draw_glyph(x + offset, y, WHITE, BLACK, char)

    def draw_text_centered(self, y: int, text: str):
        self.draw_text(self.width // 2 - len(text) // 2, y, text)

    def elapsed_ms_since_last_tick(self) -> float:
        return self.frame_time_ms

    def poll_key(self) -> Optional[KeySymbol]:
        key, self.pending_key = self.pending_key, None
        return key

    def request_quit(self):
        self.quit_requested = True

    def _glyph(self, glyph: str, color: Color) -> pygame.Surface:
        cached = self._glyph_cache.get((glyph, color))
        if cached is None:
            cached = self.font.render(glyph, True, color)
            self._glyph_cache[(glyph, color)] = cached
        return cached


def run(session: GameSession, console: PygameConsole):
    """The main host loop: one session tick per display frame."""
    logger.info("Starting game loop at %d FPS", console.fps)
    while not console.quit_requested:
        console.begin_frame()
        if console.quit_requested:
            break
        session.tick(console)
        console.present()
    console.close()
    logger.info("Game loop stopped.")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    try:
        console = PygameConsole()
    except DisplayInitError as e:
        logger.error("%s. Exiting.", e)
        return 1

    run(GameSession(), console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
