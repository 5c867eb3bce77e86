#!/usr/bin/env python3
"""
Flappy Dragon game session
The mode state machine driven once per display frame by the host.
"""

import logging
import random
from typing import Optional, Sequence

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BLACK, YELLOW, RED, NAVY,
    PLAYER_GLYPH, OBSTACLE_GLYPH
)
from .data_models import GameMode, KeySymbol, Player, Obstacle
from .physics_core import PhysicsCore
from .ports import RenderPort

logger = logging.getLogger(__name__)

MENU_LINES = (
    (5, "Welcome to Flappy Dragon"),
    (8, "(P) Play Game"),
    (9, "(Q) Quit Game"),
)


class GameSession:
    """Owns the player, the current obstacle, the score and the mode."""

    def __init__(self, core: Optional[PhysicsCore] = None, rng: Optional[random.Random] = None):
        self.core = core if core is not None else PhysicsCore(rng=rng)
        self.mode = GameMode.MENU
        self.player = Player()
        self.obstacle = self.core.spawn_obstacle(SCREEN_WIDTH, 0)
        self.score = 0
        self.frame_accumulator = 0.0
        self.quitting = False

    def tick(self, port: RenderPort):
        """Runs exactly one mode handler for the current frame."""
        if self.mode is GameMode.MENU:
            self.main_menu(port)
        elif self.mode is GameMode.PLAYING:
            self.play(port)
        elif self.mode is GameMode.END:
            self.dead(port)

    def restart(self):
        self.player = Player()
        self.frame_accumulator = 0.0
        self.score = 0
        self.obstacle = self.core.spawn_obstacle(SCREEN_WIDTH, self.score)
        self._set_mode(GameMode.PLAYING)

    # ---------- Mode Screens ----------

    def main_menu(self, port: RenderPort):
        self._mode_screen(port, MENU_LINES)

    def dead(self, port: RenderPort):
        self._mode_screen(port, (
            (5, "You are dead!"),
            (6, f"You earned {self.score} points"),
            (8, "(P) Play Again"),
            (9, "(Q) Quit Game"),
        ))

    def _mode_screen(self, port: RenderPort, lines: Sequence[tuple]):
        port.clear_screen()
        for y, text in lines:
            port.draw_text_centered(y, text)

        key = port.poll_key()
        if key is KeySymbol.PLAY:
            self.restart()
        elif key is KeySymbol.QUIT:
            self.quit(port)

    def quit(self, port: RenderPort):
        logger.info("Quit requested from %s", self.mode.name)
        self.quitting = True
        port.request_quit()

    # ---------- Playing ----------

    def play(self, port: RenderPort):
        port.clear_screen_with_background(NAVY)

        # 1. Fixed timestep physics
        self.frame_accumulator, step_due = self.core.advance_clock(
            self.frame_accumulator, port.elapsed_ms_since_last_tick())
        if step_due:
            self.player.apply_gravity_and_advance()

        # 2. Input
        if port.poll_key() is KeySymbol.FLAP:
            self.player.flap()

        # 3. Render
        self._render_player(port)
        port.draw_text(0, 0, "Press SPACE to flap.")
        port.draw_text(0, 1, f"Score: {self.score}")
        self._render_obstacle(port, self.obstacle)

        # 4. Score once the obstacle's column is behind the player
        if self.player.world_x > self.obstacle.world_x:
            self.score += 1
            self.obstacle = self.core.spawn_obstacle(
                self.player.world_x + SCREEN_WIDTH, self.score)

        # 5. End of game
        if self.core.check_collision(self.player, self.obstacle):
            self._set_mode(GameMode.END)

    def _render_player(self, port: RenderPort):
        port.draw_glyph(0, self.player.screen_y, YELLOW, BLACK, PLAYER_GLYPH)

    def _render_obstacle(self, port: RenderPort, obstacle: Obstacle):
        screen_x = obstacle.world_x - self.player.world_x
        half_size = obstacle.half_size

        for y in range(0, obstacle.gap_center - half_size):
            port.draw_glyph(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)

        for y in range(obstacle.gap_center + half_size, SCREEN_HEIGHT):
            port.draw_glyph(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)

    def _set_mode(self, mode: GameMode):
        if mode is GameMode.END:
            logger.info("Game over with score %d", self.score)
        else:
            logger.info("Mode %s -> %s", self.mode.name, mode.name)
        self.mode = mode
