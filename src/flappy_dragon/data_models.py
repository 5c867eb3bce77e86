"""
data_models.py: Data structures for the game state.
"""

import math
from dataclasses import dataclass
from enum import Enum, auto

from .constants import (
    PLAYER_START_X, PLAYER_START_Y, GRAVITY_ACCEL, TERMINAL_VELOCITY, FLAP_IMPULSE
)


class GameMode(Enum):
    MENU = auto()
    PLAYING = auto()
    END = auto()


class KeySymbol(Enum):
    """Abstract keys the host translates physical input into."""
    PLAY = auto()
    QUIT = auto()
    FLAP = auto()
    OTHER = auto()


@dataclass
class Player:
    """The player's physics body."""
    world_x: int = PLAYER_START_X
    screen_y: int = PLAYER_START_Y
    velocity: float = 0.0

    def apply_gravity_and_advance(self):
        """
        Runs one discrete physics step: gravity, vertical move, horizontal advance.
        """
        if self.velocity < TERMINAL_VELOCITY:
            self.velocity = min(self.velocity + GRAVITY_ACCEL, TERMINAL_VELOCITY)
            self.velocity = round(self.velocity, 4)

        self.screen_y += math.floor(self.velocity)
        self.world_x += 1

        # Top of screen clamp
        if self.screen_y < 0:
            self.screen_y = 0

    def flap(self):
        """Immediate upward impulse; replaces the current velocity."""
        self.velocity = FLAP_IMPULSE


@dataclass
class Obstacle:
    """A vertical barrier with a single passable gap."""
    world_x: int
    gap_center: int
    gap_size: int

    @property
    def half_size(self) -> int:
        return self.gap_size // 2

    def hits(self, player: Player) -> bool:
        # Single-column hitbox: world_x advances by exactly 1 per step
        if player.world_x != self.world_x:
            return False

        above_gap = player.screen_y < self.gap_center - self.half_size
        below_gap = player.screen_y > self.gap_center + self.half_size
        return above_gap or below_gap
