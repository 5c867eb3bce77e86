"""
physics_core.py: The shared, deterministic timing, generation and collision logic.
"""

import logging
import random
from typing import Optional, Tuple

from .constants import (
    FRAME_DURATION_MS, SCREEN_HEIGHT, GAP_CENTER_MIN, GAP_CENTER_MAX,
    BASE_GAP_SIZE, MIN_GAP_SIZE
)
from .data_models import Player, Obstacle

logger = logging.getLogger(__name__)


class PhysicsCore:
    """
    Deterministic rules shared by the game session and its tests.

    The random source is injected so obstacle sequences can be reproduced.
    """

    SCREEN_HEIGHT = SCREEN_HEIGHT

    def __init__(self, frame_duration_ms: float = FRAME_DURATION_MS,
                 base_gap_size: int = BASE_GAP_SIZE, min_gap_size: int = MIN_GAP_SIZE,
                 rng: Optional[random.Random] = None):
        self.frame_duration_ms = frame_duration_ms
        self.base_gap_size = base_gap_size
        self.min_gap_size = min_gap_size
        self.rng = rng if rng is not None else random.Random()

    def advance_clock(self, accumulator: float, elapsed_ms: float) -> Tuple[float, bool]:
        """
        Banks elapsed time and reports whether a physics step is due.

        At most one step fires per call; time beyond the quantum is dropped.
        """
        accumulator += elapsed_ms
        if accumulator > self.frame_duration_ms:
            return 0.0, True
        return accumulator, False

    def gap_size_for_score(self, score: int) -> int:
        return max(self.min_gap_size, self.base_gap_size - score)

    def spawn_obstacle(self, world_x: int, score: int) -> Obstacle:
        """Creates the next obstacle with a random gap sized by the current score."""
        obstacle = Obstacle(
            world_x=world_x,
            gap_center=self.rng.randrange(GAP_CENTER_MIN, GAP_CENTER_MAX),
            gap_size=self.gap_size_for_score(score),
        )
        logger.debug("Spawned obstacle at x=%d gap=%d size=%d",
                     obstacle.world_x, obstacle.gap_center, obstacle.gap_size)
        return obstacle

    def check_collision(self, player: Player, obstacle: Obstacle) -> bool:
        """Checks for falling off the bottom or striking the obstacle."""
        if player.screen_y > self.SCREEN_HEIGHT:
            return True
        return obstacle.hits(player)
