"""Flappy Dragon: a terminal-style side-scrolling reflex game."""

from .data_models import GameMode, KeySymbol, Player, Obstacle
from .game_session import GameSession
from .physics_core import PhysicsCore

__version__ = "0.1.0"

__all__ = ["GameMode", "KeySymbol", "Player", "Obstacle", "GameSession", "PhysicsCore"]
