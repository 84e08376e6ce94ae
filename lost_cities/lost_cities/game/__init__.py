"""Game logic."""

from .engine import DECK_KEY, Game, new_game
from .validator import MoveValidator, ValidationResult

__all__ = [
    "DECK_KEY",
    "Game",
    "new_game",
    "MoveValidator",
    "ValidationResult",
]
