"""Game logging module."""

from .formatters import format_card, format_cards, format_hands, format_piles
from .game_logger import GameLogger, generate_log_filename

__all__ = [
    "GameLogger",
    "generate_log_filename",
    "format_card",
    "format_cards",
    "format_hands",
    "format_piles",
]
