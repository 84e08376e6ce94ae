"""Game models."""

from .adventure import Adventure
from .card import Card, Deck, DiscardPile, Suit, generate_deck, make_card, shuffle
from .game_state import GameState, TurnPhase
from .player import DrawSource, Player

__all__ = [
    "Adventure",
    "Card",
    "Deck",
    "DiscardPile",
    "Suit",
    "generate_deck",
    "make_card",
    "shuffle",
    "Player",
    "DrawSource",
    "GameState",
    "TurnPhase",
]
