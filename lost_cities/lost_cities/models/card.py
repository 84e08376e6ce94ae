"""Card, Deck and DiscardPile models."""

import random
from enum import IntEnum
from typing import Iterator

from pydantic import BaseModel

from lost_cities.errors import EmptyDeckError, EmptyPileError


class Suit(IntEnum):
    """Card suit (expedition colour). Value is the board column index."""

    RED = 0
    GREEN = 1
    WHITE = 2
    BLUE = 3
    YELLOW = 4


# Lowest rank of a numbered card; anything below is an investment card
MIN_NUMBERED_RANK = 2

# -1, 0, 1 are the three investment cards, 2..10 the numbered cards
RANKS = range(-1, 11)

SUIT_NAMES = {
    Suit.RED: "Red",
    Suit.GREEN: "Green",
    Suit.WHITE: "White",
    Suit.BLUE: "Blue",
    Suit.YELLOW: "Yellow",
}


class Card(BaseModel, frozen=True):
    """Single card.

    Cards of the same suit and face value are still distinct: ``card_id`` is
    the card's index in the generated card table and takes part in equality,
    so the three investment cards of a suit never compare equal.
    """

    card_id: int
    suit: Suit
    rank: int

    @property
    def is_multiplier(self) -> bool:
        """Check if this is an investment (multiplier) card."""
        return self.rank < MIN_NUMBERED_RANK

    @property
    def value(self) -> int:
        """Face value. Investment cards are worth 0."""
        return 0 if self.is_multiplier else self.rank

    def sort_key(self) -> tuple[int, int, int]:
        """Key for hand ordering: suit, then value, then identity."""
        return (self.suit, self.value, self.card_id)

    def display_text(self) -> str:
        """Single-character text used on the board."""
        if self.is_multiplier:
            return "$"
        if self.value == 10:
            return "#"
        return str(self.value)

    def __str__(self) -> str:
        if self.is_multiplier:
            return f"{SUIT_NAMES[self.suit]} Investment"
        return f"{SUIT_NAMES[self.suit]} {self.value}"

    def __repr__(self) -> str:
        return f"Card(#{self.card_id} {self})"


def make_card(rank: int, suit: Suit, card_id: int = 0) -> Card:
    """Create a card from its rank and suit."""
    return Card(card_id=card_id, suit=suit, rank=rank)


def generate_deck() -> list[Card]:
    """Create all 60 cards, suit-major, ranks -1 through 10."""
    cards: list[Card] = []
    for suit in Suit:
        for rank in RANKS:
            cards.append(make_card(rank, suit, card_id=len(cards)))
    return cards


def sort_cards(cards: list[Card]) -> None:
    """Sort cards in place by suit, then value."""
    cards.sort(key=Card.sort_key)


def shuffle(cards: list[Card], rng: random.Random | None = None) -> None:
    """Shuffle cards in place (Fisher-Yates).

    Args:
        cards: Cards to permute.
        rng: Random source. A fresh unseeded one is used if not provided.
    """
    rng = rng or random.Random()
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


class Deck:
    """Draw pile. The top of the deck is the end of the list."""

    def __init__(self, cards: list[Card] | None = None):
        """Initialize deck.

        Args:
            cards: Cards in draw order (last card is drawn first).
        """
        self._cards: list[Card] = list(cards) if cards else []

    @classmethod
    def shuffled(cls, rng: random.Random | None = None) -> "Deck":
        """Create a full, shuffled 60-card deck."""
        cards = generate_deck()
        shuffle(cards, rng)
        return cls(cards)

    def draw_top(self) -> Card:
        """Remove and return the top card.

        Raises:
            EmptyDeckError: If the deck is empty.
        """
        if not self._cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self._cards.pop()

    def size(self) -> int:
        """Get number of cards left."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if the deck is exhausted."""
        return not self._cards

    def to_list(self) -> list[Card]:
        """Get the remaining cards in draw order (top card last)."""
        return list(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards)"


class DiscardPile:
    """Face-up discard pile for a single suit (last in, first out)."""

    def __init__(self, suit: Suit):
        self.suit = suit
        self._cards: list[Card] = []

    def push(self, card: Card) -> None:
        """Put a card on top of the pile."""
        if card.suit != self.suit:
            raise ValueError(f"{card} does not belong on the {SUIT_NAMES[self.suit]} pile")
        self._cards.append(card)

    def peek_top(self) -> Card | None:
        """Get the top card without removing it."""
        return self._cards[-1] if self._cards else None

    def draw_top(self) -> Card:
        """Remove and return the top card.

        Raises:
            EmptyPileError: If the pile is empty.
        """
        if not self._cards:
            raise EmptyPileError(f"The {SUIT_NAMES[self.suit]} discard pile is empty")
        return self._cards.pop()

    def size(self) -> int:
        """Get number of cards in the pile."""
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def to_list(self) -> list[Card]:
        """Get the pile bottom to top."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        top = self.peek_top()
        return f"{SUIT_NAMES[self.suit]} pile: {top if top else '(empty)'}"
