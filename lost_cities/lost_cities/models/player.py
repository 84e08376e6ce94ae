"""Player model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from lost_cities.errors import CardNotInHandError, IllegalDrawError

from .adventure import Adventure
from .card import Card, Deck, DiscardPile, Suit, sort_cards

# A card can be drawn from the deck or from any discard pile
DrawSource = Deck | DiscardPile

HAND_SIZE = 8


def _new_adventures() -> dict[Suit, Adventure]:
    return {suit: Adventure(suit) for suit in Suit}


class Player(BaseModel):
    """Player state."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    number: int  # 1 or 2
    name: str = "Player"
    game: Any = Field(default=None, repr=False, exclude=True)  # owning Game

    hand: list[Card] = Field(default_factory=list)
    adventures: dict[Suit, Adventure] = Field(default_factory=_new_adventures)

    # Turn state
    last_discarded_card: Card | None = None  # Discarded this turn, can't be taken back
    candidate: Card | None = None  # Card selected in the UI

    def model_post_init(self, __context: Any) -> None:
        sort_cards(self.hand)

    @property
    def score(self) -> int:
        """Sum of all adventure values."""
        return sum(a.value for a in self.adventures.values())

    def has_card(self, card: Card) -> bool:
        return card in self.hand

    def _remove_from_hand(self, card: Card) -> None:
        if card not in self.hand:
            raise CardNotInHandError(f"{self} does not hold {card}")
        self.hand.remove(card)

    def select_candidate(self, card: Card | None) -> None:
        """Set the card currently selected in the UI."""
        if card is not None and card not in self.hand:
            raise CardNotInHandError(f"{self} does not hold {card}")
        self.candidate = card

    def can_invest(self, card: Card) -> bool:
        """Check if card can be invested in its suit's adventure."""
        return self.adventures[card.suit].can_invest(card)

    def invest(self, card: Card) -> None:
        """Move a card from hand to the matching adventure.

        Raises:
            CardNotInHandError: If the card is not in hand.
            InvalidInvestmentError: If the adventure does not accept the card.
        """
        if card not in self.hand:
            raise CardNotInHandError(f"{self} does not hold {card}")
        self.adventures[card.suit].invest(card)
        self.hand.remove(card)
        self.last_discarded_card = None
        self.candidate = None

    def discard(self, card: Card) -> None:
        """Move a card from hand to the discard pile of its suit.

        Raises:
            CardNotInHandError: If the card is not in hand.
        """
        self._remove_from_hand(card)
        self.game.discard(card)
        self.last_discarded_card = card
        self.candidate = None

    def can_draw_from(self, source: DrawSource) -> bool:
        """Check if a card may be drawn from source.

        The deck only has to be non-empty. A discard pile must be non-empty
        and its top card must not be the card this player just discarded.
        """
        if isinstance(source, DiscardPile):
            top = source.peek_top()
            return top is not None and (
                self.last_discarded_card is None or top != self.last_discarded_card
            )
        return not source.is_empty()

    def draw_from(self, source: DrawSource) -> Card:
        """Draw the top card of source into hand and end the turn.

        Returns:
            The drawn card.

        Raises:
            EmptyDeckError / EmptyPileError: If source is empty.
            IllegalDrawError: If the top card is the one just discarded.
        """
        if (
            isinstance(source, DiscardPile)
            and self.last_discarded_card is not None
            and source.peek_top() == self.last_discarded_card
        ):
            raise IllegalDrawError(f"{self} cannot take back {self.last_discarded_card}")

        card = source.draw_top()
        self.hand.append(card)
        sort_cards(self.hand)
        self.last_discarded_card = None
        if self.game is not None:
            self.game.next_player()
        return card

    def __str__(self) -> str:
        return f"Player{self.number}[{self.name}]"

    def __repr__(self) -> str:
        return (
            f"Player(number={self.number}, name={self.name!r}, "
            f"hand={len(self.hand)}, score={self.score})"
        )
