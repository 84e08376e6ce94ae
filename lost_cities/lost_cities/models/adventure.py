"""Adventure (per-suit investment track) model."""

from lost_cities.errors import InvalidInvestmentError

from .card import SUIT_NAMES, Card, Suit

# Points every started adventure has to earn back
ADVENTURE_COST = 20

# Bonus for an adventure holding at least BONUS_THRESHOLD cards
BONUS_POINTS = 20
BONUS_THRESHOLD = 8


class Adventure:
    """A player's expedition in one suit.

    Invested cards are append-only and must have non-decreasing values, so
    investment cards (value 0) can only be played before the first numbered
    card.

    Scoring:
        cost       = 20 if any card is invested, else 0
        multiplier = number of investment cards + 1
        bonus      = 20 if 8 or more cards are invested
        value      = (sum of face values - cost) * multiplier + bonus
    """

    def __init__(self, suit: Suit):
        self.suit = suit
        self._investments: list[Card] = []

    @property
    def investments(self) -> list[Card]:
        """Invested cards in the order they were played."""
        return list(self._investments)

    def top(self) -> Card | None:
        """Get the most recently invested card."""
        return self._investments[-1] if self._investments else None

    def can_invest(self, card: Card) -> bool:
        """Check if card can be added to this adventure."""
        if card.suit != self.suit:
            return False
        top = self.top()
        return card.value >= (top.value if top else 0)

    def invest(self, card: Card) -> None:
        """Add a card to the adventure.

        Raises:
            InvalidInvestmentError: If can_invest(card) is false.
        """
        if not self.can_invest(card):
            raise InvalidInvestmentError(
                f"Cannot invest {card} in the {SUIT_NAMES[self.suit]} adventure "
                f"(last card: {self.top()})"
            )
        self._investments.append(card)

    @property
    def cost(self) -> int:
        return ADVENTURE_COST if self._investments else 0

    @property
    def multiplier(self) -> int:
        return sum(1 for c in self._investments if c.is_multiplier) + 1

    @property
    def bonus(self) -> int:
        return BONUS_POINTS if len(self._investments) >= BONUS_THRESHOLD else 0

    @property
    def value(self) -> int:
        """Score of this adventure."""
        total = sum(c.value for c in self._investments)
        return (total - self.cost) * self.multiplier + self.bonus

    def is_started(self) -> bool:
        return bool(self._investments)

    def __len__(self) -> int:
        return len(self._investments)

    def __str__(self) -> str:
        cards = " ".join(c.display_text() for c in self._investments)
        return f"{SUIT_NAMES[self.suit]}: [{cards}] = {self.value}"
