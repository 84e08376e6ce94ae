"""Formatters for game log output."""

from lost_cities.models.card import Card, Suit

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.RED: "R",
    Suit.GREEN: "G",
    Suit.WHITE: "W",
    Suit.BLUE: "B",
    Suit.YELLOW: "Y",
}

# Rank code for investment cards
MULTIPLIER_CODE = "$"


def format_card(card: Card | None) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "R7" for Red 7, "G$" for a Green
        investment card). Empty string for None.
    """
    if card is None:
        return ""
    rank = MULTIPLIER_CODE if card.is_multiplier else str(card.value)
    return f"{SUIT_CODES[card.suit]}{rank}"


def format_cards(cards: list[Card]) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards to format, in order.

    Returns:
        Comma-separated card strings (e.g., "R$,R2,R5").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(hands: list[list[Card]]) -> dict[str, str]:
    """Format all players' hands to dict.

    Args:
        hands: Hands indexed by player position (0 = player 1).

    Returns:
        Dict mapping player number (as string) to formatted hand string.
    """
    return {str(i + 1): format_cards(h) for i, h in enumerate(hands)}


def format_piles(tops: dict[Suit, Card | None]) -> dict[str, str]:
    """Format discard pile tops to dict keyed by suit code."""
    return {SUIT_CODES[suit]: format_card(card) for suit, card in tops.items()}
