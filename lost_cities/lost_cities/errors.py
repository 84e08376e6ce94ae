"""Rules errors.

These are contract violations: the turn loop only offers legal moves, so none
of them is expected during normal play.
"""


class LostCitiesError(Exception):
    """Base class for all rules errors."""


class EmptyDeckError(LostCitiesError, IndexError):
    """Drawing from an empty deck."""


class EmptyPileError(LostCitiesError, IndexError):
    """Drawing from an empty discard pile."""


class InvalidInvestmentError(LostCitiesError, ValueError):
    """Investing a card lower than the last card of the adventure."""


class CardNotInHandError(LostCitiesError, ValueError):
    """Playing a card the player does not hold."""


class IllegalDrawError(LostCitiesError, ValueError):
    """Taking back the card discarded this turn."""


class TurnOrderError(LostCitiesError):
    """Acting out of turn or in the wrong turn phase."""
