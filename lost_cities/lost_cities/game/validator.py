"""Move validation for the terminal layer."""

from __future__ import annotations

from dataclasses import dataclass

from lost_cities.models.card import SUIT_NAMES, Card, DiscardPile, Suit
from lost_cities.models.game_state import TurnPhase
from lost_cities.models.player import DrawSource, Player

from .engine import DECK_KEY, Game


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error_message: str = ""


class MoveValidator:
    """Checks moves before they are offered to a player.

    The engine raises on illegal moves; this class answers the same questions
    without raising so the UI can grey out or hide choices.
    """

    def _check_turn(self, game: Game, player: Player, phase: TurnPhase) -> ValidationResult:
        if game.state.game_over:
            return ValidationResult(is_valid=False, error_message="The game is over")
        if player is not game.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It is not {player}'s turn",
            )
        if game.phase != phase:
            return ValidationResult(
                is_valid=False,
                error_message=f"Expected {game.phase.value} phase, not {phase.value}",
            )
        return ValidationResult(is_valid=True)

    def validate_invest(self, game: Game, player: Player, card: Card) -> ValidationResult:
        """Validate investing card.

        Args:
            game: Current game
            player: Player making the move
            card: Card to invest

        Returns:
            ValidationResult
        """
        result = self._check_turn(game, player, TurnPhase.PLAY)
        if not result.is_valid:
            return result

        if not player.has_card(card):
            return ValidationResult(
                is_valid=False,
                error_message="Player does not have the card",
            )

        if not player.can_invest(card):
            top = player.adventures[card.suit].top()
            return ValidationResult(
                is_valid=False,
                error_message=f"{card} is lower than the last investment ({top})",
            )

        return ValidationResult(is_valid=True)

    def validate_discard(self, game: Game, player: Player, card: Card) -> ValidationResult:
        """Validate discarding card. Any held card may be discarded."""
        result = self._check_turn(game, player, TurnPhase.PLAY)
        if not result.is_valid:
            return result

        if not player.has_card(card):
            return ValidationResult(
                is_valid=False,
                error_message="Player does not have the card",
            )

        return ValidationResult(is_valid=True)

    def validate_draw(self, game: Game, player: Player, source: DrawSource) -> ValidationResult:
        """Validate drawing from source.

        Args:
            game: Current game
            player: Player making the move
            source: Deck or discard pile

        Returns:
            ValidationResult
        """
        result = self._check_turn(game, player, TurnPhase.DRAW)
        if not result.is_valid:
            return result

        if player.can_draw_from(source):
            return ValidationResult(is_valid=True)

        if isinstance(source, DiscardPile):
            if source.is_empty():
                message = f"The {SUIT_NAMES[source.suit]} pile is empty"
            else:
                message = "Cannot take back the card just discarded"
        else:
            message = "The deck is empty"
        return ValidationResult(is_valid=False, error_message=message)

    def draw_sources(self, game: Game, player: Player) -> list[tuple[str | Suit, DrawSource]]:
        """List the sources player may draw from, deck first.

        Returns:
            (key, source) pairs where key is "deck" or the pile's Suit.
        """
        sources: list[tuple[str | Suit, DrawSource]] = []
        if player.can_draw_from(game.deck):
            sources.append((DECK_KEY, game.deck))
        for suit, pile in game.discard_piles.items():
            if player.can_draw_from(pile):
                sources.append((suit, pile))
        return sources
