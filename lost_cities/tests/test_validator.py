"""Tests for move validator."""

import pytest

from lost_cities.config import Config, GameConfig
from lost_cities.game.engine import DECK_KEY, Game
from lost_cities.game.validator import MoveValidator
from lost_cities.models.card import Suit, make_card


@pytest.fixture
def validator():
    return MoveValidator()


@pytest.fixture
def game():
    return Game(Config(game=GameConfig(seed=11)))


class TestValidatePlay:
    """Tests for validate_invest and validate_discard."""

    def test_valid_invest(self, validator, game):
        """Test investing a held card in an empty adventure."""
        player = game.player1
        result = validator.validate_invest(game, player, player.hand[0])
        assert result.is_valid
        assert result.error_message == ""

    def test_invest_too_low(self, validator, game):
        """Test investing below the last invested card."""
        player = game.player1
        red_three = make_card(3, Suit.RED, card_id=100)
        red_eight = make_card(8, Suit.RED, card_id=101)
        player.hand[:] = [red_three, red_eight]
        game.invest(player, red_eight)
        game.draw(player, game.deck)
        game.discard_card(game.player2, game.player2.hand[0])
        game.draw(game.player2, game.deck)

        result = validator.validate_invest(game, player, red_three)
        assert not result.is_valid
        assert "lower" in result.error_message

    def test_not_in_hand(self, validator, game):
        """Test playing a card the player does not hold."""
        player = game.player1
        foreign = game.player2.hand[0]
        assert not validator.validate_invest(game, player, foreign).is_valid
        assert not validator.validate_discard(game, player, foreign).is_valid

    def test_not_your_turn(self, validator, game):
        """Test playing on the opponent's turn."""
        player = game.player2
        result = validator.validate_discard(game, player, player.hand[0])
        assert not result.is_valid
        assert "turn" in result.error_message

    def test_discard_any_card(self, validator, game):
        """Test that every held card can be discarded."""
        player = game.player1
        assert all(validator.validate_discard(game, player, c).is_valid for c in player.hand)

    def test_wrong_phase(self, validator, game):
        """Test playing a second card in the draw phase."""
        player = game.player1
        game.discard_card(player, player.hand[0])
        assert not validator.validate_invest(game, player, player.hand[0]).is_valid


class TestValidateDraw:
    """Tests for validate_draw and draw_sources."""

    def test_deck_only_at_start(self, validator, game):
        """Test that only the deck is offered while all piles are empty."""
        player = game.player1
        game.discard_card(player, player.hand[0])
        played_suit = game.player1.last_discarded_card.suit

        sources = validator.draw_sources(game, player)
        assert [key for key, _ in sources] == [DECK_KEY]

        result = validator.validate_draw(game, player, game.discard_piles[played_suit])
        assert not result.is_valid
        assert "take back" in result.error_message

    def test_empty_pile_message(self, validator, game):
        """Test the reason given for an empty pile."""
        player = game.player1
        played = player.hand[0]
        game.discard_card(player, played)
        other = next(s for s in Suit if s != played.suit)

        result = validator.validate_draw(game, player, game.discard_piles[other])
        assert not result.is_valid
        assert "empty" in result.error_message

    def test_opponent_pile_offered(self, validator, game):
        """Test that the opponent's discard is offered after they move."""
        played = game.player1.hand[0]
        game.discard_card(game.player1, played)
        game.draw(game.player1, game.deck)

        opponent = game.player2
        game.discard_card(opponent, next(c for c in opponent.hand if c.suit != played.suit))

        keys = [key for key, _ in validator.draw_sources(game, opponent)]
        assert keys[0] == DECK_KEY
        assert played.suit in keys
        assert validator.validate_draw(game, opponent, game.discard_piles[played.suit]).is_valid

    def test_draw_before_play(self, validator, game):
        """Test drawing during the play phase."""
        assert not validator.validate_draw(game, game.player1, game.deck).is_valid
