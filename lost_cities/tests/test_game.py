"""Tests for the game engine."""

import itertools
import random

import pytest

from lost_cities.config import Config, GameConfig
from lost_cities.errors import IllegalDrawError, TurnOrderError
from lost_cities.game.engine import DECK_KEY, Game, new_game
from lost_cities.models.card import Deck, Suit, generate_deck, make_card, shuffle
from lost_cities.models.game_state import TurnPhase

_ids = itertools.count(1000)


def card(rank, suit=Suit.RED):
    return make_card(rank, suit, card_id=next(_ids))


@pytest.fixture
def game():
    return Game(Config(game=GameConfig(seed=42)))


def discard_and_draw_deck(game):
    """Turn callback: discard the first card, draw from the deck."""
    turns = []

    def take_turn(player):
        assert not game.deck.is_empty(), "turn taken with an empty deck"
        game.discard_card(player, player.hand[0])
        game.draw(player, game.deck)
        turns.append(player.number)

    return take_turn, turns


class TestNewGame:
    """Tests for dealing a new game."""

    def test_hands_and_deck(self, game):
        """Test 8 cards per hand and 44 left in the deck."""
        assert len(game.player1.hand) == 8
        assert len(game.player2.hand) == 8
        assert game.deck.size() == 44

    def test_hands_sorted(self, game):
        """Test that hands are sorted by suit, then value."""
        for player in game.players:
            keys = [(c.suit, c.value) for c in player.hand]
            assert keys == sorted(keys)

    def test_all_cards_accounted_for(self, game):
        """Test that deck and hands together hold each card once."""
        ids = [c.card_id for c in game.deck]
        for player in game.players:
            ids.extend(c.card_id for c in player.hand)
        assert sorted(ids) == list(range(60))

    def test_initial_state(self, game):
        """Test empty piles, empty adventures and player 1 to play."""
        assert all(pile.is_empty() for pile in game.discard_piles.values())
        assert all(p.score == 0 for p in game.players)
        assert game.current_player is game.player1
        assert game.phase == TurnPhase.PLAY
        assert [p.number for p in game.players] == [1, 2]

    def test_round_robin_deal(self):
        """Test that cards are dealt alternately from the top."""
        cards = generate_deck()
        shuffle(cards, random.Random(5))
        top_first = list(reversed(cards))

        game = Game(Config(game=GameConfig(seed=5)))

        assert {c.card_id for c in game.player1.hand} == {c.card_id for c in top_first[0:16:2]}
        assert {c.card_id for c in game.player2.hand} == {c.card_id for c in top_first[1:16:2]}

    def test_seeded(self):
        """Test that the same seed deals the same game."""
        first = new_game(seed=9)
        second = new_game(seed=9)
        assert first.player1.hand == second.player1.hand
        assert first.deck.to_list() == second.deck.to_list()

    def test_injected_rng(self):
        """Test dealing with an explicit random source."""
        first = Game(rng=random.Random(3))
        second = Game(rng=random.Random(3))
        assert first.player2.hand == second.player2.hand

    def test_player_names(self):
        """Test that names come from the config."""
        game = Game(Config(game=GameConfig(seed=1, player_names=["Ann", "Bo"])))
        assert game.player1.name == "Ann"
        assert game.player2.name == "Bo"


class TestTurnOrder:
    """Tests for next_player and the turn commands."""

    def test_next_player_toggles(self, game):
        """Test that next_player alternates between the two players."""
        game.next_player()
        assert game.current_player is game.player2
        game.next_player()
        assert game.current_player is game.player1

    def test_discard_routes_by_suit(self, game):
        """Test that Game.discard uses the pile of the card's suit."""
        yellow = card(6, Suit.YELLOW)
        game.discard(yellow)
        assert game.discard_piles[Suit.YELLOW].peek_top() == yellow
        assert game.discard_piles[Suit.RED].is_empty()

    def test_full_turn(self, game):
        """Test discard then draw passes the turn to player 2."""
        player = game.player1
        played = player.hand[0]

        game.discard_card(player, played)
        assert game.phase == TurnPhase.DRAW
        assert len(player.hand) == 7

        game.draw(player, DECK_KEY)
        assert len(player.hand) == 8
        assert game.current_player is game.player2
        assert game.phase == TurnPhase.PLAY
        assert game.state.turn_number == 2

    def test_invest_command(self, game):
        """Test investing through the game."""
        player = game.player1
        played = player.hand[0]

        game.invest(player, played)

        assert player.adventures[played.suit].investments == [played]
        assert game.phase == TurnPhase.DRAW

    def test_out_of_turn(self, game):
        """Test that player 2 cannot act on player 1's turn."""
        with pytest.raises(TurnOrderError):
            game.discard_card(game.player2, game.player2.hand[0])

    def test_wrong_phase(self, game):
        """Test that drawing before playing and playing twice fail."""
        player = game.player1
        with pytest.raises(TurnOrderError):
            game.draw(player, game.deck)

        game.discard_card(player, player.hand[0])
        with pytest.raises(TurnOrderError):
            game.invest(player, player.hand[0])

    def test_no_take_back(self, game):
        """Test that the discarded card cannot be drawn back this turn."""
        player = game.player1
        played = player.hand[0]
        game.discard_card(player, played)

        with pytest.raises(IllegalDrawError):
            game.draw(player, played.suit)

    def test_opponent_takes_discard(self, game):
        """Test that the other player may take the discarded card."""
        played = game.player1.hand[0]
        game.discard_card(game.player1, played)
        game.draw(game.player1, game.deck)

        opponent = game.player2
        game.discard_card(opponent, next(c for c in opponent.hand if c.suit != played.suit))
        drawn = game.draw(opponent, played.suit)

        assert drawn == played
        assert played in opponent.hand

    def test_source_for(self, game):
        """Test looking up draw sources by key."""
        assert game.source_for(DECK_KEY) is game.deck
        assert game.source_for(Suit.BLUE) is game.discard_piles[Suit.BLUE]
        assert game.source_for("green") is game.discard_piles[Suit.GREEN]


class TestGameEnd:
    """Tests for the turn loop and game end."""

    def test_plays_until_deck_empty(self, game):
        """Test that the loop runs one turn per deck card."""
        take_turn, turns = discard_and_draw_deck(game)

        scores = game.play(take_turn)

        assert game.deck.is_empty()
        assert game.is_over
        assert game.state.game_over
        assert len(turns) == 44
        assert turns[:4] == [1, 2, 1, 2]
        assert scores == {1: 0, 2: 0}

    def test_no_trailing_turn(self, game):
        """Test that player 2 does not move after player 1 empties the deck."""
        game.deck = Deck([card(n, Suit.WHITE) for n in (2, 3, 4)])
        take_turn, turns = discard_and_draw_deck(game)

        game.play(take_turn)

        assert turns == [1, 2, 1]
        assert game.state.game_over

    def test_even_deck(self, game):
        """Test that both players move when the deck runs out on player 2."""
        game.deck = Deck([card(n, Suit.WHITE) for n in (2, 3)])
        take_turn, turns = discard_and_draw_deck(game)

        game.play(take_turn)

        assert turns == [1, 2]

    def test_no_moves_after_end(self, game):
        """Test that commands are refused once the game is over."""
        game.deck = Deck([card(2, Suit.WHITE)])
        take_turn, _ = discard_and_draw_deck(game)
        game.play(take_turn)

        with pytest.raises(TurnOrderError):
            game.discard_card(game.player2, game.player2.hand[0])

    def test_game_end_callback(self, game):
        """Test that on_game_end fires once with the final scores."""
        game.deck = Deck([card(n, Suit.WHITE) for n in (2, 3, 4)])
        results = []
        game.set_callbacks(on_game_end=results.append)
        take_turn, _ = discard_and_draw_deck(game)

        scores = game.play(take_turn)

        assert results == [scores]

    def test_turn_callback(self, game):
        """Test that on_turn reports each completed turn."""
        game.deck = Deck([card(2, Suit.WHITE)])
        seen = []
        game.set_callbacks(on_turn=lambda *args: seen.append(args))
        played = game.player1.hand[0]

        game.discard_card(game.player1, played)
        drawn = game.draw(game.player1, game.deck)

        assert seen == [(game.player1, "discard", played, DECK_KEY, drawn)]

    def test_winner(self, game):
        """Test the winner and ties."""
        assert game.winner() is None

        game.player1.adventures[Suit.RED].invest(card(10))
        game.player1.adventures[Suit.RED].invest(card(10))
        game.player1.adventures[Suit.RED].invest(card(10))
        assert game.scores() == {1: 10, 2: 0}
        assert game.winner() is game.player1
