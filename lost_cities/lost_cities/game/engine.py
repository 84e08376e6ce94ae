"""Game engine for Lost Cities."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable

from lost_cities.config import Config
from lost_cities.errors import TurnOrderError
from lost_cities.models.card import SUIT_NAMES, Card, Deck, DiscardPile, Suit
from lost_cities.models.game_state import GameState, TurnPhase
from lost_cities.models.player import HAND_SIZE, DrawSource, Player

if TYPE_CHECKING:
    from lost_cities.logging import GameLogger

logger = logging.getLogger(__name__)

NUM_PLAYERS = 2

# Key used for the deck wherever draw sources are named
DECK_KEY = "deck"


class Game:
    """Two-player game: deck, discard piles, players and turn order."""

    def __init__(
        self,
        config: Config | None = None,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Deal a new game.

        Args:
            config: Configuration (uses defaults if not provided)
            rng: Random source for the shuffle. Built from config.game.seed
                when not provided.
            game_logger: GameLogger instance for detailed logging
        """
        self.config = config or Config()
        self.game_logger = game_logger

        seed = self.config.game.seed
        self.rng = rng or random.Random(seed)
        self.state = GameState(seed=seed)

        self.deck = Deck.shuffled(self.rng)
        self.discard_piles: dict[Suit, DiscardPile] = {suit: DiscardPile(suit) for suit in Suit}

        hands = self._deal(HAND_SIZE, NUM_PLAYERS)
        names = self.config.game.player_names
        self.players: list[Player] = [
            Player(number=i + 1, name=names[i], game=self, hand=hands[i])
            for i in range(NUM_PLAYERS)
        ]

        # (action, card) of the current turn, logged once the player draws
        self._played: tuple[str, Card] | None = None

        self._on_turn: Callable[[Player, str, Card, str, Card], None] | None = None
        self._on_game_end: Callable[[dict[int, int]], None] | None = None

        logger.info(
            f"New game (seed={seed}), {self.deck.size()} cards left in deck"
        )
        if self.game_logger:
            self.game_logger.log_game_start(self)

    def _deal(self, num_cards: int, num_players: int) -> list[list[Card]]:
        """Deal cards round-robin from the top of the deck."""
        hands: list[list[Card]] = [[] for _ in range(num_players)]
        for _ in range(num_cards):
            for hand in hands:
                hand.append(self.deck.draw_top())
        return hands

    def set_callbacks(
        self,
        on_turn: Callable[[Player, str, Card, str, Card], None] | None = None,
        on_game_end: Callable[[dict[int, int]], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_turn: Called after each completed turn
                (player, action, card played, draw source key, card drawn)
            on_game_end: Called when the game ends (scores by player number)
        """
        self._on_turn = on_turn
        self._on_game_end = on_game_end

    @property
    def player1(self) -> Player:
        return self.players[0]

    @property
    def player2(self) -> Player:
        return self.players[1]

    @property
    def current_player(self) -> Player:
        return self.players[self.state.current_player_index]

    @property
    def phase(self) -> TurnPhase:
        return self.state.phase

    @property
    def is_over(self) -> bool:
        """The game ends as soon as the deck is exhausted."""
        return self.deck.is_empty()

    def opponent(self, player: Player) -> Player:
        return self.players[1] if player is self.players[0] else self.players[0]

    def discard_tops(self) -> dict[Suit, Card | None]:
        """Get the visible top card of every discard pile."""
        return {suit: pile.peek_top() for suit, pile in self.discard_piles.items()}

    def source_for(self, key: str | Suit) -> DrawSource:
        """Look up a draw source by key ("deck", a Suit or a suit name)."""
        if isinstance(key, Suit):
            return self.discard_piles[key]
        if key == DECK_KEY:
            return self.deck
        return self.discard_piles[Suit[key.upper()]]

    def source_key(self, source: DrawSource) -> str:
        """Name a draw source for logs ("deck" or the suit name)."""
        if isinstance(source, DiscardPile):
            return SUIT_NAMES[source.suit].lower()
        return DECK_KEY

    # Rules-level operations

    def discard(self, card: Card) -> None:
        """Put a card on the discard pile of its suit."""
        self.discard_piles[card.suit].push(card)

    def next_player(self) -> None:
        """Pass the turn to the other player."""
        self.state.advance(len(self.players))

    # Commands for the terminal layer

    def _check_turn(self, player: Player, phase: TurnPhase) -> None:
        if self.state.game_over:
            raise TurnOrderError("The game is over")
        if player is not self.current_player:
            raise TurnOrderError(f"It is not {player}'s turn")
        if self.state.phase != phase:
            raise TurnOrderError(
                f"{player} must {self.state.phase.value}, not {phase.value}"
            )

    def select_candidate(self, player: Player, card: Card | None) -> None:
        """Move the UI selection of player to card."""
        player.select_candidate(card)

    def invest(self, player: Player, card: Card) -> None:
        """Invest card from player's hand in the matching adventure."""
        self._check_turn(player, TurnPhase.PLAY)
        player.invest(card)
        self._played = ("invest", card)
        self.state.phase = TurnPhase.DRAW
        logger.debug(f"{player} invested {card}")

    def discard_card(self, player: Player, card: Card) -> None:
        """Discard card from player's hand onto the pile of its suit."""
        self._check_turn(player, TurnPhase.PLAY)
        player.discard(card)
        self._played = ("discard", card)
        self.state.phase = TurnPhase.DRAW
        logger.debug(f"{player} discarded {card}")

    def draw(self, player: Player, source: DrawSource | str | Suit) -> Card:
        """Draw a card for player, ending the turn.

        Args:
            player: Player whose turn it is.
            source: The deck, a discard pile, or the key of one.

        Returns:
            The drawn card.
        """
        if not isinstance(source, (Deck, DiscardPile)):
            source = self.source_for(source)
        self._check_turn(player, TurnPhase.DRAW)

        turn_number = self.state.turn_number
        card = player.draw_from(source)
        key = self.source_key(source)
        logger.debug(f"{player} drew {card} from {key}, {self.deck.size()} cards left")

        played = self._played
        self._played = None
        if played is not None:
            action, played_card = played
            if self.game_logger:
                self.game_logger.log_turn(turn_number, player, action, played_card, key, card, self)
            if self._on_turn:
                self._on_turn(player, action, played_card, key, card)

        if self.is_over:
            self._finish()
        return card

    # Game loop

    def play(self, take_turn: Callable[[Player], None]) -> dict[int, int]:
        """Run the turn loop until the deck is exhausted.

        Player 2 does not move in a round where player 1 drew the last card.

        Args:
            take_turn: Plays one full turn (pick, invest/discard, draw) for
                the given player.

        Returns:
            Final scores by player number.
        """
        while not self.deck.is_empty():
            take_turn(self.player1)
            if not self.deck.is_empty():
                take_turn(self.player2)

        if not self.state.game_over:
            self._finish()
        return self.scores()

    def _finish(self) -> None:
        self.state.game_over = True
        scores = self.scores()
        winner = self.winner()
        logger.info(
            f"Game over after {self.state.turn_number - 1} turns: "
            + ", ".join(f"{p} {scores[p.number]}" for p in self.players)
            + (f", winner {winner}" if winner else ", tie")
        )
        if self.game_logger:
            self.game_logger.log_game_end(self)
        if self._on_game_end:
            self._on_game_end(scores)

    def scores(self) -> dict[int, int]:
        """Current score of each player, by player number."""
        return {p.number: p.score for p in self.players}

    def winner(self) -> Player | None:
        """Player with the highest score, or None on a tie."""
        first, second = self.players
        if first.score == second.score:
            return None
        return first if first.score > second.score else second


def new_game(
    seed: int | None = None,
    config: Config | None = None,
    game_logger: GameLogger | None = None,
) -> Game:
    """Create a freshly dealt game.

    Args:
        seed: Shuffle seed (overrides config.game.seed).
        config: Configuration (uses defaults if not provided).
        game_logger: GameLogger instance for detailed logging.
    """
    config = config or Config()
    if seed is not None:
        config = config.model_copy(deep=True)
        config.game.seed = seed
    return Game(config, game_logger=game_logger)
