"""Curses hot-seat front-end.

Layout (top to bottom):
    player 1 prompt, score and hand
    player 1 adventures, growing upward from the board row
    board row: discard pile tops per suit and the deck count
    player 2 adventures, growing downward
    player 2 hand, score and prompt

Keys:
    left/right: Select a card
    i: Invest the selected card
    d: Discard the selected card (or draw from the deck)
    r/g/w/b/y: Draw from a discard pile
    q: Quit
"""

from __future__ import annotations

import curses
import logging
from typing import TYPE_CHECKING

from lost_cities.game.engine import DECK_KEY, Game
from lost_cities.game.validator import MoveValidator
from lost_cities.models.card import SUIT_NAMES, Card, Suit
from lost_cities.models.player import DrawSource, Player

if TYPE_CHECKING:
    from curses import window

logger = logging.getLogger(__name__)

# Screen rows
PROMPT_ROW_P1 = 0
SCORE_ROW_P1 = 1
HAND_ROW_P1 = 2
BOARD_ROW = 16  # Room for 12 investments on either side
HAND_ROW_P2 = 30
SCORE_ROW_P2 = 31
PROMPT_ROW_P2 = 32

BOARD_LEFT = 1
COLUMN_WIDTH = 4
HAND_LEFT = 6

SUIT_COLORS = {
    Suit.RED: curses.COLOR_RED,
    Suit.GREEN: curses.COLOR_GREEN,
    Suit.WHITE: curses.COLOR_WHITE,
    Suit.BLUE: curses.COLOR_BLUE,
    Suit.YELLOW: curses.COLOR_YELLOW,
}

PICK_PROMPT = "Use the arrow keys to select a card. [I]nvest or [D]iscard"
PICK_PROMPT_DISCARD_ONLY = "Use the arrow keys to select a card. [D]iscard"


class QuitGame(Exception):
    """Raised when the player quits in the middle of a game."""


def source_name(key: str | Suit) -> str:
    """Display name of a draw source key."""
    if key == DECK_KEY:
        return "Deck"
    return SUIT_NAMES[Suit(key)]


def draw_prompt(sources: list[tuple[str | Suit, DrawSource]]) -> tuple[str, dict[str, str | Suit]]:
    """Build the draw prompt and its key bindings.

    Args:
        sources: (key, source) pairs the player may draw from.

    Returns:
        Prompt text (e.g. "From where will you draw a card? [D]eck, [R]ed")
        and a mapping of key character to source key.
    """
    names = [(key, source_name(key)) for key, _ in sources]
    options = ", ".join(f"[{name[0]}]{name[1:]}" for _, name in names)
    keys = {name[0].lower(): key for key, name in names}
    return f"From where will you draw a card? {options}", keys


def move_candidate(index: int, step: int, hand_size: int) -> int:
    """Move the selection cursor, clamped to the hand."""
    return max(0, min(index + step, hand_size - 1))


class TerminalUI:
    """Renders a game and reads moves from the keyboard."""

    def __init__(
        self,
        stdscr: "window",
        game: Game,
        color: bool = True,
        validator: MoveValidator | None = None,
    ):
        """Initialize the UI.

        Args:
            stdscr: Curses screen
            game: Game to play
            color: Whether to use suit colours
            validator: MoveValidator instance (creates one if not provided)
        """
        self.stdscr = stdscr
        self.game = game
        self.validator = validator or MoveValidator()
        self.color = color and curses.has_colors()
        if self.color:
            self._init_colors()

    def _init_colors(self) -> None:
        curses.start_color()
        curses.use_default_colors()
        for suit, color in SUIT_COLORS.items():
            curses.init_pair(suit + 1, color, -1)

    def suit_attr(self, suit: Suit, usable: bool = True, selected: bool = False) -> int:
        """Curses attributes for a card of suit."""
        attr = curses.color_pair(suit + 1) if self.color else curses.A_NORMAL
        if not usable:
            attr |= curses.A_DIM
        else:
            attr |= curses.A_BOLD
        if selected:
            attr |= curses.A_REVERSE
        return attr

    def _put(self, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
        """Write text, clipped to the screen."""
        height, width = self.stdscr.getmaxyx()
        if y >= height or x >= width - 1:
            return
        try:
            self.stdscr.addnstr(y, x, text, width - 1 - x, attr)
        except curses.error:
            # Writing to the bottom-right cell raises after the write succeeds
            pass

    # Rendering

    def draw_board(self) -> None:
        """Draw both players, the adventures, the piles and the deck."""
        self.stdscr.clear()
        game = self.game

        self._draw_player_header(game.player1, SCORE_ROW_P1, HAND_ROW_P1)
        self._draw_player_header(game.player2, SCORE_ROW_P2, HAND_ROW_P2)

        left = BOARD_LEFT
        for suit in Suit:
            top = game.discard_piles[suit].peek_top()
            text = top.display_text() if top else SUIT_NAMES[suit][0]
            self._put(BOARD_ROW, left, text, self.suit_attr(suit) | curses.A_REVERSE)

            for i, card in enumerate(game.player1.adventures[suit].investments):
                self._put(BOARD_ROW - 1 - i, left, card.display_text(), self.suit_attr(suit))
            for i, card in enumerate(game.player2.adventures[suit].investments):
                self._put(BOARD_ROW + 1 + i, left, card.display_text(), self.suit_attr(suit))
            left += COLUMN_WIDTH

        self._put(BOARD_ROW, left, "D", curses.A_REVERSE)
        self._put(BOARD_ROW, left + 1, f" = {game.deck.size()}")
        self.stdscr.refresh()

    def _draw_player_header(self, player: Player, score_row: int, hand_row: int) -> None:
        marker = " <<<" if player is self.game.current_player else ""
        self._put(score_row, 0, f"Player {player.number} ({player.name}) Score: {player.score}{marker}")
        self._put(hand_row, 0, "Hand: ")
        self.draw_hand(player, hand_row)

    def draw_hand(self, player: Player, row: int) -> None:
        """Draw a hand, highlighting the candidate card."""
        x = HAND_LEFT
        for card in player.hand:
            attr = self.suit_attr(
                card.suit,
                usable=player.can_invest(card),
                selected=card == player.candidate,
            )
            self._put(row, x, card.display_text(), attr)
            x += 2

    def show_prompt(self, player: Player, text: str) -> None:
        row = PROMPT_ROW_P1 if player.number == 1 else PROMPT_ROW_P2
        self._put(row, 0, text)
        self.stdscr.clrtoeol()
        self.stdscr.refresh()

    # Input

    def take_turn(self, player: Player) -> None:
        """Play one full turn for player."""
        self.pick_card(player)
        self.choose_source(player)
        self.draw_board()

    def pick_card(self, player: Player) -> Card:
        """Select a card and invest or discard it.

        Returns:
            The card played.
        """
        index = 0
        while True:
            candidate = player.hand[index]
            self.game.select_candidate(player, candidate)
            can_invest = self.validator.validate_invest(self.game, player, candidate).is_valid

            self.draw_board()
            self.show_prompt(player, PICK_PROMPT if can_invest else PICK_PROMPT_DISCARD_ONLY)

            key = self.stdscr.getch()
            if key == curses.KEY_LEFT:
                index = move_candidate(index, -1, len(player.hand))
            elif key == curses.KEY_RIGHT:
                index = move_candidate(index, 1, len(player.hand))
            elif key == ord("i") and can_invest:
                self.game.invest(player, candidate)
                return candidate
            elif key == ord("d"):
                self.game.discard_card(player, candidate)
                return candidate
            elif key == ord("q"):
                raise QuitGame()

    def choose_source(self, player: Player) -> Card:
        """Ask where to draw from and draw.

        Returns:
            The drawn card.
        """
        self.draw_board()
        prompt, keys = draw_prompt(self.validator.draw_sources(self.game, player))
        self.show_prompt(player, prompt)

        while True:
            key = self.stdscr.getch()
            if key == ord("q"):
                raise QuitGame()
            if 0 <= key < 256 and chr(key) in keys:
                return self.game.draw(player, keys[chr(key)])


def run(stdscr: "window", game: Game, color: bool = True) -> dict[int, int]:
    """Play game to the end in the curses screen.

    Returns:
        Final scores by player number.
    """
    curses.curs_set(0)
    stdscr.keypad(True)
    ui = TerminalUI(stdscr, game, color=color)
    logger.debug("Terminal UI started")
    return game.play(ui.take_turn)
