"""Logging utilities and game result display."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from lost_cities.models.card import SUIT_NAMES

if TYPE_CHECKING:
    from lost_cities.game.engine import Game
    from lost_cities.models.player import Player


def setup_logging(level: str = "WARNING", filename: str | None = None) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        filename: Log file. Logs go to stderr when not given.
    """
    if filename:
        logging.basicConfig(
            level=getattr(logging, level.upper()),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
            filename=filename,
        )
    else:
        logging.basicConfig(
            level=getattr(logging, level.upper()),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
            stream=sys.stderr,
        )


class GameDisplay:
    """Print game information to stdout (outside curses)."""

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_game_start(self, game: "Game") -> None:
        """Print game start message."""
        self.print_separator()
        print(f"{game.player1.name} vs {game.player2.name}")
        if game.state.seed is not None:
            print(f"Seed: {game.state.seed}")
        self.print_separator()

    def print_adventures(self, player: "Player") -> None:
        """Print a player's started adventures with their values."""
        for suit, adventure in player.adventures.items():
            if not adventure.is_started():
                continue
            cards = " ".join(c.display_text() for c in adventure.investments)
            print(
                f"  {SUIT_NAMES[suit]:<7} {cards:<24} "
                f"x{adventure.multiplier} = {adventure.value}"
            )

    def print_final_results(self, game: "Game") -> None:
        """Print final scores and the winner."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        for player in game.players:
            print(f"Player {player.number} ({player.name}) scored {player.score}")
            self.print_adventures(player)

        winner = game.winner()
        print()
        if winner:
            print(f"{winner.name} wins!")
        else:
            print("It's a tie.")
