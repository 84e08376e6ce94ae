"""Game logger for detailed game replay."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from lost_cities.models.card import Card
from lost_cities.models.player import Player

from .formatters import SUIT_CODES, format_card, format_cards, format_hands, format_piles

if TYPE_CHECKING:
    from lost_cities.game.engine import Game


def generate_log_filename(log_dir: str, player_names: list[str]) -> str:
    """Generate log filename with timestamp and player names.

    Format: {timestamp}_{player1}_{player2}.jsonl

    Args:
        log_dir: Directory for log files.
        player_names: Player names in seat order.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    names = "_".join(name.replace(" ", "") for name in player_names)
    filename = f"{timestamp}_{names}.jsonl"
    return str(Path(log_dir) / filename)


def format_adventures(player: Player) -> dict[str, str]:
    """Format a player's adventures to dict keyed by suit code."""
    return {
        SUIT_CODES[suit]: format_cards(adventure.investments)
        for suit, adventure in player.adventures.items()
    }


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, output_path: str | None = None):
        """Initialize game logger.

        Args:
            output_path: JSONL file to append to. If None, logging is disabled.
        """
        self.output_path = output_path
        self._file: TextIO | None = None

    @property
    def enabled(self) -> bool:
        return self.output_path is not None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.output_path:
            path = Path(self.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, game: Game) -> None:
        """Log game start with the initial deal.

        Args:
            game: Freshly dealt game.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "seed": game.state.seed,
            "players": [
                {"number": p.number, "name": p.name}
                for p in game.players
            ],
            "hands": format_hands([p.hand for p in game.players]),
            "deck": game.deck.size(),
        })

    def log_turn(
        self,
        turn_num: int,
        player: Player,
        action: str,
        card: Card,
        draw_from: str,
        drawn: Card,
        game: Game,
    ) -> None:
        """Log a completed turn.

        Args:
            turn_num: Turn number within the game.
            player: Player who took the turn.
            action: "invest" or "discard".
            card: Card invested or discarded.
            draw_from: "deck" or the name of the suit drawn from.
            drawn: Card drawn at the end of the turn.
            game: Game state after the turn.
        """
        self._write({
            "type": "turn",
            "turn": turn_num,
            "player": player.number,
            "action": action,
            "card": format_card(card),
            "draw_from": draw_from,
            "drawn": format_card(drawn),
            "hands": format_hands([p.hand for p in game.players]),
            "adventures": {
                str(p.number): format_adventures(p)
                for p in game.players
            },
            "piles": format_piles(game.discard_tops()),
            "deck": game.deck.size(),
            "scores": {str(k): v for k, v in game.scores().items()},
        })

    def log_game_end(self, game: Game) -> None:
        """Log game end with results.

        Args:
            game: Finished game.
        """
        winner = game.winner()
        self._write({
            "type": "game_end",
            "scores": {str(k): v for k, v in game.scores().items()},
            "winner": winner.number if winner else None,
        })
