"""Game state models."""

from enum import Enum

from pydantic import BaseModel


class TurnPhase(str, Enum):
    """Step of the current player's turn."""

    PLAY = "play"  # Invest or discard a hand card
    DRAW = "draw"  # Draw from the deck or a discard pile


class GameState(BaseModel):
    """Turn bookkeeping for a game."""

    seed: int | None = None
    turn_number: int = 1

    current_player_index: int = 0  # 0 = player 1, 1 = player 2
    phase: TurnPhase = TurnPhase.PLAY

    game_over: bool = False

    def advance(self, num_players: int) -> None:
        """Pass the turn to the next player."""
        self.current_player_index = (self.current_player_index + 1) % num_players
        self.phase = TurnPhase.PLAY
        self.turn_number += 1

    def __str__(self) -> str:
        parts = [f"Turn {self.turn_number}"]
        if self.game_over:
            parts.append("[GAME OVER]")
        parts.append(f"Player {self.current_player_index + 1} to {self.phase.value}")
        return " ".join(parts)
