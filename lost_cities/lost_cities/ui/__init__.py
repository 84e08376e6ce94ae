"""Terminal front-end."""

from .terminal import QuitGame, TerminalUI, draw_prompt, run

__all__ = [
    "QuitGame",
    "TerminalUI",
    "draw_prompt",
    "run",
]
