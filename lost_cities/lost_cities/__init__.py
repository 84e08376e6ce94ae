"""Lost Cities card game."""

__version__ = "0.1.0"
