"""Main entry point for Lost Cities."""

import argparse
import curses
import logging
import sys
from pathlib import Path

from lost_cities.config import Config, load_config
from lost_cities.game.engine import Game
from lost_cities.logging import GameLogger, generate_log_filename
from lost_cities.ui.terminal import QuitGame, run
from lost_cities.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Lost Cities two-player card game for the terminal"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Shuffle seed (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        help="File for application logs (overrides config)",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable suit colours",
    )
    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line overrides to config."""
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.log_file:
        config.logging.file = args.log_file
    if args.game_log:
        config.game_log.enabled = True
        config.game_log.output_path = str(args.game_log)
    if args.no_color:
        config.display.color = False
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)
    config = apply_overrides(load_config(args.config), args)

    setup_logging(config.logging.level, config.logging.file)

    display = GameDisplay()

    log_path = None
    if config.game_log.enabled:
        log_path = generate_log_filename(config.game_log.output_path, config.game.player_names)

    try:
        with GameLogger(log_path) as game_logger:
            game = Game(config, game_logger=game_logger)
            curses.wrapper(lambda stdscr: run(stdscr, game, color=config.display.color))

        display.print_game_start(game)
        display.print_final_results(game)
        if log_path:
            print(f"Game log: {log_path}")
        return 0

    except QuitGame:
        print("Game abandoned")
        return 1
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
