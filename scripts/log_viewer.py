#!/usr/bin/env python3
"""Interactive log viewer for Lost Cities game logs.

Usage:
    python scripts/log_viewer.py logs/20260101T120000_Player1_Player2.jsonl

Keys:
    n: Next step
    p: Previous step
    c: Continuous playback (1 sec interval), any key to stop
    t: Jump to turn number
    q: Quit
"""

import argparse
import curses
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path

SUIT_CODES = ["R", "G", "W", "B", "Y"]
SUIT_NAMES = {"R": "Red", "G": "Green", "W": "White", "B": "Blue", "Y": "Yellow"}


@dataclass
class ReplayState:
    """Board state for display."""

    turn: int = 0
    players: list[dict] = field(default_factory=list)
    hands: dict[str, str] = field(default_factory=dict)
    adventures: dict[str, dict[str, str]] = field(default_factory=dict)
    piles: dict[str, str] = field(default_factory=dict)
    scores: dict[str, int] = field(default_factory=dict)
    deck: int = 0
    last_action: str = ""
    current_player: int = 0


def load_events(path: Path) -> list[dict]:
    """Load all events from JSONL file."""
    events = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                events.append(json.loads(line))
    return events


def describe_turn(event: dict) -> str:
    """One-line description of a turn event."""
    player = event.get("player", 0)
    verb = "invested" if event.get("action") == "invest" else "discarded"
    source = event.get("draw_from", "deck")
    return (
        f"Player {player} {verb} {event.get('card', '')}, "
        f"drew {event.get('drawn', '')} from {source}"
    )


def build_states(events: list[dict]) -> list[ReplayState]:
    """Build displayable states from events."""
    states: list[ReplayState] = []
    current = ReplayState()

    for event in events:
        event_type = event.get("type")

        if event_type == "game_start":
            current = ReplayState()
            current.players = event.get("players", [])
            current.hands = event.get("hands", {})
            current.deck = event.get("deck", 0)
            current.current_player = 1
            seed = event.get("seed")
            current.last_action = "Game started" + (f" (seed {seed})" if seed is not None else "")
            states.append(_copy_state(current))

        elif event_type == "turn":
            current.turn = event.get("turn", current.turn)
            current.hands = event.get("hands", current.hands)
            current.adventures = event.get("adventures", current.adventures)
            current.piles = event.get("piles", current.piles)
            current.scores = event.get("scores", current.scores)
            current.deck = event.get("deck", current.deck)
            current.current_player = event.get("player", 0)
            current.last_action = describe_turn(event)
            states.append(_copy_state(current))

        elif event_type == "game_end":
            current.scores = event.get("scores", current.scores)
            winner = event.get("winner")
            if winner is None:
                current.last_action = "Game ended in a tie"
            else:
                current.last_action = f"Game ended. Player {winner} wins"
            states.append(_copy_state(current))

    return states


def _copy_state(state: ReplayState) -> ReplayState:
    """Create a copy of the replay state."""
    return ReplayState(
        turn=state.turn,
        players=list(state.players),
        hands=dict(state.hands),
        adventures={k: dict(v) for k, v in state.adventures.items()},
        piles=dict(state.piles),
        scores=dict(state.scores),
        deck=state.deck,
        last_action=state.last_action,
        current_player=state.current_player,
    )


def get_player_name(state: ReplayState, number: int) -> str:
    """Get player name by number."""
    for p in state.players:
        if p.get("number") == number:
            return p.get("name", f"Player {number}")
    return f"Player {number}"


def draw_screen(stdscr, state: ReplayState, step: int, total: int) -> None:
    """Draw the current state to the screen."""
    stdscr.clear()
    height, width = stdscr.getmaxyx()
    width = min(width, 100)

    line = 0
    sep = "=" * 80

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 1

    turn_info = f"Turn {state.turn}  Deck: {state.deck}"
    step_info = f"Step {step + 1}/{total}"
    middle_space = 80 - len(turn_info) - len(step_info)
    stdscr.addnstr(line, 0, f"{turn_info}{' ' * max(middle_space, 1)}{step_info}", width - 1)
    line += 1

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 2

    stdscr.addnstr(line, 0, f"Last: {state.last_action}", width - 1)
    line += 2

    piles = "  ".join(f"{code}:{state.piles.get(code) or '-'}" for code in SUIT_CODES)
    stdscr.addnstr(line, 0, f"Discards: {piles}", width - 1)
    line += 1

    dash_sep = "-" * 80
    for number in (1, 2):
        key = str(number)
        stdscr.addnstr(line, 0, dash_sep, width - 1)
        line += 1

        marker = " <<<" if state.current_player == number else ""
        score = state.scores.get(key, 0)
        name = get_player_name(state, number)
        stdscr.addnstr(line, 0, f"Player {number} ({name}) Score: {score}{marker}", width - 1)
        line += 1

        stdscr.addnstr(line, 0, f"  Hand: {state.hands.get(key, '')}", width - 1)
        line += 1

        adventures = state.adventures.get(key, {})
        for code in SUIT_CODES:
            cards = adventures.get(code, "")
            if cards:
                stdscr.addnstr(line, 0, f"  {SUIT_NAMES[code]:<7} {cards}", width - 1)
                line += 1

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 1

    help_line = "[n]ext [p]rev [c]ontinuous [t]urn [q]uit"
    stdscr.addnstr(line, 0, help_line, width - 1)

    stdscr.refresh()


def input_number(stdscr, prompt: str) -> int | None:
    """Get a number from the user."""
    height, width = stdscr.getmaxyx()
    stdscr.addnstr(height - 2, 0, prompt, width - 1)
    stdscr.clrtoeol()
    stdscr.refresh()

    curses.echo()
    curses.curs_set(1)
    try:
        inp = stdscr.getstr(height - 2, len(prompt), 10).decode("utf-8")
        return int(inp) if inp.strip() else None
    except (ValueError, curses.error):
        return None
    finally:
        curses.noecho()
        curses.curs_set(0)


def find_turn(states: list[ReplayState], turn_num: int) -> int | None:
    """Find the step index for a specific turn."""
    for i, s in enumerate(states):
        if s.turn == turn_num:
            return i
    return None


def main_loop(stdscr, states: list[ReplayState]) -> None:
    """Main event loop."""
    curses.curs_set(0)
    stdscr.nodelay(False)
    stdscr.timeout(-1)

    step = 0
    total = len(states)

    while True:
        draw_screen(stdscr, states[step], step, total)

        try:
            key = stdscr.getch()
        except curses.error:
            continue

        if key == ord("q"):
            break
        elif key == ord("n"):
            if step < total - 1:
                step += 1
        elif key == ord("p"):
            if step > 0:
                step -= 1
        elif key == ord("c"):
            stdscr.nodelay(True)
            stdscr.timeout(1000)
            while step < total - 1:
                step += 1
                draw_screen(stdscr, states[step], step, total)
                if stdscr.getch() != -1:
                    break
            stdscr.nodelay(False)
            stdscr.timeout(-1)
        elif key == ord("t"):
            num = input_number(stdscr, "Jump to turn: ")
            if num is not None:
                idx = find_turn(states, num)
                if idx is not None:
                    step = idx


def main() -> int:
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Interactive viewer for Lost Cities game logs"
    )
    parser.add_argument("logfile", type=Path, help="Path to game log file (JSONL)")
    args = parser.parse_args()

    if not args.logfile.exists():
        print(f"Error: File not found: {args.logfile}", file=sys.stderr)
        return 1

    print(f"Loading {args.logfile}...")
    events = load_events(args.logfile)
    print(f"Loaded {len(events)} events")

    states = build_states(events)
    if not states:
        print("Error: No states to display", file=sys.stderr)
        return 1

    curses.wrapper(lambda stdscr: main_loop(stdscr, states))
    return 0


if __name__ == "__main__":
    sys.exit(main())
