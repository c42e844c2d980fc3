from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from .board import SIZE
from .engine import (
    InvalidActionError,
    activate,
    is_done,
    new_game,
    permitted_indices,
    remaining_of,
    selected_of,
)
from .messages import summary_line
from .state import GameState


def _describe(state: GameState) -> str:
    sel = selected_of(state)
    lines = [state.board.pretty(marks=permitted_indices(state))]
    if sel is not None:
        lines.append(f"Selected {sel}. Choose a landing, or {sel} again to deselect.")
    elif not is_done(state):
        lines.append("Pick a peg to move.")
    return "\n".join(lines)


def _read_index(prompt: str) -> Optional[int]:
    """Reads one board index; None means the player quit."""
    while True:
        try:
            text = input(prompt).strip().lower()
        except EOFError:
            return None
        if text in ("q", "quit", "exit"):
            return None
        try:
            return int(text)
        except ValueError:
            print(f"Enter a hole number 0..{SIZE - 1}, or q to quit.")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Triangle peg solitaire in the terminal")
    parser.add_argument(
        "--empty",
        type=int,
        default=os.getenv("TRIPEG_EMPTY_HOLE", "0"),
        help=f"Opening empty hole (0..{SIZE - 1})",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("TRIPEG_LOG_LEVEL", "WARNING"),
        help="Logging level name (DEBUG, INFO, ...)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        state: GameState = new_game(args.empty)
    except ValueError as e:
        parser.error(str(e))

    print("Holes you can activate are shown by number.")
    while not is_done(state):
        print(_describe(state))
        index = _read_index("> ")
        if index is None:
            print(f"Quit with {remaining_of(state)} pegs left.")
            return 1
        try:
            state = activate(state, index)
        except InvalidActionError as e:
            print(f"Not allowed: {e}")

    print(_describe(state))
    print(summary_line(remaining_of(state)))
    return 0
