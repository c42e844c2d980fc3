from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Union

from .board import Board, Position


@dataclass(frozen=True)
class Idle:
    """No peg selected. pick_options are the pegs that can jump."""
    board: Board
    pick_options: FrozenSet[Position]


@dataclass(frozen=True)
class Picked:
    """A peg with two or more landings is selected and waits for a destination."""
    board: Board
    pick_options: FrozenSet[Position]
    selected: Position
    move_options: FrozenSet[Position]

    def deselect(self) -> Idle:
        return Idle(self.board, self.pick_options)


@dataclass(frozen=True)
class Done:
    """Terminal: no jump is possible anywhere on the board."""
    board: Board
    remaining_count: int


GameState = Union[Idle, Picked, Done]
