from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

Position = int  # 0..14
Coord = Tuple[int, int]  # (row, col) with 0 <= col <= row

ROWS = 5
SIZE = ROWS * (ROWS + 1) // 2  # 15 holes

PEG = "o"
HOLE = "."


def index(r: int, c: int) -> Position:
    """Calculates the board index for a given row and column of the triangle."""
    if not (0 <= r < ROWS and 0 <= c <= r):
        raise ValueError(f"({r}, {c}) is not on the board")
    return c + r * (r + 1) // 2


def row_col(i: Position) -> Coord:
    """Inverse of index(): finds the row and column of a board position."""
    check_position(i)
    r = 0
    while index(r, r) < i:
        r += 1
    return r, i - r * (r + 1) // 2


def coords() -> Iterator[Coord]:
    """Iterates over all coordinates on the board in index order."""
    for r in range(ROWS):
        for c in range(r + 1):
            yield (r, c)


def is_position(i: object) -> bool:
    """True for a plain int in 0..14; bools and floats equal to an index are not positions."""
    return isinstance(i, int) and not isinstance(i, bool) and 0 <= i < SIZE


def check_position(i: Position) -> Position:
    if not is_position(i):
        raise ValueError(f"position must be an integer in 0..{SIZE - 1}, got {i!r}")
    return i


@dataclass(frozen=True)
class Board:
    """Peg occupancy of the 15 holes, indexed by position."""
    pegs: Tuple[bool, ...]  # length == 15

    def __post_init__(self) -> None:
        if len(self.pegs) != SIZE:
            raise ValueError(f"board must have {SIZE} holes, got {len(self.pegs)}")
        object.__setattr__(self, "pegs", tuple(bool(p) for p in self.pegs))

    @classmethod
    def full(cls) -> "Board":
        return cls(pegs=(True,) * SIZE)

    @classmethod
    def with_empty(cls, *holes: Position) -> "Board":
        """A board with pegs everywhere except the given holes."""
        empty = {check_position(h) for h in holes}
        return cls(pegs=tuple(i not in empty for i in range(SIZE)))

    @classmethod
    def from_pegs(cls, positions: Iterable[Position]) -> "Board":
        """A board with pegs only at the given positions."""
        filled = {check_position(p) for p in positions}
        return cls(pegs=tuple(i in filled for i in range(SIZE)))

    def has_peg(self, i: Position) -> bool:
        return self.pegs[check_position(i)]

    def peg_count(self) -> int:
        return sum(1 for p in self.pegs if p)

    def peg_positions(self) -> Tuple[Position, ...]:
        return tuple(i for i, p in enumerate(self.pegs) if p)

    def empty_positions(self) -> Tuple[Position, ...]:
        return tuple(i for i, p in enumerate(self.pegs) if not p)

    def with_jump(self, src: Position, victim: Position, landing: Position) -> "Board":
        """Returns a new board with src and victim emptied and landing filled."""
        cells = list(self.pegs)
        cells[src] = False
        cells[victim] = False
        cells[landing] = True
        return Board(pegs=tuple(cells))

    def pretty(self, marks: Iterable[Position] = ()) -> str:
        """Generates a human-readable triangle; marked holes are shown by index."""
        shown = set(marks)
        width = len(str(SIZE - 1))
        lines: List[str] = []
        for r in range(ROWS):
            cells: List[str] = []
            for c in range(r + 1):
                i = index(r, c)
                if i in shown:
                    cells.append(str(i).rjust(width))
                else:
                    cells.append((PEG if self.pegs[i] else HOLE).rjust(width))
            pad = " " * ((ROWS - r - 1) * (width + 1) // 2)
            lines.append(pad + " ".join(cells))
        return "\n".join(lines)


def start_board(empty_hole: Position = 0) -> Board:
    """The opening position: every hole filled except one."""
    return Board.with_empty(empty_hole)
