from __future__ import annotations

from typing import FrozenSet, List, NamedTuple, Optional, Tuple

from .board import Board, Position, ROWS, coords, index

# Line directions on the triangle as (dr, dc): along a row, down the left
# diagonal, down the right diagonal. Each is also walked in reverse.
LINE_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1))


class Pathway(NamedTuple):
    """A jump: the peg at src hops over victim into the empty landing hole."""
    src: Position
    victim: Position
    landing: Position


def _on_board(r: int, c: int) -> bool:
    return 0 <= r < ROWS and 0 <= c <= r


def build_pathways() -> Tuple[Pathway, ...]:
    """Derives every jump from the board geometry, ordered by source then landing."""
    out: List[Pathway] = []
    for r, c in coords():
        for dr, dc in LINE_DIRECTIONS:
            for sign in (1, -1):
                r1, c1 = r + sign * dr, c + sign * dc
                r2, c2 = r + 2 * sign * dr, c + 2 * sign * dc
                if _on_board(r2, c2):
                    out.append(Pathway(index(r, c), index(r1, c1), index(r2, c2)))
    return tuple(sorted(out))


# Fixed for the lifetime of the process.
PATHWAYS: Tuple[Pathway, ...] = build_pathways()


def legal_pathways(board: Board) -> Tuple[Pathway, ...]:
    """All pathways executable on the board, in table order."""
    pegs = board.pegs
    return tuple(p for p in PATHWAYS if pegs[p.src] and pegs[p.victim] and not pegs[p.landing])


def sources_with_moves(board: Board) -> FrozenSet[Position]:
    """Positions holding a peg with at least one legal jump."""
    return frozenset(p.src for p in legal_pathways(board))


def landings_from(board: Board, src: Position) -> FrozenSet[Position]:
    """Landing holes reachable by a single jump from src."""
    return frozenset(p.landing for p in legal_pathways(board) if p.src == src)


def find_pathway(board: Board, src: Position, landing: Position) -> Optional[Pathway]:
    for p in legal_pathways(board):
        if p.src == src and p.landing == landing:
            return p
    return None
