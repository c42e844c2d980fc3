from __future__ import annotations

import logging
from typing import FrozenSet, Optional, Union

from .board import Board, Position, check_position, is_position, start_board
from .pathways import Pathway, find_pathway, landings_from, sources_with_moves
from .state import Done, GameState, Idle, Picked

logger = logging.getLogger(__name__)


class InvalidActionError(ValueError):
    """Raised when an index outside the current state's permitted set is activated."""

    def __init__(self, index: Position, permitted: FrozenSet[Position], reason: str = "") -> None:
        self.index = index
        self.permitted = frozenset(permitted)
        msg = f"cannot activate {index!r}; permitted: {sorted(self.permitted)}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


def state_for_board(board: Board) -> Union[Idle, Done]:
    """Settles a board into Idle, or Done when no jump is left."""
    options = sources_with_moves(board)
    if not options:
        remaining = board.peg_count()
        logger.debug("game over with %d pegs remaining", remaining)
        return Done(board=board, remaining_count=remaining)
    return Idle(board=board, pick_options=options)


def new_game(empty_hole: Position = 0) -> Union[Idle, Done]:
    """The first state of a game whose only empty hole is empty_hole."""
    return state_for_board(start_board(empty_hole))


def apply_jump(board: Board, pathway: Pathway) -> Union[Idle, Done]:
    """Executes a legal jump and returns the settled state of the new board."""
    src, victim, landing = pathway
    logger.debug("jump %d over %d into %d", src, victim, landing)
    return state_for_board(board.with_jump(src, victim, landing))


def permitted_indices(state: GameState) -> FrozenSet[Position]:
    """Indices that activate() accepts in the given state."""
    if isinstance(state, Idle):
        return state.pick_options
    if isinstance(state, Picked):
        return state.move_options | {state.selected}
    return frozenset()


def activate(state: GameState, index: Position) -> GameState:
    """
    Advances the game in response to a click on a board index.

    Idle: picking a peg with a single landing jumps straight away; a peg with
    several landings becomes Picked. Picked: the selected peg deselects, a
    landing completes the jump. Anything else, and any index once Done, raises
    InvalidActionError and the given state stays current.
    """
    permitted = permitted_indices(state)
    if not is_position(index) or index not in permitted:
        reason = "game is over" if isinstance(state, Done) else ""
        logger.info("rejected activation of %r", index)
        raise InvalidActionError(index, permitted, reason)

    if isinstance(state, Picked):
        if index == state.selected:
            return state.deselect()
        return _jump(state.board, state.selected, index)

    # Done permits nothing, so only Idle reaches here.
    landings = landings_from(state.board, index)
    if len(landings) == 1:
        (only,) = landings
        return _jump(state.board, index, only)
    return Picked(
        board=state.board,
        pick_options=state.pick_options,
        selected=index,
        move_options=landings,
    )


def _jump(board: Board, src: Position, landing: Position) -> Union[Idle, Done]:
    pathway = find_pathway(board, src, landing)
    if pathway is None:
        # Options are always derived from the same table, so this means a hand-built state.
        raise InvalidActionError(landing, landings_from(board, src), f"no jump from {src}")
    return apply_jump(board, pathway)


def restore_state(board: Board, selected: Optional[Position] = None) -> GameState:
    """
    Rebuilds a state from a board and an optional selection, recomputing every
    option set. Raises ValueError when the selection could not have come from
    activate() on this board.
    """
    state = state_for_board(board)
    if selected is None:
        return state
    check_position(selected)
    if isinstance(state, Done) or selected not in state.pick_options:
        raise ValueError(f"position {selected} has no legal jump to select")
    landings = landings_from(board, selected)
    if len(landings) < 2:
        raise ValueError(f"position {selected} has a single landing and cannot stay selected")
    return Picked(board=board, pick_options=state.pick_options, selected=selected, move_options=landings)


# Read-only accessors for renderers.

def pick_options_of(state: GameState) -> FrozenSet[Position]:
    return frozenset() if isinstance(state, Done) else state.pick_options


def move_options_of(state: GameState) -> FrozenSet[Position]:
    return state.move_options if isinstance(state, Picked) else frozenset()


def selected_of(state: GameState) -> Optional[Position]:
    return state.selected if isinstance(state, Picked) else None


def is_done(state: GameState) -> bool:
    return isinstance(state, Done)


def remaining_of(state: GameState) -> int:
    return state.remaining_count if isinstance(state, Done) else state.board.peg_count()
