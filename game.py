from __future__ import annotations

# Facade module that re-exports the triangle peg solitaire core.
# The Flask app and tests import from here; single-responsibility modules live under tripeg_core/*.

from tripeg_core.board import (  # noqa: F401
    Board,
    Coord,
    Position,
    ROWS,
    SIZE,
    coords,
    index,
    row_col,
    start_board,
)
from tripeg_core.pathways import (  # noqa: F401
    PATHWAYS,
    Pathway,
    build_pathways,
    find_pathway,
    landings_from,
    legal_pathways,
    sources_with_moves,
)
from tripeg_core.state import Done, GameState, Idle, Picked  # noqa: F401
from tripeg_core.engine import (  # noqa: F401
    InvalidActionError,
    activate,
    apply_jump,
    is_done,
    move_options_of,
    new_game,
    permitted_indices,
    pick_options_of,
    remaining_of,
    restore_state,
    selected_of,
    state_for_board,
)
from tripeg_core.messages import end_message, summary_line  # noqa: F401


def main() -> None:
    # CLI driver delegated to tripeg_core.cli
    from tripeg_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
