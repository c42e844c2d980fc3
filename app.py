from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    SIZE,
    Board,
    Done,
    GameState,
    InvalidActionError,
    Picked,
    activate,
    end_message,
    is_done,
    move_options_of,
    new_game,
    permitted_indices,
    pick_options_of,
    remaining_of,
    restore_state,
    selected_of,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _kind(s: GameState) -> str:
    if isinstance(s, Done):
        return "done"
    if isinstance(s, Picked):
        return "picked"
    return "idle"


def _sorted_ints(values) -> List[int]:
    return sorted(int(v) for v in values)


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "kind": _kind(s),
        "board": list(s.board.pegs),
        "pickOptions": _sorted_ints(pick_options_of(s)),
        "selected": selected_of(s),
        "moveOptions": _sorted_ints(move_options_of(s)),
        "remaining": remaining_of(s) if is_done(s) else None,
    }


def _as_index(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer in 0..{SIZE - 1}")
    return value


def json_to_state(obj: Any) -> GameState:
    """Rebuilds a client state; option sets are recomputed from the board, never trusted."""
    if not isinstance(obj, dict):
        raise ValueError("state must be an object")
    cells = obj.get("board")
    if not isinstance(cells, list) or not all(isinstance(x, bool) for x in cells):
        raise ValueError(f"board must be a list of {SIZE} booleans")
    board = Board(pegs=tuple(cells))
    selected = obj.get("selected")
    if selected is not None:
        selected = _as_index(selected, "selected")
    state = restore_state(board, selected)
    claimed = obj.get("kind")
    if claimed is not None and claimed != _kind(state):
        raise ValueError(f"state claims {claimed!r} but board and selection give {_kind(state)!r}")
    return state


def _body() -> Optional[Dict[str, Any]]:
    """The JSON object sent with the request; None when the body is some other JSON value."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _bad_body() -> Any:
    return jsonify({"ok": False, "error": "request body must be an object"}), 400


def _default_empty_hole() -> int:
    raw = os.getenv("TRIPEG_EMPTY_HOLE", "0")
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring non-integer TRIPEG_EMPTY_HOLE=%r, opening hole 0", raw)
        return 0


def _payload(s: GameState) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "ok": True,
        "state": state_to_json(s),
        "permitted": _sorted_ints(permitted_indices(s)),
    }
    if is_done(s):
        out["message"] = end_message(remaining_of(s))
    return out


@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    if body is None:
        return _bad_body()
    empty = body.get("empty", _default_empty_hole())
    try:
        state = new_game(_as_index(empty, "empty"))
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify(_payload(state))


@app.post("/api/options")
def api_options() -> Any:
    body = _body()
    if body is None:
        return _bad_body()
    try:
        state = json_to_state(body.get("state"))
    except ValueError as e:
        return jsonify({"ok": False, "error": f"bad state: {e}"}), 400
    return jsonify(_payload(state))


@app.post("/api/activate")
def api_activate() -> Any:
    body = _body()
    if body is None:
        return _bad_body()
    try:
        state = json_to_state(body.get("state"))
    except ValueError as e:
        logger.info("bad state in activate request: %s", e)
        return jsonify({"ok": False, "error": f"bad state: {e}"}), 400
    try:
        next_state = activate(state, _as_index(body.get("index"), "index"))
    except InvalidActionError as e:
        return jsonify({
            "ok": False,
            "error": str(e),
            "permitted": _sorted_ints(e.permitted),
            "state": state_to_json(state),
        }), 400
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e), "permitted": _sorted_ints(permitted_indices(state))}), 400
    return jsonify(_payload(next_state))


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("TRIPEG_LOG_LEVEL", "WARNING").upper())
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=debug)
