from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    attempt_match,
    find_move,
    generate_board,
    get_game_config,
    is_valid_difficulty,
    calculate_score,
    validate_game_result,
)
from lianliankan_core.codec import (  # noqa: E402
    board_from_json,
    board_to_json,
    config_to_json,
    path_to_json,
    position_from_json,
    position_to_json,
    result_from_json,
)
from lianliankan_core.config import configure_logging, default_difficulty, env_flag  # noqa: E402

SERVICE_NAME = "lianliankan-game"
MIN_BOARD_SIZE = 4
MAX_BOARD_SIZE = 20

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _bad_request(message: str) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": message}), 400


def _optional_seed(body: Dict[str, Any]) -> Optional[int]:
    seed = body.get("seed", None)
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"seed must be an integer, got {seed!r}")
    return seed


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "service": SERVICE_NAME,
    })


@app.post("/api/game/start")
def api_start() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        body = {}
    try:
        seed = _optional_seed(body)
    except ValueError as e:
        return _bad_request(str(e))
    config = get_game_config(body.get("difficulty") or default_difficulty())
    board = generate_board(config.size, config.tile_types, seed=seed)
    return jsonify({
        "ok": True,
        "game": {
            "board": board_to_json(board),
            "config": config_to_json(config),
            "moves": 0,
        },
    })


@app.post("/api/game/validate")
def api_validate() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict) or not body.get("board") or body.get("start") is None or body.get("end") is None:
        return _bad_request("board, start and end are required")
    try:
        board = board_from_json(body["board"])
        start = position_from_json(body["start"])
        end = position_from_json(body["end"])
        seed = _optional_seed(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad request: {e}")

    outcome = attempt_match(board, start, end, seed=seed)
    if not outcome.valid:
        return jsonify({"ok": True, "valid": False, "path": None})
    return jsonify({
        "ok": True,
        "valid": True,
        "path": path_to_json(outcome.path),
        "newBoard": board_to_json(outcome.board),
        "completed": outcome.completed,
        "reshuffled": outcome.reshuffled,
    })


@app.post("/api/game/hint")
def api_hint() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict) or not body.get("board"):
        return _bad_request("board is required")
    try:
        board = board_from_json(body["board"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad board: {e}")
    move = find_move(board)
    return jsonify({
        "ok": True,
        "move": [position_to_json(move[0]), position_to_json(move[1])] if move else None,
    })


@app.post("/api/game/submit")
def api_submit() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        return _bad_request("invalid request body")

    time_seconds = body.get("timeSeconds")
    moves = body.get("moves")
    board_size = body.get("boardSize")
    difficulty = body.get("difficulty")
    completed = body.get("completed")
    numbers_ok = all(
        isinstance(v, (int, float)) and not isinstance(v, bool)
        for v in (time_seconds, moves, board_size)
    )
    if not numbers_ok or not isinstance(difficulty, str) or not isinstance(completed, bool):
        return _bad_request("missing or mistyped fields")
    if time_seconds < 0 or moves < 0 or board_size < MIN_BOARD_SIZE or board_size > MAX_BOARD_SIZE:
        return _bad_request("fields out of range")

    if not completed:
        return jsonify({"ok": True, "score": 0, "message": "game not completed, no score"})

    result = result_from_json(body)
    if not is_valid_difficulty(difficulty) or not validate_game_result(result, get_game_config(difficulty)):
        logger.info("rejected submission %s", body)
        return _bad_request("game result failed validation")

    return jsonify({"ok": True, "score": calculate_score(result)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging()
    debug = env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0"))
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=debug)
