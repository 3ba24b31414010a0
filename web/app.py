from __future__ import annotations

from flask import Flask, jsonify, request
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from othello import AIPlayer, Color, Game, OthelloError, PASS
from othello.board import index_to_coord
from othello.rules import generate_legal_moves

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "AI_DEPTH": 5,
    "HUMAN_COLOR": "black",
}


def _parse_color(value: Optional[str]) -> Color:
    try:
        return Color((value or "black").lower())
    except ValueError:
        raise OthelloError(f"Unknown color: {value!r}") from None


def _parse_depth(value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        depth = int(value)
    except (TypeError, ValueError):
        raise OthelloError(f"Depth must be an integer, got {value!r}") from None
    if depth < 1:
        raise OthelloError("Depth must be at least 1")
    return depth


def play_ai_turns(game: Game, ai: AIPlayer, depth: int) -> List[str]:
    """Let the AI move until the human is to move with a legal move, or game over.

    A human without legal moves is passed automatically, as is the AI.
    Returns the AI's moves as coordinates ("PASS" for passes).
    """
    ai_moves: List[str] = []
    while not game.is_game_over():
        if game.is_human_turn():
            if generate_legal_moves(game.position):
                break
            game.pass_turn()
            continue
        move = ai.find_best_move(game.position, depth)
        if move is None:
            game.pass_turn()
            ai_moves.append(PASS)
        else:
            game.push(move)
            ai_moves.append(index_to_coord(move))
    return ai_moves


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(DEFAULT_CONFIG)
    app.config.from_prefixed_env("OTHELLO")
    if config:
        app.config.update(config)

    game = Game(_parse_color(app.config["HUMAN_COLOR"]))
    ai = AIPlayer()
    # When the AI holds black it opens before the first request
    play_ai_turns(game, ai, _parse_depth(app.config["AI_DEPTH"], DEFAULT_CONFIG["AI_DEPTH"]))

    def request_depth(data: Mapping[str, Any]) -> int:
        return _parse_depth(data.get("depth"), app.config["AI_DEPTH"])

    def respond(ai_moves: Optional[List[str]] = None, **extra: Any):
        snap = game.snapshot()
        snap["ai_moves"] = ai_moves or []
        snap.update(extra)
        return jsonify(snap)

    @app.errorhandler(OthelloError)
    def handle_othello_error(exc: OthelloError):
        return jsonify({"error": str(exc)}), 400

    @app.get("/api/state")
    def api_state():
        return respond()

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        color = _parse_color(data.get("color") or app.config["HUMAN_COLOR"])
        depth = request_depth(data)

        game.reset(color)
        logger.info("New game: human plays %s, depth %d", color.value, depth)

        # If the human chose white, the AI (black) opens immediately
        return respond(play_ai_turns(game, ai, depth))

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True) or {}
        move = payload.get("move")
        depth = request_depth(payload)
        if not move:
            return jsonify({"error": "Missing move"}), 400
        if not game.is_human_turn() or game.is_game_over():
            return jsonify({"error": "Not your turn"}), 400

        game.push(str(move))
        return respond(play_ai_turns(game, ai, depth))

    @app.post("/api/pass")
    def api_pass():
        payload = request.get_json(silent=True) or {}
        depth = request_depth(payload)
        if not game.is_human_turn() or game.is_game_over():
            return jsonify({"error": "Not your turn"}), 400
        game.pass_turn()
        return respond(play_ai_turns(game, ai, depth))

    @app.post("/api/undo")
    def api_undo():
        payload = request.get_json(silent=True) or {}
        depth = request_depth(payload)
        if not game.undo():
            return jsonify({"error": "Nothing to undo"}), 400
        # Undoing to the start as white hands the opening back to the AI
        return respond(play_ai_turns(game, ai, depth))

    @app.post("/api/redo")
    def api_redo():
        payload = request.get_json(silent=True) or {}
        depth = request_depth(payload)
        if not game.redo():
            return jsonify({"error": "Nothing to redo"}), 400
        return respond(play_ai_turns(game, ai, depth))

    @app.post("/api/hint")
    def api_hint():
        payload = request.get_json(silent=True) or {}
        depth = request_depth(payload)
        return respond(hint=game.hint(ai, depth))

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    create_app().run(host="0.0.0.0", port=5000, debug=True)
