from __future__ import annotations

import logging
import os
import sys
import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    AI_DELAY_MS,
    ConfigError,
    debug_enabled,
    NimGame,
    Player,
    default_pile_sizes,
    parse_pile_sizes,
    parse_starting_player,
    setup_logging,
)

logger = logging.getLogger(__name__)

STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)

# In-memory game registry keyed by game id, least recently used first.
# Bounded so abandoned browser sessions cannot grow it without limit.
MAX_GAMES = int(os.getenv("NIM_MAX_GAMES", "1000"))
_GAMES: "OrderedDict[str, NimGame]" = OrderedDict()
_GAMES_LOCK = threading.Lock()


def state_to_json(game: NimGame) -> Dict[str, Any]:
    cfg = game.initial_config
    return {
        "piles": [{"id": int(p.id), "count": int(p.count)} for p in game.piles],
        "currentPlayer": game.current_player.value,
        "gameOver": bool(game.game_over),
        "winner": game.winner.value if game.winner is not None else None,
        "nimSum": game.nim_sum(),
        "initialConfig": {
            "pileSizes": list(cfg.pile_sizes),
            "startingPlayer": cfg.starting_player.value,
        },
        "aiDelayMs": AI_DELAY_MS,
    }


def _error(message: str, status: int, **extra: Any) -> Tuple[Any, int]:
    payload: Dict[str, Any] = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _lookup(body: Dict[str, Any]) -> Tuple[Optional[str], Optional[NimGame]]:
    game_id = body.get("gameId")
    if not isinstance(game_id, str):
        return None, None
    game = _GAMES.get(game_id)
    if game is not None:
        _GAMES.move_to_end(game_id)
    return game_id, game


def _register(game: NimGame, previous_id: Any = None) -> str:
    """Stores a new engine, dropping the game it replaces and the least recently used beyond MAX_GAMES."""
    if isinstance(previous_id, str):
        _GAMES.pop(previous_id, None)
    game_id = uuid.uuid4().hex
    _GAMES[game_id] = game
    while len(_GAMES) > max(MAX_GAMES, 1):
        evicted, _ = _GAMES.popitem(last=False)
        logger.debug("evicted game %s", evicted)
    return game_id


def _parse_config(body: Dict[str, Any], required: bool) -> Tuple[Optional[Tuple[int, ...]], Optional[Player]]:
    piles_in = body.get("piles")
    starter_in = body.get("starter")
    if piles_in is None and required:
        sizes: Optional[Tuple[int, ...]] = default_pile_sizes()
    elif piles_in is None:
        sizes = None
    else:
        sizes = parse_pile_sizes(piles_in)
    if starter_in is None and not required:
        starter = None
    else:
        starter = parse_starting_player(starter_in)
    return sizes, starter


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (used by main.js) ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    try:
        sizes, starter = _parse_config(body, required=True)
    except ConfigError as e:
        return _error(str(e), 400)
    game = NimGame(sizes, starter)
    with _GAMES_LOCK:
        game_id = _register(game, body.get("gameId"))
    logger.info("new game %s piles=%s starter=%s", game_id, list(sizes), starter.value)
    return jsonify({"ok": True, "gameId": game_id, "state": state_to_json(game)})


@app.post("/api/state")
def api_state() -> Any:
    body = _body()
    with _GAMES_LOCK:
        game_id, game = _lookup(body)
        if game is None:
            return _error("unknown game", 404)
        return jsonify({"ok": True, "gameId": game_id, "state": state_to_json(game)})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    try:
        pile_index = int(body["pile"])
        amount = int(body["amount"])
    except (KeyError, TypeError, ValueError):
        return _error("pile and amount must be integers", 400)
    with _GAMES_LOCK:
        game_id, game = _lookup(body)
        if game is None:
            return _error("unknown game", 404)
        if not game.user_move(pile_index, amount):
            return _error("Illegal move", 400, state=state_to_json(game))
        return jsonify({"ok": True, "gameId": game_id, "state": state_to_json(game)})


@app.post("/api/ai")
def api_ai() -> Any:
    body = _body()
    with _GAMES_LOCK:
        game_id, game = _lookup(body)
        if game is None:
            return _error("unknown game", 404)
        move = game.make_ai_move()
        if move is None:
            return _error("Not the computer's turn", 409, state=state_to_json(game))
        return jsonify({
            "ok": True,
            "gameId": game_id,
            "move": move.to_json(),
            "state": state_to_json(game),
        })


@app.post("/api/restart")
def api_restart() -> Any:
    body = _body()
    try:
        sizes, starter = _parse_config(body, required=False)
    except ConfigError as e:
        return _error(str(e), 400)
    with _GAMES_LOCK:
        game_id, game = _lookup(body)
        if game is None:
            return _error("unknown game", 404)
        game.reset(sizes, starter)
        return jsonify({"ok": True, "gameId": game_id, "state": state_to_json(game)})


@app.post("/api/hint")
def api_hint() -> Any:
    body = _body()
    with _GAMES_LOCK:
        game_id, game = _lookup(body)
        if game is None:
            return _error("unknown game", 404)
        move = None if game.game_over else game.calculate_best_move()
        return jsonify({
            "ok": True,
            "gameId": game_id,
            "move": move.to_json() if move is not None else None,
            "winning": game.is_winning_position(),
        })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    setup_logging()
    debug = debug_enabled()
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
