"""FastAPI JSON API that drives tic-tac-toe games held in memory."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, field_validator

from .game import GameState, Move
from .players import LEVEL_NAMES, GameLevel, GameMode
from .session import TicTacToeGame

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Container for an active game and the moves played so far."""

    game: TicTacToeGame
    move_log: List[Dict[str, int | str]] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, GameSession] = {}
app = FastAPI(title="TicTacToe", description="Tic-tac-toe against a minimax AI")


def _parse_level(value: str) -> str:
    normalized = value.strip().lower()
    if normalized not in LEVEL_NAMES:
        raise ValueError(
            f"Unsupported level {value!r}. Choose one of shallow, medium, deep."
        )
    return normalized


class NewGameRequest(BaseModel):
    """Request payload for starting (or restarting) a game."""

    mode: GameMode = GameMode.PVC_HUMAN_FIRST
    level: str = Field(default="deep", description="Search depth tier")

    @field_validator("level")
    @classmethod
    def ensure_supported_level(cls, value: str) -> str:
        return _parse_level(value)


class RestartRequest(BaseModel):
    mode: Optional[GameMode] = None
    level: Optional[str] = None

    @field_validator("level")
    @classmethod
    def ensure_supported_level(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _parse_level(value)


class LevelRequest(BaseModel):
    level: str

    @field_validator("level")
    @classmethod
    def ensure_supported_level(cls, value: str) -> str:
        return _parse_level(value)


class MoveRequest(BaseModel):
    """Request payload for submitting a move on an existing game."""

    row: int = Field(ge=0, le=2)
    column: int = Field(ge=0, le=2)


def _get_session(game_id: str) -> GameSession:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _log_move(session: GameSession, move: Move) -> None:
    player = session.game.current_player
    session.move_log.append(
        {
            "player": player.name,
            "mark": player.mark.symbol,
            "row": move.row,
            "column": move.column,
        }
    )


def _play_engine_turns(session: GameSession) -> None:
    """Let engine players move until a human is up or the game ends."""
    game = session.game
    while game.state is GameState.ONGOING and game.is_engine_turn():
        move = game.request_engine_move()
        if move is None:
            return
        _log_move(session, move)
        game.submit_move(move)


def _serialize_session(game_id: str, session: GameSession) -> Dict[str, object]:
    game = session.game
    board = game.board
    winner = board.winner()
    player = game.current_player
    return {
        "id": game_id,
        "mode": game.mode.value,
        "level": game.level.name.lower(),
        "state": game.state.value,
        "winner": winner.symbol if winner else None,
        "currentPlayer": {
            "name": player.name,
            "mark": player.mark.symbol,
            "engine": player.is_engine,
        },
        "board": [[board.mark_at(i, j).symbol for j in range(3)] for i in range(3)],
        "availableMoves": [
            {"row": m.row, "column": m.column} for m in board.legal_moves()
        ],
        "moveLog": list(session.move_log),
    }


@app.post("/api/game")
def create_game(request: NewGameRequest) -> Dict[str, object]:
    game = TicTacToeGame(request.mode, GameLevel.from_name(request.level))
    session = GameSession(game=game)
    game_id = uuid.uuid4().hex
    SESSIONS[game_id] = session
    logger.info("created game %s (%s, %s)", game_id, game.mode.value, game.level.name)
    with session.lock:
        _play_engine_turns(session)
        return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/move")
def make_move(game_id: str, request: MoveRequest) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        game = session.game
        if game.state is not GameState.ONGOING:
            raise HTTPException(status_code=400, detail="Game already finished")
        if game.is_engine_turn():
            raise HTTPException(status_code=400, detail="It is the AI's turn")

        move = Move(request.row, request.column)
        if move not in game.board.legal_moves():
            raise HTTPException(status_code=400, detail="Cell already occupied")

        _log_move(session, move)
        game.submit_move(move)
        _play_engine_turns(session)
        return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/restart")
def restart_game(game_id: str, request: RestartRequest) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        game = session.game
        mode = request.mode or game.mode
        level = GameLevel.from_name(request.level) if request.level else game.level
        game.restart(mode, level)
        _play_engine_turns(session)
        return _serialize_session(game_id, session)


@app.put("/api/game/{game_id}/level")
def change_level(game_id: str, request: LevelRequest) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.game.change_engine_level(GameLevel.from_name(request.level))
        return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}/evaluation")
def evaluate_moves(game_id: str) -> List[Dict[str, int]]:
    session = _get_session(game_id)
    with session.lock:
        return [
            {"row": m.row, "column": m.column, "score": m.score}
            for m in session.game.score_all_moves()
        ]
