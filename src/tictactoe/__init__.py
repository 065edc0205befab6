"""Tic-tac-toe package exposing game rules, the minimax AI, and the web API."""

from .ai import MinimaxAI
from .game import Board, GameState, InvalidCoordinate, Mark, Move
from .players import GameLevel, GameMode
from .session import TicTacToeGame
from .ui import app

__all__ = [
    "Board",
    "GameLevel",
    "GameMode",
    "GameState",
    "InvalidCoordinate",
    "Mark",
    "MinimaxAI",
    "Move",
    "TicTacToeGame",
    "app",
]
