"""Turn orchestration for a single game between two players."""

from __future__ import annotations

from typing import List, Optional, Tuple
import logging

from .ai import MinimaxAI
from .game import Board, GameState, Mark, Move
from .players import (
    EnginePlayer,
    GameLevel,
    GameMode,
    Player,
    build_players,
    maybe_compute_move,
)

logger = logging.getLogger(__name__)


class TicTacToeGame:
    """Owns the board and decides whose turn it is.

    Moves are pushed in by the caller (a UI or API handler); the game never
    asks a player for input on its own. Submitting a move onto an occupied
    cell is ignored and leaves the turn with the same player.
    """

    def __init__(
        self,
        mode: GameMode = GameMode.PVC_HUMAN_FIRST,
        level: GameLevel = GameLevel.DEEP,
    ) -> None:
        self.board = Board()
        self.players: Tuple[Player, Player]
        self.current_index = 0
        self.init_players(mode, level)

    def init_players(self, mode: GameMode, level: GameLevel) -> None:
        self.mode = mode
        self.level = level
        self.players = build_players(mode, level)
        self.current_index = 0

    # ---- accessors ----

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    @property
    def current_mark(self) -> Mark:
        return self.current_player.mark

    @property
    def state(self) -> GameState:
        return self.board.state()

    def is_engine_turn(self) -> bool:
        return self.current_player.is_engine

    # ---- actions ----

    def submit_move(self, move: Move) -> GameState:
        placed = self.board.place(move, self.current_mark)
        state = self.board.state()
        if placed and state is GameState.ONGOING:
            self.current_index = 1 - self.current_index
        elif not placed:
            logger.debug("ignored move onto occupied cell %s", move)
        return state

    def request_engine_move(self) -> Optional[Move]:
        return maybe_compute_move(self.current_player, self.board)

    def score_all_moves(self) -> List[Move]:
        """Score every legal move for the player whose turn it is."""
        if self.state is not GameState.ONGOING:
            return []
        evaluator = MinimaxAI(mark=self.current_mark, max_depth=GameLevel.DEEP.depth)
        return evaluator.score_all_moves(self.board)

    def restart(self, mode: GameMode, level: GameLevel) -> None:
        self.init_players(mode, level)
        self.board.reset()
        logger.info("restarted game: mode=%s level=%s", mode.value, level.name)

    def change_engine_level(self, level: GameLevel) -> None:
        self.level = level
        for player in self.players:
            if isinstance(player, EnginePlayer):
                player.depth = level.depth
