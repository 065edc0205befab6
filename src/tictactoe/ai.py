"""Depth-bounded alpha-beta minimax over a shared, in-place mutated board."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional
import logging
import math

from .game import Board, Mark, Move

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 8


@contextmanager
def placed(board: Board, move: Move, mark: Mark) -> Iterator[Board]:
    """Place ``mark`` on an empty cell for the duration of the block."""
    if not board.place(move, mark):
        raise ValueError(f"cell ({move.row}, {move.column}) is already occupied")
    try:
        yield board
    finally:
        board.retract(move)


@dataclass
class MinimaxAI:
    """Alpha-beta player scoring leaves as +1 (won), -1 (lost) or 0.

    The board is explored by placing and retracting marks on the caller's
    board, so it is left exactly as it was once a public call returns.
    """

    mark: Mark
    max_depth: int = DEFAULT_MAX_DEPTH
    opponent_mark: Mark = field(init=False)

    def __post_init__(self) -> None:
        self.opponent_mark = self.mark.opponent()

    # ---- public API ----

    def best_move(self, board: Board) -> Optional[Move]:
        best: Optional[Move] = None
        best_score = -math.inf
        for move in board.legal_moves():
            score = self._score_move(board, move)
            if score > best_score:
                best_score, best = score, move
        logger.debug(
            "%s picked %s (score %s, depth %d)",
            self.mark.name,
            best,
            best_score,
            self.max_depth,
        )
        return best

    def score_all_moves(self, board: Board) -> List[Move]:
        moves = board.legal_moves()
        for move in moves:
            move.score = self._score_move(board, move)
        logger.debug("evaluated %d moves for %s", len(moves), self.mark.name)
        return moves

    # ---- core search ----

    def _score_move(self, board: Board, move: Move) -> int:
        with placed(board, move, self.mark):
            return self.search(board, 0, False, -math.inf, math.inf)

    def search(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
    ) -> int:
        value = self.evaluate(board)
        if value != 0 or depth == self.max_depth or board.is_full():
            return value

        if maximizing:
            best = -math.inf
            for move in board.legal_moves():
                with placed(board, move, self.mark):
                    score = self.search(board, depth + 1, False, alpha, beta)
                best = max(best, score)
                alpha = max(alpha, best)
                if alpha >= beta:
                    break
        else:
            best = math.inf
            for move in board.legal_moves():
                with placed(board, move, self.opponent_mark):
                    score = self.search(board, depth + 1, True, alpha, beta)
                best = min(best, score)
                beta = min(beta, best)
                if beta <= alpha:
                    break
        return int(best)

    def evaluate(self, board: Board) -> int:
        winner = board.winner()
        if winner is None:
            return 0
        return 1 if winner is self.mark else -1
