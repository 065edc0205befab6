"""Game modes, difficulty tiers and the two kinds of player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

from .ai import MinimaxAI
from .game import Board, Mark, Move


class GameMode(Enum):
    PVP = "pvp"
    PVC_HUMAN_FIRST = "pvc-human-first"
    PVC_COMPUTER_FIRST = "pvc-computer-first"


class GameLevel(Enum):
    SHALLOW = 3
    MEDIUM = 5
    DEEP = 8

    @property
    def depth(self) -> int:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "GameLevel":
        """Resolve a tier name; anything unrecognised means DEEP."""
        return _LEVEL_ALIASES.get(name.strip().lower(), cls.DEEP)


_LEVEL_ALIASES = {
    "shallow": GameLevel.SHALLOW,
    "easy": GameLevel.SHALLOW,
    "medium": GameLevel.MEDIUM,
    "deep": GameLevel.DEEP,
    "hard": GameLevel.DEEP,
}
LEVEL_NAMES = tuple(_LEVEL_ALIASES)


@dataclass(frozen=True)
class HumanPlayer:
    name: str
    mark: Mark
    is_engine: ClassVar[bool] = False

    def choose(self, board: Board) -> None:
        return None


@dataclass
class EnginePlayer:
    name: str
    mark: Mark
    depth: int = GameLevel.DEEP.depth
    is_engine: ClassVar[bool] = True

    @property
    def opponent_mark(self) -> Mark:
        return self.mark.opponent()

    def choose(self, board: Board) -> Optional[Move]:
        return MinimaxAI(mark=self.mark, max_depth=self.depth).best_move(board)


Player = Union[HumanPlayer, EnginePlayer]


def maybe_compute_move(player: Player, board: Board) -> Optional[Move]:
    """Ask an engine player for its move; humans never produce one."""
    if not player.is_engine:
        return None
    return player.choose(board)


def build_players(mode: GameMode, level: GameLevel) -> Tuple[Player, Player]:
    if mode is GameMode.PVP:
        return HumanPlayer("Player 1", Mark.A), HumanPlayer("Player 2", Mark.B)
    if mode is GameMode.PVC_HUMAN_FIRST:
        return HumanPlayer("Player", Mark.A), EnginePlayer("AI", Mark.B, level.depth)
    return EnginePlayer("AI", Mark.A, level.depth), HumanPlayer("Player", Mark.B)
