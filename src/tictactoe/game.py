"""Core rules for 3x3 tic-tac-toe: marks, moves and the board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

SIZE = 3


class InvalidCoordinate(ValueError):
    """Raised when a move points outside the 3x3 grid."""


class Mark(Enum):
    EMPTY = " "
    A = "O"  # first mover
    B = "X"

    def opponent(self) -> "Mark":
        if self is Mark.A:
            return Mark.B
        if self is Mark.B:
            return Mark.A
        raise ValueError("EMPTY has no opponent")

    @property
    def symbol(self) -> str:
        return "" if self is Mark.EMPTY else self.value


class GameState(Enum):
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass
class Move:
    """A grid position. ``score`` is only set by advisory evaluation."""

    row: int
    column: int
    score: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if not (0 <= self.row < SIZE and 0 <= self.column < SIZE):
            raise InvalidCoordinate(
                f"({self.row}, {self.column}) is outside the {SIZE}x{SIZE} grid"
            )

    def __setattr__(self, name: str, value: object) -> None:
        if name in ("row", "column") and name in self.__dict__:
            raise AttributeError(f"Move.{name} is read-only")
        super().__setattr__(name, value)

    def __hash__(self) -> int:
        return hash((self.row, self.column))

    def to_index(self) -> int:
        return self.row * SIZE + self.column


# ---------- Board ----------


class Board:
    def __init__(self) -> None:
        self._grid: List[List[Mark]] = [[Mark.EMPTY] * SIZE for _ in range(SIZE)]

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Board":
        """Build a board from rows such as ``["OX.", ".O.", "..X"]``."""
        board = cls()
        by_symbol = {mark.value: mark for mark in (Mark.A, Mark.B)}
        for i, row in enumerate(rows):
            for j, ch in enumerate(row):
                if ch in by_symbol:
                    board.place(Move(i, j), by_symbol[ch])
        return board

    def reset(self) -> None:
        for row in self._grid:
            for j in range(SIZE):
                row[j] = Mark.EMPTY

    def mark_at(self, row: int, column: int) -> Mark:
        return self._grid[row][column]

    def cells(self) -> Tuple[Mark, ...]:
        """Row-major snapshot of every cell."""
        return tuple(mark for row in self._grid for mark in row)

    def place(self, move: Move, mark: Mark) -> bool:
        """Put ``mark`` on an empty cell; returns False and changes nothing otherwise."""
        if self._grid[move.row][move.column] is not Mark.EMPTY:
            return False
        self._grid[move.row][move.column] = mark
        return True

    def retract(self, move: Move) -> None:
        self._grid[move.row][move.column] = Mark.EMPTY

    def legal_moves(self) -> List[Move]:
        return [
            Move(i, j)
            for i in range(SIZE)
            for j in range(SIZE)
            if self._grid[i][j] is Mark.EMPTY
        ]

    def winner(self) -> Optional[Mark]:
        g = self._grid
        # diagonals first, then each row and column
        lines = [
            (g[0][0], g[1][1], g[2][2]),
            (g[0][2], g[1][1], g[2][0]),
        ]
        for i in range(SIZE):
            lines.append((g[i][0], g[i][1], g[i][2]))
            lines.append((g[0][i], g[1][i], g[2][i]))
        for a, b, c in lines:
            if a is not Mark.EMPTY and a is b is c:
                return a
        return None

    def is_full(self) -> bool:
        return all(mark is not Mark.EMPTY for row in self._grid for mark in row)

    def state(self) -> GameState:
        if self.winner() is not None:
            return GameState.WIN
        if self.is_full():
            return GameState.DRAW
        return GameState.ONGOING

    def render(self) -> str:
        """Text grid; empty cells show their numeric keypad digit."""
        border = "-" * (SIZE * 3)
        lines = [border]
        for i, row in enumerate(self._grid):
            symbols = [
                str((SIZE - 1 - i) * SIZE + j + 1) if mark is Mark.EMPTY else mark.value
                for j, mark in enumerate(row)
            ]
            lines.append("".join(f"|{s}|" for s in symbols))
        lines.append(border)
        return "\n".join(lines)
