# src/dropfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from dropfour.config import ROWS, COLS
from dropfour.types import Cell, Player, Move


@dataclass(slots=True)
class Board:
    """
    Row 0 is the TOP of the grid, row `rows - 1` the bottom.
    `history` holds one column per placed token, oldest first.
    """
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)
    turn: Player = Player.ONE
    history: List[Move] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_moves(cls, columns: Iterable[int], rows: int = ROWS, cols: int = COLS) -> "Board":
        b = cls(rows, cols)
        for c in columns:
            if not b.place(Move(c)):
                raise ValueError(f"Column {c} is full.")
        return b

    def copy(self) -> "Board":
        return Board(
            self.rows,
            self.cols,
            grid=[row[:] for row in self.grid],
            turn=self.turn,
            history=self.history[:],
        )

    @property
    def move_count(self) -> int:
        return len(self.history)

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        """(row, col) of the most recent token, or None on an empty board."""
        if not self.history:
            return None
        c = int(self.history[-1])
        for r in range(self.rows):
            if self.grid[r][c] is not None:
                return r, c
        return None

    def cells(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.grid)

    def legal_columns(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def place(self, col: Move) -> bool:
        """
        Drop the current player's token into `col`.
        Returns False (and changes nothing) when the column is full.
        """
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = self.turn
                self.history.append(Move(c))
                self.turn = self.turn.other
                return True

        return False

    def undo(self) -> bool:
        """
        Take back the most recent placement.
        Returns False when there is nothing to undo.
        """
        if not self.history:
            return False

        c = int(self.history.pop())
        for r in range(self.rows):
            if self.grid[r][c] is not None:
                self.grid[r][c] = None
                break
        self.turn = self.turn.other
        return True
