from __future__ import annotations
from typing import Optional, List, Tuple

from dropfour.config import CONNECT_N
from dropfour.types import Player
from dropfour.core.board import Board

Coord = Tuple[int, int]  # (row, col)

# (d_row, d_col): horizontal, vertical, diagonal down-right, diagonal up-right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (-1, 1))


def _run_from(board: Board, r: int, c: int, dr: int, dc: int, player: Player) -> bool:
    g = board.grid
    for i in range(CONNECT_N):
        if g[r + dr * i][c + dc * i] != player:
            return False
    return True


def winning_line(board: Board, player: Player) -> Optional[List[Coord]]:
    """
    First run of CONNECT_N tokens owned by `player`, as grid coordinates.

    Start cells are bounded per direction so the whole window lies on the
    grid; a run can never wrap from the end of one row into the next.
    """
    rows, cols, n = board.rows, board.cols, CONNECT_N

    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            if _run_from(board, r, c, 0, 1, player):
                return [(r, c + i) for i in range(n)]

    # Vertical
    for r in range(rows - n + 1):
        for c in range(cols):
            if _run_from(board, r, c, 1, 0, player):
                return [(r + i, c) for i in range(n)]

    # Diagonal down-right
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            if _run_from(board, r, c, 1, 1, player):
                return [(r + i, c + i) for i in range(n)]

    # Diagonal up-right
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            if _run_from(board, r, c, -1, 1, player):
                return [(r - i, c + i) for i in range(n)]

    return None


def has_won(board: Board, player: Player) -> bool:
    return winning_line(board, player) is not None


def wins_at(board: Board, r: int, c: int) -> bool:
    """Checks for CONNECT_N-in-a-row through the token at (r, c)."""
    player = board.grid[r][c]
    if player is None:
        return False

    for dr, dc in DIRECTIONS:
        count = 1
        for sign in (1, -1):
            for i in range(1, CONNECT_N):
                nr, nc = r + sign * dr * i, c + sign * dc * i
                if 0 <= nr < board.rows and 0 <= nc < board.cols and board.grid[nr][nc] == player:
                    count += 1
                else:
                    break
        if count >= CONNECT_N:
            return True
    return False


def winner(board: Board) -> Optional[Player]:
    for p in Player:
        if has_won(board, p):
            return p
    return None


def is_draw(board: Board) -> bool:
    return board.is_full() and winner(board) is None
