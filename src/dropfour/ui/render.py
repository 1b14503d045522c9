from __future__ import annotations
from typing import Optional, Iterable, Tuple, Set

from dropfour.config import CLEAR_SCREEN
from dropfour.core.board import Board
from dropfour.types import Cell, Player
from dropfour.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE, RESET

Coord = Tuple[int, int]

GLYPHS = {Player.ONE: "X", Player.TWO: "O"}


def glyph(player: Player) -> str:
    return GLYPHS[player]


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if cell is Player.ONE:
        return c(glyph(cell), FG_RED)
    return c(glyph(cell), FG_YELLOW)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()
    cells = board.cells()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    nums = "   " + " ".join(str(i + 1) for i in range(board.cols))
    print(c(nums, DIM))

    for r, row in enumerate(cells):
        parts = []
        for cidx, cell in enumerate(row):
            p = _piece(cell)
            if (r, cidx) in hl:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)

        print(" | " + " ".join(parts) + " |")

    print(c("   " + "—" * (2 * board.cols - 1), DIM))
    print(c(f"   Enter 1-{board.cols} to drop, u to undo, h for a hint, q to quit.", DIM))
