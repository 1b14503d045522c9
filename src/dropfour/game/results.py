from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dropfour.core.board import Board
from dropfour.core.rules import has_won
from dropfour.types import Player


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class GameResult:
    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Player] = None

    @property
    def finished(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS


def evaluate_result(board: Board) -> GameResult:
    """
    Game status after the latest placement: a win for the player who just
    moved, otherwise a draw on a full board, otherwise still in progress.
    """
    if board.move_count > 0:
        mover = board.turn.other
        if has_won(board, mover):
            return GameResult(Outcome.WON, mover)
    if board.is_full():
        return GameResult(Outcome.DRAW)
    return GameResult()
