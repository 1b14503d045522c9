from __future__ import annotations
from dataclasses import dataclass, field

from dropfour.core.board import Board
from dropfour.game.results import GameResult
from dropfour.types import Player


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    result: GameResult = field(default_factory=GameResult)
    last_status: str = "Player X starts."

    @property
    def current(self) -> Player:
        return self.board.turn

    @property
    def finished(self) -> bool:
        return self.result.finished
