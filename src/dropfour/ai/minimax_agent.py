from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Optional

from dropfour.ai.minimax import SearchReport, search
from dropfour.config import SEARCH_DEPTH
from dropfour.game.state import GameState
from dropfour.types import Move


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Minimax AI"
    depth: int = SEARCH_DEPTH
    workers: Optional[int] = None

    # Stats from the most recent search
    last_info: dict = field(default_factory=dict)

    # One pool for the agent's lifetime when workers > 1; see close()
    pool: Optional[ProcessPoolExecutor] = field(default=None, repr=False)

    def _executor(self) -> Optional[ProcessPoolExecutor]:
        if self.workers is None or self.workers <= 1:
            return None
        if self.pool is None:
            self.pool = ProcessPoolExecutor(max_workers=self.workers)
        return self.pool

    def close(self) -> None:
        if self.pool is not None:
            self.pool.shutdown()
            self.pool = None

    def analyse(self, state: GameState) -> SearchReport:
        return search(state.board, self.depth, maximizing=True, executor=self._executor())

    def choose_move(self, state: GameState) -> Move:
        if not state.board.legal_columns():
            raise ValueError("No valid moves.")

        report = self.analyse(state)
        move = report.result.column
        if move is None:
            raise ValueError("No valid moves.")

        self.last_info = {
            "depth": report.depth,
            "nodes": report.nodes,
            "eval": report.result.score,
            "move_col": int(move) + 1,
            "time_ms": max(1, int(report.elapsed_ms)),
        }
        return move
