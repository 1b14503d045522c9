from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

from dropfour.game.state import GameState
from dropfour.types import Move
from dropfour.ui.render import glyph

CommandKind = Literal["move", "undo", "hint", "quit"]


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    column: Optional[Move] = None


def parse_command(raw: str, cols: int) -> Command:
    """
    Columns are entered 1-based. `u` undoes, `h` asks for a hint, `q` quits.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return Command("quit")
    if s in {"u", "undo"}:
        return Command("undo")
    if s in {"h", "hint"}:
        return Command("hint")
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a column number, u, h or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Command("move", Move(col))


@dataclass(frozen=True, slots=True)
class HumanAgent:
    """A seat driven from the keyboard; every turn yields one Command."""
    name: str = "Human"

    def read_command(self, state: GameState) -> Command:
        raw = input(f"Player {glyph(state.current)} move: ")
        return parse_command(raw, state.board.cols)
