# src/dropfour/types.py

from __future__ import annotations
from enum import Enum
from typing import Optional, NewType


class Player(Enum):
    ONE = 1
    TWO = 2

    @property
    def other(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..COLS-1
