from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from dropfour.core.board import Board
from dropfour.core.rules import winner, wins_at
from dropfour.types import Move, Player


@dataclass(slots=True)
class GameNode:
    board: Board
    column: Optional[Move] = None      # column played to reach this node (None at the root)
    winner: Optional[Player] = None
    children: List["GameNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def to_play(self) -> Player:
        return self.board.turn


def _decided_winner(board: Board) -> Optional[Player]:
    # Only the last token can have completed a run, since parents are never won.
    last = board.last_move
    if last is None:
        return None
    r, c = last
    return board.grid[r][c] if wins_at(board, r, c) else None


def _expand(node: GameNode, depth: int) -> None:
    if depth == 0 or node.winner is not None or node.board.is_full():
        return

    for m in node.board.legal_columns():
        child_board = node.board.copy()
        child_board.place(m)
        child = GameNode(board=child_board, column=m, winner=_decided_winner(child_board))
        _expand(child, depth - 1)
        node.children.append(child)


def build_tree(board: Board, depth: int) -> GameNode:
    """
    Expand every position reachable from `board` within `depth` plies.

    Each node owns its own board copy, so sibling branches never see each
    other's placements and the caller's board is left untouched.
    """
    if depth < 0:
        raise ValueError("Depth must be >= 0.")

    root_board = board.copy()
    root = GameNode(board=root_board, winner=winner(root_board))
    _expand(root, depth)
    return root


def count_nodes(node: GameNode) -> int:
    total = 0
    stack = [node]
    while stack:
        n = stack.pop()
        total += 1
        stack.extend(n.children)
    return total


def count_leaves(node: GameNode) -> int:
    total = 0
    stack = [node]
    while stack:
        n = stack.pop()
        if n.is_leaf:
            total += 1
        stack.extend(n.children)
    return total


def tree_height(node: GameNode) -> int:
    if node.is_leaf:
        return 0
    return 1 + max(tree_height(ch) for ch in node.children)
