from __future__ import annotations

from concurrent.futures import Executor, ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
import time

from loguru import logger

from dropfour.ai.tree import GameNode, build_tree, count_leaves, count_nodes
from dropfour.config import DRAW_SCORE, SEARCH_DEPTH, WIN_SCORE
from dropfour.core.board import Board
from dropfour.core.rules import winner
from dropfour.types import Move, Player


class SearchError(RuntimeError):
    """The game tree could not be built; no move was chosen."""


@dataclass(frozen=True, slots=True)
class MoveResult:
    column: Optional[Move]
    score: int


@dataclass(frozen=True, slots=True)
class SearchReport:
    result: MoveResult
    depth: int
    nodes: int
    leaves: int
    elapsed_ms: float


def _leaf_score(node: GameNode, maximizer: Player, ply: int) -> int:
    # Sooner wins score higher and later losses score less negative.
    if node.winner is None:
        return DRAW_SCORE
    if node.winner == maximizer:
        return WIN_SCORE - ply
    return -(WIN_SCORE - ply)


def _pick(scored: Iterable[Tuple[Optional[Move], int]], maximizing: bool) -> MoveResult:
    # Strict comparison keeps the first (lowest) column on ties.
    first, *rest = scored
    best = MoveResult(*first)
    for col, score in rest:
        if score > best.score if maximizing else score < best.score:
            best = MoveResult(col, score)
    return best


def _minimax(node: GameNode, maximizing: bool, maximizer: Player, ply: int) -> MoveResult:
    if node.is_leaf:
        legal = node.board.legal_columns()
        return MoveResult(legal[0] if legal else None, _leaf_score(node, maximizer, ply))

    return _pick(
        ((child.column, _minimax(child, not maximizing, maximizer, ply + 1).score) for child in node.children),
        maximizing,
    )


def minimax(node: GameNode, maximizing: bool = True) -> MoveResult:
    """
    Plain fixed-depth minimax over an already built tree.

    The maximizing side is the player to move at `node` when `maximizing`
    is True, the opponent otherwise. Ties keep the lowest column.
    """
    maximizer = node.to_play if maximizing else node.to_play.other
    return _minimax(node, maximizing, maximizer, 0)


def _score_root_child(board: Board, depth: int, maximizing: bool, maximizer: Player) -> tuple[int, int, int]:
    subtree = build_tree(board, depth)
    score = _minimax(subtree, maximizing, maximizer, 1).score
    return score, count_nodes(subtree), count_leaves(subtree)


def _search_parallel(board: Board, depth: int, maximizing: bool, executor: Executor) -> tuple[MoveResult, int, int]:
    maximizer = board.turn if maximizing else board.turn.other
    children = []
    for m in board.legal_columns():
        b = board.copy()
        b.place(m)
        children.append((m, b))

    futures = [executor.submit(_score_root_child, b, depth - 1, not maximizing, maximizer) for (_, b) in children]
    scored = [(m, fut.result()) for (m, _), fut in zip(children, futures)]

    nodes = 1 + sum(n for _, (_, n, _) in scored)
    leaves = sum(lv for _, (_, _, lv) in scored)
    return _pick(((m, score) for m, (score, _, _) in scored), maximizing), nodes, leaves


def search(
    board: Board,
    depth: int = SEARCH_DEPTH,
    maximizing: bool = True,
    workers: Optional[int] = None,
    executor: Optional[Executor] = None,
) -> SearchReport:
    """
    Build the game tree from `board` and pick a column with minimax.

    Root child subtrees are built and scored on `executor` when one is
    given, or on a pool of `workers` processes created for this call when
    `workers > 1`. The chosen column and score match the sequential search.
    """
    if depth < 0:
        raise ValueError("Depth must be >= 0.")

    start = time.perf_counter()
    try:
        parallel = executor is not None or (workers is not None and workers > 1)
        if parallel and (depth == 0 or board.is_full() or winner(board) is not None):
            parallel = False

        if parallel and executor is not None:
            result, nodes, leaves = _search_parallel(board, depth, maximizing, executor)
        elif parallel:
            with ProcessPoolExecutor(max_workers=workers) as ex:
                result, nodes, leaves = _search_parallel(board, depth, maximizing, ex)
        else:
            root = build_tree(board, depth)
            result = minimax(root, maximizing)
            nodes = count_nodes(root)
            leaves = count_leaves(root)
    except MemoryError as e:
        logger.error("Search aborted at depth {} after {} moves: out of memory", depth, board.move_count)
        raise SearchError(f"Out of memory while searching to depth {depth}.") from e

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.debug(
        "search depth={} nodes={} column={} score={} time={:.1f}ms",
        depth, nodes, result.column, result.score, elapsed_ms,
    )
    return SearchReport(result=result, depth=depth, nodes=nodes, leaves=leaves, elapsed_ms=elapsed_ms)
