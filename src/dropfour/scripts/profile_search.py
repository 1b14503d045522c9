from __future__ import annotations

import argparse
import csv
import random
import time
from concurrent.futures import Executor, ProcessPoolExecutor
from pathlib import Path
from typing import Iterator, List, Optional

from loguru import logger

from dropfour.ai.minimax import SearchError, search
from dropfour.core.board import Board
from dropfour.core.rules import winner
from dropfour.logger import configure_logging

CSV_COLUMNS = [
    "position", "seed", "moves_played",
    "depth", "nodes", "leaves",
    "elapsed_ms", "column", "score",
]


def random_opening(seed: int, plies: int) -> Board:
    """Play `plies` random moves, stopping early if the game is decided."""
    rng = random.Random(seed)
    board = Board()
    for _ in range(plies):
        moves = board.legal_columns()
        if not moves or winner(board) is not None:
            break
        board.place(rng.choice(moves))
    return board


def profile_rows(
    seeds: int,
    opening_plies: int,
    max_depth: int,
    executor: Optional[Executor] = None,
) -> Iterator[List[object]]:
    for seed in range(seeds):
        board = random_opening(seed, opening_plies)
        position = "".join(str(int(m) + 1) for m in board.history) or "-"
        logger.info("profiling position {} (seed {})", position, seed)

        for depth in range(1, max_depth + 1):
            try:
                report = search(board, depth, executor=executor)
            except SearchError as e:
                # Deeper searches of this position would fail the same way
                logger.warning("position {}: stopping at depth {}: {}", position, depth, e)
                break

            col = report.result.column
            yield [
                position, seed, board.move_count,
                depth, report.nodes, report.leaves,
                round(report.elapsed_ms, 3),
                int(col) if col is not None else -1,
                report.result.score,
            ]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Measure minimax tree size and time per depth.")
    ap.add_argument("--seeds", type=int, default=5, help="Number of random opening positions")
    ap.add_argument("--opening-plies", type=int, default=4, help="Random moves played before searching")
    ap.add_argument("--max-depth", type=int, default=5, help="Profile depths 1..max-depth")
    ap.add_argument("--workers", type=int, default=None, help="Score root moves on a pool of this many processes")
    ap.add_argument("--outdir", type=str, default="data/results", help="Directory for the CSV")
    ap.add_argument("--log-level", type=str, default="INFO")
    return ap


def main(argv: list[str] | None = None) -> Path:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = outdir / f"search_profile_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        if args.workers is not None and args.workers > 1:
            with ProcessPoolExecutor(max_workers=args.workers) as ex:
                for row in profile_rows(args.seeds, args.opening_plies, args.max_depth, executor=ex):
                    w.writerow(row)
        else:
            for row in profile_rows(args.seeds, args.opening_plies, args.max_depth):
                w.writerow(row)

    print(f"Wrote CSV: {out_path}")
    return out_path


if __name__ == "__main__":
    main()
