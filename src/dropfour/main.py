from __future__ import annotations

import argparse

from dropfour.config import LOG_FILE, LOG_LEVEL, SEARCH_DEPTH
from dropfour.logger import configure_logging
from dropfour.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour", description="Play Connect 4 in the terminal against a minimax AI.")
    ap.add_argument("--depth", type=int, default=SEARCH_DEPTH, help="Search depth bound in plies for the AI and hints")
    ap.add_argument("--workers", type=int, default=None, help="Score root moves in this many processes (default: single process)")
    ap.add_argument("--log-level", type=str, default=LOG_LEVEL, help="stderr log level (DEBUG, INFO, WARNING, ...)")
    ap.add_argument("--log-file", type=str, default=LOG_FILE, help="Also write DEBUG logs to this file")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    if args.depth < 0:
        print("--depth must be >= 0")
        return 2

    configure_logging(args.log_level, args.log_file)
    run_menu(depth=args.depth, workers=args.workers)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
