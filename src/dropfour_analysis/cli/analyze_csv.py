from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_profile
from ..metrics.summarize import SummaryConfig, branching_factors, depth_summary, filter_rows, numeric_summary
from ..plots.chart import plot_branching, plot_histograms, plot_nodes_by_depth, plot_time_by_depth


DEFAULT_NUMERIC_PLOTS = [
    "nodes",
    "leaves",
    "elapsed_ms",
    "score",
]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze minimax search profile CSVs.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a profile CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing search_profile_*.csv")
    ap.add_argument("--pattern", type=str, default="search_profile_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")

    ap.add_argument("--min-moves", type=int, default=0, help="Only positions with at least this many moves played")
    ap.add_argument("--max-depth", type=int, default=None, help="Ignore rows searched deeper than this")

    ap.add_argument("--no-hists", action="store_true", help="Disable histogram generation")
    ap.add_argument("--no-plots", action="store_true", help="Disable all plots")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_profile(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    cfg = SummaryConfig(min_moves_played=args.min_moves, max_depth=args.max_depth)
    filtered = filter_rows(df, cfg)
    if filtered.empty:
        print("No rows left after filtering.")
        return 1

    print("\n=== Per-depth summary ===")
    print(depth_summary(filtered).to_string(index=False))

    bf = branching_factors(filtered)
    if not bf.empty:
        print("\n=== Effective branching factor ===")
        print(bf.to_string(index=False))

    desc = numeric_summary(filtered)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    if not args.no_hists:
        plot_histograms(filtered, outdir, DEFAULT_NUMERIC_PLOTS, show=args.show)
    plot_nodes_by_depth(filtered, outdir, show=args.show)
    plot_time_by_depth(filtered, outdir, show=args.show)
    plot_branching(filtered, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
