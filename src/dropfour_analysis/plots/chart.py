from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt

from ..metrics.summarize import branching_factors, depth_summary


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> None:
    if show:
        plt.show()
    else:
        _ensure_dir(outdir)
        fig.savefig(outdir / filename, dpi=200, bbox_inches="tight")
        plt.close(fig)


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> None:
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]

    for c in num_cols:
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=30)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("count")
        _finish(fig, outdir, f"hist_{c}.png", show=show)


def plot_nodes_by_depth(df: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    """Mean and max tree size per depth on a log axis; growth is exponential."""
    if "depth" not in df.columns or "nodes" not in df.columns:
        return

    summary = depth_summary(df)
    fig = plt.figure()
    plt.plot(summary["depth"], summary["nodes_mean"], marker="o", label="mean")
    plt.plot(summary["depth"], summary["nodes_max"], marker="x", linestyle="--", label="max")
    plt.yscale("log")
    plt.title("Game tree nodes vs depth")
    plt.xlabel("depth (plies)")
    plt.ylabel("nodes")
    plt.legend()
    _finish(fig, outdir, "nodes_by_depth.png", show=show)


def plot_time_by_depth(df: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    if "elapsed_ms" not in df.columns:
        return
    if not pd.api.types.is_numeric_dtype(df["elapsed_ms"]):
        return

    summary = depth_summary(df)
    fig = plt.figure()
    plt.plot(summary["depth"], summary["elapsed_ms_mean"], marker="o")
    plt.yscale("log")
    plt.title("Search time vs depth")
    plt.xlabel("depth (plies)")
    plt.ylabel("ms (mean)")
    _finish(fig, outdir, "time_by_depth.png", show=show)


def plot_branching(df: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    bf = branching_factors(df)
    if bf.empty:
        return

    fig = plt.figure()
    plt.bar(bf["depth"].astype(str), bf["branching"].astype(float))
    plt.title("Effective branching factor")
    plt.xlabel("depth (plies)")
    plt.ylabel("nodes(d) / nodes(d-1)")
    _finish(fig, outdir, "branching_by_depth.png", show=show)
