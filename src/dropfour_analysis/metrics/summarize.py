from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class SummaryConfig:
    min_moves_played: int = 0
    max_depth: int | None = None


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()

    if cfg.min_moves_played > 0:
        _require_cols(out, ["moves_played"])
        out = out[out["moves_played"].fillna(0) >= cfg.min_moves_played].copy()

    if cfg.max_depth is not None:
        _require_cols(out, ["depth"])
        out = out[out["depth"] <= cfg.max_depth].copy()

    return out


def depth_summary(df: pd.DataFrame) -> pd.DataFrame:
    """One row per depth: sample count, node and time statistics."""
    _require_cols(df, ["depth", "nodes"])

    agg = {"nodes": ["count", "mean", "max"]}
    if "elapsed_ms" in df.columns:
        agg["elapsed_ms"] = ["mean", "max"]
    if "leaves" in df.columns:
        agg["leaves"] = ["mean"]

    out = df.groupby("depth").agg(agg)
    out.columns = [f"{a}_{b}" for a, b in out.columns]
    out = out.rename(columns={"nodes_count": "samples"}).reset_index()
    return out.sort_values("depth").reset_index(drop=True)


def branching_factors(df: pd.DataFrame) -> pd.DataFrame:
    """
    Effective branching factor per depth: mean nodes(d) / mean nodes(d-1).
    The first profiled depth has no predecessor and is dropped.
    """
    summary = depth_summary(df)[["depth", "nodes_mean"]].copy()
    summary["branching"] = summary["nodes_mean"] / summary["nodes_mean"].shift(1)
    # Only consecutive depths are comparable
    consecutive = summary["depth"].diff() == 1
    return summary[consecutive].dropna().reset_index(drop=True)


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    desc = num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
    return desc
