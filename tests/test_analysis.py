import matplotlib

matplotlib.use("Agg")

from pathlib import Path

import pandas as pd
import pytest

from dropfour.scripts import profile_search
from dropfour_analysis.__main__ import main as analysis_main
from dropfour_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_profile
from dropfour_analysis.metrics.summarize import SummaryConfig, branching_factors, depth_summary, filter_rows
from dropfour_analysis.plots import plot_branching, plot_nodes_by_depth


def _frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "position": ["-", "-", "-", "44", "44", "44"],
            "seed": [0, 0, 0, 1, 1, 1],
            "moves_played": [0, 0, 0, 2, 2, 2],
            "depth": [1, 2, 3, 1, 2, 3],
            "nodes": [8, 57, 400, 8, 57, 392],
            "leaves": [7, 49, 343, 7, 49, 336],
            "elapsed_ms": [0.1, 1.0, 9.0, 0.1, 1.2, 8.0],
            "column": [0, 0, 0, 0, 0, 0],
            "score": [0, 0, 0, 0, 0, 0],
        }
    )


def test_depth_summary_groups_by_depth():
    summary = depth_summary(_frame())
    assert list(summary["depth"]) == [1, 2, 3]
    assert list(summary["samples"]) == [2, 2, 2]
    assert summary.loc[2, "nodes_mean"] == pytest.approx(396.0)
    assert summary.loc[2, "nodes_max"] == 400


def test_branching_factor_is_node_ratio():
    bf = branching_factors(_frame())
    assert list(bf["depth"]) == [2, 3]
    assert bf.loc[0, "branching"] == pytest.approx(57 / 8)
    assert bf.loc[1, "branching"] == pytest.approx(396 / 57)


def test_filter_rows():
    df = filter_rows(_frame(), SummaryConfig(min_moves_played=1, max_depth=2))
    assert list(df["depth"]) == [1, 2]
    assert set(df["moves_played"]) == {2}


def test_missing_columns_raise():
    with pytest.raises(ValueError):
        depth_summary(pd.DataFrame({"depth": [1]}))


def test_load_profile_and_latest(tmp_path: Path):
    _frame().to_csv(tmp_path / "search_profile_20240101_000000.csv", index=False)
    _frame().head(3).to_csv(tmp_path / "search_profile_20250101_000000.csv", index=False)

    latest = load_latest_from_dir(tmp_path)
    assert latest.name == "search_profile_20250101_000000.csv"

    df = load_profile(LoadSpec(csv_path=latest))
    assert len(df) == 3
    assert df["position"].tolist() == ["-", "-", "-"]


def test_load_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_profile(LoadSpec(csv_path=tmp_path / "nope.csv"))
    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path)


def test_plots_are_saved(tmp_path: Path):
    plot_nodes_by_depth(_frame(), tmp_path, show=False)
    plot_branching(_frame(), tmp_path, show=False)
    assert (tmp_path / "nodes_by_depth.png").exists()
    assert (tmp_path / "branching_by_depth.png").exists()


def test_profile_then_analyze(tmp_path: Path):
    out = profile_search.main(
        ["--seeds", "2", "--opening-plies", "2", "--max-depth", "2", "--outdir", str(tmp_path), "--log-level", "WARNING"]
    )
    df = load_profile(LoadSpec(csv_path=out))
    assert len(df) == 4
    assert set(df["depth"]) == {1, 2}
    assert (df["column"] >= 0).all()

    figs = tmp_path / "figs"
    assert analysis_main(["analyze", "--csv", str(out), "--outdir", str(figs)]) == 0
    assert (figs / "nodes_by_depth.png").exists()
    assert (figs / "time_by_depth.png").exists()


def test_random_opening_is_reproducible():
    a = profile_search.random_opening(3, 6)
    b = profile_search.random_opening(3, 6)
    assert a.history == b.history
    assert a.move_count == 6


def test_profile_rows_come_from_search_reports(monkeypatch):
    calls = []
    real_search = profile_search.search

    def spy(board, depth, executor=None):
        calls.append(depth)
        return real_search(board, depth, executor=executor)

    monkeypatch.setattr(profile_search, "search", spy)
    rows = list(profile_search.profile_rows(1, 0, 2))

    assert calls == [1, 2]
    assert [r[3:6] for r in rows] == [[1, 8, 7], [2, 57, 49]]


def test_profile_stops_a_position_on_search_error(monkeypatch):
    real_search = profile_search.search

    def fail_deep(board, depth, executor=None):
        if depth >= 2:
            raise profile_search.SearchError("out of memory")
        return real_search(board, depth, executor=executor)

    monkeypatch.setattr(profile_search, "search", fail_deep)
    rows = list(profile_search.profile_rows(2, 1, 4))

    assert [r[3] for r in rows] == [1, 1]


def test_profile_with_workers(tmp_path: Path):
    out = profile_search.main(
        ["--seeds", "1", "--opening-plies", "2", "--max-depth", "2", "--workers", "2",
         "--outdir", str(tmp_path), "--log-level", "WARNING"]
    )
    df = load_profile(LoadSpec(csv_path=out))
    assert list(df["depth"]) == [1, 2]
    assert list(df["nodes"]) == [8, 57]
