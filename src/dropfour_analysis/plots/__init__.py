from .chart import (
    plot_branching,
    plot_histograms,
    plot_nodes_by_depth,
    plot_time_by_depth,
)

__all__ = [
    "plot_branching",
    "plot_histograms",
    "plot_nodes_by_depth",
    "plot_time_by_depth",
]
