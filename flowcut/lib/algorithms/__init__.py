"""Augmenting-path max-flow and min-cut algorithms."""

from flowcut.lib.algorithms.base import NO_PARENT
from flowcut.lib.algorithms.bfs import bfs
from flowcut.lib.algorithms.max_flow import (
    calc_max_flow,
    edge_flow,
    edge_flows,
    saturated_edges,
)
from flowcut.lib.algorithms.min_cut import calc_min_cut
from flowcut.lib.algorithms.types import (
    AugmentationStep,
    AugmentingPath,
    FlowSummary,
    MinCut,
    PathNode,
)

__all__ = [
    "NO_PARENT",
    "bfs",
    "calc_max_flow",
    "calc_min_cut",
    "edge_flow",
    "edge_flows",
    "saturated_edges",
    "AugmentationStep",
    "AugmentingPath",
    "FlowSummary",
    "MinCut",
    "PathNode",
]
