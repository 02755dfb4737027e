"""flowcut: maximum flow and minimum s-t cut by shortest augmenting paths.

Primary API:
    ResidualGraph - dense residual/original capacity table
    build_residual_graph() - build a graph from (u, v, capacity) triples
    calc_max_flow() - Edmonds-Karp augmentation, saturates the graph
    calc_min_cut() - minimum cut of a saturated graph
    edge_flow() - realized flow on one input edge
    solve() - all of the above in one call

Example:
    from flowcut import build_residual_graph, calc_max_flow, calc_min_cut

    g = build_residual_graph(4, [(0, 1, 3), (0, 2, 2), (1, 3, 2), (2, 3, 3)])
    flow = calc_max_flow(g, 0, 3)   # 4
    cut = calc_min_cut(g, 0, 3)     # cut.value == 4
"""

from __future__ import annotations

from flowcut import cli, logging
from flowcut._version import __version__
from flowcut.config import FLOW_CONFIG, FlowConfig
from flowcut.errors import FlowError, InvariantViolation, UnsaturatedGraphError
from flowcut.lib.algorithms import (
    AugmentationStep,
    AugmentingPath,
    FlowSummary,
    MinCut,
    calc_max_flow,
    calc_min_cut,
    edge_flow,
    edge_flows,
    saturated_edges,
)
from flowcut.lib.builder import build_residual_graph
from flowcut.lib.nx import NodeMap, from_networkx, to_networkx
from flowcut.lib.residual import ResidualEdge, ResidualGraph
from flowcut.solver import MaxFlowResult, solve, solve_graph

__all__ = [
    "__version__",
    # Graph
    "ResidualGraph",
    "ResidualEdge",
    "build_residual_graph",
    # Algorithms
    "calc_max_flow",
    "calc_min_cut",
    "edge_flow",
    "edge_flows",
    "saturated_edges",
    "solve",
    "solve_graph",
    # Types
    "AugmentationStep",
    "AugmentingPath",
    "FlowSummary",
    "MinCut",
    "MaxFlowResult",
    # Errors
    "FlowError",
    "InvariantViolation",
    "UnsaturatedGraphError",
    # Config
    "FlowConfig",
    "FLOW_CONFIG",
    # NetworkX
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
