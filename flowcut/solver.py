"""One-call max-flow/min-cut solving.

``solve`` builds a residual graph from an edge list, saturates it and
extracts the minimum cut; ``solve_graph`` does the same for a graph the
caller already built (for example with ``flowcut.lib.nx.from_networkx``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from flowcut.config import FlowConfig
from flowcut.lib.algorithms.max_flow import calc_max_flow
from flowcut.lib.algorithms.min_cut import calc_min_cut
from flowcut.lib.algorithms.types import AugmentationStep, MinCut
from flowcut.lib.builder import build_residual_graph
from flowcut.lib.residual import EdgePair, NodeID, ResidualGraph
from flowcut.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MaxFlowResult:
    """Result of a source/sink max-flow computation.

    Attributes:
        source: Source node id.
        sink: Sink node id.
        total_flow: Maximum flow value.
        edge_flow: Realized flow on each real input edge.
        min_cut: Minimum cut of the saturated graph.
        augmentations: Augmenting paths in the order they were found.
    """

    source: NodeID
    sink: NodeID
    total_flow: int
    edge_flow: Dict[EdgePair, int]
    min_cut: MinCut
    augmentations: Tuple[AugmentationStep, ...] = ()


def solve_graph(
    graph: ResidualGraph,
    source: NodeID,
    sink: NodeID,
    *,
    config: Optional[FlowConfig] = None,
) -> MaxFlowResult:
    """Saturate ``graph`` in place and return flow plus minimum cut."""
    total, summary = calc_max_flow(
        graph, source, sink, return_summary=True, config=config
    )
    cut = calc_min_cut(graph, source, sink)
    logger.debug(f"Solved {graph!r}: flow={total}, cut={cut.value}")
    return MaxFlowResult(
        source=source,
        sink=sink,
        total_flow=total,
        edge_flow=summary.edge_flow,
        min_cut=cut,
        augmentations=summary.augmentations,
    )


def solve(
    num_nodes: int,
    edges: Iterable[Sequence[int]],
    source: NodeID,
    sink: NodeID,
    *,
    config: Optional[FlowConfig] = None,
) -> Tuple[MaxFlowResult, ResidualGraph]:
    """Build a graph from ``(u, v, capacity)`` triples and solve it.

    Returns:
        ``(result, graph)``; the saturated graph is returned for reporting.
    """
    graph = build_residual_graph(num_nodes, edges)
    return solve_graph(graph, source, sink, config=config), graph
