from __future__ import annotations

from typing import List

from flowcut.errors import UnsaturatedGraphError
from flowcut.lib.algorithms.bfs import bfs
from flowcut.lib.algorithms.max_flow import check_terminals
from flowcut.lib.algorithms.types import MinCut
from flowcut.lib.residual import NodeID, ResidualGraph
from flowcut.logging import get_logger

logger = get_logger(__name__)


def calc_min_cut(graph: ResidualGraph, src_node: NodeID, dst_node: NodeID) -> MinCut:
    """Extract the minimum s-t cut from a saturated residual graph.

    The source side is every node still reachable from ``src_node`` through
    positive residual capacity; the sink side is everything else. The graph
    is not modified, so repeated calls return the same cut.

    Args:
        graph: Residual graph left behind by ``calc_max_flow``.
        src_node: Source node id.
        dst_node: Sink node id.

    Returns:
        A ``MinCut`` with both node sets, the crossing edges and the cut value.

    Raises:
        InvariantViolation: On invalid terminals.
        UnsaturatedGraphError: If ``dst_node`` is still reachable, i.e. an
            augmenting path remains.
    """
    check_terminals(graph, src_node, dst_node)

    reachable: List[NodeID] = []
    unreachable: List[NodeID] = []
    if bfs(graph, src_node, dst_node, reachable=reachable, unreachable=unreachable):
        raise UnsaturatedGraphError(src_node, dst_node)

    source_side = set(reachable)
    cut_edges = tuple(
        (e.u, e.v)
        for e in graph.edges()
        if e.u in source_side and e.v not in source_side
    )
    value = sum(graph.original_capacity(u, v) for u, v in cut_edges)
    logger.debug(
        f"Min cut {src_node}->{dst_node}: {len(reachable)} source-side nodes, "
        f"{len(cut_edges)} cut edges, value {value}"
    )
    return MinCut(
        source_side=tuple(reachable),
        sink_side=tuple(unreachable),
        cut_edges=cut_edges,
        value=value,
    )
