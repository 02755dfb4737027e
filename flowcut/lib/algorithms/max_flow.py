from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple, Union, overload

from flowcut.config import FLOW_CONFIG, FlowConfig
from flowcut.errors import InvariantViolation
from flowcut.lib.algorithms.base import BOTTLENECK_SEED
from flowcut.lib.algorithms.bfs import bfs
from flowcut.lib.algorithms.types import AugmentationStep, AugmentingPath, FlowSummary
from flowcut.lib.residual import EdgePair, NodeID, ResidualGraph
from flowcut.logging import get_logger

logger = get_logger(__name__)


def check_terminals(graph: ResidualGraph, src_node: object, dst_node: object) -> None:
    """Validate a source/sink pair against ``graph``.

    Raises:
        InvariantViolation: If either id is out of range or they are equal.
    """
    s = graph.check_node(src_node, "source")
    t = graph.check_node(dst_node, "sink")
    if s == t:
        raise InvariantViolation(f"source and sink must differ, both are {s}")


@overload
def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[False] = False,
    config: Optional[FlowConfig] = None,
) -> int: ...


@overload
def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[True],
    config: Optional[FlowConfig] = None,
) -> Tuple[int, FlowSummary]: ...


def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: bool = False,
    config: Optional[FlowConfig] = None,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Compute the maximum flow from ``src_node`` to ``dst_node``.

    Edmonds-Karp: repeatedly finds a shortest augmenting path with ``bfs``,
    pushes the path's bottleneck along it, and stops when the sink is no
    longer reachable. The residual graph is mutated in place and is left
    saturated, ready for ``calc_min_cut``.

    Calling this again on an already saturated graph returns 0; call
    ``graph.reset()`` first to re-solve from scratch.

    Args:
        graph: Residual graph built from the input edges. Mutated.
        src_node: Source node id.
        dst_node: Sink node id.
        return_summary: If True, also return a ``FlowSummary``.
        config: Overrides ``FLOW_CONFIG``.

    Returns:
        The flow pushed by this call, or ``(flow, summary)`` when
        ``return_summary`` is True.

    Raises:
        InvariantViolation: On invalid terminals or a broken residual table.

    Examples:
        >>> g = ResidualGraph(3)
        >>> g.set_capacity(0, 1, 10)
        >>> g.set_capacity(1, 2, 5)
        >>> calc_max_flow(g, 0, 2)
        5
    """
    check_terminals(graph, src_node, dst_node)
    cfg = config or FLOW_CONFIG

    path = AugmentingPath(graph.num_nodes)
    path.reset()
    steps: List[AugmentationStep] = []
    max_flow = 0
    rounds = 0

    while bfs(graph, src_node, dst_node, path=path):
        bottleneck = _bottleneck(graph, path, src_node, dst_node)
        if bottleneck <= 0:
            raise InvariantViolation(
                f"Augmenting path with non-positive bottleneck {bottleneck}"
            )
        if return_summary or cfg.log_paths:
            nodes = path.nodes_to(src_node, dst_node)
            steps.append(AugmentationStep(nodes, bottleneck))
            if cfg.log_paths:
                logger.debug(f"Augmenting path {nodes} with bottleneck {bottleneck}")
        _augment(graph, path, src_node, dst_node, bottleneck)
        max_flow += bottleneck
        rounds += 1

    logger.debug(
        f"Max flow {src_node}->{dst_node}: {max_flow} after {rounds} augmentations"
    )

    if not return_summary:
        return max_flow
    return max_flow, _build_flow_summary(max_flow, graph, steps)


def _bottleneck(
    graph: ResidualGraph, path: AugmentingPath, src_node: NodeID, dst_node: NodeID
) -> int:
    """Minimum residual capacity along the parent chain from sink to source."""
    bottleneck = BOTTLENECK_SEED
    for u, v in path.edges_to(src_node, dst_node):
        bottleneck = min(bottleneck, graph.residual_capacity(u, v))
    return bottleneck


def _augment(
    graph: ResidualGraph,
    path: AugmentingPath,
    src_node: NodeID,
    dst_node: NodeID,
    amount: int,
) -> None:
    """Push ``amount`` along the path and clear the consumed parent pointers."""
    # Materialize the chain before parents are cleared.
    for u, v in list(path.edges_to(src_node, dst_node)):
        graph.adjust_residual(u, v, -amount)
        graph.adjust_residual(v, u, amount)
        path.reset_node(v)


def edge_flow(graph: ResidualGraph, u: NodeID, v: NodeID) -> int:
    """Realized flow on the real input edge ``u -> v``.

    Equals ``original - residual`` clamped to ``[0, original]``. When both
    directions of a pair are real input edges this is the net flow in the
    ``u -> v`` direction. Pairs that are not input edges carry no flow.
    """
    if not graph.has_edge(u, v):
        graph.check_node(u, "tail")
        graph.check_node(v, "head")
        return 0
    return graph.edge(u, v).flow


def edge_flows(graph: ResidualGraph) -> Dict[EdgePair, int]:
    """Return ``{(u, v): flow}`` for every real input edge, in insertion order."""
    return {(e.u, e.v): e.flow for e in graph.edges()}


def saturated_edges(graph: ResidualGraph) -> List[EdgePair]:
    """Real input edges with positive capacity and no residual left."""
    return [(e.u, e.v) for e in graph.edges() if e.saturated]


def _build_flow_summary(
    total_flow: int, graph: ResidualGraph, steps: List[AugmentationStep]
) -> FlowSummary:
    edge_flow_map: Dict[EdgePair, int] = {}
    residual_cap: Dict[EdgePair, int] = {}
    for e in graph.edges():
        edge_flow_map[(e.u, e.v)] = e.flow
        residual_cap[(e.u, e.v)] = e.residual_capacity
    return FlowSummary(
        total_flow=total_flow,
        edge_flow=edge_flow_map,
        residual_cap=residual_cap,
        augmentations=tuple(steps),
    )
