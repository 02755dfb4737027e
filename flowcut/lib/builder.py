from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from flowcut.errors import InvariantViolation
from flowcut.lib.residual import NodeID, ResidualGraph

#: Input edge triple: (tail, head, capacity).
EdgeSpec = Tuple[NodeID, NodeID, int]


def build_residual_graph(num_nodes: int, edges: Iterable[Sequence[int]]) -> ResidualGraph:
    """Build a ``ResidualGraph`` from ``(u, v, capacity)`` triples.

    Args:
        num_nodes: Number of nodes; ids are ``0 .. num_nodes - 1``.
        edges: Directed input edges. Each ordered pair may appear once.

    Returns:
        A fresh residual graph with residual capacities equal to the inputs.

    Raises:
        InvariantViolation: On malformed triples, bad ids or capacities, or a
            repeated ordered pair.
    """
    graph = ResidualGraph(num_nodes)
    for idx, item in enumerate(edges):
        if len(item) != 3:
            raise InvariantViolation(
                f"Edge #{idx} must be a (u, v, capacity) triple, got {item!r}"
            )
        u, v, cap = item
        graph.set_capacity(u, v, cap)
    return graph
