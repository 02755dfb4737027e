"""Types and data structures for the flow algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from flowcut.errors import InvariantViolation
from flowcut.lib.algorithms.base import NO_PARENT
from flowcut.lib.residual import EdgePair, NodeID


class PathNode:
    """One node of the parent-pointer buffer filled by BFS."""

    __slots__ = ("id", "parent_id")

    def __init__(self, id: NodeID, parent_id: NodeID = NO_PARENT) -> None:
        self.id = id
        self.parent_id = parent_id

    def __repr__(self) -> str:
        return f"PathNode(id={self.id}, parent_id={self.parent_id})"

    @property
    def has_parent(self) -> bool:
        return self.parent_id != NO_PARENT


class AugmentingPath:
    """Parent-pointer buffer sized to the node count and reused across searches.

    The buffer is allocated once per engine run. BFS records ``parent[v] = u``
    at discovery time; the engine resets each consumed node through
    ``reset_node`` once the path has been augmented.
    """

    __slots__ = ("_nodes",)

    def __init__(self, num_nodes: int) -> None:
        self._nodes: List[PathNode] = [PathNode(i) for i in range(num_nodes)]

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, node: NodeID) -> PathNode:
        return self._nodes[node]

    def parent(self, node: NodeID) -> NodeID:
        return self._nodes[node].parent_id

    def set_parent(self, node: NodeID, parent: NodeID) -> None:
        self._nodes[node].parent_id = parent

    def reset_node(self, node: NodeID) -> None:
        self._nodes[node].parent_id = NO_PARENT

    def reset(self) -> None:
        for n in self._nodes:
            n.parent_id = NO_PARENT

    def edges_to(self, source: NodeID, sink: NodeID) -> Iterator[EdgePair]:
        """Yield ``(parent, child)`` pairs walking from ``sink`` back to ``source``.

        Raises:
            InvariantViolation: If the chain is broken or longer than the node
                count.
        """
        node = sink
        for _ in range(len(self._nodes)):
            if node == source:
                return
            parent = self._nodes[node].parent_id
            if parent == NO_PARENT:
                raise InvariantViolation(f"Broken parent chain at node {node}")
            yield parent, node
            node = parent
        if node != source:
            raise InvariantViolation("Parent chain does not terminate at the source")

    def nodes_to(self, source: NodeID, sink: NodeID) -> Tuple[NodeID, ...]:
        """Return the path as node ids ordered from ``source`` to ``sink``."""
        nodes = [sink]
        for parent, _ in self.edges_to(source, sink):
            nodes.append(parent)
        nodes.reverse()
        return tuple(nodes)


@dataclass(frozen=True)
class AugmentationStep:
    """One augmenting path and the flow pushed along it.

    Attributes:
        path: Node ids from source to sink.
        bottleneck: Minimum residual capacity along ``path`` at search time.
    """

    path: Tuple[NodeID, ...]
    bottleneck: int


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: The maximum flow value.
        edge_flow: Realized flow on each real input edge.
        residual_cap: Residual capacity left on each real input edge.
        augmentations: Augmenting paths in the order they were found.
    """

    total_flow: int
    edge_flow: Dict[EdgePair, int]
    residual_cap: Dict[EdgePair, int]
    augmentations: Tuple[AugmentationStep, ...]

    @property
    def num_augmentations(self) -> int:
        return len(self.augmentations)


@dataclass(frozen=True)
class MinCut:
    """Minimum s-t cut taken from a saturated residual graph.

    Attributes:
        source_side: Node ids reachable from the source, ascending.
        sink_side: Node ids not reachable from the source, ascending.
        cut_edges: Real input edges leading from ``source_side`` to ``sink_side``.
        value: Sum of original capacities of ``cut_edges``.
    """

    source_side: Tuple[NodeID, ...]
    sink_side: Tuple[NodeID, ...]
    cut_edges: Tuple[EdgePair, ...]
    value: int

    def side_of(self, node: NodeID) -> str:
        """Return ``"source"`` or ``"sink"`` for ``node``."""
        if node in self.source_side:
            return "source"
        if node in self.sink_side:
            return "sink"
        raise KeyError(node)
