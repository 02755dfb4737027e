"""Residual graph storage.

A ``ResidualGraph`` is a dense N x N table of residual and original
capacities indexed by ordered node-id pairs. Pairs that were never set are
logically "no edge" (both capacities zero). Reverse edges need no explicit
construction: pushing flow along ``(u, v)`` simply grows ``residual[v][u]``.

Example:
    >>> g = ResidualGraph(3)
    >>> g.set_capacity(0, 1, 5)
    >>> g.set_capacity(1, 2, 3)
    >>> g.adjust_residual(0, 1, -3)
    >>> g.adjust_residual(1, 0, 3)
    >>> g.residual_capacity(0, 1), g.residual_capacity(1, 0)
    (2, 3)
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

import numpy as np

from flowcut.errors import InvariantViolation

NodeID = int
EdgePair = Tuple[NodeID, NodeID]

#: Largest capacity representable in the int64 tables.
MAX_CAPACITY = int(np.iinfo(np.int64).max)


@dataclass(frozen=True)
class ResidualEdge:
    """Snapshot of one ordered pair of the residual table.

    Attributes:
        u: Tail node id.
        v: Head node id.
        residual_capacity: Capacity still available on ``u -> v``.
        original_capacity: Capacity the pair was built with.
    """

    u: NodeID
    v: NodeID
    residual_capacity: int
    original_capacity: int

    @property
    def flow(self) -> int:
        """Realized flow, clamped to ``[0, original_capacity]``."""
        return min(
            max(self.original_capacity - self.residual_capacity, 0),
            self.original_capacity,
        )

    @property
    def saturated(self) -> bool:
        return self.original_capacity > 0 and self.residual_capacity == 0


def _check_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvariantViolation(f"{what} must be an integer, got {value!r}")
    return int(value)


class ResidualGraph:
    """Dense residual/original capacity store for ``num_nodes`` nodes.

    The structure is build-then-mutate: ``set_capacity`` is called once per
    real input edge, after which only ``adjust_residual`` changes state.
    Every mutation is validated; a violation raises ``InvariantViolation``
    and leaves the tables untouched.

    The two directions of a pair share one capacity budget:
    ``original[u][v] + original[v][u]`` never exceeds ``MAX_CAPACITY``, and
    pushing flow only moves capacity between the two residual cells, so no
    residual can overflow.
    """

    __slots__ = ("_n", "_residual", "_original", "_edges", "_flow_pushed")

    def __init__(self, num_nodes: int) -> None:
        n = _check_int(num_nodes, "num_nodes")
        if n < 1:
            raise InvariantViolation(f"num_nodes must be positive, got {n}")
        self._n = n
        self._residual = np.zeros((n, n), dtype=np.int64)
        self._original = np.zeros((n, n), dtype=np.int64)
        # Real input edges in insertion order
        self._edges: Dict[EdgePair, None] = {}
        self._flow_pushed = False

    def __repr__(self) -> str:
        return f"ResidualGraph(num_nodes={self._n}, num_edges={len(self._edges)})"

    @property
    def num_nodes(self) -> int:
        return self._n

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def nodes(self) -> range:
        return range(self._n)

    def check_node(self, node: object, what: str = "node") -> NodeID:
        """Return ``node`` as an int, raising if it is not a valid id."""
        idx = _check_int(node, what)
        if not 0 <= idx < self._n:
            raise InvariantViolation(
                f"{what} id {idx} out of range [0, {self._n})"
            )
        return idx

    #
    # Construction
    #
    def set_capacity(self, u: NodeID, v: NodeID, capacity: int) -> None:
        """Record ``u -> v`` as a real input edge with the given capacity.

        Sets both the original and the residual capacity. The reverse pair
        is not touched.

        Raises:
            InvariantViolation: On negative or non-integer capacity, node ids
                out of range, a self-loop, a pair already set, a pair whose
                two directions together exceed ``MAX_CAPACITY``, or a graph
                that already carries flow.
        """
        if self._flow_pushed:
            raise InvariantViolation(
                "Cannot add edges after flow has been pushed; call reset() first"
            )
        u = self.check_node(u, "tail")
        v = self.check_node(v, "head")
        cap = _check_int(capacity, "capacity")
        if cap < 0:
            raise InvariantViolation(f"Negative capacity {cap} on edge ({u}, {v})")
        if cap > MAX_CAPACITY:
            raise InvariantViolation(f"Capacity {cap} on edge ({u}, {v}) overflows")
        if u == v:
            raise InvariantViolation(f"Self-loop on node {u} is not allowed")
        if (u, v) in self._edges:
            raise InvariantViolation(f"Edge ({u}, {v}) already has a capacity")
        opposite = int(self._original[v, u])
        if cap + opposite > MAX_CAPACITY:
            raise InvariantViolation(
                f"Capacities of ({u}, {v}) and ({v}, {u}) overflow together: "
                f"{cap} + {opposite}"
            )
        self._original[u, v] = cap
        self._residual[u, v] = cap
        self._edges[(u, v)] = None

    #
    # Access
    #
    def residual_capacity(self, u: NodeID, v: NodeID) -> int:
        u = self.check_node(u, "tail")
        v = self.check_node(v, "head")
        return int(self._residual[u, v])

    def original_capacity(self, u: NodeID, v: NodeID) -> int:
        u = self.check_node(u, "tail")
        v = self.check_node(v, "head")
        return int(self._original[u, v])

    def has_edge(self, u: NodeID, v: NodeID) -> bool:
        """True iff ``(u, v)`` was given as a real input edge."""
        return (u, v) in self._edges

    def edge(self, u: NodeID, v: NodeID) -> ResidualEdge:
        u = self.check_node(u, "tail")
        v = self.check_node(v, "head")
        return ResidualEdge(
            u, v, int(self._residual[u, v]), int(self._original[u, v])
        )

    def edges(self) -> Iterator[ResidualEdge]:
        """Yield snapshots of the real input edges in insertion order."""
        for u, v in self._edges:
            yield ResidualEdge(
                u, v, int(self._residual[u, v]), int(self._original[u, v])
            )

    def edge_pairs(self) -> List[EdgePair]:
        return list(self._edges)

    def residual_row(self, u: NodeID) -> np.ndarray:
        """Read-only view of the residual capacities leaving ``u``."""
        row = self._residual[self.check_node(u)]
        view = row.view()
        view.flags.writeable = False
        return view

    def out_capacity(self, u: NodeID) -> int:
        """Sum of original capacities of real edges leaving ``u``."""
        return int(self._original[self.check_node(u)].sum())

    def in_capacity(self, v: NodeID) -> int:
        """Sum of original capacities of real edges entering ``v``."""
        return int(self._original[:, self.check_node(v)].sum())

    #
    # Mutation
    #
    def adjust_residual(self, u: NodeID, v: NodeID, delta: int) -> None:
        """Add ``delta`` (possibly negative) to the residual of ``u -> v``.

        Raises:
            InvariantViolation: If the result would be negative or exceed
                the int64 table range.
        """
        u = self.check_node(u, "tail")
        v = self.check_node(v, "head")
        delta = _check_int(delta, "delta")
        current = int(self._residual[u, v])
        updated = current + delta
        if updated < 0:
            raise InvariantViolation(
                f"Residual capacity of ({u}, {v}) would become negative: "
                f"{current} + {delta}"
            )
        if updated > MAX_CAPACITY:
            raise InvariantViolation(
                f"Residual capacity of ({u}, {v}) overflows: {current} + {delta}"
            )
        self._residual[u, v] = updated
        self._flow_pushed = True

    @property
    def has_flow(self) -> bool:
        """True once ``adjust_residual`` has run since construction or ``reset``."""
        return self._flow_pushed

    def reset(self) -> None:
        """Discard all pushed flow, restoring residuals to original capacities."""
        np.copyto(self._residual, self._original)
        self._flow_pushed = False

    def copy(self) -> ResidualGraph:
        """Return an independent deep copy."""
        clone = ResidualGraph.__new__(ResidualGraph)
        clone._n = self._n
        clone._residual = self._residual.copy()
        clone._original = self._original.copy()
        clone._edges = dict(self._edges)
        clone._flow_pushed = self._flow_pushed
        return clone
