"""NetworkX graph conversion utilities.

Converts between NetworkX directed graphs and ``ResidualGraph``. Node names
(any hashable) map to contiguous integer ids; the returned ``NodeMap``
translates results back.

Example:
    >>> import networkx as nx
    >>> from flowcut.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", capacity=10)
    >>> G.add_edge("B", "C", capacity=5)
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["C"]
    2
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional

from flowcut.lib.algorithms.max_flow import edge_flow
from flowcut.lib.residual import ResidualGraph

if TYPE_CHECKING:
    import networkx as nx


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer ids.

    Attributes:
        to_index: Maps original node names to ids.
        to_name: Maps ids back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["s", "a", "t"])
        >>> node_map.index("t")
        2
        >>> node_map.label(1)
        'a'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in id order."""
        to_index = {name: i for i, name in enumerate(names)}
        if len(to_index) != len(names):
            raise ValueError("Node names must be unique")
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)

    def index(self, name: Hashable) -> int:
        """Return the id of ``name``; raises KeyError for unknown names."""
        return self.to_index[name]

    def label(self, idx: int) -> Hashable:
        """Return the name of ``idx``, falling back to the id itself."""
        return self.to_name.get(idx, idx)

    def labels(self) -> List[Hashable]:
        """Names in id order."""
        return [self.to_name[i] for i in range(len(self.to_name))]


def _as_capacity(value: Any, u: Hashable, v: Hashable) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"Capacity of edge ({u!r}, {v!r}) is not numeric: {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if not float(value).is_integer():
        raise ValueError(
            f"Capacity of edge ({u!r}, {v!r}) must be integral, got {value!r}"
        )
    return int(value)


def from_networkx(
    G: "nx.DiGraph",
    *,
    capacity_attr: str = "capacity",
    default_capacity: Optional[int] = None,
) -> tuple[ResidualGraph, NodeMap]:
    """Convert a NetworkX ``DiGraph`` into a ``ResidualGraph``.

    Nodes are ordered by ``str(name)`` so the mapping is deterministic.
    Integral float capacities (``10.0``) are accepted and stored as ints.

    Args:
        G: Directed NetworkX graph. Multigraphs and undirected graphs are
            rejected because the residual table holds one edge per ordered pair.
        capacity_attr: Edge attribute holding the capacity.
        default_capacity: Capacity for edges without ``capacity_attr``. If
            None, such edges raise ValueError.

    Returns:
        ``(graph, node_map)``.

    Raises:
        TypeError: If ``G`` is not a ``networkx.DiGraph``.
        ValueError: If ``G`` has no nodes or an edge has an unusable capacity.
    """
    import networkx as nx

    if isinstance(G, nx.MultiDiGraph) or not isinstance(G, nx.DiGraph):
        raise TypeError(f"Expected networkx.DiGraph, got {type(G).__name__}")

    if G.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes")

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    graph = ResidualGraph(len(node_map))

    for u, v, data in G.edges(data=True):
        if capacity_attr in data:
            cap = _as_capacity(data[capacity_attr], u, v)
        elif default_capacity is not None:
            cap = _as_capacity(default_capacity, u, v)
        else:
            raise ValueError(f"Edge ({u!r}, {v!r}) has no '{capacity_attr}' attribute")
        graph.set_capacity(node_map.index(u), node_map.index(v), cap)

    return graph, node_map


def to_networkx(
    graph: ResidualGraph,
    node_map: Optional[NodeMap] = None,
    *,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
    residual_attr: str = "residual",
) -> "nx.DiGraph":
    """Export the real input edges of ``graph`` as a NetworkX ``DiGraph``.

    Each edge carries its original capacity, current residual capacity and
    realized flow, so a solved graph can be inspected with NetworkX tools.

    Args:
        graph: Residual graph, solved or not.
        node_map: Restores original node names; ids are used when None.
        capacity_attr: Attribute name for the original capacity.
        flow_attr: Attribute name for the realized flow.
        residual_attr: Attribute name for the residual capacity.
    """
    import networkx as nx

    def name(idx: int) -> Hashable:
        return node_map.label(idx) if node_map is not None else idx

    G = nx.DiGraph()
    G.add_nodes_from(name(i) for i in graph.nodes())
    for e in graph.edges():
        G.add_edge(
            name(e.u),
            name(e.v),
            **{
                capacity_attr: e.original_capacity,
                residual_attr: e.residual_capacity,
                flow_attr: edge_flow(graph, e.u, e.v),
            },
        )
    return G
