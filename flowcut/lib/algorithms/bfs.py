from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

import numpy as np

from flowcut.lib.algorithms.types import AugmentingPath
from flowcut.lib.residual import NodeID, ResidualGraph


def bfs(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    path: Optional[AugmentingPath] = None,
    reachable: Optional[List[NodeID]] = None,
    unreachable: Optional[List[NodeID]] = None,
) -> bool:
    """Breadth-first search over edges with positive residual capacity.

    Each node is settled with the parent it is first discovered from, so the
    parent chain to any node is a shortest path in edge count. Neighbors are
    scanned in ascending id order, which makes the search deterministic.

    Args:
        graph: Residual graph to traverse. It is only read.
        src_node: Node to start from.
        dst_node: Node whose reachability is reported.
        path: Optional parent-pointer buffer; ``parent[v] = u`` is recorded
            when ``v`` is discovered from ``u``.
        reachable: Optional list; receives every visited node id.
        unreachable: Optional list; receives every unvisited node id. Both
            partition lists must be given together.

    Returns:
        True if ``dst_node`` was visited.

    Raises:
        ValueError: If only one of ``reachable``/``unreachable`` is given.
    """
    if (reachable is None) != (unreachable is None):
        raise ValueError("reachable and unreachable must be passed together")

    visited = np.zeros(graph.num_nodes, dtype=bool)
    visited[src_node] = True
    queue: Deque[NodeID] = deque([src_node])

    while queue:
        node = queue.popleft()
        row = graph.residual_row(node)
        for neighbor in np.flatnonzero((row > 0) & ~visited).tolist():
            visited[neighbor] = True
            if path is not None:
                path.set_parent(neighbor, node)
            queue.append(neighbor)

    if reachable is not None and unreachable is not None:
        for node_id, seen in enumerate(visited.tolist()):
            (reachable if seen else unreachable).append(node_id)

    return bool(visited[dst_node])
