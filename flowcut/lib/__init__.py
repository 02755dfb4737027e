"""Graph structures and adapters for flowcut.

``residual`` holds the residual capacity table, ``builder`` and ``nx``
construct it from edge lists and NetworkX graphs, and ``algorithms`` runs
max-flow and min-cut over it.
"""

from flowcut.lib.builder import build_residual_graph
from flowcut.lib.residual import MAX_CAPACITY, ResidualEdge, ResidualGraph

__all__ = [
    "MAX_CAPACITY",
    "ResidualEdge",
    "ResidualGraph",
    "build_residual_graph",
]
