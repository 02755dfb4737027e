from __future__ import annotations

from flowcut.lib.residual import MAX_CAPACITY

#: Parent id of a node that has not been reached by the current search.
NO_PARENT = -1

#: Seed for the bottleneck walk; any real residual is at most this value.
BOTTLENECK_SEED = MAX_CAPACITY
