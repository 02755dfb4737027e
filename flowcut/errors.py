"""Exception types raised by flowcut.

Two failure classes exist. ``InvariantViolation`` marks a programming error
(bad capacities, node ids out of range, ``source == sink``, a residual
driven negative); it aborts the computation. ``UnsaturatedGraphError`` marks
a caller asking for a minimum cut while an augmenting path still exists.
"""

from __future__ import annotations


class FlowError(Exception):
    """Base class for all flowcut errors."""


class InvariantViolation(FlowError, ValueError):
    """A structural invariant of the residual graph or its inputs was broken."""


class UnsaturatedGraphError(FlowError, RuntimeError):
    """The residual graph still has an augmenting path from source to sink."""

    def __init__(self, source: int, sink: int) -> None:
        super().__init__(
            f"Residual graph still has an augmenting path from {source} to {sink}; "
            "run calc_max_flow before extracting the minimum cut."
        )
        self.source = source
        self.sink = sink
