"""Sample networks.

``textbook_network`` is the six-node network s, w, x, z, y, t used across
the docs, the CLI ``demo`` command and the tests.
"""

from __future__ import annotations

from typing import List, Tuple

from flowcut.lib.builder import EdgeSpec

TEXTBOOK_LABELS: Tuple[str, ...] = ("s", "w", "x", "z", "y", "t")


def textbook_network() -> Tuple[List[EdgeSpec], Tuple[str, ...], int, int]:
    """Return ``(edges, labels, source, sink)`` for the six-node network.

    Capacity:

        s->w 4   s->x 7   s->z 10
        w->y 2   w->t 10
        x->w 2   x->z 2   x->y 10
        z->y 2   z->t 6
        y->t 7
    """
    s, w, x, z, y, t = range(6)
    edges: List[EdgeSpec] = [
        (s, w, 4),
        (s, x, 7),
        (s, z, 10),
        (w, y, 2),
        (w, t, 10),
        (x, w, 2),
        (x, z, 2),
        (x, y, 10),
        (z, y, 2),
        (z, t, 6),
        (y, t, 7),
    ]
    return edges, TEXTBOOK_LABELS, s, t
