import pytest

from flowcut.errors import InvariantViolation
from flowcut.lib.builder import build_residual_graph
from flowcut.lib.residual import MAX_CAPACITY
from flowcut.lib.samples import TEXTBOOK_LABELS, textbook_network


def test_build_from_triples():
    g = build_residual_graph(3, [(0, 1, 5), (1, 2, 3)])
    assert g.num_nodes == 3
    assert g.edge_pairs() == [(0, 1), (1, 2)]
    assert g.residual_capacity(0, 1) == 5
    assert g.original_capacity(1, 2) == 3


def test_build_accepts_lists_and_generators():
    g = build_residual_graph(2, ([u, v, c] for u, v, c in [(0, 1, 1)]))
    assert g.has_edge(0, 1)


def test_build_with_no_edges():
    g = build_residual_graph(4, [])
    assert g.num_edges == 0


def test_duplicate_pair_rejected():
    with pytest.raises(InvariantViolation):
        build_residual_graph(2, [(0, 1, 1), (0, 1, 2)])


@pytest.mark.parametrize(
    "edges",
    [
        [(0, 1)],
        [(0, 1, 2, 3)],
        [(0, 5, 1)],
        [(0, 1, -4)],
    ],
)
def test_malformed_edges_rejected(edges):
    with pytest.raises(InvariantViolation):
        build_residual_graph(2, edges)


def test_textbook_network_shape():
    edges, labels, source, sink = textbook_network()
    assert labels == TEXTBOOK_LABELS == ("s", "w", "x", "z", "y", "t")
    assert (source, sink) == (0, 5)
    assert len(edges) == 11
    assert (0, 3, 10) in edges
    assert (4, 5, 7) in edges
    g = build_residual_graph(len(labels), edges)
    assert g.out_capacity(source) == 21
    assert g.in_capacity(sink) == 23


def test_opposite_edges_overflowing_together_rejected():
    with pytest.raises(InvariantViolation, match="overflow together"):
        build_residual_graph(
            3, [(0, 1, MAX_CAPACITY), (1, 0, MAX_CAPACITY), (1, 2, 5)]
        )
