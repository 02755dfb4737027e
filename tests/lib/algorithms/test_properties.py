"""Randomized checks of max-flow/min-cut properties.

NetworkX serves as an independent oracle for the max-flow value.
"""

import random

import networkx as nx
import pytest

from flowcut.lib.algorithms.max_flow import calc_max_flow, edge_flow
from flowcut.lib.algorithms.min_cut import calc_min_cut
from flowcut.lib.builder import build_residual_graph


def random_network(seed: int):
    rng = random.Random(seed)
    n = rng.randint(2, 9)
    density = rng.choice([0.2, 0.4, 0.7])
    edges = [
        (u, v, rng.randint(0, 12))
        for u in range(n)
        for v in range(n)
        if u != v and rng.random() < density
    ]
    source, sink = rng.sample(range(n), 2)
    return n, edges, source, sink


def to_nx(n, edges):
    G = nx.DiGraph()
    G.add_nodes_from(range(n))
    for u, v, c in edges:
        G.add_edge(u, v, capacity=c)
    return G


SEEDS = list(range(40))


@pytest.mark.parametrize("seed", SEEDS)
def test_matches_networkx(seed):
    n, edges, s, t = random_network(seed)
    g = build_residual_graph(n, edges)
    expected = nx.maximum_flow_value(to_nx(n, edges), s, t)
    assert calc_max_flow(g, s, t) == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_flow_properties(seed):
    n, edges, s, t = random_network(seed)
    g = build_residual_graph(n, edges)
    flow = calc_max_flow(g, s, t)

    # Bounded by what leaves the source and what enters the sink
    assert flow <= g.out_capacity(s)
    assert flow <= g.in_capacity(t)

    # Capacity respect
    for u, v, cap in edges:
        assert 0 <= edge_flow(g, u, v) <= cap

    # Conservation at every inner node, and net outflow of source == flow
    net = [0] * n
    for u, v, _ in edges:
        f = edge_flow(g, u, v)
        net[u] += f
        net[v] -= f
    for node in range(n):
        if node not in (s, t):
            assert net[node] == 0
    assert net[s] == flow
    assert net[t] == -flow


@pytest.mark.parametrize("seed", SEEDS)
def test_max_flow_min_cut_duality(seed):
    n, edges, s, t = random_network(seed)
    g = build_residual_graph(n, edges)
    flow = calc_max_flow(g, s, t)
    cut = calc_min_cut(g, s, t)

    assert s in cut.source_side
    assert t in cut.sink_side
    assert sorted(cut.source_side + cut.sink_side) == list(range(n))
    crossing = sum(
        c for u, v, c in edges if u in cut.source_side and v in cut.sink_side
    )
    assert crossing == cut.value == flow
    assert calc_min_cut(g, s, t) == cut


@pytest.mark.parametrize("seed", SEEDS[:10])
def test_deterministic(seed):
    n, edges, s, t = random_network(seed)
    a = build_residual_graph(n, edges)
    b = build_residual_graph(n, edges)
    _, sa = calc_max_flow(a, s, t, return_summary=True)
    _, sb = calc_max_flow(b, s, t, return_summary=True)
    assert sa == sb
    assert sa.total_flow == sum(step.bottleneck for step in sa.augmentations)
