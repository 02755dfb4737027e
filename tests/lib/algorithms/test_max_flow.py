import logging

import pytest

from flowcut.config import FlowConfig
from flowcut.errors import InvariantViolation
from flowcut.lib.algorithms.max_flow import (
    calc_max_flow,
    edge_flow,
    edge_flows,
    saturated_edges,
)
from flowcut.lib.algorithms.types import AugmentationStep
from flowcut.lib.builder import build_residual_graph
from flowcut.lib.residual import MAX_CAPACITY, ResidualGraph


class TestMaxFlowBasic:
    def test_textbook_network(self, textbook):
        assert calc_max_flow(textbook, 0, 5) == 19

    def test_textbook_edge_flows(self, textbook):
        calc_max_flow(textbook, 0, 5)
        assert edge_flows(textbook) == {
            (0, 1): 4,  # s->w
            (0, 2): 7,  # s->x
            (0, 3): 8,  # s->z
            (1, 4): 0,  # w->y
            (1, 5): 6,  # w->t
            (2, 1): 2,  # x->w
            (2, 3): 0,  # x->z
            (2, 4): 5,  # x->y
            (3, 4): 2,  # z->y
            (3, 5): 6,  # z->t
            (4, 5): 7,  # y->t
        }

    def test_textbook_augmenting_paths(self, textbook):
        flow, summary = calc_max_flow(textbook, 0, 5, return_summary=True)
        assert flow == summary.total_flow == 19
        assert summary.augmentations == (
            AugmentationStep((0, 1, 5), 4),
            AugmentationStep((0, 3, 5), 6),
            AugmentationStep((0, 2, 1, 5), 2),
            AugmentationStep((0, 2, 4, 5), 5),
            AugmentationStep((0, 3, 4, 5), 2),
        )
        assert summary.num_augmentations == 5
        assert summary.residual_cap[(0, 3)] == 2

    def test_line(self, line3):
        assert calc_max_flow(line3, 0, 2) == 3
        assert edge_flow(line3, 0, 1) == 3
        assert line3.residual_capacity(1, 0) == 3

    def test_diamond(self, diamond):
        assert calc_max_flow(diamond, 0, 3) == 5
        assert saturated_edges(diamond) == [(0, 1), (0, 2), (1, 2), (1, 3), (2, 3)]

    def test_flow_cancelled_through_back_edge(self, back_edge):
        flow, summary = calc_max_flow(back_edge, 0, 5, return_summary=True)
        assert flow == 2
        assert summary.augmentations[1].path == (0, 3, 2, 1, 4, 5)
        # a->b carried flow after the first path and was cancelled by the second
        assert edge_flow(back_edge, 1, 2) == 0
        assert edge_flow(back_edge, 3, 2) == 1
        assert edge_flow(back_edge, 1, 4) == 1

    def test_reverse_direction_flow(self, line3):
        assert calc_max_flow(line3, 2, 0) == 0

    def test_single_edge_bottleneck_is_edge_residual(self):
        g = build_residual_graph(2, [(0, 1, MAX_CAPACITY)])
        assert calc_max_flow(g, 0, 1) == MAX_CAPACITY
        assert g.residual_capacity(1, 0) == MAX_CAPACITY

    def test_opposite_edges_at_capacity_budget_augment_without_overflow(self):
        g = build_residual_graph(
            3, [(0, 1, MAX_CAPACITY - 5), (1, 0, 5), (1, 2, 5)]
        )
        assert calc_max_flow(g, 0, 2) == 5
        assert g.residual_capacity(1, 0) == 10
        assert edge_flow(g, 0, 1) == 5
        assert edge_flow(g, 1, 0) == 0


class TestMaxFlowDegenerate:
    def test_no_edges(self):
        assert calc_max_flow(ResidualGraph(2), 0, 1) == 0

    def test_disconnected(self, disconnected):
        assert calc_max_flow(disconnected, 0, 3) == 0
        assert edge_flows(disconnected) == {(0, 1): 0, (2, 3): 0}

    def test_zero_capacity_edges(self):
        g = build_residual_graph(2, [(0, 1, 0)])
        assert calc_max_flow(g, 0, 1) == 0
        assert saturated_edges(g) == []


class TestMaxFlowRepeatedCalls:
    def test_second_call_on_saturated_graph_adds_nothing(self, textbook):
        assert calc_max_flow(textbook, 0, 5) == 19
        assert calc_max_flow(textbook, 0, 5) == 0

    def test_reset_allows_resolving(self, textbook):
        calc_max_flow(textbook, 0, 5)
        textbook.reset()
        assert calc_max_flow(textbook, 0, 5) == 19

    def test_adding_edge_to_solved_graph_rejected(self, line3):
        assert calc_max_flow(line3, 0, 2) == 3
        with pytest.raises(InvariantViolation, match="after flow"):
            line3.set_capacity(1, 0, 4)
        assert line3.residual_capacity(1, 0) == 3

    def test_deterministic_across_copies(self, textbook):
        a = textbook.copy()
        b = textbook.copy()
        _, sa = calc_max_flow(a, 0, 5, return_summary=True)
        _, sb = calc_max_flow(b, 0, 5, return_summary=True)
        assert sa == sb


class TestAntiparallelEdges:
    def test_net_flow_reported_on_forward_edge(self, antiparallel):
        assert calc_max_flow(antiparallel, 0, 2) == 4
        assert edge_flow(antiparallel, 0, 1) == 4
        assert edge_flow(antiparallel, 1, 0) == 0
        assert edge_flow(antiparallel, 1, 2) == 4

    def test_reverse_capacity_usable_in_other_direction(self, antiparallel):
        # Solving 1 -> 0 on a fresh graph uses the real edge 1 -> 0
        assert calc_max_flow(antiparallel, 1, 0) == 3
        assert edge_flow(antiparallel, 1, 0) == 3
        assert edge_flow(antiparallel, 0, 1) == 0


class TestValidation:
    def test_source_equals_sink(self, line3):
        with pytest.raises(InvariantViolation, match="differ"):
            calc_max_flow(line3, 1, 1)

    @pytest.mark.parametrize("src, dst", [(-1, 2), (0, 3), (0.0, 2), ("0", 2)])
    def test_invalid_terminals(self, line3, src, dst):
        with pytest.raises(InvariantViolation):
            calc_max_flow(line3, src, dst)

    def test_validation_failure_leaves_graph_untouched(self, line3):
        with pytest.raises(InvariantViolation):
            calc_max_flow(line3, 0, 0)
        assert line3.residual_capacity(0, 1) == 5

    def test_edge_flow_on_non_edge_is_zero(self, line3):
        calc_max_flow(line3, 0, 2)
        # (1, 0) holds pushed-back residual but is not an input edge
        assert edge_flow(line3, 1, 0) == 0
        assert edge_flow(line3, 0, 2) == 0

    def test_edge_flow_out_of_range(self, line3):
        with pytest.raises(InvariantViolation):
            edge_flow(line3, 0, 9)


class TestLogging:
    def test_paths_logged_at_debug(self, textbook, caplog):
        with caplog.at_level(logging.DEBUG, logger="flowcut"):
            calc_max_flow(textbook, 0, 5)
        messages = [r.getMessage() for r in caplog.records]
        assert any("Augmenting path (0, 1, 5) with bottleneck 4" in m for m in messages)
        assert any("Max flow 0->5: 19 after 5 augmentations" in m for m in messages)

    def test_path_logging_can_be_disabled(self, textbook, caplog):
        with caplog.at_level(logging.DEBUG, logger="flowcut"):
            calc_max_flow(textbook, 0, 5, config=FlowConfig(log_paths=False))
        messages = [r.getMessage() for r in caplog.records]
        assert not any("Augmenting path" in m for m in messages)
        assert any("Max flow 0->5: 19" in m for m in messages)
