"""Rendering of max-flow results.

Everything here reads a solved ``ResidualGraph`` and a ``MaxFlowResult``;
nothing computes flow. Node labels are optional: pass a sequence indexed by
node id or a mapping, and ids without a label print as integers.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Mapping, Optional, Sequence, Union

import pandas as pd

from flowcut.config import FLOW_CONFIG, FlowConfig
from flowcut.lib.algorithms.max_flow import edge_flow
from flowcut.lib.algorithms.types import MinCut
from flowcut.lib.residual import NodeID, ResidualGraph
from flowcut.solver import MaxFlowResult

Labels = Union[Sequence[Hashable], Mapping[int, Hashable], None]


def node_label(node: NodeID, labels: Labels = None) -> str:
    """Return the display label of ``node``."""
    if labels is None:
        return str(node)
    if isinstance(labels, Mapping):
        return str(labels.get(node, node))
    if 0 <= node < len(labels):
        return str(labels[node])
    return str(node)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int) -> str:
    """Format rows as a plain ASCII table."""
    col_widths = [
        max([len(h)] + [len(r[i]) for r in rows] + [min_width])
        for i, h in enumerate(headers)
    ]

    def format_row(cells: List[str]) -> str:
        return "   " + " | ".join(
            f"{cell:<{col_widths[i]}}" for i, cell in enumerate(cells)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * w for w in col_widths))
    lines.extend(format_row(r) for r in rows)
    return "\n".join(lines)


def format_edge_flows(
    graph: ResidualGraph,
    labels: Labels = None,
    *,
    config: Optional[FlowConfig] = None,
) -> str:
    """Text table of flow and capacity for every real input edge."""
    cfg = config or FLOW_CONFIG
    rows: List[List[str]] = []
    for e in graph.edges():
        flow = edge_flow(graph, e.u, e.v)
        if flow == 0 and not cfg.show_zero_flow:
            continue
        name = (
            f"{cfg.clip_label(node_label(e.u, labels))}->"
            f"{cfg.clip_label(node_label(e.v, labels))}"
        )
        rows.append([name, str(flow), str(e.original_capacity)])
    if not rows:
        return "   (no edges)"
    return _format_table(["edge", "flow", "capacity"], rows, cfg.table_min_width)


def format_min_cut(cut: MinCut, labels: Labels = None) -> str:
    """Two lines naming the source-side and sink-side nodes, then the value."""
    s_side = " ".join(node_label(n, labels) for n in cut.source_side)
    t_side = " ".join(node_label(n, labels) for n in cut.sink_side)
    return "\n".join(
        [
            f"Source side: {s_side}",
            f"Sink side: {t_side}",
            f"Cut value: {cut.value}",
        ]
    )


def render_report(
    result: MaxFlowResult,
    graph: ResidualGraph,
    labels: Labels = None,
    *,
    config: Optional[FlowConfig] = None,
) -> str:
    """Full plain-text report: flow value, edge table and minimum cut."""
    src = node_label(result.source, labels)
    dst = node_label(result.sink, labels)
    return "\n".join(
        [
            f"Max flow {src} -> {dst}: {result.total_flow}",
            "",
            "Flow per edge:",
            format_edge_flows(graph, labels, config=config),
            "",
            "Minimum s-t cut:",
            format_min_cut(result.min_cut, labels),
        ]
    )


def edge_flow_frame(graph: ResidualGraph, labels: Labels = None) -> pd.DataFrame:
    """Per-edge flow as a DataFrame.

    Columns: ``source``, ``target``, ``capacity``, ``flow``, ``residual``,
    ``saturated``; one row per real input edge in insertion order.
    """
    records = [
        {
            "source": node_label(e.u, labels),
            "target": node_label(e.v, labels),
            "capacity": e.original_capacity,
            "flow": edge_flow(graph, e.u, e.v),
            "residual": e.residual_capacity,
            "saturated": e.saturated,
        }
        for e in graph.edges()
    ]
    columns = ["source", "target", "capacity", "flow", "residual", "saturated"]
    return pd.DataFrame.from_records(records, columns=columns)


def result_to_dict(result: MaxFlowResult, labels: Labels = None) -> Dict[str, Any]:
    """JSON-serialisable view of ``result``."""
    return {
        "source": node_label(result.source, labels),
        "sink": node_label(result.sink, labels),
        "max_flow": result.total_flow,
        "edges": [
            {
                "source": node_label(u, labels),
                "target": node_label(v, labels),
                "flow": flow,
            }
            for (u, v), flow in result.edge_flow.items()
        ],
        "min_cut": {
            "source_side": [node_label(n, labels) for n in result.min_cut.source_side],
            "sink_side": [node_label(n, labels) for n in result.min_cut.sink_side],
            "edges": [
                [node_label(u, labels), node_label(v, labels)]
                for u, v in result.min_cut.cut_edges
            ],
            "value": result.min_cut.value,
        },
        "augmentations": [
            {
                "path": [node_label(n, labels) for n in step.path],
                "bottleneck": step.bottleneck,
            }
            for step in result.augmentations
        ],
    }
