"""
Graph inspection helpers.
Summaries of the structure recorded on a Tape, returned as data.
"""

import numpy as np
from typing import Dict
from collections import Counter


def get_graph_stats(tape) -> Dict:
    """
    Collect statistics of the computation graph on `tape`.

    Only live slots count as edges: a slot that points back at its own node
    (leaves, the unused half of unary nodes) is not an edge.

    Returns:
        dict with node/edge/leaf counts, fan-in/fan-out max and mean,
        and the per-op_tag node counts
    """
    nodes = tape.nodes
    if not nodes:
        return {
            'nodes': 0,
            'edges': 0,
            'leaves': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    n_nodes = len(nodes)

    # fan-in
    fan_ins = [0] * n_nodes
    # fan-out
    fan_outs = [0] * n_nodes
    for i, node in enumerate(nodes):
        for parent in node.parents:
            if parent != i:
                fan_ins[i] += 1
                fan_outs[parent] += 1

    n_edges = sum(fan_ins)

    # operation types
    op_counter = Counter(node.op_tag for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': op_counter.get('leaf', 0),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def analyze_graph_complexity(tape) -> str:
    """
    Analyze the graph on `tape` and return a text report.
    """
    stats = get_graph_stats(tape)

    if stats['nodes'] == 0:
        return "Empty computation graph"

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total operations: {stats['nodes']:,}")
    report.append(f"  Inputs (leaves): {stats['leaves']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"

    report.append(f"  Complexity level: {complexity}")

    # most common operations
    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
