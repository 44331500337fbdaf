"""Iterative PageRank over a directed graph."""

from __future__ import annotations

from typing import List

from frontier.graph import Graph

DEFAULT_DAMPING = 0.3
DEFAULT_CONVERGENCE = 1e-7


def page_rank(graph: Graph, damping: float = DEFAULT_DAMPING, convergence: float = DEFAULT_CONVERGENCE) -> List[float]:
    """Per-vertex PageRank scores, iterated until the total change drops below ``convergence``.

    Scores of vertices without outgoing edges are spread evenly over the graph.
    """
    num_nodes = graph.num_nodes
    if num_nodes == 0:
        return []

    out_degree = [graph.outgoing_size(v) for v in range(num_nodes)]
    dangling = [v for v, degree in enumerate(out_degree) if degree == 0]
    base = (1.0 - damping) / num_nodes
    solution = [1.0 / num_nodes] * num_nodes

    while True:
        share = [
            solution[u] / out_degree[u] if out_degree[u] else 0.0
            for u in range(num_nodes)
        ]
        leaked = sum(damping * solution[v] / num_nodes for v in dangling)
        updated = [
            sum(share[u] for u in graph.incoming(v)) * damping + base + leaked
            for v in range(num_nodes)
        ]
        diff = sum(abs(new - old) for new, old in zip(updated, solution))
        solution = updated
        if diff < convergence:
            return solution