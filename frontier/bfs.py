"""Breadth-first search distances from node 0: top-down, bottom-up and hybrid."""

from __future__ import annotations

from typing import AbstractSet, Iterable, List, MutableSequence, Set

from frontier.graph import Graph

NOT_VISITED = -1
ROOT = 0

# Frontier-size ratios at which the hybrid search changes direction.
UP_THRESHOLD = 50
BOTTOM_THRESHOLD = 200


def _initial_distances(graph: Graph) -> List[int]:
    distances = [NOT_VISITED] * graph.num_nodes
    if distances:
        distances[ROOT] = 0
    return distances


def top_down_step(graph: Graph, frontier: Iterable[int], distances: MutableSequence[int]) -> List[int]:
    """Expand every frontier vertex along its outgoing edges.

    Unvisited neighbours get their distance set in ``distances`` and are
    returned, in discovery order, as the next frontier.
    """
    new_frontier: List[int] = []
    for node in frontier:
        next_distance = distances[node] + 1
        for target in graph.outgoing(node):
            if distances[target] == NOT_VISITED:
                distances[target] = next_distance
                new_frontier.append(target)
    return new_frontier


def bottom_up_step(graph: Graph, frontier: AbstractSet[int], distances: MutableSequence[int]) -> Set[int]:
    """Let every unvisited vertex look for a parent in ``frontier``.

    A vertex with an incoming edge from the frontier takes its distance from
    the first such parent and joins the returned next frontier.
    """
    new_frontier: Set[int] = set()
    for v in range(graph.num_nodes):
        if distances[v] != NOT_VISITED:
            continue
        parent = next((u for u in graph.incoming(v) if u in frontier), None)
        if parent is not None:
            distances[v] = distances[parent] + 1
            new_frontier.add(v)
    return new_frontier


def bfs_top_down(graph: Graph) -> List[int]:
    """Distances from node 0 computed by expanding the frontier outwards."""
    distances = _initial_distances(graph)
    frontier: List[int] = [ROOT] if distances else []
    while frontier:
        frontier = top_down_step(graph, frontier, distances)
    return distances


def bfs_bottom_up(graph: Graph) -> List[int]:
    """Distances from node 0 computed by unvisited vertices seeking parents."""
    distances = _initial_distances(graph)
    frontier: Set[int] = {ROOT} if distances else set()
    while frontier:
        frontier = bottom_up_step(graph, frontier, distances)
    return distances


def bfs_hybrid(graph: Graph) -> List[int]:
    """Distances from node 0, switching direction as the frontier grows and shrinks."""
    distances = _initial_distances(graph)
    num_nodes = graph.num_nodes
    if not distances:
        return distances

    use_top_down = True
    frontier_list: List[int] = [ROOT]
    frontier_set: Set[int] = set()
    size = 1

    while size:
        if use_top_down:
            frontier_list = top_down_step(graph, frontier_list, distances)
            size = len(frontier_list)
            if size and num_nodes // size < UP_THRESHOLD:
                use_top_down = False
                frontier_set = set(frontier_list)
        else:
            frontier_set = bottom_up_step(graph, frontier_set, distances)
            size = len(frontier_set)
            if size and num_nodes // size > BOTTOM_THRESHOLD:
                use_top_down = True
                frontier_list = sorted(frontier_set)
    return distances