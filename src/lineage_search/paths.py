"""Shortest relationship paths over the undirected view of the graph.

A person's neighbours are their parents followed by their children, read
straight from the store; no second adjacency structure is kept.
"""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .store import GenealogyGraph

Edge = tuple[int, int]


def neighbors(graph: GenealogyGraph, person_id: int) -> tuple[int, ...]:
    """Parents then children of ``person_id``."""
    node = graph.require(person_id)
    return node.parents + node.children


def shortest_path(graph: GenealogyGraph, start: int, end: int) -> list[int] | None:
    """One shortest sequence of ids from ``start`` to ``end``, both included.

    Among equally short paths the one through the first-discovered neighbour
    wins, so the result is deterministic for a given graph.

    Returns:
        The path, ``[start]`` when ``start == end``, or None when the two
        people are not connected.

    Raises:
        UnknownIdError: if either id has no person.
    """
    graph.require(start)
    graph.require(end)
    if start == end:
        return [start]

    # previous[x] is the node x was discovered from; -1 marks undiscovered
    previous = [-1] * graph.capacity
    previous[start] = start
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in neighbors(graph, current):
            if previous[neighbor] != -1:
                continue
            previous[neighbor] = current
            if neighbor == end:
                return _unwind(previous, start, end)
            queue.append(neighbor)

    return None


def _unwind(previous: list[int], start: int, end: int) -> list[int]:
    path = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def path_edges(graph: GenealogyGraph, path: list[int]) -> list[Edge]:
    """Turn a node path into stored (parent, child) edges for rendering."""
    edges = []
    for left, right in zip(path, path[1:]):
        if left in graph.parents_of(right):
            edges.append((left, right))
        else:
            edges.append((right, left))
    return edges
