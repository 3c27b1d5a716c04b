"""Ancestor and descendant walks over parent/child edges.

Every walk is breadth-first and expands each person at most once, so
pedigree collapse (one ancestor reachable through several lineages) costs
nothing extra and the walk always terminates.
"""
from __future__ import annotations

from collections import deque
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .store import GenealogyGraph, PersonNode

Edge = tuple[int, int]


class TraversalDirection(str, Enum):
    """Direction for pedigree traversal."""
    ANCESTORS = "ancestors"  # Follow parent edges
    DESCENDANTS = "descendants"  # Follow child edges


def walk(
    graph: GenealogyGraph,
    person_id: int,
    direction: TraversalDirection = TraversalDirection.ANCESTORS,
) -> Iterator[PersonNode]:
    """Yield every person reachable from ``person_id``, start included.

    Nodes are yielded as they are dequeued, so a consumer that stops early
    stops the traversal too.

    Raises:
        UnknownIdError: if ``person_id`` has no person.
    """
    start = graph.require(person_id)
    visited = bytearray(graph.capacity)
    visited[person_id] = 1
    queue: deque[PersonNode] = deque([start])

    while queue:
        node = queue.popleft()
        yield node

        step = node.parents if direction is TraversalDirection.ANCESTORS else node.children
        for next_id in step:
            if not visited[next_id]:
                visited[next_id] = 1
                queue.append(graph.require(next_id))


def ancestry_graph(graph: GenealogyGraph, person_id: int, parents_only: bool = False) -> list[Edge]:
    """Edges (parent, child) of the ancestry subgraph of ``person_id``.

    Args:
        graph: Graph to search
        person_id: Person whose ancestry is wanted
        parents_only: Stop at the direct parents instead of the full closure

    Raises:
        UnknownIdError: if ``person_id`` has no person.
    """
    if parents_only:
        return [(parent, person_id) for parent in graph.parents_of(person_id)]

    return [
        (parent, node.person_id)
        for node in walk(graph, person_id, TraversalDirection.ANCESTORS)
        for parent in node.parents
    ]


def descendancy_graph(graph: GenealogyGraph, person_id: int, children_only: bool = False) -> list[Edge]:
    """Edges (parent, child) of the descendant subgraph of ``person_id``."""
    if children_only:
        return [(person_id, child) for child in graph.children_of(person_id)]

    return [
        (node.person_id, child)
        for node in walk(graph, person_id, TraversalDirection.DESCENDANTS)
        for child in node.children
    ]


def visited_count(
    graph: GenealogyGraph,
    person_id: int,
    direction: TraversalDirection = TraversalDirection.ANCESTORS,
) -> int:
    """Number of people a full walk visits, ``person_id`` included."""
    return sum(1 for _ in walk(graph, person_id, direction))


def descendants_count_exceeds(
    graph: GenealogyGraph,
    person_id: int,
    threshold: int,
    direction: TraversalDirection = TraversalDirection.ANCESTORS,
) -> bool:
    """Whether a walk from ``person_id`` visits more than ``threshold`` people.

    Returns as soon as the count passes the threshold. The default direction
    is ancestors, matching ``ancestry_graph``, which this probe gates; pass
    ``TraversalDirection.DESCENDANTS`` when bounding ``descendancy_graph``.
    """
    count = 0
    for _ in walk(graph, person_id, direction):
        count += 1
        if count > threshold:
            return True
    return False
