"""Nearest common ancestor search.

Two breadth-first frontiers climb parent edges from each person in lockstep,
one generation per round. Each side records the generation distance of every
ancestor it reaches; an ancestor reached by both sides is a candidate, scored
by its combined distance.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .store import GenealogyGraph

Edge = tuple[int, int]

_ORDINALS = {1: "first", 2: "second", 3: "third", 4: "fourth", 5: "fifth"}
_REMOVALS = {1: "once", 2: "twice"}


@dataclass
class KinshipResult:
    """How two people are related through their nearest common ancestor."""
    person_a: int
    person_b: int
    common_ancestor: int
    generations_a: int  # parent edges from person_a up to the ancestor
    generations_b: int
    relationship: str  # what person_a is to person_b

    @property
    def degree_of_relationship(self) -> int:
        """Number of parent/child links separating the two people."""
        return self.generations_a + self.generations_b


def _climb(graph: GenealogyGraph, frontier: list[int], reached: dict[int, int], depth: int) -> list[int]:
    """Expand ``frontier`` by one generation, recording new ancestors."""
    next_frontier = []
    for person_id in frontier:
        for parent in graph.parents_of(person_id):
            if parent not in reached:
                reached[parent] = depth
                next_frontier.append(parent)
    return next_frontier


def _best_meeting(
    new: list[int],
    reached: dict[int, int],
    other: dict[int, int],
    best: int | None,
) -> int | None:
    for person_id in new:
        if person_id in other:
            total = reached[person_id] + other[person_id]
            if best is None or total < best:
                best = total
    return best


def _nearest(graph: GenealogyGraph, a: int, b: int) -> tuple[list[int], dict[int, int], dict[int, int]]:
    """Return the tied nearest common ancestors and both distance maps.

    Rounds continue while a deeper generation could still yield a candidate
    whose combined distance ties or beats the best one seen, so every tied
    ancestor is present in both maps with its exact distance.
    """
    if not (graph.exists(a) and graph.exists(b)):
        return [], {}, {}

    reached_a = {a: 0}
    reached_b = {b: 0}
    frontier_a = [a]
    frontier_b = [b]
    best = 0 if a == b else None
    depth = 0

    while (frontier_a or frontier_b) and (best is None or depth < best):
        depth += 1
        frontier_a = _climb(graph, frontier_a, reached_a, depth)
        best = _best_meeting(frontier_a, reached_a, reached_b, best)
        frontier_b = _climb(graph, frontier_b, reached_b, depth)
        best = _best_meeting(frontier_b, reached_b, reached_a, best)

    if best is None:
        return [], reached_a, reached_b

    # Iterating reached_a keeps side-a discovery order among exact ties
    common = [
        person_id for person_id, dist in reached_a.items()
        if person_id in reached_b and dist + reached_b[person_id] == best
    ]
    common.sort(key=lambda person_id: (reached_a[person_id], reached_b[person_id]))
    return common, reached_a, reached_b


def closest_ancestors(graph: GenealogyGraph, a: int, b: int) -> list[int]:
    """All common ancestors at the minimal combined distance, best first.

    Full siblings get both parents back. Unknown ids and disjoint lineages
    give an empty list.
    """
    return _nearest(graph, a, b)[0]


def closest_ancestor(graph: GenealogyGraph, a: int, b: int) -> int | None:
    """The nearest common ancestor of ``a`` and ``b``, or None.

    A person is their own zero-distance ancestor, so
    ``closest_ancestor(graph, a, a) == a``.
    """
    common = closest_ancestors(graph, a, b)
    return common[0] if common else None


def _chain_edges(
    graph: GenealogyGraph,
    ancestor: int,
    reached: dict[int, int],
    edges: list[Edge],
    seen: set[Edge],
) -> None:
    # Walk back down from the ancestor along edges that lose exactly one
    # generation each step; those are the shortest chains to the start.
    expanded = {ancestor}
    queue = deque([ancestor])
    while queue:
        person_id = queue.popleft()
        depth = reached[person_id]
        for child in graph.children_of(person_id):
            if reached.get(child) != depth - 1:
                continue
            edge = (person_id, child)
            if edge not in seen:
                seen.add(edge)
                edges.append(edge)
            if child not in expanded:
                expanded.add(child)
                queue.append(child)


def common_ancestry_graph(graph: GenealogyGraph, a: int, b: int) -> list[Edge]:
    """Edges (parent, child) joining ``a`` and ``b`` to their nearest common ancestor(s).

    The result is the union of both people's shortest parent chains up to
    each tied ancestor. No common ancestor means nothing to draw: an empty
    list.
    """
    return _joining_edges(graph, *_nearest(graph, a, b))


def _joining_edges(
    graph: GenealogyGraph,
    common: list[int],
    reached_a: dict[int, int],
    reached_b: dict[int, int],
) -> list[Edge]:
    edges: list[Edge] = []
    seen: set[Edge] = set()
    for reached in (reached_a, reached_b):
        for ancestor in common:
            _chain_edges(graph, ancestor, reached, edges, seen)
    return edges


def _ordinal(n: int) -> str:
    if n in _ORDINALS:
        return _ORDINALS[n]
    if 10 <= n % 100 <= 20:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _greats(n: int) -> str:
    return "great-" * n


def relationship_label(generations_a: int, generations_b: int) -> str:
    """Name what person A is to person B, given each one's distance to their common ancestor.

    Uses standard genealogical terminology.
    """
    if generations_a == 0 and generations_b == 0:
        return "self"
    if generations_a == 0:
        # A is the common ancestor
        if generations_b == 1:
            return "parent"
        return f"{_greats(generations_b - 2)}grandparent"
    if generations_b == 0:
        if generations_a == 1:
            return "child"
        return f"{_greats(generations_a - 2)}grandchild"
    if generations_a == 1 and generations_b == 1:
        return "sibling"
    if generations_a == 1:
        return f"{_greats(generations_b - 2)}uncle/aunt"
    if generations_b == 1:
        return f"{_greats(generations_a - 2)}nephew/niece"

    base = f"{_ordinal(min(generations_a, generations_b) - 1)} cousin"
    removal = abs(generations_a - generations_b)
    if removal == 0:
        return base
    return f"{base} {_REMOVALS.get(removal, f'{removal} times')} removed"


def kinship(graph: GenealogyGraph, a: int, b: int) -> KinshipResult | None:
    """Relationship between ``a`` and ``b`` via their nearest common ancestor."""
    return _kinship(a, b, *_nearest(graph, a, b))


def _kinship(
    a: int,
    b: int,
    common: list[int],
    reached_a: dict[int, int],
    reached_b: dict[int, int],
) -> KinshipResult | None:
    if not common:
        return None

    ancestor = common[0]
    generations_a = reached_a[ancestor]
    generations_b = reached_b[ancestor]
    return KinshipResult(
        person_a=a,
        person_b=b,
        common_ancestor=ancestor,
        generations_a=generations_a,
        generations_b=generations_b,
        relationship=relationship_label(generations_a, generations_b),
    )


@dataclass
class CommonAncestry:
    """Everything a common-ancestor view needs, from a single search."""
    ancestors: list[int]
    kinship: KinshipResult | None
    edges: list[Edge]


def common_ancestry(graph: GenealogyGraph, a: int, b: int) -> CommonAncestry:
    """Tied nearest ancestors, kinship and joining edges of ``a`` and ``b``.

    Equivalent to calling ``closest_ancestors``, ``kinship`` and
    ``common_ancestry_graph`` but runs the dual-frontier search once.
    """
    common, reached_a, reached_b = _nearest(graph, a, b)
    return CommonAncestry(
        ancestors=common,
        kinship=_kinship(a, b, common, reached_a, reached_b),
        edges=_joining_edges(graph, common, reached_a, reached_b),
    )
