"""Immutable graph store for genealogical descent.

Nodes live in an arena: a list indexed by person id, with ``None`` in the
slots of ids that have no person. Edges are stored twice, as the child's
parents and as the parent's children, and the two views are built together
so they cannot drift apart.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import MalformedInputError, UnknownIdError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


@dataclass(frozen=True)
class PersonNode:
    """A single individual in the genealogy graph."""
    person_id: int
    name: str
    parents: tuple[int, ...] = ()
    children: tuple[int, ...] = ()


class NameIndex:
    """Read-only name -> id lookup derived from a graph's node table."""

    def __init__(self, entries: Iterable[tuple[str, int]]) -> None:
        by_name: dict[str, list[int]] = {}
        for name, person_id in entries:
            by_name.setdefault(name.strip(), []).append(person_id)
        self._by_name = {name: tuple(ids) for name, ids in by_name.items()}

    def resolve(self, name: str) -> int | None:
        """Return the id registered last under ``name``, or None."""
        ids = self._by_name.get(name.strip())
        return ids[-1] if ids else None

    def ids_for(self, name: str) -> tuple[int, ...]:
        """Return every id sharing ``name``, in id order."""
        return self._by_name.get(name.strip(), ())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)


class GenealogyGraph:
    """Densely indexed parent/child graph, never mutated after construction.

    Example:
        >>> graph = GenealogyGraph.from_table({1: "A", 2: "B"}, [(1, 2)])
        >>> graph.parents_of(2)
        (1,)
    """

    def __init__(self, arena: list[PersonNode | None], edge_count: int) -> None:
        self._arena = arena
        self._edge_count = edge_count
        self._node_count = len(arena) - arena.count(None)
        self.names = NameIndex((node.name, node.person_id) for node in filter(None, arena))

    @classmethod
    def from_table(
        cls,
        nodes: Mapping[int, str | None],
        edges: Iterable[tuple[int, int]],
    ) -> GenealogyGraph:
        """Build a graph from a node table and a parent -> child edge list.

        Args:
            nodes: Person id -> display name. ``None`` or empty names mean
                "no person at this id" and create no node.
            edges: ``(source, target)`` pairs, source being a parent of target.
                Duplicates collapse into one stored edge.

        Raises:
            MalformedInputError: on a negative id, or an edge whose endpoint
                has no node.
        """
        names: dict[int, str] = {}
        for person_id, name in nodes.items():
            if person_id < 0:
                raise MalformedInputError(f"Negative person id {person_id}")
            if name:
                names[person_id] = name

        capacity = max(names) + 1 if names else 0
        # Keyed by person so gaps in the id space cost nothing
        parents: dict[int, dict[int, None]] = {person_id: {} for person_id in names}
        children: dict[int, dict[int, None]] = {person_id: {} for person_id in names}

        edge_count = 0
        for source, target in edges:
            for endpoint in (source, target):
                if endpoint not in names:
                    raise MalformedInputError(
                        f"Edge ({source}, {target}) references unknown id {endpoint}",
                        edge=(source, target),
                    )
            if source in parents[target]:
                continue
            parents[target][source] = None
            children[source][target] = None
            edge_count += 1

        arena: list[PersonNode | None] = [None] * capacity
        for person_id, name in names.items():
            arena[person_id] = PersonNode(
                person_id=person_id,
                name=name,
                parents=tuple(parents[person_id]),
                children=tuple(children[person_id]),
            )

        return cls(arena, edge_count)

    @property
    def capacity(self) -> int:
        """Length of the id arena (largest id + 1)."""
        return len(self._arena)

    def node_count(self) -> int:
        return self._node_count

    def edge_count(self) -> int:
        return self._edge_count

    def exists(self, person_id: int) -> bool:
        return 0 <= person_id < len(self._arena) and self._arena[person_id] is not None

    def get(self, person_id: int) -> PersonNode | None:
        if 0 <= person_id < len(self._arena):
            return self._arena[person_id]
        return None

    def require(self, person_id: int) -> PersonNode:
        """Return the node for ``person_id`` or raise UnknownIdError."""
        node = self.get(person_id)
        if node is None:
            raise UnknownIdError(person_id)
        return node

    def name(self, person_id: int) -> str | None:
        node = self.get(person_id)
        return node.name if node else None

    def parents_of(self, person_id: int) -> tuple[int, ...]:
        return self.require(person_id).parents

    def children_of(self, person_id: int) -> tuple[int, ...]:
        return self.require(person_id).children

    def ids(self) -> Iterator[int]:
        """Iterate over every id that holds a person, ascending."""
        return (node.person_id for node in self._arena if node is not None)


def build_graph(
    nodes: Mapping[int, str | None],
    edges: Iterable[tuple[int, int]],
) -> GenealogyGraph:
    """Build a GenealogyGraph; see ``GenealogyGraph.from_table``."""
    return GenealogyGraph.from_table(nodes, edges)


class GraphHandle:
    """Shared reference to the current graph.

    Readers take ``current`` once per query and keep that snapshot; a reload
    builds a new graph and swaps it in with ``replace``.
    """

    def __init__(self, graph: GenealogyGraph) -> None:
        self._graph = graph
        self._lock = threading.Lock()

    @property
    def current(self) -> GenealogyGraph:
        return self._graph

    def replace(self, graph: GenealogyGraph) -> GenealogyGraph:
        """Swap in ``graph`` and return the previous one."""
        with self._lock:
            previous, self._graph = self._graph, graph
        return previous
