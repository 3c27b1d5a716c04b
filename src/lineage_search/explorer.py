"""Query service used by presentation layers.

Wraps the search functions the way a viewer uses them: names are resolved
through the store's name index, ancestry views degrade to parents only when
the full ancestry is too large to draw, and edge lists can be turned into
name pairs for a renderer.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .ancestry import Edge, TraversalDirection, ancestry_graph, descendants_count_exceeds
from .common import KinshipResult, common_ancestry
from .config import SearchConfig
from .errors import NameNotFoundError
from .logging import get_logger
from .paths import path_edges, shortest_path
from .store import GenealogyGraph, GraphHandle

logger = get_logger(__name__)


@dataclass
class AncestryView:
    """Ancestry edges for one person, possibly truncated to parents."""
    person_id: int
    edges: list[Edge]
    parents_only: bool = False


@dataclass
class CommonAncestryView:
    """Two people joined through their nearest common ancestor(s)."""
    person_a: int
    person_b: int
    ancestors: list[int] = field(default_factory=list)
    kinship: KinshipResult | None = None
    edges: list[Edge] = field(default_factory=list)

    @property
    def related(self) -> bool:
        return bool(self.ancestors)


@dataclass
class PathView:
    """Shortest relationship path between two people."""
    person_a: int
    person_b: int
    path: list[int] | None = None
    edges: list[Edge] = field(default_factory=list)

    @property
    def connected(self) -> bool:
        return self.path is not None


class GenealogyExplorer:
    """Name-aware facade over a shared graph handle.

    Example:
        >>> explorer = GenealogyExplorer(GraphHandle(graph))
        >>> view = explorer.ancestry(explorer.resolve("Carl Friedrich Gauss"))
        >>> explorer.edges_to_names(view.edges)
    """

    def __init__(self, handle: GraphHandle, config: SearchConfig | None = None) -> None:
        self.handle = handle
        self.config = config or SearchConfig()

    @classmethod
    def from_graph(cls, graph: GenealogyGraph, config: SearchConfig | None = None) -> GenealogyExplorer:
        return cls(GraphHandle(graph), config)

    @property
    def graph(self) -> GenealogyGraph:
        return self.handle.current

    def reload(self, graph: GenealogyGraph) -> GenealogyGraph:
        """Swap a rebuilt graph in for subsequent queries; returns the old one."""
        previous = self.handle.replace(graph)
        logger.info("graph_replaced", nodes=graph.node_count(), edges=graph.edge_count())
        return previous

    def resolve(self, name: str) -> int:
        """Map a display name to a person id.

        Raises:
            NameNotFoundError: if no person carries ``name``.
        """
        person_id = self.graph.names.resolve(name)
        if person_id is None:
            raise NameNotFoundError(name.strip())
        return person_id

    def ancestry(self, person_id: int, limit: int | None = None) -> AncestryView:
        """Ancestry of ``person_id``, parents only when it exceeds ``limit`` people."""
        graph = self.graph
        limit = self.config.ancestry_limit if limit is None else limit

        parents_only = descendants_count_exceeds(graph, person_id, limit, TraversalDirection.ANCESTORS)
        if parents_only:
            logger.warning("ancestry_too_large", person_id=person_id, limit=limit)

        edges = ancestry_graph(graph, person_id, parents_only=parents_only)
        logger.debug("ancestry_built", person_id=person_id, edges=len(edges), parents_only=parents_only)
        return AncestryView(person_id=person_id, edges=edges, parents_only=parents_only)

    def common_ancestry(self, a: int, b: int) -> CommonAncestryView:
        graph = self.graph
        graph.require(a)
        graph.require(b)

        found = common_ancestry(graph, a, b)
        view = CommonAncestryView(
            person_a=a,
            person_b=b,
            ancestors=found.ancestors,
            kinship=found.kinship,
            edges=found.edges,
        )
        if not view.related:
            logger.info("no_common_ancestor", person_a=a, person_b=b)
        return view

    def path(self, a: int, b: int) -> PathView:
        graph = self.graph
        path = shortest_path(graph, a, b)
        edges = path_edges(graph, path) if path else []
        return PathView(person_a=a, person_b=b, path=path, edges=edges)

    def name_of(self, person_id: int) -> str:
        return self.graph.require(person_id).name

    def edges_to_names(self, edges: list[Edge]) -> list[tuple[str, str]]:
        """Map (parent, child) id edges to (parent name, child name) pairs."""
        graph = self.graph
        return [(graph.require(source).name, graph.require(target).name) for source, target in edges]
