"""Lineage Search - graph queries over genealogical descent.

Answers four kinds of question about a parent -> child graph:
- the ancestry subgraph of a person, optionally just their parents
- whether a walk would exceed a size budget, without finishing it
- the nearest common ancestor(s) of two people and the lineage joining them
- the shortest relationship path between two people
"""

__version__ = "0.1.0"

from .ancestry import (
    TraversalDirection,
    ancestry_graph,
    descendancy_graph,
    descendants_count_exceeds,
    visited_count,
)
from .common import (
    CommonAncestry,
    KinshipResult,
    closest_ancestor,
    closest_ancestors,
    common_ancestry,
    common_ancestry_graph,
    kinship,
    relationship_label,
)
from .errors import (
    LineageSearchError,
    MalformedInputError,
    NameNotFoundError,
    UnknownIdError,
)
from .explorer import AncestryView, CommonAncestryView, GenealogyExplorer, PathView
from .paths import path_edges, shortest_path
from .payload import GraphPayload, load_graph, load_payload
from .store import GenealogyGraph, GraphHandle, NameIndex, PersonNode, build_graph

__all__ = [
    # Store
    "GenealogyGraph",
    "GraphHandle",
    "NameIndex",
    "PersonNode",
    "build_graph",
    # Input
    "GraphPayload",
    "load_graph",
    "load_payload",
    # Ancestor walker
    "TraversalDirection",
    "ancestry_graph",
    "descendancy_graph",
    "descendants_count_exceeds",
    "visited_count",
    # Common ancestors
    "CommonAncestry",
    "KinshipResult",
    "closest_ancestor",
    "closest_ancestors",
    "common_ancestry",
    "common_ancestry_graph",
    "kinship",
    "relationship_label",
    # Paths
    "path_edges",
    "shortest_path",
    # Service
    "GenealogyExplorer",
    "AncestryView",
    "CommonAncestryView",
    "PathView",
    # Errors
    "LineageSearchError",
    "MalformedInputError",
    "NameNotFoundError",
    "UnknownIdError",
]
