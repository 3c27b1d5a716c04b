"""Input boundary: the decoded node table and edge list.

The ingestion side hands over a JSON document shaped like::

    {"nodes": {"18231": "Carl Friedrich Gauss", ...},
     "edges": [[18230, 18231], ...]}

Object keys arrive as strings and are coerced to person ids here.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import MalformedInputError
from .logging import get_logger
from .store import GenealogyGraph

logger = get_logger(__name__)


class GraphPayload(BaseModel):
    """Validated node table plus parent -> child edge list."""

    model_config = ConfigDict(frozen=True)

    nodes: dict[int, str | None] = Field(default_factory=dict)
    edges: list[tuple[int, int]] = Field(default_factory=list)

    @classmethod
    def from_json(cls, data: str | bytes) -> GraphPayload:
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise MalformedInputError(f"Invalid graph payload ({e.error_count()} errors): {e}") from e

    def to_graph(self) -> GenealogyGraph:
        graph = GenealogyGraph.from_table(self.nodes, self.edges)
        logger.debug("graph_built", nodes=graph.node_count(), edges=graph.edge_count(), capacity=graph.capacity)
        return graph


def load_payload(path: str | Path) -> GraphPayload:
    """Read and validate a payload file."""
    return GraphPayload.from_json(Path(path).read_bytes())


def load_graph(path: str | Path) -> GenealogyGraph:
    """Read a payload file and build its graph."""
    return load_payload(path).to_graph()
