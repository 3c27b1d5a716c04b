"""Exception taxonomy for lineage search.

Negative results (no common ancestor, no path) are never errors; they are
returned as ``None`` or an empty edge list.
"""
from __future__ import annotations


class LineageSearchError(Exception):
    """Base class for all lineage search errors."""


class MalformedInputError(LineageSearchError):
    """Node table or edge list cannot be turned into a graph."""

    def __init__(self, message: str, edge: tuple[int, int] | None = None):
        super().__init__(message)
        self.edge = edge


class UnknownIdError(LineageSearchError, KeyError):
    """A query referenced an id with no person behind it."""

    def __init__(self, person_id: int):
        super().__init__(person_id)
        self.person_id = person_id

    def __str__(self) -> str:
        return f"No person with id {self.person_id}"


class NameNotFoundError(LineageSearchError, LookupError):
    """A display name did not resolve to any person."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Name '{self.name}' not found."
