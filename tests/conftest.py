"""Shared genealogy fixtures."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from lineage_search import GenealogyGraph

# Small family: A is parent of B and C; D stands alone.
FAMILY_NODES = {1: "A", 2: "B", 3: "C", 4: "D"}
FAMILY_EDGES = [(1, 2), (1, 3)]

# Three-generation pedigree with a half-sibling, a cousin line and a
# pedigree collapse (35's parents are siblings).
PEDIGREE_NODES = {
    10: "Grandpa",
    11: "Grandma",
    12: "Father",
    13: "Uncle",
    14: "Mother",
    15: "Me",
    16: "Sister",
    17: "Cousin",
    18: "Aunt",
    19: "Half Brother",
    20: "Stepmother",
    21: "Cousin's Child",
    30: "Old Man",
    31: "Old Woman",
    32: "Founder",
    33: "Left Child",
    34: "Right Child",
    35: "Collapsed",
}
PEDIGREE_EDGES = [
    (10, 12), (11, 12),
    (10, 13), (11, 13),
    (12, 15), (14, 15),
    (12, 16), (14, 16),
    (13, 17), (18, 17),
    (12, 19), (20, 19),
    (17, 21),
    (30, 32), (31, 32),
    (32, 33), (32, 34),
    (33, 35), (34, 35),
]


@pytest.fixture()
def family() -> GenealogyGraph:
    return GenealogyGraph.from_table(FAMILY_NODES, FAMILY_EDGES)


@pytest.fixture()
def pedigree() -> GenealogyGraph:
    return GenealogyGraph.from_table(PEDIGREE_NODES, PEDIGREE_EDGES)


@pytest.fixture()
def pedigree_file(tmp_path: Path) -> Path:
    path = tmp_path / "genealogy_graph.json"
    path.write_text(json.dumps({
        "nodes": {str(k): v for k, v in PEDIGREE_NODES.items()},
        "edges": [list(e) for e in PEDIGREE_EDGES],
    }))
    return path
