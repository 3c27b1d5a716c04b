"""Tests for undirected shortest relationship paths."""
from __future__ import annotations

import pytest

from lineage_search import GenealogyGraph, UnknownIdError, build_graph, path_edges, shortest_path
from lineage_search.paths import neighbors


class TestShortestPath:
    """Tests for shortest_path."""

    def test_through_shared_parent(self, family: GenealogyGraph):
        assert shortest_path(family, 2, 3) == [2, 1, 3]

    def test_same_person(self, family: GenealogyGraph):
        assert shortest_path(family, 2, 2) == [2]

    def test_disconnected(self, family: GenealogyGraph):
        assert shortest_path(family, 2, 4) is None

    def test_direct_parent_either_way(self, family: GenealogyGraph):
        assert shortest_path(family, 1, 2) == [1, 2]
        assert shortest_path(family, 2, 1) == [2, 1]

    @pytest.mark.parametrize(("a", "b"), [(15, 17), (15, 21), (19, 16), (20, 14), (18, 21)])
    def test_symmetric_length(self, pedigree: GenealogyGraph, a: int, b: int):
        forward = shortest_path(pedigree, a, b)
        backward = shortest_path(pedigree, b, a)
        assert forward is not None and backward is not None
        assert len(forward) == len(backward)
        assert forward[0] == a and forward[-1] == b

    def test_crosses_marriage_line(self, pedigree: GenealogyGraph):
        """Step-relatives connect through a shared child."""
        assert shortest_path(pedigree, 20, 14) == [20, 19, 12, 15, 14]

    def test_first_discovered_neighbour_wins(self, pedigree: GenealogyGraph):
        """Parents are tried before children, in stored order."""
        # 15 reaches 16 through either parent; 12 is listed first.
        assert shortest_path(pedigree, 15, 16) == [15, 12, 16]

    def test_tolerates_cycles(self):
        graph = build_graph({1: "A", 2: "B", 3: "C", 4: "D"}, [(1, 2), (2, 3), (3, 1), (3, 4)])
        assert shortest_path(graph, 1, 4) == [1, 3, 4]

    def test_self_loop_on_shared_parent(self):
        graph = build_graph({1: "A", 2: "B", 3: "C"}, [(1, 1), (1, 2), (1, 3)])
        assert shortest_path(graph, 2, 3) == [2, 1, 3]
        assert shortest_path(graph, 1, 1) == [1]

    def test_unknown_ids(self, family: GenealogyGraph):
        with pytest.raises(UnknownIdError):
            shortest_path(family, 2, 99)
        with pytest.raises(UnknownIdError):
            shortest_path(family, 99, 2)

    def test_neighbors_are_parents_then_children(self, pedigree: GenealogyGraph):
        assert neighbors(pedigree, 12) == (10, 11, 15, 16, 19)


class TestPathEdges:
    """Tests for converting node paths back to stored edges."""

    def test_orientation(self, family: GenealogyGraph):
        assert path_edges(family, [2, 1, 3]) == [(1, 2), (1, 3)]

    def test_single_node(self, family: GenealogyGraph):
        assert path_edges(family, [2]) == []
