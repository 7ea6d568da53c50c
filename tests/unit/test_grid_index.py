"""Unit tests for the grid_index module."""

from gridroute.grid_index import GridIndex
from gridroute.models import Node


class TestGridIndexBuild:
    """Tests for building the index."""

    def test_columns_sorted_by_row(self, column_nodes):
        """Test column lists are sorted by row."""
        index = GridIndex.build(column_nodes)
        assert index.columns == {0: ["A", "C", "B"]}

    def test_rows_sorted_by_column(self, row_nodes):
        """Test row lists are sorted by column."""
        index = GridIndex.build(row_nodes)
        assert index.rows == {0: ["A", "C", "B"]}

    def test_ties_keep_input_order(self):
        """Test nodes sharing a cell keep input order."""
        nodes = [Node("Y", 0, 1), Node("X", 0, 1), Node("Z", 0, 0)]
        index = GridIndex.build(nodes)
        assert index.columns[0] == ["Z", "Y", "X"]

    def test_empty(self):
        """Test building from no nodes."""
        index = GridIndex.build([])
        assert index.columns == {}
        assert index.rows == {}

    def test_rebuild_reflects_new_node_set(self):
        """Test rebuilding replaces the previous index."""
        a, b, c = Node("A", 0, 0), Node("B", 0, 2), Node("C", 0, 1)
        assert GridIndex.build([a, b]).column_adjacent(a, b)
        assert not GridIndex.build([a, b, c]).column_adjacent(a, b)


class TestAdjacency:
    """Tests for adjacency predicates."""

    def test_column_neighbours(self, column_nodes):
        """Test column adjacency between consecutive nodes."""
        a, b, c = column_nodes
        index = GridIndex.build(column_nodes)
        assert index.column_adjacent(a, c)
        assert index.column_adjacent(c, a)
        assert index.column_adjacent(c, b)
        assert not index.column_adjacent(a, b)
        assert not index.column_adjacent(b, a)

    def test_row_neighbours(self, row_nodes):
        """Test row adjacency between consecutive nodes."""
        a, c, b = row_nodes
        index = GridIndex.build(row_nodes)
        assert index.row_adjacent(a, c)
        assert index.row_adjacent(b, c)
        assert not index.row_adjacent(a, b)

    def test_gap_rows_still_adjacent(self):
        """Test empty cells between nodes do not break adjacency."""
        a, b = Node("A", 0, 0), Node("B", 0, 5)
        index = GridIndex.build([a, b])
        assert index.column_adjacent(a, b)

    def test_node_is_not_its_own_neighbour(self):
        """Test a node is never adjacent to itself."""
        a = Node("A", 0, 0)
        index = GridIndex.build([a])
        assert not index.column_adjacent(a, a)

    def test_unknown_source(self):
        """Test adjacency for nodes outside the index."""
        a, b = Node("A", 0, 0), Node("B", 0, 1)
        index = GridIndex.build([b])
        assert not index.column_adjacent(a, b)
