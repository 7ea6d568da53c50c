"""Unit tests for the layout module."""

import networkx as nx

from gridroute.layout import ConnectorRoute, GridLayout, LayoutResult, compute_layout
from gridroute.models import Connector, GeometryConfig, LayoutBox, Node
from gridroute.router import RouteKind
from gridroute.smoothing import LineTo, MoveTo
from gridroute.tracer import RouteTrace


class TestGridLayout:
    """Tests for the GridLayout session."""

    def test_set_nodes_builds_graph_and_index(self, column_nodes):
        """Test set_nodes builds the graph and grid index."""
        session = GridLayout()
        session.set_nodes(column_nodes)
        assert set(session.graph.nodes) == {"A", "B", "C"}
        assert session.index.columns[0] == ["A", "C", "B"]
        assert session.planner.index is session.index

    def test_duplicate_ids_keep_first(self):
        """Test the first node wins on duplicate ids."""
        session = GridLayout()
        session.set_nodes([Node("A", 0, 0), Node("A", 3, 3)])
        assert session.get_node("A") == Node("A", 0, 0)
        assert session.index.columns == {0: ["A"]}

    def test_get_missing_node(self):
        """Test looking up an unknown node."""
        session = GridLayout()
        session.set_nodes([Node("A", 0, 0)])
        assert session.get_node("Z") is None

    def test_layout_node(self):
        """Test the pixel box of a node."""
        session = GridLayout(GeometryConfig(margin_x=5, margin_y=5))
        assert session.layout_node(Node("A", 1, 1)) == LayoutBox(155, 105, 120, 80)

    def test_route_single_connector(self):
        """Test routing one connector."""
        session = GridLayout()
        session.set_nodes([Node("A", 0, 0), Node("B", 1, 0)])
        route = session.route(Connector("A", "B"))
        assert route.kind == RouteKind.ROW_DIRECT
        assert route.commands == [MoveTo(120, 40), LineTo(147.5, 40)]
        assert route.path == "M 120 40 L 147.5 40"

    def test_route_unresolved_connector(self):
        """Test an unresolved connector gets an empty route."""
        session = GridLayout()
        session.set_nodes([Node("A", 0, 0)])
        route = session.route(Connector("A", "Missing"))
        assert not route.resolved
        assert route.commands == []
        assert route.waypoints == []
        assert route.kind is None
        assert route.path == ""

    def test_rerouting_after_node_change(self):
        """Test routes follow a new node set."""
        session = GridLayout()
        a, b = Node("A", 0, 0), Node("B", 0, 2)
        session.set_nodes([a, b])
        assert session.route(Connector("A", "B")).kind == RouteKind.COLUMN_DIRECT
        session.set_nodes([a, b, Node("C", 0, 1)])
        assert session.route(Connector("A", "B")).kind == RouteKind.COLUMN_BYPASS


class TestComputeLayout:
    """Tests for compute_layout."""

    def test_result_contents(self, mixed_nodes, mixed_connectors):
        """Test the layout result contents."""
        result = compute_layout(mixed_nodes, mixed_connectors)
        assert isinstance(result, LayoutResult)
        assert set(result.layouts) == {n.id for n in mixed_nodes}
        assert len(result.routes) == len(mixed_connectors)
        assert all(isinstance(r, ConnectorRoute) for r in result.routes)
        assert [r.connector for r in result.routes] == mixed_connectors

    def test_graph_has_resolved_edges_only(self):
        """Test only resolved connectors become graph edges."""
        nodes = [Node("A", 0, 0), Node("B", 1, 0)]
        connectors = [Connector("A", "B"), Connector("B", "Ghost")]
        result = compute_layout(nodes, connectors)
        assert isinstance(result.graph, nx.DiGraph)
        assert list(result.graph.edges) == [("A", "B")]
        assert "Ghost" not in result.graph

    def test_unresolved_does_not_stop_other_routes(self):
        """Test an unresolved connector does not affect the others."""
        nodes = [Node("A", 0, 0), Node("B", 1, 0)]
        connectors = [Connector("Ghost", "A"), Connector("A", "B")]
        result = compute_layout(nodes, connectors)
        assert result.unresolved == [Connector("Ghost", "A")]
        assert result.routes[1].resolved

    def test_route_for(self, mixed_nodes, mixed_connectors):
        """Test looking up the route of a connector."""
        result = compute_layout(mixed_nodes, mixed_connectors)
        route = result.route_for("Check", "Store")
        assert route.connector.color == "#cc0000"
        assert result.route_for("Store", "Check") is None

    def test_bounds(self, mixed_nodes):
        """Test the surface bounds of a result."""
        result = compute_layout(mixed_nodes, [])
        assert result.bounds() == (600, 300)

    def test_every_branch_is_used(self, mixed_nodes, mixed_connectors):
        """Test the mixed layout exercises every route kind."""
        result = compute_layout(mixed_nodes, mixed_connectors)
        kinds = {r.kind for r in result.routes}
        assert kinds == {
            RouteKind.ROW_DIRECT,
            RouteKind.COLUMN_DIRECT,
            RouteKind.ADJACENT_COLUMNS,
            RouteKind.ROW_BYPASS,
            RouteKind.ROW_CHANNEL,
        }

    def test_config_is_carried(self):
        """Test the result keeps its geometry configuration."""
        config = GeometryConfig(cell_width=200)
        result = compute_layout([Node("A", 1, 0)], [], config)
        assert result.config is config
        assert result.layouts["A"].left == 200

    def test_empty_input(self):
        """Test laying out nothing."""
        result = compute_layout([], [])
        assert result.layouts == {}
        assert result.routes == []

    def test_trace_records_stages(self, mixed_nodes, mixed_connectors):
        """Test the trace records each pipeline stage."""
        trace = RouteTrace()
        compute_layout(mixed_nodes, mixed_connectors, trace=trace)
        assert [s.name for s in trace.stages] == ["grid_index", "layouts", "routes"]
        assert len(trace.decisions) == len(mixed_connectors)
