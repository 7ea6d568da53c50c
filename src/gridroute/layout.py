"""
Layout pass using networkx as the node registry.

Uses networkx for:
- Graph representation of nodes and resolvable connectors
- Endpoint resolution (membership lookups)

A layout pass is a pure function from (nodes, connectors, config) to
(layouts, routes). The host decides when to call it again, typically on
every observed data change; nothing is cached between passes.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx

from .grid_index import GridIndex
from .models import Connector, GeometryConfig, LayoutBox, Node, Point
from .positioning import absolute_position, grid_bounds
from .router import RouteKind, RoutePlanner
from .smoothing import ArcTo, PathCommand, smooth_corners, to_svg_path
from .tracer import RouteDecision, RouteTrace


@dataclass
class ConnectorRoute:
    """Routing output for one connector."""

    connector: Connector
    kind: Optional[RouteKind] = None
    waypoints: List[Point] = field(default_factory=list)
    commands: List[PathCommand] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return bool(self.commands)

    @property
    def path(self) -> str:
        """SVG path data, empty for an unresolved connector."""
        return to_svg_path(self.commands)


@dataclass
class LayoutResult:
    """Result of a layout pass."""

    config: GeometryConfig = field(default_factory=GeometryConfig)
    nodes: Dict[str, Node] = field(default_factory=dict)
    layouts: Dict[str, LayoutBox] = field(default_factory=dict)
    routes: List[ConnectorRoute] = field(default_factory=list)
    index: GridIndex = field(default_factory=GridIndex)
    graph: nx.DiGraph = field(default_factory=nx.DiGraph)

    @property
    def unresolved(self) -> List[Connector]:
        return [r.connector for r in self.routes if not r.resolved]

    def route_for(self, source: str, target: str) -> Optional[ConnectorRoute]:
        """First route drawn from source to target, if any."""
        for route in self.routes:
            if route.connector.source == source and route.connector.target == target:
                return route
        return None

    def bounds(self) -> Tuple[float, float]:
        """Surface (width, height) covering every occupied cell."""
        return grid_bounds(self.nodes.values(), self.config)


class GridLayout:
    """
    Grid layout session.

    Holds the node registry and the grid index for the current node set.
    Both are rebuilt from scratch by ``set_nodes``; connectors are routed
    against whatever node set was last supplied.
    """

    def __init__(self, config: Optional[GeometryConfig] = None):
        self.config = config or GeometryConfig()
        self.graph: nx.DiGraph = nx.DiGraph()
        self.index = GridIndex()
        self.planner = RoutePlanner(self.config, self.index)

    def set_nodes(self, nodes: Iterable[Node]) -> None:
        """Replace the node set and rebuild the grid index."""
        self.graph = nx.DiGraph()
        ordered: List[Node] = []
        for node in nodes:
            # First declaration of an id wins
            if node.id in self.graph:
                continue
            self.graph.add_node(node.id, node=node)
            ordered.append(node)

        self.index = GridIndex.build(ordered)
        self.planner = RoutePlanner(self.config, self.index)

    def get_node(self, node_id: str) -> Optional[Node]:
        if node_id not in self.graph:
            return None
        return self.graph.nodes[node_id]["node"]

    def layout_node(self, node: Node) -> LayoutBox:
        """Pixel box for absolute placement of a node."""
        return absolute_position(node, self.config)

    def route(
        self, connector: Connector, trace: Optional[RouteTrace] = None
    ) -> ConnectorRoute:
        """
        Route a single connector.

        A connector naming a node that is not in the current node set gets
        an empty route; no exception is raised.
        """
        source = self.get_node(connector.source)
        target = self.get_node(connector.target)

        if source is None or target is None:
            if trace is not None:
                trace.add_decision(
                    RouteDecision(connector.source, connector.target, "unresolved")
                )
            return ConnectorRoute(connector=connector)

        planned = self.planner.route(source, target)
        commands = smooth_corners(planned.waypoints, self.config.max_corner_radius)

        if trace is not None:
            trace.add_decision(
                RouteDecision(
                    source=connector.source,
                    target=connector.target,
                    kind=planned.kind.value,
                    source_side=planned.source_port.side.value,
                    target_side=planned.target_port.side.value,
                    waypoints=list(planned.waypoints),
                    radii=[c.radius for c in commands if isinstance(c, ArcTo)],
                )
            )

        return ConnectorRoute(
            connector=connector,
            kind=planned.kind,
            waypoints=planned.waypoints,
            commands=commands,
        )

    def layout(
        self,
        nodes: Iterable[Node],
        connectors: Iterable[Connector],
        trace: Optional[RouteTrace] = None,
    ) -> LayoutResult:
        """
        Compute node boxes and connector routes for a full pass.

        Args:
            nodes: Nodes with supplied column and row.
            connectors: Connectors in drawing order.
            trace: Optional trace to record stages and decisions into.

        Returns:
            LayoutResult with one route per connector, in input order.
        """
        connectors = list(connectors)
        self.set_nodes(nodes)

        result = LayoutResult(config=self.config, index=self.index)
        for node_id, data in self.graph.nodes(data=True):
            node = data["node"]
            result.nodes[node_id] = node
            result.layouts[node_id] = self.layout_node(node)

        if trace is not None:
            trace.add_stage(
                "grid_index",
                {"columns": dict(self.index.columns), "rows": dict(self.index.rows)},
            )
            trace.add_stage("layouts", {"node_count": len(result.layouts)})

        for connector in connectors:
            route = self.route(connector, trace)
            if route.resolved:
                self.graph.add_edge(connector.source, connector.target)
            result.routes.append(route)

        result.graph = self.graph

        if trace is not None:
            trace.add_stage(
                "routes",
                {
                    "connector_count": len(connectors),
                    "unresolved": len(result.unresolved),
                },
            )

        return result


def compute_layout(
    nodes: Iterable[Node],
    connectors: Iterable[Connector],
    config: Optional[GeometryConfig] = None,
    trace: Optional[RouteTrace] = None,
) -> LayoutResult:
    """Run one layout pass with a fresh session."""
    return GridLayout(config).layout(nodes, connectors, trace)
