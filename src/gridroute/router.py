"""
Connector route planning.

Derives an orthogonal via-point sequence between two anchors from the
relative grid placement of the connected nodes:
- Same-column anchors: straight line between column neighbours, otherwise a
  detour through a vertical bypass channel
- Same-row anchors: straight line between row neighbours, otherwise a
  detour through a horizontal bypass channel
- Diagonal placements: an S-shaped route between adjacent columns, or a
  route through a horizontal channel near the target row

No obstacle search is performed; the regular grid and a fixed clearance
distance keep the lines away from node borders.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .grid_index import GridIndex
from .models import GeometryConfig, Node, Point
from .ports import Port, pick_anchor_pair
from .positioning import column_channel_x, row_channel_y


class RouteKind(Enum):
    """Which branch of the planner produced a route."""

    COLUMN_DIRECT = "column_direct"
    COLUMN_BYPASS = "column_bypass"
    ROW_DIRECT = "row_direct"
    ROW_BYPASS = "row_bypass"
    ADJACENT_COLUMNS = "adjacent_columns"
    ROW_CHANNEL = "row_channel"


@dataclass
class PlannedRoute:
    """A planned connector route between two nodes."""

    source: str
    target: str
    source_port: Port
    target_port: Port
    kind: RouteKind
    waypoints: List[Point] = field(default_factory=list)


class RoutePlanner:
    """
    Plans via-points for connectors on a grid.

    The grid index is owned by the caller's layout pass and handed in
    explicitly; the planner itself holds no per-connector state.
    """

    def __init__(self, config: GeometryConfig, index: GridIndex):
        self.config = config
        self.index = index

    def route(self, source: Node, target: Node) -> PlannedRoute:
        """Resolve anchors for a connector and plan its via-points."""
        src_port, tgt_port = pick_anchor_pair(source, target, self.config)
        kind, waypoints = self.plan(source, target, src_port.point, tgt_port.point)
        return PlannedRoute(
            source=source.id,
            target=target.id,
            source_port=src_port,
            target_port=tgt_port,
            kind=kind,
            waypoints=waypoints,
        )

    def plan(
        self, source: Node, target: Node, start: Point, end: Point
    ) -> Tuple[RouteKind, List[Point]]:
        """
        Choose via-points between two resolved anchors.

        Args:
            source: Node the connector leaves.
            target: Node the connector arrives at.
            start: Anchor on the source border.
            end: Anchor on (or just outside) the target border.

        Returns:
            (route kind, via-points). Via-points always begin with ``start``
            and end with ``end``, and every consecutive pair is horizontal
            or vertical.
        """
        start_x, start_y = start
        end_x, end_y = end
        dis = self.config.clearance_distance

        if start_x == end_x:
            if self.index.column_adjacent(source, target):
                return RouteKind.COLUMN_DIRECT, [start, end]

            if end_y < start_y:
                dis = -dis
            # Never detour through the outer left boundary
            bypass_x = column_channel_x(source.col or 1, self.config)
            return RouteKind.COLUMN_BYPASS, [
                start,
                (start_x, start_y + dis),
                (bypass_x, start_y + dis),
                (bypass_x, end_y - dis),
                (end_x, end_y - dis),
                end,
            ]

        if start_y == end_y:
            if self.index.row_adjacent(source, target):
                return RouteKind.ROW_DIRECT, [start, end]

            if end_x < start_x:
                dis = -dis
            # Never detour through the outer top boundary
            bypass_y = row_channel_y(source.row or 1, self.config)
            return RouteKind.ROW_BYPASS, [
                start,
                (start_x + dis, start_y),
                (start_x + dis, bypass_y),
                (end_x - dis, bypass_y),
                (end_x - dis, end_y),
                end,
            ]

        if end_x < start_x:
            dis = -dis

        if abs(target.col - source.col) == 1:
            return RouteKind.ADJACENT_COLUMNS, [
                start,
                (start_x + dis, start_y),
                (start_x + dis, end_y),
                end,
            ]

        channel_row = target.row + 1 if end_y < start_y else target.row
        channel_y = row_channel_y(channel_row, self.config)
        return RouteKind.ROW_CHANNEL, [
            start,
            (start_x + dis, start_y),
            (start_x + dis, channel_y),
            (end_x - dis, channel_y),
            (end_x - dis, end_y),
            end,
        ]
