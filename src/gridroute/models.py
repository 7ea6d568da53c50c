"""
Data models for grid diagram layout and connector routing.

This module contains the dataclasses shared by every stage of the pipeline.
Nodes and connectors are supplied by the caller and treated as immutable for
the duration of a layout pass; the geometry configuration carries every
constant needed to turn grid indices into pixel coordinates.

Classes:
    Node: A diagram node placed at a grid column and row.
    Connector: A directed line between two nodes.
    LayoutBox: Absolute pixel box of a placed node.
    GeometryConfig: Cell, node, margin, clearance and arrow constants.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class Node:
    """
    A node positioned on the grid.

    Attributes:
        id: Unique key of the node.
        col: Grid column (non-negative integer).
        row: Grid row (non-negative integer).
        payload: Opaque user data, carried through untouched.
    """

    id: str
    col: int
    row: int
    payload: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def label(self) -> str:
        """Text shown inside the node box."""
        return str(self.payload.get("label", self.id))


@dataclass(frozen=True)
class Connector:
    """
    A directed connector (line) from one node to another.

    Attributes:
        source: Id of the node the line leaves.
        target: Id of the node the arrow points at.
        color: Optional stroke color metadata.
    """

    source: str
    target: str
    color: Optional[str] = None


@dataclass(frozen=True)
class LayoutBox:
    """Pixel box for absolute placement of a node."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Point:
        return (self.left + self.width / 2, self.top + self.height / 2)


# Host-side (camelCase) option names mapped to GeometryConfig fields
_CONFIG_ALIASES = {
    "cellWidth": "cell_width",
    "cellHeight": "cell_height",
    "nodeWidth": "node_width",
    "nodeHeight": "node_height",
    "marginX": "margin_x",
    "marginY": "margin_y",
    "clearanceDistance": "clearance_distance",
    "dis": "clearance_distance",
    "defaultStrokeWidth": "stroke_width",
    "strokeWidth": "stroke_width",
    "arrowSize": "arrow_size",
    "maxCornerRadius": "max_corner_radius",
}


@dataclass(frozen=True)
class GeometryConfig:
    """
    Geometry constants for layout and routing.

    Values are not range-checked; callers are responsible for sane input.

    Attributes:
        cell_width: Width of one grid cell.
        cell_height: Height of one grid cell.
        node_width: Width of a node box (smaller than the cell).
        node_height: Height of a node box.
        margin_x: Horizontal offset of the whole grid.
        margin_y: Vertical offset of the whole grid.
        clearance_distance: Offset a route travels away from an anchor
            before its first turn.
        stroke_width: Connector stroke width.
        arrow_size: Arrowhead marker size, in stroke widths.
        max_corner_radius: Upper bound for rounded corner radii.
    """

    cell_width: float = 150
    cell_height: float = 100
    node_width: float = 120
    node_height: float = 80
    margin_x: float = 0
    margin_y: float = 0
    clearance_distance: float = 10
    stroke_width: float = 1
    arrow_size: float = 5
    max_corner_radius: float = 15

    @property
    def arrow_clearance(self) -> float:
        """Distance between the arrowhead tip and the end of the line."""
        return self.arrow_size * self.stroke_width / 2

    @property
    def gap_x(self) -> float:
        """Horizontal free space between two neighbouring node boxes."""
        return self.cell_width - self.node_width

    @property
    def gap_y(self) -> float:
        """Vertical free space between two neighbouring node boxes."""
        return self.cell_height - self.node_height

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]]) -> "GeometryConfig":
        """
        Build a config from host options.

        Accepts camelCase host names (``cellWidth``, ``marginX``, ...) as
        well as field names, and a nested ``margin`` mapping with ``x`` and
        ``y``. Omitted or ``None`` values fall back to the defaults.

        Raises:
            ValueError: If an option name is not recognised.
        """
        if not options:
            return cls()

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}

        for key, value in options.items():
            if value is None:
                continue
            if key == "margin":
                if "x" in value and value["x"] is not None:
                    values["margin_x"] = value["x"]
                if "y" in value and value["y"] is not None:
                    values["margin_y"] = value["y"]
                continue
            name = _CONFIG_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown geometry option: {key!r}")
            values[name] = value

        return cls(**values)
