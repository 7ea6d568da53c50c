"""
Connection point resolution.

Every connector attaches to the midpoint of one side of its source and
target node boxes. When the point is the arrival end of a connector it is
pushed outward by the arrow clearance, so the arrowhead tip (not the line)
touches the border.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple

from .models import GeometryConfig, Node, Point
from .positioning import absolute_position


class PortSide(Enum):
    """Which side of a node a connector attaches to."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Port:
    """A resolved connection point on a node."""

    node: str
    side: PortSide
    x: float
    y: float

    @property
    def point(self) -> Point:
        return (self.x, self.y)


def right_anchor(node: Node, is_arrival: bool, config: GeometryConfig) -> Point:
    box = absolute_position(node, config)
    offset = config.arrow_clearance if is_arrival else 0
    return (box.right + offset, box.top + box.height / 2)


def left_anchor(node: Node, is_arrival: bool, config: GeometryConfig) -> Point:
    box = absolute_position(node, config)
    offset = config.arrow_clearance if is_arrival else 0
    return (box.left - offset, box.top + box.height / 2)


def top_anchor(node: Node, is_arrival: bool, config: GeometryConfig) -> Point:
    box = absolute_position(node, config)
    offset = config.arrow_clearance if is_arrival else 0
    return (box.left + box.width / 2, box.top - offset)


def bottom_anchor(node: Node, is_arrival: bool, config: GeometryConfig) -> Point:
    box = absolute_position(node, config)
    offset = config.arrow_clearance if is_arrival else 0
    return (box.left + box.width / 2, box.bottom + offset)


ANCHOR_RESOLVERS: Dict[PortSide, Callable[[Node, bool, GeometryConfig], Point]] = {
    PortSide.RIGHT: right_anchor,
    PortSide.LEFT: left_anchor,
    PortSide.TOP: top_anchor,
    PortSide.BOTTOM: bottom_anchor,
}


def pick_sides(source: Node, target: Node) -> Tuple[PortSide, PortSide]:
    """
    Choose the source and target sides from relative grid placement.

    Columns are compared first, then rows. A target sharing both column and
    row with the source falls into the "above" branch.
    """
    if target.col > source.col:
        return PortSide.RIGHT, PortSide.LEFT
    if target.col < source.col:
        return PortSide.LEFT, PortSide.RIGHT
    if target.row > source.row:
        return PortSide.BOTTOM, PortSide.TOP
    return PortSide.TOP, PortSide.BOTTOM


def resolve_port(
    node: Node, side: PortSide, is_arrival: bool, config: GeometryConfig
) -> Port:
    """Resolve a node side into an absolute port."""
    x, y = ANCHOR_RESOLVERS[side](node, is_arrival, config)
    return Port(node=node.id, side=side, x=x, y=y)


def pick_anchor_pair(
    source: Node, target: Node, config: GeometryConfig
) -> Tuple[Port, Port]:
    """
    Resolve the start and end anchors of a connector.

    Returns:
        (start port on source, arrival port on target)
    """
    src_side, tgt_side = pick_sides(source, target)
    return (
        resolve_port(source, src_side, False, config),
        resolve_port(target, tgt_side, True, config),
    )
