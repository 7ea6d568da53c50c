"""
Corner smoothing for orthogonal routes.

Turns a via-point sequence into drawing commands where every interior turn
is replaced by a circular arc. The arc radius is half the shorter adjacent
segment, capped by a fixed maximum, so neighbouring arcs never overlap.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union

from .models import Point

DEFAULT_MAX_RADIUS = 15


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class ArcTo:
    """Circular arc to (x, y); sweep 1 is clockwise on a y-down surface."""

    radius: float
    sweep: int
    x: float
    y: float


PathCommand = Union[MoveTo, LineTo, ArcTo]


class Heading(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# (incoming, outgoing) -> sweep flag; the arc bends toward the outgoing side
SWEEP_FLAGS = {
    (Heading.DOWN, Heading.RIGHT): 0,
    (Heading.DOWN, Heading.LEFT): 1,
    (Heading.UP, Heading.RIGHT): 1,
    (Heading.UP, Heading.LEFT): 0,
    (Heading.RIGHT, Heading.DOWN): 1,
    (Heading.RIGHT, Heading.UP): 0,
    (Heading.LEFT, Heading.DOWN): 0,
    (Heading.LEFT, Heading.UP): 1,
}

_UNIT = {
    Heading.UP: (0, -1),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
    Heading.RIGHT: (1, 0),
}


def distance(a: Point, b: Point) -> float:
    """Manhattan distance; equal to the Euclidean one on axis-aligned segments."""
    return abs(b[0] - a[0]) + abs(b[1] - a[1])


def heading(a: Point, b: Point) -> Optional[Heading]:
    """Direction of travel from a to b, or None for a zero-length segment."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    if dx == 0 and dy == 0:
        return None
    if abs(dx) >= abs(dy):
        return Heading.RIGHT if dx > 0 else Heading.LEFT
    return Heading.DOWN if dy > 0 else Heading.UP


def corner_radius(
    prev: Point, corner: Point, nxt: Point, max_radius: float = DEFAULT_MAX_RADIUS
) -> float:
    """Radius for the corner at ``corner``, never negative."""
    radius = min(distance(prev, corner), distance(corner, nxt)) / 2
    return max(0, min(radius, max_radius))


def smooth_corners(
    points: Sequence[Point], max_radius: float = DEFAULT_MAX_RADIUS
) -> List[PathCommand]:
    """
    Convert via-points into move/line/arc commands.

    Args:
        points: Via-points with axis-aligned consecutive segments.
        max_radius: Cap for every corner radius.

    Returns:
        Commands starting with MoveTo at the first point and ending exactly
        at the last point. Fewer than two points yield an empty list.
        Straight-through or degenerate corners are emitted as plain LineTo.
    """
    if len(points) < 2:
        return []

    commands: List[PathCommand] = [MoveTo(*points[0])]

    for i in range(1, len(points) - 1):
        prev, corner, nxt = points[i - 1], points[i], points[i + 1]
        incoming = heading(prev, corner)
        outgoing = heading(corner, nxt)
        sweep = SWEEP_FLAGS.get((incoming, outgoing))
        radius = corner_radius(prev, corner, nxt, max_radius)

        if sweep is None or radius == 0:
            commands.append(LineTo(*corner))
            continue

        in_dx, in_dy = _UNIT[incoming]
        out_dx, out_dy = _UNIT[outgoing]
        commands.append(
            LineTo(corner[0] - in_dx * radius, corner[1] - in_dy * radius)
        )
        commands.append(
            ArcTo(
                radius,
                sweep,
                corner[0] + out_dx * radius,
                corner[1] + out_dy * radius,
            )
        )

    commands.append(LineTo(*points[-1]))
    return commands


def format_number(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def to_svg_path(commands: Sequence[PathCommand]) -> str:
    """Serialize commands into an SVG path ``d`` attribute."""
    parts = []
    for cmd in commands:
        x, y = format_number(cmd.x), format_number(cmd.y)
        if isinstance(cmd, MoveTo):
            parts.append(f"M {x} {y}")
        elif isinstance(cmd, LineTo):
            parts.append(f"L {x} {y}")
        else:
            r = format_number(cmd.radius)
            parts.append(f"A {r} {r} 0 0 {cmd.sweep} {x} {y}")
    return " ".join(parts)
