"""
Position calculation for grid layouts.

This module handles the pure coordinate math that turns grid indices into
pixel coordinates:
- Absolute node boxes from column/row, cell size and margins
- Routing channel coordinates in the free space between cells
- Surface bounds covering every occupied cell
- Cell boundary lines for grid overlays
"""

from typing import Iterable, List, Tuple

from .models import GeometryConfig, LayoutBox, Node


def absolute_position(node: Node, config: GeometryConfig) -> LayoutBox:
    """
    Calculate the pixel box of a node.

    The box sits at the top-left corner of its cell, offset by the margins,
    and always has the configured node size.

    Args:
        node: Node with trusted non-negative column and row.
        config: Geometry constants.

    Returns:
        LayoutBox with left, top, width and height.
    """
    return LayoutBox(
        left=config.margin_x + node.col * config.cell_width,
        top=config.margin_y + node.row * config.cell_height,
        width=config.node_width,
        height=config.node_height,
    )


def column_channel_x(col: int, config: GeometryConfig) -> float:
    """X coordinate of the vertical channel just left of column ``col``."""
    return config.margin_x + col * config.cell_width - config.gap_x / 2


def row_channel_y(row: int, config: GeometryConfig) -> float:
    """Y coordinate of the horizontal channel just above row ``row``."""
    return config.margin_y + row * config.cell_height - config.gap_y / 2


def grid_bounds(nodes: Iterable[Node], config: GeometryConfig) -> Tuple[float, float]:
    """
    Calculate the surface size needed to show every node's cell.

    Returns:
        (width, height) including the margins on both sides. An empty node
        set yields just the margins.
    """
    max_col = -1
    max_row = -1
    for node in nodes:
        max_col = max(max_col, node.col)
        max_row = max(max_row, node.row)

    width = 2 * config.margin_x + (max_col + 1) * config.cell_width
    height = 2 * config.margin_y + (max_row + 1) * config.cell_height
    return width, height


def _steps(start: float, step: float, limit: float) -> List[float]:
    # Non-positive steps would never reach the limit
    if step <= 0 or start > limit:
        return []
    return [start + i * step for i in range(int((limit - start) // step) + 1)]


def grid_lines(
    width: float, height: float, config: GeometryConfig
) -> Tuple[List[float], List[float]]:
    """
    Calculate cell boundary coordinates inside a surface.

    Returns:
        (x coordinates of vertical lines, y coordinates of horizontal lines).
        An axis with a non-positive cell size has no lines.
    """
    return (
        _steps(config.margin_x, config.cell_width, width),
        _steps(config.margin_y, config.cell_height, height),
    )
