"""
SVG renderer for grid diagrams.

Draws the peripheral scene around the routed connectors: grid lines at cell
boundaries, one rectangle and centered label per node, and one path per
connector ending in an arrowhead marker.
"""

from typing import List, Optional
from xml.sax.saxutils import escape

from .layout import LayoutResult
from .positioning import grid_lines
from .smoothing import format_number as num

DEFAULT_LINE_COLOR = "#000000"


def attr(value: str) -> str:
    """Escape a value for use inside a double-quoted XML attribute."""
    return escape(value, {'"': "&quot;"})


class SVGRenderer:
    """Renders a layout result as a standalone SVG document."""

    def __init__(
        self,
        width: Optional[float] = None,
        height: Optional[float] = None,
        show_grid: bool = False,
        font_size: int = 12,
        node_fill: str = "#ffffff",
        node_stroke: str = "#333333",
        grid_color: str = "#dddddd",
        title: Optional[str] = None,
    ):
        """
        Initialize the SVG renderer.

        Args:
            width: Surface width; defaults to the grid bounds.
            height: Surface height; defaults to the grid bounds.
            show_grid: Whether to draw dashed cell boundaries.
            font_size: Label font size.
            node_fill: Node rectangle fill color.
            node_stroke: Node rectangle outline color.
            grid_color: Grid line color.
            title: Optional document title.
        """
        self.width = width
        self.height = height
        self.show_grid = show_grid
        self.font_size = font_size
        self.node_fill = node_fill
        self.node_stroke = node_stroke
        self.grid_color = grid_color
        self.title = title

    def render(self, result: LayoutResult) -> str:
        """Render the full scene and return the SVG markup."""
        bounds_w, bounds_h = result.bounds()
        width = self.width if self.width is not None else bounds_w
        height = self.height if self.height is not None else bounds_h

        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{num(width)}" '
            f'height="{num(height)}" viewBox="0 0 {num(width)} {num(height)}">'
        ]
        if self.title:
            lines.append(f"  <title>{escape(self.title)}</title>")

        lines.extend(self._render_markers(result))
        if self.show_grid:
            lines.extend(self._render_grid(result, width, height))
        lines.extend(self._render_nodes(result))
        lines.extend(self._render_connectors(result))
        lines.append("</svg>")
        return "\n".join(lines)

    def _marker_id(self, color: str) -> str:
        return "arrow-" + "".join(c if c.isalnum() else "_" for c in color)

    def _render_markers(self, result: LayoutResult) -> List[str]:
        size = result.config.arrow_size
        colors = []
        for route in result.routes:
            color = route.connector.color or DEFAULT_LINE_COLOR
            if route.resolved and color not in colors:
                colors.append(color)

        if not colors:
            return []

        lines = ["  <defs>"]
        for color in colors:
            # Tip sits one half-size past the line end, matching the arrow clearance
            lines.append(
                f'    <marker id="{self._marker_id(color)}" '
                f'markerWidth="{num(size)}" markerHeight="{num(size)}" '
                f'refX="{num(size / 2)}" refY="{num(size / 2)}" orient="auto">'
            )
            lines.append(
                f'      <path d="M 0 0 L {num(size)} {num(size / 2)} '
                f'L 0 {num(size)} z" fill="{attr(color)}"/>'
            )
            lines.append("    </marker>")
        lines.append("  </defs>")
        return lines

    def _render_grid(
        self, result: LayoutResult, width: float, height: float
    ) -> List[str]:
        xs, ys = grid_lines(width, height, result.config)
        lines = ['  <g class="grid">']
        for x in xs:
            lines.append(
                f'    <line x1="{num(x)}" y1="0" x2="{num(x)}" y2="{num(height)}" '
                f'stroke="{attr(self.grid_color)}" stroke-dasharray="4 4"/>'
            )
        for y in ys:
            lines.append(
                f'    <line x1="0" y1="{num(y)}" x2="{num(width)}" y2="{num(y)}" '
                f'stroke="{attr(self.grid_color)}" stroke-dasharray="4 4"/>'
            )
        lines.append("  </g>")
        return lines

    def _render_nodes(self, result: LayoutResult) -> List[str]:
        lines = ['  <g class="nodes">']
        for node_id, box in result.layouts.items():
            label = result.nodes[node_id].label
            cx, cy = box.center
            lines.append(
                f'    <rect x="{num(box.left)}" y="{num(box.top)}" '
                f'width="{num(box.width)}" height="{num(box.height)}" '
                f'fill="{attr(self.node_fill)}" '
                f'stroke="{attr(self.node_stroke)}"/>'
            )
            lines.append(
                f'    <text x="{num(cx)}" y="{num(cy)}" '
                f'font-size="{self.font_size}" text-anchor="middle" '
                f'dominant-baseline="middle">{escape(label)}</text>'
            )
        lines.append("  </g>")
        return lines

    def _render_connectors(self, result: LayoutResult) -> List[str]:
        stroke_width = result.config.stroke_width
        lines = ['  <g class="connectors">']
        for route in result.routes:
            if not route.resolved:
                continue
            color = route.connector.color or DEFAULT_LINE_COLOR
            lines.append(
                f'    <path d="{route.path}" fill="none" stroke="{attr(color)}" '
                f'stroke-width="{num(stroke_width)}" '
                f'marker-end="url(#{self._marker_id(color)})"/>'
            )
        lines.append("  </g>")
        return lines


def render_to_svg(result: LayoutResult, **kwargs) -> str:
    """Convenience function to render a layout result as SVG."""
    return SVGRenderer(**kwargs).render(result)
