"""
PNG Renderer module for grid diagrams.

Rasterizes a layout result with Pillow. Rounded corners are flattened into
short line segments; arrowheads are filled triangles at the final segment.
"""

import math
import os
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from .layout import LayoutResult
from .models import Point
from .positioning import grid_lines
from .smoothing import LineTo, MoveTo, PathCommand

ARC_STEPS = 8


def _arc_center(start: Point, sweep: int, end: Point) -> Point:
    # A quarter arc is centered on one of the two remaining chord-box corners
    for center in ((start[0], end[1]), (end[0], start[1])):
        a0 = math.atan2(start[1] - center[1], start[0] - center[0])
        a1 = math.atan2(end[1] - center[1], end[0] - center[0])
        delta = (a1 - a0 + math.pi) % (2 * math.pi) - math.pi
        if (delta > 0) == (sweep == 1):
            return center
    return (start[0], end[1])


def flatten_path(
    commands: Sequence[PathCommand], steps: int = ARC_STEPS
) -> List[Point]:
    """
    Convert path commands into a polyline.

    Args:
        commands: Move/line/arc commands from the corner smoother.
        steps: Number of segments used for each arc.

    Returns:
        Polyline points in drawing order.
    """
    points: List[Point] = []
    for cmd in commands:
        if isinstance(cmd, (MoveTo, LineTo)):
            points.append((cmd.x, cmd.y))
            continue

        start = points[-1]
        end = (cmd.x, cmd.y)
        cx, cy = _arc_center(start, cmd.sweep, end)
        a0 = math.atan2(start[1] - cy, start[0] - cx)
        a1 = math.atan2(end[1] - cy, end[0] - cx)
        delta = (a1 - a0 + math.pi) % (2 * math.pi) - math.pi
        for step in range(1, steps):
            angle = a0 + delta * step / steps
            points.append(
                (cx + cmd.radius * math.cos(angle), cy + cmd.radius * math.sin(angle))
            )
        points.append(end)
    return points


class PNGRenderer:
    """Renders grid diagrams as PNG images."""

    def __init__(
        self,
        scale: int = 2,
        font_size: int = 12,
        font_path: Optional[str] = None,
        show_grid: bool = False,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ):
        self.scale = scale
        self.font_size = font_size
        self.font_path = font_path
        self.show_grid = show_grid
        self.width = width
        self.height = height

        # Colors
        self.bg_color = (255, 255, 255)
        self.node_fill = (255, 255, 255)
        self.node_outline = (51, 51, 51)
        self.grid_color = (221, 221, 221)
        self.text_color = (0, 0, 0)
        self.line_color = "#000000"

        self.font = None

    def _get_font(self) -> ImageFont.ImageFont:
        """Get a font for rendering labels."""
        if self.font is not None:
            return self.font

        font_size = self.font_size * self.scale

        if self.font_path and os.path.exists(self.font_path):
            try:
                self.font = ImageFont.truetype(self.font_path, font_size)
                return self.font
            except OSError:
                pass  # Fall through to default fonts

        font_options = [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
        ]
        for path in font_options:
            if os.path.exists(path):
                try:
                    self.font = ImageFont.truetype(path, font_size)
                    return self.font
                except OSError:
                    continue

        self.font = ImageFont.load_default()
        return self.font

    def _scaled(self, point: Point) -> Tuple[float, float]:
        return (point[0] * self.scale, point[1] * self.scale)

    def render(self, result: LayoutResult, output_path: str = "diagram.png") -> str:
        """
        Render the layout result as a PNG image.

        Args:
            result: Layout result with node boxes and routes
            output_path: Path to save the PNG file

        Returns:
            Path to the saved PNG file

        Raises:
            ValueError: If a connector color is not a color Pillow recognizes
        """
        bounds_w, bounds_h = result.bounds()
        width = self.width if self.width is not None else bounds_w
        height = self.height if self.height is not None else bounds_h

        img_size = (
            max(1, int(math.ceil(width * self.scale))),
            max(1, int(math.ceil(height * self.scale))),
        )
        img = Image.new("RGB", img_size, self.bg_color)
        draw = ImageDraw.Draw(img)

        if self.show_grid:
            self._draw_grid(draw, result, width, height)

        for node_id, box in result.layouts.items():
            self._draw_node(draw, result.nodes[node_id].label, box)

        line_width = max(1, int(round(result.config.stroke_width * self.scale)))
        arrow_size = result.config.arrow_size * result.config.stroke_width * self.scale
        for route in result.routes:
            if not route.resolved:
                continue
            color = route.connector.color or self.line_color
            points = [self._scaled(p) for p in flatten_path(route.commands)]
            draw.line(points, fill=color, width=line_width)
            self._draw_arrowhead(draw, points[-2], points[-1], arrow_size, color)

        img.save(output_path, "PNG")
        return output_path

    def _draw_grid(self, draw: ImageDraw.Draw, result: LayoutResult, width, height):
        xs, ys = grid_lines(width, height, result.config)
        for x in xs:
            draw.line(
                [self._scaled((x, 0)), self._scaled((x, height))], fill=self.grid_color
            )
        for y in ys:
            draw.line(
                [self._scaled((0, y)), self._scaled((width, y))], fill=self.grid_color
            )

    def _draw_node(self, draw: ImageDraw.Draw, label: str, box):
        left, top = self._scaled((box.left, box.top))
        right, bottom = self._scaled((box.right, box.bottom))
        draw.rectangle(
            [left, top, right, bottom],
            fill=self.node_fill,
            outline=self.node_outline,
            width=max(1, self.scale),
        )

        font = self._get_font()
        bbox = draw.textbbox((0, 0), label, font=font)
        text_w = bbox[2] - bbox[0]
        text_h = bbox[3] - bbox[1]
        cx, cy = self._scaled(box.center)
        draw.text(
            (cx - text_w / 2, cy - text_h / 2), label, fill=self.text_color, font=font
        )

    def _draw_arrowhead(
        self,
        draw: ImageDraw.Draw,
        from_point: Tuple[float, float],
        to_point: Tuple[float, float],
        arrow_size: float,
        color,
    ):
        """Draw an arrowhead whose tip extends past the end of the line."""
        x1, y1 = from_point
        x2, y2 = to_point
        angle = math.atan2(y2 - y1, x2 - x1)

        # Line ends half an arrow short of the border
        tip_x = x2 + arrow_size / 2 * math.cos(angle)
        tip_y = y2 + arrow_size / 2 * math.sin(angle)

        angle1 = angle + math.pi * 0.85
        angle2 = angle - math.pi * 0.85
        ax1 = tip_x + arrow_size * math.cos(angle1)
        ay1 = tip_y + arrow_size * math.sin(angle1)
        ax2 = tip_x + arrow_size * math.cos(angle2)
        ay2 = tip_y + arrow_size * math.sin(angle2)

        draw.polygon([(tip_x, tip_y), (ax1, ay1), (ax2, ay2)], fill=color)


def render_to_png(
    result: LayoutResult, output_path: str = "diagram.png", **kwargs
) -> str:
    """
    Convenience function to render a layout result to PNG.

    Args:
        result: Layout result
        output_path: Path to save the PNG file
        **kwargs: Additional parameters for PNGRenderer

    Returns:
        Path to the saved PNG file
    """
    renderer = PNGRenderer(**kwargs)
    return renderer.render(result, output_path)
