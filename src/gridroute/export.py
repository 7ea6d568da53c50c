"""
File export functionality for grid diagrams.

This module handles exporting rendered diagrams to files:
- SVG documents (.svg) - vector output, paths with true arcs
- PNG images (.png) - rasterized output via Pillow
"""

from pathlib import Path
from typing import Optional

from .layout import LayoutResult
from .png_renderer import PNGRenderer
from .svg_renderer import SVGRenderer


class DiagramExporter:
    """
    Exports layout results to SVG or PNG files.

    Attributes:
        show_grid: Whether exported images include grid lines.
        title: Optional title embedded in SVG output.
        width: Surface width override; defaults to the grid bounds.
        height: Surface height override; defaults to the grid bounds.
    """

    def __init__(
        self,
        show_grid: bool = False,
        title: Optional[str] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ):
        self.show_grid = show_grid
        self.title = title
        self.width = width
        self.height = height

    def save_svg(self, result: LayoutResult, filename: str) -> None:
        """
        Save a layout result as an SVG document.

        Args:
            result: The layout result to render.
            filename: Output filename (should end in .svg).
        """
        renderer = SVGRenderer(
            width=self.width,
            height=self.height,
            show_grid=self.show_grid,
            title=self.title,
        )
        Path(filename).write_text(renderer.render(result), encoding="utf-8")

    def save_png(
        self,
        result: LayoutResult,
        filename: str,
        scale: int = 2,
        font: Optional[str] = None,
    ) -> None:
        """
        Save a layout result as a PNG image.

        Args:
            result: The layout result to render.
            filename: Output filename (should end in .png).
            scale: Resolution multiplier (default 2 for retina).
            font: Optional path to a TrueType font for labels.

        Raises:
            ValueError: If a connector color is not a color Pillow recognizes.
        """
        renderer = PNGRenderer(
            scale=scale,
            font_path=font,
            show_grid=self.show_grid,
            width=self.width,
            height=self.height,
        )
        renderer.render(result, str(Path(filename)))
