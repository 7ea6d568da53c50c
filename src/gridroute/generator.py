"""
Main diagram generator module.

Combines parsing, grid layout, connector routing and rendering to produce
SVG or PNG diagrams from a plain text description.
"""

from pathlib import Path
from typing import Optional

from .export import DiagramExporter
from .layout import GridLayout, LayoutResult
from .models import GeometryConfig
from .parser import Parser
from .svg_renderer import SVGRenderer
from .tracer import RouteTrace


class GridDiagram:
    """
    Generate grid diagrams with rounded orthogonal connectors.

    Example:
        >>> diagram = GridDiagram(cell_width=160)
        >>> svg = diagram.generate('''
        ...     A: 0, 0
        ...     B: 1, 0
        ...     A -> B
        ... ''')
    """

    def __init__(
        self,
        cell_width: float = 150,
        cell_height: float = 100,
        node_width: float = 120,
        node_height: float = 80,
        margin_x: float = 0,
        margin_y: float = 0,
        clearance_distance: float = 10,
        stroke_width: float = 1,
        arrow_size: float = 5,
        show_grid: bool = False,
        width: Optional[float] = None,
        height: Optional[float] = None,
        title: Optional[str] = None,
    ):
        """
        Initialize the diagram generator.

        Args:
            cell_width: Width of one grid cell
            cell_height: Height of one grid cell
            node_width: Width of node boxes
            node_height: Height of node boxes
            margin_x: Horizontal offset of the grid
            margin_y: Vertical offset of the grid
            clearance_distance: Distance a connector runs before its first turn
            stroke_width: Connector stroke width
            arrow_size: Arrowhead size in stroke widths
            show_grid: Whether to draw cell boundaries
            width: Surface width (defaults to the grid bounds)
            height: Surface height (defaults to the grid bounds)
            title: Optional title embedded in SVG output
        """
        self.config = GeometryConfig(
            cell_width=cell_width,
            cell_height=cell_height,
            node_width=node_width,
            node_height=node_height,
            margin_x=margin_x,
            margin_y=margin_y,
            clearance_distance=clearance_distance,
            stroke_width=stroke_width,
            arrow_size=arrow_size,
        )
        self.show_grid = show_grid
        self.width = width
        self.height = height
        self.title = title

        self.parser = Parser()
        self.layout_engine = GridLayout(self.config)
        self._trace: Optional[RouteTrace] = None

    def layout(self, input_text: str, debug: bool = False) -> LayoutResult:
        """
        Parse input text and run a full layout pass.

        Args:
            input_text: Node declarations and connectors
            debug: Record a RouteTrace, available through get_trace()

        Returns:
            LayoutResult with node boxes and connector routes
        """
        trace = RouteTrace(input_text=input_text) if debug else None
        parsed = self.parser.parse(input_text)

        if trace is not None:
            trace.add_stage(
                "parse",
                {
                    "nodes": [n.id for n in parsed.nodes],
                    "connectors": [(c.source, c.target) for c in parsed.connectors],
                },
            )

        result = self.layout_engine.layout(parsed.nodes, parsed.connectors, trace)
        self._trace = trace
        return result

    def generate(self, input_text: str, debug: bool = False) -> str:
        """
        Generate an SVG diagram from input text.

        Args:
            input_text: Node declarations and connectors
            debug: Record a RouteTrace, available through get_trace()

        Returns:
            SVG markup as a string
        """
        result = self.layout(input_text, debug=debug)
        renderer = SVGRenderer(
            width=self.width,
            height=self.height,
            show_grid=self.show_grid,
            title=self.title,
        )
        return renderer.render(result)

    def get_trace(self) -> Optional[RouteTrace]:
        """Trace of the last layout run with debug=True, else None."""
        return self._trace

    def save_svg(self, input_text: str, filename: str) -> None:
        """Generate and save a diagram as an SVG file."""
        Path(filename).write_text(self.generate(input_text), encoding="utf-8")

    def save_png(
        self,
        input_text: str,
        filename: str,
        scale: int = 2,
        font: Optional[str] = None,
    ) -> None:
        """Generate and save a diagram as a PNG image."""
        exporter = DiagramExporter(
            show_grid=self.show_grid,
            title=self.title,
            width=self.width,
            height=self.height,
        )
        exporter.save_png(self.layout(input_text), filename, scale=scale, font=font)

    def save(self, input_text: str, filename: str) -> None:
        """
        Save a diagram, choosing the format from the file extension.

        Raises:
            ValueError: If the extension is not .svg or .png
        """
        suffix = Path(filename).suffix.lower()
        if suffix == ".svg":
            self.save_svg(input_text, filename)
        elif suffix == ".png":
            self.save_png(input_text, filename)
        else:
            raise ValueError(
                f"Unsupported output format '{suffix}': use .svg or .png"
            )
