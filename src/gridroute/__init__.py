"""
GridRoute - Grid diagrams with rounded orthogonal connectors

A Python library that places nodes on a uniform grid and routes orthogonal,
collision-avoiding connectors between them with arc-rounded corners.

Example:
    >>> from gridroute import GridDiagram
    >>> diagram = GridDiagram()
    >>> svg = diagram.generate('''
    ...     A: 0, 0
    ...     B: 1, 0
    ...     A -> B
    ... ''')

Library Example:
    >>> from gridroute import Connector, Node, compute_layout
    >>> result = compute_layout([Node("A", 0, 0), Node("B", 1, 0)],
    ...                         [Connector("A", "B")])
    >>> result.routes[0].path
    'M 120 40 L 147.5 40'
"""

from .export import DiagramExporter
from .generator import GridDiagram
from .grid_index import GridIndex
from .layout import ConnectorRoute, GridLayout, LayoutResult, compute_layout
from .models import Connector, GeometryConfig, LayoutBox, Node
from .parser import ParseError, ParseResult, Parser, parse_diagram
from .png_renderer import PNGRenderer, render_to_png
from .ports import PortSide, pick_anchor_pair
from .positioning import absolute_position
from .router import PlannedRoute, RouteKind, RoutePlanner
from .smoothing import ArcTo, LineTo, MoveTo, smooth_corners, to_svg_path
from .svg_renderer import SVGRenderer, render_to_svg
from .tracer import RouteDecision, RouteTrace

__version__ = "0.1.0"

__all__ = [
    # Main API
    "GridDiagram",
    "compute_layout",
    # Models
    "Node",
    "Connector",
    "LayoutBox",
    "GeometryConfig",
    # Parser
    "Parser",
    "ParseError",
    "ParseResult",
    "parse_diagram",
    # Layout and routing
    "GridLayout",
    "LayoutResult",
    "ConnectorRoute",
    "GridIndex",
    "absolute_position",
    "PortSide",
    "pick_anchor_pair",
    "RoutePlanner",
    "PlannedRoute",
    "RouteKind",
    # Corner smoothing
    "MoveTo",
    "LineTo",
    "ArcTo",
    "smooth_corners",
    "to_svg_path",
    # Rendering and export
    "SVGRenderer",
    "render_to_svg",
    "PNGRenderer",
    "render_to_png",
    "DiagramExporter",
    # Debug/Tracing
    "RouteTrace",
    "RouteDecision",
]
