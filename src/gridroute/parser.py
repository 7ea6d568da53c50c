"""
Parser module for grid diagrams.

Handles parsing of input text into grid-positioned nodes and connectors:

    # comment
    Load: 0, 0
    Store: 1, 0
    Load -> Store [#336699]
"""

import re
from dataclasses import dataclass, field
from typing import List, Set

from PIL import ImageColor

from .models import Connector, Node


class ParseError(Exception):
    """Raised when input parsing fails."""

    pass


@dataclass
class ParseResult:
    """Result of parsing input text."""

    nodes: List[Node] = field(default_factory=list)
    connectors: List[Connector] = field(default_factory=list)


class Parser:
    """Parses diagram input text into nodes and connectors."""

    # Node declaration: NAME: col, row
    NODE_PATTERN = re.compile(r"^([^:]+):\s*([^,]+),\s*(.+)$")
    # Connector: SOURCE -> TARGET [color]
    CONNECTOR_PATTERN = re.compile(r"^(.*?)\s*->\s*(.*?)\s*(?:\[([^\]]*)\])?$")

    def parse(self, input_text: str) -> ParseResult:
        """
        Parse input text into nodes and connectors.

        Connectors may name nodes that are never declared; they are kept and
        later route to an empty path.

        Args:
            input_text: Multi-line string of node declarations and connectors

        Returns:
            ParseResult with nodes and connectors in source order

        Raises:
            ParseError: If input format is invalid
        """
        nodes: List[Node] = []
        connectors: List[Connector] = []
        seen: Set[str] = set()

        for line_num, line in enumerate(input_text.strip().split("\n"), 1):
            stripped = line.strip()

            # Skip empty lines and comments
            if not stripped or stripped.startswith("#"):
                continue

            if "->" in stripped:
                connectors.append(self._parse_connector(line_num, stripped))
                continue

            node = self._parse_node(line_num, stripped)
            if node.id in seen:
                raise ParseError(f"Line {line_num}: Duplicate node '{node.id}'")
            seen.add(node.id)
            nodes.append(node)

        if not nodes:
            raise ParseError("No node declarations found in input")

        return ParseResult(nodes=nodes, connectors=connectors)

    def _parse_node(self, line_num: int, line: str) -> Node:
        match = self.NODE_PATTERN.match(line)
        if not match:
            raise ParseError(
                f"Line {line_num}: Expected 'NAME: col, row' or 'A -> B': {line}"
            )

        name = match.group(1).strip()
        if not name:
            raise ParseError(f"Line {line_num}: Empty node name")

        col = self._parse_index(line_num, "column", match.group(2))
        row = self._parse_index(line_num, "row", match.group(3))
        return Node(id=name, col=col, row=row)

    def _parse_index(self, line_num: int, what: str, text: str) -> int:
        text = text.strip()
        try:
            value = int(text)
        except ValueError:
            raise ParseError(
                f"Line {line_num}: Invalid {what} '{text}', expected an integer"
            ) from None
        if value < 0:
            raise ParseError(f"Line {line_num}: Negative {what} {value}")
        return value

    def _parse_connector(self, line_num: int, line: str) -> Connector:
        if line.count("->") != 1:
            raise ParseError(f"Line {line_num}: Invalid connection format: {line}")

        match = self.CONNECTOR_PATTERN.match(line)
        if not match:
            raise ParseError(f"Line {line_num}: Invalid connection format: {line}")

        source = match.group(1).strip()
        target = match.group(2).strip()
        color = (match.group(3) or "").strip() or None

        if not source:
            raise ParseError(f"Line {line_num}: Empty source node")
        if not target:
            raise ParseError(f"Line {line_num}: Empty target node")
        if color is not None:
            try:
                ImageColor.getrgb(color)
            except ValueError:
                raise ParseError(f"Line {line_num}: Invalid color '{color}'") from None

        return Connector(source=source, target=target, color=color)


def parse_diagram(input_text: str) -> ParseResult:
    """
    Convenience function to parse diagram input.

    Args:
        input_text: Multi-line string of nodes and connectors

    Returns:
        ParseResult with nodes and connectors
    """
    parser = Parser()
    return parser.parse(input_text)
