"""Pytest configuration and shared fixtures for gridroute tests."""

import pytest

from gridroute import Connector, GeometryConfig, GridDiagram, Node


@pytest.fixture
def config():
    """Default geometry configuration."""
    return GeometryConfig()


@pytest.fixture
def no_arrow_config():
    """Geometry without arrow clearance, so routes are exactly reversible."""
    return GeometryConfig(arrow_size=0)


@pytest.fixture
def column_nodes():
    """Three nodes stacked in column 0, declared out of row order."""
    return [Node("A", 0, 0), Node("B", 0, 2), Node("C", 0, 1)]


@pytest.fixture
def row_nodes():
    """Three nodes side by side in row 0."""
    return [Node("A", 0, 0), Node("C", 1, 0), Node("B", 2, 0)]


@pytest.fixture
def mixed_nodes():
    """A small grid with nodes in several columns and rows."""
    return [
        Node("Start", 0, 0),
        Node("Check", 1, 0),
        Node("Retry", 1, 1),
        Node("Store", 2, 1),
        Node("Done", 3, 0),
        Node("Audit", 0, 2),
    ]


@pytest.fixture
def mixed_connectors():
    """Connectors exercising every branch of the planner."""
    return [
        Connector("Start", "Check"),
        Connector("Check", "Retry"),
        Connector("Retry", "Start"),
        Connector("Check", "Store", color="#cc0000"),
        Connector("Start", "Done"),
        Connector("Start", "Audit"),
        Connector("Audit", "Store"),
        Connector("Store", "Start"),
        Connector("Done", "Audit"),
    ]


@pytest.fixture
def simple_input():
    """Two nodes in one row, one connector."""
    return """
    A: 0, 0
    B: 1, 0
    A -> B
    """


@pytest.fixture
def complex_input():
    """Text input with a detour, a diagonal and a dangling connector."""
    return """
    # pipeline
    Extract: 0, 0
    Transform: 0, 1
    Load: 0, 2
    Report & Audit: 2, 1

    Extract -> Transform
    Transform -> Load
    Extract -> Load [#336699]
    Load -> Report & Audit
    Load -> Missing
    """


@pytest.fixture
def diagram():
    """Default GridDiagram instance."""
    return GridDiagram()
