"""Unit tests for the models module."""

import pytest

from gridroute.models import Connector, GeometryConfig, LayoutBox, Node


class TestNode:
    """Tests for Node dataclass."""

    def test_node_creation(self):
        """Test creating a node."""
        node = Node("A", 2, 3)
        assert node.id == "A"
        assert node.col == 2
        assert node.row == 3
        assert node.payload == {}

    def test_label_defaults_to_id(self):
        """Test the label falls back to the id."""
        assert Node("A", 0, 0).label == "A"

    def test_label_from_payload(self):
        """Test the label comes from the payload."""
        node = Node("a1", 0, 0, payload={"label": "Fetch"})
        assert node.label == "Fetch"

    def test_payload_ignored_in_equality(self):
        """Test payload does not affect node equality."""
        assert Node("A", 0, 0, payload={"x": 1}) == Node("A", 0, 0)


class TestConnector:
    """Tests for Connector dataclass."""

    def test_connector_defaults(self):
        """Test connector default values."""
        connector = Connector("A", "B")
        assert connector.source == "A"
        assert connector.target == "B"
        assert connector.color is None


class TestLayoutBox:
    """Tests for LayoutBox dataclass."""

    def test_derived_edges(self):
        """Test right, bottom and center of a box."""
        box = LayoutBox(left=10, top=20, width=120, height=80)
        assert box.right == 130
        assert box.bottom == 100
        assert box.center == (70, 60)


class TestGeometryConfig:
    """Tests for GeometryConfig."""

    def test_defaults(self):
        """Test default geometry values."""
        config = GeometryConfig()
        assert config.cell_width == 150
        assert config.cell_height == 100
        assert config.node_width == 120
        assert config.node_height == 80
        assert config.margin_x == 0
        assert config.margin_y == 0
        assert config.clearance_distance == 10
        assert config.stroke_width == 1
        assert config.arrow_size == 5
        assert config.max_corner_radius == 15

    def test_arrow_clearance(self):
        """Test arrow clearance from size and stroke."""
        assert GeometryConfig().arrow_clearance == 2.5
        assert GeometryConfig(stroke_width=2, arrow_size=6).arrow_clearance == 6

    def test_gaps(self):
        """Test the free space between cells."""
        config = GeometryConfig()
        assert config.gap_x == 30
        assert config.gap_y == 20

    def test_from_dict_empty(self):
        """Test an empty options dict gives defaults."""
        assert GeometryConfig.from_dict(None) == GeometryConfig()
        assert GeometryConfig.from_dict({}) == GeometryConfig()

    def test_from_dict_camel_case(self):
        """Test camelCase option names."""
        config = GeometryConfig.from_dict(
            {
                "cellWidth": 200,
                "nodeHeight": 60,
                "clearanceDistance": 12,
                "defaultStrokeWidth": 2,
                "arrowSize": 4,
            }
        )
        assert config.cell_width == 200
        assert config.node_height == 60
        assert config.clearance_distance == 12
        assert config.stroke_width == 2
        assert config.arrow_size == 4
        assert config.cell_height == 100

    def test_from_dict_snake_case(self):
        """Test snake_case option names."""
        config = GeometryConfig.from_dict({"cell_height": 90, "margin_x": 5})
        assert config.cell_height == 90
        assert config.margin_x == 5

    def test_from_dict_nested_margin(self):
        """Test a nested margin option."""
        config = GeometryConfig.from_dict({"margin": {"x": 15, "y": 25}})
        assert config.margin_x == 15
        assert config.margin_y == 25

    def test_from_dict_none_values_use_defaults(self):
        """Test None values fall back to defaults."""
        config = GeometryConfig.from_dict({"cellWidth": None})
        assert config.cell_width == 150

    def test_from_dict_unknown_option(self):
        """Test unknown options are rejected."""
        with pytest.raises(ValueError, match="Unknown geometry option"):
            GeometryConfig.from_dict({"cellDepth": 3})

    def test_from_dict_does_not_validate_ranges(self):
        """Test out-of-range values pass through."""
        config = GeometryConfig.from_dict({"cellWidth": -10})
        assert config.cell_width == -10
