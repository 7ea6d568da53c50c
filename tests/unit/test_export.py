"""Unit tests for the export module."""

import os
import tempfile

from PIL import Image

from gridroute.export import DiagramExporter
from gridroute.layout import compute_layout
from gridroute.models import Connector, Node


def make_result():
    return compute_layout(
        [Node("A", 0, 0), Node("B", 1, 1)], [Connector("A", "B")]
    )


class TestDiagramExporter:
    """Tests for DiagramExporter."""

    def test_save_svg(self):
        """Test saving an SVG with grid and title."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "out.svg")
            DiagramExporter(show_grid=True, title="T").save_svg(make_result(), path)
            with open(path, encoding="utf-8") as f:
                content = f.read()
            assert content.startswith("<svg")
            assert "<title>T</title>" in content
            assert 'class="grid"' in content
            assert " A 5 5 0 0 " in content

    def test_save_png(self):
        """Test saving a PNG at a custom scale."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "out.png")
            DiagramExporter().save_png(make_result(), path, scale=3)
            with Image.open(path) as img:
                assert img.size == (900, 600)

    def test_surface_size_override(self):
        """Test width and height overrides reach both output formats."""
        exporter = DiagramExporter(width=400, height=250)
        with tempfile.TemporaryDirectory() as tmpdir:
            png_path = os.path.join(tmpdir, "out.png")
            exporter.save_png(make_result(), png_path, scale=1)
            with Image.open(png_path) as img:
                assert img.size == (400, 250)

            svg_path = os.path.join(tmpdir, "out.svg")
            exporter.save_svg(make_result(), svg_path)
            with open(svg_path, encoding="utf-8") as f:
                assert 'viewBox="0 0 400 250"' in f.read()
