"""Tests for the export module."""

from PIL import Image

from boxtrace import parse_diagram
from boxtrace.export import PNG_COLORS, DiagramExporter, render_to_png
from boxtrace.parser import CellStyle


class TestSaveTxt:
    """Tests for DiagramExporter.save_txt."""

    def test_writes_dump_and_diagram(self, tmp_path, sample_text):
        """The text file holds the dump followed by the plain diagram."""
        out = tmp_path / "diagram.txt"
        DiagramExporter().save_txt(parse_diagram(sample_text), str(out))
        content = out.read_text(encoding="utf-8")
        assert content.startswith("BOXES [")
        assert " ,---.,-----------." in content
        assert "\x1b[" not in content


class TestSavePng:
    """Tests for DiagramExporter.save_png."""

    def test_creates_png(self, tmp_path, sample_text):
        """A PNG image is written."""
        out = tmp_path / "diagram.png"
        DiagramExporter().save_png(parse_diagram(sample_text), str(out))
        with Image.open(out) as img:
            assert img.format == "PNG"
            assert img.mode == "RGB"

    def test_minimum_size(self, tmp_path):
        """Tiny diagrams still get a reasonably sized image."""
        out = tmp_path / "tiny.png"
        DiagramExporter().save_png(parse_diagram("-"), str(out), scale=1)
        with Image.open(out) as img:
            assert img.size[0] >= 100
            assert img.size[1] >= 100

    def test_grows_with_diagram(self, tmp_path):
        """Wider diagrams give wider images."""
        small = tmp_path / "small.png"
        large = tmp_path / "large.png"
        exporter = DiagramExporter()
        exporter.save_png(parse_diagram("-" * 5), str(small), scale=1)
        exporter.save_png(parse_diagram("-" * 200), str(large), scale=1)
        with Image.open(small) as a, Image.open(large) as b:
            assert b.size[0] > a.size[0]

    def test_empty_diagram(self, tmp_path):
        """An empty diagram still produces an image."""
        out = tmp_path / "empty.png"
        DiagramExporter().save_png(parse_diagram(""), str(out))
        assert out.exists()

    def test_focus_and_colors(self, tmp_path, sample_text):
        """Focus box and custom colors are accepted."""
        result = parse_diagram(sample_text)
        out = tmp_path / "focus.png"
        DiagramExporter().save_png(
            result,
            str(out),
            colors={CellStyle.EDGE: "#FF0000"},
            focus=result.boxes[1],
        )
        assert out.exists()

    def test_unknown_font_falls_back(self, tmp_path):
        """A missing font name falls back to a system or default font."""
        out = tmp_path / "font.png"
        exporter = DiagramExporter(default_font="No Such Font 123")
        exporter.save_png(parse_diagram(",-.\n'-'"), str(out))
        assert out.exists()


class TestRenderToPng:
    """Tests for render_to_png."""

    def test_returns_path(self, tmp_path):
        """The output path is returned."""
        out = str(tmp_path / "out.png")
        assert render_to_png(parse_diagram(",-.\n'-'"), out) == out

    def test_palette_covers_styles(self):
        """Every cell style has a PNG color."""
        assert set(PNG_COLORS) == set(CellStyle)
