"""
File export functionality for parsed diagrams.

This module handles exporting a parsed diagram to files:
- Text files (.txt) - the structured dump followed by the plain diagram
- PNG images - the diagram drawn in a monospace font, with connectors,
  boxes and an optional focus box in their own colors

The DiagramExporter class handles font loading, image rendering and file I/O.
"""

from pathlib import Path
from typing import Dict, Optional

from PIL import Image, ImageDraw, ImageFont

from .colorize import format_dump
from .models import TBox
from .parser import CellStyle, ParseResult

PNG_COLORS: Dict[CellStyle, str] = {
    CellStyle.FOCUS: "#AA00AA",
    CellStyle.EDGE: "#B8860B",
    CellStyle.BOX: "#1F4FBF",
    CellStyle.PLAIN: "#000000",
}


class DiagramExporter:
    """
    Exports parsed diagrams to text and PNG files.

    Attributes:
        default_font: Default font name for PNG export.
    """

    def __init__(self, default_font: Optional[str] = None):
        """
        Initialize the exporter.

        Args:
            default_font: Default font name for PNG export (e.g., "Cascadia Code").
        """
        self.default_font = default_font

    def save_txt(self, result: ParseResult, filename: str) -> None:
        """
        Save the structured dump and the plain diagram to a text file.

        Args:
            result: Parse result to save.
            filename: Output filename (should end in .txt).
        """
        output_path = Path(filename)
        output_path.write_text(
            format_dump(result) + "\n" + result.grid.render() + "\n",
            encoding="utf-8",
        )

    def save_png(
        self,
        result: ParseResult,
        filename: str,
        font_size: int = 16,
        bg_color: str = "#FFFFFF",
        colors: Optional[Dict[CellStyle, str]] = None,
        padding: int = 20,
        font: Optional[str] = None,
        scale: int = 2,
        focus: Optional[TBox] = None,
    ) -> None:
        """
        Save the diagram as a PNG image with highlighted boxes and connectors.

        Characters are placed on a fixed cell grid so the layout matches the
        text exactly, whatever the font's glyph widths.

        Args:
            result: Parse result to render.
            filename: Output filename (should end in .png).
            font_size: Font size in points (higher = higher resolution).
            bg_color: Background color as hex string.
            colors: Text color per cell style; missing entries fall back to
                    PNG_COLORS.
            padding: Padding around the diagram in pixels.
            font: Font name to use (overrides default_font if provided).
            scale: Resolution multiplier for crisp output.
            focus: Optional box drawn in the focus color.
        """
        palette = dict(PNG_COLORS)
        if colors:
            palette.update(colors)

        font_name = font or self.default_font
        loaded_font = self._load_monospace_font(font_size * scale, font_name)

        # Reference character for the cell size
        bbox = loaded_font.getbbox("M")
        char_width = max(bbox[2] - bbox[0], 1)
        char_height = max(bbox[3] - bbox[1], 1)
        line_height = int(char_height * 1.2) + 1

        scaled_padding = padding * scale
        grid = result.grid
        img_width = char_width * grid.width + scaled_padding * 2
        img_height = line_height * grid.height + scaled_padding * 2

        img_width = max(img_width, 100 * scale)
        img_height = max(img_height, 100 * scale)

        img = Image.new("RGB", (img_width, img_height), bg_color)
        draw = ImageDraw.Draw(img)

        for p, glyph in grid.cells():
            if glyph.isspace():
                continue
            style = result.style_at(p, focus=focus)
            x = scaled_padding + p.col * char_width
            y = scaled_padding + p.row * line_height
            draw.text((x, y), glyph, font=loaded_font, fill=palette[style])

        img.save(Path(filename), "PNG")

    def _load_monospace_font(
        self, font_size: int, font_name: Optional[str] = None
    ) -> ImageFont.FreeTypeFont:
        """
        Load a monospace font for PNG rendering.

        Tries the user-specified font, then common system monospace fonts,
        then Pillow's default font.
        """
        fonts_to_try = []
        if font_name:
            fonts_to_try.append(font_name)

        fonts_to_try.extend(
            [
                # Linux
                "DejaVuSansMono",
                "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
                "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
                # macOS
                "Menlo",
                "/System/Library/Fonts/Menlo.ttc",
                # Windows
                "Consolas",
                "C:/Windows/Fonts/consola.ttf",
            ]
        )

        for candidate in fonts_to_try:
            try:
                return ImageFont.truetype(candidate, font_size)
            except OSError:
                continue

        try:
            return ImageFont.load_default(size=font_size)
        except TypeError:
            # Older Pillow versions don't support size parameter
            return ImageFont.load_default()


def render_to_png(result: ParseResult, output_path: str, **kwargs) -> str:
    """
    Convenience function to render a parsed diagram to PNG.

    Args:
        result: Parse result to render.
        output_path: Path to save the PNG file.
        **kwargs: Additional parameters for DiagramExporter.save_png.

    Returns:
        Path to the saved PNG file.
    """
    DiagramExporter().save_png(result, output_path, **kwargs)
    return output_path
