"""SVG exporter for laser cutter input.

The canvas is sized in millimetres so laser software imports the net at
real scale. Cut lines are black and bend lines green; most laser software
maps stroke colours to power settings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from boxnets.domain.value_objects import CutType, Segment
from boxnets.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from boxnets.application.dtos import NetOutput


logger = logging.getLogger(__name__)

STROKE_COLORS = {
    CutType.CUT: "black",
    CutType.BEND: "green",
}
STROKE_WIDTH = 0.2


def _fmt(value: float) -> str:
    """Shortest decimal form of a coordinate, without a trailing ``.0``."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for box nets.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(self, stroke_width: float = STROKE_WIDTH) -> None:
        self.stroke_width = stroke_width

    def export(self, output: NetOutput, path: Path) -> None:
        """Write the net to an SVG file."""
        if output.drawing.is_empty:
            logger.warning("Net has no segments, writing an empty sheet")
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.debug(f"Saved SVG to {path}")

    def export_string(self, output: NetOutput) -> str:
        """Render the net as an SVG document.

        Args:
            output: The net to render.

        Returns:
            SVG content with one ``<path>`` per segment.
        """
        sheet = output.sheet_size
        width, height = _fmt(sheet.x), _fmt(sheet.y)
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'width="{width}mm" height="{height}mm" '
            f'viewBox="0 0 {width} {height}">',
        ]
        lines.extend(self._render_segment(s) for s in output.drawing.segments)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def _render_segment(self, segment: Segment) -> str:
        start, end = segment.start, segment.end
        data = f"M{_fmt(start.x)},{_fmt(start.y)} L{_fmt(end.x)},{_fmt(end.y)}"
        return (
            f'  <path d="{data}" fill="none" '
            f'stroke="{STROKE_COLORS[segment.cut_type]}" '
            f'stroke-width="{_fmt(self.stroke_width)}"/>'
        )
