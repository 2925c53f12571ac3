"""DXF format exporter for box nets.

Generates 2D DXF files (R2010 format) in millimetres for laser software that
prefers CAD input over SVG. Cut and bend lines go to separate layers.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units

from boxnets.domain.value_objects import CutType
from boxnets.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from boxnets.application.dtos import NetOutput


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    CutType.CUT: {"name": "CUT", "color": 7},  # White/black - cut through
    CutType.BEND: {"name": "BEND", "color": 3},  # Green - score line
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports box nets to DXF, one LINE entity per segment.

    DXF has its y axis pointing up, so y coordinates are flipped against the
    sheet height to keep the net the same way round as the SVG.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def export(self, output: NetOutput, path: Path) -> None:
        """Export the net to a DXF file."""
        if output.drawing.is_empty:
            logger.warning("Net has no segments, writing an empty DXF")
        doc = self._build_document(output)
        doc.saveas(path)
        logger.debug(f"Saved DXF to {path}")

    def export_string(self, output: NetOutput) -> str:
        """Export the net as DXF text."""
        doc = self._build_document(output)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _build_document(self, output: NetOutput) -> Drawing:
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        for props in LAYERS.values():
            doc.layers.add(props["name"], color=props["color"])
        self._draw_segments(doc.modelspace(), output)
        return doc

    def _draw_segments(self, msp: Modelspace, output: NetOutput) -> None:
        sheet_height = output.sheet_size.y
        for segment in output.drawing.segments:
            msp.add_line(
                (segment.start.x, sheet_height - segment.start.y),
                (segment.end.x, sheet_height - segment.end.y),
                dxfattribs={"layer": LAYERS[segment.cut_type]["name"]},
            )
