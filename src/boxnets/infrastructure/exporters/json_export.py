"""JSON exporter for box nets.

Exports the raw segment list with the sheet size and a schema version, for
downstream tools and for comparing nets between versions.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from boxnets.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from boxnets.application.dtos import NetOutput


logger = logging.getLogger(__name__)


# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonNetExporter:
    """JSON exporter for box nets.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: NetOutput, path: Path) -> None:
        """Export the net to a JSON file."""
        if output.drawing.is_empty:
            logger.warning("Net has no segments")
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.debug(f"Saved JSON to {path}")

    def export_string(self, output: NetOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)

    def to_dict(self, output: NetOutput) -> dict[str, Any]:
        """Build the JSON-serializable document for a net."""
        sheet = output.sheet_size
        return {
            "schema_version": SCHEMA_VERSION,
            "variant": output.variant,
            "sheet": {"width": sheet.x, "height": sheet.y, "unit": "mm"},
            "max": {"x": output.drawing.max.x, "y": output.drawing.max.y},
            "segments": [
                {
                    "start": [s.start.x, s.start.y],
                    "end": [s.end.x, s.end.y],
                    "cut_type": s.cut_type.value,
                }
                for s in output.drawing.segments
            ],
            "warnings": list(output.warnings),
        }
