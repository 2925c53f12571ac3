"""Infrastructure layer - file formats the nets are written to."""

from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonNetExporter,
    SvgExporter,
)

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonNetExporter",
    "SvgExporter",
]
