"""Exporter framework for box nets.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Writes one net to several formats

Registered exporters:
- dxf: DXF with CUT and BEND layers
- json: Segment list with sheet size
- svg: Millimetre-scaled SVG for laser cutters

Usage:
    from boxnets.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    manager = ExportManager(output_dir=Path("."))
    results = manager.export_all(["svg", "dxf"], net_output, "shoebox.svg")
"""

from boxnets.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from boxnets.infrastructure.exporters.dxf import DxfExporter
from boxnets.infrastructure.exporters.json_export import JsonNetExporter
from boxnets.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonNetExporter",
    "SvgExporter",
]
