"""Unit tests for DxfExporter."""

import tempfile
from io import StringIO
from pathlib import Path

import ezdxf
import pytest
from ezdxf import units

from boxnets.application.dtos import NetOutput
from boxnets.infrastructure.exporters import DxfExporter


def _read(content: str):
    return ezdxf.read(StringIO(content))


class TestDxfExporter:
    """Tests for DXF generation."""

    def test_units_are_millimetres(self, flap_output: NetOutput) -> None:
        doc = _read(DxfExporter().export_string(flap_output))
        assert doc.units == units.MM

    def test_cut_and_bend_layers(self, flap_output: NetOutput) -> None:
        doc = _read(DxfExporter().export_string(flap_output))
        assert doc.layers.has_entry("CUT")
        assert doc.layers.has_entry("BEND")

    def test_one_line_per_segment(self, flap_output: NetOutput) -> None:
        doc = _read(DxfExporter().export_string(flap_output))
        lines = list(doc.modelspace().query("LINE"))

        assert len(lines) == 3
        assert [line.dxf.layer for line in lines] == ["CUT", "BEND", "CUT"]

    def test_y_axis_is_flipped(self, flap_output: NetOutput) -> None:
        doc = _read(DxfExporter().export_string(flap_output))
        first = list(doc.modelspace().query("LINE"))[0]

        # Sheet is 70 mm high, the top edge sits at y=10 in sheet coordinates
        assert (first.dxf.start.x, first.dxf.start.y) == pytest.approx((10, 60))
        assert (first.dxf.end.x, first.dxf.end.y) == pytest.approx((110, 60))

    def test_export_writes_readable_file(self, flap_output: NetOutput) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "lid.dxf"
            DxfExporter().export(flap_output, path)

            doc = ezdxf.readfile(path)
            assert len(doc.modelspace().query("LINE")) == 3
