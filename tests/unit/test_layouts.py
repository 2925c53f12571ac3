"""Unit tests for the box variant layout procedures.

Mirror-image panels are always derived from one panel value, so the nets of
the cuboid box, the cube box and the lid are symmetric about a vertical axis.
The symmetry checks below catch any panel whose twin was computed by hand.
"""

from __future__ import annotations

import pytest

from boxnets.domain import (
    LAYOUTS,
    Anchor,
    BoxParameters,
    CubeBoxLayout,
    CuboidBoxLayout,
    CutType,
    Drawing,
    LidLayout,
    LidParameters,
    LidType,
    NetLayout,
    Point2D,
    Segment,
    VinylBoxLayout,
)
from boxnets.domain.services.vinyl import HANDLE_MIN_WIDTH


def _key(segment: Segment, axis2: float | None = None) -> tuple:
    """Direction-independent key of a segment, optionally mirrored at axis2 / 2."""
    points = [segment.start, segment.end]
    if axis2 is not None:
        points = [Point2D(axis2 - p.x, p.y) for p in points]
    ends = sorted((round(p.x, 6), round(p.y, 6)) for p in points)
    return (tuple(ends), segment.cut_type)


def assert_mirror_symmetric(drawing: Drawing) -> None:
    xs = [p.x for s in drawing.segments for p in (s.start, s.end)]
    axis2 = min(xs) + max(xs)
    keys = {_key(s) for s in drawing.segments}
    mirrored = {_key(s, axis2) for s in drawing.segments}
    assert keys == mirrored


def assert_within_bounds(drawing: Drawing) -> None:
    for s in drawing.segments:
        for p in (s.start, s.end):
            assert 0 <= p.x <= drawing.max.x
            assert 0 <= p.y <= drawing.max.y


class TestParameters:
    """Tests for the layout parameter objects."""

    def test_thick_n(self, box_params: BoxParameters) -> None:
        assert box_params.thick_n(3) == 6.0
        assert box_params.thick_n(0) == 0.0

    def test_thickness_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="thickness"):
            BoxParameters(100, 50, 50, 30, 20, thickness=0)
        with pytest.raises(ValueError, match="thickness"):
            LidParameters(100, 50, 30, 20, thickness=-1)

    def test_vinyl_sizes_are_fixed(self) -> None:
        params = BoxParameters.for_vinyl(
            width=100, lid_height=35, glue_flap=40, thickness=2
        )
        assert params.length == 338
        assert params.height == 336
        assert params.width == 100


class TestRegistry:
    """Tests for the LAYOUTS registry."""

    def test_all_variants_registered(self) -> None:
        assert set(LAYOUTS) == {"box-cuboid", "box-cube", "lid", "vinyl"}

    @pytest.mark.parametrize("name", ["box-cuboid", "box-cube", "lid", "vinyl"])
    def test_registry_entries_are_layouts(self, name: str) -> None:
        layout_cls = LAYOUTS[name]
        assert issubclass(layout_cls, NetLayout)
        assert layout_cls.name == name
        assert layout_cls.default_file_name.endswith(".svg")


class TestCuboidBoxLayout:
    """Tests for the cuboid box with a telescoping lid."""

    def test_start_cursor_leaves_room_for_side_wall(
        self, box_params: BoxParameters
    ) -> None:
        assert CuboidBoxLayout(box_params).start_cursor() == Anchor(60, 10)

    def test_bounding_max(self, box_params: BoxParameters) -> None:
        drawing = CuboidBoxLayout(box_params).draw()
        assert drawing.max == Point2D(308, 380)

    def test_segment_count(self, box_params: BoxParameters) -> None:
        drawing = CuboidBoxLayout(box_params).draw()
        assert len(drawing.segments) == 83

    def test_only_renderable_segments(self, box_params: BoxParameters) -> None:
        drawing = CuboidBoxLayout(box_params).draw()
        assert drawing.segments_of(CutType.NOPE) == []
        assert drawing.segments_of(CutType.CUT)
        assert drawing.segments_of(CutType.BEND)

    def test_net_is_mirror_symmetric(self, box_params: BoxParameters) -> None:
        assert_mirror_symmetric(CuboidBoxLayout(box_params).draw())

    def test_leftmost_edge_is_side_wall(self, box_params: BoxParameters) -> None:
        drawing = CuboidBoxLayout(box_params).draw()
        min_x = min(p.x for s in drawing.segments for p in (s.start, s.end))
        assert min_x == 10 + box_params.thickness

    def test_within_bounds(self, box_params: BoxParameters) -> None:
        assert_within_bounds(CuboidBoxLayout(box_params).draw())

    def test_draw_is_repeatable(self, box_params: BoxParameters) -> None:
        layout = CuboidBoxLayout(box_params)
        assert layout.draw() == layout.draw()

    def test_overlapping_glue_flaps_raise(self) -> None:
        params = BoxParameters(
            length=100, width=50, height=50, lid_height=30, glue_flap=60, thickness=2
        )
        with pytest.raises(ValueError):
            CuboidBoxLayout(params).draw()


class TestCubeBoxLayout:
    """Tests for the box with a hinged lid."""

    def test_start_cursor(self, box_params: BoxParameters) -> None:
        assert CubeBoxLayout(box_params).start_cursor() == Anchor(160, 10)

    def test_net_is_mirror_symmetric(self, box_params: BoxParameters) -> None:
        assert_mirror_symmetric(CubeBoxLayout(box_params).draw())

    def test_within_bounds(self, box_params: BoxParameters) -> None:
        assert_within_bounds(CubeBoxLayout(box_params).draw())

    def test_corner_cut_size(self, box_params: BoxParameters) -> None:
        cut = CubeBoxLayout(box_params).corner_cut()
        assert (cut.width, cut.height) == (4, 2)


class TestLidLayout:
    """Tests for the lid of an existing box."""

    def test_joined_bounding_max(self, lid_params: LidParameters) -> None:
        drawing = LidLayout(lid_params).draw()
        assert drawing.max == Point2D(286, 186)

    @pytest.mark.parametrize(
        "lid_type,expected",
        [(LidType.JOINED, 32), (LidType.GLUED, 40), (LidType.SEPARATED, 54)],
    )
    def test_segment_count_per_lid_type(
        self, lid_params: LidParameters, lid_type: LidType, expected: int
    ) -> None:
        params = LidParameters(**{**lid_params.__dict__, "lid_type": lid_type})
        assert len(LidLayout(params).draw().segments) == expected

    @pytest.mark.parametrize("lid_type", list(LidType))
    @pytest.mark.parametrize("fat", [False, True])
    def test_net_is_mirror_symmetric(
        self, lid_params: LidParameters, lid_type: LidType, fat: bool
    ) -> None:
        params = LidParameters(
            **{**lid_params.__dict__, "lid_type": lid_type, "fat": fat}
        )
        assert_mirror_symmetric(LidLayout(params).draw())

    def test_lid_dimensions(self, lid_params: LidParameters) -> None:
        layout = LidLayout(lid_params)
        assert layout.lid_length == 204
        assert layout.lid_width == 104

        fat = LidLayout(LidParameters(**{**lid_params.__dict__, "fat": True}))
        assert fat.lid_length == 208

        separated = LidLayout(
            LidParameters(**{**lid_params.__dict__, "lid_type": LidType.SEPARATED})
        )
        assert separated.lid_width == 108

    def test_draw_from_returns_cursor_below_lid(
        self, lid_params: LidParameters
    ) -> None:
        cursor, drawing = LidLayout(lid_params).draw_from(Anchor(50, 10))
        assert cursor == Anchor(50, 186)
        assert len(drawing.segments) == 32

    def test_draw_from_separated(self, lid_params: LidParameters) -> None:
        params = LidParameters(
            **{**lid_params.__dict__, "lid_type": LidType.SEPARATED}
        )
        cursor, _ = LidLayout(params).draw_from(Anchor(50, 10))
        assert cursor == Anchor(50, 262)

    def test_draw_from_appends_to_another_net(
        self, box_params: BoxParameters, lid_params: LidParameters
    ) -> None:
        box = CuboidBoxLayout(box_params).draw()
        start = Anchor(60, box.max.y)
        _, lid = LidLayout(lid_params).draw_from(start)

        combined = Drawing()
        combined.append(box)
        combined.append(lid)
        assert len(combined.segments) == 83 + 32
        assert combined.max.y > box.max.y


class TestVinylBoxLayout:
    """Tests for the record box."""

    def test_draws_net(self, vinyl_params: BoxParameters) -> None:
        drawing = VinylBoxLayout(vinyl_params).draw()
        assert not drawing.is_empty
        assert drawing.segments_of(CutType.NOPE) == []

    def test_handle_top_offset(self, vinyl_params: BoxParameters) -> None:
        assert VinylBoxLayout(vinyl_params).handle_top_offset == 35
        high_lid = BoxParameters.for_vinyl(
            width=100, lid_height=50, glue_flap=40, thickness=2
        )
        assert VinylBoxLayout(high_lid).handle_top_offset == 50

    def test_handle_hole_is_centred(self, vinyl_params: BoxParameters) -> None:
        layout = VinylBoxLayout(vinyl_params)
        offset, hole = layout.handle_hole(horizontal=True)
        assert offset == 25
        assert (hole.width, hole.height) == (50, 25)

        offset, hole = layout.handle_hole(horizontal=False)
        assert (hole.width, hole.height) == (25, 50)

    def test_handle_width_is_clamped(self) -> None:
        narrow = BoxParameters.for_vinyl(width=40, lid_height=35, glue_flap=10, thickness=2)
        _, hole = VinylBoxLayout(narrow).handle_hole(horizontal=True)
        assert hole.width == HANDLE_MIN_WIDTH

        wide = BoxParameters.for_vinyl(width=200, lid_height=35, glue_flap=40, thickness=2)
        _, hole = VinylBoxLayout(wide).handle_hole(horizontal=True)
        assert hole.width == 80

    def test_very_wide_box_has_no_handles(self, vinyl_params: BoxParameters) -> None:
        wide = BoxParameters.for_vinyl(width=300, lid_height=35, glue_flap=40, thickness=2)
        with_handles = VinylBoxLayout(vinyl_params).draw()
        without_handles = VinylBoxLayout(wide).draw()
        # Four handle holes of four cut edges each
        assert len(with_handles.segments) - len(without_handles.segments) == 16

    def test_draw_is_repeatable(self, vinyl_params: BoxParameters) -> None:
        layout = VinylBoxLayout(vinyl_params)
        assert layout.draw() == layout.draw()
