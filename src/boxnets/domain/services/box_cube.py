"""Net of a box whose lid is hinged on the back wall."""

from __future__ import annotations

from boxnets.domain.entities import Panel
from boxnets.domain.value_objects import SHEET_MARGIN, Anchor, Corner, CutType

from .base import BoxParameters, NetLayout

NOPE, CUT, BEND = CutType.NOPE, CutType.CUT, CutType.BEND


class CubeBoxLayout(NetLayout):
    """Box and lid drawn as one piece, the lid folding over from the back.

    Walls are sized a few thicknesses larger than the box so the lid's
    double walls wrap around the outside.
    """

    name = "box-cube"
    default_file_name = "LaserCutBoxCube.svg"

    params: BoxParameters

    def start_cursor(self) -> Anchor:
        p = self.params
        return Anchor(p.width + p.glue_flap + p.thick_n(5), 0.0).shift_xy(
            SHEET_MARGIN, SHEET_MARGIN
        )

    def draw_sections(self) -> None:
        self.draw_top_lid()
        self.draw_main_walls()

    def corner_cut(self) -> Panel:
        return Panel.cut(self.params.thick_n(2), self.params.thickness)

    def draw_top_lid(self) -> None:
        p = self.params
        t = p.thickness

        top_flap = Panel.of(p.glue_flap, p.lid_height).bordered(CUT, NOPE, CUT, CUT)
        self.place(
            top_flap,
            self.cursor.shift_nx(p.thick_n(4)).with_corner(Corner.TOP_RIGHT),
        )
        self.place(
            top_flap.mirror_vertical(),
            self.cursor.shift_x(p.length + p.thick_n(4)),
        )

        front_rim = Panel.of(p.length + p.thick_n(8), p.lid_height).bordered(
            CUT, BEND, BEND, BEND
        )
        self.place(front_rim, self.cursor.shift_nx(p.thick_n(4)))

        self.cursor = self.cursor.shift_y(p.lid_height)

        side_lid = Panel.of(p.lid_height, p.width + p.thick_n(3)).bordered(
            CUT, NOPE, CUT, CUT
        )
        self.place(
            side_lid,
            self.cursor.shift_nx(p.thick_n(3)).shift_y(t).with_corner(Corner.TOP_RIGHT),
        )
        self.place(
            side_lid.mirror_vertical(),
            self.cursor.shift_xy(p.length + p.thick_n(3), t),
        )

        lid_top = Panel.of(p.length + p.thick_n(6), p.width + p.thick_n(4)).bordered(
            NOPE, BEND, BEND, BEND
        )
        self.place(lid_top, self.cursor.shift_nx(p.thick_n(3)))

        cut = self.corner_cut()
        self.place(cut, self.cursor.shift_nx(p.thick_n(3)).with_corner(Corner.TOP_RIGHT))
        self.place(cut, self.cursor.shift_x(p.length + p.thick_n(3)))
        self.place(
            cut,
            self.cursor.shift_xy(-t, p.width + p.thick_n(4)).with_corner(Corner.TOP_RIGHT),
        )
        self.place(cut, self.cursor.shift_xy(p.length + t, p.width + p.thick_n(4)))

        self.cursor = self.cursor.shift_y(p.width + p.thick_n(5))

    def draw_main_walls(self) -> None:
        p = self.params
        t = p.thickness

        wall = Panel.of(p.length + p.thick_n(2), p.height + t).bordered(
            NOPE, BEND, BEND, BEND
        )
        wall_bottom = Panel.of(p.length + p.thick_n(4), p.height + p.thick_n(2)).bordered(
            NOPE, BEND, BEND, BEND
        )
        front_wall = wall.bordered(NOPE, BEND, CUT, BEND)
        glue_flap = Panel.of(p.glue_flap + t, p.height).bordered(CUT, NOPE, CUT, CUT)
        cut = self.corner_cut()

        self.place(wall, self.cursor.shift_nx(t))
        self.cursor = self.cursor.shift_y(wall.height)

        flap_anchor = self.cursor.shift_nx(t).with_corner(Corner.BOTTOM_RIGHT)
        self.place(glue_flap, flap_anchor.shift_ny(t))
        self.place(cut, flap_anchor)

        flap_anchor = flap_anchor.shift_x(wall.width).with_corner(Corner.BOTTOM_LEFT)
        self.place(glue_flap.mirror_vertical(), flap_anchor.shift_ny(t))
        self.place(cut, flap_anchor)

        self.place(wall_bottom, self.cursor.shift_nx(p.thick_n(2)))

        self.draw_side_walls()
        self.cursor = self.cursor.shift_y(wall_bottom.height)

        self.place(front_wall, self.cursor.shift_nx(t))

        flap_anchor = self.cursor.shift_y(t).shift_nx(t).with_corner(Corner.TOP_RIGHT)
        self.place(glue_flap, flap_anchor)
        self.place(cut, flap_anchor.with_corner(Corner.BOTTOM_RIGHT))

        flap_anchor = flap_anchor.shift_x(front_wall.width)
        self.place(glue_flap.mirror_vertical(), flap_anchor.with_corner(Corner.TOP_LEFT))
        self.place(cut, flap_anchor.with_corner(Corner.BOTTOM_LEFT))

    def draw_side_walls(self) -> None:
        p = self.params
        height = p.height + p.thick_n(2)
        width = p.width + p.thick_n(3)

        flap = Panel.of(p.glue_flap + p.thickness, height).bordered(CUT, NOPE, CUT, CUT)
        wall = Panel.of(width, height).bordered(CUT, NOPE, CUT, BEND)

        self.place(wall, self.cursor.shift_nx(p.thick_n(2)).with_corner(Corner.TOP_RIGHT))
        self.place(
            flap,
            self.cursor.shift_nx(width + p.thick_n(2)).with_corner(Corner.TOP_RIGHT),
        )

        right = self.cursor.shift_x(p.length + p.thick_n(2))
        self.place(wall.mirror_vertical(), right)
        self.place(flap.mirror_vertical(), right.shift_x(width))
