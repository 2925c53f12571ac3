"""Net of a cuboid box with a telescoping lid."""

from __future__ import annotations

from boxnets.domain.entities import Panel
from boxnets.domain.value_objects import SHEET_MARGIN, Anchor, Corner, CutType

from .lidded import LiddedBoxLayout

NOPE, CUT, BEND = CutType.NOPE, CutType.CUT, CutType.BEND


class CuboidBoxLayout(LiddedBoxLayout):
    """Cuboid box drawn lid first, then back, bottom and front walls.

    The side walls hang off the bottom wall. Glue flaps on the back and front
    walls fold around the corners and are glued inside the side walls.
    """

    name = "box-cuboid"
    default_file_name = "LaserCutBoxCuboid.svg"

    def start_cursor(self) -> Anchor:
        # Room on the left for the side wall hanging off the bottom wall
        return Anchor(self.params.height + SHEET_MARGIN, SHEET_MARGIN)

    def draw_sections(self) -> None:
        self.draw_top_lid()
        self.draw_main_walls()

    def draw_main_walls(self) -> None:
        p = self.params
        t = p.thickness

        vertical_glue_flap = Panel.of(p.glue_flap + t, p.height - p.thick_n(2)).bordered(
            CUT, NOPE, CUT, CUT
        )
        back_wall = Panel.of(p.length - p.thick_n(2), p.height).bordered(
            NOPE, BEND, BEND, BEND
        )

        self.place(back_wall, self.cursor.shift_x(t))
        self.place(self.wide_notch(), self.cursor.shift_x(t).with_corner(Corner.TOP_RIGHT))
        self.place(self.wide_notch(), self.cursor.shift_x(back_wall.width + t))

        self.place(
            vertical_glue_flap,
            self.cursor.shift_xy(t, t).with_corner(Corner.TOP_RIGHT),
        )
        self.place(
            vertical_glue_flap.mirror_vertical(),
            self.cursor.shift_xy(t + back_wall.width, t),
        )

        notch_y = vertical_glue_flap.height + t
        self.place(
            self.wide_notch(),
            self.cursor.shift_xy(t, notch_y).with_corner(Corner.TOP_RIGHT),
        )
        self.place(self.wide_notch(), self.cursor.shift_xy(back_wall.width + t, notch_y))

        self.cursor = self.cursor.shift_y(back_wall.height)

        bottom_wall = Panel.of(p.length, p.width).bordered(NOPE, BEND, BEND, BEND)
        self.place(bottom_wall, self.cursor)

        self.draw_side_walls()

        front_wall = back_wall.bordered(NOPE, CUT, CUT, CUT).with_height(p.height - t)

        self.cursor = self.cursor.shift_y(bottom_wall.height)

        self.place(
            front_wall.with_left(BEND).with_right(BEND),
            self.cursor.shift_x(t),
        )

        flap_anchor = self.cursor.shift_xy(t, t).with_corner(Corner.TOP_RIGHT)
        self.place(vertical_glue_flap, flap_anchor)
        self.place(self.wide_notch(), flap_anchor.with_corner(Corner.BOTTOM_RIGHT))

        flap_anchor = flap_anchor.shift_x(front_wall.width)
        self.place(
            vertical_glue_flap.mirror_vertical(),
            flap_anchor.with_corner(Corner.TOP_LEFT),
        )
        self.place(self.wide_notch(), flap_anchor.with_corner(Corner.BOTTOM_LEFT))

    def draw_side_walls(self) -> None:
        p = self.params
        wall = Panel.of(p.height - p.thickness, p.width).bordered(CUT, NOPE, CUT, CUT)

        self.place(wall, self.cursor.with_corner(Corner.TOP_RIGHT))
        self.place(wall.mirror_vertical(), self.cursor.shift_x(p.length))
