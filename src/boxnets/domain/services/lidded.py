"""Telescoping lid section shared by boxes that carry their lid on top."""

from __future__ import annotations

from boxnets.domain.entities import Panel
from boxnets.domain.value_objects import Borders, Corner, CutType

from .base import BoxParameters, NetLayout

NOPE, CUT, BEND = CutType.NOPE, CutType.CUT, CutType.BEND


class LiddedBoxLayout(NetLayout):
    """Net whose first section is a lid sliding over the box walls.

    The lid is two thicknesses longer and wider than the box so it fits over
    the walls. Its rim flaps fold inwards and are glued to the side walls.
    """

    params: BoxParameters

    def draw_top_lid(self) -> None:
        p = self.params
        t = p.thickness
        lid_len = p.length + p.thick_n(2)
        lid_width = p.width + p.thick_n(2)
        cursor = self.cursor.shift_nx(t)

        top_flap = (
            Panel.of(lid_len - p.glue_flap * 2, p.lid_height - t)
            .with_borders(Borders.all_cut())
            .with_bottom(BEND)
        )
        self.place(top_flap, cursor.shift_x(p.glue_flap))

        # Only the bottom edge of the glue flap strip is cut
        flap_side_cut = Panel.of(p.glue_flap, top_flap.height).with_bottom(CUT)
        self.place(flap_side_cut, cursor)
        self.place(flap_side_cut, cursor.shift_x(lid_len).with_corner(Corner.TOP_RIGHT))

        cursor = cursor.shift_y(top_flap.height)

        front_side = Panel.of(lid_len, p.lid_height).bordered(NOPE, CUT, BEND, CUT)
        self.place(front_side, cursor)

        cursor = cursor.shift_y(front_side.height)

        top_wall = Panel.of(lid_len, lid_width).bordered(NOPE, BEND, BEND, BEND)
        self.place(top_wall, cursor)

        side_flap = Panel.of(p.lid_height - t, p.glue_flap).bordered(CUT, CUT, BEND, CUT)
        self.place(
            side_flap,
            cursor.shift_nx(t).shift_y(t).with_corner(Corner.BOTTOM_RIGHT),
        )
        self.place(
            side_flap.mirror_vertical(),
            cursor.shift_xy(lid_len + t, t).with_corner(Corner.BOTTOM_LEFT),
        )

        side_wall = Panel.of(p.lid_height, lid_width - t).bordered(NOPE, NOPE, CUT, CUT)
        self.place(side_wall, cursor.shift_y(t).with_corner(Corner.TOP_RIGHT))
        self.place(side_wall.mirror_vertical(), cursor.shift_xy(lid_len, t))

        self.place(self.notch(), cursor.with_corner(Corner.TOP_RIGHT))
        self.place(self.notch(), cursor.shift_x(lid_len))

        self.move_cursor_to_y(cursor.y + top_wall.height)
