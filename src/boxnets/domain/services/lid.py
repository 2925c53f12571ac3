"""Net of a lid made to fit an existing box."""

from __future__ import annotations

import logging

from boxnets.domain.entities import Drawing, Panel
from boxnets.domain.value_objects import Anchor, Borders, Corner, CutType, LidType

from .base import LidParameters, NetLayout

logger = logging.getLogger(__name__)

NOPE, CUT, BEND = CutType.NOPE, CutType.CUT, CutType.BEND


class LidLayout(NetLayout):
    """Lid with rim walls folded from a single sheet.

    The lid type picks one of three fixed section sequences:

    - ``joined``: the back edge stays attached to a box wall.
    - ``glued``: as joined, with corner cut-offs on the back edge so the
      back rim can be glued on.
    - ``separated``: a complete standalone lid with a mirrored back rim.
    """

    name = "lid"
    default_file_name = "LaserCutLid.svg"

    params: LidParameters

    def start_cursor(self) -> Anchor:
        p = self.params
        # Side walls are laid out to the left of the top wall
        return Anchor.sheet_origin().shift_x(p.height * (2.0 if p.fat else 1.0))

    def draw_sections(self) -> None:
        self.cursor = self.draw_lid(self.cursor)

    def draw_from(self, cursor: Anchor) -> tuple[Anchor, Drawing]:
        """Lay out the lid starting at ``cursor``.

        Used to append a lid below another net.

        Returns:
            The cursor just below the lid and the lid's drawing.
        """
        self.drawing = Drawing()
        self.cursor = self.draw_lid(cursor)
        return self.cursor, self.drawing

    @property
    def lid_length(self) -> float:
        p = self.params
        return p.length + p.thick_n(4 if p.fat else 2)

    @property
    def lid_width(self) -> float:
        p = self.params
        extra = {LidType.JOINED: 2, LidType.GLUED: 3, LidType.SEPARATED: 4}
        return p.width + p.thick_n(extra[p.lid_type])

    def draw_lid(self, cursor: Anchor) -> Anchor:
        p = self.params
        t = p.thickness
        lid_len = self.lid_length
        lid_width = self.lid_width
        logger.debug(f"Lid {p.lid_type.value}: {lid_len}x{lid_width}")

        long_side_flap = (
            Panel.of(lid_len - p.glue_flap * 2, p.height)
            .with_borders(Borders.all_cut())
            .with_bottom(BEND)
        )
        glue_flap_side_cut = Panel.of(p.glue_flap, long_side_flap.height).with_bottom(CUT)
        self.draw_long_side_flap(cursor, long_side_flap, glue_flap_side_cut)

        cursor = cursor.shift_y(long_side_flap.height)

        long_side = Panel.of(lid_len, p.height + t).bordered(NOPE, CUT, NOPE, CUT)
        self.place(long_side, cursor)

        cursor = cursor.shift_y(long_side.height)

        top_wall = Panel.of(lid_len, lid_width).with_borders(Borders.all_bend())
        self.place(top_wall, cursor)

        self.place(self.notch(), cursor.with_corner(Corner.TOP_RIGHT))
        self.place(self.notch(), cursor.shift_x(lid_len))

        if p.lid_type in (LidType.GLUED, LidType.SEPARATED):
            back_y = top_wall.height - t
            self.place(self.notch(), cursor.with_corner(Corner.TOP_RIGHT).shift_y(back_y))
            self.place(self.notch(), cursor.shift_x(lid_len).shift_y(back_y))

        side_flap = Panel.of(p.height, p.glue_flap).bordered(CUT, CUT, BEND, CUT)
        self.place(
            side_flap,
            cursor.shift_nx(t).shift_y(t).with_corner(Corner.BOTTOM_RIGHT),
        )
        self.place(
            side_flap.mirror_vertical(),
            cursor.shift_xy(lid_len + t, t).with_corner(Corner.BOTTOM_LEFT),
        )

        if p.lid_type is LidType.SEPARATED:
            side_wall_height = lid_width - p.thick_n(2)
            side_wall_bottom = NOPE
        else:
            side_wall_height = lid_width - t
            side_wall_bottom = CUT

        side_wall = Panel.of(p.height + t, side_wall_height).bordered(
            NOPE, NOPE, side_wall_bottom, CUT
        )
        self.place(side_wall, cursor.shift_y(t).with_corner(Corner.TOP_RIGHT))
        self.place(side_wall.mirror_vertical(), cursor.shift_xy(lid_len, t))

        cursor = cursor.shift_y(top_wall.height)

        if p.lid_type is not LidType.SEPARATED:
            return cursor

        # Back rim mirrors the front one
        back_flap = side_flap.mirror_horizontal()
        self.place(
            back_flap,
            cursor.shift_nx(t).shift_ny(t).with_corner(Corner.TOP_RIGHT),
        )
        self.place(
            back_flap.mirror_vertical(),
            cursor.shift_xy(lid_len + t, -t).with_corner(Corner.TOP_LEFT),
        )

        back_side = long_side.mirror_horizontal()
        self.place(back_side, cursor)

        cursor = cursor.shift_y(back_side.height)

        self.draw_long_side_flap(
            cursor,
            long_side_flap.mirror_horizontal(),
            glue_flap_side_cut.mirror_horizontal(),
        )

        if p.glue_flap > p.height * 2:
            return cursor.shift_y(p.glue_flap + t - p.height)
        return cursor.shift_y(p.height)

    def draw_long_side_flap(
        self, cursor: Anchor, flap: Panel, side_cut: Panel
    ) -> None:
        """Rim flap between two strips where only the outer edge is cut."""
        p = self.params
        self.place(flap, cursor.shift_x(p.glue_flap))
        self.place(side_cut, cursor)
        self.place(side_cut, cursor.shift_x(self.lid_length).with_corner(Corner.TOP_RIGHT))
