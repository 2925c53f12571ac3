"""Net of a box for 12" vinyl records."""

from __future__ import annotations

from boxnets.domain.entities import Panel
from boxnets.domain.value_objects import SHEET_MARGIN, Anchor, Corner, CutType

from .lidded import LiddedBoxLayout

NOPE, CUT, BEND = CutType.NOPE, CutType.CUT, CutType.BEND

# Reinforcement stripe glued around the box
STRIPE_HEIGHT = 90.0
STRIPE_GAP = 5.0
STRIPE_HANDLE_TOP_OFFSET = 35.0

HANDLE_HEIGHT = 25.0
HANDLE_MAX_WIDTH = 80.0
HANDLE_MIN_WIDTH = 10.0
HANDLE_MIN_SIDE_OFFSET = 25.0


class VinylBoxLayout(LiddedBoxLayout):
    """Record box with handle holes and reinforcement stripes.

    Inner length and height are fixed by the record sleeve size, so only the
    box width (how many records it holds) is chosen by the user.
    """

    name = "vinyl"
    default_file_name = "LaserCutVinylBox.svg"

    def start_cursor(self) -> Anchor:
        p = self.params
        return Anchor(p.width + p.glue_flap, 0.0).shift_xy(SHEET_MARGIN, SHEET_MARGIN)

    def draw_sections(self) -> None:
        self.draw_top_lid()
        self.draw_side_walls()
        self.draw_main_walls()
        self.draw_bottom_stripe()

    @property
    def main_wall_length(self) -> float:
        # Back wall minus the wrap-around stripe on both ends
        return self.params.length - self.params.thick_n(2)

    @property
    def handle_top_offset(self) -> float:
        """Handles sit below the lid rim, never closer than the default offset."""
        if STRIPE_HANDLE_TOP_OFFSET < self.params.lid_height:
            return self.params.lid_height
        return STRIPE_HANDLE_TOP_OFFSET

    def handle_hole(self, horizontal: bool) -> tuple[float, Panel]:
        """Handle cut-out centred across the box width.

        Returns:
            The offset of the hole from the wall edge and the hole panel.
            Boxes wider than the handle can span get an undrawn placeholder.
        """
        width = self.params.width
        if HANDLE_MIN_SIDE_OFFSET * HANDLE_MIN_WIDTH < width:
            return 0.0, Panel.square(HANDLE_MIN_WIDTH)

        hole_width = min(
            max(width - HANDLE_MIN_SIDE_OFFSET * 2, HANDLE_MIN_WIDTH), HANDLE_MAX_WIDTH
        )
        side_offset = (width - hole_width) / 2

        if horizontal:
            return side_offset, Panel.cut(hole_width, HANDLE_HEIGHT)
        return side_offset, Panel.cut(HANDLE_HEIGHT, hole_width)

    def draw_side_walls(self) -> None:
        p = self.params
        t = p.thickness
        cursor = self.cursor.shift_xy(t, t)

        side_wall = Panel.of(p.width, p.height - t).bordered(CUT, NOPE, BEND, BEND)
        flap = Panel.of(p.glue_flap, side_wall.height).bordered(CUT, NOPE, CUT, CUT)
        bottom_flap = Panel.of(
            p.width - p.thick_n(3), (p.length - p.thick_n(4)) / 2
        ).bordered(NOPE, CUT, CUT, CUT)
        side_offset, handle = self.handle_hole(horizontal=True)

        below_wall = cursor.shift_y(side_wall.height)

        self.place(side_wall, cursor.with_corner(Corner.TOP_RIGHT))
        self.place(flap, cursor.shift_nx(side_wall.width).with_corner(Corner.TOP_RIGHT))
        self.place(bottom_flap, below_wall.shift_nx(t).with_corner(Corner.TOP_RIGHT))
        self.place(self.notch(), below_wall.with_corner(Corner.TOP_RIGHT))
        self.place(
            self.wide_notch(),
            below_wall.shift_nx(bottom_flap.width + t).with_corner(Corner.TOP_RIGHT),
        )
        self.place(
            handle,
            cursor.shift_nx(side_offset - t)
            .shift_y(self.handle_top_offset)
            .with_corner(Corner.TOP_RIGHT),
        )

        right = cursor.shift_x(p.length - p.thick_n(2))
        below_right = right.shift_y(side_wall.height)

        self.place(side_wall.mirror_vertical(), right)
        self.place(flap.mirror_vertical(), right.shift_x(side_wall.width))
        self.place(bottom_flap.mirror_vertical(), below_right.shift_x(t))
        self.place(self.notch(), below_right)
        self.place(self.wide_notch(), below_right.shift_x(bottom_flap.width + t))
        self.place(
            handle,
            right.shift_x(side_offset - t).shift_y(self.handle_top_offset),
        )

        stripe_anchor = below_wall.shift_nx(t).shift_y(bottom_flap.height)
        self.draw_vertical_half_stripes(p.length, stripe_anchor)

    def draw_main_walls(self) -> None:
        p = self.params
        t = p.thickness
        cursor = self.cursor.shift_x(t)

        back_wall = Panel.of(self.main_wall_length, p.height + t).bordered(
            NOPE, BEND, BEND, BEND
        )
        self.place(self.wide_notch(), cursor.with_corner(Corner.TOP_RIGHT))
        self.place(self.wide_notch(), cursor.shift_x(back_wall.width))
        self.place(back_wall, cursor)

        cursor = cursor.shift_y(back_wall.height)

        bottom_wall = back_wall.with_height(p.width - t).with_left(CUT).with_right(CUT)
        self.place(bottom_wall, cursor)

        cursor = cursor.shift_y(bottom_wall.height).shift_x(t)

        front_wall = Panel.of(back_wall.width - p.thick_n(2), p.height).bordered(
            NOPE, CUT, CUT, CUT
        )
        self.place(front_wall, cursor)
        self.place(self.notch(), cursor.with_corner(Corner.TOP_RIGHT))
        self.place(self.notch(), cursor.shift_x(front_wall.width))

        self.move_cursor_to_y(cursor.y + front_wall.height)

    def draw_bottom_stripe(self) -> None:
        p = self.params
        cursor = self.cursor.shift_y(STRIPE_GAP)

        front = Panel.cut(p.length - (p.thick_n(2) + p.glue_flap * 2), STRIPE_HEIGHT)
        self.place(front, cursor.shift_x(p.glue_flap))

    def draw_vertical_half_stripes(self, width: float, anchor: Anchor) -> None:
        """Stripe halves running up the side walls, left and right of the net."""
        p = self.params
        side_offset, handle = self.handle_hole(horizontal=False)

        top = Panel.cut(STRIPE_HEIGHT, p.width + p.thickness).with_bottom(BEND)
        center = Panel.cut(STRIPE_HEIGHT, p.length / 2).with_top(NOPE)

        self.place(top, anchor.with_corner(Corner.TOP_RIGHT))
        self.place(center, anchor.shift_y(top.height).with_corner(Corner.TOP_RIGHT))
        self.place(top, anchor.shift_x(width))
        self.place(center, anchor.shift_x(width).shift_y(top.height))

        if self.handle_top_offset < top.width:
            hole = anchor.shift_y(side_offset + p.thickness)
            self.place(
                handle,
                hole.shift_nx(self.handle_top_offset).with_corner(Corner.TOP_RIGHT),
            )
            self.place(handle, hole.shift_x(width + self.handle_top_offset))
