"""Value objects for the box net domain.

All coordinates and sizes are in millimetres. The y axis points down, matching
the SVG canvas the nets are finally written to.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

# Blank border kept around a net on the cutting sheet
SHEET_MARGIN = 10.0


class CutType(str, Enum):
    """How the laser treats one edge of a panel.

    Attributes:
        NOPE: Edge is not drawn. Either a neighbouring panel draws the shared
            edge, or the edge is open.
        CUT: Edge is cut through the material.
        BEND: Edge is scored so the cardboard folds along it.
    """

    NOPE = "nope"
    CUT = "cut"
    BEND = "bend"

    def is_renderable(self) -> bool:
        """Return True if the edge produces a line on the drawing."""
        return self is not CutType.NOPE


class Corner(str, Enum):
    """Corner of a rectangle that an anchor point designates."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"


class LidType(str, Enum):
    """How a lid net is attached to its box.

    Attributes:
        JOINED: Lid shares its back edge with the box wall.
        GLUED: Lid back wall is glued onto the box wall.
        SEPARATED: Lid is a standalone part with its own back flaps.
    """

    JOINED = "joined"
    GLUED = "glued"
    SEPARATED = "separated"


@dataclass(frozen=True)
class Size:
    """Immutable width and height of a rectangular panel."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Panel size must be non-negative, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class Point2D:
    """Plain drawing coordinate."""

    x: float
    y: float

    def max_with(self, other: Point2D) -> Point2D:
        """Componentwise maximum of two points."""
        return Point2D(max(self.x, other.x), max(self.y, other.y))

    def shift(self, dx: float, dy: float) -> Point2D:
        return Point2D(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Anchor:
    """A position tagged with the corner of a future rectangle it marks.

    ``(x, y)`` is always the location of ``corner``, never implicitly the
    top-left one. Layout code can therefore put a panel's right edge flush
    against a coordinate by anchoring with ``Corner.TOP_RIGHT`` instead of
    subtracting the panel width by hand.

    Attributes:
        x: Horizontal coordinate in millimetres.
        y: Vertical coordinate in millimetres (grows downwards).
        corner: Which rectangle corner ``(x, y)`` designates.
    """

    x: float
    y: float
    corner: Corner = Corner.TOP_LEFT

    def shift_xy(self, delta_x: float, delta_y: float) -> Anchor:
        """Move the anchor by both deltas, keeping its corner."""
        return replace(self, x=self.x + delta_x, y=self.y + delta_y)

    def shift_x(self, delta_x: float) -> Anchor:
        return self.shift_xy(delta_x, 0.0)

    def shift_nx(self, delta_x: float) -> Anchor:
        return self.shift_xy(-delta_x, 0.0)

    def shift_y(self, delta_y: float) -> Anchor:
        return self.shift_xy(0.0, delta_y)

    def shift_ny(self, delta_y: float) -> Anchor:
        return self.shift_xy(0.0, -delta_y)

    def with_corner(self, corner: Corner) -> Anchor:
        """Re-tag the same point as a different corner."""
        return replace(self, corner=corner)

    def resolve_top_left(self, size: Size) -> Point2D:
        """Top-left corner of a rectangle of ``size`` anchored at this point.

        Args:
            size: Size of the rectangle being placed.

        Returns:
            Coordinate of the rectangle's top-left corner.
        """
        if self.corner is Corner.TOP_LEFT:
            return Point2D(self.x, self.y)
        if self.corner is Corner.TOP_RIGHT:
            return Point2D(self.x - size.width, self.y)
        if self.corner is Corner.BOTTOM_RIGHT:
            return Point2D(self.x - size.width, self.y - size.height)
        return Point2D(self.x, self.y - size.height)

    @classmethod
    def sheet_origin(cls) -> Anchor:
        """Top-left anchor just inside the sheet margin."""
        return cls(SHEET_MARGIN, SHEET_MARGIN)


@dataclass(frozen=True)
class Borders:
    """Cut type of each edge of one rectangle."""

    top: CutType = CutType.NOPE
    right: CutType = CutType.NOPE
    bottom: CutType = CutType.NOPE
    left: CutType = CutType.NOPE

    @classmethod
    def all_cut(cls) -> Borders:
        return cls(CutType.CUT, CutType.CUT, CutType.CUT, CutType.CUT)

    @classmethod
    def all_bend(cls) -> Borders:
        return cls(CutType.BEND, CutType.BEND, CutType.BEND, CutType.BEND)

    @classmethod
    def nope(cls) -> Borders:
        return cls()

    def with_top(self, cut_type: CutType) -> Borders:
        return replace(self, top=cut_type)

    def with_right(self, cut_type: CutType) -> Borders:
        return replace(self, right=cut_type)

    def with_bottom(self, cut_type: CutType) -> Borders:
        return replace(self, bottom=cut_type)

    def with_left(self, cut_type: CutType) -> Borders:
        return replace(self, left=cut_type)

    @property
    def renderable_count(self) -> int:
        """Number of edges that produce a line."""
        return sum(
            edge.is_renderable()
            for edge in (self.top, self.right, self.bottom, self.left)
        )


@dataclass(frozen=True)
class Segment:
    """A straight line emitted for one panel edge.

    Only CUT and BEND edges become segments.
    """

    start: Point2D
    end: Point2D
    cut_type: CutType

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)
