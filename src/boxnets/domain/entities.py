"""Domain entities for box net construction."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .value_objects import (
    Anchor,
    Borders,
    CutType,
    Point2D,
    Segment,
    Size,
)


@dataclass
class Drawing:
    """Accumulated line segments of a net and the furthest point reached.

    ``max`` tracks every rectangle corner placed so far, including corners of
    edges that were not drawn. Open edges on the outside of a net still
    count towards the sheet size.

    Attributes:
        segments: Segments in placement order.
        max: Running componentwise maximum of all placed corners.
    """

    segments: list[Segment] = field(default_factory=list)
    max: Point2D = field(default_factory=lambda: Point2D(0.0, 0.0))

    def include(self, point: Point2D) -> None:
        """Extend the bounding maximum to cover ``point``."""
        self.max = self.max.max_with(point)

    def add_line(self, start: Point2D, end: Point2D, cut_type: CutType) -> None:
        """Add one edge, skipping it if its cut type is not renderable."""
        if cut_type.is_renderable():
            self.segments.append(Segment(start, end, cut_type))
        self.include(end)

    def append(self, other: Drawing) -> None:
        """Merge another drawing into this one, keeping segment order."""
        self.segments.extend(other.segments)
        self.include(other.max)

    def segments_of(self, cut_type: CutType) -> list[Segment]:
        return [s for s in self.segments if s.cut_type is cut_type]

    def sheet_size(self, margin: float) -> Point2D:
        """Canvas size needed for this drawing plus a margin on the far sides."""
        return self.max.shift(margin, margin)

    @property
    def is_empty(self) -> bool:
        return not self.segments


@dataclass(frozen=True)
class Panel:
    """An axis-aligned rectangle with a cut type for each edge.

    Panels are immutable. Every ``with_*`` and ``mirror_*`` method returns a
    new panel, so one panel value can be placed any number of times.

    Attributes:
        size: Width and height of the rectangle.
        borders: Cut type for each of the four edges.
    """

    size: Size
    borders: Borders = field(default_factory=Borders.nope)

    @classmethod
    def of(cls, width: float, height: float) -> Panel:
        """Panel with no drawn edges."""
        return cls(Size(width, height))

    @classmethod
    def cut(cls, width: float, height: float) -> Panel:
        """Panel cut out on all four sides."""
        return cls(Size(width, height), Borders.all_cut())

    @classmethod
    def square(cls, side: float) -> Panel:
        return cls.of(side, side)

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    def with_width(self, width: float) -> Panel:
        return replace(self, size=Size(width, self.height))

    def with_height(self, height: float) -> Panel:
        return replace(self, size=Size(self.width, height))

    def with_borders(self, borders: Borders) -> Panel:
        return replace(self, borders=borders)

    def bordered(
        self, top: CutType, right: CutType, bottom: CutType, left: CutType
    ) -> Panel:
        """Copy of this panel with all four edges reassigned."""
        return self.with_borders(Borders(top, right, bottom, left))

    def with_top(self, cut_type: CutType) -> Panel:
        return self.with_borders(self.borders.with_top(cut_type))

    def with_right(self, cut_type: CutType) -> Panel:
        return self.with_borders(self.borders.with_right(cut_type))

    def with_bottom(self, cut_type: CutType) -> Panel:
        return self.with_borders(self.borders.with_bottom(cut_type))

    def with_left(self, cut_type: CutType) -> Panel:
        return self.with_borders(self.borders.with_left(cut_type))

    def mirror_vertical(self) -> Panel:
        """Mirror across a vertical axis: left and right edges swap."""
        return self.with_borders(
            replace(self.borders, left=self.borders.right, right=self.borders.left)
        )

    def mirror_horizontal(self) -> Panel:
        """Mirror across a horizontal axis: top and bottom edges swap."""
        return self.with_borders(
            replace(self.borders, top=self.borders.bottom, bottom=self.borders.top)
        )

    def place(self, anchor: Anchor) -> Drawing:
        """Turn this panel into line segments at ``anchor``.

        The rectangle is walked clockwise from its top-left corner: top,
        right, bottom, left. Each edge becomes a segment only if its border is
        renderable, but every corner is folded into the bounding maximum.

        Args:
            anchor: Position and corner the panel is placed against.

        Returns:
            A new drawing holding up to four segments.
        """
        drawing = Drawing()
        start = anchor.resolve_top_left(self.size)

        top_right = start.shift(self.width, 0.0)
        drawing.add_line(start, top_right, self.borders.top)

        bottom_right = top_right.shift(0.0, self.height)
        drawing.add_line(top_right, bottom_right, self.borders.right)

        bottom_left = bottom_right.shift(-self.width, 0.0)
        drawing.add_line(bottom_right, bottom_left, self.borders.bottom)

        drawing.add_line(bottom_left, start, self.borders.left)
        return drawing
