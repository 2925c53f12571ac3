"""Domain layer - panel placement engine and box layouts."""

from .entities import Drawing, Panel
from .services import (
    LAYOUTS,
    BoxParameters,
    CubeBoxLayout,
    CuboidBoxLayout,
    LidLayout,
    LidParameters,
    NetLayout,
    VinylBoxLayout,
)
from .value_objects import (
    SHEET_MARGIN,
    Anchor,
    Borders,
    Corner,
    CutType,
    LidType,
    Point2D,
    Segment,
    Size,
)

__all__ = [
    "Anchor",
    "Borders",
    "BoxParameters",
    "Corner",
    "CubeBoxLayout",
    "CuboidBoxLayout",
    "CutType",
    "Drawing",
    "LAYOUTS",
    "LidLayout",
    "LidParameters",
    "LidType",
    "NetLayout",
    "Panel",
    "Point2D",
    "SHEET_MARGIN",
    "Segment",
    "Size",
    "VinylBoxLayout",
]
