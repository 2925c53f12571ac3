"""Shared machinery for box net layout procedures.

A layout procedure is a straight-line script: it builds panels from the box
parameters, places them against a cursor anchor, merges every placement into
one drawing and moves the cursor past each finished section.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar

from boxnets.domain.entities import Drawing, Panel
from boxnets.domain.value_objects import Anchor, LidType

logger = logging.getLogger(__name__)

# Fixed inner size of a 12" record sleeve box
VINYL_INNER_HEIGHT = 330.0
VINYL_INNER_LENGTH = 330.0


@dataclass(frozen=True)
class BoxParameters:
    """Outer sizes of a box with a lid, in millimetres.

    Attributes:
        length: Outer length, the longer side.
        width: Outer width, the shorter side.
        height: Outer height.
        lid_height: Height of the lid rim.
        glue_flap: Length of the flaps that get glued.
        thickness: Cardboard thickness.
    """

    length: float
    width: float
    height: float
    lid_height: float
    glue_flap: float
    thickness: float

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError("Material thickness must be positive")

    def thick_n(self, multiply: int) -> float:
        """A whole number of material thicknesses."""
        return self.thickness * multiply

    @classmethod
    def for_vinyl(
        cls, width: float, lid_height: float, glue_flap: float, thickness: float
    ) -> BoxParameters:
        """Parameters for a record box, where only the width is free."""
        return cls(
            length=VINYL_INNER_LENGTH + thickness * 4,
            width=width,
            height=VINYL_INNER_HEIGHT + thickness * 3,
            lid_height=lid_height,
            glue_flap=glue_flap,
            thickness=thickness,
        )


@dataclass(frozen=True)
class LidParameters:
    """Sizes of a lid made for an existing box.

    Attributes:
        length: Outer length of the box the lid goes on.
        width: Outer width of the box the lid goes on.
        height: Height of the lid rim.
        glue_flap: Length of the flaps that get glued.
        thickness: Cardboard thickness.
        fat: Double the rim walls.
        lid_type: How the lid attaches to the box.
    """

    length: float
    width: float
    height: float
    glue_flap: float
    thickness: float
    fat: bool = False
    lid_type: LidType = LidType.SEPARATED

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError("Material thickness must be positive")

    def thick_n(self, multiply: int) -> float:
        """A whole number of material thicknesses."""
        return self.thickness * multiply


class NetLayout(ABC):
    """Base class for one box variant's net.

    Subclasses define where the cursor starts and the sequence of sections.
    ``draw()`` can be called repeatedly; each call starts from an empty
    drawing and a fresh cursor.

    Attributes:
        name: Variant name used in configuration and on the command line.
        default_file_name: File name used when the caller gives none.
        cursor: Anchor threaded through the sections.
        drawing: Accumulated result of the current run.
    """

    name: ClassVar[str]
    default_file_name: ClassVar[str]

    def __init__(self, params: BoxParameters | LidParameters) -> None:
        self.params = params
        self.cursor = self.start_cursor()
        self.drawing = Drawing()

    @abstractmethod
    def start_cursor(self) -> Anchor:
        """Anchor the first section is placed against."""

    @abstractmethod
    def draw_sections(self) -> None:
        """Place every section of the net, advancing ``self.cursor``."""

    def draw(self) -> Drawing:
        """Lay out the complete net.

        Returns:
            Drawing with all segments and the bounding maximum of the net.
        """
        self.cursor = self.start_cursor()
        self.drawing = Drawing()
        logger.debug(f"Drawing {self.name} with {self.params}")
        self.draw_sections()
        logger.debug(
            f"{self.name}: {len(self.drawing.segments)} segments, "
            f"max ({self.drawing.max.x}, {self.drawing.max.y})"
        )
        return self.drawing

    def place(self, panel: Panel, anchor: Anchor) -> None:
        """Place ``panel`` at ``anchor`` and merge it into the drawing."""
        self.drawing.append(panel.place(anchor))

    def notch(self) -> Panel:
        """Square cut-off one thickness wide at a fold corner."""
        return Panel.cut(self.params.thickness, self.params.thickness)

    def wide_notch(self) -> Panel:
        """Cut-off two thicknesses wide and one thickness high."""
        return Panel.cut(self.params.thick_n(2), self.params.thickness)

    def move_cursor_to_y(self, y: float) -> None:
        """Move the cursor down (or up) to ``y``, keeping its x position."""
        self.cursor = replace(self.cursor, y=y)
