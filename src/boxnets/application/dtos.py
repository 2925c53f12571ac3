"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from boxnets.domain import SHEET_MARGIN, Drawing, Point2D


@dataclass
class NetOutput:
    """Output DTO containing one generated net.

    Attributes:
        drawing: Segments and bounding maximum of the net.
        variant: Box variant name, e.g. "box-cuboid".
        default_file_name: File name the variant writes to when none is given.
        margin: Blank border added on the far sides of the sheet.
        errors: Error messages if generation failed.
        warnings: Non-blocking advisories about the configuration.
    """

    drawing: Drawing
    variant: str
    default_file_name: str
    margin: float = SHEET_MARGIN
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the net was generated successfully."""
        return len(self.errors) == 0

    @property
    def sheet_size(self) -> Point2D:
        """Width and height of the cutting sheet in millimetres."""
        return self.drawing.sheet_size(self.margin)
