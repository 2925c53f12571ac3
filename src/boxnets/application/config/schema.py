"""Pydantic models for box net configuration files.

A configuration file selects one box variant through the ``type`` field of
``box`` and carries the sizes for that variant. All sizes are millimetres.

Example:
    {
        "schema_version": "1.0",
        "box": {"type": "box-cuboid", "length": 200, "width": 120, "height": 80},
        "output": {"file": "shoebox.svg", "formats": ["svg", "dxf"]}
    }
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from boxnets.domain.value_objects import SHEET_MARGIN, LidType

# Supported schema versions for configuration files
# Version 1.0: Initial schema with cuboid, cube, lid and vinyl boxes
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

DEFAULT_THICKNESS = 2.3
DEFAULT_GLUE_FLAP = 40.0
DEFAULT_LID_HEIGHT = 35.0
DEFAULT_CUBE_LID_HEIGHT = 40.0


class BaseBoxConfig(BaseModel):
    """Fields every box variant shares."""

    model_config = ConfigDict(extra="forbid")

    glue_flap: float = Field(
        default=DEFAULT_GLUE_FLAP, gt=0, description="Glue flap length in mm"
    )
    thickness: float = Field(
        default=DEFAULT_THICKNESS, gt=0, description="Cardboard thickness in mm"
    )


class CuboidBoxConfig(BaseBoxConfig):
    """Cuboid box with a telescoping lid.

    Attributes:
        length: Outer length (the longer side) in mm.
        width: Outer width (the shorter side) in mm.
        height: Outer height in mm.
        lid_height: Lid rim height in mm.
    """

    type: Literal["box-cuboid"] = "box-cuboid"
    length: float = Field(..., gt=0)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    lid_height: float = Field(default=DEFAULT_LID_HEIGHT, gt=0)


class CubeBoxConfig(BaseBoxConfig):
    """Box with the lid hinged on the back wall."""

    type: Literal["box-cube"] = "box-cube"
    length: float = Field(..., gt=0)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    lid_height: float = Field(default=DEFAULT_CUBE_LID_HEIGHT, gt=0)


class LidConfig(BaseBoxConfig):
    """Lid for an existing box.

    Attributes:
        length: Outer length of the box the lid fits, in mm.
        width: Outer width of the box the lid fits, in mm.
        height: Lid rim height in mm.
        fat: Double (thick) rim walls.
        lid_type: How the lid attaches to the box.
    """

    type: Literal["lid"] = "lid"
    length: float = Field(..., gt=0)
    width: float = Field(..., gt=0)
    height: float = Field(default=DEFAULT_LID_HEIGHT, gt=0)
    fat: bool = False
    lid_type: LidType = LidType.SEPARATED


class VinylBoxConfig(BaseBoxConfig):
    """Box for 12" records; length and height are fixed by the sleeve size."""

    type: Literal["vinyl"] = "vinyl"
    width: float = Field(..., gt=0)
    lid_height: float = Field(default=DEFAULT_LID_HEIGHT, gt=0)


BoxConfig = Annotated[
    Union[CuboidBoxConfig, CubeBoxConfig, LidConfig, VinylBoxConfig],
    Field(discriminator="type"),
]


class OutputConfig(BaseModel):
    """Where and how the net is written.

    Attributes:
        file: SVG file path. When omitted the variant's default name is used.
        formats: Export formats to write (svg, dxf, json).
        margin: Blank border added on the right and bottom of the sheet in mm.
    """

    model_config = ConfigDict(extra="forbid")

    file: str | None = None
    formats: list[str] = Field(default_factory=lambda: ["svg"])
    margin: float = Field(default=SHEET_MARGIN, ge=0)

    @field_validator("file")
    @classmethod
    def validate_svg_suffix(cls, v: str | None) -> str | None:
        if v is not None and not v.upper().endswith(".SVG"):
            raise ValueError(f"Output file name must end with .svg, got '{v}'")
        return v

    @field_validator("formats")
    @classmethod
    def normalize_formats(cls, v: list[str]) -> list[str]:
        formats = [f.strip().lower() for f in v if f.strip()]
        if not formats:
            raise ValueError("At least one output format is required")
        return formats


class BoxConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Configuration schema version.
        box: Sizes for the selected box variant.
        output: Output settings.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    box: BoxConfig
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
