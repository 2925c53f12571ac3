"""Pytest configuration and shared fixtures for box net tests."""

from __future__ import annotations

from typing import Any

import pytest

from boxnets.application.config import BoxConfiguration, load_config_from_dict
from boxnets.application.dtos import NetOutput
from boxnets.domain import (
    Anchor,
    BoxParameters,
    CutType,
    LidParameters,
    LidType,
    Panel,
)


# =============================================================================
# Layout parameters
# =============================================================================
# Whole-number sizes with a 2 mm thickness keep every coordinate exact, so
# tests can compare floats with ==.


@pytest.fixture
def box_params() -> BoxParameters:
    """A 200 x 100 x 50 box with a 35 mm lid."""
    return BoxParameters(
        length=200.0,
        width=100.0,
        height=50.0,
        lid_height=35.0,
        glue_flap=40.0,
        thickness=2.0,
    )


@pytest.fixture
def lid_params() -> LidParameters:
    """Joined lid for a 200 x 100 box."""
    return LidParameters(
        length=200.0,
        width=100.0,
        height=35.0,
        glue_flap=40.0,
        thickness=2.0,
        lid_type=LidType.JOINED,
    )


@pytest.fixture
def vinyl_params() -> BoxParameters:
    return BoxParameters.for_vinyl(
        width=100.0, lid_height=35.0, glue_flap=40.0, thickness=2.0
    )


# =============================================================================
# Configurations
# =============================================================================


@pytest.fixture
def cuboid_config_dict() -> dict[str, Any]:
    """Raw configuration for a cuboid box, as read from JSON."""
    return {
        "schema_version": "1.0",
        "box": {
            "type": "box-cuboid",
            "length": 200,
            "width": 100,
            "height": 50,
            "thickness": 2,
        },
    }


@pytest.fixture
def cuboid_config(cuboid_config_dict: dict[str, Any]) -> BoxConfiguration:
    return load_config_from_dict(cuboid_config_dict)


def make_config(box: dict[str, Any], **output: Any) -> BoxConfiguration:
    """Build a configuration from a box section and output overrides."""
    return load_config_from_dict({"box": box, "output": output})


@pytest.fixture
def config_factory():
    """Factory fixture wrapping ``make_config``."""
    return make_config


# =============================================================================
# Net outputs
# =============================================================================


@pytest.fixture
def flap_output() -> NetOutput:
    """A single 100 x 50 panel at (10, 10) with an open bottom edge.

    Renders as three segments on a 120 x 70 sheet.
    """
    cut, bend, nope = CutType.CUT, CutType.BEND, CutType.NOPE
    drawing = Panel.of(100, 50).bordered(cut, bend, nope, cut).place(Anchor(10, 10))
    return NetOutput(
        drawing=drawing,
        variant="lid",
        default_file_name="LaserCutLid.svg",
        margin=10.0,
    )
