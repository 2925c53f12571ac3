"""Unit tests for converting configurations into layout parameters."""

from boxnets.application.config import config_to_layout, config_to_parameters
from boxnets.domain import (
    BoxParameters,
    CubeBoxLayout,
    CuboidBoxLayout,
    LidLayout,
    LidParameters,
    LidType,
    VinylBoxLayout,
)


class TestConfigToParameters:
    """Tests for config_to_parameters."""

    def test_cuboid(self, cuboid_config) -> None:
        params = config_to_parameters(cuboid_config.box)
        assert params == BoxParameters(
            length=200, width=100, height=50, lid_height=35, glue_flap=40, thickness=2
        )

    def test_lid(self, config_factory) -> None:
        config = config_factory(
            {"type": "lid", "length": 120, "width": 80, "fat": True, "lid_type": "glued"}
        )
        params = config_to_parameters(config.box)
        assert isinstance(params, LidParameters)
        assert params.fat is True
        assert params.lid_type is LidType.GLUED
        assert params.height == 35

    def test_vinyl_derives_length_and_height(self, config_factory) -> None:
        config = config_factory({"type": "vinyl", "width": 100, "thickness": 2})
        params = config_to_parameters(config.box)
        assert params == BoxParameters.for_vinyl(
            width=100, lid_height=35, glue_flap=40, thickness=2
        )


class TestConfigToLayout:
    """Tests for config_to_layout."""

    def test_each_variant_selects_its_layout(self, config_factory) -> None:
        sized = {"length": 200, "width": 100, "height": 50}
        cases = [
            ({"type": "box-cuboid", **sized}, CuboidBoxLayout),
            ({"type": "box-cube", **sized}, CubeBoxLayout),
            ({"type": "lid", "length": 200, "width": 100}, LidLayout),
            ({"type": "vinyl", "width": 100}, VinylBoxLayout),
        ]
        for box, expected in cases:
            assert type(config_to_layout(config_factory(box))) is expected

    def test_layout_carries_parameters(self, cuboid_config) -> None:
        layout = config_to_layout(cuboid_config)
        assert layout.params.length == 200
        assert layout.params.thickness == 2
