"""Convert validated configuration models into layout parameters."""

from __future__ import annotations

from boxnets.application.config.schema import (
    BoxConfiguration,
    CubeBoxConfig,
    CuboidBoxConfig,
    LidConfig,
    VinylBoxConfig,
)
from boxnets.domain.services import LAYOUTS, BoxParameters, LidParameters, NetLayout


def config_to_parameters(
    box: CuboidBoxConfig | CubeBoxConfig | LidConfig | VinylBoxConfig,
) -> BoxParameters | LidParameters:
    """Build the frozen parameter object for one box configuration.

    Args:
        box: The ``box`` section of a configuration.

    Returns:
        ``LidParameters`` for a lid, ``BoxParameters`` for every other variant.
    """
    if isinstance(box, LidConfig):
        return LidParameters(
            length=box.length,
            width=box.width,
            height=box.height,
            glue_flap=box.glue_flap,
            thickness=box.thickness,
            fat=box.fat,
            lid_type=box.lid_type,
        )
    if isinstance(box, VinylBoxConfig):
        return BoxParameters.for_vinyl(
            width=box.width,
            lid_height=box.lid_height,
            glue_flap=box.glue_flap,
            thickness=box.thickness,
        )
    return BoxParameters(
        length=box.length,
        width=box.width,
        height=box.height,
        lid_height=box.lid_height,
        glue_flap=box.glue_flap,
        thickness=box.thickness,
    )


def config_to_layout(config: BoxConfiguration) -> NetLayout:
    """Instantiate the layout procedure selected by ``config.box.type``."""
    layout_cls = LAYOUTS[config.box.type]
    return layout_cls(config_to_parameters(config.box))
