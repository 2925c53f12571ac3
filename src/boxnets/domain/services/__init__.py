"""Layout procedures, one per box variant."""

from .base import BoxParameters, LidParameters, NetLayout
from .box_cube import CubeBoxLayout
from .box_cuboid import CuboidBoxLayout
from .lid import LidLayout
from .lidded import LiddedBoxLayout
from .vinyl import VinylBoxLayout

LAYOUTS: dict[str, type[NetLayout]] = {
    layout.name: layout
    for layout in (CuboidBoxLayout, CubeBoxLayout, LidLayout, VinylBoxLayout)
}

__all__ = [
    "BoxParameters",
    "CubeBoxLayout",
    "CuboidBoxLayout",
    "LAYOUTS",
    "LidLayout",
    "LidParameters",
    "LiddedBoxLayout",
    "NetLayout",
    "VinylBoxLayout",
]
