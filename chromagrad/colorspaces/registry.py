"""Fixed, cyclically ordered registry of the available color spaces."""

from __future__ import annotations
from enum import IntEnum
from typing import Dict

from .base import ColorSpaceTransform
from .rgb import RGB
from .xyz import XYZ
from .lab import LAB
from .din99 import DIN99
from .itp import ITP
from .hlab import HLAB
from .srlab2 import SRLAB2
from .oklab import OKLAB
from .luv import LUV
from .jab import JAB
from .xyb import XYB
from .ipt import IPT
from .ryb import RYB
from .hsb import HSB


class ColorSpaces(IntEnum):
    """
    Color spaces a gradient can interpolate in.

    The value of each member is its stable index; :meth:`next` and
    :meth:`prev` wrap around the ends.
    """
    RGB = 0
    XYZ = 1
    LAB = 2
    DIN99 = 3
    ITP = 4
    HLAB = 5
    SRLAB2 = 6
    OKLAB = 7
    LUV = 8
    JAB = 9
    XYB = 10
    IPT = 11
    RYB = 12
    HSB = 13

    @property
    def index(self) -> int:
        return int(self)

    @property
    def color_space(self) -> ColorSpaceTransform:
        """The shared transform instance for this space."""
        return _TRANSFORMS[self]

    def next(self) -> "ColorSpaces":
        return ColorSpaces((self.index + 1) % SIZE)

    def prev(self) -> "ColorSpaces":
        return ColorSpaces((self.index - 1 + SIZE) % SIZE)

    @classmethod
    def get(cls, index: int) -> "ColorSpaces":
        """
        Look up a color space by index.

        Raises:
            IndexError: If index is not in ``[0, SIZE)``
        """
        if not 0 <= index < SIZE:
            raise IndexError(f"Color space index must be in [0, {SIZE}), got {index}")
        return cls(index)

    @classmethod
    def size(cls) -> int:
        return SIZE


SIZE = len(ColorSpaces)

_TRANSFORMS: Dict[ColorSpaces, ColorSpaceTransform] = {
    ColorSpaces.RGB: RGB(),
    ColorSpaces.XYZ: XYZ(),
    ColorSpaces.LAB: LAB(),
    ColorSpaces.DIN99: DIN99(),
    ColorSpaces.ITP: ITP(),
    ColorSpaces.HLAB: HLAB(),
    ColorSpaces.SRLAB2: SRLAB2(),
    ColorSpaces.OKLAB: OKLAB(),
    ColorSpaces.LUV: LUV(),
    ColorSpaces.JAB: JAB(),
    ColorSpaces.XYB: XYB(),
    ColorSpaces.IPT: IPT(),
    ColorSpaces.RYB: RYB(),
    ColorSpaces.HSB: HSB(),
}


def get_color_space(space: ColorSpaces | str | int) -> ColorSpaceTransform:
    """
    Resolve a registry member, its name or its index to the transform.

    Raises:
        ValueError: If a name is not registered
        IndexError: If an index is out of range
    """
    if isinstance(space, ColorSpaces):
        return space.color_space
    if isinstance(space, str):
        try:
            return ColorSpaces[space.upper()].color_space
        except KeyError:
            raise ValueError(f"Unknown color space: {space}") from None
    return ColorSpaces.get(space).color_space
