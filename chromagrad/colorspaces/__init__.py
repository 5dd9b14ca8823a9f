"""
Invertible transforms between sRGB and perceptual color spaces.

Every transform converts gamma-encoded sRGB in [0, 1] to its own space and
back, accepting one triple or any ``(..., 3)`` batch:

    >>> from chromagrad.colorspaces import ColorSpaces
    >>> oklab = ColorSpaces.OKLAB.color_space
    >>> lab = oklab.from_rgb([1.0, 0.5, 0.0])
    >>> rgb = oklab.to_rgb(lab)

Spaces: RGB, XYZ, LAB, DIN99, ITP, HLAB, SRLAB2, OKLAB, LUV, JAB, XYB, IPT,
RYB, HSB.
"""

from .base import ColorSpaceTransform
from .common import (
    srgb_to_linear,
    linear_to_srgb,
    rgb_to_xyz,
    xyz_to_rgb,
)
from .xyz import xyz_to_rgb_quick, xyz_to_rgb_very_quick
from .registry import ColorSpaces, SIZE, get_color_space
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
