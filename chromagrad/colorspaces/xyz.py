"""
CIE 1931 XYZ (D65, 0..100 scale).

Besides the exact inverse, two approximate inverses are provided that swap
the ``1/2.4`` power of the sRGB encoding for table-driven approximations.
Measured absolute error per channel over [0, 1]:

- :func:`xyz_to_rgb_quick` (FastPow, 13 bits): below 2e-4
- :func:`xyz_to_rgb_very_quick` (second-order expansion): up to about 7e-3
  for channels above 0.73 (linear value 0.5), and far larger towards black

Neither is used unless a caller asks for it.
"""

from __future__ import annotations
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import rgb_to_xyz, xyz_to_rgb, xyz_to_linear_rgb, linear_to_srgb_with
from ..types.color_types import ColorInput, as_triple_array
from ..utils.fast_pow import fast_pow
from ..utils.functions import very_fast_pow


def xyz_to_rgb_quick(xyz: ColorInput) -> ndarray:
    """XYZ (0..100) to sRGB using :func:`~chromagrad.utils.fast_pow.fast_pow` for the gamma."""
    return linear_to_srgb_with(xyz_to_linear_rgb(as_triple_array(xyz)), fast_pow)


def xyz_to_rgb_very_quick(xyz: ColorInput) -> ndarray:
    """XYZ (0..100) to sRGB using :func:`~chromagrad.utils.functions.very_fast_pow` for the gamma."""
    return linear_to_srgb_with(xyz_to_linear_rgb(as_triple_array(xyz)), very_fast_pow)


class XYZ(ColorSpaceTransform):
    name = "XYZ"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return rgb_to_xyz(rgb)

    def _to_rgb(self, color: ndarray) -> ndarray:
        return xyz_to_rgb(color)

    def to_rgb_quick(self, color: ColorInput) -> ndarray:
        return xyz_to_rgb_quick(color)

    def to_rgb_very_quick(self, color: ColorInput) -> ndarray:
        return xyz_to_rgb_very_quick(color)
