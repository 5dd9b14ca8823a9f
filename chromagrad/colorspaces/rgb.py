from __future__ import annotations
from numpy import ndarray

from .base import ColorSpaceTransform


class RGB(ColorSpaceTransform):
    """Device sRGB; interpolation happens on the gamma-encoded channels."""

    name = "RGB"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return rgb.copy()

    def _to_rgb(self, color: ndarray) -> ndarray:
        return color.copy()
