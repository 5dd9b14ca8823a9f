from __future__ import annotations
from abc import ABC, abstractmethod
import numpy as np
from numpy import ndarray

from ..types.color_types import ColorInput, as_triple_array


class ColorSpaceTransform(ABC):
    """
    Invertible transform between gamma-encoded sRGB in [0, 1] and a color space.

    Subclasses implement :meth:`_from_rgb` and :meth:`_to_rgb` on float64
    arrays of shape ``(..., 3)``; the public methods validate and normalize
    their input, so a single triple and a batch of triples are both accepted.
    """

    name: str = ""

    def from_rgb(self, rgb: ColorInput) -> ndarray:
        """Convert sRGB triple(s) into this space."""
        return self._from_rgb(as_triple_array(rgb))

    def to_rgb(self, color: ColorInput) -> ndarray:
        """Convert triple(s) of this space back to sRGB."""
        return self._to_rgb(as_triple_array(color))

    def interpolate_linear(self, a: ColorInput, b: ColorInput, step: float) -> ndarray:
        """
        Per-channel linear interpolation between two colors of this space.

        Every channel, hue channels included, is treated as a plain linear
        value.
        """
        a = as_triple_array(a)
        b = as_triple_array(b)
        return a + (b - a) * step

    @abstractmethod
    def _from_rgb(self, rgb: ndarray) -> ndarray:
        ...

    @abstractmethod
    def _to_rgb(self, color: ndarray) -> ndarray:
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
