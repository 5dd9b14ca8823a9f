from __future__ import annotations
from typing import Dict, Optional
import numpy as np
from boundednumbers.functions import clamp

from ..colorspaces.registry import ColorSpaces
from ..types.color_types import ARGB
from ..utils.color_utils import (
    alpha_of,
    argb_to_unit_rgb,
    compose_argb,
    decompose_argb,
    normalize_argb,
)


def wrap_position(position: float) -> float:
    """
    Fold a position into [0, 1].

    Negative values and values above one are reduced modulo one, so
    exactly 1.0 stays 1.0.
    """
    if position < 0.0:
        position %= 1.0
    if position > 1.0:
        position %= 1.0
    return float(clamp(position, 0.0, 1.0))


class ColorStop:
    """
    A color anchored at a position of a gradient.

    The color is kept as a packed ARGB int. On every color change the RGB
    part is converted once into every registered color space, so gradient
    queries only interpolate.

    Args:
        color: Packed 0xAARRGGBB color (signed 32-bit values are accepted)
        position: Position in [0, 1]; values outside are clamped
    """

    def __init__(self, color: ARGB, position: float):
        self.position = float(clamp(float(position), 0.0, 1.0))
        self._converted: Dict[ColorSpaces, np.ndarray] = {}
        self.set_color(color)

    @property
    def color(self) -> ARGB:
        return self._color

    @property
    def alpha(self) -> int:
        return self._alpha

    def set_color(self, color: ARGB) -> None:
        color = normalize_argb(color)
        self._color = color
        self._alpha = alpha_of(color)
        rgb = argb_to_unit_rgb(color)
        self._converted = {space: space.color_space.from_rgb(rgb) for space in ColorSpaces}

    def set_position(self, position: float) -> None:
        self.position = wrap_position(float(position))

    def get_color(self, space: ColorSpaces) -> np.ndarray:
        """The stop color converted into ``space`` (a cached triple)."""
        return self._converted[space]

    def mutate(self, amount: float, rng: Optional[np.random.Generator] = None) -> None:
        """
        Nudge each RGB channel up or down by ``amount`` (0..255 units).

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError(f"Mutation amount must be non-negative, got {amount}")
        rng = rng if rng is not None else np.random.default_rng()
        red, green, blue, alpha = decompose_argb(self._color)
        signs = np.where(rng.random(3) < 0.5, -1.0, 1.0)
        channels = [int(clamp(round(c + s * amount), 0, 255)) for c, s in zip((red, green, blue), signs)]
        self.set_color(compose_argb(*channels, alpha))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorStop):
            return NotImplemented
        return self.position == other.position and self._color == other._color

    def __hash__(self) -> int:
        return hash((self.position, self._color))

    def __lt__(self, other: "ColorStop") -> bool:
        return self.position < other.position

    def __repr__(self) -> str:
        return f"ColorStop(0x{self._color:08X}, {self.position})"
