"""Packing and unpacking of 32-bit ARGB colors."""

from __future__ import annotations
from typing import Tuple
import numpy as np
from boundednumbers.functions import clamp

from ..types.color_types import ARGB, ColorInput

OPAQUE = 0xFF << 24
INV_255 = 1.0 / 255.0


def compose_argb(red: int, green: int, blue: int, alpha: int = 255) -> ARGB:
    """Pack 0..255 channels into an ARGB int. Channels are masked to 8 bits."""
    return (alpha & 0xFF) << 24 | (red & 0xFF) << 16 | (green & 0xFF) << 8 | (blue & 0xFF)


def decompose_argb(color: ARGB) -> Tuple[int, int, int, int]:
    """Unpack an ARGB int into ``(red, green, blue, alpha)`` 0..255 channels."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF, (color >> 24) & 0xFF


def alpha_of(color: ARGB) -> int:
    return (color >> 24) & 0xFF


def argb_to_unit_rgb(color: ARGB) -> np.ndarray:
    """Unpack the RGB part of an ARGB int into a float64 triple in [0, 1]."""
    red, green, blue, _ = decompose_argb(color)
    return np.array([red, green, blue], dtype=np.float64) * INV_255


def unit_channel_to_255(value: float) -> int:
    """Round a [0, 1] channel half-up to 0..255, clamping out-of-gamut values."""
    return int(clamp(int(np.floor(value * 255.0 + 0.5)), 0, 255))


def unit_rgb_to_argb(rgb: ColorInput, alpha: int = 255) -> ARGB:
    """
    Pack a [0, 1] RGB triple into an ARGB int.

    Channels are rounded half-up and clamped, so out-of-gamut values coming
    back from a perceptual space saturate at 0 or 255.

    Args:
        rgb: Three channels in [0, 1]
        alpha: Alpha channel 0..255

    Returns:
        Packed ARGB int
    """
    red, green, blue = (unit_channel_to_255(c) for c in np.asarray(rgb, dtype=np.float64).reshape(3))
    return compose_argb(red, green, blue, alpha)


def normalize_argb(color: int) -> ARGB:
    """Map any int (including signed 32-bit colors such as ``-1``) onto 0..0xFFFFFFFF."""
    return int(color) & 0xFFFFFFFF
