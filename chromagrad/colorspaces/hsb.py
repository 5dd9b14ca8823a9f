"""Hue, saturation, brightness with every channel in [0, 1]."""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import split, join

# keeps grays and black away from a division by zero
_FUDGE = 1e-20


def rgb_to_hsb(rgb: ndarray) -> ndarray:
    R, G, B = split(rgb)
    high = rgb.max(axis=-1)
    chroma = high - rgb.min(axis=-1)
    denominator = 6.0 * chroma + _FUDGE
    hue = np.select(
        [high == R, high == G],
        [(G - B) / denominator, (B - R) / denominator + 1.0 / 3.0],
        (R - G) / denominator + 2.0 / 3.0,
    )
    hue = np.where(hue < 0.0, hue + 1.0, hue)
    return join(hue, chroma / (high + _FUDGE), high)


def hsb_to_rgb(hsb: ndarray) -> ndarray:
    H, S, V = split(hsb)
    h = H * 6.0
    whole = np.floor(h)
    sector = whole.astype(np.int64) % 6
    fraction = h - whole
    tint1 = V * (1.0 - S)
    tint2 = V * (1.0 - S * fraction)
    tint3 = V * (1.0 - S * (1.0 - fraction))
    sectors = [sector == k for k in range(6)]
    R = np.select(sectors, [V, tint2, tint1, tint1, tint3, V])
    G = np.select(sectors, [tint3, V, V, tint2, tint1, tint1])
    B = np.select(sectors, [tint1, tint1, tint3, V, V, tint2])
    gray = S == 0.0
    return join(np.where(gray, V, R), np.where(gray, V, G), np.where(gray, V, B))


class HSB(ColorSpaceTransform):
    """
    Hexcone HSB.

    Interpolation stays per-channel, so a blend between hues 0.9 and 0.1
    sweeps through 0.5 rather than wrapping through 0.
    """

    name = "HSB"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return rgb_to_hsb(rgb)

    def _to_rgb(self, color: ndarray) -> ndarray:
        return hsb_to_rgb(color)
