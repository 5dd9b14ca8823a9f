"""
RYB, the painter's primaries (Sugita and Takahashi, "Computational RYB
Color Model and its Applications", 2017).

White is removed before the conversion and black added after it, so the
transform is exactly invertible on [0, 1]^3.
"""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import split, join


def _rescale(target: ndarray, source: ndarray) -> ndarray:
    """Scale ``target`` so its largest channel matches the largest channel of ``source``."""
    target_max = target.max(axis=-1, keepdims=True)
    source_max = source.max(axis=-1, keepdims=True)
    usable = (target_max > 0.0) & (source_max > 0.0)
    factor = np.where(usable, source_max / np.where(usable, target_max, 1.0), 1.0)
    return target * factor


def rgb_to_ryb(rgb: ndarray) -> ndarray:
    white = rgb.min(axis=-1, keepdims=True)
    stripped = rgb - white
    R, G, B = split(stripped)
    low = np.minimum(R, G)
    ryb = _rescale(join(R - low, (G + low) / 2.0, (B + G - low) / 2.0), stripped)
    black = (1.0 - rgb).min(axis=-1, keepdims=True)
    return ryb + black


def ryb_to_rgb(ryb: ndarray) -> ndarray:
    black = ryb.min(axis=-1, keepdims=True)
    stripped = ryb - black
    r, y, b = split(stripped)
    low = np.minimum(y, b)
    rgb = _rescale(join(r + y - low, y + low, 2.0 * (b - low)), stripped)
    white = (1.0 - ryb).min(axis=-1, keepdims=True)
    return rgb + white


class RYB(ColorSpaceTransform):
    name = "RYB"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return rgb_to_ryb(rgb)

    def _to_rgb(self, color: ndarray) -> ndarray:
        return ryb_to_rgb(color)
