"""Random color sets for demo and test gradients."""

from __future__ import annotations
from typing import List, Optional
import math
import numpy as np

from ..colorspaces.registry import ColorSpaces
from ..types.color_types import ARGB
from ..utils.color_utils import unit_rgb_to_argb

SATURATION_MIN = 0.75
BRIGHTNESS_MIN = 0.75
SATURATION_VARIANCE = 0.1
BRIGHTNESS_VARIANCE = 0.1
# golden ratio conjugate, spreads successive hues evenly
GOLDEN_RATIO_CONJUGATE = (math.sqrt(5.0) + 1.0) / 2.0 - 1.0


def hue_stepped_colors(n: int, increment: float, rng: Optional[np.random.Generator] = None) -> List[ARGB]:
    """
    ``n`` opaque colors whose hues advance by ``increment`` from a random
    start, with saturation and brightness jittered around a random base.

    Raises:
        ValueError: If n < 1
    """
    if n < 1:
        raise ValueError(f"Number of colors must be at least 1, got {n}")
    rng = rng if rng is not None else np.random.default_rng()
    hsb = ColorSpaces.HSB.color_space
    hue = float(rng.random())
    saturation = float(rng.uniform(SATURATION_MIN, 1.0))
    brightness = float(rng.uniform(BRIGHTNESS_MIN, 1.0))

    colors = []
    for _ in range(n):
        s = np.clip(saturation + rng.uniform(-SATURATION_VARIANCE, SATURATION_VARIANCE), SATURATION_MIN, 1.0)
        b = np.clip(brightness + rng.uniform(-BRIGHTNESS_VARIANCE, BRIGHTNESS_VARIANCE), BRIGHTNESS_MIN, 1.0)
        colors.append(unit_rgb_to_argb(hsb.to_rgb([hue, s, b])))
        hue = (hue + increment) % 1.0
    return colors


def random_colors(n: int, rng: Optional[np.random.Generator] = None) -> List[ARGB]:
    """``n`` random, well separated opaque colors."""
    return hue_stepped_colors(n, GOLDEN_RATIO_CONJUGATE, rng)
