"""DIN 6176 (DIN99) color space, derived from CIE L*a*b*."""

from __future__ import annotations
import math
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .lab import rgb_to_lab, lab_to_rgb
from .common import split, join

SIN_16DEG = math.sin(math.radians(16.0))
COS_16DEG = math.cos(math.radians(16.0))
FAC_1 = 100.0 / math.log(129.0 / 50.0)
K_CH = 1.0
K_E = 1.0


def lab_to_din99(lab: ndarray) -> ndarray:
    L, a, b = split(lab)
    L99 = K_E * FAC_1 * np.log1p(0.0158 * L)
    e = a * COS_16DEG + b * SIN_16DEG
    f = 0.7 * (b * COS_16DEG - a * SIN_16DEG)
    G = np.hypot(e, f)
    safe_G = np.where(G == 0.0, 1.0, G)
    k = np.where(G == 0.0, 0.0, np.log1p(0.045 * safe_G) / (0.045 * K_CH * K_E * safe_G))
    return join(L99, k * e, k * f)


def din99_to_lab(din: ndarray) -> ndarray:
    L99, a99, b99 = split(din)
    hue = np.arctan2(b99, a99)
    C = np.hypot(a99, b99)
    G = np.expm1(0.045 * C * K_CH * K_E) / 0.045
    e = G * np.cos(hue)
    f = G * np.sin(hue) / 0.7
    L = np.expm1(L99 * K_E / FAC_1) / 0.0158
    return join(L, e * COS_16DEG - f * SIN_16DEG, e * SIN_16DEG + f * COS_16DEG)


class DIN99(ColorSpaceTransform):
    name = "DIN99"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return lab_to_din99(rgb_to_lab(rgb))

    def _to_rgb(self, color: ndarray) -> ndarray:
        return lab_to_rgb(din99_to_lab(color))
