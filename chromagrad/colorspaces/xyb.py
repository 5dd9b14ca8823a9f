"""
XYB, the perceptual space of JPEG XL.

Linear sRGB is mixed by the opsin absorbance matrix, offset by a small bias,
cube-rooted, and the first two cone responses are split into a red/green
opponent channel (X) and a luminance-like channel (Y).
"""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import apply_matrix, srgb_to_linear, linear_to_srgb, split, join

K_SCALE = 255.0

K_M02 = 0.078
K_M00 = 0.30
K_M01 = 1.0 - K_M02 - K_M00

K_M12 = 0.078
K_M10 = 0.23
K_M11 = 1.0 - K_M12 - K_M10

K_M20 = 0.24342268924547819
K_M21 = 0.20476744424496821
K_M22 = 1.0 - K_M20 - K_M21

OPSIN_ABSORBANCE = np.array([
    [K_M00, K_M01, K_M02],
    [K_M10, K_M11, K_M12],
    [K_M20, K_M21, K_M22],
]) / K_SCALE
INVERSE_OPSIN_ABSORBANCE = np.linalg.inv(OPSIN_ABSORBANCE)

OPSIN_BIAS = 0.96723368009523958 / K_SCALE
OPSIN_BIAS_CBRT = np.cbrt(OPSIN_BIAS)


def linear_rgb_to_xyb(rgb: ndarray) -> ndarray:
    mixed = np.maximum(apply_matrix(OPSIN_ABSORBANCE, rgb) + OPSIN_BIAS, 0.0)
    L, M, S = split(np.cbrt(mixed) - OPSIN_BIAS_CBRT)
    return join(0.5 * (L - M), 0.5 * (L + M), S)


def xyb_to_linear_rgb(xyb: ndarray) -> ndarray:
    X, Y, B = split(xyb)
    gamma = join(Y + X, Y - X, B) + OPSIN_BIAS_CBRT
    return apply_matrix(INVERSE_OPSIN_ABSORBANCE, gamma ** 3 - OPSIN_BIAS)


class XYB(ColorSpaceTransform):
    name = "XYB"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return linear_rgb_to_xyb(srgb_to_linear(rgb))

    def _to_rgb(self, color: ndarray) -> ndarray:
        return linear_to_srgb(xyb_to_linear_rgb(color))
