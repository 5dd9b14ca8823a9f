"""
SRLAB2 (Jan Behrens, 2016): CIE L*a*b* with the chromatic adaptation of
CIECAM02 folded into the matrices. https://www.magnetkern.de/srlab2.html
"""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import apply_matrix, srgb_to_linear, linear_to_srgb

EPSILON = 216.0 / 24389.0
KAPPA = 24389.0 / 2700.0

RGB_TO_XYZ = np.array([
    [0.320530, 0.636920, 0.042560],
    [0.161987, 0.756636, 0.081376],
    [0.017228, 0.108660, 0.874112],
])
XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)

XYZ_TO_LAB = np.array([
    [37.0950, 62.9054, -0.0008],
    [663.4684, -750.5078, 87.0328],
    [63.9569, 108.4576, -172.4152],
])
LAB_TO_XYZ = np.linalg.inv(XYZ_TO_LAB)

# KAPPA * EPSILON, the compressed value at the branch point
_COMPRESSED_THRESHOLD = 0.08


def _compress(x: ndarray) -> ndarray:
    return np.where(x <= EPSILON, x * KAPPA, 1.16 * np.cbrt(x) - 0.16)


def _expand(x: ndarray) -> ndarray:
    return np.where(x <= _COMPRESSED_THRESHOLD, x / KAPPA, ((x + 0.16) / 1.16) ** 3)


class SRLAB2(ColorSpaceTransform):
    name = "SRLAB2"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        xyz = apply_matrix(RGB_TO_XYZ, srgb_to_linear(rgb))
        return apply_matrix(XYZ_TO_LAB, _compress(xyz))

    def _to_rgb(self, color: ndarray) -> ndarray:
        xyz = _expand(apply_matrix(LAB_TO_XYZ, color))
        return linear_to_srgb(apply_matrix(XYZ_TO_RGB, xyz))
