"""
Jzazbz (Safdar et al., 2017).

XYZ is fed on its 0..100 scale without the absolute-luminance division of
the paper, so Jz is relative.
"""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import apply_matrix, rgb_to_xyz, xyz_to_rgb, split, join
from .xyz import xyz_to_rgb_quick
from ..types.color_types import ColorInput, as_triple_array

B = 1.15
G = 0.66
C1 = 3424.0 / 2 ** 12
C2 = 2413.0 / 2 ** 7
C3 = 2392.0 / 2 ** 7
N = 2610.0 / 2 ** 14
P = 1.7 * 2523.0 / 2 ** 5
D = -0.56
D0 = 1.6295499532821567e-11

XYZ_TO_LMS = np.array([
    [0.41478972, 0.579999, 0.0146480],
    [-0.2015100, 1.120649, 0.0531008],
    [-0.0166008, 0.264800, 0.6684799],
])
LMS_TO_XYZ = np.linalg.inv(XYZ_TO_LMS)

LMS_TO_IAB = np.array([
    [0.5, 0.5, 0.0],
    [3.524000, -4.066708, 0.542708],
    [0.199076, 1.096799, -1.295875],
])
IAB_TO_LMS = np.linalg.inv(LMS_TO_IAB)


def xyz_to_jab(xyz: ndarray) -> ndarray:
    X, Y, Z = split(xyz)
    xyz_p = join(B * X - (B - 1.0) * Z, G * Y - (G - 1.0) * X, Z)
    lms = np.maximum(apply_matrix(XYZ_TO_LMS, xyz_p), 0.0) ** N
    lms_p = ((C1 + C2 * lms) / (1.0 + C3 * lms)) ** P
    I, a, b = split(apply_matrix(LMS_TO_IAB, lms_p))
    J = (1.0 + D) * I / (1.0 + D * I) - D0
    return join(J, a, b)


def jab_to_xyz(jab: ndarray) -> ndarray:
    J, a, b = split(jab)
    I = (J + D0) / (1.0 + D - D * (J + D0))
    lms_p = np.maximum(apply_matrix(IAB_TO_LMS, join(I, a, b)), 0.0) ** (1.0 / P)
    ratio = np.maximum((C1 - lms_p) / (C3 * lms_p - C2), 0.0)
    Xp, Yp, Zp = split(apply_matrix(LMS_TO_XYZ, ratio ** (1.0 / N)))
    X = (Xp + (B - 1.0) * Zp) / B
    Y = (Yp + (G - 1.0) * X) / G
    return join(X, Y, Zp)


class JAB(ColorSpaceTransform):
    name = "JAB"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return xyz_to_jab(rgb_to_xyz(rgb))

    def _to_rgb(self, color: ndarray) -> ndarray:
        return xyz_to_rgb(jab_to_xyz(color))

    def to_rgb_quick(self, color: ColorInput) -> ndarray:
        return xyz_to_rgb_quick(jab_to_xyz(as_triple_array(color)))
