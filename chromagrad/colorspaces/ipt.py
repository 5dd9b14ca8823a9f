"""IPT (Ebner and Fairchild, 1998), from CIE XYZ normalized to Y = 1."""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import apply_matrix, rgb_to_xyz, xyz_to_rgb, spow

POWER = 0.43

XYZ_TO_LMS = np.array([
    [0.4002, 0.7075, -0.0807],
    [-0.2280, 1.1500, 0.0612],
    [0.0, 0.0, 0.9184],
])
LMS_TO_XYZ = np.linalg.inv(XYZ_TO_LMS)

LMS_TO_IPT = np.array([
    [0.4000, 0.4000, 0.2000],
    [4.4550, -4.8510, 0.3960],
    [0.8056, 0.3572, -1.1628],
])
IPT_TO_LMS = np.linalg.inv(LMS_TO_IPT)


def xyz_to_ipt(xyz: ndarray) -> ndarray:
    lms = apply_matrix(XYZ_TO_LMS, xyz / 100.0)
    return apply_matrix(LMS_TO_IPT, spow(lms, POWER))


def ipt_to_xyz(ipt: ndarray) -> ndarray:
    lms = spow(apply_matrix(IPT_TO_LMS, ipt), 1.0 / POWER)
    return apply_matrix(LMS_TO_XYZ, lms) * 100.0


class IPT(ColorSpaceTransform):
    name = "IPT"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return xyz_to_ipt(rgb_to_xyz(rgb))

    def _to_rgb(self, color: ndarray) -> ndarray:
        return xyz_to_rgb(ipt_to_xyz(color))
