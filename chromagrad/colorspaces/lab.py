"""CIE 1976 L*a*b* relative to the D65 white point."""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import WHITE_X, WHITE_Y, WHITE_Z, rgb_to_xyz, xyz_to_rgb, split, join
from .xyz import xyz_to_rgb_quick
from ..types.color_types import ColorInput, as_triple_array

EPSILON = 216.0 / 24389.0
KAPPA = 24389.0 / 27.0
_WHITE = np.array([WHITE_X, WHITE_Y, WHITE_Z])


def _f(t: ndarray) -> ndarray:
    return np.where(t > EPSILON, np.cbrt(t), (KAPPA * t + 16.0) / 116.0)


def _f_inv(u: ndarray) -> ndarray:
    cube = u ** 3
    return np.where(cube > EPSILON, cube, (116.0 * u - 16.0) / KAPPA)


def xyz_to_lab(xyz: ndarray) -> ndarray:
    fx, fy, fz = split(_f(xyz / _WHITE))
    return join(116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def lab_to_xyz(lab: ndarray) -> ndarray:
    L, a, b = split(lab)
    fy = (L + 16.0) / 116.0
    return _f_inv(join(fy + a / 500.0, fy, fy - b / 200.0)) * _WHITE


def rgb_to_lab(rgb: ndarray) -> ndarray:
    return xyz_to_lab(rgb_to_xyz(rgb))


def lab_to_rgb(lab: ndarray) -> ndarray:
    return xyz_to_rgb(lab_to_xyz(lab))


class LAB(ColorSpaceTransform):
    name = "LAB"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return rgb_to_lab(rgb)

    def _to_rgb(self, color: ndarray) -> ndarray:
        return lab_to_rgb(color)

    def to_rgb_quick(self, color: ColorInput) -> ndarray:
        """Approximate inverse through :func:`~chromagrad.colorspaces.xyz.xyz_to_rgb_quick`."""
        return xyz_to_rgb_quick(lab_to_xyz(as_triple_array(color)))
