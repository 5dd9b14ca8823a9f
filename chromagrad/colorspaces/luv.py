"""CIE 1976 L*u*v* relative to the D65 white point."""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import rgb_to_xyz, xyz_to_rgb, split, join
from .xyz import xyz_to_rgb_quick
from ..types.color_types import ColorInput, as_triple_array

REF_U = 0.19783000664283
REF_V = 0.46831999493879
EPSILON = 216.0 / 24389.0
KAPPA = 24389.0 / 27.0


def xyz_to_luv(xyz: ndarray) -> ndarray:
    """XYZ (0..100) to L*u*v* with L in [0, 100]."""
    X, Y, Z = split(xyz / 100.0)
    L = np.where(Y > EPSILON, 116.0 * np.cbrt(Y) - 16.0, KAPPA * Y)
    denominator = X + 15.0 * Y + 3.0 * Z
    black = (L == 0.0) | (denominator == 0.0)
    safe = np.where(black, 1.0, denominator)
    u = np.where(black, 0.0, 13.0 * L * (4.0 * X / safe - REF_U))
    v = np.where(black, 0.0, 13.0 * L * (9.0 * Y / safe - REF_V))
    return join(L, u, v)


def luv_to_xyz(luv: ndarray) -> ndarray:
    """L*u*v* to XYZ (0..100)."""
    L, u, v = split(luv)
    black = L == 0.0
    safe_L = np.where(black, 1.0, L)
    u_prime = u / (13.0 * safe_L) + REF_U
    v_prime = v / (13.0 * safe_L) + REF_V
    Y = np.where(L > 8.0, ((L + 16.0) / 116.0) ** 3, L / KAPPA)
    safe_v = np.where(v_prime == 0.0, 1.0, v_prime)
    X = np.where(black, 0.0, Y * 9.0 * u_prime / (4.0 * safe_v))
    Z = np.where(black, 0.0, Y * (12.0 - 3.0 * u_prime - 20.0 * v_prime) / (4.0 * safe_v))
    return join(X, np.where(black, 0.0, Y), Z) * 100.0


class LUV(ColorSpaceTransform):
    name = "LUV"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return xyz_to_luv(rgb_to_xyz(rgb))

    def _to_rgb(self, color: ndarray) -> ndarray:
        return xyz_to_rgb(luv_to_xyz(color))

    def to_rgb_quick(self, color: ColorInput) -> ndarray:
        return xyz_to_rgb_quick(luv_to_xyz(as_triple_array(color)))
