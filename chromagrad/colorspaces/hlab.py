"""Hunter L, a, b (1948), computed from CIE XYZ under D65."""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import WHITE_X, WHITE_Y, WHITE_Z, rgb_to_xyz, xyz_to_rgb, split, join
from .xyz import xyz_to_rgb_quick
from ..types.color_types import ColorInput, as_triple_array

KA = 175.0 / 198.04 * (WHITE_Y + WHITE_X)
KB = 70.0 / 218.11 * (WHITE_Y + WHITE_Z)


def xyz_to_hlab(xyz: ndarray) -> ndarray:
    X, Y, Z = split(xyz)
    y = Y / WHITE_Y
    root = np.sqrt(np.maximum(y, 0.0))
    safe_root = np.where(root == 0.0, 1.0, root)
    a = np.where(root == 0.0, 0.0, KA * (X / WHITE_X - y) / safe_root)
    b = np.where(root == 0.0, 0.0, KB * (y - Z / WHITE_Z) / safe_root)
    return join(100.0 * root, a, b)


def hlab_to_xyz(hlab: ndarray) -> ndarray:
    L, a, b = split(hlab)
    root = L / 100.0
    y = root * root
    X = (a / KA * root + y) * WHITE_X
    Z = -(b / KB * root - y) * WHITE_Z
    return join(X, y * WHITE_Y, Z)


class HLAB(ColorSpaceTransform):
    name = "HLAB"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return xyz_to_hlab(rgb_to_xyz(rgb))

    def _to_rgb(self, color: ndarray) -> ndarray:
        return xyz_to_rgb(hlab_to_xyz(color))

    def to_rgb_quick(self, color: ColorInput) -> ndarray:
        return xyz_to_rgb_quick(hlab_to_xyz(as_triple_array(color)))
