"""Oklab (Björn Ottosson, 2020). https://bottosson.github.io/posts/oklab/"""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import apply_matrix, srgb_to_linear, linear_to_srgb

M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])
M1_INV = np.linalg.inv(M1)

M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])
M2_INV = np.linalg.inv(M2)


def linear_rgb_to_oklab(rgb: ndarray) -> ndarray:
    return apply_matrix(M2, np.cbrt(apply_matrix(M1, rgb)))


def oklab_to_linear_rgb(lab: ndarray) -> ndarray:
    return apply_matrix(M1_INV, apply_matrix(M2_INV, lab) ** 3)


class OKLAB(ColorSpaceTransform):
    name = "OKLAB"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        return linear_rgb_to_oklab(srgb_to_linear(rgb))

    def _to_rgb(self, color: ndarray) -> ndarray:
        return linear_to_srgb(oklab_to_linear_rgb(color))
