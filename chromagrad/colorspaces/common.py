"""
Shared pieces of the color-space transforms.

sRGB gamma, the D65 sRGB <-> XYZ matrices and a few array helpers. XYZ is
expressed on the 0..100 scale (Y = 100 for reference white).
"""

from __future__ import annotations
from typing import Callable
import numpy as np
from numpy import ndarray as NDArray

SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

# D65 reference white on the 0..100 scale
WHITE_X = 95.047
WHITE_Y = 100.0
WHITE_Z = 108.883

RGB_TO_XYZ = np.array([
    [0.41239079926595, 0.35758433938387, 0.18048078840183],
    [0.21263900587151, 0.71516867876775, 0.072192315360733],
    [0.019330818715591, 0.11919477979462, 0.95053215224966],
])
XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)


def srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= SRGB_DECODE_THRESHOLD,
        c / 12.92,
        ((np.maximum(c, SRGB_DECODE_THRESHOLD) + 0.055) / 1.055) ** SRGB_GAMMA,
    )


def linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= SRGB_ENCODE_THRESHOLD,
        12.92 * c,
        1.055 * (np.maximum(c, SRGB_ENCODE_THRESHOLD) ** (1 / SRGB_GAMMA)) - 0.055,
    )


def linear_to_srgb_with(c: NDArray, power: Callable[[NDArray, float], NDArray]) -> NDArray:
    """sRGB encoding with a substitute power function (for the approximate paths)."""
    c = np.asarray(c, dtype=float)
    encoded = 1.055 * np.asarray(power(np.maximum(c, SRGB_ENCODE_THRESHOLD), 1 / SRGB_GAMMA)) - 0.055
    return np.where(c <= SRGB_ENCODE_THRESHOLD, 12.92 * c, encoded)


def apply_matrix(matrix: NDArray, values: NDArray) -> NDArray:
    """Multiply every triple on the last axis of ``values`` by ``matrix``."""
    return values @ matrix.T


def rgb_to_xyz(rgb: NDArray) -> NDArray:
    """sRGB (0..1) to CIE XYZ (0..100)."""
    return apply_matrix(RGB_TO_XYZ, srgb_to_linear(rgb) * 100.0)


def xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    return apply_matrix(XYZ_TO_RGB, np.asarray(xyz, dtype=float) * 0.01)


def xyz_to_rgb(xyz: NDArray) -> NDArray:
    """CIE XYZ (0..100) to sRGB (0..1)."""
    return linear_to_srgb(xyz_to_linear_rgb(xyz))


def spow(x: NDArray, p: float) -> NDArray:
    """Sign-preserving power: ``sign(x) * |x| ** p``."""
    return np.sign(x) * np.abs(x) ** p


def split(values: NDArray):
    """Split the last axis of a ``(..., 3)`` array into three channel arrays."""
    return values[..., 0], values[..., 1], values[..., 2]


def join(a: NDArray, b: NDArray, c: NDArray) -> NDArray:
    return np.stack([a, b, c], axis=-1)
