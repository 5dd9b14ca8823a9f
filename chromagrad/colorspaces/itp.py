"""
ICtCp (ITU-R BT.2100) with the SMPTE ST 2084 perceptual quantizer.

The device RGB triple feeds the LMS matrix directly and luminance is taken
relative (1.0 = PQ peak) rather than in absolute nits.
"""

from __future__ import annotations
import numpy as np
from numpy import ndarray

from .base import ColorSpaceTransform
from .common import apply_matrix

M1 = 2610.0 / 16384.0
M2 = 2523.0 / 4096.0 * 128.0
C1 = 3424.0 / 4096.0
C2 = 2413.0 / 4096.0 * 32.0
C3 = 2392.0 / 4096.0 * 32.0

RGB_TO_LMS = np.array([
    [1688.0, 2146.0, 262.0],
    [683.0, 2951.0, 462.0],
    [99.0, 309.0, 3688.0],
]) / 4096.0
LMS_TO_RGB = np.linalg.inv(RGB_TO_LMS)

LMS_TO_ITP = np.array([
    [2048.0, 2048.0, 0.0],
    [6610.0, -13613.0, 7003.0],
    [17933.0, -17390.0, -543.0],
]) / 4096.0
ITP_TO_LMS = np.linalg.inv(LMS_TO_ITP)


def pq_inverse_eotf(F: ndarray) -> ndarray:
    """Linear signal (0..1) to PQ-encoded value."""
    Y = np.maximum(F, 0.0) ** M1
    return ((C1 + C2 * Y) / (1.0 + C3 * Y)) ** M2


def pq_eotf(N: ndarray) -> ndarray:
    """PQ-encoded value to linear signal (0..1)."""
    V_p = np.maximum(N, 0.0) ** (1.0 / M2)
    n = np.maximum(V_p - C1, 0.0)
    return (n / (C2 - C3 * V_p)) ** (1.0 / M1)


class ITP(ColorSpaceTransform):
    name = "ITP"

    def _from_rgb(self, rgb: ndarray) -> ndarray:
        lms = pq_inverse_eotf(apply_matrix(RGB_TO_LMS, rgb))
        return apply_matrix(LMS_TO_ITP, lms)

    def _to_rgb(self, color: ndarray) -> ndarray:
        lms = pq_eotf(apply_matrix(ITP_TO_LMS, color))
        return apply_matrix(LMS_TO_RGB, lms)
