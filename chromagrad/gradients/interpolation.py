"""Easing curves remapping the position between two color stops."""

from __future__ import annotations
from enum import IntEnum
import math

from ..utils.fast_pow import fast_pow


def _gain(step: float, k: float) -> float:
    if step < 0.5:
        return 0.0 if step <= 0.0 else 0.5 * fast_pow(2.0 * step, k)
    return 1.0 if step >= 1.0 else 1.0 - 0.5 * fast_pow(2.0 * (1.0 - step), k)


def _bounce(step: float) -> float:
    if step < 0.36364:  # 1/2.75
        return 7.5625 * step * step
    if step < 0.72727:  # 2/2.75
        step -= 0.545454
        return 7.5625 * step * step + 0.75
    if step < 0.90909:  # 2.5/2.75
        step -= 0.81818
        return 7.5625 * step * step + 0.9375
    step -= 0.95455
    return 7.5625 * step * step + 0.984375


class Interpolation(IntEnum):
    """
    Curve applied to the normalized position between two stops before the
    channels are blended.

    LINEAR, IDENTITY, SMOOTH_STEP, SMOOTHER_STEP, CUBIC, CIRCULAR, BOUNCE,
    GAIN1, GAIN2 and EXPONENTIAL map 0 to 0 and 1 to 1. SINE, PARABOLA,
    EXPIMPULSE and HEARTBEAT are shapes rather than easings and do not.
    """
    LINEAR = 0
    IDENTITY = 1
    SMOOTH_STEP = 2
    SMOOTHER_STEP = 3
    EXPONENTIAL = 4
    CUBIC = 5
    BOUNCE = 6
    CIRCULAR = 7
    SINE = 8
    PARABOLA = 9
    GAIN1 = 10
    GAIN2 = 11
    EXPIMPULSE = 12
    HEARTBEAT = 13

    def next(self) -> "Interpolation":
        return Interpolation((int(self) + 1) % len(Interpolation))

    def prev(self) -> "Interpolation":
        return Interpolation((int(self) - 1 + len(Interpolation)) % len(Interpolation))

    def apply(self, step: float) -> float:
        """Remap ``step`` in [0, 1] through this curve."""
        return _CURVES[self](float(step))


_CURVES = {
    Interpolation.LINEAR: lambda s: s,
    Interpolation.IDENTITY: lambda s: s * s * (2.0 - s),
    Interpolation.SMOOTH_STEP: lambda s: 3.0 * s * s - 2.0 * s * s * s,
    Interpolation.SMOOTHER_STEP: lambda s: s * s * s * (s * (s * 6.0 - 15.0) + 10.0),
    Interpolation.EXPONENTIAL: lambda s: s if s == 1.0 else max(0.0, 1.0 - fast_pow(2.0, -10.0 * s)),
    Interpolation.CUBIC: lambda s: s * s * s,
    Interpolation.BOUNCE: _bounce,
    Interpolation.CIRCULAR: lambda s: math.sqrt(max((2.0 - s) * s, 0.0)),
    Interpolation.SINE: math.sin,
    Interpolation.PARABOLA: lambda s: math.sqrt(max(4.0 * s * (1.0 - s), 0.0)),
    Interpolation.GAIN1: lambda s: _gain(s, 0.3),
    Interpolation.GAIN2: lambda s: _gain(s, 3.3333),
    Interpolation.EXPIMPULSE: lambda s: 2.0 * s * math.exp(1.0 - 2.0 * s),
    Interpolation.HEARTBEAT: lambda s: (math.atan(math.sin(math.pi * s) * 6.0) + math.pi / 2.0) / math.pi,
}
