"""
ICSILog: logarithm approximation with a single-precision lookup table.

Vinyals, Friedland and Mirghafori, "Revisiting a basic function on current
CPUs: a fast logarithm implementation with adjustable accuracy" (ICSI, 2007).
"""

from __future__ import annotations
import math
import numpy as np

from .base import FastLog, N, frozen
from .bits import (
    double_fields,
    float_fields,
    DOUBLE_MANTISSA_BITS,
    DOUBLE_IMPLICIT_BIT,
    FLOAT_MANTISSA_BITS,
    FLOAT_IMPLICIT_BIT,
)

MAX_N = 22
# float32 table entries carry the float32 exponent bias (127 + 23 = 150);
# float64 queries shift it to 1023 + 52 = 1075 and undo the index rescaling
DOUBLE_BIAS_SHIFT = 896


class FFastLog(FastLog):
    """
    Fast logarithm over a float32 table of ``2 ** (n + 1)`` entries.

    Entry ``i`` holds ``log2(i << q) - 150`` with ``q = 23 - n``. Both float32
    and float64 queries share the table.

    Args:
        base: Base of the logarithm returned by :meth:`log`
        n: Mantissa bits used for the lookup, in ``[0, 22]``
    """

    def __init__(self, base: float = math.e, n: int = N):
        if not 0 <= n <= MAX_N:
            raise ValueError(f"n must be in [0, {MAX_N}], got {n}")
        super().__init__(base, n)
        self._q = FLOAT_MANTISSA_BITS - n
        self._qd = DOUBLE_MANTISSA_BITS - n
        index = np.arange(1 << (n + 1), dtype=np.float64)
        with np.errstate(divide="ignore"):
            table = np.log2(index * float(1 << self._q)) - 150.0
        self._data = frozen(table.astype(np.float32))

    @property
    def table(self) -> np.ndarray:
        return self._data

    def _log2_values(self, values: np.ndarray) -> np.ndarray:
        if values.dtype == np.float32:
            return self._log2_float(values)
        return self._log2_double(values)

    def _log2_float(self, values: np.ndarray) -> np.ndarray:
        exponent, mantissa = float_fields(values)
        normal = exponent != 0
        index = np.where(
            normal,
            (mantissa | FLOAT_IMPLICIT_BIT) >> np.uint32(self._q),
            mantissa >> np.uint32(self._q - 1),
        ).astype(np.int64)
        return exponent + self._data[index].astype(np.float64)

    def _log2_double(self, values: np.ndarray) -> np.ndarray:
        exponent, mantissa = double_fields(values)
        normal = exponent != 0
        index = np.where(
            normal,
            (mantissa | DOUBLE_IMPLICIT_BIT) >> np.uint64(self._qd),
            mantissa >> np.uint64(self._qd - 1),
        ).astype(np.int64)
        return exponent - DOUBLE_BIAS_SHIFT + self._data[index].astype(np.float64)
