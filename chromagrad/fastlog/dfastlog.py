"""ICSILog over the float64 bit layout."""

from __future__ import annotations
import math
import numpy as np

from .base import FastLog, N, frozen
from .bits import double_fields, DOUBLE_MANTISSA_BITS, DOUBLE_IMPLICIT_BIT

MAX_N = 30


class DFastLog(FastLog):
    """
    Fast logarithm over a float64 table of ``2 ** (n + 1)`` entries.

    Entry ``i`` holds ``log2(i << q) - 1075`` with ``q = 52 - n``. float32
    queries are widened to float64 first, which is exact.

    Args:
        base: Base of the logarithm returned by :meth:`log`
        n: Mantissa bits used for the lookup, in ``[0, 30]``
    """

    def __init__(self, base: float = math.e, n: int = N):
        if not 0 <= n <= MAX_N:
            raise ValueError(f"n must be in [0, {MAX_N}], got {n}")
        super().__init__(base, n)
        self._q = DOUBLE_MANTISSA_BITS - n
        index = np.arange(1 << (n + 1), dtype=np.float64)
        with np.errstate(divide="ignore"):
            table = np.log2(index * float(1 << self._q)) - 1075.0
        self._data = frozen(table)

    @property
    def table(self) -> np.ndarray:
        return self._data

    def _log2_values(self, values: np.ndarray) -> np.ndarray:
        exponent, mantissa = double_fields(values)
        normal = exponent != 0
        index = np.where(
            normal,
            (mantissa | DOUBLE_IMPLICIT_BIT) >> np.uint64(self._q),
            mantissa >> np.uint64(self._q - 1),
        ).astype(np.int64)
        return exponent + self._data[index]
