"""
Natural-logarithm approximation with exponent and mantissa tables.

Unlike :class:`~chromagrad.fastlog.ffastlog.FFastLog`, subnormal inputs are
renormalized before the lookup, and inputs close to 1 are passed to the
exact logarithm because a table lookup there has a large relative error.
"""

from __future__ import annotations
import math
import numpy as np

from .base import FastLog, N, LN2, frozen
from .bits import (
    double_fields,
    float_fields,
    DOUBLE_MANTISSA_BITS,
    DOUBLE_IMPLICIT_BIT,
    DOUBLE_MANTISSA_MASK,
    DOUBLE_BIAS,
    FLOAT_MANTISSA_BITS,
    FLOAT_BIAS,
)

MAX_N = 23

LOWER_ONE_BOUND = 0.92
UPPER_ONE_BOUND = 1.16

_lower_exp, _lower_mant = double_fields(np.array([LOWER_ONE_BOUND]))
_upper_exp, _upper_mant = double_fields(np.array([UPPER_ONE_BOUND]))
assert _lower_exp[0] == DOUBLE_BIAS - 1 and _upper_exp[0] == DOUBLE_BIAS
LOWER_BOUND_MANTISSA = np.uint64(_lower_mant[0])
UPPER_BOUND_MANTISSA = np.uint64(_upper_mant[0])

_lower_exp_f, _lower_mant_f = float_fields(np.array([LOWER_ONE_BOUND], dtype=np.float32))
_upper_exp_f, _upper_mant_f = float_fields(np.array([UPPER_ONE_BOUND], dtype=np.float32))
assert _lower_exp_f[0] == FLOAT_BIAS - 1 and _upper_exp_f[0] == FLOAT_BIAS
LOWER_BOUND_MANTISSA_F = np.uint32(_lower_mant_f[0])
UPPER_BOUND_MANTISSA_F = np.uint32(_upper_mant_f[0])


class TurboLog(FastLog):
    """
    Fast natural logarithm.

    ``ln(x) = (e - bias) * ln2 + ln(1 + m / 2**n)`` where ``e`` is the
    exponent field and ``m`` the top ``n`` mantissa bits. The mantissa table
    has ``2 ** n`` entries; exponent tables cover every float32 and float64
    exponent.

    Args:
        n: Mantissa bits used for the lookup, in ``[0, 23]``
    """

    def __init__(self, n: int = N):
        if not 0 <= n <= MAX_N:
            raise ValueError(f"n must be in [0, {MAX_N}], got {n}")
        super().__init__(math.e, n)
        self._shift = DOUBLE_MANTISSA_BITS - n
        self._shift_f = FLOAT_MANTISSA_BITS - n
        size = 1 << n
        self.log_mantissa = frozen(np.log1p(np.arange(size, dtype=np.float64) / size))
        self.log_exp_f = frozen((np.arange(256, dtype=np.float64) - FLOAT_BIAS) * LN2)
        self.log_exp_d = frozen((np.arange(2048, dtype=np.float64) - DOUBLE_BIAS) * LN2)

    def _log2_values(self, values: np.ndarray) -> np.ndarray:
        return self._log_values(values) / LN2

    def _log_values(self, values: np.ndarray) -> np.ndarray:
        if values.dtype == np.float32:
            return self._log_float(values)
        return self._log_double(values)

    def _log_double(self, values: np.ndarray) -> np.ndarray:
        exponent, mantissa = double_fields(values)
        result = np.empty(values.shape, dtype=np.float64)

        near_one = ((exponent == DOUBLE_BIAS - 1) & (mantissa >= LOWER_BOUND_MANTISSA)) | (
            (exponent == DOUBLE_BIAS) & (mantissa <= UPPER_BOUND_MANTISSA)
        )
        subnormal = exponent == 0
        normal = ~(near_one | subnormal)

        result[near_one] = np.log(values[near_one])
        index = (mantissa[normal] >> np.uint64(self._shift)).astype(np.int64)
        result[normal] = self.log_exp_d[exponent[normal]] + self.log_mantissa[index]
        if subnormal.any():
            unbiased, fraction = _renormalize(
                mantissa[subnormal], 1 - DOUBLE_BIAS, DOUBLE_IMPLICIT_BIT, DOUBLE_MANTISSA_MASK
            )
            index = (fraction >> np.uint64(self._shift)).astype(np.int64)
            with np.errstate(invalid="ignore"):
                result[subnormal] = np.where(
                    unbiased == np.iinfo(np.int64).min,
                    -np.inf,
                    unbiased * LN2 + self.log_mantissa[index],
                )
        return result

    def _log_float(self, values: np.ndarray) -> np.ndarray:
        exponent, mantissa = float_fields(values)
        result = np.empty(values.shape, dtype=np.float64)

        near_one = ((exponent == FLOAT_BIAS - 1) & (mantissa >= LOWER_BOUND_MANTISSA_F)) | (
            (exponent == FLOAT_BIAS) & (mantissa <= UPPER_BOUND_MANTISSA_F)
        )
        subnormal = exponent == 0
        normal = ~(near_one | subnormal)

        result[near_one] = np.log(values[near_one].astype(np.float64))
        index = (mantissa[normal] >> np.uint32(self._shift_f)).astype(np.int64)
        result[normal] = self.log_exp_f[exponent[normal]] + self.log_mantissa[index]
        if subnormal.any():
            # float32 subnormals are normal float64 values
            result[subnormal] = self._log_double(values[subnormal].astype(np.float64))
        return result


def _renormalize(mantissa: np.ndarray, min_exponent: int, implicit_bit, fraction_mask):
    """
    Shift subnormal mantissas left until the implicit bit is set.

    Returns:
        (unbiased exponent, fraction bits). Zero mantissas get the int64
        minimum as exponent so callers can map them to ``-inf``.
    """
    mantissa = mantissa.copy()
    exponent = np.full(mantissa.shape, min_exponent, dtype=np.int64)
    zero = mantissa == 0
    pending = ((mantissa & implicit_bit) == 0) & ~zero
    while pending.any():
        mantissa[pending] <<= np.uint64(1)
        exponent[pending] -= 1
        pending = ((mantissa & implicit_bit) == 0) & ~zero
    exponent[zero] = np.iinfo(np.int64).min
    return exponent, mantissa & fraction_mask
