"""
Approximate ``pow`` and ``exp`` through float32 bit construction.

``base ** exponent == 2 ** (exponent * log2(base))``. The integer part of the
power of two is written straight into a float32 exponent field, the
fractional part is looked up in a table of ``2 ** f - 1`` mantissas.

Schraudolph, "A Fast, Compact Approximation of the Exponential Function"
(Neural Computation, 1999), with the table refinement of ICSI.
"""

from __future__ import annotations
from typing import Union
import math
import numpy as np

from ..fastlog import DFastLog, N
from ..fastlog.base import frozen
from ..fastlog.bits import float_from_bits, FLOAT_MANTISSA_BITS
from ..types.color_types import FloatInput

_2P23 = float(1 << 23)
_2P23B = 127.0 * _2P23
_EXPONENT_MASK = 0xFF800000
_MANTISSA_MASK = 0x7FFFFF
# largest finite float32 bit pattern
_MAX_BITS = 0x7F7FFFFF
MAX_PRECISION = 18


def base_representation(radix: float) -> float:
    """log2 of a constant base, for :meth:`FastPow.fast_pow_constant_base`."""
    return math.log(radix) / math.log(2.0)


class FastPow:
    """
    Lookup-table power function.

    Args:
        precision: Mantissa bits of the ``2 ** f`` table and of the
            :class:`DFastLog` used for ``log2(base)``, in ``[0, 18]``
    """

    BASE_E = base_representation(math.e)

    def __init__(self, precision: int = N):
        if not 0 <= precision <= MAX_PRECISION:
            raise ValueError(f"precision must be in [0, {MAX_PRECISION}], got {precision}")
        self.precision = precision
        size = 1 << precision
        fraction = (np.arange(size, dtype=np.float64) + 0.5) / size
        f = (np.exp2(fraction) - 1.0) * _2P23
        self.table = frozen(np.minimum(f, _2P23 - 1.0).astype(np.int64))
        self.fast_log = DFastLog(n=precision)

    def _compose(self, power: np.ndarray) -> np.ndarray:
        """Build float32 values from ``exponent * log2(base)`` products."""
        i = np.clip(power * _2P23 + _2P23B, 0.0, float(_MAX_BITS)).astype(np.int64)
        bits = (i & _EXPONENT_MASK) | self.table[(i & _MANTISSA_MASK) >> (FLOAT_MANTISSA_BITS - self.precision)]
        return float_from_bits(bits).astype(np.float64)

    def fast_pow(self, base: FloatInput, exponent: FloatInput) -> Union[float, np.ndarray]:
        """
        Approximate ``base ** exponent`` for positive finite bases.

        The result has float32 range: it underflows to 0 and saturates at
        the largest finite float32.
        """
        log2_base = np.asarray(self.fast_log.fast_log2(base), dtype=np.float64)
        power = np.asarray(exponent, dtype=np.float64) * log2_base
        return _unwrap(self._compose(np.atleast_1d(power)), power.shape)

    def fast_pow_constant_base(self, base_repr: float, exponent: FloatInput) -> Union[float, np.ndarray]:
        """
        Approximate ``base ** exponent`` where ``base_repr`` is
        :func:`base_representation` of a base reused across many calls.
        """
        power = np.asarray(exponent, dtype=np.float64) * base_repr
        return _unwrap(self._compose(np.atleast_1d(power)), power.shape)

    def exp(self, exponent: FloatInput) -> Union[float, np.ndarray]:
        return self.fast_pow_constant_base(self.BASE_E, exponent)

    def __repr__(self) -> str:
        return f"FastPow(precision={self.precision})"


def _unwrap(values: np.ndarray, shape) -> Union[float, np.ndarray]:
    if shape == ():
        return float(values[0])
    return values.reshape(shape)


_default = FastPow(N)


def init(precision: int) -> FastPow:
    """Rebuild the shared instance used by :func:`fast_pow` and :func:`fast_exp`."""
    global _default
    _default = FastPow(precision)
    return _default


def get_default() -> FastPow:
    return _default


def fast_pow(base: FloatInput, exponent: FloatInput) -> Union[float, np.ndarray]:
    """Approximate ``base ** exponent`` with the shared table."""
    return _default.fast_pow(base, exponent)


def fast_exp(exponent: FloatInput) -> Union[float, np.ndarray]:
    """Approximate ``e ** exponent`` with the shared table."""
    return _default.exp(exponent)
