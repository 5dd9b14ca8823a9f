from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Tuple, Union
import math
import numpy as np

from ..types.color_types import FloatInput

LN2 = math.log(2.0)
N = 13  # default table precision (mantissa bits)


def compute_scale(base: float) -> float:
    """
    Factor converting a base-2 logarithm into a base-``base`` logarithm.

    Raises:
        ValueError: If base is not a finite positive number other than 1
    """
    base = float(base)
    if not math.isfinite(base) or base <= 0.0 or base == 1.0:
        raise ValueError(f"Logarithm base must be finite, positive and != 1, got {base}")
    return LN2 / math.log(base)


def exact_log2(x: FloatInput) -> Union[float, np.ndarray]:
    """Reference log2 used to fill the lookup tables and to check them."""
    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.log2(np.asarray(x, dtype=np.float64))
    if result.ndim == 0:
        return float(result)
    return result


def as_float_array(x: FloatInput) -> Tuple[np.ndarray, Tuple[int, ...], bool]:
    """
    Normalize the input of a log query to a flat float array.

    float32 input keeps its dtype so it can take the 32-bit bit-field track,
    everything else is promoted to float64.

    Returns:
        (flat array, original shape, True if the input was a scalar)
    """
    arr = np.asarray(x)
    if arr.dtype != np.float32:
        arr = arr.astype(np.float64)
    return arr.reshape(-1), arr.shape, arr.ndim == 0


def restore_shape(values: np.ndarray, shape: Tuple[int, ...], scalar: bool) -> Union[float, np.ndarray]:
    if scalar:
        return float(values[0])
    return values.reshape(shape)


def frozen(table: np.ndarray) -> np.ndarray:
    """Mark a lookup table read-only once built."""
    table.flags.writeable = False
    return table


class FastLog(ABC):
    """
    Table-driven logarithm approximation.

    The exponent field of the IEEE-754 representation gives the integer
    part of log2 directly; the leading ``n`` mantissa bits index a table
    that holds the fractional part. Tables are filled once at construction.

    The mantissa is truncated, so lookups always approach the true value
    from below: the absolute log2 error is in ``[0, log2(1 + 2**-n))``.
    """

    def __init__(self, base: float = math.e, n: int = N):
        self._base = float(base)
        self._scale = compute_scale(base)
        self._n = int(n)

    @property
    def base(self) -> float:
        """Base of the logarithm returned by :meth:`log`."""
        return self._base

    @property
    def n(self) -> int:
        """Number of mantissa bits used as table index."""
        return self._n

    @property
    def scale(self) -> float:
        """Multiplier converting log2 into log base :attr:`base`."""
        return self._scale

    @abstractmethod
    def _log2_values(self, values: np.ndarray) -> np.ndarray:
        """log2 of a flat array of positive finite values."""

    def _log_values(self, values: np.ndarray) -> np.ndarray:
        return self._log2_values(values) * self._scale

    def fast_log2(self, x: FloatInput) -> Union[float, np.ndarray]:
        """
        Approximate log2 without domain checks.

        Zero, negative and non-finite inputs give meaningless results.
        """
        flat, shape, scalar = as_float_array(x)
        return restore_shape(self._log2_values(flat), shape, scalar)

    def fast_log(self, x: FloatInput) -> Union[float, np.ndarray]:
        """Approximate log in :attr:`base` without domain checks."""
        flat, shape, scalar = as_float_array(x)
        return restore_shape(self._log_values(flat), shape, scalar)

    def log2(self, x: FloatInput) -> Union[float, np.ndarray]:
        """
        Approximate log2 with IEEE special cases.

        NaN or negative input gives NaN, ``+inf`` gives ``+inf`` and
        ``±0`` gives ``-inf``.
        """
        return self._checked(x, self._log2_values, 1.0)

    def log(self, x: FloatInput) -> Union[float, np.ndarray]:
        """Approximate log in :attr:`base`, with the special cases of :meth:`log2`."""
        return self._checked(x, self._log_values, self._scale)

    def _checked(self, x: FloatInput, compute, factor: float) -> Union[float, np.ndarray]:
        flat, shape, scalar = as_float_array(x)
        valid = np.isfinite(flat) & (flat > 0)
        if valid.all():
            return restore_shape(compute(flat), shape, scalar)
        safe = np.where(valid, flat, flat.dtype.type(1))
        with np.errstate(divide="ignore", invalid="ignore"):
            special = np.log2(flat.astype(np.float64)) * factor
        result = np.where(valid, compute(safe), special)
        return restore_shape(result, shape, scalar)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base={self._base}, n={self._n})"
