from __future__ import annotations
from typing import Sequence, Union
import numpy as np

from ..fastlog import DFastLog
from ..types.color_types import FloatInput

# 10 bits: a 2048-entry table is enough for a second-order expansion
_fast_log = DFastLog(n=10)


def very_fast_pow(base: FloatInput, exponent: FloatInput) -> Union[float, np.ndarray]:
    """
    Second-order Taylor expansion of ``base ** exponent`` around ``exponent == 1``.

    ``b**p ~ b * (1 + ln(b)(p-1) + (ln(b)(p-1))**2 / 2)``

    Accurate only when ``ln(base) * (exponent - 1)`` is small. For the sRGB
    encoding exponent ``1/2.4`` the absolute error is about 6e-3 at
    ``base == 0.5`` and grows quickly below that.
    """
    b = np.asarray(base, dtype=np.float64)
    ln = np.asarray(_fast_log.fast_log(b), dtype=np.float64)
    am1 = np.asarray(exponent, dtype=np.float64) - 1.0
    term = ln * am1
    result = b + b * term + 0.5 * b * term * term
    if result.ndim == 0:
        return float(result)
    return result


def format_array(values: Sequence[float], decimals: int = 2, open_char: str = "[", close_char: str = "]") -> str:
    """Format a short sequence of numbers with a fixed number of decimals."""
    body = ", ".join(f"{float(v):.{decimals}f}" for v in values)
    return f"{open_char}{body}{close_char}"
