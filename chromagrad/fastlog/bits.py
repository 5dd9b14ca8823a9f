"""IEEE-754 bit-field access for float32 and float64 arrays."""

from __future__ import annotations
from typing import Tuple
import numpy as np

# float64: 1 sign, 11 exponent, 52 mantissa bits
DOUBLE_MANTISSA_BITS = 52
DOUBLE_EXPONENT_MASK = np.uint64(0x7FF)
DOUBLE_MANTISSA_MASK = np.uint64((1 << 52) - 1)
DOUBLE_IMPLICIT_BIT = np.uint64(1 << 52)
DOUBLE_BIAS = 1023

# float32: 1 sign, 8 exponent, 23 mantissa bits
FLOAT_MANTISSA_BITS = 23
FLOAT_EXPONENT_MASK = np.uint32(0xFF)
FLOAT_MANTISSA_MASK = np.uint32((1 << 23) - 1)
FLOAT_IMPLICIT_BIT = np.uint32(1 << 23)
FLOAT_BIAS = 127


def double_fields(values: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split float64 values into their raw exponent and mantissa fields.

    Args:
        values: float64 array

    Returns:
        (exponent, mantissa) where exponent is int64 in [0, 2047] and
        mantissa is uint64 holding the 52 stored fraction bits
    """
    bits = np.ascontiguousarray(values, dtype=np.float64).view(np.uint64)
    exponent = ((bits >> np.uint64(DOUBLE_MANTISSA_BITS)) & DOUBLE_EXPONENT_MASK).astype(np.int64)
    mantissa = bits & DOUBLE_MANTISSA_MASK
    return exponent, mantissa


def float_fields(values: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split float32 values into their raw exponent and mantissa fields.

    Args:
        values: float32 array

    Returns:
        (exponent, mantissa) where exponent is int64 in [0, 255] and
        mantissa is uint32 holding the 23 stored fraction bits
    """
    bits = np.ascontiguousarray(values, dtype=np.float32).view(np.uint32)
    exponent = ((bits >> np.uint32(FLOAT_MANTISSA_BITS)) & FLOAT_EXPONENT_MASK).astype(np.int64)
    mantissa = bits & FLOAT_MANTISSA_MASK
    return exponent, mantissa


def float_from_bits(bits: np.ndarray) -> np.ndarray:
    """Reinterpret integer bit patterns as float32 values."""
    return np.ascontiguousarray(bits, dtype=np.uint32).view(np.float32)
