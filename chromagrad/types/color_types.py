from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ARGB = int  # packed 0xAARRGGBB
ColorTriple = Tuple[float, float, float]
ColorInput = Union[ColorTriple, Sequence[float], ndarray]
FloatInput = Union[float, np.floating, ndarray]


def as_triple_array(color: ColorInput) -> ndarray:
    """
    Convert a color triple (or a batch of triples) to a float64 array.

    Args:
        color: Sequence of three channels, or an array whose last axis has length 3

    Returns:
        float64 numpy array of the same shape

    Raises:
        ValueError: If the last axis does not have length 3
    """
    arr = np.asarray(color, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"Expected last dimension of size 3, got shape {arr.shape}")
    return arr
