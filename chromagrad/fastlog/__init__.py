"""
Table-driven logarithms read straight from IEEE-754 bit fields.

Features:
    - FFastLog: ICSILog with a float32 table, float32 and float64 queries
    - DFastLog: ICSILog with a float64 table
    - TurboLog: natural log with subnormal renormalization and an exact
      region around 1

Examples:
    >>> from chromagrad.fastlog import DFastLog
    >>> log = DFastLog(n=13)
    >>> round(log.log2(8.0), 6)
    3.0
"""

from .base import FastLog, LN2, N, compute_scale, exact_log2
from .ffastlog import FFastLog
from .dfastlog import DFastLog
from .turbolog import TurboLog, LOWER_ONE_BOUND, UPPER_ONE_BOUND

__all__ = [
    "FastLog",
    "FFastLog",
    "DFastLog",
    "TurboLog",
    "LN2",
    "N",
    "LOWER_ONE_BOUND",
    "UPPER_ONE_BOUND",
    "compute_scale",
    "exact_log2",
]
