"""chromagrad: perceptual color gradients with table-driven fast math."""

from .fastlog import FastLog, FFastLog, DFastLog, TurboLog
from .colorspaces import ColorSpaceTransform, ColorSpaces, get_color_space
from .gradients import Gradient, ColorStop, Interpolation, random_colors
from .utils import (
    FastPow,
    fast_pow,
    fast_exp,
    very_fast_pow,
    compose_argb,
    decompose_argb,
)

__version__ = "0.1.0"
