"""
Color stops and gradients.

Examples:
    >>> from chromagrad.gradients import Gradient, Interpolation
    >>> from chromagrad.colorspaces import ColorSpaces
    >>> g = Gradient(0xFF000000, 0xFFFFFFFF,
    ...              color_space=ColorSpaces.RGB,
    ...              interpolation_mode=Interpolation.LINEAR)
    >>> hex(g.color_at(0.0))
    '0xff000000'
"""

from .interpolation import Interpolation
from .color_stop import ColorStop, wrap_position
from .gradient import Gradient
from .palette import random_colors, hue_stepped_colors
