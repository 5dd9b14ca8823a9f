from .color_utils import (
    compose_argb,
    decompose_argb,
    alpha_of,
    argb_to_unit_rgb,
    unit_rgb_to_argb,
    unit_channel_to_255,
    normalize_argb,
)
from .fast_pow import FastPow, fast_pow, fast_exp, base_representation
from .functions import very_fast_pow, format_array
