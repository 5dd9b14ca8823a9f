from .color_types import (
    Scalar,
    ARGB,
    ColorTriple,
    ColorInput,
    FloatInput,
    as_triple_array,
)
