from __future__ import annotations
from bisect import bisect_right
from typing import Iterable, List, Optional, Sequence, Tuple, Union
import warnings
import numpy as np
from boundednumbers.functions import cyclic_wrap_float

from ..colorspaces.registry import ColorSpaces
from ..types.color_types import ARGB
from ..utils.color_utils import decompose_argb, unit_rgb_to_argb
from ..utils.functions import format_array
from .color_stop import ColorStop, wrap_position
from .interpolation import Interpolation
from .palette import random_colors


class Gradient:
    """
    Ordered color stops evaluated in a chosen color space.

    Stops are kept sorted by position (ties keep insertion order). Colors
    between two stops are blended in :attr:`color_space` after the
    normalized position is remapped by :attr:`interpolation_mode`.

    Args:
        *colors: Packed ARGB colors, spaced evenly over [0, 1]
        color_space: Space the blending happens in
        interpolation_mode: Easing curve between stops

    Raises:
        ValueError: If no colors are given
    """

    def __init__(
        self,
        *colors: ARGB,
        color_space: ColorSpaces = ColorSpaces.OKLAB,
        interpolation_mode: Interpolation = Interpolation.SMOOTH_STEP,
    ):
        if len(colors) == 1 and isinstance(colors[0], (list, tuple)):
            colors = tuple(colors[0])
        if not colors:
            raise ValueError("A gradient needs at least one color")
        spacing = float(max(len(colors) - 1, 1))
        self._stops: List[ColorStop] = [ColorStop(c, i / spacing) for i, c in enumerate(colors)]
        self._positions: List[float] = [s.position for s in self._stops]
        self.color_space = ColorSpaces(color_space)
        self.interpolation_mode = Interpolation(interpolation_mode)
        self._offset = 0.0

    @classmethod
    def from_stops(
        cls,
        *stops: Union[ColorStop, Iterable[ColorStop]],
        color_space: ColorSpaces = ColorSpaces.OKLAB,
        interpolation_mode: Interpolation = Interpolation.SMOOTH_STEP,
    ) -> "Gradient":
        """
        Build a gradient from explicit stops (varargs or a single iterable).

        Raises:
            ValueError: If no stops are given
            TypeError: If an element is not a :class:`ColorStop`
        """
        if len(stops) == 1 and not isinstance(stops[0], ColorStop):
            stops = tuple(stops[0])
        if not stops:
            raise ValueError("A gradient needs at least one color stop")
        for stop in stops:
            if not isinstance(stop, ColorStop):
                raise TypeError(f"Expected ColorStop, got {type(stop).__name__}")
        gradient = cls.__new__(cls)
        gradient._stops = list(stops)
        gradient._sort()
        gradient.color_space = ColorSpaces(color_space)
        gradient.interpolation_mode = Interpolation(interpolation_mode)
        gradient._offset = 0.0
        return gradient

    @classmethod
    def random_gradient(cls, n: int, rng: Optional[np.random.Generator] = None, **kwargs) -> "Gradient":
        """Gradient of ``n`` random colors spaced evenly."""
        return cls(*random_colors(n, rng), **kwargs)

    @classmethod
    def random_gradient_with_stops(
        cls, n: int, rng: Optional[np.random.Generator] = None, **kwargs
    ) -> "Gradient":
        """
        Gradient of ``n`` random colors; the first stop sits at 0, the last
        at 1 and the others at random positions.
        """
        rng = rng if rng is not None else np.random.default_rng()
        colors = random_colors(n, rng)
        stops = []
        for i, color in enumerate(colors):
            position = 0.0 if i == 0 else 1.0 if i == n - 1 else float(rng.random())
            stops.append(ColorStop(color, position))
        return cls.from_stops(stops, **kwargs)

    # ------------------------------------------------------------------
    # Stops
    # ------------------------------------------------------------------
    @property
    def stops(self) -> Tuple[ColorStop, ...]:
        return tuple(self._stops)

    def __len__(self) -> int:
        return len(self._stops)

    def _sort(self) -> None:
        self._stops.sort(key=lambda s: s.position)
        self._positions = [s.position for s in self._stops]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._stops):
            raise IndexError(f"Color stop index {index} out of range for {len(self._stops)} stops")

    def add(self, stop: Union[ColorStop, ARGB], position: Optional[float] = None) -> ColorStop:
        """
        Insert a stop, or a color at ``position``, keeping the stops sorted.

        Raises:
            TypeError: If ``stop`` is neither a ColorStop nor an int color
            ValueError: If an int color is given without a position
        """
        if isinstance(stop, ColorStop):
            new_stop = stop
        elif isinstance(stop, (int, np.integer)):
            if position is None:
                raise ValueError("A position is required when adding a color")
            new_stop = ColorStop(int(stop), position)
        else:
            raise TypeError(f"Expected ColorStop or int color, got {type(stop).__name__}")
        self._stops.append(new_stop)
        self._sort()
        return new_stop

    def stop_color(self, index: int) -> ARGB:
        self._check_index(index)
        return self._stops[index].color

    def last_color(self) -> ARGB:
        return self._stops[-1].color

    def set_stop_color(self, index: int, color: ARGB) -> None:
        self._check_index(index)
        self._stops[index].set_color(color)

    def set_stop_position(self, index: int, position: float) -> None:
        """Move a stop; negative positions are mirrored, values above 1 wrap."""
        self._check_index(index)
        self._stops[index].set_position(abs(position))
        self._sort()

    def push_color(self, color: ARGB) -> None:
        """Squeeze the existing stops into ``[0, (n-1)/n]`` and add ``color`` at 1."""
        size = len(self._stops)
        scale = (size - 1) / size
        for stop in self._stops:
            stop.position *= scale
        self.add(color, 1.0)

    def remove_last(self) -> Optional[ColorStop]:
        """
        Drop the last stop and stretch the rest so the new last stop takes
        its position. Gradients are never reduced below two stops.
        """
        if len(self._stops) <= 2:
            warnings.warn(
                "This gradient has only 2 colors; no more colors can be removed.",
                UserWarning,
                stacklevel=2,
            )
            return None
        last = self._stops.pop()
        new_last = self._stops[-1].position
        if new_last > 0.0:
            factor = last.position / new_last
            for stop in self._stops:
                stop.position = min(stop.position * factor, 1.0)
        self._sort()
        return last

    def reverse(self) -> None:
        for stop in self._stops:
            stop.position = 1.0 - stop.position
        self._stops.reverse()
        self._sort()

    def mutate_color(self, amount: float, rng: Optional[np.random.Generator] = None) -> None:
        rng = rng if rng is not None else np.random.default_rng()
        for stop in self._stops:
            stop.mutate(amount, rng)

    # ------------------------------------------------------------------
    # Animation
    # ------------------------------------------------------------------
    @property
    def offset(self) -> float:
        return self._offset

    @offset.setter
    def offset(self, value: float) -> None:
        self._offset = float(cyclic_wrap_float(value, 0.0, 1.0))

    def set_offset(self, offset: float) -> None:
        self.offset = offset

    def animate(self, amount: float) -> None:
        """Advance the offset by ``amount``, wrapping in [0, 1)."""
        self._offset = float(cyclic_wrap_float(self._offset + amount, 0.0, 1.0))

    def prime_animation(self) -> None:
        """Repeat the first color at the end so an animated gradient loops seamlessly."""
        self.push_color(self.stop_color(0))

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------
    def set_color_space(self, color_space: ColorSpaces) -> None:
        self.color_space = ColorSpaces(color_space)

    def next_color_space(self) -> None:
        self.color_space = self.color_space.next()

    def prev_color_space(self) -> None:
        self.color_space = self.color_space.prev()

    def set_interpolation_mode(self, mode: Interpolation) -> None:
        self.interpolation_mode = Interpolation(mode)

    def next_interpolation_mode(self) -> None:
        self.interpolation_mode = self.interpolation_mode.next()

    def prev_interpolation_mode(self) -> None:
        self.interpolation_mode = self.interpolation_mode.prev()

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------
    def color_at(self, position: float) -> ARGB:
        """
        Color of the gradient at ``position`` as a packed ARGB int.

        The offset is added first and the result folded into [0, 1]. At or
        beyond the outer stops the stop color is returned unchanged.
        """
        position = wrap_position(float(position) + self._offset)
        stops = self._stops
        if position <= stops[0].position:
            return stops[0].color
        if position >= stops[-1].position:
            return stops[-1].color

        hi = bisect_right(self._positions, position)
        lo_stop, hi_stop = stops[hi - 1], stops[hi]
        if lo_stop.position == position:
            return lo_stop.color
        t = (position - lo_stop.position) / (hi_stop.position - lo_stop.position)
        eased = self.interpolation_mode.apply(t)

        transform = self.color_space.color_space
        blended = transform.interpolate_linear(
            lo_stop.get_color(self.color_space), hi_stop.get_color(self.color_space), eased
        )
        alpha = int(np.floor(lo_stop.alpha + t * (hi_stop.alpha - lo_stop.alpha) + 0.5))
        return unit_rgb_to_argb(transform.to_rgb(blended), alpha)

    def colors_at(self, positions: Sequence[float]) -> List[ARGB]:
        return [self.color_at(p) for p in positions]

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        row = "  {:<10}{:<25}{:<12}{:<20}\n"
        lines = [
            f"Gradient (n={len(self._stops)})\n",
            f"Offset: {self._offset}\n",
            f"Current Color Space: {self.color_space.name}\n",
            f"Interpolation: {self.interpolation_mode.name}\n",
            row.format("Position", "RGBA", "clrInteger", "clrCurrentColSpace"),
        ]
        for stop in self._stops:
            red, green, blue, alpha = decompose_argb(stop.color)
            lines.append(row.format(
                f"{stop.position:.4f}",
                format_array((red, green, blue, alpha), 0),
                str(stop.color),
                format_array(stop.get_color(self.color_space), 3),
            ))
        return "".join(lines)

    def to_constructor(self) -> str:
        """Python source recreating this gradient's colors, e.g. ``Gradient(0xFF000000, 0xFFFFFFFF)``."""
        colors = ", ".join(f"0x{stop.color:08X}" for stop in self._stops)
        return f"Gradient({colors})"

    def __repr__(self) -> str:
        return (
            f"Gradient(stops={len(self._stops)}, color_space={self.color_space.name}, "
            f"interpolation_mode={self.interpolation_mode.name}, offset={self._offset})"
        )
