import numpy as np
import pytest

from chromagrad.colorspaces import ColorSpaces
from chromagrad.gradients import ColorStop, Gradient, Interpolation
from chromagrad.utils import decompose_argb

BLACK = 0xFF000000
WHITE = 0xFFFFFFFF
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
YELLOW = 0xFFFFFF00


def linear_rgb(*colors):
    return Gradient(*colors, color_space=ColorSpaces.RGB, interpolation_mode=Interpolation.LINEAR)


def positions(gradient):
    return [stop.position for stop in gradient.stops]


# =============================================================================
# Construction
# =============================================================================
def test_defaults_and_even_spacing():
    g = Gradient(RED, GREEN, BLUE)
    assert g.color_space is ColorSpaces.OKLAB
    assert g.interpolation_mode is Interpolation.SMOOTH_STEP
    assert g.offset == 0.0
    assert len(g) == 3
    assert positions(g) == [0.0, 0.5, 1.0]


def test_single_list_argument():
    g = Gradient([RED, BLUE])
    assert [stop.color for stop in g.stops] == [RED, BLUE]


def test_single_color_is_constant():
    g = Gradient(RED)
    assert positions(g) == [0.0]
    for p in (0.0, 0.4, 1.0):
        assert g.color_at(p) == RED


def test_empty_inputs_rejected():
    with pytest.raises(ValueError):
        Gradient()
    with pytest.raises(ValueError):
        Gradient.from_stops()
    with pytest.raises(ValueError):
        Gradient.from_stops([])
    with pytest.raises(TypeError):
        Gradient.from_stops([ColorStop(RED, 0.0), 5])


def test_from_stops_sorts():
    g = Gradient.from_stops(ColorStop(BLUE, 1.0), ColorStop(RED, 0.0), ColorStop(GREEN, 0.3))
    assert [stop.color for stop in g.stops] == [RED, GREEN, BLUE]
    g = Gradient.from_stops([ColorStop(BLUE, 0.9), ColorStop(RED, 0.1)], color_space=ColorSpaces.LAB)
    assert g.color_space is ColorSpaces.LAB
    assert positions(g) == [0.1, 0.9]


# =============================================================================
# Evaluation
# =============================================================================
def test_gray_midpoint_in_rgb():
    g = linear_rgb(BLACK, WHITE)
    assert g.color_at(0.5) == 0xFF808080
    assert g.color_at(0.0) == BLACK
    assert g.color_at(1.0) == WHITE


def test_perceptual_midpoint_differs_from_rgb():
    rgb_mid = linear_rgb(BLACK, WHITE).color_at(0.5)
    srlab = Gradient(BLACK, WHITE, color_space=ColorSpaces.SRLAB2, interpolation_mode=Interpolation.LINEAR)
    assert srlab.color_at(0.5) != rgb_mid


def test_oklab_midpoint_stays_gray():
    red, green, blue, alpha = decompose_argb(Gradient(BLACK, WHITE).color_at(0.5))
    assert alpha == 255
    assert abs(red - green) <= 1 and abs(green - blue) <= 1


@pytest.mark.parametrize("mode", list(Interpolation), ids=lambda m: m.name)
def test_endpoints_every_space(color_space, mode):
    g = Gradient(0xFF3366CC, 0x80FF9900, color_space=color_space, interpolation_mode=mode)
    assert g.color_at(0.0) == 0xFF3366CC
    assert g.color_at(1.0) == 0x80FF9900
    middle = g.color_at(0.5)
    assert 0 <= middle <= 0xFFFFFFFF
    assert decompose_argb(middle)[3] == 192


def test_color_at_stop_position_returns_stop_color(color_space):
    g = Gradient(RED, GREEN, BLUE, color_space=color_space)
    assert g.color_at(0.5) == GREEN


def test_alpha_follows_raw_position():
    g = Gradient(0x00FF0000, 0xFFFF0000, color_space=ColorSpaces.RGB, interpolation_mode=Interpolation.SMOOTH_STEP)
    assert g.color_at(0.5) == 0x80FF0000
    assert g.color_at(0.25) == 0x40FF0000


def test_rgb_ramp_is_monotone():
    g = linear_rgb(BLACK, WHITE)
    reds = [decompose_argb(c)[0] for c in g.colors_at(np.linspace(0.0, 1.0, 256))]
    assert reds[0] == 0 and reds[-1] == 255
    assert all(b >= a for a, b in zip(reds, reds[1:]))


def test_ties_keep_insertion_order():
    g = linear_rgb(RED, BLUE)
    g.add(GREEN, 0.5)
    g.add(YELLOW, 0.5)
    assert [stop.color for stop in g.stops] == [RED, GREEN, YELLOW, BLUE]
    assert g.color_at(0.5) == YELLOW
    assert decompose_argb(g.color_at(0.25))[2] == 0


def test_tie_at_first_stop_returns_first_inserted():
    g = Gradient.from_stops(ColorStop(RED, 0.0), ColorStop(GREEN, 0.0), ColorStop(BLUE, 1.0))
    assert g.color_at(0.0) == RED


# =============================================================================
# Stop editing
# =============================================================================
def test_add_keeps_stops_sorted(rng):
    g = Gradient(RED, BLUE)
    for _ in range(20):
        g.add(ColorStop(GREEN, float(rng.random())))
    assert positions(g) == sorted(positions(g))
    assert len(g) == 22


def test_add_validation():
    g = Gradient(RED, BLUE)
    with pytest.raises(ValueError):
        g.add(GREEN)
    with pytest.raises(TypeError):
        g.add("green", 0.5)


def test_stop_accessors_and_index_errors():
    g = Gradient(RED, GREEN, BLUE)
    assert g.stop_color(1) == GREEN
    assert g.last_color() == BLUE
    g.set_stop_color(1, YELLOW)
    assert g.stop_color(1) == YELLOW
    for bad in (-1, 3):
        with pytest.raises(IndexError):
            g.stop_color(bad)
        with pytest.raises(IndexError):
            g.set_stop_color(bad, RED)
        with pytest.raises(IndexError):
            g.set_stop_position(bad, 0.5)


def test_set_stop_position_wraps_and_resorts():
    g = Gradient(RED, GREEN, BLUE)
    g.set_stop_position(2, -0.25)
    assert [stop.color for stop in g.stops] == [RED, BLUE, GREEN]
    assert positions(g) == pytest.approx([0.0, 0.25, 0.5])
    g.set_stop_position(0, 1.75)
    assert [stop.color for stop in g.stops] == [BLUE, GREEN, RED]
    assert positions(g) == pytest.approx([0.25, 0.5, 0.75])


def test_push_color_squeezes_stops():
    g = Gradient(RED, BLUE)
    g.push_color(GREEN)
    assert positions(g) == pytest.approx([0.0, 0.5, 1.0])
    assert g.last_color() == GREEN


def test_prime_animation_repeats_first_color():
    g = Gradient(RED, BLUE)
    g.prime_animation()
    assert len(g) == 3
    assert g.last_color() == RED
    assert g.color_at(1.0) == g.color_at(0.0)


def test_remove_last_stretches_remaining():
    g = Gradient(RED, GREEN, BLUE)
    removed = g.remove_last()
    assert removed.color == BLUE
    assert positions(g) == pytest.approx([0.0, 1.0])
    assert g.last_color() == GREEN
    assert g.color_at(0.99) != BLUE
    assert g.color_at(1.0) == GREEN


def test_remove_last_refuses_below_two_stops():
    g = Gradient(RED, BLUE)
    with pytest.warns(UserWarning):
        assert g.remove_last() is None
    assert len(g) == 2


def test_reverse():
    g = Gradient.from_stops(ColorStop(RED, 0.0), ColorStop(GREEN, 0.2), ColorStop(BLUE, 1.0))
    g.reverse()
    assert [stop.color for stop in g.stops] == [BLUE, GREEN, RED]
    assert positions(g) == pytest.approx([0.0, 0.8, 1.0])


def test_mutate_color(rng):
    g = Gradient(0xFF808080, 0xFF404040)
    g.mutate_color(0, rng)
    assert [stop.color for stop in g.stops] == [0xFF808080, 0xFF404040]
    g.mutate_color(8, rng)
    for stop, original in zip(g.stops, (0x80, 0x40)):
        for channel in decompose_argb(stop.color)[:3]:
            assert abs(channel - original) == 8


# =============================================================================
# Offset and animation
# =============================================================================
def test_offset_shifts_lookup():
    plain = linear_rgb(BLACK, WHITE)
    shifted = linear_rgb(BLACK, WHITE)
    shifted.offset = 0.25
    assert shifted.color_at(0.25) == plain.color_at(0.5)
    assert shifted.color_at(0.75) == WHITE
    assert shifted.color_at(0.9) == plain.color_at(0.15)


def test_negative_offset_wraps():
    plain = linear_rgb(BLACK, WHITE)
    shifted = linear_rgb(BLACK, WHITE)
    shifted.set_offset(-0.25)
    assert shifted.color_at(0.0) == plain.color_at(0.75)


def test_offsets_and_positions_below_minus_one_wrap():
    plain = linear_rgb(BLACK, WHITE)
    shifted = linear_rgb(BLACK, WHITE)
    shifted.set_offset(-1.5)
    assert shifted.offset == pytest.approx(0.5)
    assert shifted.color_at(0.25) == plain.color_at(0.75)
    assert plain.color_at(-1.25) == plain.color_at(0.75)
    assert plain.color_at(-2.0) == BLACK


def test_offset_setter_normalizes():
    g = linear_rgb(BLACK, WHITE)
    g.offset = 2.25
    assert g.offset == pytest.approx(0.25)
    g.offset = -0.25
    assert g.offset == pytest.approx(0.75)


def test_animate_wraps_offset():
    g = linear_rgb(BLACK, WHITE)
    for _ in range(3):
        g.animate(0.4)
    assert g.offset == pytest.approx(0.2)
    g.offset = 0.0
    g.animate(-0.3)
    assert g.offset == pytest.approx(0.7)


# =============================================================================
# Modes
# =============================================================================
def test_mode_cycling():
    g = Gradient(RED, BLUE)
    g.next_color_space()
    assert g.color_space is ColorSpaces.LUV
    g.prev_color_space()
    g.prev_color_space()
    assert g.color_space is ColorSpaces.SRLAB2
    g.set_color_space(ColorSpaces.HSB)
    g.next_color_space()
    assert g.color_space is ColorSpaces.RGB

    g.next_interpolation_mode()
    assert g.interpolation_mode is Interpolation.SMOOTHER_STEP
    g.set_interpolation_mode(Interpolation.LINEAR)
    g.prev_interpolation_mode()
    assert g.interpolation_mode is Interpolation.HEARTBEAT


# =============================================================================
# Random gradients
# =============================================================================
def test_random_gradient(rng):
    g = Gradient.random_gradient(5, rng)
    assert len(g) == 5
    assert positions(g) == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
    assert all(stop.alpha == 255 for stop in g.stops)


def test_random_gradient_is_reproducible():
    a = Gradient.random_gradient(4, np.random.default_rng(7))
    b = Gradient.random_gradient(4, np.random.default_rng(7))
    assert [s.color for s in a.stops] == [s.color for s in b.stops]


def test_random_gradient_with_stops(rng):
    g = Gradient.random_gradient_with_stops(6, rng, color_space=ColorSpaces.LAB)
    assert len(g) == 6
    assert g.color_space is ColorSpaces.LAB
    assert positions(g)[0] == 0.0
    assert positions(g)[-1] == 1.0
    assert positions(g) == sorted(positions(g))


@pytest.mark.parametrize("factory", [Gradient.random_gradient, Gradient.random_gradient_with_stops])
def test_random_gradient_needs_a_color(factory):
    with pytest.raises(ValueError):
        factory(0)


# =============================================================================
# Diagnostics
# =============================================================================
def test_str_dump():
    text = str(Gradient(BLACK, WHITE))
    assert text.startswith("Gradient (n=2)")
    assert "Offset: 0.0" in text
    assert "Current Color Space: OKLAB" in text
    assert "Interpolation: SMOOTH_STEP" in text
    assert "clrCurrentColSpace" in text
    assert str(WHITE) in text
    assert len(text.splitlines()) == 7


def test_to_constructor():
    g = Gradient(BLACK, WHITE)
    assert g.to_constructor() == "Gradient(0xFF000000, 0xFFFFFFFF)"
    rebuilt = eval(g.to_constructor(), {"Gradient": Gradient})
    assert [s.color for s in rebuilt.stops] == [BLACK, WHITE]
    assert "stops=2" in repr(g)
