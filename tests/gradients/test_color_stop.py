import numpy as np
import pytest

from chromagrad.colorspaces import ColorSpaces
from chromagrad.gradients import ColorStop, wrap_position
from chromagrad.utils import decompose_argb


@pytest.mark.parametrize(
    "position, expected",
    [(0.0, 0.0), (0.3, 0.3), (1.0, 1.0), (1.25, 0.25), (2.5, 0.5), (-0.25, 0.75), (-1.5, 0.5), (-1.25, 0.75), (-3.0, 0.0)],
)
def test_wrap_position(position, expected):
    assert wrap_position(position) == pytest.approx(expected)


def test_position_clamped_at_construction():
    assert ColorStop(0xFF000000, 1.5).position == 1.0
    assert ColorStop(0xFF000000, -0.2).position == 0.0
    assert ColorStop(0xFF000000, 0.4).position == 0.4


def test_set_position_wraps():
    stop = ColorStop(0xFF000000, 0.0)
    stop.set_position(1.25)
    assert stop.position == pytest.approx(0.25)
    stop.set_position(-0.25)
    assert stop.position == pytest.approx(0.75)
    stop.set_position(1.0)
    assert stop.position == 1.0


def test_signed_colors_are_normalized():
    stop = ColorStop(-1, 0.0)
    assert stop.color == 0xFFFFFFFF
    assert stop.alpha == 255
    assert ColorStop(-16777216, 0.5) == ColorStop(0xFF000000, 0.5)


def test_alpha_is_kept_apart_from_channels():
    stop = ColorStop(0x40FF0000, 0.0)
    assert stop.alpha == 0x40
    assert np.allclose(stop.get_color(ColorSpaces.RGB), [1.0, 0.0, 0.0])


def test_cached_conversions_cover_every_space():
    stop = ColorStop(0xFF3366CC, 0.5)
    rgb = np.array([0x33, 0x66, 0xCC]) / 255.0
    for space in ColorSpaces:
        assert np.allclose(stop.get_color(space), space.color_space.from_rgb(rgb))


def test_set_color_refreshes_cache():
    stop = ColorStop(0xFF000000, 0.5)
    stop.set_color(0xFFFFFFFF)
    assert np.allclose(stop.get_color(ColorSpaces.OKLAB), [1.0, 0.0, 0.0], atol=1e-6)
    assert stop.color == 0xFFFFFFFF


def test_mutate_moves_each_channel_by_amount(rng):
    stop = ColorStop(0x80808080, 0.5)
    stop.mutate(10, rng)
    red, green, blue, alpha = decompose_argb(stop.color)
    assert alpha == 0x80
    for channel in (red, green, blue):
        assert abs(channel - 0x80) == 10


def test_mutate_clamps_and_zero_is_noop(rng):
    stop = ColorStop(0xFF000000, 0.5)
    stop.mutate(20, rng)
    for channel in decompose_argb(stop.color)[:3]:
        assert channel in (0, 20)

    stop = ColorStop(0xFF123456, 0.5)
    stop.mutate(0, rng)
    assert stop.color == 0xFF123456


def test_mutate_rejects_negative_amount():
    with pytest.raises(ValueError):
        ColorStop(0xFF000000, 0.0).mutate(-1)


def test_equality_hash_and_ordering():
    a = ColorStop(0xFF112233, 0.25)
    b = ColorStop(0xFF112233, 0.25)
    c = ColorStop(0xFF112233, 0.75)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, c}) == 2
    assert a != c
    assert a < c
    assert sorted([c, a]) == [a, c]
    assert repr(a) == "ColorStop(0xFF112233, 0.25)"
