import pytest

from chromagrad.colorspaces import (
    ColorSpaces,
    ColorSpaceTransform,
    SIZE,
    get_color_space,
    OKLAB,
    HSB,
)


def test_registry_order():
    names = [space.name for space in ColorSpaces]
    assert names == [
        "RGB", "XYZ", "LAB", "DIN99", "ITP", "HLAB", "SRLAB2",
        "OKLAB", "LUV", "JAB", "XYB", "IPT", "RYB", "HSB",
    ]
    assert SIZE == 14
    assert ColorSpaces.size() == SIZE
    for i, space in enumerate(ColorSpaces):
        assert space.index == i


def test_every_member_has_a_transform(color_space):
    transform = color_space.color_space
    assert isinstance(transform, ColorSpaceTransform)
    assert transform.name == color_space.name
    assert color_space.color_space is transform


def test_next_and_prev_wrap(color_space):
    assert color_space.next().prev() is color_space
    assert color_space.prev().next() is color_space
    space = color_space
    for _ in range(SIZE):
        space = space.next()
    assert space is color_space


def test_ends_wrap():
    assert ColorSpaces.HSB.next() is ColorSpaces.RGB
    assert ColorSpaces.RGB.prev() is ColorSpaces.HSB
    assert ColorSpaces.OKLAB.next() is ColorSpaces.LUV


def test_get_by_index():
    assert ColorSpaces.get(0) is ColorSpaces.RGB
    assert ColorSpaces.get(SIZE - 1) is ColorSpaces.HSB
    for bad in (-1, SIZE, 100):
        with pytest.raises(IndexError):
            ColorSpaces.get(bad)


def test_get_color_space_lookups():
    assert isinstance(get_color_space(ColorSpaces.OKLAB), OKLAB)
    assert isinstance(get_color_space("oklab"), OKLAB)
    assert isinstance(get_color_space("HSB"), HSB)
    assert get_color_space(7) is ColorSpaces.OKLAB.color_space
    with pytest.raises(ValueError):
        get_color_space("CMYK")
    with pytest.raises(IndexError):
        get_color_space(SIZE)
