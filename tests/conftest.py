import numpy as np
import pytest

from chromagrad.colorspaces import ColorSpaces


@pytest.fixture
def rng():
    """Seeded generator so sampled tests are reproducible."""
    return np.random.default_rng(20240611)


@pytest.fixture
def random_rgb(rng):
    """10,000 random sRGB triples in [0, 1]."""
    return rng.random((10_000, 3))


@pytest.fixture(params=list(ColorSpaces), ids=lambda space: space.name)
def color_space(request):
    return request.param
