import numpy as np
import pytest

from chromagrad.gradients import Interpolation

EASINGS = [
    Interpolation.LINEAR,
    Interpolation.IDENTITY,
    Interpolation.SMOOTH_STEP,
    Interpolation.SMOOTHER_STEP,
    Interpolation.EXPONENTIAL,
    Interpolation.CUBIC,
    Interpolation.BOUNCE,
    Interpolation.CIRCULAR,
    Interpolation.GAIN1,
    Interpolation.GAIN2,
]

MONOTONE = [mode for mode in EASINGS if mode is not Interpolation.BOUNCE]


@pytest.mark.parametrize("mode", EASINGS, ids=lambda m: m.name)
def test_easings_fix_endpoints(mode):
    assert mode.apply(0.0) == pytest.approx(0.0, abs=1e-3)
    assert mode.apply(1.0) == pytest.approx(1.0, abs=1e-3)


@pytest.mark.parametrize("mode", MONOTONE, ids=lambda m: m.name)
def test_easings_are_monotone(mode):
    values = np.array([mode.apply(s) for s in np.linspace(0.0, 1.0, 501)])
    assert np.all(np.diff(values) >= -1e-3)


@pytest.mark.parametrize("mode", list(Interpolation), ids=lambda m: m.name)
def test_values_are_finite(mode):
    for s in np.linspace(0.0, 1.0, 101):
        assert np.isfinite(mode.apply(s))


def test_known_values():
    assert Interpolation.LINEAR.apply(0.3) == pytest.approx(0.3)
    assert Interpolation.SMOOTH_STEP.apply(0.5) == pytest.approx(0.5)
    assert Interpolation.SMOOTHER_STEP.apply(0.5) == pytest.approx(0.5)
    assert Interpolation.CUBIC.apply(0.5) == pytest.approx(0.125)
    assert Interpolation.EXPONENTIAL.apply(1.0) == 1.0
    assert Interpolation.EXPONENTIAL.apply(0.5) == pytest.approx(1.0 - 2.0 ** -5, abs=1e-3)
    assert Interpolation.GAIN2.apply(0.25) == pytest.approx(0.5 * 0.5 ** 3.3333, rel=1e-3)
    assert Interpolation.HEARTBEAT.apply(0.0) == pytest.approx(0.5)
    assert Interpolation.PARABOLA.apply(0.5) == pytest.approx(1.0)
    assert Interpolation.PARABOLA.apply(1.0) == pytest.approx(0.0)
    assert Interpolation.EXPIMPULSE.apply(0.5) == pytest.approx(1.0)


def test_next_and_prev_wrap():
    assert Interpolation.LINEAR.next() is Interpolation.IDENTITY
    assert Interpolation.HEARTBEAT.next() is Interpolation.LINEAR
    assert Interpolation.LINEAR.prev() is Interpolation.HEARTBEAT
    mode = Interpolation.SMOOTH_STEP
    for _ in range(len(Interpolation)):
        mode = mode.next()
    assert mode is Interpolation.SMOOTH_STEP
