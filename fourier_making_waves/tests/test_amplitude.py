"""Tests for the per-(Domain, SeriesType) amplitude functions."""

from __future__ import annotations

import numpy as np
import pytest

from fourier_making_waves.analysis.amplitude import evaluate_amplitude, get_amplitude_function
from fourier_making_waves.models.domain import Domain, SeriesType

L = 1.0
T = 1000.0 / 440.0


# -----------------------------------------------------------------------
# Periodicity and phase
# -----------------------------------------------------------------------


@pytest.mark.parametrize("series_type", list(SeriesType))
@pytest.mark.parametrize("order", [1, 2, 5, 11])
def test_space_periodic_in_wavelength(series_type: SeriesType, order: int) -> None:
    x = np.linspace(-1.0, 1.0, 37)
    f = get_amplitude_function(Domain.SPACE, series_type)
    np.testing.assert_allclose(f(0.8, order, x + L, 0.0, L, T), f(0.8, order, x, 0.0, L, T), atol=1e-9)


@pytest.mark.parametrize("series_type", list(SeriesType))
@pytest.mark.parametrize("order", [1, 3, 7])
def test_time_periodic_in_period(series_type: SeriesType, order: int) -> None:
    x = np.linspace(0.0, 2 * T, 41)
    f = get_amplitude_function(Domain.TIME, series_type)
    np.testing.assert_allclose(f(1.2, order, x + T, 0.0, L, T), f(1.2, order, x, 0.0, L, T), atol=1e-9)


@pytest.mark.parametrize("order", [1, 2, 4])
def test_cos_is_sin_shifted_by_quarter_wavelength(order: int) -> None:
    x = np.linspace(-0.5, 0.5, 51)
    sin_f = get_amplitude_function(Domain.SPACE, SeriesType.SIN)
    cos_f = get_amplitude_function(Domain.SPACE, SeriesType.COS)
    shift = L / (4 * order)
    np.testing.assert_allclose(cos_f(1.0, order, x, 0.0, L, T), sin_f(1.0, order, x + shift, 0.0, L, T), atol=1e-12)


def test_space_and_time_at_t0_matches_space() -> None:
    x = np.linspace(-2.0, 2.0, 81)
    for series_type in SeriesType:
        space = get_amplitude_function(Domain.SPACE, series_type)(1.0, 3, x, 0.0, L, T)
        space_and_time = get_amplitude_function(Domain.SPACE_AND_TIME, series_type)(1.0, 3, x, 0.0, L, T)
        np.testing.assert_allclose(space_and_time, space, atol=1e-12)


def test_space_and_time_travels_right() -> None:
    x = np.linspace(-1.0, 1.0, 21)
    t = 0.3
    f = get_amplitude_function(Domain.SPACE_AND_TIME, SeriesType.SIN)
    moved = f(1.0, 2, x, t, L, T)
    reference = f(1.0, 2, x - L * t / T, 0.0, L, T)
    np.testing.assert_allclose(moved, reference, atol=1e-12)


def test_scalar_and_array_agree() -> None:
    xs = np.array([0.1, 0.2, 0.3])
    f = get_amplitude_function(Domain.TIME, SeriesType.COS)
    expected = [f(0.5, 2, float(x), 0.0, L, T) for x in xs]
    np.testing.assert_allclose(f(0.5, 2, xs, 0.0, L, T), expected)


# -----------------------------------------------------------------------
# Contract violations
# -----------------------------------------------------------------------


def test_unknown_pair_is_key_error() -> None:
    with pytest.raises(KeyError):
        get_amplitude_function("space", SeriesType.SIN)


@pytest.mark.parametrize(
    "n, t, L_, T_",
    [
        (0, 0.0, 1.0, 1.0),
        (1, -1.0, 1.0, 1.0),
        (1, 0.0, 0.0, 1.0),
        (1, 0.0, 1.0, -2.0),
    ],
)
def test_evaluate_amplitude_rejects_bad_arguments(n: int, t: float, L_: float, T_: float) -> None:
    with pytest.raises(ValueError):
        evaluate_amplitude(Domain.SPACE, SeriesType.SIN, 1.0, n, 0.0, t, L_, T_)
