"""Tests for FourierSeries summation and batched amplitude notifications."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
import pytest

from fourier_making_waves.analysis.amplitude import get_amplitude_function
from fourier_making_waves.analysis.fourier_series import DiscreteFourierSeries, FourierSeries
from fourier_making_waves.models.axis_tables import DISCRETE_DEFAULT_X_AXIS_DESCRIPTION, DISCRETE_X_AXIS_DESCRIPTIONS
from fourier_making_waves.models.domain import Domain, SeriesType
from fourier_making_waves.models.profile import EngineProfile


def _recording(series: FourierSeries) -> List[Tuple[float, ...]]:
    calls: List[Tuple[float, ...]] = []
    series.add_amplitudes_listener(calls.append)
    return calls


# -----------------------------------------------------------------------
# Construction
# -----------------------------------------------------------------------


def test_defaults() -> None:
    series = FourierSeries()
    assert len(series.harmonics) == 11
    assert series.L == 1.0
    assert series.T == pytest.approx(1000.0 / 440.0)
    assert series.amplitude_range.max == 1.5
    assert series.amplitudes == (0.0,) * 11
    assert [h.order for h in series.harmonics] == list(range(1, 12))
    assert series.harmonics[2].frequency == pytest.approx(1320.0)
    assert series.harmonics[3].wavelength == pytest.approx(0.25)


def test_constructor_validation() -> None:
    with pytest.raises(ValueError):
        FourierSeries(amplitudes=[0.0] * 3)
    with pytest.raises(ValueError):
        FourierSeries(amplitudes=[2.0] + [0.0] * 10)
    with pytest.raises(ValueError):
        FourierSeries(number_of_harmonics=12)


def test_number_of_harmonics_follows_profile() -> None:
    series = FourierSeries(profile=EngineProfile(max_harmonics=4))
    assert len(series.harmonics) == 4


# -----------------------------------------------------------------------
# Sum
# -----------------------------------------------------------------------


@pytest.mark.parametrize("domain", list(Domain))
@pytest.mark.parametrize("series_type", list(SeriesType))
@pytest.mark.parametrize("t", [0.0, 0.37])
def test_sum_of_zero_amplitudes_is_zero(domain: Domain, series_type: SeriesType, t: float) -> None:
    series = FourierSeries()
    ds = series.create_sum_data_set(DISCRETE_X_AXIS_DESCRIPTIONS[0], domain, series_type, t)
    assert len(ds) == 1001
    assert np.all(ds.y == 0)


def test_sum_spans_axis_range_inclusive() -> None:
    series = FourierSeries()
    ds = series.create_sum_data_set(DISCRETE_DEFAULT_X_AXIS_DESCRIPTION, Domain.TIME, SeriesType.SIN, 0.0)
    assert ds.x[0] == pytest.approx(-0.5 * series.T)
    assert ds.x[-1] == pytest.approx(0.5 * series.T)
    assert np.all(np.diff(ds.x) > 0)


def test_sum_matches_pointwise_sum_of_harmonics() -> None:
    amplitudes = [1.0, 0.0, -0.5, 0.25] + [0.0] * 7
    series = FourierSeries(amplitudes=amplitudes)
    t = 0.2
    ds = series.create_sum_data_set(DISCRETE_DEFAULT_X_AXIS_DESCRIPTION, Domain.SPACE_AND_TIME, SeriesType.COS, t)
    f = get_amplitude_function(Domain.SPACE_AND_TIME, SeriesType.COS)
    expected = sum(f(a, n, ds.x, t, series.L, series.T) for n, a in enumerate(amplitudes, start=1))
    np.testing.assert_allclose(ds.y, expected, atol=1e-12)


def test_queries() -> None:
    series = FourierSeries(amplitudes=[1.0, 0.0, 0.5] + [0.0] * 8)
    assert series.get_number_of_non_zero_harmonics() == 2
    assert [h.order for h in series.get_non_zero_harmonics()] == [1, 3]
    assert len(series.get_zero_harmonics()) == 9


# -----------------------------------------------------------------------
# Batching
# -----------------------------------------------------------------------


def test_set_amplitudes_notifies_once() -> None:
    series = FourierSeries()
    calls = _recording(series)
    series.set_amplitudes([0.1 * i for i in range(11)])
    assert len(calls) == 1
    assert calls[0] == series.amplitudes
    assert series.amplitudes[10] == pytest.approx(1.0)


def test_set_all_amplitudes_and_reset_notify_once_each() -> None:
    series = FourierSeries()
    calls = _recording(series)
    series.set_all_amplitudes(0.5)
    assert len(calls) == 1
    series.reset()
    assert len(calls) == 2
    assert series.amplitudes == (0.0,) * 11


def test_no_notification_without_change() -> None:
    series = FourierSeries()
    calls = _recording(series)
    series.set_all_amplitudes(0.0)
    assert calls == []


def test_nested_deferred_notifies_once_at_outermost_end() -> None:
    series = FourierSeries()
    calls = _recording(series)
    with series.deferred():
        series.harmonics[0].amplitude = 1.0
        with series.deferred():
            series.harmonics[1].amplitude = 0.5
        assert calls == []
        series.set_all_amplitudes(0.25)
        assert calls == []
    assert len(calls) == 1
    assert series.amplitudes == (0.25,) * 11


def test_single_harmonic_change_notifies_immediately() -> None:
    series = FourierSeries()
    calls = _recording(series)
    series.harmonics[4].amplitude = -0.3
    assert len(calls) == 1
    assert series.amplitudes[4] == pytest.approx(-0.3)


def test_set_amplitudes_length_mismatch() -> None:
    series = FourierSeries()
    with pytest.raises(ValueError):
        series.set_amplitudes([0.0, 1.0])


def test_out_of_range_amplitude_leaves_series_untouched() -> None:
    series = FourierSeries()
    calls = _recording(series)
    with pytest.raises(ValueError):
        series.set_amplitudes([0.5, 99.0] + [0.0] * 9)
    with pytest.raises(ValueError):
        series.set_all_amplitudes(-2.0)
    assert series.amplitudes == (0.0,) * 11
    assert [h.amplitude for h in series.harmonics] == [0.0] * 11
    assert calls == []


# -----------------------------------------------------------------------
# DiscreteFourierSeries
# -----------------------------------------------------------------------


def test_decreasing_number_of_harmonics_zeroes_the_rest_in_one_notification() -> None:
    series = DiscreteFourierSeries(amplitudes=[1.0] * 11)
    calls = _recording(series)
    series.number_of_harmonics = 3
    assert len(calls) == 1
    assert series.amplitudes == (1.0, 1.0, 1.0) + (0.0,) * 8
    assert len(series.harmonics) == 11


def test_number_of_harmonics_bounds() -> None:
    series = DiscreteFourierSeries()
    assert series.number_of_harmonics_range.min == 1
    assert series.number_of_harmonics_range.max == 11
    for bad in (0, 12, 2.5):
        with pytest.raises(ValueError):
            series.number_of_harmonics = bad


def test_discrete_reset_restores_number_of_harmonics() -> None:
    series = DiscreteFourierSeries()
    series.number_of_harmonics = 2
    series.harmonics[0].amplitude = 1.0
    series.reset()
    assert series.number_of_harmonics == 11
    assert series.amplitudes == (0.0,) * 11
