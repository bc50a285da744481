"""Tests for the Gaussian WavePacket model."""

from __future__ import annotations

import math

import numpy as np
import pytest

from fourier_making_waves.analysis.wave_packet import (
    COMPONENT_SPACING_VALUES,
    WavePacket,
    gaussian_amplitude,
    number_of_components_for,
)

PI = math.pi


# -----------------------------------------------------------------------
# Gaussian
# -----------------------------------------------------------------------


@pytest.mark.parametrize("sigma", [PI, 2.5 * PI, 4 * PI])
def test_gaussian_integrates_to_one(sigma: float) -> None:
    center = 12 * PI
    k = np.linspace(center - 10 * sigma, center + 10 * sigma, 20001)
    dk = k[1] - k[0]
    assert np.sum(gaussian_amplitude(k, center, sigma)) * dk == pytest.approx(1.0, rel=1e-6)


def test_gaussian_peak_and_scalar_return() -> None:
    peak = gaussian_amplitude(12 * PI, 12 * PI, 3 * PI)
    assert isinstance(peak, float)
    assert peak == pytest.approx(1 / (3 * PI * math.sqrt(2 * PI)))
    with pytest.raises(ValueError):
        gaussian_amplitude(0.0, 1.0, 0.0)


# -----------------------------------------------------------------------
# Parameters
# -----------------------------------------------------------------------


def test_defaults() -> None:
    wp = WavePacket()
    assert wp.component_spacing == PI
    assert wp.center == 12 * PI
    assert wp.standard_deviation == 3 * PI
    assert wp.L == 1.0 and wp.T == 1.0
    assert wp.wave_number_range.min == 0.0
    assert wp.wave_number_range.max == pytest.approx(24 * PI)


def test_standard_deviation_and_conjugate_stay_reciprocal() -> None:
    wp = WavePacket()
    wp.standard_deviation = 2 * PI
    assert wp.standard_deviation * wp.conjugate_standard_deviation == pytest.approx(1.0)
    wp.conjugate_standard_deviation = 1 / (3.5 * PI)
    assert wp.standard_deviation == pytest.approx(3.5 * PI)
    assert wp.standard_deviation * wp.conjugate_standard_deviation == pytest.approx(1.0)
    wp.conjugate_standard_deviation = 1 / PI
    assert wp.standard_deviation == pytest.approx(PI)
    assert wp.standard_deviation * wp.conjugate_standard_deviation == pytest.approx(1.0)


@pytest.mark.parametrize(
    "name, value",
    [
        ("component_spacing", 0.5),
        ("center", 8 * PI),
        ("center", 16 * PI),
        ("standard_deviation", 0.5 * PI),
        ("standard_deviation", 5 * PI),
        ("conjugate_standard_deviation", 1.0),
    ],
)
def test_parameter_validation(name: str, value: float) -> None:
    wp = WavePacket()
    with pytest.raises(ValueError):
        setattr(wp, name, value)


def test_reset() -> None:
    wp = WavePacket()
    wp.component_spacing = 0
    wp.center = 10 * PI
    wp.standard_deviation = 4 * PI
    wp.reset()
    assert (wp.component_spacing, wp.center, wp.standard_deviation) == (PI, 12 * PI, 3 * PI)


def test_width_and_length() -> None:
    wp = WavePacket()
    assert wp.width == pytest.approx(6 * PI)
    assert wp.length == pytest.approx(2.0)
    wp.component_spacing = PI / 4
    assert wp.length == pytest.approx(8.0)
    wp.component_spacing = 0
    assert wp.length == math.inf


# -----------------------------------------------------------------------
# Components
# -----------------------------------------------------------------------


@pytest.mark.parametrize("spacing, expected", [(PI, 25), (PI / 2, 49), (PI / 4, 97)])
def test_number_of_components_includes_both_ends(spacing: float, expected: int) -> None:
    assert number_of_components_for(spacing) == expected
    wp = WavePacket()
    wp.component_spacing = spacing
    components = wp.get_components()
    assert len(components) == expected
    assert components[0].wave_number == 0.0
    assert components[-1].wave_number == pytest.approx(24 * PI)


def test_zero_spacing_is_infinite_with_no_components() -> None:
    wp = WavePacket()
    wp.component_spacing = 0
    assert wp.get_number_of_components() == math.inf
    assert wp.get_components() == ()


def test_component_amplitudes_are_scaled_samples() -> None:
    wp = WavePacket()
    for i, component in enumerate(wp.get_components()):
        assert component.wave_number == pytest.approx(i * PI)
        assert component.amplitude == pytest.approx(wp.get_component_amplitude(i * PI) * PI)


def test_component_amplitudes_sum_to_about_one() -> None:
    wp = WavePacket()
    wp.component_spacing = PI / 4
    total = sum(c.amplitude for c in wp.get_components())
    assert total == pytest.approx(1.0, abs=1e-3)


def test_spacing_values_are_sorted() -> None:
    assert COMPONENT_SPACING_VALUES == tuple(sorted(COMPONENT_SPACING_VALUES))
    assert COMPONENT_SPACING_VALUES[0] == 0


# -----------------------------------------------------------------------
# Continuous waveform
# -----------------------------------------------------------------------


def test_continuous_waveform_covers_range_plus_one_step() -> None:
    wp = WavePacket()
    wp.component_spacing = 0
    ds = wp.create_continuous_waveform_data_set()
    assert len(ds) == 242
    assert ds.x[0] == 0.0
    assert ds.x[-1] == pytest.approx(24.1 * PI)
    assert np.all(np.diff(ds.x) > 0)
    assert ds.peak_y() == pytest.approx(gaussian_amplitude(12 * PI, 12 * PI, 3 * PI), rel=1e-9)


def test_continuous_waveform_scales_by_spacing() -> None:
    wp = WavePacket()
    unscaled = wp.get_component_amplitude(12 * PI)
    ds = wp.create_continuous_waveform_data_set()
    assert ds.peak_y() == pytest.approx(unscaled * PI, rel=1e-9)
