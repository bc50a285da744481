"""Tests for EngineProfile."""

from __future__ import annotations

import dataclasses
import json

import pytest

from fourier_making_waves.models.profile import DEFAULT_PROFILE, EngineProfile


# -----------------------------------------------------------------------
# Basic construction
# -----------------------------------------------------------------------


def test_profile_defaults() -> None:
    p = EngineProfile()
    assert p.max_harmonics == 11
    assert p.max_amplitude == 1.5
    assert p.max_points_per_data_set == 1000
    assert p.fundamental_frequency_hz == 440.0
    assert p.fundamental_wavelength_m == 1.0
    assert p.number_of_game_levels == 5
    assert p.fundamental_period_ms == pytest.approx(1000.0 / 440.0)
    assert p == DEFAULT_PROFILE


def test_profile_frozen() -> None:
    p = EngineProfile()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.max_harmonics = 3  # type: ignore[misc]


def test_profile_replace() -> None:
    p2 = dataclasses.replace(DEFAULT_PROFILE, max_points_per_data_set=200)
    assert p2.max_points_per_data_set == 200
    assert p2.max_harmonics == 11  # unchanged


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_harmonics": 0},
        {"max_harmonics": 2.0},
        {"max_amplitude": 0.0},
        {"max_points_per_data_set": 1},
        {"fundamental_frequency_hz": -440.0},
        {"fundamental_wavelength_m": 0.0},
    ],
)
def test_profile_validation(overrides: dict) -> None:
    with pytest.raises(ValueError):
        EngineProfile(**overrides)


# -----------------------------------------------------------------------
# Serialization
# -----------------------------------------------------------------------


def test_profile_dict_survives_json() -> None:
    p = EngineProfile(max_harmonics=7, time_scale=0.002)
    d = json.loads(json.dumps(p.to_dict()))
    assert EngineProfile.from_dict(d) == p


def test_profile_from_dict_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="Unknown EngineProfile fields"):
        EngineProfile.from_dict({"max_harmonics": 11, "colour": "red"})
