"""Preset waveforms for the discrete screen.

Each preset knows the amplitudes of its Fourier series for a given number of
harmonics and series type.  Triangle, square and sawtooth also know the exact
waveform (the limit of infinitely many harmonics), stored as a polyline of base
points in units of one wavelength/period and mapped onto the current domain.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from fourier_making_waves.models.data_set import DataSet
from fourier_making_waves.models.domain import Domain, SeriesType

PI = math.pi

BasePoints = Tuple[Tuple[float, float], ...]

# Base points span more than the widest x axis (+/- 2 wavelengths) so that any shift stays covered.
TRIANGLE_BASE_POINTS: BasePoints = (
    (-11 / 4, 1), (-9 / 4, -1), (-7 / 4, 1), (-5 / 4, -1), (-3 / 4, 1), (-1 / 4, -1),
    (1 / 4, 1), (3 / 4, -1), (5 / 4, 1), (7 / 4, -1), (9 / 4, 1), (11 / 4, -1),
)

SQUARE_BASE_POINTS: BasePoints = (
    (-3, -1), (-3, 1), (-5 / 2, 1), (-5 / 2, -1), (-2, -1), (-2, 1), (-3 / 2, 1), (-3 / 2, -1),
    (-1, -1), (-1, 1), (-1 / 2, 1), (-1 / 2, -1), (0, -1), (0, 1), (1 / 2, 1), (1 / 2, -1),
    (1, -1), (1, 1), (3 / 2, 1), (3 / 2, -1), (2, -1), (2, 1), (5 / 2, 1), (5 / 2, -1),
    (3, -1), (3, 1),
)

SAWTOOTH_BASE_POINTS: BasePoints = (
    (-7 / 2, 1), (-7 / 2, -1), (-5 / 2, 1), (-5 / 2, -1), (-3 / 2, 1), (-3 / 2, -1),
    (-1 / 2, 1), (-1 / 2, -1), (1 / 2, 1), (1 / 2, -1), (3 / 2, 1), (3 / 2, -1),
    (5 / 2, 1), (5 / 2, -1), (7 / 2, 1), (7 / 2, -1),
)

# Gaussian amplitudes, normalized to a peak of 1, for 1..11 harmonics.
WAVE_PACKET_AMPLITUDES: Tuple[Tuple[float, ...], ...] = (
    (1.000000,),
    (0.457833, 0.457833),
    (0.249352, 1.000000, 0.249352),
    (0.172422, 0.822578, 0.822578, 0.172422),
    (0.135335, 0.606531, 1.000000, 0.606531, 0.135335),
    (0.114162, 0.457833, 0.916855, 0.916855, 0.457833, 0.114162),
    (0.100669, 0.360448, 0.774837, 1.000000, 0.774837, 0.360448, 0.100669),
    (0.091394, 0.295023, 0.644389, 0.952345, 0.952345, 0.644389, 0.295023, 0.091394),
    (0.084658, 0.249352, 0.539408, 0.856997, 1.000000, 0.856997, 0.539408, 0.249352, 0.084658),
    (0.079560, 0.216255, 0.457833, 0.754840, 0.969233, 0.969233, 0.754840, 0.457833, 0.216255, 0.079560),
    (0.075574, 0.191495, 0.394652, 0.661515, 0.901851, 1.000000, 0.901851, 0.661515, 0.394652, 0.191495, 0.075574),
)


def _is_ordered_by_ascending_x(points: Sequence[Tuple[float, float]]) -> bool:
    return all(points[i - 1][0] <= points[i][0] for i in range(1, len(points)))


for _points in (TRIANGLE_BASE_POINTS, SQUARE_BASE_POINTS, SAWTOOTH_BASE_POINTS):
    if not _is_ordered_by_ascending_x(_points):
        raise ValueError("infinite-harmonics base points must be ordered by ascending x")


def _check_number_of_harmonics(number_of_harmonics: int) -> None:
    if not (isinstance(number_of_harmonics, int) and number_of_harmonics > 0):
        raise ValueError(f"number_of_harmonics must be a positive integer, got {number_of_harmonics!r}")


def _sinusoid_amplitudes(number_of_harmonics: int, series_type: SeriesType) -> List[float]:
    return [1.0 if n == 1 else 0.0 for n in range(1, number_of_harmonics + 1)]


def _triangle_amplitudes(number_of_harmonics: int, series_type: SeriesType) -> List[float]:
    amplitudes = []
    for n in range(1, number_of_harmonics + 1):
        if n % 2 == 0:
            amplitudes.append(0.0)
        elif series_type is SeriesType.SIN:
            amplitudes.append((-1) ** ((n - 1) // 2) * 8 / (n * n * PI * PI))
        else:
            amplitudes.append(8 / (n * n * PI * PI))
    return amplitudes


def _square_amplitudes(number_of_harmonics: int, series_type: SeriesType) -> List[float]:
    amplitudes = []
    for n in range(1, number_of_harmonics + 1):
        if n % 2 == 0:
            amplitudes.append(0.0)
        elif series_type is SeriesType.SIN:
            amplitudes.append(4 / (n * PI))
        else:
            amplitudes.append((-1) ** ((n - 1) // 2) * 4 / (n * PI))
    return amplitudes


def _sawtooth_amplitudes(number_of_harmonics: int, series_type: SeriesType) -> List[float]:
    if series_type is SeriesType.COS:
        raise ValueError("cannot make a sawtooth wave out of cosines")
    return [(-1) ** (n - 1) * 2 / (n * PI) for n in range(1, number_of_harmonics + 1)]


def _wave_packet_amplitudes(number_of_harmonics: int, series_type: SeriesType) -> List[float]:
    if number_of_harmonics > len(WAVE_PACKET_AMPLITUDES):
        raise ValueError(f"wave packet amplitudes exist for at most {len(WAVE_PACKET_AMPLITUDES)} harmonics")
    return list(WAVE_PACKET_AMPLITUDES[number_of_harmonics - 1])


def _custom_amplitudes(number_of_harmonics: int, series_type: SeriesType) -> List[float]:
    raise ValueError("amplitudes are not defined for the CUSTOM waveform")


def map_base_points_to_data_set(
    base_points: BasePoints,
    domain: Domain,
    series_type: SeriesType,
    t: float,
    L: float,
    T: float,
) -> DataSet:
    """Scale base points by L (or T) and shift them for series type and time.

    Cosine is sine shifted left by a quarter wavelength; in the space-and-time
    domain the waveform travels right by the fraction of a period elapsed.
    """
    if not isinstance(domain, Domain):
        raise ValueError(f"unsupported domain: {domain!r}")
    scale = T if domain is Domain.TIME else L

    shift_x = 0.0 if series_type is SeriesType.SIN else -0.25 * scale
    if domain is Domain.SPACE_AND_TIME:
        remainder = math.fmod(t / T - scale / L, 1.0)
        shift_x += remainder * scale

    points = np.asarray(base_points, dtype=float)
    return DataSet(scale * points[:, 0] + shift_x, points[:, 1])


@dataclass(frozen=True, eq=False)
class Waveform:
    """A preset waveform.

    Attributes
    ----------
    name:
        Identifier, e.g. ``"square"``.
    amplitudes_function:
        ``(number_of_harmonics, series_type) -> amplitudes``.
    infinite_harmonics_base_points:
        Exact waveform over several wavelengths, or None if not supported.
    """

    name: str
    amplitudes_function: Callable[[int, SeriesType], List[float]]
    infinite_harmonics_base_points: Optional[BasePoints] = None

    def __repr__(self) -> str:
        return f"Waveform.{self.name.upper()}"

    @property
    def supports_infinite_harmonics(self) -> bool:
        return self.infinite_harmonics_base_points is not None

    def get_amplitudes(self, number_of_harmonics: int, series_type: SeriesType) -> List[float]:
        _check_number_of_harmonics(number_of_harmonics)
        return self.amplitudes_function(number_of_harmonics, series_type)

    def get_infinite_harmonics_data_set(
        self, domain: Domain, series_type: SeriesType, t: float, L: float, T: float
    ) -> DataSet:
        if self.infinite_harmonics_base_points is None:
            raise ValueError(f"{self!r} does not support infinite harmonics")
        return map_base_points_to_data_set(self.infinite_harmonics_base_points, domain, series_type, t, L, T)


SINUSOID = Waveform("sinusoid", _sinusoid_amplitudes)
TRIANGLE = Waveform("triangle", _triangle_amplitudes, TRIANGLE_BASE_POINTS)
SQUARE = Waveform("square", _square_amplitudes, SQUARE_BASE_POINTS)
SAWTOOTH = Waveform("sawtooth", _sawtooth_amplitudes, SAWTOOTH_BASE_POINTS)
WAVE_PACKET = Waveform("wave_packet", _wave_packet_amplitudes)
CUSTOM = Waveform("custom", _custom_amplitudes)

WAVEFORMS: Tuple[Waveform, ...] = (SINUSOID, TRIANGLE, SQUARE, SAWTOOTH, WAVE_PACKET, CUSTOM)


def waveform_by_name(name: str) -> Waveform:
    for waveform in WAVEFORMS:
        if waveform.name == name:
            return waveform
    raise KeyError(f"unknown waveform: {name!r}; expected one of {[w.name for w in WAVEFORMS]}")
