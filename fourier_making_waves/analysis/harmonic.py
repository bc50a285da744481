"""One harmonic of a Fourier series, and its sampled data set."""

from __future__ import annotations

import math
from typing import Callable, Optional

import numpy as np

from fourier_making_waves.models.axis import AxisDescription, Range
from fourier_making_waves.models.data_set import DataSet
from fourier_making_waves.models.domain import Domain, SeriesType

from .amplitude import check_amplitude_arguments, get_amplitude_function


def create_harmonic_data_set(
    order: int,
    amplitude: float,
    number_of_points: int,
    L: float,
    T: float,
    x_range: Range,
    domain: Domain,
    series_type: SeriesType,
    t: float,
) -> DataSet:
    """Sample one harmonic at ``number_of_points`` evenly spaced x values.

    x steps by ``x_range.length / (number_of_points - 1)`` from ``x_range.min`` to
    ``x_range.max``, both ends included.
    """
    check_amplitude_arguments(order, t, L, T)
    if not (isinstance(number_of_points, (int, np.integer)) and number_of_points > 0):
        raise ValueError(f"number_of_points must be a positive integer, got {number_of_points!r}")

    amplitude_function = get_amplitude_function(domain, series_type)
    x = np.linspace(x_range.min, x_range.max, int(number_of_points))
    y = amplitude_function(amplitude, order, x, t, L, T)
    return DataSet(x, np.broadcast_to(y, x.shape))


def number_of_points_for_order(order: int, number_of_harmonics: int, max_points: int) -> int:
    """Point budget for one harmonic's plot.

    Higher orders get proportionally more points so that their curves stay smooth.
    """
    if not (1 <= order <= number_of_harmonics):
        raise ValueError(f"order must be in [1, {number_of_harmonics}], got {order}")
    return int(math.ceil(max_points * order / number_of_harmonics))


class Harmonic:
    """One term of a discrete Fourier series.

    A Harmonic is owned by exactly one series, which passes ``on_amplitude_changed``
    so that it can batch notifications.
    """

    def __init__(
        self,
        order: int,
        frequency: float,
        wavelength: float,
        amplitude_range: Range,
        *,
        amplitude: float = 0.0,
        color_tag: Optional[str] = None,
        on_amplitude_changed: Optional[Callable[["Harmonic"], None]] = None,
    ) -> None:
        if not (isinstance(order, int) and order > 0):
            raise ValueError(f"order must be a positive integer, got {order!r}")
        if not frequency > 0:
            raise ValueError(f"frequency must be > 0, got {frequency}")
        if not wavelength > 0:
            raise ValueError(f"wavelength must be > 0, got {wavelength}")

        self.order = order
        self.frequency = float(frequency)  # Hz
        self.wavelength = float(wavelength)  # m
        self.period = 1000.0 / self.frequency  # ms
        self.amplitude_range = amplitude_range
        self.color_tag = color_tag if color_tag is not None else f"harmonic{order}"

        self._initial_amplitude = self._check_amplitude(amplitude)
        self._amplitude = self._initial_amplitude
        self._on_amplitude_changed = on_amplitude_changed

    def __repr__(self) -> str:
        return f"Harmonic(order={self.order}, amplitude={self._amplitude})"

    @property
    def amplitude(self) -> float:
        return self._amplitude

    @amplitude.setter
    def amplitude(self, value: float) -> None:
        value = self._check_amplitude(value)
        if value == self._amplitude:
            return
        self._amplitude = value
        if self._on_amplitude_changed is not None:
            self._on_amplitude_changed(self)

    def reset(self) -> None:
        self.amplitude = self._initial_amplitude

    def create_data_set(
        self,
        number_of_points: int,
        L: float,
        T: float,
        x_axis_description: AxisDescription,
        domain: Domain,
        series_type: SeriesType,
        t: float,
    ) -> DataSet:
        x_range = x_axis_description.create_range_for_domain(domain, L, T)
        return create_harmonic_data_set(
            self.order, self._amplitude, number_of_points, L, T, x_range, domain, series_type, t
        )

    def _check_amplitude(self, value: float) -> float:
        value = float(value)
        if not self.amplitude_range.contains(value):
            raise ValueError(
                f"amplitude {value} of harmonic {self.order} is out of range "
                f"[{self.amplitude_range.min}, {self.amplitude_range.max}]"
            )
        return value
