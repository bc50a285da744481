"""Fourier series: a fixed set of harmonics sharing one fundamental.

Bulk amplitude changes are batched: inside :meth:`FourierSeries.deferred` the
per-harmonic change hooks only mark the series dirty, and listeners are
notified once when the outermost batch ends.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from fourier_making_waves.models.axis import AxisDescription, Range
from fourier_making_waves.models.data_set import DataSet
from fourier_making_waves.models.domain import Domain, SeriesType
from fourier_making_waves.models.profile import DEFAULT_PROFILE, EngineProfile

from .amplitude import check_amplitude_arguments, get_amplitude_function
from .harmonic import Harmonic

logger = logging.getLogger(__name__)

AmplitudesListener = Callable[[Tuple[float, ...]], None]


class FourierSeries:
    """Ordered harmonics (index 0 is order 1) with a common fundamental.

    Parameters
    ----------
    profile:
        Engine constants; supplies the default number of harmonics, the amplitude
        range and the fundamental frequency/wavelength.
    number_of_harmonics:
        Fixed arity of the series.  Defaults to ``profile.max_harmonics``.
    amplitude_range:
        Range of every harmonic amplitude.  Defaults to ``+/- profile.max_amplitude``.
    amplitudes:
        Initial amplitudes, one per harmonic.  Defaults to all zeros.
    """

    def __init__(
        self,
        *,
        profile: EngineProfile = DEFAULT_PROFILE,
        number_of_harmonics: Optional[int] = None,
        amplitude_range: Optional[Range] = None,
        amplitudes: Optional[Sequence[float]] = None,
    ) -> None:
        if number_of_harmonics is None:
            number_of_harmonics = profile.max_harmonics
        if not (isinstance(number_of_harmonics, int) and 0 < number_of_harmonics <= profile.max_harmonics):
            raise ValueError(
                f"number_of_harmonics must be an integer in [1, {profile.max_harmonics}], got {number_of_harmonics!r}"
            )
        if amplitude_range is None:
            amplitude_range = Range(-profile.max_amplitude, profile.max_amplitude)
        if amplitudes is None:
            amplitudes = [0.0] * number_of_harmonics
        if len(amplitudes) != number_of_harmonics:
            raise ValueError(f"requires an amplitude for each harmonic: expected {number_of_harmonics}, got {len(amplitudes)}")
        if not all(amplitude_range.contains(a) for a in amplitudes):
            raise ValueError("one or more amplitudes are out of range")

        self.profile = profile
        self.fundamental_frequency = profile.fundamental_frequency_hz  # Hz
        self.fundamental_period = 1000.0 / self.fundamental_frequency  # ms
        self.fundamental_wavelength = profile.fundamental_wavelength_m  # m

        self.T = self.fundamental_period
        self.L = self.fundamental_wavelength

        self.amplitude_range = amplitude_range

        self._defer_depth = 0
        self._is_dirty = False
        self._listeners: List[AmplitudesListener] = []

        self.harmonics: Tuple[Harmonic, ...] = tuple(
            Harmonic(
                order=order,
                frequency=self.fundamental_frequency * order,
                wavelength=self.L / order,
                amplitude_range=self.amplitude_range,
                amplitude=amplitudes[order - 1],
                on_amplitude_changed=self._harmonic_amplitude_changed,
            )
            for order in range(1, number_of_harmonics + 1)
        )
        self._amplitudes = self._compute_amplitudes()

    # ------------------------------------------------------------------
    # Amplitudes and batching
    # ------------------------------------------------------------------

    @property
    def amplitudes(self) -> Tuple[float, ...]:
        """Amplitudes of all harmonics, in order.  Recomputed once per batch."""
        return self._amplitudes

    def add_amplitudes_listener(self, listener: AmplitudesListener) -> None:
        self._listeners.append(listener)

    @contextmanager
    def deferred(self) -> Iterator[None]:
        """Batch amplitude changes; listeners are notified once, when the outermost batch ends."""
        self._defer_depth += 1
        try:
            yield
        finally:
            self._defer_depth -= 1
            if self._defer_depth == 0 and self._is_dirty:
                self._notify()

    def set_amplitudes(self, amplitudes: Sequence[float]) -> None:
        if len(amplitudes) != len(self.harmonics):
            raise ValueError(
                f"requires an amplitude for each harmonic: expected {len(self.harmonics)}, got {len(amplitudes)}"
            )
        self._check_amplitudes(amplitudes)
        with self.deferred():
            for harmonic, amplitude in zip(self.harmonics, amplitudes):
                harmonic.amplitude = amplitude

    def set_all_amplitudes(self, amplitude: float) -> None:
        self._check_amplitudes([amplitude])
        with self.deferred():
            for harmonic in self.harmonics:
                harmonic.amplitude = amplitude

    def reset(self) -> None:
        with self.deferred():
            for harmonic in self.harmonics:
                harmonic.reset()

    def _check_amplitudes(self, amplitudes: Sequence[float]) -> None:
        bad = [a for a in amplitudes if not self.amplitude_range.contains(a)]
        if bad:
            raise ValueError(
                f"amplitudes must be in [{self.amplitude_range.min}, {self.amplitude_range.max}], got {bad!r}"
            )

    def _harmonic_amplitude_changed(self, harmonic: Harmonic) -> None:
        self._is_dirty = True
        if self._defer_depth == 0:
            self._notify()

    def _compute_amplitudes(self) -> Tuple[float, ...]:
        return tuple(h.amplitude for h in self.harmonics)

    def _notify(self) -> None:
        self._is_dirty = False
        self._amplitudes = self._compute_amplitudes()
        logger.debug("amplitudes changed: %s", self._amplitudes)
        for listener in list(self._listeners):
            listener(self._amplitudes)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_zero_harmonics(self) -> List[Harmonic]:
        return [h for h in self.harmonics if h.amplitude == 0]

    def get_non_zero_harmonics(self) -> List[Harmonic]:
        return [h for h in self.harmonics if h.amplitude != 0]

    def get_number_of_non_zero_harmonics(self) -> int:
        return sum(1 for h in self.harmonics if h.amplitude != 0)

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def create_sum_data_set(
        self,
        x_axis_description: AxisDescription,
        domain: Domain,
        series_type: SeriesType,
        t: float,
    ) -> DataSet:
        """Sum of all harmonics, sampled on a fixed point budget.

        Every harmonic is sampled at the same x values (``max_points_per_data_set``
        intervals across the x range, both ends included), so the sum is exact
        pointwise.  Harmonics with zero amplitude are skipped.
        """
        check_amplitude_arguments(1, t, self.L, self.T)
        x_range = x_axis_description.create_range_for_domain(domain, self.L, self.T)
        amplitude_function = get_amplitude_function(domain, series_type)

        x = np.linspace(x_range.min, x_range.max, self.profile.max_points_per_data_set + 1)
        y = np.zeros_like(x)
        for harmonic in self.harmonics:
            amplitude = harmonic.amplitude
            if amplitude != 0:
                y += amplitude_function(amplitude, harmonic.order, x, t, self.L, self.T)
        return DataSet(x, y)


class DiscreteFourierSeries(FourierSeries):
    """Fourier series with a bounded count of relevant harmonics.

    Harmonics above ``number_of_harmonics`` are kept but forced to amplitude 0.
    """

    def __init__(self, *, profile: EngineProfile = DEFAULT_PROFILE, **kwargs) -> None:
        super().__init__(profile=profile, **kwargs)
        self._number_of_harmonics = len(self.harmonics)

    @property
    def number_of_harmonics_range(self) -> Range:
        return Range(1, len(self.harmonics))

    @property
    def number_of_harmonics(self) -> int:
        return self._number_of_harmonics

    @number_of_harmonics.setter
    def number_of_harmonics(self, value: int) -> None:
        if not (isinstance(value, int) and 1 <= value <= len(self.harmonics)):
            raise ValueError(f"number_of_harmonics must be an integer in [1, {len(self.harmonics)}], got {value!r}")
        self._number_of_harmonics = value
        self.zero_irrelevant_harmonics()

    def zero_irrelevant_harmonics(self) -> None:
        with self.deferred():
            for harmonic in self.harmonics[self._number_of_harmonics:]:
                harmonic.amplitude = 0.0

    def reset(self) -> None:
        with self.deferred():
            super().reset()
            self.number_of_harmonics = len(self.harmonics)
