r"""Gaussian wave packet and its Fourier decomposition.

The packet's spectrum is the normalized Gaussian density

.. math::

    g(k) = \frac{1}{\sigma\sqrt{2\pi}} \exp\!\left(-\frac{(k - k_0)^2}{2\sigma^2}\right)

with center :math:`k_0` and standard deviation :math:`\sigma`.  The same formula
serves the spatial wave number (space domain) and the angular frequency (time
domain); the model assumes ``L == T == 1`` and Domain only changes how values are
labelled.

A finite component spacing :math:`\Delta k` discretizes the spectrum into
components :math:`A_i = g(i\,\Delta k)\,\Delta k` (a Riemann sum).  A spacing of
0 is the sentinel for the continuous (infinite) spectrum.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from fourier_making_waves.models.axis import Range
from fourier_making_waves.models.components import FourierComponent
from fourier_making_waves.models.data_set import DataSet

PI = math.pi

COMPONENT_SPACING_VALUES: Tuple[float, ...] = (0.0, PI / 4, PI / 2, PI)
if not all(COMPONENT_SPACING_VALUES[i - 1] < COMPONENT_SPACING_VALUES[i] for i in range(1, len(COMPONENT_SPACING_VALUES))):
    raise ValueError("COMPONENT_SPACING_VALUES must be unique and sorted in ascending order")

WAVE_NUMBER_RANGE = Range(0.0, 24 * PI)
CENTER_RANGE = Range(9 * PI, 15 * PI)
STANDARD_DEVIATION_RANGE = Range(PI, 4 * PI)
CONJUGATE_STANDARD_DEVIATION_RANGE = Range(1 / STANDARD_DEVIATION_RANGE.max, 1 / STANDARD_DEVIATION_RANGE.min)

DEFAULT_COMPONENT_SPACING = COMPONENT_SPACING_VALUES[3]
DEFAULT_CENTER = 12 * PI
DEFAULT_STANDARD_DEVIATION = 3 * PI

# empirical step for a smooth continuous spectrum
CONTINUOUS_WAVEFORM_STEP = PI / 10


def gaussian_amplitude(wave_number, center: float, standard_deviation: float):
    """Normalized Gaussian density; ``wave_number`` may be a scalar or an array."""
    if not standard_deviation > 0:
        raise ValueError(f"standard_deviation must be > 0, got {standard_deviation}")
    k = np.asarray(wave_number, dtype=float)
    out = np.exp(-((k - center) ** 2) / (2 * standard_deviation ** 2)) / (standard_deviation * math.sqrt(2 * PI))
    return float(out) if out.ndim == 0 else out


def number_of_components_for(component_spacing: float, wave_number_range: Range = WAVE_NUMBER_RANGE) -> float:
    """``inf`` for spacing 0, else ``floor(range.length / spacing) + 1``.

    The +1 counts the component at wave number 0 as well as the one at
    ``range.max``, so ``i * spacing`` covers the whole range inclusive.
    """
    if component_spacing < 0:
        raise ValueError(f"component_spacing must be >= 0, got {component_spacing}")
    if component_spacing == 0:
        return math.inf
    return math.floor(wave_number_range.length / component_spacing + 1e-9) + 1


class WavePacket:
    """Gaussian wave packet parameters plus derived decompositions.

    ``standard_deviation`` is the single stored width parameter;
    ``conjugate_standard_deviation`` is its reciprocal and can be read or written,
    so the two can never disagree.
    """

    def __init__(self) -> None:
        self.L = 1.0  # wavelength when component spacing is 2 pi, in m
        self.T = 1.0  # period when component spacing is 2 pi, in ms
        self.wave_number_range = WAVE_NUMBER_RANGE

        self._component_spacing = DEFAULT_COMPONENT_SPACING
        self._center = DEFAULT_CENTER
        self._standard_deviation = DEFAULT_STANDARD_DEVIATION

    def __repr__(self) -> str:
        return (
            f"WavePacket(component_spacing={self._component_spacing!r}, center={self._center!r}, "
            f"standard_deviation={self._standard_deviation!r})"
        )

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    @property
    def component_spacing(self) -> float:
        """k1 (rad/m) in the space domain, omega1 (rad/ms) in the time domain."""
        return self._component_spacing

    @component_spacing.setter
    def component_spacing(self, value: float) -> None:
        if value not in COMPONENT_SPACING_VALUES:
            raise ValueError(f"component_spacing must be one of {COMPONENT_SPACING_VALUES}, got {value!r}")
        self._component_spacing = float(value)

    @property
    def center(self) -> float:
        """k0 (rad/m) or omega0 (rad/ms)."""
        return self._center

    @center.setter
    def center(self, value: float) -> None:
        if not CENTER_RANGE.contains(value):
            raise ValueError(f"center must be in [{CENTER_RANGE.min}, {CENTER_RANGE.max}], got {value!r}")
        self._center = float(value)

    @property
    def standard_deviation(self) -> float:
        """sigma_k (rad/m) or sigma_omega (rad/ms)."""
        return self._standard_deviation

    @standard_deviation.setter
    def standard_deviation(self, value: float) -> None:
        if not STANDARD_DEVIATION_RANGE.contains(value):
            raise ValueError(
                f"standard_deviation must be in [{STANDARD_DEVIATION_RANGE.min}, {STANDARD_DEVIATION_RANGE.max}], "
                f"got {value!r}"
            )
        self._standard_deviation = float(value)

    @property
    def conjugate_standard_deviation(self) -> float:
        """sigma_x (m) or sigma_t (ms), always ``1 / standard_deviation``."""
        return 1.0 / self._standard_deviation

    @conjugate_standard_deviation.setter
    def conjugate_standard_deviation(self, value: float) -> None:
        if not CONJUGATE_STANDARD_DEVIATION_RANGE.contains(value):
            raise ValueError(
                f"conjugate_standard_deviation must be in [{CONJUGATE_STANDARD_DEVIATION_RANGE.min}, "
                f"{CONJUGATE_STANDARD_DEVIATION_RANGE.max}], got {value!r}"
            )
        # clamp, since 1/(1/x) can land one ulp outside the range ends
        sd = 1.0 / value
        self._standard_deviation = min(max(sd, STANDARD_DEVIATION_RANGE.min), STANDARD_DEVIATION_RANGE.max)

    def reset(self) -> None:
        self._component_spacing = DEFAULT_COMPONENT_SPACING
        self._center = DEFAULT_CENTER
        self._standard_deviation = DEFAULT_STANDARD_DEVIATION

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def width(self) -> float:
        """Width of the packet in k (or omega) space: 2 sigma."""
        return 2 * self._standard_deviation

    @property
    def length(self) -> float:
        """Wavelength lambda1 (m) or period T1 (ms) of the first component; inf when spacing is 0."""
        if self._component_spacing > 0:
            return 2 * PI / self._component_spacing
        return math.inf

    def get_number_of_components(self) -> float:
        return number_of_components_for(self._component_spacing, self.wave_number_range)

    def get_component_amplitude(self, wave_number):
        return gaussian_amplitude(wave_number, self._center, self._standard_deviation)

    def get_components(self) -> Tuple[FourierComponent, ...]:
        """Finite decomposition; empty for the continuous (spacing 0) case."""
        number_of_components = self.get_number_of_components()
        if number_of_components == math.inf:
            return ()
        spacing = self._component_spacing
        wave_numbers = np.arange(int(number_of_components), dtype=float) * spacing
        amplitudes = self.get_component_amplitude(wave_numbers) * spacing
        return tuple(FourierComponent(float(k), float(a)) for k, a in zip(wave_numbers, amplitudes))

    def create_continuous_waveform_data_set(self) -> DataSet:
        """Gaussian sampled every pi/10 across the wave-number range, plus one step.

        Scaled by the component spacing when it is nonzero, so the curve matches
        the heights of the discrete components.
        """
        step = CONTINUOUS_WAVEFORM_STEP
        number_of_steps = math.floor((self.wave_number_range.length + step) / step + 1e-9)
        wave_numbers = self.wave_number_range.min + step * np.arange(number_of_steps + 1, dtype=float)
        amplitudes = self.get_component_amplitude(wave_numbers)
        if self._component_spacing != 0:
            amplitudes = amplitudes * self._component_spacing
        return DataSet(wave_numbers, amplitudes)
