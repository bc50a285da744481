"""Charts of the wave packet screen: Amplitudes, Components and Sum.

The wave packet model is independent of Domain (``L == T == 1``), so the x axes
of the Components and Sum charts use the AxisDescription range unscaled.
There is no animation on this screen; time is always 0.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from fourier_making_waves.models.axis import AxisDescription, Range, get_best_fit
from fourier_making_waves.models.axis_tables import (
    WAVE_PACKET_AMPLITUDES_X_AXIS_DESCRIPTION,
    WAVE_PACKET_AMPLITUDES_Y_AXIS_DESCRIPTIONS,
    WAVE_PACKET_SUM_Y_AXIS_DESCRIPTION,
)
from fourier_making_waves.models.components import FourierComponent
from fourier_making_waves.models.data_set import EMPTY_DATA_SET, DataSet
from fourier_making_waves.models.domain import Domain, SeriesType
from fourier_making_waves.models.profile import DEFAULT_PROFILE

from .combinators import envelope_data_set, sum_data_sets
from .wave_packet import WavePacket

WAVE_PACKET_DOMAINS = (Domain.SPACE, Domain.TIME)

# x axis of the Amplitudes chart is labelled in multiples of pi
AMPLITUDES_X_AXIS_MULTIPLIER = math.pi


def _check_domain(domain: Domain) -> None:
    if domain not in WAVE_PACKET_DOMAINS:
        raise ValueError(f"wave packet charts support {[d.name for d in WAVE_PACKET_DOMAINS]}, got {domain!r}")


def _trig(series_type: SeriesType):
    if series_type is SeriesType.SIN:
        return np.sin
    if series_type is SeriesType.COS:
        return np.cos
    raise KeyError(f"unsupported series type: {series_type!r}")


def create_components_data_sets(
    components: Sequence[FourierComponent],
    domain: Domain,
    series_type: SeriesType,
    x_range: Range,
    number_of_points: int = DEFAULT_PROFILE.max_points_per_data_set,
) -> Tuple[DataSet, ...]:
    """One data set per component, ``A * sin|cos(k * x)`` at the component's own wave number.

    All data sets share the same ``number_of_points`` x values across ``x_range``,
    both ends included, so they can be summed pointwise.
    """
    _check_domain(domain)
    if not components:
        raise ValueError("components must not be empty")
    if number_of_points < 2:
        raise ValueError(f"number_of_points must be >= 2, got {number_of_points}")
    trig = _trig(series_type)
    x = np.linspace(x_range.min, x_range.max, int(number_of_points))
    return tuple(DataSet(x, c.amplitude * trig(c.wave_number * x)) for c in components)


def create_wave_packet_data_set(
    center: float,
    conjugate_standard_deviation: float,
    series_type: SeriesType,
    x_range: Range,
    number_of_points: int = DEFAULT_PROFILE.max_points_per_data_set + 1,
) -> DataSet:
    r"""Closed form of the infinite-component sum.

    .. math::

        y(x) = \exp\!\left(-\frac{x^2}{2\sigma_x^2}\right) \cdot \mathrm{trig}(k_0 x)

    sampled at ``number_of_points`` x values across ``x_range``, both ends included.
    """
    if not center > 0:
        raise ValueError(f"center must be > 0, got {center}")
    if not conjugate_standard_deviation > 0:
        raise ValueError(f"conjugate_standard_deviation must be > 0, got {conjugate_standard_deviation}")
    trig = _trig(series_type)
    x = np.linspace(x_range.min, x_range.max, int(number_of_points))
    y = np.exp(-(x * x) / (2 * conjugate_standard_deviation ** 2)) * trig(center * x)
    return DataSet(x, y)


# =====================================================================
#  Amplitudes chart
# =====================================================================


class WavePacketAmplitudesChart:
    """Spectrum of the wave packet: component amplitudes vs wave number."""

    def __init__(self, wave_packet: WavePacket) -> None:
        self.wave_packet = wave_packet
        self.x_axis_description = WAVE_PACKET_AMPLITUDES_X_AXIS_DESCRIPTION
        self.wave_number_range = wave_packet.wave_number_range
        self.domain = Domain.SPACE
        self.continuous_waveform_visible = True

        self.finite_components_data_set: DataSet = EMPTY_DATA_SET
        self.continuous_waveform_data_set: DataSet = EMPTY_DATA_SET
        self.infinite_components_data_set: DataSet = EMPTY_DATA_SET
        self.peak_amplitude = 0.0
        self.y_axis_description = WAVE_PACKET_AMPLITUDES_Y_AXIS_DESCRIPTIONS[0]
        self.width_indicator_width = 0.0
        self.width_indicator_position: Tuple[float, float] = (0.0, 0.0)
        self.update(Domain.SPACE)

    def update(self, domain: Domain) -> None:
        _check_domain(domain)
        self.domain = domain
        wave_packet = self.wave_packet

        components = wave_packet.get_components()
        if components:
            self.finite_components_data_set = DataSet(
                [c.wave_number for c in components], [c.amplitude for c in components]
            )
        else:
            self.finite_components_data_set = EMPTY_DATA_SET

        self.continuous_waveform_data_set = wave_packet.create_continuous_waveform_data_set()
        if wave_packet.component_spacing == 0:
            self.infinite_components_data_set = self.continuous_waveform_data_set
        else:
            self.infinite_components_data_set = EMPTY_DATA_SET

        self.peak_amplitude = self.continuous_waveform_data_set.peak_y()
        self.y_axis_description = get_best_fit(Range(0, self.peak_amplitude), WAVE_PACKET_AMPLITUDES_Y_AXIS_DESCRIPTIONS)

        self.width_indicator_width = wave_packet.width
        y = wave_packet.get_component_amplitude(wave_packet.center + wave_packet.standard_deviation)
        if wave_packet.component_spacing != 0:
            y = wave_packet.component_spacing * y
        self.width_indicator_position = (wave_packet.center, y)

    def reset(self) -> None:
        self.continuous_waveform_visible = True


# =====================================================================
#  Components chart
# =====================================================================


class WavePacketComponentsChart:
    """One sinusoid per Fourier component."""

    def __init__(self, wave_packet: WavePacket, x_axis_description: AxisDescription) -> None:
        self.wave_packet = wave_packet
        self.x_axis_description = x_axis_description
        self.domain = Domain.SPACE
        self.series_type = SeriesType.SIN
        self.component_data_sets: Tuple[DataSet, ...] = ()

    create_components_data_sets = staticmethod(create_components_data_sets)

    def update(self, x_axis_description: AxisDescription, domain: Domain, series_type: SeriesType) -> Tuple[DataSet, ...]:
        """Empty tuple when the packet has infinitely many components."""
        _check_domain(domain)
        self.x_axis_description = x_axis_description
        self.domain = domain
        self.series_type = series_type
        components = self.wave_packet.get_components()
        if components:
            self.component_data_sets = create_components_data_sets(
                components, domain, series_type, x_axis_description.range
            )
        else:
            self.component_data_sets = ()
        return self.component_data_sets


# =====================================================================
#  Sum chart
# =====================================================================


class WavePacketSumChart:
    """Sum of the components, or the closed-form packet when there are infinitely many.

    The envelope of a finite sum is built from the same components evaluated with
    the other series type; the infinite envelope from the closed form with sin
    and cos.
    """

    def __init__(self, wave_packet: WavePacket, x_axis_description: AxisDescription) -> None:
        self.wave_packet = wave_packet
        self.x_axis_description = x_axis_description
        self.y_axis_description = WAVE_PACKET_SUM_Y_AXIS_DESCRIPTION
        self.waveform_envelope_visible = True

        self.finite_sum_data_set: DataSet = EMPTY_DATA_SET
        self.infinite_sum_data_set: DataSet = EMPTY_DATA_SET
        self.sum_data_set: DataSet = EMPTY_DATA_SET
        self.waveform_envelope_data_set: DataSet = EMPTY_DATA_SET
        self.width_indicator_width = 0.0
        self.width_indicator_position = (0.0, 1 / math.sqrt(math.e))

    def update(
        self,
        component_data_sets: Sequence[DataSet],
        x_axis_description: AxisDescription,
        domain: Domain,
        series_type: SeriesType,
    ) -> DataSet:
        _check_domain(domain)
        self.x_axis_description = x_axis_description
        wave_packet = self.wave_packet
        x_range = x_axis_description.range
        is_infinite = wave_packet.get_number_of_components() == math.inf

        if component_data_sets:
            self.finite_sum_data_set = sum_data_sets(component_data_sets)
        else:
            self.finite_sum_data_set = EMPTY_DATA_SET

        if is_infinite:
            self.infinite_sum_data_set = create_wave_packet_data_set(
                wave_packet.center, wave_packet.conjugate_standard_deviation, series_type, x_range
            )
        else:
            self.infinite_sum_data_set = EMPTY_DATA_SET

        self.sum_data_set = self.infinite_sum_data_set if is_infinite else self.finite_sum_data_set

        if not self.waveform_envelope_visible:
            self.waveform_envelope_data_set = EMPTY_DATA_SET
        elif is_infinite:
            sin_data_set = create_wave_packet_data_set(
                wave_packet.center, wave_packet.conjugate_standard_deviation, SeriesType.SIN, x_range
            )
            cos_data_set = create_wave_packet_data_set(
                wave_packet.center, wave_packet.conjugate_standard_deviation, SeriesType.COS, x_range
            )
            self.waveform_envelope_data_set = envelope_data_set(sin_data_set, cos_data_set)
        elif not self.finite_sum_data_set.is_empty:
            other_data_sets = create_components_data_sets(
                wave_packet.get_components(), domain, series_type.other, x_range,
                number_of_points=len(self.finite_sum_data_set),
            )
            self.waveform_envelope_data_set = envelope_data_set(self.finite_sum_data_set, sum_data_sets(other_data_sets))
        else:
            self.waveform_envelope_data_set = EMPTY_DATA_SET

        self.width_indicator_width = 2 * wave_packet.conjugate_standard_deviation
        return self.sum_data_set

    def reset(self) -> None:
        self.waveform_envelope_visible = True
