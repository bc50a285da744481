"""Charts of the discrete (Fourier series) screen.

Each chart keeps the data sets it last computed.  The owning screen model
calls ``update`` with the current inputs whenever any of them changes; charts
never observe their inputs themselves.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from fourier_making_waves.models.axis import AxisDescription, Range, get_best_fit
from fourier_making_waves.models.axis_tables import (
    DISCRETE_DEFAULT_Y_AXIS_DESCRIPTION,
    DISCRETE_Y_AXIS_DESCRIPTIONS,
)
from fourier_making_waves.models.data_set import EMPTY_DATA_SET, DataSet
from fourier_making_waves.models.domain import Domain, SeriesType

from .fourier_series import FourierSeries
from .harmonic import number_of_points_for_order
from .waveforms import Waveform

# headroom above the peak of the sum
SUM_Y_AXIS_PADDING = 1.05


class DomainChart:
    """Base for charts whose x axis is in the units of the current Domain."""

    def __init__(self, L: float, T: float, x_axis_description: AxisDescription) -> None:
        self.L = L
        self.T = T
        self.x_axis_description = x_axis_description
        self.domain = Domain.SPACE

    @property
    def x_range(self) -> Range:
        return self.x_axis_description.create_range_for_domain(self.domain, self.L, self.T)


class HarmonicsChart(DomainChart):
    """One data set per harmonic, on a fixed y axis."""

    def __init__(self, fourier_series: FourierSeries, x_axis_description: AxisDescription) -> None:
        super().__init__(fourier_series.L, fourier_series.T, x_axis_description)
        self.fourier_series = fourier_series
        self.y_axis_description = DISCRETE_DEFAULT_Y_AXIS_DESCRIPTION
        max_points = fourier_series.profile.max_points_per_data_set
        number_of_harmonics = len(fourier_series.harmonics)
        self.numbers_of_points: Tuple[int, ...] = tuple(
            number_of_points_for_order(h.order, number_of_harmonics, max_points) for h in fourier_series.harmonics
        )
        self.harmonic_data_sets: Tuple[DataSet, ...] = ()

    def update(
        self,
        x_axis_description: AxisDescription,
        domain: Domain,
        series_type: SeriesType,
        t: float,
    ) -> Tuple[DataSet, ...]:
        self.x_axis_description = x_axis_description
        self.domain = domain
        series = self.fourier_series
        self.harmonic_data_sets = tuple(
            harmonic.create_data_set(number_of_points, series.L, series.T, x_axis_description, domain, series_type, t)
            for harmonic, number_of_points in zip(series.harmonics, self.numbers_of_points)
        )
        return self.harmonic_data_sets


def sum_y_axis_range(sum_data_set: DataSet, amplitude_range: Range) -> Range:
    """Symmetric y range that shows the sum's peak with 5% headroom, never smaller than the amplitude range."""
    max_y = max(amplitude_range.max, sum_data_set.peak_y() * SUM_Y_AXIS_PADDING)
    return Range(-max_y, max_y)


def best_fit_sum_y_axis(y_axis_range: Range, axis_descriptions: Sequence[AxisDescription]) -> AxisDescription:
    """Best-fit y axis, falling back to the most zoomed-out entry when the sum exceeds every table range."""
    outer_max = axis_descriptions[0].range.max
    if y_axis_range.max > outer_max:
        y_axis_range = Range(-outer_max, outer_max)
    return get_best_fit(y_axis_range, axis_descriptions)


class SumChart(DomainChart):
    """Sum of the harmonics, with an auto-scaled y axis."""

    def __init__(
        self,
        fourier_series: FourierSeries,
        x_axis_description: AxisDescription,
        y_axis_descriptions: Sequence[AxisDescription] = DISCRETE_Y_AXIS_DESCRIPTIONS,
    ) -> None:
        super().__init__(fourier_series.L, fourier_series.T, x_axis_description)
        self.fourier_series = fourier_series
        self.y_axis_descriptions = tuple(y_axis_descriptions)
        self.sum_data_set: DataSet = EMPTY_DATA_SET
        self.y_axis_range = Range(-fourier_series.amplitude_range.max, fourier_series.amplitude_range.max)
        self.y_axis_description = best_fit_sum_y_axis(self.y_axis_range, self.y_axis_descriptions)

    def update(
        self,
        x_axis_description: AxisDescription,
        domain: Domain,
        series_type: SeriesType,
        t: float,
    ) -> DataSet:
        self.x_axis_description = x_axis_description
        self.domain = domain
        self.sum_data_set = self.fourier_series.create_sum_data_set(x_axis_description, domain, series_type, t)
        self.y_axis_range = sum_y_axis_range(self.sum_data_set, self.fourier_series.amplitude_range)
        self.y_axis_description = best_fit_sum_y_axis(self.y_axis_range, self.y_axis_descriptions)
        return self.sum_data_set


class DiscreteSumChart(SumChart):
    """Sum chart that can overlay the exact waveform (infinite number of harmonics)."""

    def __init__(
        self,
        fourier_series: FourierSeries,
        x_axis_description: AxisDescription,
        y_axis_descriptions: Sequence[AxisDescription] = DISCRETE_Y_AXIS_DESCRIPTIONS,
    ) -> None:
        super().__init__(fourier_series, x_axis_description, y_axis_descriptions)
        self.infinite_harmonics_visible = False
        self.infinite_harmonics_data_set: DataSet = EMPTY_DATA_SET

    def update_infinite_harmonics(
        self,
        waveform: Waveform,
        domain: Domain,
        series_type: SeriesType,
        t: float,
    ) -> DataSet:
        """Exact waveform, or EMPTY_DATA_SET when hidden or unsupported by ``waveform``."""
        if self.infinite_harmonics_visible and waveform.supports_infinite_harmonics:
            series = self.fourier_series
            self.infinite_harmonics_data_set = waveform.get_infinite_harmonics_data_set(
                domain, series_type, t, series.L, series.T
            )
        else:
            self.infinite_harmonics_data_set = EMPTY_DATA_SET
        return self.infinite_harmonics_data_set

    def update_all(
        self,
        x_axis_description: AxisDescription,
        domain: Domain,
        series_type: SeriesType,
        t: float,
        waveform: Waveform,
    ) -> DataSet:
        sum_data_set = self.update(x_axis_description, domain, series_type, t)
        self.update_infinite_harmonics(waveform, domain, series_type, t)
        return sum_data_set

    def reset(self) -> None:
        self.infinite_harmonics_visible = False
