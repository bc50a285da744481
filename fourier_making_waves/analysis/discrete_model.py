"""Top-level model of the discrete (Fourier series) screen.

The model owns the series, the x-axis zoom selector, the measurement tools and
the charts.  Every input change marks the model dirty; charts are recomputed
once when the outermost :meth:`DiscreteModel.batch` ends.  Outside a batch each
setter is its own batch.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from fourier_making_waves.models.axis import AxisDescription, AxisDescriptionSelector
from fourier_making_waves.models.axis_tables import (
    DISCRETE_DEFAULT_X_AXIS_DESCRIPTION,
    DISCRETE_X_AXIS_DESCRIPTIONS,
)
from fourier_making_waves.models.domain import (
    EQUATION_FORMS_BY_DOMAIN,
    Domain,
    EquationForm,
    SeriesType,
    TickLabelFormat,
    tick_label_format_for,
)
from fourier_making_waves.models.profile import DEFAULT_PROFILE, EngineProfile

from .discrete_charts import DiscreteSumChart, HarmonicsChart
from .fourier_series import DiscreteFourierSeries
from .measurement import DiscreteMeasurementTool
from .waveforms import CUSTOM, SAWTOOTH, SINUSOID, Waveform

logger = logging.getLogger(__name__)


class DiscreteModel:
    """Screen aggregate for the discrete Fourier series.

    Parameters
    ----------
    profile:
        Engine constants.
    on_sawtooth_with_cosines:
        Called when a sawtooth is requested with cosines, after the model has
        switched back to sines.
    """

    def __init__(
        self,
        profile: EngineProfile = DEFAULT_PROFILE,
        on_sawtooth_with_cosines: Optional[Callable[[], None]] = None,
    ) -> None:
        self.profile = profile
        self.on_sawtooth_with_cosines = on_sawtooth_with_cosines

        self.is_playing = True
        self._t = 0.0  # ms
        self._waveform = SINUSOID
        self._series_type = SeriesType.SIN
        self._domain = Domain.SPACE
        self._equation_form = EquationForm.HIDDEN

        self.fourier_series = DiscreteFourierSeries(profile=profile)
        self.x_axis = AxisDescriptionSelector(DISCRETE_X_AXIS_DESCRIPTIONS, DISCRETE_DEFAULT_X_AXIS_DESCRIPTION)

        number_of_harmonics = self.fourier_series.number_of_harmonics
        self.wavelength_tool = DiscreteMeasurementTool("lambda", number_of_harmonics)
        self.period_tool = DiscreteMeasurementTool("T", number_of_harmonics)

        self.harmonics_chart = HarmonicsChart(self.fourier_series, self.x_axis.axis_description)
        self.sum_chart = DiscreteSumChart(self.fourier_series, self.x_axis.axis_description)

        self.recompute_count = 0
        self._batch_depth = 0
        self._is_dirty = False

        self.fourier_series.add_amplitudes_listener(lambda amplitudes: self._changed())
        self.x_axis.add_listener(lambda zoom_level, axis_description: self._changed())

        with self.batch():
            self._update_amplitudes()
            self._is_dirty = True

    # ------------------------------------------------------------------
    # Batching
    # ------------------------------------------------------------------

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Defer chart recomputation until the outermost batch ends."""
        self._batch_depth += 1
        try:
            with self.fourier_series.deferred():
                yield
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._is_dirty:
                self._flush()

    def _changed(self) -> None:
        self._is_dirty = True
        if self._batch_depth == 0:
            self._flush()

    def _flush(self) -> None:
        self._is_dirty = False
        x_axis_description = self.x_axis.axis_description
        self.harmonics_chart.update(x_axis_description, self._domain, self._series_type, self._t)
        self.sum_chart.update_all(x_axis_description, self._domain, self._series_type, self._t, self._waveform)
        self.recompute_count += 1
        logger.debug("discrete charts recomputed (%d)", self.recompute_count)

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @property
    def waveform(self) -> Waveform:
        return self._waveform

    @waveform.setter
    def waveform(self, value: Waveform) -> None:
        if not isinstance(value, Waveform):
            raise ValueError(f"waveform must be a Waveform, got {value!r}")
        if value is self._waveform:
            return
        with self.batch():
            self._waveform = value
            self._t = 0.0
            self._update_amplitudes()
            self._changed()

    @property
    def series_type(self) -> SeriesType:
        return self._series_type

    @series_type.setter
    def series_type(self, value: SeriesType) -> None:
        if not isinstance(value, SeriesType):
            raise ValueError(f"series_type must be a SeriesType, got {value!r}")
        if value is self._series_type:
            return
        with self.batch():
            self._series_type = value
            self._update_amplitudes()
            self._changed()

    @property
    def domain(self) -> Domain:
        return self._domain

    @domain.setter
    def domain(self, value: Domain) -> None:
        if not isinstance(value, Domain):
            raise ValueError(f"domain must be a Domain, got {value!r}")
        if value is self._domain:
            return
        with self.batch():
            self._domain = value
            self._t = 0.0
            if self._equation_form is not EquationForm.MODE:
                self._equation_form = EquationForm.HIDDEN
            self._changed()

    @property
    def equation_form(self) -> EquationForm:
        return self._equation_form

    @equation_form.setter
    def equation_form(self, value: EquationForm) -> None:
        if value not in EQUATION_FORMS_BY_DOMAIN[self._domain]:
            raise ValueError(f"equation form {value!r} is not valid for domain {self._domain!r}")
        self._equation_form = value

    @property
    def x_axis_tick_label_format(self) -> TickLabelFormat:
        return tick_label_format_for(self._equation_form)

    @property
    def t(self) -> float:
        """Elapsed time, in ms."""
        return self._t

    @t.setter
    def t(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"t must be >= 0, got {value}")
        if value == self._t:
            return
        self._t = float(value)
        self._changed()

    @property
    def number_of_harmonics(self) -> int:
        return self.fourier_series.number_of_harmonics

    @number_of_harmonics.setter
    def number_of_harmonics(self, value: int) -> None:
        with self.batch():
            self.fourier_series.number_of_harmonics = value
            self.wavelength_tool.set_number_of_harmonics(value)
            self.period_tool.set_number_of_harmonics(value)
            self._update_amplitudes()
            self._changed()

    @property
    def x_axis_description(self) -> AxisDescription:
        return self.x_axis.axis_description

    @property
    def infinite_harmonics_visible(self) -> bool:
        return self.sum_chart.infinite_harmonics_visible

    @infinite_harmonics_visible.setter
    def infinite_harmonics_visible(self, value: bool) -> None:
        value = bool(value)
        if value == self.sum_chart.infinite_harmonics_visible:
            return
        self.sum_chart.infinite_harmonics_visible = value
        self._changed()

    def set_harmonic_amplitude(self, order: int, amplitude: float) -> None:
        """Set one amplitude by hand; the waveform becomes CUSTOM."""
        if not (1 <= order <= self.fourier_series.number_of_harmonics):
            raise ValueError(f"order must be in [1, {self.fourier_series.number_of_harmonics}], got {order}")
        amplitude_range = self.fourier_series.amplitude_range
        if not amplitude_range.contains(amplitude):
            raise ValueError(f"amplitude must be in [{amplitude_range.min}, {amplitude_range.max}], got {amplitude!r}")
        with self.batch():
            self._waveform = CUSTOM
            self.fourier_series.harmonics[order - 1].amplitude = amplitude
            self._changed()

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def step(self, dt: float) -> None:
        """Advance time by ``dt`` seconds of wall time, when playing in the space-and-time domain."""
        if self.is_playing and self._domain is Domain.SPACE_AND_TIME:
            milliseconds = dt * 1000
            self.t = self._t + milliseconds * self.profile.time_scale

    def step_once(self) -> None:
        self.t = self._t + self.profile.step_dt_ms * self.profile.time_scale

    # ------------------------------------------------------------------
    # Amplitudes
    # ------------------------------------------------------------------

    def _update_amplitudes(self) -> None:
        waveform = self._waveform
        series_type = self._series_type
        if waveform is SAWTOOTH and series_type is SeriesType.COS:
            logger.warning("not possible to make a sawtooth out of cosines, switching to sine")
            with self.batch():
                self.fourier_series.set_all_amplitudes(0)
                self.series_type = SeriesType.SIN
            if self.on_sawtooth_with_cosines is not None:
                self.on_sawtooth_with_cosines()
        elif waveform is not CUSTOM:
            number_of_harmonics = self.fourier_series.number_of_harmonics
            amplitudes = waveform.get_amplitudes(number_of_harmonics, series_type)
            amplitudes.extend([0.0] * (len(self.fourier_series.harmonics) - len(amplitudes)))
            self.fourier_series.set_amplitudes(amplitudes)

    def reset(self) -> None:
        with self.batch():
            self.is_playing = True
            self._t = 0.0
            self._waveform = SINUSOID
            self._series_type = SeriesType.SIN
            self._domain = Domain.SPACE
            self._equation_form = EquationForm.HIDDEN
            self.x_axis.reset()
            self.fourier_series.reset()
            self.wavelength_tool.set_number_of_harmonics(self.fourier_series.number_of_harmonics)
            self.period_tool.set_number_of_harmonics(self.fourier_series.number_of_harmonics)
            self.wavelength_tool.reset()
            self.period_tool.reset()
            self.sum_chart.reset()
            self._update_amplitudes()
            self._changed()
