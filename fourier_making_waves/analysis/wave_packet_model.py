"""Top-level model of the wave packet screen."""

from __future__ import annotations

import copy
import logging
from contextlib import contextmanager
from typing import Iterator

from fourier_making_waves.models.axis import AxisDescription, AxisDescriptionSelector
from fourier_making_waves.models.axis_tables import (
    WAVE_PACKET_DEFAULT_X_AXIS_DESCRIPTION,
    WAVE_PACKET_X_AXIS_DESCRIPTIONS,
)
from fourier_making_waves.models.domain import Domain, SeriesType

from .wave_packet import WavePacket
from .wave_packet_charts import (
    WAVE_PACKET_DOMAINS,
    WavePacketAmplitudesChart,
    WavePacketComponentsChart,
    WavePacketSumChart,
)

logger = logging.getLogger(__name__)


class WavePacketModel:
    """Screen aggregate for the Gaussian wave packet.

    Wave packet parameters are changed through :meth:`set_wave_packet` (or
    directly on :attr:`wave_packet` inside :meth:`batch`), so that all three
    charts are recomputed once per batch.  SPACE_AND_TIME is not supported.
    """

    def __init__(self) -> None:
        self._domain = Domain.SPACE
        self._series_type = SeriesType.SIN
        self.width_indicators_visible = False

        self.wave_packet = WavePacket()
        self.x_axis = AxisDescriptionSelector(WAVE_PACKET_X_AXIS_DESCRIPTIONS, WAVE_PACKET_DEFAULT_X_AXIS_DESCRIPTION)

        x_axis_description = self.x_axis.axis_description
        self.amplitudes_chart = WavePacketAmplitudesChart(self.wave_packet)
        self.components_chart = WavePacketComponentsChart(self.wave_packet, x_axis_description)
        self.sum_chart = WavePacketSumChart(self.wave_packet, x_axis_description)

        self.recompute_count = 0
        self._batch_depth = 0
        self._is_dirty = False

        self.x_axis.add_listener(lambda zoom_level, axis_description: self._changed())
        self._changed()

    # ------------------------------------------------------------------
    # Batching
    # ------------------------------------------------------------------

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Defer chart recomputation until the outermost batch ends.

        Leaving a batch always recomputes, since edits made directly on
        :attr:`wave_packet` are not observed.
        """
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            self._is_dirty = True
            if self._batch_depth == 0:
                self._flush()

    def _changed(self) -> None:
        self._is_dirty = True
        if self._batch_depth == 0:
            self._flush()

    def _flush(self) -> None:
        self._is_dirty = False
        x_axis_description = self.x_axis.axis_description
        self.amplitudes_chart.update(self._domain)
        component_data_sets = self.components_chart.update(x_axis_description, self._domain, self._series_type)
        self.sum_chart.update(component_data_sets, x_axis_description, self._domain, self._series_type)
        self.recompute_count += 1
        logger.debug("wave packet charts recomputed (%d)", self.recompute_count)

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @property
    def domain(self) -> Domain:
        return self._domain

    @domain.setter
    def domain(self, value: Domain) -> None:
        if value not in WAVE_PACKET_DOMAINS:
            raise ValueError(f"domain must be one of {[d.name for d in WAVE_PACKET_DOMAINS]}, got {value!r}")
        if value is self._domain:
            return
        self._domain = value
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
        self._series_type = value
        self._changed()

    @property
    def x_axis_description(self) -> AxisDescription:
        return self.x_axis.axis_description

    @property
    def waveform_envelope_visible(self) -> bool:
        return self.sum_chart.waveform_envelope_visible

    @waveform_envelope_visible.setter
    def waveform_envelope_visible(self, value: bool) -> None:
        value = bool(value)
        if value == self.sum_chart.waveform_envelope_visible:
            return
        self.sum_chart.waveform_envelope_visible = value
        self._changed()

    def set_wave_packet(
        self,
        *,
        component_spacing=None,
        center=None,
        standard_deviation=None,
        conjugate_standard_deviation=None,
    ) -> None:
        """Change any subset of the packet parameters with a single recomputation."""
        if standard_deviation is not None and conjugate_standard_deviation is not None:
            raise ValueError("set standard_deviation or conjugate_standard_deviation, not both")
        # every value is checked on a scratch copy before the live packet changes
        candidate = copy.copy(self.wave_packet)
        if component_spacing is not None:
            candidate.component_spacing = component_spacing
        if center is not None:
            candidate.center = center
        if standard_deviation is not None:
            candidate.standard_deviation = standard_deviation
        if conjugate_standard_deviation is not None:
            candidate.conjugate_standard_deviation = conjugate_standard_deviation
        with self.batch():
            self.wave_packet.component_spacing = candidate.component_spacing
            self.wave_packet.center = candidate.center
            self.wave_packet.standard_deviation = candidate.standard_deviation

    def reset(self) -> None:
        with self.batch():
            self._domain = Domain.SPACE
            self._series_type = SeriesType.SIN
            self.width_indicators_visible = False
            self.x_axis.reset()
            self.wave_packet.reset()
            self.amplitudes_chart.reset()
            self.sum_chart.reset()
