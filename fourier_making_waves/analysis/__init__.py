"""Analysis package: amplitude functions, series, wave packet, charts and screen models.

Design principle:
  - Models (``fourier_making_waves.models``) are immutable values and static tables.
  - Analysis owns the mutable state and derives chart data sets from it.

Every data set is recomputed wholesale from the current inputs; screen models
batch input changes so that each batch triggers one recomputation.
"""

from .amplitude import evaluate_amplitude, get_amplitude_function
from .combinators import envelope_data_set, sum_data_sets
from .discrete_charts import DiscreteSumChart, HarmonicsChart, SumChart
from .discrete_model import DiscreteModel
from .fourier_series import DiscreteFourierSeries, FourierSeries
from .harmonic import Harmonic, create_harmonic_data_set
from .wave_game import AmplitudesGenerator, WaveGameLevel, WaveGameModel
from .wave_packet import WavePacket
from .wave_packet_charts import (
    WavePacketAmplitudesChart,
    WavePacketComponentsChart,
    WavePacketSumChart,
    create_wave_packet_data_set,
)
from .wave_packet_model import WavePacketModel
from .waveforms import WAVEFORMS, Waveform, waveform_by_name

__all__ = [
    "evaluate_amplitude",
    "get_amplitude_function",
    "envelope_data_set",
    "sum_data_sets",
    "DiscreteSumChart",
    "HarmonicsChart",
    "SumChart",
    "DiscreteModel",
    "DiscreteFourierSeries",
    "FourierSeries",
    "Harmonic",
    "create_harmonic_data_set",
    "AmplitudesGenerator",
    "WaveGameLevel",
    "WaveGameModel",
    "WavePacket",
    "WavePacketAmplitudesChart",
    "WavePacketComponentsChart",
    "WavePacketSumChart",
    "create_wave_packet_data_set",
    "WavePacketModel",
    "WAVEFORMS",
    "Waveform",
    "waveform_by_name",
]
