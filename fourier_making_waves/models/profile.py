"""Engine profile -- bundles every constant that shapes the engine output.

An EngineProfile groups the parameters that affect sampling and model limits
into one frozen dataclass.  It can be:

- Used as-is through :data:`DEFAULT_PROFILE`
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance of exported data sets
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class EngineProfile:
    """Frozen configuration for the synthesis engine.

    Fields
    ------
    max_harmonics : int
        Number of harmonics held by every Fourier series.
    max_amplitude : float
        Harmonic amplitudes are constrained to ``[-max_amplitude, max_amplitude]``.
    max_points_per_data_set : int
        Point budget for sum data sets, and the upper bound for harmonic data sets.
    fundamental_frequency_hz : float
        Frequency of the first harmonic, in Hz.
    fundamental_wavelength_m : float
        Wavelength of the first harmonic, in m.
    discrete_amplitude_step : float
        Amplitude resolution of the discrete screen controls.
    wave_game_amplitude_step : float
        Amplitude resolution of generated wave-game answers.
    points_per_challenge : int
        Score awarded for one solved wave-game challenge.
    number_of_game_levels : int
        Number of wave-game levels.
    time_scale : float
        Model time advanced per millisecond of wall-clock time.
    step_dt_ms : float
        Wall-clock milliseconds advanced by one manual step.
    """

    max_harmonics: int = 11
    max_amplitude: float = 1.5
    max_points_per_data_set: int = 1000

    fundamental_frequency_hz: float = 440.0
    fundamental_wavelength_m: float = 1.0

    discrete_amplitude_step: float = 0.05
    wave_game_amplitude_step: float = 0.1
    points_per_challenge: int = 1
    number_of_game_levels: int = 5

    time_scale: float = 0.001
    step_dt_ms: float = 50.0

    def __post_init__(self) -> None:
        if not (isinstance(self.max_harmonics, int) and self.max_harmonics > 0):
            raise ValueError(f"max_harmonics must be a positive integer, got {self.max_harmonics!r}")
        if not self.max_amplitude > 0:
            raise ValueError(f"max_amplitude must be > 0, got {self.max_amplitude!r}")
        if not (isinstance(self.max_points_per_data_set, int) and self.max_points_per_data_set > 1):
            raise ValueError(
                f"max_points_per_data_set must be an integer > 1, got {self.max_points_per_data_set!r}"
            )
        if not self.fundamental_frequency_hz > 0:
            raise ValueError(f"fundamental_frequency_hz must be > 0, got {self.fundamental_frequency_hz!r}")
        if not self.fundamental_wavelength_m > 0:
            raise ValueError(f"fundamental_wavelength_m must be > 0, got {self.fundamental_wavelength_m!r}")

    # ------------------------------------------------------------------
    # Derived
    # ------------------------------------------------------------------

    @property
    def fundamental_period_ms(self) -> float:
        return 1000.0 / self.fundamental_frequency_hz

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> EngineProfile:
        """Reconstruct from a dict (e.g. loaded from JSON).  Unknown keys are rejected."""
        d = dict(d)  # shallow copy
        unknown = sorted(set(d) - set(cls.__dataclass_fields__))
        if unknown:
            raise ValueError(f"Unknown EngineProfile fields: {unknown}")
        return cls(**d)


DEFAULT_PROFILE = EngineProfile()
