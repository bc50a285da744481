from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class FourierComponent:
    """One component of the Fourier series that approximates a wave packet.

    ``wave_number`` is the spatial wave number k (rad/m) in the space domain, or the
    angular frequency omega (rad/ms) in the time domain.  ``amplitude`` is unitless.
    """

    wave_number: float
    amplitude: float

    def __post_init__(self) -> None:
        if self.wave_number < 0:
            raise ValueError(f"wave_number must be >= 0, got {self.wave_number}")
        if self.amplitude < 0:
            raise ValueError(f"amplitude must be >= 0, got {self.amplitude}")

    def to_dict(self) -> Dict[str, Any]:
        return {"wave_number": self.wave_number, "amplitude": self.amplitude}
