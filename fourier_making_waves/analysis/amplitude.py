r"""Amplitude of one harmonic, per (Domain, SeriesType).

Six closed-form functions, selected from a lookup table keyed by the pair:

- SPACE:          ``A sin(2 pi n x / L)``        / ``A cos(2 pi n x / L)``
- TIME:           ``A sin(2 pi n x / T)``        / ``A cos(2 pi n x / T)``
- SPACE_AND_TIME: ``A sin(2 pi n (x/L - t/T))``  / ``A cos(2 pi n (x/L - t/T))``

In the TIME domain the independent variable is still passed as ``x``.  All
functions accept a scalar or a numpy array for ``x`` and are side-effect free.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple, Union

import numpy as np

from fourier_making_waves.models.domain import Domain, SeriesType

ArrayLike = Union[float, np.ndarray]

AmplitudeFunction = Callable[[float, int, ArrayLike, float, float, float], ArrayLike]

TWO_PI = 2.0 * np.pi


def _space_sin(A: float, n: int, x: ArrayLike, t: float, L: float, T: float) -> ArrayLike:
    return A * np.sin(TWO_PI * n * x / L)


def _space_cos(A: float, n: int, x: ArrayLike, t: float, L: float, T: float) -> ArrayLike:
    return A * np.cos(TWO_PI * n * x / L)


def _time_sin(A: float, n: int, x: ArrayLike, t: float, L: float, T: float) -> ArrayLike:
    return A * np.sin(TWO_PI * n * x / T)


def _time_cos(A: float, n: int, x: ArrayLike, t: float, L: float, T: float) -> ArrayLike:
    return A * np.cos(TWO_PI * n * x / T)


def _space_and_time_sin(A: float, n: int, x: ArrayLike, t: float, L: float, T: float) -> ArrayLike:
    return A * np.sin(TWO_PI * n * (x / L - t / T))


def _space_and_time_cos(A: float, n: int, x: ArrayLike, t: float, L: float, T: float) -> ArrayLike:
    return A * np.cos(TWO_PI * n * (x / L - t / T))


_AMPLITUDE_FUNCTIONS: Dict[Tuple[Domain, SeriesType], AmplitudeFunction] = {
    (Domain.SPACE, SeriesType.SIN): _space_sin,
    (Domain.SPACE, SeriesType.COS): _space_cos,
    (Domain.TIME, SeriesType.SIN): _time_sin,
    (Domain.TIME, SeriesType.COS): _time_cos,
    (Domain.SPACE_AND_TIME, SeriesType.SIN): _space_and_time_sin,
    (Domain.SPACE_AND_TIME, SeriesType.COS): _space_and_time_cos,
}

if len(_AMPLITUDE_FUNCTIONS) != len(Domain) * len(SeriesType):
    raise RuntimeError("an amplitude function is required for every (Domain, SeriesType) pair")


def get_amplitude_function(domain: Domain, series_type: SeriesType) -> AmplitudeFunction:
    """Return the amplitude function for ``(domain, series_type)``.

    Raises
    ------
    KeyError
        If the pair is not a valid (Domain, SeriesType) combination.
    """
    try:
        return _AMPLITUDE_FUNCTIONS[(domain, series_type)]
    except KeyError:
        raise KeyError(f"unsupported domain/series type: {domain!r}, {series_type!r}") from None


def evaluate_amplitude(
    domain: Domain,
    series_type: SeriesType,
    A: float,
    n: int,
    x: ArrayLike,
    t: float,
    L: float,
    T: float,
) -> ArrayLike:
    """Checked evaluation of one harmonic's contribution at ``x``.

    Parameters
    ----------
    A:
        Amplitude.
    n:
        Harmonic order, integer >= 1.
    x:
        Position (or time, in the TIME domain); scalar or array.
    t:
        Time, >= 0.  Only used by SPACE_AND_TIME.
    L, T:
        Fundamental wavelength and period, both > 0.
    """
    check_amplitude_arguments(n, t, L, T)
    return get_amplitude_function(domain, series_type)(A, n, x, t, L, T)


def check_amplitude_arguments(n: int, t: float, L: float, T: float) -> None:
    if not (isinstance(n, (int, np.integer)) and n >= 1):
        raise ValueError(f"order must be an integer >= 1, got {n!r}")
    if not L > 0:
        raise ValueError(f"wavelength L must be > 0, got {L}")
    if not T > 0:
        raise ValueError(f"period T must be > 0, got {T}")
    if not t >= 0:
        raise ValueError(f"time t must be >= 0, got {t}")
