"""Wave game: match a randomly generated Fourier series.

Each level hides an answer series with a level-dependent number of non-zero
harmonics; the player adjusts a guess series until the amplitudes match.
The game always plots in the space domain with sines, at t = 0.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from fourier_making_waves.models.axis_tables import DISCRETE_DEFAULT_X_AXIS_DESCRIPTION
from fourier_making_waves.models.data_set import DataSet
from fourier_making_waves.models.domain import Domain, SeriesType
from fourier_making_waves.models.profile import DEFAULT_PROFILE, EngineProfile

from .fourier_series import FourierSeries

logger = logging.getLogger(__name__)

GAME_DOMAIN = Domain.SPACE
GAME_SERIES_TYPE = SeriesType.SIN
GAME_T = 0.0

# guess and answer amplitudes must be identical
AMPLITUDE_THRESHOLD = 0.0

MAX_ATTEMPTS = 10

# (default number of amplitude controls, number of non-zero harmonics) per level;
# None means a random count in [5, max_harmonics]
LEVEL_DEFINITIONS: Tuple[Tuple[int, Optional[int]], ...] = (
    (2, 1),
    (3, 2),
    (5, 3),
    (6, 4),
    (11, None),
)


def round_to_interval(value: float, interval: float) -> float:
    return round(round(value / interval) * interval, 10)


class AmplitudesGenerator:
    """Random answer amplitudes for one level.

    Parameters
    ----------
    number_of_harmonics:
        Length of every generated amplitude list.
    max_amplitude:
        Amplitudes lie in ``[-max_amplitude, max_amplitude]`` and are never 0.
    amplitude_step:
        Non-extreme amplitudes are rounded to a multiple of this step.
    get_number_of_non_zero_harmonics:
        Called once per :meth:`create_amplitudes`.
    rng:
        numpy Generator, seed it for reproducible answers.
    """

    def __init__(
        self,
        *,
        number_of_harmonics: int = DEFAULT_PROFILE.max_harmonics,
        max_amplitude: float = DEFAULT_PROFILE.max_amplitude,
        amplitude_step: float = DEFAULT_PROFILE.wave_game_amplitude_step,
        get_number_of_non_zero_harmonics: Callable[[], int] = lambda: 1,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if not number_of_harmonics > 0:
            raise ValueError(f"number_of_harmonics must be > 0, got {number_of_harmonics}")
        if not max_amplitude > 0:
            raise ValueError(f"max_amplitude must be > 0, got {max_amplitude}")
        self.number_of_harmonics = number_of_harmonics
        self.max_amplitude = max_amplitude
        self.amplitude_step = amplitude_step
        self.get_number_of_non_zero_harmonics = get_number_of_non_zero_harmonics
        self.rng = rng if rng is not None else np.random.default_rng()

    def create_amplitudes(self, previous_amplitudes: Optional[Sequence[float]] = None) -> List[float]:
        """New amplitudes, differing from ``previous_amplitudes`` unless 10 attempts in a row repeat it."""
        if previous_amplitudes is not None and len(previous_amplitudes) != self.number_of_harmonics:
            raise ValueError(
                f"previous_amplitudes must have {self.number_of_harmonics} values, got {len(previous_amplitudes)}"
            )
        number_of_non_zero_harmonics = self.get_number_of_non_zero_harmonics()
        attempts = 0
        while True:
            amplitudes = self.generate_random_amplitudes(number_of_non_zero_harmonics)
            attempts += 1
            if previous_amplitudes is None or attempts >= MAX_ATTEMPTS or amplitudes != list(previous_amplitudes):
                break
        if attempts == MAX_ATTEMPTS:
            logger.warning("similar amplitudes were generated %d times in a row", attempts)
        return amplitudes

    def generate_random_amplitudes(self, number_of_non_zero_harmonics: int) -> List[float]:
        if not (0 < number_of_non_zero_harmonics <= self.number_of_harmonics):
            raise ValueError(
                f"number_of_non_zero_harmonics must be in [1, {self.number_of_harmonics}], "
                f"got {number_of_non_zero_harmonics}"
            )
        amplitudes = [0.0] * self.number_of_harmonics
        indices = self.rng.choice(self.number_of_harmonics, size=number_of_non_zero_harmonics, replace=False)
        for index in indices:
            amplitude = float(self.rng.uniform(-self.max_amplitude, 0.0))
            if amplitude != -self.max_amplitude:
                amplitude = round_to_interval(amplitude, self.amplitude_step)
            if amplitude == 0:
                amplitude = -self.amplitude_step
            if self.rng.random() < 0.5:
                amplitude = -amplitude
            amplitudes[int(index)] = amplitude
        return amplitudes


class WaveGameLevel:
    """One game level: an answer series, a guess series and a score."""

    def __init__(
        self,
        level_number: int,
        *,
        default_number_of_amplitude_controls: int,
        get_number_of_non_zero_harmonics: Optional[Callable[[], int]] = None,
        profile: EngineProfile = DEFAULT_PROFILE,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if not (isinstance(level_number, int) and level_number > 0):
            raise ValueError(f"level_number must be a positive integer, got {level_number!r}")
        if not (level_number <= default_number_of_amplitude_controls <= profile.max_harmonics):
            raise ValueError(
                f"default_number_of_amplitude_controls must be in [{level_number}, {profile.max_harmonics}], "
                f"got {default_number_of_amplitude_controls}"
            )
        if get_number_of_non_zero_harmonics is None:
            get_number_of_non_zero_harmonics = lambda: level_number  # noqa: E731

        self.level_number = level_number
        self.profile = profile
        self.default_number_of_amplitude_controls = default_number_of_amplitude_controls
        self.score = 0
        self.is_solved = False

        self.amplitudes_generator = AmplitudesGenerator(
            number_of_harmonics=profile.max_harmonics,
            max_amplitude=profile.max_amplitude,
            amplitude_step=profile.wave_game_amplitude_step,
            get_number_of_non_zero_harmonics=get_number_of_non_zero_harmonics,
            rng=rng,
        )
        self.answer_series = FourierSeries(profile=profile, amplitudes=self.amplitudes_generator.create_amplitudes())
        self.guess_series = FourierSeries(profile=profile)
        self._number_of_amplitude_controls = default_number_of_amplitude_controls

    def __repr__(self) -> str:
        return f"WaveGameLevel({self.level_number}, score={self.score})"

    @property
    def is_matched(self) -> bool:
        return all(
            abs(guess - answer) <= AMPLITUDE_THRESHOLD
            for guess, answer in zip(self.guess_series.amplitudes, self.answer_series.amplitudes)
        )

    @property
    def number_of_amplitude_controls_range(self) -> Tuple[int, int]:
        return self.answer_series.get_number_of_non_zero_harmonics(), len(self.answer_series.harmonics)

    @property
    def number_of_amplitude_controls(self) -> int:
        return self._number_of_amplitude_controls

    @number_of_amplitude_controls.setter
    def number_of_amplitude_controls(self, value: int) -> None:
        lo, hi = self.number_of_amplitude_controls_range
        if not (isinstance(value, int) and lo <= value <= hi):
            raise ValueError(f"number_of_amplitude_controls must be an integer in [{lo}, {hi}], got {value!r}")
        self._number_of_amplitude_controls = value

    def check_answer(self) -> bool:
        """Score the guess.  Returns True and awards points when it matches the answer."""
        if self.is_solved:
            raise RuntimeError(f"level {self.level_number} is already solved")
        if self.is_matched:
            self.score += self.profile.points_per_challenge
            self.is_solved = True
            return True
        return False

    def show_answer(self) -> None:
        self.is_solved = True
        self.guess_series.set_amplitudes(self.answer_series.amplitudes)

    def erase_amplitudes(self) -> None:
        self.guess_series.set_all_amplitudes(0)

    def new_waveform(self) -> None:
        self.guess_series.set_all_amplitudes(0)
        new_amplitudes = self.amplitudes_generator.create_amplitudes(self.answer_series.amplitudes)
        self.answer_series.set_amplitudes(new_amplitudes)
        logger.info("new waveform: level=%d answer=%s", self.level_number, new_amplitudes)
        self.is_solved = False
        self._number_of_amplitude_controls = max(
            self._number_of_amplitude_controls,
            self.default_number_of_amplitude_controls,
            self.answer_series.get_number_of_non_zero_harmonics(),
        )

    def create_answer_sum_data_set(self) -> DataSet:
        return self.answer_series.create_sum_data_set(
            DISCRETE_DEFAULT_X_AXIS_DESCRIPTION, GAME_DOMAIN, GAME_SERIES_TYPE, GAME_T
        )

    def create_guess_sum_data_set(self) -> DataSet:
        return self.guess_series.create_sum_data_set(
            DISCRETE_DEFAULT_X_AXIS_DESCRIPTION, GAME_DOMAIN, GAME_SERIES_TYPE, GAME_T
        )

    def reset(self) -> None:
        self.score = 0
        self.is_solved = False
        self.new_waveform()


class WaveGameModel:
    """All game levels plus the currently selected one (None while choosing a level)."""

    def __init__(self, profile: EngineProfile = DEFAULT_PROFILE, seed: Optional[int] = None) -> None:
        if len(LEVEL_DEFINITIONS) != profile.number_of_game_levels:
            raise ValueError(
                f"profile expects {profile.number_of_game_levels} game levels, {len(LEVEL_DEFINITIONS)} are defined"
            )
        self.rng = np.random.default_rng(seed)
        self.levels: Tuple[WaveGameLevel, ...] = tuple(
            WaveGameLevel(
                level_number,
                default_number_of_amplitude_controls=min(default_controls, profile.max_harmonics),
                get_number_of_non_zero_harmonics=self._non_zero_harmonics_getter(level_number, non_zero, profile),
                profile=profile,
                rng=self.rng,
            )
            for level_number, (default_controls, non_zero) in enumerate(LEVEL_DEFINITIONS, start=1)
        )
        self._level: Optional[WaveGameLevel] = None

    def _non_zero_harmonics_getter(
        self, level_number: int, non_zero: Optional[int], profile: EngineProfile
    ) -> Callable[[], int]:
        if non_zero is not None:
            return lambda: non_zero
        return lambda: int(self.rng.integers(level_number, profile.max_harmonics, endpoint=True))

    @property
    def level(self) -> Optional[WaveGameLevel]:
        return self._level

    @level.setter
    def level(self, value: Optional[WaveGameLevel]) -> None:
        if value is not None and value not in self.levels:
            raise ValueError(f"not a level of this game: {value!r}")
        self._level = value

    def select_level(self, level_number: int) -> WaveGameLevel:
        if not (1 <= level_number <= len(self.levels)):
            raise ValueError(f"level_number must be in [1, {len(self.levels)}], got {level_number}")
        self._level = self.levels[level_number - 1]
        return self._level

    def reset(self) -> None:
        for level in self.levels:
            level.reset()
        self._level = None
