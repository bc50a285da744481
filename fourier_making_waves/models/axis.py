"""Axis descriptions, best-fit selection and zoom-level synchronization.

An :class:`AxisDescription` is an immutable record of an axis range and its
grid-line, tick-mark and tick-label spacings.  Hand-authored tables of them form
discrete zoom ladders, always ordered from most zoomed-out to most zoomed-in.

Functions
---------
get_best_fit
    Pick the tightest table entry that still contains a requested range.
is_sorted_descending
    Check the zoom-ladder ordering invariant.
validate_axis_descriptions
    Validate a static table once, at import time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .domain import Domain


@dataclass(frozen=True)
class Range:
    """Closed interval ``[min, max]``."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise ValueError(f"Range bounds must be finite, got [{self.min}, {self.max}]")
        if self.min > self.max:
            raise ValueError(f"Range min must be <= max, got [{self.min}, {self.max}]")

    @property
    def length(self) -> float:
        return self.max - self.min

    @property
    def center(self) -> float:
        return (self.min + self.max) / 2.0

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def scaled(self, multiplier: float) -> Range:
        return Range(multiplier * self.min, multiplier * self.max)


@dataclass(frozen=True)
class AxisDescription:
    """Immutable description of one chart axis.

    Attributes
    ----------
    range:
        Range of the axis.  For x axes this is in units of the fundamental
        wavelength or period, see :meth:`create_range_for_domain`.
    grid_line_spacing, tick_mark_spacing, tick_label_spacing:
        Spacings in the same units as ``range``.
    """

    range: Range
    grid_line_spacing: float
    tick_mark_spacing: float
    tick_label_spacing: float

    def has_symmetric_range(self) -> bool:
        return self.range.center == 0

    def create_range_for_domain(self, domain: Domain, space_multiplier: float, time_multiplier: float) -> Range:
        """Map this description's range onto the domain's units.

        TIME uses ``time_multiplier``; SPACE and SPACE_AND_TIME use ``space_multiplier``.
        """
        if not isinstance(domain, Domain):
            raise ValueError(f"unsupported domain: {domain!r}")
        multiplier = time_multiplier if domain is Domain.TIME else space_multiplier
        return self.range.scaled(multiplier)


def is_sorted_descending(axis_descriptions: Sequence[AxisDescription]) -> bool:
    """True if range lengths strictly decrease, most zoomed-out first."""
    return all(
        axis_descriptions[i - 1].range.length > axis_descriptions[i].range.length
        for i in range(1, len(axis_descriptions))
    )


def get_best_fit(range_: Range, axis_descriptions: Sequence[AxisDescription]) -> AxisDescription:
    """Return the most zoomed-in entry whose ``range.max`` is >= ``range_.max``.

    Parameters
    ----------
    range_:
        The range that must be visible.
    axis_descriptions:
        Table ordered from most zoomed-out to most zoomed-in.

    Raises
    ------
    ValueError
        If the table is empty, or ``range_.max`` exceeds the most zoomed-out entry.
    """
    if not axis_descriptions:
        raise ValueError("axis_descriptions must not be empty")
    for axis_description in reversed(axis_descriptions):
        if axis_description.range.max >= range_.max:
            return axis_description
    raise ValueError(
        f"no axis description fits range max={range_.max}; "
        f"most zoomed-out entry has max={axis_descriptions[0].range.max}"
    )


def validate_axis_descriptions(
    axis_descriptions: Sequence[AxisDescription],
    *,
    name: str,
    symmetric: bool = False,
    min_length: Optional[float] = None,
    default: Optional[AxisDescription] = None,
) -> Tuple[AxisDescription, ...]:
    """Validate a static table and return it as a tuple.

    Raises ValueError on the first violated constraint.
    """
    table = tuple(axis_descriptions)
    if not table:
        raise ValueError(f"{name} must not be empty")
    if not is_sorted_descending(table):
        raise ValueError(f"{name} must be sorted by descending range length, from most zoomed-out to most zoomed-in")
    if symmetric and not all(a.has_symmetric_range() for a in table):
        raise ValueError(f"range must be symmetric for {name}")
    if min_length is not None and not all(a.range.length >= min_length for a in table):
        raise ValueError(f"every range in {name} must have length >= {min_length}")
    if default is not None and default not in table:
        raise ValueError(f"{name} must include its default axis description")
    return table


ZoomListener = Callable[[int, AxisDescription], None]


class AxisDescriptionSelector:
    """Discrete zoom control over one axis-description table.

    The zoom level (table index) is the single source of truth; the selected
    AxisDescription is derived from it.  Both can be written.  Writes are
    guarded so that a listener echoing the value back does not recurse.
    """

    def __init__(self, axis_descriptions: Sequence[AxisDescription], default: AxisDescription) -> None:
        self._axis_descriptions: Tuple[AxisDescription, ...] = tuple(axis_descriptions)
        self._default_zoom_level = self.index_of(default)
        self._zoom_level = self._default_zoom_level
        self._listeners: List[ZoomListener] = []
        self._is_synchronizing = False

    @property
    def axis_descriptions(self) -> Tuple[AxisDescription, ...]:
        return self._axis_descriptions

    @property
    def zoom_level(self) -> int:
        return self._zoom_level

    @zoom_level.setter
    def zoom_level(self, zoom_level: int) -> None:
        self._select(zoom_level)

    @property
    def axis_description(self) -> AxisDescription:
        return self._axis_descriptions[self._zoom_level]

    @axis_description.setter
    def axis_description(self, axis_description: AxisDescription) -> None:
        self._select(self.index_of(axis_description))

    @property
    def can_zoom_in(self) -> bool:
        return self._zoom_level < len(self._axis_descriptions) - 1

    @property
    def can_zoom_out(self) -> bool:
        return self._zoom_level > 0

    def index_of(self, axis_description: AxisDescription) -> int:
        try:
            return self._axis_descriptions.index(axis_description)
        except ValueError:
            raise ValueError(f"axis description is not a valid value for this selector: {axis_description!r}") from None

    def zoom_in(self) -> None:
        if not self.can_zoom_in:
            raise ValueError("already at the most zoomed-in level")
        self._select(self._zoom_level + 1)

    def zoom_out(self) -> None:
        if not self.can_zoom_out:
            raise ValueError("already at the most zoomed-out level")
        self._select(self._zoom_level - 1)

    def add_listener(self, listener: ZoomListener) -> None:
        """Register ``listener(zoom_level, axis_description)``, called after each change."""
        self._listeners.append(listener)

    def reset(self) -> None:
        self._select(self._default_zoom_level)

    def _select(self, zoom_level: int) -> None:
        if not (isinstance(zoom_level, int) and 0 <= zoom_level < len(self._axis_descriptions)):
            raise ValueError(f"zoom_level must be an integer in [0, {len(self._axis_descriptions) - 1}], got {zoom_level!r}")
        if self._is_synchronizing:
            if zoom_level != self._zoom_level:
                raise RuntimeError("zoom level changed while listeners were being notified")
            return
        if zoom_level == self._zoom_level:
            return
        self._zoom_level = zoom_level
        self._is_synchronizing = True
        try:
            axis_description = self.axis_description
            for listener in list(self._listeners):
                listener(zoom_level, axis_description)
        finally:
            self._is_synchronizing = False
