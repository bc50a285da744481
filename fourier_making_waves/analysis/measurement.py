"""Wavelength and period measurement tools of the discrete screen."""

from __future__ import annotations


class DiscreteMeasurementTool:
    """Measures the wavelength (or period) of one selected harmonic.

    ``order`` is confined to ``[1, number_of_harmonics]``.  When the number of
    harmonics drops below the selected order, the order is clamped and the tool
    is deselected.
    """

    def __init__(self, symbol: str, number_of_harmonics: int) -> None:
        self.symbol = symbol
        self.is_selected = False
        self._order = 1
        self._max_order = number_of_harmonics

    def __repr__(self) -> str:
        return f"DiscreteMeasurementTool({self.symbol!r}, order={self._order}, is_selected={self.is_selected})"

    @property
    def order(self) -> int:
        return self._order

    @order.setter
    def order(self, value: int) -> None:
        if not (isinstance(value, int) and 1 <= value <= self._max_order):
            raise ValueError(f"order must be an integer in [1, {self._max_order}], got {value!r}")
        self._order = value

    @property
    def max_order(self) -> int:
        return self._max_order

    def set_number_of_harmonics(self, number_of_harmonics: int) -> None:
        if self._order > number_of_harmonics:
            self.is_selected = False
            self._order = number_of_harmonics
        self._max_order = number_of_harmonics

    def reset(self) -> None:
        self.is_selected = False
        self._order = 1
