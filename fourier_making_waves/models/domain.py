"""Closed enumerations shared by the whole engine."""

from __future__ import annotations

from enum import Enum


class Domain(Enum):
    """Independent variable of the plotted function."""

    SPACE = "space"  # F(x)
    TIME = "time"  # F(t)
    SPACE_AND_TIME = "space_and_time"  # F(x,t)


class SeriesType(Enum):
    """Trigonometric basis of the series."""

    SIN = "sin"
    COS = "cos"

    @property
    def other(self) -> "SeriesType":
        return SeriesType.COS if self is SeriesType.SIN else SeriesType.SIN


class EquationForm(Enum):
    """Form of the harmonic equations shown alongside the charts.

    HIDDEN means no equations, and numeric tick labels on the x axis.
    Which forms are valid depends on the Domain, see
    :data:`EQUATION_FORMS_BY_DOMAIN`.
    """

    HIDDEN = "hidden"
    MODE = "mode"

    # Domain.SPACE
    WAVELENGTH = "wavelength"
    SPATIAL_WAVE_NUMBER = "spatial_wave_number"

    # Domain.TIME
    FREQUENCY = "frequency"
    PERIOD = "period"
    ANGULAR_WAVE_NUMBER = "angular_wave_number"

    # Domain.SPACE_AND_TIME
    WAVELENGTH_AND_PERIOD = "wavelength_and_period"
    SPATIAL_WAVE_NUMBER_AND_ANGULAR_WAVE_NUMBER = "spatial_wave_number_and_angular_wave_number"


class TickLabelFormat(Enum):
    NUMERIC = "numeric"  # like 0.5
    SYMBOLIC = "symbolic"  # like L/2


EQUATION_FORMS_BY_DOMAIN = {
    Domain.SPACE: (
        EquationForm.HIDDEN,
        EquationForm.WAVELENGTH,
        EquationForm.SPATIAL_WAVE_NUMBER,
        EquationForm.MODE,
    ),
    Domain.TIME: (
        EquationForm.HIDDEN,
        EquationForm.FREQUENCY,
        EquationForm.PERIOD,
        EquationForm.ANGULAR_WAVE_NUMBER,
        EquationForm.MODE,
    ),
    Domain.SPACE_AND_TIME: (
        EquationForm.HIDDEN,
        EquationForm.WAVELENGTH_AND_PERIOD,
        EquationForm.SPATIAL_WAVE_NUMBER_AND_ANGULAR_WAVE_NUMBER,
        EquationForm.MODE,
    ),
}


def tick_label_format_for(equation_form: EquationForm) -> TickLabelFormat:
    """Tick labels are numeric while equations are hidden, symbolic otherwise."""
    return TickLabelFormat.NUMERIC if equation_form is EquationForm.HIDDEN else TickLabelFormat.SYMBOLIC
