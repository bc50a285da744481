"""Equation markup for harmonics, sums and wave packet components.

Markup is plain text with ``<sub>`` tags for subscripts, e.g.
``"A<sub>n</sub> sin( 2πx / λ<sub>n</sub> )"``.  The general form uses the
symbols ``n`` and ``A<sub>n</sub>``; the specific form substitutes a concrete
order and amplitude.
"""

from __future__ import annotations

from typing import Dict, Tuple, Union

from fourier_making_waves.models.domain import EQUATION_FORMS_BY_DOMAIN, Domain, EquationForm, SeriesType

Order = Union[str, int]
Amplitude = Union[str, int, float]

PI = "π"
LAMBDA = "λ"
OMEGA = "ω"
MINUS = "−"

N_SYMBOL = "n"
AN_SYMBOL = "A<sub>n</sub>"

_SERIES_TYPE_MARKUP = {SeriesType.SIN: "sin", SeriesType.COS: "cos"}

# argument of the trig function, with {order} left to fill in
_ARGUMENT_TEMPLATES: Dict[Tuple[Domain, EquationForm], str] = {
    (Domain.SPACE, EquationForm.WAVELENGTH): f"2{PI}x / {LAMBDA}<sub>{{order}}</sub>",
    (Domain.SPACE, EquationForm.SPATIAL_WAVE_NUMBER): "k<sub>{order}</sub>x",
    (Domain.SPACE, EquationForm.MODE): f"2{PI}{{order}}x / L",
    (Domain.TIME, EquationForm.FREQUENCY): f"2{PI}f<sub>{{order}}</sub>t",
    (Domain.TIME, EquationForm.PERIOD): f"2{PI}t / T<sub>{{order}}</sub>",
    (Domain.TIME, EquationForm.ANGULAR_WAVE_NUMBER): f"{OMEGA}<sub>{{order}}</sub>t",
    (Domain.TIME, EquationForm.MODE): f"2{PI}{{order}}t / T",
    (Domain.SPACE_AND_TIME, EquationForm.WAVELENGTH_AND_PERIOD): (
        f"2{PI}( x/{LAMBDA}<sub>{{order}}</sub> {MINUS} t/T<sub>{{order}}</sub> )"
    ),
    (Domain.SPACE_AND_TIME, EquationForm.SPATIAL_WAVE_NUMBER_AND_ANGULAR_WAVE_NUMBER): (
        f"k<sub>{{order}}</sub>x {MINUS} {OMEGA}<sub>{{order}}</sub>t"
    ),
    (Domain.SPACE_AND_TIME, EquationForm.MODE): f"2{PI}{{order}}( x/L {MINUS} t/T )",
}

for _domain, _forms in EQUATION_FORMS_BY_DOMAIN.items():
    for _form in _forms:
        if _form is not EquationForm.HIDDEN and (_domain, _form) not in _ARGUMENT_TEMPLATES:
            raise ValueError(f"missing equation template for {_domain.name}/{_form.name}")


def get_specific_form_markup(
    domain: Domain,
    series_type: SeriesType,
    equation_form: EquationForm,
    order: Order,
    amplitude: Amplitude,
) -> str:
    """Markup for one harmonic; empty string for EquationForm.HIDDEN.

    Raises
    ------
    ValueError
        If ``equation_form`` is not valid for ``domain``.
    """
    if domain not in EQUATION_FORMS_BY_DOMAIN:
        raise ValueError(f"unsupported domain: {domain!r}")
    if equation_form not in EQUATION_FORMS_BY_DOMAIN[domain]:
        raise ValueError(f"unsupported equation form {equation_form!r} for domain {domain!r}")
    if equation_form is EquationForm.HIDDEN:
        return ""
    argument = _ARGUMENT_TEMPLATES[(domain, equation_form)].format(order=order)
    return f"{amplitude} {_SERIES_TYPE_MARKUP[series_type]}( {argument} )"


def get_general_form_markup(domain: Domain, series_type: SeriesType, equation_form: EquationForm) -> str:
    return get_specific_form_markup(domain, series_type, equation_form, N_SYMBOL, AN_SYMBOL)


def get_function_of_markup(domain: Domain) -> str:
    """``F(x)``, ``F(t)`` or ``F(x,t)``."""
    variables = {Domain.SPACE: "x", Domain.TIME: "t", Domain.SPACE_AND_TIME: "x,t"}
    try:
        return f"F({variables[domain]})"
    except KeyError:
        raise ValueError(f"unsupported domain: {domain!r}") from None


def get_components_equation_markup(domain: Domain, series_type: SeriesType) -> str:
    """Wave packet component, e.g. ``A<sub>n</sub> sin( k<sub>n</sub>x )``."""
    if domain is Domain.SPACE:
        domain_symbol, component_symbol = "x", "k"
    elif domain is Domain.TIME:
        domain_symbol, component_symbol = "t", OMEGA
    else:
        raise ValueError(f"unsupported domain: {domain!r}")
    return f"{AN_SYMBOL} {_SERIES_TYPE_MARKUP[series_type]}( {component_symbol}<sub>{N_SYMBOL}</sub>{domain_symbol} )"
