from .axis import AxisDescription, AxisDescriptionSelector, Range, get_best_fit
from .components import FourierComponent
from .data_set import EMPTY_DATA_SET, DataSet
from .domain import Domain, EquationForm, SeriesType, TickLabelFormat
from .profile import DEFAULT_PROFILE, EngineProfile

__all__ = [
    "AxisDescription",
    "AxisDescriptionSelector",
    "Range",
    "get_best_fit",
    "FourierComponent",
    "DataSet",
    "EMPTY_DATA_SET",
    "Domain",
    "EquationForm",
    "SeriesType",
    "TickLabelFormat",
    "DEFAULT_PROFILE",
    "EngineProfile",
]
