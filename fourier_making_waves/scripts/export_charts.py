"""
Export chart data sets to CSV.

Builds a discrete or wave packet screen model from command-line inputs, then
writes every chart data set to one long-format CSV (columns ``series``,
``index``, ``x``, ``y``) plus a JSON file with the inputs and engine profile.

Examples
--------
python -m fourier_making_waves.scripts.export_charts discrete --waveform square --number-of-harmonics 5 out/
python -m fourier_making_waves.scripts.export_charts wave-packet --component-spacing 1/4 --center 12 out/
"""

from __future__ import annotations

import json
import logging
import math
from fractions import Fraction
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import pandas as pd

from fourier_making_waves.analysis.discrete_model import DiscreteModel
from fourier_making_waves.analysis.wave_packet_model import WavePacketModel
from fourier_making_waves.analysis.waveforms import WAVEFORMS, waveform_by_name
from fourier_making_waves.logging_config import setup_logging
from fourier_making_waves.models.data_set import DataSet, data_sets_to_frame
from fourier_making_waves.models.domain import Domain, SeriesType
from fourier_making_waves.models.profile import DEFAULT_PROFILE, EngineProfile

logger = logging.getLogger(__name__)


def discrete_chart_data_sets(model: DiscreteModel) -> Dict[str, DataSet]:
    """Named data sets of the discrete screen, in plotting order."""
    data_sets: Dict[str, DataSet] = {}
    for harmonic, data_set in zip(model.fourier_series.harmonics, model.harmonics_chart.harmonic_data_sets):
        data_sets[harmonic.color_tag] = data_set
    data_sets["sum"] = model.sum_chart.sum_data_set
    data_sets["infinite_harmonics"] = model.sum_chart.infinite_harmonics_data_set
    return data_sets


def wave_packet_chart_data_sets(model: WavePacketModel) -> Dict[str, DataSet]:
    """Named data sets of the wave packet screen, in plotting order."""
    amplitudes_chart = model.amplitudes_chart
    data_sets: Dict[str, DataSet] = {
        "amplitudes_finite": amplitudes_chart.finite_components_data_set,
        "amplitudes_continuous": amplitudes_chart.continuous_waveform_data_set,
        "amplitudes_infinite": amplitudes_chart.infinite_components_data_set,
    }
    for i, data_set in enumerate(model.components_chart.component_data_sets):
        data_sets[f"component{i}"] = data_set
    data_sets["sum"] = model.sum_chart.sum_data_set
    data_sets["envelope"] = model.sum_chart.waveform_envelope_data_set
    return data_sets


def export_data_sets(data_sets: Dict[str, DataSet], path: Path) -> pd.DataFrame:
    """Write ``data_sets`` to ``path`` as long-format CSV and return the frame."""
    df = data_sets_to_frame(data_sets)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    logger.info("wrote %d rows (%d series) to %s", len(df), df["series"].nunique(), path)
    return df


def _json_number(value: float) -> Optional[float]:
    """JSON has no infinity; ``inf`` is written as ``null``."""
    return None if math.isinf(value) else value


def _parse_pi_multiple(text: str) -> float:
    """``"1/4"`` -> pi/4; accepts integers, decimals and fractions."""
    try:
        return float(Fraction(text)) * math.pi
    except (ValueError, ZeroDivisionError) as exc:
        raise ValueError(f"expected a multiple of pi such as '1/4' or '12', got {text!r}") from exc


def _load_profile(path: Optional[str]) -> EngineProfile:
    if path is None:
        return DEFAULT_PROFILE
    with open(path, "r", encoding="utf-8") as f:
        return EngineProfile.from_dict(json.load(f))


def build_discrete_model(ns: Any, profile: EngineProfile) -> DiscreteModel:
    model = DiscreteModel(profile=profile)
    with model.batch():
        model.domain = Domain[ns.domain.upper()]
        model.series_type = SeriesType[ns.series_type.upper()]
        model.number_of_harmonics = ns.number_of_harmonics
        model.waveform = waveform_by_name(ns.waveform)
        model.infinite_harmonics_visible = ns.infinite_harmonics
        if ns.zoom_level is not None:
            model.x_axis.zoom_level = ns.zoom_level
        model.t = ns.t
    return model


def build_wave_packet_model(ns: Any) -> WavePacketModel:
    model = WavePacketModel()
    with model.batch():
        model.domain = Domain[ns.domain.upper()]
        model.series_type = SeriesType[ns.series_type.upper()]
        model.set_wave_packet(
            component_spacing=_parse_pi_multiple(ns.component_spacing),
            center=_parse_pi_multiple(ns.center),
            standard_deviation=_parse_pi_multiple(ns.standard_deviation),
        )
        if ns.zoom_level is not None:
            model.x_axis.zoom_level = ns.zoom_level
    return model


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse

    p = argparse.ArgumentParser(
        prog="python -m fourier_making_waves.scripts.export_charts",
        description="Compute chart data sets for one screen and write them to CSV.",
    )
    p.add_argument("--profile", default=None, help="JSON file with EngineProfile overrides (discrete screen)")
    p.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = p.add_subparsers(dest="screen", required=True)

    p_discrete = sub.add_parser("discrete", help="Fourier series screen")
    p_discrete.add_argument("out_dir", help="Output directory")
    p_discrete.add_argument("--waveform", default="sinusoid", choices=[w.name for w in WAVEFORMS if w.name != "custom"])
    p_discrete.add_argument("--series-type", default="sin", choices=["sin", "cos"])
    p_discrete.add_argument("--domain", default="space", choices=["space", "time", "space_and_time"])
    p_discrete.add_argument("--number-of-harmonics", type=int, default=DEFAULT_PROFILE.max_harmonics)
    p_discrete.add_argument("--t", type=float, default=0.0, help="Time in ms (space_and_time domain)")
    p_discrete.add_argument("--zoom-level", type=int, default=None, help="x-axis zoom level, 0 is most zoomed-out")
    p_discrete.add_argument("--infinite-harmonics", action="store_true", help="Include the exact waveform overlay")

    p_packet = sub.add_parser("wave-packet", help="Wave packet screen")
    p_packet.add_argument("out_dir", help="Output directory")
    p_packet.add_argument("--series-type", default="sin", choices=["sin", "cos"])
    p_packet.add_argument("--domain", default="space", choices=["space", "time"])
    p_packet.add_argument("--component-spacing", default="1", help="Multiple of pi: 0, 1/4, 1/2 or 1")
    p_packet.add_argument("--center", default="12", help="Multiple of pi, in [9, 15]")
    p_packet.add_argument("--standard-deviation", default="3", help="Multiple of pi, in [1, 4]")
    p_packet.add_argument("--zoom-level", type=int, default=None, help="x-axis zoom level, 0 is most zoomed-out")

    ns = p.parse_args(list(argv) if argv is not None else None)

    setup_logging(getattr(logging, str(ns.log_level).upper(), logging.INFO))
    profile = _load_profile(ns.profile)
    out_dir = Path(ns.out_dir)

    if ns.screen == "discrete":
        model = build_discrete_model(ns, profile)
        data_sets = discrete_chart_data_sets(model)
        inputs = {
            "waveform": model.waveform.name,
            "series_type": model.series_type.value,
            "domain": model.domain.value,
            "number_of_harmonics": model.number_of_harmonics,
            "t": model.t,
            "x_axis_range": [model.x_axis_description.range.min, model.x_axis_description.range.max],
            "y_axis_range": [model.sum_chart.y_axis_description.range.min, model.sum_chart.y_axis_description.range.max],
        }
    else:
        model = build_wave_packet_model(ns)
        data_sets = wave_packet_chart_data_sets(model)
        wave_packet = model.wave_packet
        inputs = {
            "series_type": model.series_type.value,
            "domain": model.domain.value,
            "component_spacing": wave_packet.component_spacing,
            "center": wave_packet.center,
            "standard_deviation": wave_packet.standard_deviation,
            "number_of_components": _json_number(wave_packet.get_number_of_components()),
            "x_axis_range": [model.x_axis_description.range.min, model.x_axis_description.range.max],
        }

    export_data_sets(data_sets, out_dir / f"{ns.screen}_charts.csv")

    meta_path = out_dir / f"{ns.screen}_inputs.json"
    with open(meta_path, "w", encoding="utf-8") as f:
        json.dump({"screen": ns.screen, "inputs": inputs, "profile": profile.to_dict()}, f, indent=2, allow_nan=False)
    logger.info("wrote inputs to %s", meta_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
