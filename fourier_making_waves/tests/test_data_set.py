"""Tests for DataSet, the pointwise combinators and the CSV export script."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from fourier_making_waves.analysis.combinators import envelope_data_set, sum_data_sets
from fourier_making_waves.models.data_set import EMPTY_DATA_SET, DataSet, data_sets_to_frame
from fourier_making_waves.scripts.export_charts import _parse_pi_multiple, main


# -----------------------------------------------------------------------
# DataSet
# -----------------------------------------------------------------------


def test_data_set_validation() -> None:
    with pytest.raises(ValueError):
        DataSet([0.0, 1.0], [0.0])
    with pytest.raises(ValueError):
        DataSet(np.zeros((2, 2)), np.zeros((2, 2)))
    with pytest.raises(ValueError):
        DataSet([1.0, 0.0], [0.0, 0.0])


def test_data_set_arrays_are_read_only() -> None:
    ds = DataSet([0.0, 1.0], [2.0, 3.0])
    with pytest.raises(ValueError):
        ds.x[0] = 5.0
    with pytest.raises(ValueError):
        ds.y[1] = 5.0


def test_data_set_allows_vertical_edges() -> None:
    ds = DataSet([0.0, 0.0, 1.0], [-1.0, 1.0, 1.0])
    assert ds.points == [(0.0, -1.0), (0.0, 1.0), (1.0, 1.0)]
    assert ds.peak_y() == 1.0


def test_empty_data_set() -> None:
    assert EMPTY_DATA_SET.is_empty
    assert len(EMPTY_DATA_SET) == 0
    with pytest.raises(ValueError):
        EMPTY_DATA_SET.peak_y()


def test_data_sets_to_frame() -> None:
    df = data_sets_to_frame({"a": DataSet([0, 1], [2, 3]), "empty": EMPTY_DATA_SET, "b": DataSet([5], [6])})
    assert list(df.columns) == ["series", "index", "x", "y"]
    assert df["series"].tolist() == ["a", "a", "b"]
    assert df["index"].tolist() == [0, 1, 0]
    assert df["y"].tolist() == [2.0, 3.0, 6.0]
    empty = data_sets_to_frame({"empty": EMPTY_DATA_SET})
    assert empty.empty
    assert list(empty.columns) == ["series", "index", "x", "y"]


# -----------------------------------------------------------------------
# Combinators
# -----------------------------------------------------------------------


def test_sum_data_sets() -> None:
    a = DataSet([0, 1, 2], [1, 2, 3])
    b = DataSet([0, 1, 2], [-1, 0, 1])
    np.testing.assert_allclose(sum_data_sets([a, b]).y, [0, 2, 4])
    assert sum_data_sets([a]).has_same_x(a)


def test_sum_data_sets_rejects_misaligned_inputs() -> None:
    a = DataSet([0, 1, 2], [1, 2, 3])
    with pytest.raises(ValueError):
        sum_data_sets([a, DataSet([0, 1], [0, 0])])
    with pytest.raises(ValueError):
        sum_data_sets([a, DataSet([0, 1, 3], [0, 0, 0])])
    with pytest.raises(ValueError):
        sum_data_sets([])
    with pytest.raises(ValueError):
        sum_data_sets([EMPTY_DATA_SET])


def test_envelope_data_set() -> None:
    x = np.linspace(0, 1, 11)
    sin_ds = DataSet(x, 0.5 * np.sin(2 * np.pi * x))
    cos_ds = DataSet(x, 0.5 * np.cos(2 * np.pi * x))
    np.testing.assert_allclose(envelope_data_set(sin_ds, cos_ds).y, 0.5)
    with pytest.raises(ValueError):
        envelope_data_set(sin_ds, DataSet(x[:5], x[:5]))
    with pytest.raises(ValueError):
        envelope_data_set(EMPTY_DATA_SET, sin_ds)


# -----------------------------------------------------------------------
# Export script
# -----------------------------------------------------------------------


def test_parse_pi_multiple() -> None:
    assert _parse_pi_multiple("1/4") == np.pi / 4
    assert _parse_pi_multiple("12") == 12 * np.pi
    assert _parse_pi_multiple("0") == 0.0
    with pytest.raises(ValueError):
        _parse_pi_multiple("abc")


def test_export_discrete(tmp_path: Path) -> None:
    rc = main(["discrete", str(tmp_path), "--waveform", "square", "--number-of-harmonics", "5", "--infinite-harmonics"])
    assert rc == 0

    df = pd.read_csv(tmp_path / "discrete_charts.csv")
    series = set(df["series"])
    assert {f"harmonic{n}" for n in range(1, 12)} <= series
    assert {"sum", "infinite_harmonics"} <= series
    assert (df["series"] == "sum").sum() == 1001

    meta = json.loads((tmp_path / "discrete_inputs.json").read_text(encoding="utf-8"))
    assert meta["screen"] == "discrete"
    assert meta["inputs"]["waveform"] == "square"
    assert meta["inputs"]["number_of_harmonics"] == 5
    assert meta["profile"]["max_harmonics"] == 11


def test_export_wave_packet_with_infinite_components(tmp_path: Path) -> None:
    rc = main(["wave-packet", str(tmp_path), "--component-spacing", "0", "--series-type", "cos"])
    assert rc == 0

    df = pd.read_csv(tmp_path / "wave-packet_charts.csv")
    series = set(df["series"])
    assert "amplitudes_finite" not in series
    assert not any(name.startswith("component") for name in series)
    assert {"amplitudes_continuous", "amplitudes_infinite", "sum", "envelope"} <= series

    text = (tmp_path / "wave-packet_inputs.json").read_text(encoding="utf-8")
    assert "Infinity" not in text
    meta = json.loads(text)
    assert meta["inputs"]["number_of_components"] is None
    assert meta["inputs"]["series_type"] == "cos"


def test_export_rejects_unknown_profile_fields(tmp_path: Path) -> None:
    profile_path = tmp_path / "profile.json"
    profile_path.write_text(json.dumps({"max_harmonics": 11, "colour": "red"}), encoding="utf-8")
    with pytest.raises(ValueError):
        main(["--profile", str(profile_path), "discrete", str(tmp_path / "out")])
