from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Tuple

import numpy as np
import pandas as pd


@dataclass(frozen=True, eq=False)
class DataSet:
    """Ordered sample sequence, the unit of exchange with renderers.

    Attributes
    ----------
    x:
        1D float array, non-decreasing.  Sampled data sets are strictly increasing;
        only hand-authored overlay polylines repeat an x (vertical edges).
    y:
        1D float array of the same length.

    Notes
    -----
    Both arrays are made read-only on construction.  A data set is recomputed
    wholesale when its inputs change and is never mutated by consumers.
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        x = np.array(self.x, dtype=float)
        y = np.array(self.y, dtype=float)
        if x.ndim != 1 or y.ndim != 1:
            raise ValueError(f"x and y must be 1D, got shapes {x.shape} and {y.shape}")
        if x.shape != y.shape:
            raise ValueError(f"x and y must have the same length, got {x.size} and {y.size}")
        if x.size > 1 and not np.all(np.diff(x) >= 0):
            raise ValueError("x must be ordered by ascending value")
        x.setflags(write=False)
        y.setflags(write=False)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __len__(self) -> int:
        return int(self.x.size)

    @property
    def is_empty(self) -> bool:
        return self.x.size == 0

    @property
    def points(self) -> List[Tuple[float, float]]:
        return list(zip(self.x.tolist(), self.y.tolist()))

    def peak_y(self) -> float:
        """Largest y value."""
        if self.is_empty:
            raise ValueError("empty data set has no peak")
        return float(np.max(self.y))

    def has_same_x(self, other: DataSet) -> bool:
        return self.x.shape == other.x.shape and bool(np.array_equal(self.x, other.x))

    def to_frame(self, x_name: str = "x", y_name: str = "y") -> pd.DataFrame:
        return pd.DataFrame({x_name: self.x, y_name: self.y})


EMPTY_DATA_SET = DataSet(np.empty(0), np.empty(0))


def data_sets_to_frame(data_sets: Mapping[str, DataSet]) -> pd.DataFrame:
    """Stack named data sets into one long-format DataFrame.

    Columns: ``series``, ``index``, ``x``, ``y``.  Empty data sets contribute no rows.
    """
    frames = []
    for name, data_set in data_sets.items():
        if data_set.is_empty:
            continue
        df = data_set.to_frame()
        df.insert(0, "index", np.arange(len(data_set), dtype=int))
        df.insert(0, "series", name)
        frames.append(df)
    if not frames:
        return pd.DataFrame({"series": pd.Series(dtype=str), "index": pd.Series(dtype=int),
                             "x": pd.Series(dtype=float), "y": pd.Series(dtype=float)})
    return pd.concat(frames, ignore_index=True)
