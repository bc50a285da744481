"""Pointwise combinators over index-aligned data sets.

Inputs must share point count and x coordinates; this is a precondition of the
callers (all data sets are sampled on one grid), so a mismatch raises.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from fourier_making_waves.models.data_set import DataSet


def sum_data_sets(data_sets: Sequence[DataSet]) -> DataSet:
    """Pointwise sum of y across ``data_sets``."""
    if not data_sets:
        raise ValueError("at least one data set is required")
    first = data_sets[0]
    if first.is_empty:
        raise ValueError("data sets must contain points")
    for data_set in data_sets[1:]:
        if len(data_set) != len(first):
            raise ValueError(f"all data sets must have the same number of points, got {len(data_set)} and {len(first)}")
        if not data_set.has_same_x(first):
            raise ValueError("points with the same index must have the same x value")
    y = np.sum(np.vstack([d.y for d in data_sets]), axis=0)
    return DataSet(first.x, y)


def envelope_data_set(data_set1: DataSet, data_set2: DataSet) -> DataSet:
    """Amplitude envelope ``sqrt(y1**2 + y2**2)`` of two quadrature data sets."""
    if data_set1.is_empty or data_set2.is_empty:
        raise ValueError("data sets must contain points")
    if len(data_set1) != len(data_set2):
        raise ValueError(f"data sets must have the same number of points, got {len(data_set1)} and {len(data_set2)}")
    if not data_set1.has_same_x(data_set2):
        raise ValueError("points with the same index must have the same x value")
    return DataSet(data_set1.x, np.hypot(data_set1.y, data_set2.y))
