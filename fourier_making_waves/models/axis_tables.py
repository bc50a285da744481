"""Static, hand-tuned axis-description tables.

Every table is validated once, when this module is imported.  A failing check
means the tables were edited incorrectly; it is never a runtime condition.
"""

from __future__ import annotations

from .axis import AxisDescription, Range, validate_axis_descriptions
from .profile import DEFAULT_PROFILE

_MAX_AMPLITUDE = DEFAULT_PROFILE.max_amplitude


# =====================================================================
#  Discrete (Fourier series) screen
# =====================================================================

DISCRETE_DEFAULT_X_AXIS_DESCRIPTION = AxisDescription(
    range=Range(-1 / 2, 1 / 2),
    grid_line_spacing=1 / 8,
    tick_mark_spacing=1 / 4,
    tick_label_spacing=1 / 4,
)

DISCRETE_DEFAULT_Y_AXIS_DESCRIPTION = AxisDescription(
    range=Range(-_MAX_AMPLITUDE, _MAX_AMPLITUDE),
    grid_line_spacing=0.5,
    tick_mark_spacing=0.5,
    tick_label_spacing=0.5,
)

# x ranges are multiples of L (space) or T (time).
DISCRETE_X_AXIS_DESCRIPTIONS = validate_axis_descriptions(
    [
        AxisDescription(range=Range(-2, 2), grid_line_spacing=1 / 8, tick_mark_spacing=1 / 4, tick_label_spacing=1 / 2),
        AxisDescription(range=Range(-3 / 2, 3 / 2), grid_line_spacing=1 / 8, tick_mark_spacing=1 / 4, tick_label_spacing=1 / 2),
        AxisDescription(range=Range(-1, 1), grid_line_spacing=1 / 8, tick_mark_spacing=1 / 4, tick_label_spacing=1 / 4),
        AxisDescription(range=Range(-3 / 4, 3 / 4), grid_line_spacing=1 / 8, tick_mark_spacing=1 / 4, tick_label_spacing=1 / 4),
        DISCRETE_DEFAULT_X_AXIS_DESCRIPTION,
    ],
    name="DISCRETE_X_AXIS_DESCRIPTIONS",
    symmetric=True,
    # y-axis auto-scaling finds the peak of one full wavelength, so half of it must stay visible
    min_length=0.5,
    default=DISCRETE_DEFAULT_X_AXIS_DESCRIPTION,
)

DISCRETE_Y_AXIS_DESCRIPTIONS = validate_axis_descriptions(
    [
        AxisDescription(range=Range(-5, 5), grid_line_spacing=1, tick_mark_spacing=5, tick_label_spacing=5),
        AxisDescription(range=Range(-4, 4), grid_line_spacing=1, tick_mark_spacing=2, tick_label_spacing=2),
        AxisDescription(range=Range(-2, 2), grid_line_spacing=1, tick_mark_spacing=1, tick_label_spacing=1),
        DISCRETE_DEFAULT_Y_AXIS_DESCRIPTION,
    ],
    name="DISCRETE_Y_AXIS_DESCRIPTIONS",
    symmetric=True,
    default=DISCRETE_DEFAULT_Y_AXIS_DESCRIPTION,
)

if DISCRETE_X_AXIS_DESCRIPTIONS[0].range.max != 2:
    raise ValueError("infinite-harmonics base points assume that the most zoomed-out x range has max == 2")
if DISCRETE_DEFAULT_Y_AXIS_DESCRIPTION.range.max != _MAX_AMPLITUDE:
    raise ValueError("DISCRETE_DEFAULT_Y_AXIS_DESCRIPTION must match the maximum amplitude")


# =====================================================================
#  Wave packet screen
# =====================================================================

WAVE_PACKET_DEFAULT_X_AXIS_DESCRIPTION = AxisDescription(
    range=Range(-2, 2),
    grid_line_spacing=0.5,
    tick_mark_spacing=0.5,
    tick_label_spacing=0.5,
)

# x range of the Amplitudes chart is in multiples of pi.
WAVE_PACKET_AMPLITUDES_X_AXIS_DESCRIPTION = AxisDescription(
    range=Range(0, 24),
    grid_line_spacing=24,
    tick_mark_spacing=1,
    tick_label_spacing=2,
)

WAVE_PACKET_X_AXIS_DESCRIPTIONS = validate_axis_descriptions(
    [
        AxisDescription(range=Range(-8, 8), grid_line_spacing=1, tick_mark_spacing=1, tick_label_spacing=1),
        AxisDescription(range=Range(-4, 4), grid_line_spacing=1, tick_mark_spacing=0.5, tick_label_spacing=1),
        WAVE_PACKET_DEFAULT_X_AXIS_DESCRIPTION,
        AxisDescription(range=Range(-1, 1), grid_line_spacing=0.5, tick_mark_spacing=0.1, tick_label_spacing=0.5),
        AxisDescription(range=Range(-0.5, 0.5), grid_line_spacing=0.1, tick_mark_spacing=0.1, tick_label_spacing=0.1),
    ],
    name="WAVE_PACKET_X_AXIS_DESCRIPTIONS",
    symmetric=True,
    default=WAVE_PACKET_DEFAULT_X_AXIS_DESCRIPTION,
)

WAVE_PACKET_AMPLITUDES_Y_AXIS_DESCRIPTIONS = validate_axis_descriptions(
    [
        AxisDescription(range=Range(0, 1), grid_line_spacing=1, tick_mark_spacing=0.5, tick_label_spacing=1),
        AxisDescription(range=Range(0, 0.5), grid_line_spacing=0.2, tick_mark_spacing=0.1, tick_label_spacing=0.2),
        AxisDescription(range=Range(0, 0.05), grid_line_spacing=0.05, tick_mark_spacing=0.01, tick_label_spacing=0.05),
        AxisDescription(range=Range(0, 0.02), grid_line_spacing=0.01, tick_mark_spacing=0.005, tick_label_spacing=0.01),
        AxisDescription(range=Range(0, 0.01), grid_line_spacing=0.005, tick_mark_spacing=0.001, tick_label_spacing=0.005),
    ],
    name="WAVE_PACKET_AMPLITUDES_Y_AXIS_DESCRIPTIONS",
)

# a bit of padding above the normalized peak of 1
WAVE_PACKET_SUM_Y_AXIS_DESCRIPTION = AxisDescription(
    range=Range(-1.1, 1.1),
    grid_line_spacing=1,
    tick_mark_spacing=1,
    tick_label_spacing=1,
)

if not WAVE_PACKET_SUM_Y_AXIS_DESCRIPTION.has_symmetric_range():
    raise ValueError("range must be symmetric for WAVE_PACKET_SUM_Y_AXIS_DESCRIPTION")
