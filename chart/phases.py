"""Phase points: one dot per basis state at a height set by its phase.

+180 maps to the chart top, 0 to the horizontal axis, -180 to the
chart bottom.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from chart.geometry import ChartGeometry
from chart.surface import DrawingSurface, saved_state, ALIGN_CENTER, BASELINE_MIDDLE
from statevector import StateVector


# Drawing constants
POINT_RADIUS = 3
POINT_COLOR = "limegreen"
LABEL_GAP = 10


class PhasePoint(NamedTuple):
    index: int
    phase: float  # degrees
    x: float
    y: float


def phase_to_y(geometry: ChartGeometry, phase: float) -> float:
    """Linear map from degrees to pixel y."""
    return geometry.middle - phase / 360 * geometry.chart_height


def compute_phase_points(
    geometry: ChartGeometry, statevector: StateVector,
) -> list[PhasePoint]:
    return [
        PhasePoint(k, float(phase), geometry.cell_center(k), phase_to_y(geometry, float(phase)))
        for k, phase in enumerate(statevector.phases())
    ]


def draw_phases(
    surface: DrawingSurface, geometry: ChartGeometry, statevector: StateVector,
) -> None:
    with saved_state(surface):
        surface.fill_style = POINT_COLOR
        surface.text_align = ALIGN_CENTER
        surface.text_baseline = BASELINE_MIDDLE

        for point in compute_phase_points(geometry, statevector):
            surface.begin_path()
            surface.arc(point.x, point.y, POINT_RADIUS, 0, 2 * math.pi)
            surface.fill()
            surface.fill_text(f"{point.phase:.2f}", point.x, point.y - LABEL_GAP)
