"""Amplitude bars: one bar per basis state, height proportional to |amplitude|.

Bars grow upward from the horizontal axis; magnitude 1 reaches the chart
top. Magnitudes are not clamped, so a non-normalized input draws bars
that leave the chart box.
"""

from __future__ import annotations

from typing import NamedTuple

from chart.geometry import ChartGeometry
from chart.surface import DrawingSurface, saved_state, ALIGN_CENTER, BASELINE_MIDDLE
from statevector import StateVector, basis_label


# Drawing constants
BAR_WIDTH_RATIO = 0.8     # fraction of a cell covered by its bar
BAR_FILL_COLOR = "#0077be"
BAR_STROKE_COLOR = "#00072d"
BAR_LINE_WIDTH = 1
LABEL_GAP = 20            # label distance above the bar top


class AmplitudeBar(NamedTuple):
    """Pixel rectangle for one basis state's magnitude bar."""

    index: int
    label: str
    magnitude: float
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


def compute_bars(geometry: ChartGeometry, statevector: StateVector) -> list[AmplitudeBar]:
    """Lay out the magnitude bars, one per basis state, in index order."""
    dx, dy = geometry.dx, geometry.dy
    bar_width = dx * BAR_WIDTH_RATIO
    bars = []
    for k, magnitude in enumerate(statevector.magnitudes()):
        height = float(magnitude) * dy
        bars.append(AmplitudeBar(
            index=k,
            label=basis_label(k, statevector.qubit_width),
            magnitude=float(magnitude),
            x=geometry.cell_center(k) - bar_width / 2,
            y=geometry.chart_top + dy - height,
            width=bar_width,
            height=height,
        ))
    return bars


def draw_amplitudes(
    surface: DrawingSurface, geometry: ChartGeometry, statevector: StateVector,
) -> None:
    with saved_state(surface):
        surface.fill_style = BAR_FILL_COLOR
        surface.stroke_style = BAR_STROKE_COLOR
        surface.line_width = BAR_LINE_WIDTH
        surface.text_align = ALIGN_CENTER
        surface.text_baseline = BASELINE_MIDDLE

        for bar in compute_bars(geometry, statevector):
            surface.fill_rect(bar.x, bar.y, bar.width, bar.height)
            surface.stroke_rect(bar.x, bar.y, bar.width, bar.height)
            surface.fill_text(f"{bar.magnitude:.3f}", bar.center_x, bar.y - LABEL_GAP)
