"""Chart geometry: pixel layout derived from surface size, padding, and width.

Layout (y grows downward):

    top     +-------------------------+  magnitude 1.0 / phase +180
            |   magnitude bars        |
    middle  +-------------------------+  magnitude 0.0 / phase 0
            |                         |
    bottom  +-------------------------+  phase -180
            left                   right

The horizontal span is split into 2**qubit_width equal cells.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class PaddingConfig:
    """Space in pixels between the surface edges and the chart box."""

    top: float = 40
    right: float = 50
    bottom: float = 50
    left: float = 50

    def update(self, top=None, right=None, bottom=None, left=None) -> None:
        """Overwrite only the supplied sides."""
        if top is not None:
            self.top = top
        if right is not None:
            self.right = right
        if bottom is not None:
            self.bottom = bottom
        if left is not None:
            self.left = left


DEFAULT_PADDING = PaddingConfig()


@dataclass(frozen=True)
class ChartGeometry:
    """Pixel-space layout for one plot call."""

    canvas_width: float
    canvas_height: float
    chart_top: float
    chart_bottom: float
    chart_left: float
    chart_right: float
    chart_width: float
    chart_height: float
    middle: float
    dx: float
    dy: float
    qubit_width: int

    @property
    def cell_count(self) -> int:
        return 1 << self.qubit_width

    @property
    def is_degenerate(self) -> bool:
        return self.chart_width <= 0 or self.chart_height <= 0

    def cell_left(self, index: int) -> float:
        """X of the left edge of cell ``index``."""
        return self.chart_left + index * self.dx

    def cell_center(self, index: int) -> float:
        return self.chart_left + index * self.dx + self.dx / 2


def compute_geometry(
    canvas_width: float,
    canvas_height: float,
    padding: PaddingConfig,
    qubit_width: int,
) -> ChartGeometry:
    """Derive the chart layout. Pure function of its inputs.

    A non-positive chart size is not an error: the geometry is returned
    as-is and the renderers draw a degenerate (empty-looking) chart.
    """
    chart_width = canvas_width - padding.left - padding.right
    chart_height = canvas_height - padding.top - padding.bottom
    cell_count = 1 << qubit_width

    geometry = ChartGeometry(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        chart_top=padding.top,
        chart_bottom=canvas_height - padding.bottom,
        chart_left=padding.left,
        chart_right=canvas_width - padding.right,
        chart_width=chart_width,
        chart_height=chart_height,
        middle=padding.top + chart_height / 2,
        dx=chart_width / cell_count,
        dy=chart_height / 2,
        qubit_width=qubit_width,
    )

    if geometry.is_degenerate:
        logger.warning(
            "Degenerate chart area %.0fx%.0f on %.0fx%.0f surface",
            chart_width, chart_height, canvas_width, canvas_height,
        )
    return geometry
