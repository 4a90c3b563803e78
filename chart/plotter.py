"""Statevector plotter: clears the surface and runs the three renderers.

Draw order is fixed so data lands on top of the axis lines:
axes, then amplitude bars, then phase points.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from chart.amplitudes import draw_amplitudes
from chart.axes import draw_axes
from chart.geometry import DEFAULT_PADDING, ChartGeometry, compute_geometry
from chart.phases import draw_phases
from chart.surface import DrawingSurface
from statevector import StateVector

logger = logging.getLogger(__name__)


class StatevectorPlotter:
    """Draws a StateVector as a magnitude bar chart plus phase scatter.

    Holds the padding configuration. The surface may be swapped between
    calls (the Qt canvas hands in a fresh painter on every paint event).
    """

    def __init__(self, surface: DrawingSurface | None = None):
        self.surface = surface
        self.padding = replace(DEFAULT_PADDING)
        self.geometry: ChartGeometry | None = None

    def set_padding(self, top=None, right=None, bottom=None, left=None) -> None:
        """Merge the supplied sides into the padding; others are unchanged."""
        self.padding.update(top=top, right=right, bottom=bottom, left=left)

    def plot(self, statevector: StateVector) -> None:
        surface = self.surface
        if surface is None:
            raise RuntimeError("StatevectorPlotter has no drawing surface")

        geometry = compute_geometry(
            surface.width, surface.height, self.padding, statevector.qubit_width,
        )
        self.geometry = geometry

        logger.debug(
            "Plotting %d basis state(s) on %.0fx%.0f surface (dx=%.1f)",
            geometry.cell_count, surface.width, surface.height, geometry.dx,
        )

        surface.clear_rect(0, 0, geometry.canvas_width, geometry.canvas_height)
        draw_axes(surface, geometry)
        draw_amplitudes(surface, geometry, statevector)
        draw_phases(surface, geometry, statevector)
