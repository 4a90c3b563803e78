"""Axis rendering: shared basis-state axis, magnitude axis, phase axis.

The phase axis is labelled by recursive bisection rather than a fixed
tick count: each level places one tick at the midpoint of its interval
(position and value), then recurses into the upper and lower halves.
With depth bound S this yields 2**(S+1) - 1 interior ticks between the
explicit +180 and -180 endpoint ticks, and 0.0 is always the first one.
"""

from __future__ import annotations

from typing import NamedTuple

from chart.geometry import ChartGeometry
from chart.surface import (
    DrawingSurface, saved_state,
    ALIGN_CENTER, ALIGN_LEFT, ALIGN_RIGHT, BASELINE_MIDDLE, BASELINE_TOP,
)
from statevector import basis_label


# Drawing constants
AXIS_COLOR = "#000000"
TICK_LENGTH = 5
LABEL_OFFSET = 8          # tick-to-label distance on the vertical axes
BASIS_LABEL_OFFSET = 10   # axis-to-label distance below the horizontal axis
MAGNITUDE_TICKS = 10      # intervals on the magnitude axis (step 0.1)
PHASE_TICK_DEPTH = 3
PHASE_MAX = 180.0
PHASE_MIN = -180.0


class PhaseTick(NamedTuple):
    """A tick on the phase axis.

    Attributes:
        y: Vertical pixel position.
        value: Phase in degrees at that position.
        depth: Recursion level that produced it (0 = the midpoint).
    """

    y: float
    value: float
    depth: int


def format_phase_label(value: float) -> str:
    """One decimal place plus a degree sign, e.g. ``"-22.5°"``."""
    return f"{value + 0.0:.1f}°"


def phase_ticks(
    top_pos: float,
    bottom_pos: float,
    top_value: float,
    bottom_value: float,
    steps: int,
    current_step: int = 0,
) -> list[PhaseTick]:
    """Interior phase ticks by recursive midpoint bisection.

    Emits the midpoint of (top_pos, bottom_pos) labelled with the midpoint
    of (top_value, bottom_value), then the ticks of the upper half, then
    those of the lower half. Stops once current_step exceeds steps.

    Returns:
        Ticks in pre-order (midpoint first), 2**(steps+1) - 1 of them.
    """
    if current_step > steps:
        return []

    mid_pos = (top_pos + bottom_pos) / 2
    mid_value = (top_value + bottom_value) / 2

    ticks = [PhaseTick(mid_pos, mid_value, current_step)]
    ticks += phase_ticks(
        top_pos, mid_pos, top_value, mid_value, steps, current_step + 1,
    )
    ticks += phase_ticks(
        mid_pos, bottom_pos, mid_value, bottom_value, steps, current_step + 1,
    )
    return ticks


def magnitude_ticks(geometry: ChartGeometry) -> list[tuple[float, str]]:
    """(y, label) pairs for the magnitude axis, 1.0 at the top to 0.0 at middle."""
    ticks = []
    for i in range(MAGNITUDE_TICKS + 1):
        y = geometry.chart_top + (i / MAGNITUDE_TICKS) * geometry.dy
        label = f"{(MAGNITUDE_TICKS - i) / MAGNITUDE_TICKS:.1f}"
        ticks.append((y, label))
    return ticks


def _line(surface: DrawingSurface, x0, y0, x1, y1) -> None:
    surface.begin_path()
    surface.move_to(x0, y0)
    surface.line_to(x1, y1)
    surface.stroke()


def _draw_right_tick(
    surface: DrawingSurface, geometry: ChartGeometry, y: float, label: str,
) -> None:
    right = geometry.chart_right
    _line(surface, right + TICK_LENGTH, y, right, y)
    surface.fill_text(label, right + LABEL_OFFSET, y)


def draw_axes(surface: DrawingSurface, geometry: ChartGeometry) -> None:
    """Draw the three axes with their ticks and labels."""
    top = geometry.chart_top
    bottom = geometry.chart_bottom
    left = geometry.chart_left
    right = geometry.chart_right
    middle = geometry.middle

    with saved_state(surface):
        surface.stroke_style = AXIS_COLOR
        surface.fill_style = AXIS_COLOR
        surface.line_width = 1

        # Horizontal axis
        _line(surface, left, middle, right, middle)

        # Vertical axes: magnitude (top half, left), phase (full height, right)
        surface.begin_path()
        surface.move_to(left, top)
        surface.line_to(left, middle)
        surface.move_to(right, top)
        surface.line_to(right, bottom)
        surface.stroke()

        # Basis-state ticks at the left edge of each cell, label centered
        surface.text_align = ALIGN_CENTER
        surface.text_baseline = BASELINE_TOP
        for i in range(geometry.cell_count):
            x = geometry.cell_left(i)
            _line(surface, x, middle - TICK_LENGTH, x, middle + TICK_LENGTH)
            surface.fill_text(
                basis_label(i, geometry.qubit_width),
                x + geometry.dx / 2,
                middle + BASIS_LABEL_OFFSET,
            )

        # Magnitude ticks
        surface.text_align = ALIGN_RIGHT
        surface.text_baseline = BASELINE_MIDDLE
        for y, label in magnitude_ticks(geometry):
            _line(surface, left - TICK_LENGTH, y, left, y)
            surface.fill_text(label, left - LABEL_OFFSET, y)

        # Phase endpoints, then the bisected interior ticks
        surface.text_align = ALIGN_LEFT
        surface.text_baseline = BASELINE_MIDDLE
        _draw_right_tick(surface, geometry, top, "180°")
        _draw_right_tick(surface, geometry, bottom, "-180°")
        for tick in phase_ticks(top, bottom, PHASE_MAX, PHASE_MIN, PHASE_TICK_DEPTH):
            _draw_right_tick(surface, geometry, tick.y, format_phase_label(tick.value))
