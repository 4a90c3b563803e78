"""Tests for chart/axes.py: recursive phase ticks and drawn axis labels.

phase_ticks() is pure; draw_axes() is checked through a RecordingSurface.
"""

import pytest

from chart.axes import (
    PHASE_TICK_DEPTH,
    TICK_LENGTH,
    draw_axes,
    format_phase_label,
    magnitude_ticks,
    phase_ticks,
)
from chart.geometry import PaddingConfig, compute_geometry
from chart.surface import (
    DrawingState, RecordingSurface,
    ALIGN_CENTER, ALIGN_LEFT, ALIGN_RIGHT, BASELINE_TOP,
)


def _draw(qubit_width=2, width=800, height=500):
    surface = RecordingSurface(width, height)
    geometry = compute_geometry(width, height, PaddingConfig(), qubit_width)
    draw_axes(surface, geometry)
    return surface, geometry


def _texts_where(surface, **state):
    return [
        c.args[0] for c in surface.calls_of("fill_text")
        if all(getattr(c.state, k) == v for k, v in state.items())
    ]


class TestPhaseTicks:
    """Recursive bisection of [180, -180] over [top, bottom]."""

    def test_count_depth_three(self):
        ticks = phase_ticks(40, 450, 180.0, -180.0, 3)
        assert len(ticks) == 2 ** (3 + 1) - 1 == 15

    @pytest.mark.parametrize("steps", [0, 1, 2, 4])
    def test_count_formula(self, steps: int):
        assert len(phase_ticks(0, 100, 1.0, -1.0, steps)) == 2 ** (steps + 1) - 1

    def test_first_tick_is_exact_midpoint(self):
        first = phase_ticks(40, 450, 180.0, -180.0, 3)[0]
        assert first.value == 0.0
        assert first.y == 245.0
        assert first.depth == 0

    def test_preorder_shape(self):
        values = [t.value for t in phase_ticks(40, 450, 180.0, -180.0, 3)]
        assert values == [
            0.0, 90.0, 135.0, 157.5, 112.5, 45.0, 67.5, 22.5,
            -90.0, -45.0, -22.5, -67.5, -135.0, -112.5, -157.5,
        ]

    def test_interior_only(self):
        ticks = phase_ticks(40, 450, 180.0, -180.0, 3)
        assert all(40 < t.y < 450 for t in ticks)
        assert all(-180.0 < t.value < 180.0 for t in ticks)

    def test_positions_track_values(self):
        """Each tick's position is the linear image of its value."""
        for t in phase_ticks(40, 450, 180.0, -180.0, 3):
            assert t.y == pytest.approx(245.0 - t.value / 360.0 * 410.0)

    def test_depth_counts(self):
        depths = [t.depth for t in phase_ticks(0, 1, 1.0, -1.0, 3)]
        assert [depths.count(d) for d in range(4)] == [1, 2, 4, 8]

    def test_stops_immediately_past_depth(self):
        assert phase_ticks(0, 1, 1.0, -1.0, 3, current_step=4) == []


class TestFormatPhaseLabel:

    def test_one_decimal_with_degree(self):
        assert format_phase_label(22.5) == "22.5°"
        assert format_phase_label(-157.5) == "-157.5°"
        assert format_phase_label(0.0) == "0.0°"

    def test_negative_zero(self):
        assert format_phase_label(-0.0) == "0.0°"


class TestMagnitudeTicks:

    def test_eleven_ticks_top_to_middle(self):
        g = compute_geometry(800, 500, PaddingConfig(), 1)
        ticks = magnitude_ticks(g)
        assert len(ticks) == 11
        assert ticks[0] == (pytest.approx(g.chart_top), "1.0")
        assert ticks[-1][0] == pytest.approx(g.middle)
        assert ticks[-1][1] == "0.0"
        assert [label for _, label in ticks] == [f"{v / 10:.1f}" for v in range(10, -1, -1)]


class TestDrawAxes:
    """Labels and lines recorded by draw_axes()."""

    def test_basis_labels_ascending(self):
        surface, _ = _draw(qubit_width=3)
        labels = _texts_where(surface, text_baseline=BASELINE_TOP)
        assert labels == ["000", "001", "010", "011", "100", "101", "110", "111"]

    def test_basis_labels_centered_in_cells(self):
        surface, g = _draw(qubit_width=2)
        calls = [
            c for c in surface.calls_of("fill_text")
            if c.state.text_baseline == BASELINE_TOP
        ]
        for i, call in enumerate(calls):
            assert call.state.text_align == ALIGN_CENTER
            assert call.args[1] == pytest.approx(g.cell_center(i))
            assert call.args[2] == pytest.approx(g.middle + 10)

    def test_single_qubit_width_zero_label(self):
        surface, _ = _draw(qubit_width=0)
        assert _texts_where(surface, text_baseline=BASELINE_TOP) == ["0"]

    def test_basis_ticks_at_cell_left_edges(self):
        surface, g = _draw(qubit_width=2)
        tick_xs = [
            c.args[0] for c in surface.calls_of("move_to")
            if c.args[1] == pytest.approx(g.middle - TICK_LENGTH)
        ]
        assert tick_xs == [pytest.approx(g.cell_left(i)) for i in range(4)]

    def test_magnitude_labels(self):
        surface, _ = _draw()
        labels = _texts_where(surface, text_align=ALIGN_RIGHT)
        assert labels == [f"{v / 10:.1f}" for v in range(10, -1, -1)]

    def test_phase_labels(self):
        surface, g = _draw()
        labels = _texts_where(surface, text_align=ALIGN_LEFT)
        assert labels[:2] == ["180°", "-180°"]
        assert len(labels) == 2 + 2 ** (PHASE_TICK_DEPTH + 1) - 1
        assert "0.0°" in labels
        assert len(set(labels)) == len(labels)

    def test_phase_labels_right_of_axis(self):
        surface, g = _draw()
        for call in surface.calls_of("fill_text"):
            if call.state.text_align == ALIGN_LEFT:
                assert call.args[1] == pytest.approx(g.chart_right + 8)

    def test_zero_label_at_middle(self):
        surface, g = _draw()
        zero = [c for c in surface.calls_of("fill_text") if c.args[0] == "0.0°"]
        assert len(zero) == 1
        assert zero[0].args[2] == pytest.approx(g.middle)

    def test_axis_lines(self):
        surface, g = _draw()
        moves = [c.args for c in surface.calls_of("move_to")]
        lines = [c.args for c in surface.calls_of("line_to")]
        # Horizontal axis, left axis (top to middle), right axis (full height)
        assert moves[0] == (g.chart_left, g.middle)
        assert lines[0] == (g.chart_right, g.middle)
        assert moves[1] == (g.chart_left, g.chart_top)
        assert lines[1] == (g.chart_left, g.middle)
        assert moves[2] == (g.chart_right, g.chart_top)
        assert lines[2] == (g.chart_right, g.chart_bottom)

    def test_style_restored(self):
        surface, _ = _draw()
        assert surface.state == DrawingState()
        assert surface.save_depth == 0
