"""QPainter-backed drawing surface.

Adapts an active QPainter to the DrawingSurface contract so the chart
renderers can draw on a widget or a QImage. Path calls accumulate into a
QPainterPath until stroke()/fill(); text is positioned from the current
alignment and baseline using the painter's font metrics.
"""

from __future__ import annotations

import math
from dataclasses import replace

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QBrush, QColor, QFontMetricsF, QPainter, QPainterPath, QPen

from chart.surface import (
    DrawingState,
    ALIGN_CENTER, ALIGN_RIGHT,
    BASELINE_BOTTOM, BASELINE_MIDDLE, BASELINE_TOP,
)


class QPainterSurface:
    """DrawingSurface over a QPainter of known pixel size.

    Args:
        painter: Active QPainter; the caller owns begin()/end().
        width: Surface width in pixels.
        height: Surface height in pixels.
        background: Color used by clear_rect(). None clears to transparent.
    """

    def __init__(
        self,
        painter: QPainter,
        width: float,
        height: float,
        background: QColor | None = None,
    ):
        self._painter = painter
        self.width = width
        self.height = height
        self._background = background
        self._path = QPainterPath()
        self._state = DrawingState()
        self._stack: list[DrawingState] = []

    # -- Style state (kept here; applied per draw call) --

    @property
    def stroke_style(self) -> str:
        return self._state.stroke_style

    @stroke_style.setter
    def stroke_style(self, value: str) -> None:
        self._state = replace(self._state, stroke_style=value)

    @property
    def fill_style(self) -> str:
        return self._state.fill_style

    @fill_style.setter
    def fill_style(self, value: str) -> None:
        self._state = replace(self._state, fill_style=value)

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        self._state = replace(self._state, line_width=value)

    @property
    def text_align(self) -> str:
        return self._state.text_align

    @text_align.setter
    def text_align(self, value: str) -> None:
        self._state = replace(self._state, text_align=value)

    @property
    def text_baseline(self) -> str:
        return self._state.text_baseline

    @text_baseline.setter
    def text_baseline(self, value: str) -> None:
        self._state = replace(self._state, text_baseline=value)

    def save(self) -> None:
        self._stack.append(self._state)
        self._painter.save()

    def restore(self) -> None:
        if self._stack:
            self._state = self._stack.pop()
            self._painter.restore()

    def _pen(self) -> QPen:
        pen = QPen(QColor(self._state.stroke_style))
        pen.setWidthF(float(self._state.line_width))
        return pen

    # -- Drawing --

    def clear_rect(self, x, y, w, h):
        rect = QRectF(x, y, w, h)
        if self._background is None:
            painter = self._painter
            mode = painter.compositionMode()
            painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
            painter.fillRect(rect, Qt.GlobalColor.transparent)
            painter.setCompositionMode(mode)
        else:
            self._painter.fillRect(rect, self._background)

    def begin_path(self):
        self._path = QPainterPath()

    def move_to(self, x, y):
        self._path.moveTo(QPointF(x, y))

    def line_to(self, x, y):
        self._path.lineTo(QPointF(x, y))

    def arc(self, x, y, radius, start_angle, end_angle):
        if abs(end_angle - start_angle) >= 2 * math.pi:
            self._path.addEllipse(QPointF(x, y), radius, radius)
            return
        # Qt angles are degrees, counter-clockwise on screen
        rect = QRectF(x - radius, y - radius, 2 * radius, 2 * radius)
        start = -math.degrees(start_angle)
        sweep = -math.degrees(end_angle - start_angle)
        self._path.arcMoveTo(rect, start)
        self._path.arcTo(rect, start, sweep)

    def stroke(self):
        self._painter.strokePath(self._path, self._pen())

    def fill(self):
        self._painter.fillPath(self._path, QBrush(QColor(self._state.fill_style)))

    def fill_rect(self, x, y, w, h):
        self._painter.fillRect(QRectF(x, y, w, h), QColor(self._state.fill_style))

    def stroke_rect(self, x, y, w, h):
        painter = self._painter
        painter.setPen(self._pen())
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(QRectF(x, y, w, h))

    def fill_text(self, text, x, y):
        painter = self._painter
        fm = QFontMetricsF(painter.font())

        align = self._state.text_align
        tw = fm.horizontalAdvance(text)
        if align == ALIGN_CENTER:
            x -= tw / 2
        elif align == ALIGN_RIGHT:
            x -= tw

        baseline = self._state.text_baseline
        if baseline == BASELINE_TOP:
            y += fm.ascent()
        elif baseline == BASELINE_MIDDLE:
            y += (fm.ascent() - fm.descent()) / 2
        elif baseline == BASELINE_BOTTOM:
            y -= fm.descent()

        painter.setPen(QColor(self._state.fill_style))
        painter.drawText(QPointF(x, y), text)
