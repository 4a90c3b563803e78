"""Statevector canvas: QWidget that paints the latest state vector.

Each paint event wraps the widget's QPainter in a QPainterSurface and
hands it to the plotter, so the chart always fills the current widget
size.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QColor
from PyQt6.QtWidgets import QWidget

from chart.plotter import StatevectorPlotter
from chart.qt_surface import QPainterSurface
from statevector import StateVector

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = QColor(255, 255, 255)
PLACEHOLDER_COLOR = QColor(140, 140, 150)


class StatevectorCanvas(QWidget):
    """Widget showing the magnitude/phase chart of one state vector."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.plotter = StatevectorPlotter()
        self._statevector: StateVector | None = None
        self.setMinimumSize(400, 300)

    @property
    def statevector(self) -> StateVector | None:
        return self._statevector

    def set_statevector(self, statevector: StateVector) -> None:
        """Replace the displayed state vector and schedule a repaint."""
        self._statevector = statevector
        self.update()

    def clear(self) -> None:
        self._statevector = None
        self.update()

    def set_padding(self, top=None, right=None, bottom=None, left=None) -> None:
        self.plotter.set_padding(top=top, right=right, bottom=bottom, left=left)
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        if self._statevector is None:
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            painter.setPen(PLACEHOLDER_COLOR)
            painter.drawText(
                self.rect(),
                Qt.AlignmentFlag.AlignCenter,
                "Statevector Plotter\nRun a program to plot its state",
            )
            painter.end()
            return

        self.plotter.surface = QPainterSurface(
            painter, self.width(), self.height(), background=BACKGROUND_COLOR,
        )
        try:
            self.plotter.plot(self._statevector)
        finally:
            painter.end()
            self.plotter.surface = None
