"""Shared UI widgets: the busy overlay shown over the chart while a run is in flight."""

import math

from PyQt6.QtCore import Qt, QTimer, QPointF, QRectF
from PyQt6.QtGui import QPainter, QPen, QBrush, QColor, QFont
from PyQt6.QtWidgets import QWidget


# ---------------------------------------------------------------------------
# LoadingOverlay
# ---------------------------------------------------------------------------

class LoadingOverlay(QWidget):
    """Translucent overlay with a phase dot circling a unit circle."""

    PERIOD = 1.6     # seconds per revolution
    RADIUS = 28
    TRAIL = 10       # number of fading trail dots

    def __init__(self, parent=None):
        super().__init__(parent)
        self.message = "Simulating..."
        self.t = 0.0
        self._timer = QTimer()
        self._timer.setInterval(16)  # ~60 fps
        self._timer.timeout.connect(self._tick)
        self.hide()

    def start(self, message="Simulating..."):
        self.message = message
        self.t = 0.0
        if self.parentWidget():
            self.resize(self.parentWidget().size())
        self.show()
        self.raise_()
        self._timer.start()

    def stop(self):
        self._timer.stop()
        self.hide()

    def _tick(self):
        self.t += 0.016
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        w, h = self.width(), self.height()

        painter.fillRect(self.rect(), QColor(255, 255, 255, 170))

        cx, cy = w / 2, h / 2 - 15

        # Unit circle and axes
        ring_pen = QPen(QColor(0, 7, 45, 90))
        ring_pen.setWidthF(1.5)
        painter.setPen(ring_pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QPointF(cx, cy), self.RADIUS, self.RADIUS)
        painter.drawLine(QPointF(cx - self.RADIUS - 6, cy), QPointF(cx + self.RADIUS + 6, cy))

        # Phase dot with a fading trail, counter-clockwise like a phase
        painter.setPen(Qt.PenStyle.NoPen)
        angle = 2 * math.pi * self.t / self.PERIOD
        for i in range(self.TRAIL, -1, -1):
            a = angle - i * 0.18
            alpha = int(255 * (1 - i / (self.TRAIL + 1)))
            painter.setBrush(QBrush(QColor(0, 119, 190, alpha)))
            r = 5 - 3 * i / self.TRAIL
            painter.drawEllipse(
                QPointF(cx + self.RADIUS * math.cos(a), cy - self.RADIUS * math.sin(a)),
                r, r,
            )

        painter.setPen(QColor(0, 7, 45, 220))
        font = QFont()
        font.setPointSizeF(13)
        font.setBold(True)
        painter.setFont(font)
        text_rect = QRectF(0, cy + self.RADIUS + 16, w, 30)
        painter.drawText(
            text_rect,
            Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
            self.message,
        )

        painter.end()
