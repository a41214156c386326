"""Stopwatch glyph drawn with QPainter (window icon + heading icon)."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QIcon, QPainter, QPen, QPixmap


def make_timer_pixmap(size: int = 48, colour: str = "#111827") -> QPixmap:
    """Outline stopwatch: a dial, a crown on top and one hand."""
    pixmap = QPixmap(size, size)
    pixmap.fill(QColor(0, 0, 0, 0))

    p = QPainter(pixmap)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    stroke = max(2.0, size / 12)
    pen = QPen(QColor(colour), stroke)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    p.setPen(pen)
    p.setBrush(Qt.BrushStyle.NoBrush)

    # dial sits in the lower part so the crown fits above it
    r = size * 0.36
    cx, cy = size / 2, size * 0.58
    p.drawEllipse(QRectF(cx - r, cy - r, r * 2, r * 2))

    crown_y = size * 0.1
    p.drawLine(QPointF(cx - size * 0.12, crown_y), QPointF(cx + size * 0.12, crown_y))
    p.drawLine(QPointF(cx, crown_y), QPointF(cx, cy - r))

    p.drawLine(QPointF(cx, cy), QPointF(cx + r * 0.5, cy - r * 0.5))
    p.end()
    return pixmap


def make_timer_icon(colour: str = "#111827") -> QIcon:
    # 256 px keeps the dock/taskbar rendering crisp
    return QIcon(make_timer_pixmap(256, colour))
