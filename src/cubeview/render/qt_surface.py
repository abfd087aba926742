"""
QPainter-backed DrawingSurface (widget, QImage, printer...).
"""
from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen, QPolygonF

from cubeview.model.primitives import Color, Vertex2D


def to_qcolor(color: Color) -> QColor:
    r, g, b, a = color
    return QColor(r, g, b, a)


class QPainterSurface:
    """DrawingSurface backed by an active QPainter."""

    def __init__(self, painter: QPainter, font_family: str = "Arial") -> None:
        self.painter = painter
        self.font_family = font_family
        if self.is_ready():
            self.painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    def is_ready(self) -> bool:
        return self.painter is not None and self.painter.isActive()

    def clear(self, width: int, height: int, color: Color) -> None:
        self.painter.fillRect(QRectF(0, 0, width, height), to_qcolor(color))

    def draw_line(self, p1: Vertex2D, p2: Vertex2D, color: Color, width: float) -> None:
        pen = QPen(to_qcolor(color), width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        self.painter.setPen(pen)
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawLine(QPointF(p1.x, p1.y), QPointF(p2.x, p2.y))

    def fill_polygon(self, points: Sequence[Vertex2D], color: Color) -> None:
        polygon = QPolygonF([QPointF(p.x, p.y) for p in points])
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(to_qcolor(color)))
        self.painter.drawPolygon(polygon)

    def fill_circle(self, center: Vertex2D, radius: float, color: Color) -> None:
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(to_qcolor(color)))
        self.painter.drawEllipse(QPointF(center.x, center.y), radius, radius)

    def fill_text(self, text: str, position: Vertex2D, color: Color, size: int) -> None:
        self.painter.setFont(QFont(self.font_family, size))
        self.painter.setPen(to_qcolor(color))
        self.painter.drawText(QPointF(position.x, position.y), text)
