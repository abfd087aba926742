"""
Drawing surfaces.

The render walk only talks to the `DrawingSurface` protocol, so the core never
imports a GUI toolkit. `cubeview.render.qt_surface.QPainterSurface` adapts a
Qt `QPainter` to it.
"""
from __future__ import annotations

from typing import Protocol, Sequence

from cubeview.model.primitives import Color, Vertex2D


class DrawingSurface(Protocol):
    def is_ready(self) -> bool: ...
    def clear(self, width: int, height: int, color: Color) -> None: ...
    def draw_line(self, p1: Vertex2D, p2: Vertex2D, color: Color, width: float) -> None: ...
    def fill_polygon(self, points: Sequence[Vertex2D], color: Color) -> None: ...
    def fill_circle(self, center: Vertex2D, radius: float, color: Color) -> None: ...
    def fill_text(self, text: str, position: Vertex2D, color: Color, size: int) -> None: ...
