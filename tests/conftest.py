from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Any

import pytest

# Qt must not need a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from cubeview.model.camera import CameraEye
from cubeview.model.figure import Figure
from cubeview.model.primitives import ORIGIN
from cubeview.model.screen import ScreenSpace
from cubeview.model.world import World


@dataclass
class RecordingSurface:
    """DrawingSurface that records every call instead of drawing."""
    ready: bool = True
    calls: list[tuple[str, Any]] = field(default_factory=list)

    def is_ready(self) -> bool:
        return self.ready

    def clear(self, width, height, color) -> None:
        self.calls.append(("clear", (width, height, color)))

    def draw_line(self, p1, p2, color, width) -> None:
        self.calls.append(("line", (p1, p2, color, width)))

    def fill_polygon(self, points, color) -> None:
        self.calls.append(("polygon", (tuple(points), color)))

    def fill_circle(self, center, radius, color) -> None:
        self.calls.append(("circle", (center, radius, color)))

    def fill_text(self, text, position, color, size) -> None:
        self.calls.append(("text", (text, position, color, size)))

    def of_kind(self, kind: str) -> list[Any]:
        return [args for name, args in self.calls if name == kind]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def camera() -> CameraEye:
    return CameraEye(position=ORIGIN, fov_y=math.radians(60), near=0.1, far=1e6)


@pytest.fixture
def screen() -> ScreenSpace:
    return ScreenSpace(800, 600, zoom=1.0)


@pytest.fixture
def cube() -> Figure:
    return Figure.cube(120, 0, 0, 400)


@pytest.fixture
def world(cube: Figure) -> World:
    w = World()
    w.add_figure(cube)
    return w


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
