from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeyEvent, QMouseEvent, QPainter, QWheelEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from cubeview.app.controller import InteractionController
from cubeview.model.scene import Scene
from cubeview.render.renderer import RenderOptions, RenderStyle, render_eye_view_with_stats
from cubeview.render.qt_surface import QPainterSurface

logger = logging.getLogger(__name__)

# Qt key -> DOM-style key name used by the controller
QT_KEY_NAMES: dict[int, str] = {
    Qt.Key.Key_Up: "ArrowUp",
    Qt.Key.Key_Down: "ArrowDown",
    Qt.Key.Key_Left: "ArrowLeft",
    Qt.Key.Key_Right: "ArrowRight",
    Qt.Key.Key_PageUp: "PageUp",
    Qt.Key.Key_PageDown: "PageDown",
    Qt.Key.Key_Shift: "Shift",
}


def key_name(event: QKeyEvent) -> str:
    name = QT_KEY_NAMES.get(event.key())
    if name is not None:
        return name
    return event.text() or f"Key_{event.key()}"


class SceneViewport(QWidget):
    """
    Qt widget hosting the 3D view.

    Mouse, wheel and key events are forwarded to an InteractionController;
    every scene change repaints synchronously (`repaint`, not `update`).
    """
    frame_rendered = Signal(object)  # RenderStats

    def __init__(self, scene: Scene, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.scene = scene
        self.options = RenderOptions()
        self.render_style = RenderStyle()
        self.controller = InteractionController(scene, request_render=self.render_now)

        self.setMinimumSize(400, 300)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(False)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def render_now(self) -> None:
        self.options.active_keys = tuple(self.controller.active_keys)
        self.repaint()

    def set_show_legend(self, visible: bool) -> None:
        self.options.show_legend = visible
        self.render_now()

    def set_show_camera_info(self, visible: bool) -> None:
        self.options.show_camera_info = visible
        self.render_now()

    def set_depth_shading(self, enabled: bool) -> None:
        self.options.depth_shading = enabled
        self.render_now()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            surface = QPainterSurface(painter)
            stats = render_eye_view_with_stats(
                surface, self.scene.world, self.scene.camera, self.scene.screen, self.options, self.render_style
            )
        finally:
            painter.end()
        if stats is None:
            logger.error("Viewport could not paint: painter is not active.")
            return
        self.frame_rendered.emit(stats)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        w, h = self.width(), self.height()
        if w > 0 and h > 0:
            self.scene.screen.resize(w, h)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.controller.pointer_down(pos.x(), pos.y())
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        shift = bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier)
        self.controller.pointer_move(pos.x(), pos.y(), shift=shift)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.pointer_up()
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event) -> None:
        self.controller.pointer_leave()
        super().leaveEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        self.controller.wheel(event.angleDelta().y())
        event.accept()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        self.controller.key_down(key_name(event))
        event.accept()

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        if event.isAutoRepeat():
            return
        self.controller.key_up(key_name(event))
        event.accept()
