"""
Interaction Controller
======================
Turns discrete input events into scene changes.

It is toolkit-agnostic: the Qt viewport translates its mouse, wheel and key
events into calls on this class. Every event that changes the scene calls
`request_render` exactly once before returning, so the drawing surface always
shows the latest state.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from cubeview.model.figure import Figure
from cubeview.model.scene import InteractionConfig, Scene

logger = logging.getLogger(__name__)

# Key names follow the DOM `KeyboardEvent.key` convention.
KEY_FORWARD = "ArrowUp"
KEY_BACKWARD = "ArrowDown"
KEY_TURN_LEFT = "ArrowLeft"
KEY_TURN_RIGHT = "ArrowRight"
KEY_LOOK_UP = "PageUp"
KEY_LOOK_DOWN = "PageDown"
KEY_STRAFE_LEFT = "a"
KEY_STRAFE_RIGHT = "d"


def normalize_key(key: str) -> str:
    """Single characters match case-insensitively."""
    return key.lower() if len(key) == 1 else key


class InteractionController:
    def __init__(
        self,
        scene: Scene,
        request_render: Callable[[], None],
        interaction: Optional[InteractionConfig] = None,
    ) -> None:
        self.scene = scene
        self.request_render = request_render
        self._interaction_override = interaction

        self.dragging: bool = False
        self.last_x: float = 0.0
        self.last_y: float = 0.0
        self.selected_index: int = 0
        self.active_keys: set[str] = set()

    @property
    def interaction(self) -> InteractionConfig:
        """Speeds in effect: the override if one was given, else the live scene config."""
        if self._interaction_override is not None:
            return self._interaction_override
        return self.scene.config.interaction

    # ------------------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------------------

    def select_figure(self, index: int) -> None:
        if not (0 <= index < len(self.scene.world)):
            raise IndexError(f"No figure at index {index} (world has {len(self.scene.world)}).")
        self.selected_index = index
        logger.debug(f"Selected figure {index}: {self.scene.world.figure(index).name}")

    def selected_figure(self) -> Optional[Figure]:
        if 0 <= self.selected_index < len(self.scene.world):
            return self.scene.world.figure(self.selected_index)
        return None

    # ------------------------------------------------------------------------------
    # Pointer
    # ------------------------------------------------------------------------------

    def pointer_down(self, x: float, y: float) -> None:
        self.dragging = True
        self.last_x = x
        self.last_y = y

    def pointer_up(self) -> None:
        self.dragging = False

    def pointer_leave(self) -> None:
        self.dragging = False

    def pointer_move(self, x: float, y: float, shift: bool = False) -> None:
        """Drag rotates the selected figure; with shift it translates it (screen-up = +Y)."""
        if not self.dragging:
            return

        dx = x - self.last_x
        dy = y - self.last_y
        self.last_x = x
        self.last_y = y

        figure = self.selected_figure()
        if figure is None:
            return

        cfg = self.interaction
        if shift:
            figure.move(dx * cfg.move_speed, -dy * cfg.move_speed)
        else:
            figure.rotate(dx * cfg.yaw_speed, dy * cfg.pitch_speed)
        self.request_render()

    def wheel(self, delta: float) -> None:
        """Positive delta (scroll up / away from the user) zooms in."""
        if delta == 0:
            return
        factor = self.interaction.zoom_in_factor if delta > 0 else self.interaction.zoom_out_factor
        self.scene.screen.zoom_by(factor)
        self.request_render()

    # ------------------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------------------

    def key_down(self, key: str) -> None:
        k = normalize_key(key)
        self.active_keys.add(k)

        camera = self.scene.camera
        cfg = self.interaction
        if k == KEY_FORWARD:
            camera.move_forward(cfg.camera_movement_speed)
        elif k == KEY_BACKWARD:
            camera.move_forward(-cfg.camera_movement_speed)
        elif k == KEY_TURN_LEFT:
            camera.rotate_yaw(cfg.camera_rotation_speed)
        elif k == KEY_TURN_RIGHT:
            camera.rotate_yaw(-cfg.camera_rotation_speed)
        elif k == KEY_LOOK_UP:
            camera.rotate_pitch(-cfg.camera_rotation_speed)
        elif k == KEY_LOOK_DOWN:
            camera.rotate_pitch(cfg.camera_rotation_speed)
        elif k == KEY_STRAFE_LEFT:
            camera.move_sideways(-cfg.camera_movement_speed)
        elif k == KEY_STRAFE_RIGHT:
            camera.move_sideways(cfg.camera_movement_speed)

        # Always re-render so the active-keys overlay stays current
        self.request_render()

    def key_up(self, key: str) -> None:
        self.active_keys.discard(normalize_key(key))
        self.request_render()
