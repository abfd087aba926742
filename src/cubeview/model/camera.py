"""
Camera Eye
==========
The "eye" looking at the world: its position, orientation, field of view and
the math for projecting 3D points to normalized device coordinates (NDC).

The camera does not draw anything. `render_eye_view` uses a camera instance to
render a whole `World`, which allows the same camera to view several worlds
and several cameras to view the same world.

Clipping policy
---------------
The camera rejects points outside the near/far range and points whose
projection is not finite. It does NOT clip NDC to [-1, 1]: lines and faces
are clipped by the drawing surface, and vertex markers are culled in pixel
space by `ScreenSpace.contains`, where zoom is known.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from cubeview.model.primitives import ORIGIN, Vertex2D, Vertex3D
from cubeview.model.world_space import rotate_yaw_pitch

# Pitch is kept just under +-90 deg so the view direction never flips over.
PITCH_LIMIT: float = math.pi / 2 - 1e-3


@dataclass(frozen=True)
class ProjectedPoint:
    """A projected vertex: NDC coordinates plus camera-relative depth."""
    x: float
    y: float
    depth: float

    @property
    def normalized(self) -> Vertex2D:
        return Vertex2D(self.x, self.y)


class CameraEye:
    def __init__(
        self,
        position: Vertex3D = ORIGIN,
        fov_y: float = math.radians(60.0),
        near: float = 0.1,
        far: float = 1e6,
        yaw: float = 0.0,
        pitch: float = 0.0,
    ) -> None:
        self.position: Vertex3D = position
        self.yaw: float = yaw
        self.pitch: float = max(-PITCH_LIMIT, min(PITCH_LIMIT, pitch))

        self._fov_y = 0.0
        self._near = 0.0
        self._far = 0.0
        self.fov_y = fov_y
        self.set_clip_planes(near, far)

    def __repr__(self) -> str:
        return (
            f"CameraEye(position={self.position}, yaw={self.yaw:.3f}, pitch={self.pitch:.3f}, "
            f"fov_y={self._fov_y:.3f}, near={self._near:g}, far={self._far:g})"
        )

    # ------------------------------------------------------------------------------
    # Frustum parameters
    # ------------------------------------------------------------------------------

    @property
    def fov_y(self) -> float:
        """Vertical field of view in radians."""
        return self._fov_y

    @fov_y.setter
    def fov_y(self, value: float) -> None:
        if not (0.0 < value < math.pi):
            raise ValueError(f"fov_y must be in (0, pi), got {value}.")
        self._fov_y = float(value)

    @property
    def near(self) -> float:
        return self._near

    @property
    def far(self) -> float:
        return self._far

    def set_clip_planes(self, near: float, far: float) -> None:
        if not (0.0 < near < far):
            raise ValueError(f"Clip planes must satisfy 0 < near < far, got near={near}, far={far}.")
        self._near = float(near)
        self._far = float(far)

    # ------------------------------------------------------------------------------
    # Projection
    # ------------------------------------------------------------------------------

    def to_camera_space(self, vertex: Vertex3D) -> Vertex3D:
        """Express a world point in the camera frame (camera at origin looking down +Z)."""
        relative = vertex - self.position
        if self.yaw == 0.0 and self.pitch == 0.0:
            return relative
        return rotate_yaw_pitch(relative, ORIGIN, -self.yaw, -self.pitch)

    def project(self, vertex: Vertex3D, aspect: float) -> Optional[ProjectedPoint]:
        """
        Project a world vertex to NDC, keeping its camera-relative depth.

        Args:
            vertex: The 3D vertex in world space.
            aspect: Viewport aspect ratio (width / height).

        Returns:
            The projected point, or None when the vertex is not visible
            (outside near/far or numerically degenerate).
        """
        p = self.to_camera_space(vertex)

        # Also rejects NaN depth: every comparison with NaN is False.
        if not (self._near < p.z < self._far):
            return None

        t = math.tan(self._fov_y / 2)
        xn = (p.x / (p.z * t)) / aspect
        yn = p.y / (p.z * t)

        if not (math.isfinite(xn) and math.isfinite(yn)):
            return None

        return ProjectedPoint(x=xn, y=yn, depth=p.z)

    def project_norm(self, vertex: Vertex3D, aspect: float) -> Optional[Vertex2D]:
        """World -> NDC, or None if not visible."""
        projected = self.project(vertex, aspect)
        if projected is None:
            return None
        return projected.normalized

    # ------------------------------------------------------------------------------
    # Motion
    # ------------------------------------------------------------------------------

    def forward(self) -> Vertex3D:
        """Unit view direction in world space."""
        cos_p = math.cos(self.pitch)
        return Vertex3D(
            -math.sin(self.yaw) * cos_p,
            -math.sin(self.pitch),
            math.cos(self.yaw) * cos_p,
        )

    def right(self) -> Vertex3D:
        """Unit direction that maps to screen-right, kept horizontal."""
        return Vertex3D(math.cos(self.yaw), 0.0, math.sin(self.yaw))

    def rotate_yaw(self, delta: float) -> None:
        """Positive delta turns the view to the left."""
        self.yaw += delta

    def rotate_pitch(self, delta: float) -> None:
        """Positive delta tilts the view down."""
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch + delta))

    def move_forward(self, distance: float) -> None:
        self.position = self.position + self.forward() * distance

    def move_sideways(self, distance: float) -> None:
        self.position = self.position + self.right() * distance

    def move_up(self, distance: float) -> None:
        self.position = self.position + Vertex3D(0.0, distance, 0.0)
