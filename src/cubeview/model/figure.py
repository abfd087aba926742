"""
3D Figure.

A figure keeps its reference geometry (`base`) separate from the transformed
`vertices` used for rendering. `vertices` is always recomputed from `base`,
never from its own previous value, so repeated rotations do not accumulate
floating-point error.

Note: a figure has no knowledge of projection or drawing.
"""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

import numpy as np

from cubeview.model.geometry import GeometryDescriptor, cube_geometry
from cubeview.model.primitives import ORIGIN, Color, Edge, Face, Vertex3D
from cubeview.model.world_space import rotate_yaw_pitch

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Figure:
    def __init__(
        self,
        geometry: GeometryDescriptor,
        center: Vertex3D = ORIGIN,
        position: Vertex3D = ORIGIN,
        yaw: float = 0.0,
        pitch: float = 0.0,
        name: str = "figure",
    ) -> None:
        self.name = name
        self.geometry = geometry

        self.base: tuple[Vertex3D, ...] = tuple(geometry.vertices)
        self.center: Vertex3D = center
        self.yaw: float = yaw
        self.pitch: float = pitch
        self.position: Vertex3D = position

        # Initial pose, restored by reset()
        self._initial_pose = (yaw, pitch, position)

        self.vertices: list[Vertex3D] = []
        self.update_transform()
        self._warn_dangling_topology()

    def __repr__(self) -> str:
        return (
            f"Figure(name={self.name!r}, vertices={len(self.base)}, edges={len(self.edges)}, "
            f"faces={len(self.faces)}, position={self.position}, yaw={self.yaw:.3f}, pitch={self.pitch:.3f})"
        )

    # ------------------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------------------

    @classmethod
    def cube(
        cls,
        size: float,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        yaw: float = 0.0,
        pitch: float = 0.0,
        with_faces: bool = True,
        name: Optional[str] = None,
    ) -> Figure:
        """A cube of edge `size` rotating around its own center, placed at (x, y, z)."""
        return cls(
            geometry=cube_geometry(size, with_faces=with_faces),
            center=ORIGIN,
            position=Vertex3D(x, y, z),
            yaw=yaw,
            pitch=pitch,
            name=name or f"cube-{size:g}",
        )

    # ------------------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------------------

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self.geometry.edges

    @property
    def faces(self) -> tuple[Face, ...]:
        return self.geometry.faces

    @property
    def face_colors(self) -> tuple[Color, ...]:
        return self.geometry.face_colors

    @property
    def has_edges(self) -> bool:
        return self.geometry.has_edges

    @property
    def has_faces(self) -> bool:
        return self.geometry.has_faces

    def is_valid_index(self, index: int) -> bool:
        """Negative indices are invalid too (no wrap-around)."""
        return 0 <= index < len(self.vertices)

    def _warn_dangling_topology(self) -> None:
        for a, b in self.edges:
            if not (self.is_valid_index(a) and self.is_valid_index(b)):
                logger.warning(
                    f"Figure '{self.name}': edge [{a}, {b}] references non-existent vertices "
                    f"(total vertices: {len(self.base)}); it will be skipped."
                )
        for face in self.faces:
            if not all(self.is_valid_index(i) for i in face):
                logger.warning(
                    f"Figure '{self.name}': face {list(face)} references non-existent vertices "
                    f"(total vertices: {len(self.base)}); it will be skipped."
                )

    # ------------------------------------------------------------------------------
    # Transform
    # ------------------------------------------------------------------------------

    def update_transform(self) -> None:
        """Recompute `vertices` from `base`: rotate (yaw, then pitch) around `center`, then translate."""
        self.vertices = [
            rotate_yaw_pitch(v, self.center, self.yaw, self.pitch) + self.position
            for v in self.base
        ]

    def move(self, dx: float, dy: float, dz: float = 0.0) -> None:
        self.position = self.position + Vertex3D(dx, dy, dz)
        self.update_transform()

    def rotate(self, d_yaw: float, d_pitch: float) -> None:
        self.yaw += d_yaw
        self.pitch += d_pitch
        self.update_transform()

    def set_position(self, x: float, y: float, z: float) -> None:
        self.position = Vertex3D(x, y, z)
        self.update_transform()

    def set_rotation(self, yaw: float, pitch: float) -> None:
        self.yaw = yaw
        self.pitch = pitch
        self.update_transform()

    def reset(self) -> None:
        """Restore the pose the figure was constructed with."""
        self.yaw, self.pitch, self.position = self._initial_pose
        self.update_transform()

    # ------------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------------

    def get_vertices(self) -> list[Vertex3D]:
        return list(self.vertices)

    def vertex_array(self) -> npt.NDArray[np.float64]:
        """Current vertices as an (N, 3) array."""
        if not self.vertices:
            return np.empty((0, 3), dtype=np.float64)
        return np.stack([v.to_array() for v in self.vertices])

    def get_center(self) -> Vertex3D:
        """Mean of the current vertices (origin for an empty figure)."""
        if not self.vertices:
            return ORIGIN
        mean = self.vertex_array().mean(axis=0)
        return Vertex3D(float(mean[0]), float(mean[1]), float(mean[2]))
