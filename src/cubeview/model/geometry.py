"""
Geometry descriptors.

A figure's shape (vertices, edges and optional faces with colors) is plain data
handed to `Figure` at construction. New shapes are new descriptor factories,
not new Figure subclasses.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from cubeview.model.primitives import Color, Edge, Face, Vertex3D

DEFAULT_FACE_COLOR: Color = (160, 196, 255, 90)

CUBE_EDGES: tuple[Edge, ...] = (
    (0, 1), (1, 3), (3, 2), (2, 0),  # front
    (4, 5), (5, 7), (7, 6), (6, 4),  # back
    (0, 4), (1, 5), (2, 6), (3, 7),  # connect front and back
)

CUBE_FACES: tuple[Face, ...] = (
    (0, 1, 3, 2),  # front  (z-)
    (5, 4, 6, 7),  # back   (z+)
    (4, 0, 2, 6),  # left   (x-)
    (1, 5, 7, 3),  # right  (x+)
    (4, 5, 1, 0),  # bottom (y-)
    (2, 3, 7, 6),  # top    (y+)
)

CUBE_FACE_COLORS: tuple[Color, ...] = (
    (255, 99, 71, 90),
    (65, 105, 225, 90),
    (60, 179, 113, 90),
    (255, 215, 0, 90),
    (186, 85, 211, 90),
    (64, 224, 208, 90),
)


@dataclass(frozen=True)
class GeometryDescriptor:
    """Model-space geometry of a figure."""
    vertices: tuple[Vertex3D, ...]
    edges: tuple[Edge, ...] = ()
    faces: tuple[Face, ...] = ()
    face_colors: tuple[Color, ...] = field(default=())

    def __post_init__(self) -> None:
        for face in self.faces:
            if len(face) < 3:
                raise ValueError(f"A face needs at least 3 vertices, got {face}.")
        # one color per face, padded with the default
        if len(self.face_colors) < len(self.faces):
            padding = (DEFAULT_FACE_COLOR,) * (len(self.faces) - len(self.face_colors))
            object.__setattr__(self, "face_colors", tuple(self.face_colors) + padding)

    @property
    def has_edges(self) -> bool:
        return len(self.edges) > 0

    @property
    def has_faces(self) -> bool:
        return len(self.faces) > 0


def cube_geometry(size: float, with_faces: bool = True) -> GeometryDescriptor:
    """
    Axis-aligned cube with edge length `size`, centered on the model origin.

    Vertex order: front face (z-) bottom-left, bottom-right, top-left,
    top-right, then the same four for the back face (z+).
    """
    if size <= 0:
        raise ValueError(f"Cube size must be positive, got {size}.")
    h = size / 2.0
    vertices = (
        Vertex3D(-h, -h, -h),
        Vertex3D(h, -h, -h),
        Vertex3D(-h, h, -h),
        Vertex3D(h, h, -h),
        Vertex3D(-h, -h, h),
        Vertex3D(h, -h, h),
        Vertex3D(-h, h, h),
        Vertex3D(h, h, h),
    )
    if not with_faces:
        return GeometryDescriptor(vertices=vertices, edges=CUBE_EDGES)
    return GeometryDescriptor(
        vertices=vertices,
        edges=CUBE_EDGES,
        faces=CUBE_FACES,
        face_colors=CUBE_FACE_COLORS,
    )
