"""
Geometric Primitives.

Immutable value types shared by the whole pipeline. Every transform produces
new instances; nothing here is mutated in place.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

# Pair of vertex indices, e.g. (0, 1) means "line from vertex 0 to vertex 1".
Edge = Tuple[int, int]

# Ordered vertex indices of a planar polygon (>= 3), counter-clockwise from outside.
Face = Tuple[int, ...]

# RGBA, each channel 0..255.
Color = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Vertex3D:
    """A point in 3D world space."""
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Vertex3D) -> Vertex3D:
        return Vertex3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vertex3D) -> Vertex3D:
        return Vertex3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vertex3D:
        return Vertex3D(self.x * scalar, self.y * scalar, self.z * scalar)

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def distance_to(self, other: Vertex3D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


ORIGIN = Vertex3D(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Vertex2D:
    """A point on a 2D plane (normalized device coordinates or pixels)."""
    x: float
    y: float


def lerp_color(near: Color, far: Color, t: float) -> Color:
    """Linear interpolation between two RGBA colors, t clamped to [0, 1]."""
    t = min(1.0, max(0.0, t))
    return tuple(int(round(a + (b - a) * t)) for a, b in zip(near, far))  # type: ignore[return-value]
