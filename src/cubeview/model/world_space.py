"""
World space utilities for 3D transformations.

Rotations around an arbitrary pivot. All functions are pure.
"""
from __future__ import annotations

import math

from cubeview.model.primitives import Vertex3D


def rotate_y(point: Vertex3D, pivot: Vertex3D, angle: float) -> Vertex3D:
    """
    Rotate a point around the Y axis passing through `pivot` (yaw).

    Args:
        point: Point to rotate.
        pivot: Center of rotation.
        angle: Angle in radians.

    Returns:
        The rotated point. The Y coordinate is unchanged.
    """
    sin = math.sin(angle)
    cos = math.cos(angle)

    tx = point.x - pivot.x
    tz = point.z - pivot.z

    return Vertex3D(
        x=tx * cos - tz * sin + pivot.x,
        y=point.y,
        z=tx * sin + tz * cos + pivot.z,
    )


def rotate_x(point: Vertex3D, pivot: Vertex3D, angle: float) -> Vertex3D:
    """
    Rotate a point around the X axis passing through `pivot` (pitch).

    Args:
        point: Point to rotate.
        pivot: Center of rotation.
        angle: Angle in radians.

    Returns:
        The rotated point. The X coordinate is unchanged.
    """
    sin = math.sin(angle)
    cos = math.cos(angle)

    ty = point.y - pivot.y
    tz = point.z - pivot.z

    return Vertex3D(
        x=point.x,
        y=ty * cos - tz * sin + pivot.y,
        z=ty * sin + tz * cos + pivot.z,
    )


def rotate_yaw_pitch(point: Vertex3D, pivot: Vertex3D, yaw: float, pitch: float) -> Vertex3D:
    """Yaw (Y axis) first, then pitch (X axis). The two do not commute."""
    return rotate_x(rotate_y(point, pivot, yaw), pivot, pitch)

