"""
Render walk
===========
Renders a World as seen by a CameraEye onto a DrawingSurface.

The world only holds data, the camera only projects, the screen only maps
coordinates. This module coordinates them:

1. clear the surface,
2. project every vertex of a figure once (camera -> NDC -> pixels),
3. fill faces back-to-front (painter's algorithm, by average depth),
4. stroke edges whose endpoints are both visible,
5. draw the vertex markers that land inside the viewport, shaded by
   relative depth,
6. draw the text overlays.

Edges and faces only need their vertices to be in front of the camera; the
surface clips them to the viewport. Vertex markers are culled in pixel space
(`ScreenSpace.contains`), so zooming in magnifies the scene instead of
dropping geometry that leaves the view.

Nothing raises for geometric reasons: invisible points, non-finite values and
dangling indices are skipped. The only failure is a missing surface, which is
reported to the caller by returning False.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Optional, Sequence

from cubeview.model.camera import CameraEye
from cubeview.model.figure import Figure
from cubeview.model.primitives import Color, Face, Vertex2D, lerp_color
from cubeview.model.screen import ScreenSpace
from cubeview.model.world import World
from cubeview.render.surface import DrawingSurface

logger = logging.getLogger(__name__)

LEGEND_TEXT = "Drag: rotate | Shift+drag: move | Wheel: zoom | Arrows/PgUp/PgDn/A/D: camera"


@dataclass(frozen=True)
class RenderStyle:
    background: Color = (255, 255, 255, 255)
    edge_color: Color = (0, 128, 255, 204)
    edge_width: float = 2.0
    near_vertex_color: Color = (255, 0, 128, 230)
    far_vertex_color: Color = (90, 90, 140, 90)
    vertex_radius: float = 4.0
    text_color: Color = (0, 0, 0, 255)
    text_size: int = 9


@dataclass
class RenderOptions:
    draw_faces: bool = True
    draw_vertices: bool = True
    depth_shading: bool = True
    show_legend: bool = True
    show_camera_info: bool = False
    active_keys: Sequence[str] = ()
    legend_text: str = LEGEND_TEXT


@dataclass
class RenderStats:
    figures: int = 0
    faces_drawn: int = 0
    faces_skipped: int = 0
    edges_drawn: int = 0
    edges_skipped: int = 0
    vertices_drawn: int = 0
    vertices_culled: int = 0
    drawn_faces: list[tuple[str, int]] = field(default_factory=list)  # (figure name, face index) in draw order


@dataclass(frozen=True)
class ProjectedVertex:
    normalized: Vertex2D
    pixel: Vertex2D
    depth: float
    on_screen: bool = True


# -------------------------------------------------------------------------------
# Pipeline steps
# -------------------------------------------------------------------------------

def project_figure(figure: Figure, camera: CameraEye, screen: ScreenSpace) -> list[Optional[ProjectedVertex]]:
    """Project every vertex once. Entries are None for vertices the camera rejects."""
    aspect = screen.aspect
    cache: list[Optional[ProjectedVertex]] = []
    for vertex in figure.vertices:
        projected = camera.project(vertex, aspect)
        if projected is None:
            cache.append(None)
            continue
        pixel = screen.to_pixels(projected.normalized)
        cache.append(ProjectedVertex(
            normalized=projected.normalized,
            pixel=pixel,
            depth=projected.depth,
            on_screen=screen.contains(pixel),
        ))
    return cache


def _lookup(cache: Sequence[Optional[ProjectedVertex]], index: int) -> Optional[ProjectedVertex]:
    if 0 <= index < len(cache):
        return cache[index]
    return None


def face_depth(face: Face, cache: Sequence[Optional[ProjectedVertex]]) -> Optional[float]:
    """Average depth of the face's visible vertices, or None if none is visible."""
    depths = [p.depth for p in (_lookup(cache, i) for i in face) if p is not None]
    if not depths:
        return None
    return sum(depths) / len(depths)


def faces_back_to_front(faces: Sequence[Face], cache: Sequence[Optional[ProjectedVertex]]) -> list[int]:
    """Indices of faces with at least one visible vertex, farthest first (stable)."""
    depths = [(i, face_depth(face, cache)) for i, face in enumerate(faces)]
    ordered = sorted(((i, d) for i, d in depths if d is not None), key=lambda t: t[1], reverse=True)
    return [i for i, _ in ordered]


def vertex_color(depth: float, d_min: float, d_max: float, style: RenderStyle) -> Color:
    """Near style at d_min, far style at d_max. Degenerate range -> near style."""
    span = d_max - d_min
    if span <= 0 or not math.isfinite(span):
        return style.near_vertex_color
    return lerp_color(style.near_vertex_color, style.far_vertex_color, (depth - d_min) / span)


def draw_figure(
    surface: DrawingSurface,
    figure: Figure,
    camera: CameraEye,
    screen: ScreenSpace,
    options: RenderOptions,
    style: RenderStyle,
    stats: RenderStats,
) -> None:
    cache = project_figure(figure, camera, screen)

    # Faces, back to front
    if options.draw_faces and figure.has_faces:
        order = faces_back_to_front(figure.faces, cache)
        stats.faces_skipped += len(figure.faces) - len(order)
        for face_index in order:
            points = [_lookup(cache, i) for i in figure.faces[face_index]]
            if any(p is None for p in points):
                stats.faces_skipped += 1
                continue
            surface.fill_polygon([p.pixel for p in points], figure.face_colors[face_index])
            stats.faces_drawn += 1
            stats.drawn_faces.append((figure.name, face_index))

    # Edges
    for a, b in figure.edges:
        p1 = _lookup(cache, a)
        p2 = _lookup(cache, b)
        if p1 is None or p2 is None:
            stats.edges_skipped += 1
            continue
        surface.draw_line(p1.pixel, p2.pixel, style.edge_color, style.edge_width)
        stats.edges_drawn += 1

    # Vertex markers
    visible = [p for p in cache if p is not None and p.on_screen]
    stats.vertices_culled += len(cache) - len(visible)
    if not options.draw_vertices or not visible:
        return
    d_min = min(p.depth for p in visible)
    d_max = max(p.depth for p in visible)
    for p in visible:
        if options.depth_shading:
            color = vertex_color(p.depth, d_min, d_max, style)
        else:
            color = style.near_vertex_color
        surface.fill_circle(p.pixel, style.vertex_radius, color)
        stats.vertices_drawn += 1


def camera_readout(camera: CameraEye, screen: ScreenSpace) -> str:
    pos = camera.position
    return (
        f"Camera x={pos.x:.1f} y={pos.y:.1f} z={pos.z:.1f} | "
        f"yaw {math.degrees(camera.yaw):.1f}° pitch {math.degrees(camera.pitch):.1f}° | "
        f"zoom {screen.zoom:.2f}"
    )


def draw_overlay(surface: DrawingSurface, camera: CameraEye, screen: ScreenSpace,
                 options: RenderOptions, style: RenderStyle) -> None:
    line_height = style.text_size * 2
    if options.show_camera_info:
        surface.fill_text(camera_readout(camera, screen), Vertex2D(10, line_height), style.text_color, style.text_size)
    if options.active_keys:
        keys = ", ".join(sorted(options.active_keys))
        surface.fill_text(f"Keys: {keys}", Vertex2D(10, 2 * line_height), style.text_color, style.text_size)
    if options.show_legend:
        surface.fill_text(options.legend_text, Vertex2D(10, screen.height - 10), style.text_color, style.text_size)


# -------------------------------------------------------------------------------
# Entry points
# -------------------------------------------------------------------------------

def render_eye_view_with_stats(
    surface: Optional[DrawingSurface],
    world: World,
    camera: CameraEye,
    screen: ScreenSpace,
    options: Optional[RenderOptions] = None,
    style: Optional[RenderStyle] = None,
) -> Optional[RenderStats]:
    """Same as `render_eye_view`, returning what was drawn (None if nothing could be)."""
    if surface is None or not surface.is_ready():
        logger.error("Drawing surface not available; frame not rendered.")
        return None

    options = options or RenderOptions()
    style = style or RenderStyle()
    stats = RenderStats()

    surface.clear(screen.width, screen.height, style.background)
    for figure in world:
        draw_figure(surface, figure, camera, screen, options, style, stats)
        stats.figures += 1
    draw_overlay(surface, camera, screen, options, style)

    logger.debug(
        f"Frame: {stats.figures} figure(s), {stats.faces_drawn} face(s), {stats.edges_drawn} edge(s), "
        f"{stats.vertices_drawn} vertex marker(s); skipped {stats.faces_skipped} face(s), "
        f"{stats.edges_skipped} edge(s), culled {stats.vertices_culled} vertex(es)."
    )
    return stats


def render_eye_view(
    surface: Optional[DrawingSurface],
    world: World,
    camera: CameraEye,
    screen: ScreenSpace,
    options: Optional[RenderOptions] = None,
    style: Optional[RenderStyle] = None,
) -> bool:
    """
    Render `world` from `camera` onto `surface`.

    Returns:
        True if the frame was drawn, False if the surface is missing or not
        ready (nothing is drawn in that case).
    """
    return render_eye_view_with_stats(surface, world, camera, screen, options, style) is not None
