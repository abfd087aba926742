"""
Screen space: mapping between normalized device coordinates and pixels.
"""
from __future__ import annotations

from cubeview.model.primitives import Vertex2D

MIN_ZOOM: float = 0.2
MAX_ZOOM: float = 5.0


class ScreenSpace:
    """
    Viewport of `width` x `height` pixels with a zoom factor.

    Normalized Y points up, pixel Y points down. The scale is `height / 2`
    for both axes so that zoom is isotropic relative to the vertical extent.
    """

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        zoom: float = 1.0,
        min_zoom: float = MIN_ZOOM,
        max_zoom: float = MAX_ZOOM,
    ) -> None:
        if not (0.0 < min_zoom <= max_zoom):
            raise ValueError(f"Invalid zoom range [{min_zoom}, {max_zoom}].")
        if zoom <= 0:
            raise ValueError(f"Zoom must be positive, got {zoom}.")
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.zoom: float = float(zoom)
        self.width: int = 1
        self.height: int = 1
        self.resize(width, height)

    def __repr__(self) -> str:
        return f"ScreenSpace(width={self.width}, height={self.height}, zoom={self.zoom:.3f})"

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def center(self) -> Vertex2D:
        return Vertex2D(self.width / 2, self.height / 2)

    @property
    def scale(self) -> float:
        """Pixels per normalized unit."""
        return (self.height / 2) * self.zoom

    def resize(self, width: int, height: int) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"Screen size must be positive, got {width}x{height}.")
        self.width = int(width)
        self.height = int(height)

    def zoom_by(self, factor: float) -> float:
        """Multiply the zoom by `factor`, clamped to [min_zoom, max_zoom]. Returns the new zoom."""
        if factor <= 0:
            raise ValueError(f"Zoom factor must be positive, got {factor}.")
        self.zoom = max(self.min_zoom, min(self.max_zoom, self.zoom * factor))
        return self.zoom

    def to_pixels(self, n: Vertex2D) -> Vertex2D:
        """Normalized -> pixel coordinates (origin at the top-left corner)."""
        s = self.scale
        return Vertex2D(self.width / 2 + n.x * s, self.height / 2 - n.y * s)

    def to_normalized(self, p: Vertex2D) -> Vertex2D:
        """Pixel -> normalized coordinates. Exact inverse of `to_pixels`."""
        s = self.scale
        return Vertex2D((p.x - self.width / 2) / s, (self.height / 2 - p.y) / s)

    def contains(self, p: Vertex2D, margin: float = 0.0) -> bool:
        """Is the pixel point inside the viewport (plus margin)?"""
        return (-margin <= p.x <= self.width + margin) and (-margin <= p.y <= self.height + margin)
