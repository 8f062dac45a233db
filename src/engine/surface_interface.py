# engine/surface_interface.py
"""
IDrawingSurface Protocol
========================
Host surface abstraction for pattern rendering.
Minimal contract for any pixel target (numpy buffer, window, framebuffer).
Colors are 8-bit RGBA tuples; coordinates are device pixels and may be
fractional (the surface decides how to rasterize them).
"""

from __future__ import annotations
from typing import Protocol, Sequence, Tuple

import numpy as np

from models.surface import Surface

RGBA = Tuple[int, int, int, int]


class IDrawingSurface(Protocol):
    """
    Protocol defining the drawing operations consumed by the engine.

    All implementations must provide:
    - size: current Surface snapshot (read-only to generators)
    - resize: replace raster dimensions
    - clear_rect / fill_rect: rectangle operations
    - stroke_begin / line_to / stroke_end: polyline strokes
    - fill_circle / fill_polygon: filled shapes for the motion object
    - put_pixel_block: raw RGBA block write (no blending)
    - present: hand the finished frame to the display
    """

    @property
    def size(self) -> Surface:
        """Current raster dimensions."""
        ...

    def resize(self, width: int, height: int) -> None:
        ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: RGBA) -> None:
        """Fill rectangle, alpha-blended when color alpha < 255."""
        ...

    def stroke_begin(self, color: RGBA, line_width: float = 1.0) -> None:
        ...

    def line_to(self, x: float, y: float) -> None:
        """First point after stroke_begin starts the path."""
        ...

    def stroke_end(self) -> None:
        """Rasterize the accumulated polyline."""
        ...

    def fill_circle(self, cx: float, cy: float, radius: float, color: RGBA) -> None:
        ...

    def fill_polygon(self, points: Sequence[Tuple[float, float]], color: RGBA) -> None:
        ...

    def put_pixel_block(self, data: np.ndarray, x: int, y: int) -> None:
        """Write an (h, w, 4) uint8 block at (x, y), clipped to the surface."""
        ...

    def present(self) -> None:
        ...
