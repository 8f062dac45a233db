"""
PixelSurface - in-memory RGBA raster implementing IDrawingSurface.

Backs the drawing contract with a numpy (height, width, 4) uint8 buffer:
- rectangles are array slices snapped to pixel centers
- strokes, circles and polygons are rasterized by Pillow ImageDraw into a
  1-bit coverage mask
- colors with alpha < 255 are blended over the existing content through the mask
- every write is clipped to the surface; non-finite geometry is ignored

Resize swaps dimensions and buffer in one assignment, so a draw call never
observes a half-updated size.
"""

from __future__ import annotations
import math
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from engine.surface_interface import IDrawingSurface, RGBA
from models.surface import Surface
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SURFACE)


def _edge(v: float) -> int:
    """Pixel index of the first pixel whose center lies at or after v"""
    return int(math.floor(v + 0.5))


class PixelSurface(IDrawingSurface):
    """
    Numpy-backed drawing surface.

    Example:
        surface = PixelSurface(1920, 1080)
        surface.fill_rect(0, 0, 100, 100, (255, 0, 0, 255))
        surface.present()
        surface.save_png("frame.png")
    """

    def __init__(self, width: int = 0, height: int = 0):
        self._state: Tuple[Surface, np.ndarray] = self._allocate(width, height)

        self._stroke_color: Optional[RGBA] = None
        self._stroke_width: float = 1.0
        self._stroke_points: List[Tuple[float, float]] = []

        self.last_frame: Optional[np.ndarray] = None
        self.frames_presented = 0

    # === Dimensions ===

    @staticmethod
    def _allocate(width: int, height: int) -> Tuple[Surface, np.ndarray]:
        w, h = max(0, int(width)), max(0, int(height))
        return Surface(w, h), np.zeros((h, w, 4), dtype=np.uint8)

    @property
    def size(self) -> Surface:
        return self._state[0]

    @property
    def buffer(self) -> np.ndarray:
        return self._state[1]

    def resize(self, width: int, height: int) -> None:
        """Replace the raster (contents are cleared)."""
        self._state = self._allocate(width, height)
        log.debug("Surface resized", width=self.size.width, height=self.size.height)

    # === Rectangles ===

    def _rect_bounds(self, x: float, y: float, width: float, height: float) -> Optional[Tuple[int, int, int, int]]:
        if not all(math.isfinite(v) for v in (x, y, width, height)):
            return None
        if width < 0:
            x, width = x + width, -width
        if height < 0:
            y, height = y + height, -height
        surface = self.size
        x0 = max(0, _edge(x))
        y0 = max(0, _edge(y))
        x1 = min(surface.width, _edge(x + width))
        y1 = min(surface.height, _edge(y + height))
        if x0 >= x1 or y0 >= y1:
            return None
        return x0, y0, x1, y1

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        bounds = self._rect_bounds(x, y, width, height)
        if bounds is None:
            return
        x0, y0, x1, y1 = bounds
        self.buffer[y0:y1, x0:x1] = 0

    def clear(self) -> None:
        self.buffer[:] = 0

    def fill_rect(self, x: float, y: float, width: float, height: float, color: RGBA) -> None:
        bounds = self._rect_bounds(x, y, width, height)
        if bounds is None:
            return
        x0, y0, x1, y1 = bounds
        self._blend(self.buffer[y0:y1, x0:x1], None, color)

    # === Blending ===

    @staticmethod
    def _blend(region: np.ndarray, mask: Optional[np.ndarray], color: RGBA) -> None:
        """Write color into region (a view), optionally restricted to mask."""
        r, g, b, a = (int(c) for c in color)
        if a <= 0:
            return
        target = region if mask is None else region[mask]
        if a >= 255:
            target[...] = (r, g, b, 255)
        else:
            alpha = a / 255.0
            src = np.array((r, g, b), dtype=np.float32)
            rgb = target[..., :3].astype(np.float32)
            target[..., :3] = np.rint(src * alpha + rgb * (1.0 - alpha)).astype(np.uint8)
            dst_a = target[..., 3].astype(np.float32)
            target[..., 3] = np.rint(a + dst_a * (1.0 - alpha)).astype(np.uint8)
        if mask is not None:
            region[mask] = target

    # === Coverage masks ===

    @staticmethod
    def _mask(width: int, height: int, paint) -> np.ndarray:
        """Bool coverage of whatever paint(draw) renders onto a blank 1-bit canvas."""
        canvas = Image.new("1", (width, height), 0)
        paint(ImageDraw.Draw(canvas))
        return np.asarray(canvas, dtype=bool)

    # === Strokes ===

    def stroke_begin(self, color: RGBA, line_width: float = 1.0) -> None:
        self._stroke_color = color
        self._stroke_width = max(1.0, float(line_width))
        self._stroke_points = []

    def line_to(self, x: float, y: float) -> None:
        if self._stroke_color is None:
            return
        self._stroke_points.append((x, y))

    def stroke_end(self) -> None:
        points = [(x, y) for x, y in self._stroke_points if math.isfinite(x) and math.isfinite(y)]
        color = self._stroke_color
        self._stroke_color = None
        self._stroke_points = []

        surface = self.size
        if color is None or not points or not surface.is_drawable:
            return

        pen = max(1, int(round(self._stroke_width)))
        # pen centered on the pixel containing each point
        path = [(math.floor(x), math.floor(y)) for x, y in points]

        def paint(draw):
            if len(path) == 1:
                x0 = math.floor(points[0][0] - pen / 2 + 0.5)
                y0 = math.floor(points[0][1] - pen / 2 + 0.5)
                draw.rectangle((x0, y0, x0 + pen - 1, y0 + pen - 1), fill=1)
            else:
                draw.line(path, fill=1, width=pen, joint="curve" if pen > 2 else None)

        mask = self._mask(surface.width, surface.height, paint)
        if mask.any():
            self._blend(self.buffer, mask, color)

    # === Shapes ===

    def fill_circle(self, cx: float, cy: float, radius: float, color: RGBA) -> None:
        if not all(math.isfinite(v) for v in (cx, cy, radius)) or radius <= 0:
            return
        bounds = self._rect_bounds(cx - radius, cy - radius, radius * 2, radius * 2)
        if bounds is None:
            return
        x0, y0, x1, y1 = bounds
        # pixel i has its center at i + 0.5
        left, top = cx - 0.5 - x0, cy - 0.5 - y0
        mask = self._mask(
            x1 - x0, y1 - y0,
            lambda draw: draw.ellipse((left - radius, top - radius, left + radius, top + radius), fill=1),
        )
        self._blend(self.buffer[y0:y1, x0:x1], mask, color)

    def fill_polygon(self, points: Sequence[Tuple[float, float]], color: RGBA) -> None:
        """Fill a closed polygon (implicitly closed back to the first point)."""
        if len(points) < 3:
            return
        if not all(math.isfinite(x) and math.isfinite(y) for x, y in points):
            return
        px = [p[0] for p in points]
        py = [p[1] for p in points]
        bounds = self._rect_bounds(min(px), min(py), max(px) - min(px), max(py) - min(py))
        if bounds is None:
            return
        x0, y0, x1, y1 = bounds
        local = [(x - 0.5 - x0, y - 0.5 - y0) for x, y in points]
        mask = self._mask(x1 - x0, y1 - y0, lambda draw: draw.polygon(local, fill=1))
        self._blend(self.buffer[y0:y1, x0:x1], mask, color)

    # === Raw blocks ===

    def put_pixel_block(self, data: np.ndarray, x: int, y: int) -> None:
        """Write an RGB or RGBA block at (x, y); no blending, clipped."""
        if data.ndim != 3 or data.shape[2] not in (3, 4):
            raise ValueError(f"Pixel block must be (h, w, 3|4), got {data.shape}")
        surface = self.size
        h, w = data.shape[:2]
        x0, y0 = max(0, x), max(0, y)
        x1, y1 = min(surface.width, x + w), min(surface.height, y + h)
        if x0 >= x1 or y0 >= y1:
            return
        src = data[y0 - y:y1 - y, x0 - x:x1 - x]
        target = self.buffer[y0:y1, x0:x1]
        target[..., :3] = src[..., :3]
        target[..., 3] = src[..., 3] if data.shape[2] == 4 else 255

    # === Presentation ===

    def present(self) -> None:
        self.last_frame = self.buffer.copy()
        self.frames_presented += 1

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = self.buffer[y, x]
        return int(r), int(g), int(b), int(a)

    def to_image(self) -> Image.Image:
        """Current buffer as an opaque RGB image (transparent pixels render black)."""
        rgba = self.buffer
        alpha = rgba[..., 3:4].astype(np.float32) / 255.0
        rgb = np.rint(rgba[..., :3].astype(np.float32) * alpha).astype(np.uint8)
        return Image.fromarray(rgb)

    def save_png(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_image().save(path)
        log.info("Frame saved", path=str(path), size=f"{self.size.width}x{self.size.height}")
        return path
