"""
Static Pattern Generator

Pure functions of (surface size, parameters) -> pixel writes. No hidden
state: calling any generator twice with identical inputs produces identical
pixels.

Every generator reads the current size from the surface, raises
SurfaceUnavailableError for a zero-area surface and ConfigurationError for
parameters outside their domain (checked before any pixel is written).
"""

from __future__ import annotations
import math
from typing import List, Sequence

import numpy as np

from engine.surface_interface import IDrawingSurface
from models.color import Color
from models.enums import GradientDirection, GradientPreset, UniformityBase, ViewingAnglePattern
from models.errors import ConfigurationError
from utils.colors import hsl_to_rgb, lerp_rgb
from utils.logger import get_category_logger, LogCategory

log = get_category_logger(LogCategory.RENDER)


OPAQUE = 1.0

DEAD_PIXEL_COLORS: List[Color] = [
    Color.from_hex("#ff0000"),  # Red
    Color.from_hex("#00ff00"),  # Green
    Color.from_hex("#0000ff"),  # Blue
    Color.from_hex("#ffffff"),  # White
    Color.from_hex("#000000"),  # Black
    Color.from_hex("#00ffff"),  # Cyan
    Color.from_hex("#ff00ff"),  # Magenta
    Color.from_hex("#ffff00"),  # Yellow
]

DEAD_PIXEL_COLOR_NAMES = ["Red", "Green", "Blue", "White", "Black", "Cyan", "Magenta", "Yellow"]

VIEWING_ANGLE_GRAYS: List[Color] = [
    Color.from_hex(c) for c in ("#000000", "#333333", "#666666", "#999999", "#cccccc", "#ffffff")
]

# Multipliers applied to the brightness-derived gray for each uniformity base
UNIFORMITY_MULTIPLIERS = {
    UniformityBase.WHITE: 1.0,
    UniformityBase.GRAY: 0.5,
    UniformityBase.BLACK: 0.1,
}

_PRESET_ENDPOINTS = {
    GradientPreset.RED_GREEN: (Color.red(), Color.from_hex("#00ff00")),
    GradientPreset.GREEN_BLUE: (Color.from_hex("#00ff00"), Color.from_hex("#0000ff")),
    GradientPreset.BLUE_RED: (Color.from_hex("#0000ff"), Color.red()),
}


def _cell_edges(length: int, cells: int) -> List[int]:
    """floor(i * length / cells) for i = 0..cells; last edge is exactly length"""
    return [(i * length) // cells for i in range(cells + 1)]


def _gray_from_percent(percent: float) -> int:
    return int(math.floor(percent / 100 * 255 + 0.5))


# ---------------------------------------------------------------------------
# Flat fills
# ---------------------------------------------------------------------------

def solid_fill(surface: IDrawingSurface, color: Color) -> None:
    """Fill the whole surface with one opaque color (dead pixel screen)."""
    size = surface.size.require_drawable()
    surface.fill_rect(0, 0, size.width, size.height, color.to_rgba(OPAQUE))


def checkerboard(surface: IDrawingSurface, grid_size: int, color_a: Color, color_b: Color) -> None:
    """
    Partition the surface into grid_size x grid_size cells.

    Cell (row, col) uses color_a when row + col is even, else color_b.
    Cell edges are floored; the last row / column absorbs the remainder.
    """
    if grid_size < 1:
        raise ConfigurationError(f"Checkerboard grid size must be >= 1, got {grid_size}")
    size = surface.size.require_drawable()

    xs = _cell_edges(size.width, grid_size)
    ys = _cell_edges(size.height, grid_size)
    rgba_a = color_a.to_rgba(OPAQUE)
    rgba_b = color_b.to_rgba(OPAQUE)

    for row in range(grid_size):
        for col in range(grid_size):
            surface.fill_rect(
                xs[col], ys[row],
                xs[col + 1] - xs[col], ys[row + 1] - ys[row],
                rgba_a if (row + col) % 2 == 0 else rgba_b,
            )


def grid_overlay(
    surface: IDrawingSurface,
    grid_size: int,
    color: Color,
    alpha: float = 0.5,
    line_width: int = 1,
) -> None:
    """Evenly spaced lines dividing the surface into grid_size x grid_size cells."""
    if grid_size < 1:
        raise ConfigurationError(f"Grid size must be >= 1, got {grid_size}")
    size = surface.size.require_drawable()
    rgba = color.to_rgba(alpha)

    for i in range(1, grid_size):
        x = math.floor(i * size.width / grid_size)
        y = math.floor(i * size.height / grid_size)
        surface.fill_rect(x, 0, line_width, size.height, rgba)
        surface.fill_rect(0, y, size.width, line_width, rgba)


def brightness_window(surface: IDrawingSurface, window_size_percent: float, brightness_percent: float) -> None:
    """
    Black background with a centered gray window.

    Window width and height are both window_size_percent of the surface;
    gray level is round(brightness_percent / 100 * 255).
    """
    if not 10 <= window_size_percent <= 100:
        raise ConfigurationError(f"Window size must be within 10-100%, got {window_size_percent}")
    if not 0 <= brightness_percent <= 100:
        raise ConfigurationError(f"Brightness must be within 0-100%, got {brightness_percent}")
    size = surface.size.require_drawable()

    surface.fill_rect(0, 0, size.width, size.height, Color.black().to_rgba(OPAQUE))

    window_w = size.width * window_size_percent / 100
    window_h = size.height * window_size_percent / 100
    x = (size.width - window_w) / 2
    y = (size.height - window_h) / 2
    gray = Color.gray(_gray_from_percent(brightness_percent))
    surface.fill_rect(x, y, window_w, window_h, gray.to_rgba(OPAQUE))


def uniformity_fill(
    surface: IDrawingSurface,
    base: UniformityBase,
    brightness_percent: float,
    grid_enabled: bool = False,
    grid_size: int = 3,
) -> None:
    """
    Single flat fill for backlight bleed / tint checks.

    gray and black bases scale the brightness-derived gray by 0.5 and 0.1.
    With grid_enabled, a half-transparent red N x N grid is drawn on top.
    """
    if not 0 <= brightness_percent <= 100:
        raise ConfigurationError(f"Brightness must be within 0-100%, got {brightness_percent}")
    size = surface.size.require_drawable()

    value = _gray_from_percent(brightness_percent)
    level = int(math.floor(value * UNIFORMITY_MULTIPLIERS[base] + 0.5))
    surface.fill_rect(0, 0, size.width, size.height, Color.gray(level).to_rgba(OPAQUE))

    if grid_enabled:
        grid_overlay(surface, grid_size, Color.red(), alpha=0.5)


# ---------------------------------------------------------------------------
# Gradients
# ---------------------------------------------------------------------------

def _axis_fraction(width: int, height: int, direction: GradientDirection) -> np.ndarray:
    """
    Position of every pixel center along the gradient axis, 0.0-1.0,
    shaped (height, width).
    """
    xs = (np.arange(width, dtype=np.float64) + 0.5)[np.newaxis, :]
    ys = (np.arange(height, dtype=np.float64) + 0.5)[:, np.newaxis]

    if direction is GradientDirection.HORIZONTAL:
        t = np.broadcast_to(xs / width, (height, width))
    elif direction is GradientDirection.VERTICAL:
        t = np.broadcast_to(ys / height, (height, width))
    else:
        # projection onto the (width, height) diagonal
        t = (xs * width + ys * height) / float(width * width + height * height)
    return np.clip(t, 0.0, 1.0)


def linear_gradient(surface: IDrawingSurface, direction: GradientDirection, color_stops: Sequence[Color]) -> None:
    """
    Continuous interpolation across the chosen axis.

    Stop i of n sits at fractional position i / (n - 1).

    Raises:
        ConfigurationError: fewer than 2 stops
    """
    if len(color_stops) < 2:
        raise ConfigurationError(f"Linear gradient needs at least 2 color stops, got {len(color_stops)}")
    size = surface.size.require_drawable()

    t = _axis_fraction(size.width, size.height, direction)
    positions = np.linspace(0.0, 1.0, len(color_stops))
    stops = np.array([c.to_rgb() for c in color_stops], dtype=np.float64)

    block = np.empty((size.height, size.width, 4), dtype=np.uint8)
    for channel in range(3):
        block[..., channel] = np.rint(np.interp(t, positions, stops[:, channel])).astype(np.uint8)
    block[..., 3] = 255
    surface.put_pixel_block(block, 0, 0)


def stepped_gradient(surface: IDrawingSurface, direction: GradientDirection, colors: Sequence[Color]) -> None:
    """
    Flat, non-interpolated bands - one per color - in order along the axis.

    Horizontal / vertical bands are contiguous rectangles with floored edges.
    Diagonal bands are perpendicular to the diagonal: the frame is rotated by
    atan2(height, width) and the diagonal length is split into equal bands.
    """
    if len(colors) < 1:
        raise ConfigurationError("Stepped gradient needs at least 1 color")
    size = surface.size.require_drawable()
    steps = len(colors)

    if direction is GradientDirection.HORIZONTAL:
        edges = _cell_edges(size.width, steps)
        for i, color in enumerate(colors):
            surface.fill_rect(edges[i], 0, edges[i + 1] - edges[i], size.height, color.to_rgba(OPAQUE))
        return

    if direction is GradientDirection.VERTICAL:
        edges = _cell_edges(size.height, steps)
        for i, color in enumerate(colors):
            surface.fill_rect(0, edges[i], size.width, edges[i + 1] - edges[i], color.to_rgba(OPAQUE))
        return

    angle = math.atan2(size.height, size.width)
    diagonal = math.hypot(size.width, size.height)
    xs = (np.arange(size.width, dtype=np.float64) + 0.5)[np.newaxis, :]
    ys = (np.arange(size.height, dtype=np.float64) + 0.5)[:, np.newaxis]
    along = xs * math.cos(angle) + ys * math.sin(angle)
    band = np.clip(np.floor(along / (diagonal / steps)), 0, steps - 1).astype(np.int64)

    palette = np.array([c.to_rgba(OPAQUE) for c in colors], dtype=np.uint8)
    surface.put_pixel_block(palette[band], 0, 0)


def gradient_preset_colors(preset: GradientPreset, steps: int) -> List[Color]:
    """
    Band colors for a gradient preset.

    Two-color presets interpolate linearly in RGB from the first to the last
    endpoint. full-spectrum sweeps hue 0..360 (exclusive) at full saturation.
    """
    if steps < 2:
        raise ConfigurationError(f"Gradient presets need at least 2 steps, got {steps}")
    log.debug("Building gradient preset", preset=preset.value, steps=steps)

    if preset is GradientPreset.FULL_SPECTRUM:
        return [Color(*hsl_to_rgb(i * 360 / steps, 100, 50)) for i in range(steps)]

    start, end = _PRESET_ENDPOINTS[preset]
    return [Color(*lerp_rgb(start.to_rgb(), end.to_rgb(), i / (steps - 1))) for i in range(steps)]


# ---------------------------------------------------------------------------
# Composite screens
# ---------------------------------------------------------------------------

def contrast_pattern(surface: IDrawingSurface, grid_size: int) -> None:
    """Black / white checkerboard for edge bleeding checks."""
    checkerboard(surface, grid_size, Color.black(), Color.white())


def viewing_angle_pattern(surface: IDrawingSurface, pattern: ViewingAnglePattern) -> None:
    """8x8 checkerboard or a 6-stop gray ramp, viewed off-axis."""
    if pattern is ViewingAnglePattern.CHECKERBOARD:
        checkerboard(surface, 8, Color.black(), Color.white())
    else:
        linear_gradient(surface, GradientDirection.HORIZONTAL, VIEWING_ANGLE_GRAYS)
