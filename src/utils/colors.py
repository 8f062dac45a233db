"""
Color conversion utilities

Pure functions for color space conversions and hex color parsing.
All RGB channels are integers in 0-255.
"""

import re
from typing import Sequence, Tuple

import numpy as np

from models.errors import ConfigurationError

RGB = Tuple[int, int, int]

_HEX_COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}")


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    """
    Convert HSL to RGB (0-255)

    Standard six-sector conversion. Hue is taken modulo 360 (negative hues
    wrap around), saturation and lightness are clamped to 0-100.

    Args:
        hue: Hue in degrees
        saturation: Saturation percentage (0-100)
        lightness: Lightness percentage (0-100)

    Returns:
        (r, g, b) tuple with values 0-255

    Example:
        hsl_to_rgb(0, 100, 50)    # (255, 0, 0)
        hsl_to_rgb(180, 100, 50)  # (0, 255, 255)
    """
    h = hue % 360
    s = _clamp(saturation, 0, 100) / 100
    light = _clamp(lightness, 0, 100) / 100

    c = (1 - abs(2 * light - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = light - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        int(round(_clamp((r + m) * 255, 0, 255))),
        int(round(_clamp((g + m) * 255, 0, 255))),
        int(round(_clamp((b + m) * 255, 0, 255))),
    )


def is_valid_hex_color(value: object) -> bool:
    """True iff value is '#' followed by exactly 6 hex digits (any case)"""
    return isinstance(value, str) and _HEX_COLOR_RE.fullmatch(value) is not None


def hex_to_rgb(value: str) -> RGB:
    """
    Parse '#rrggbb' into an RGB tuple

    Raises:
        ConfigurationError: if value is not a valid 6-digit hex color
    """
    if not is_valid_hex_color(value):
        raise ConfigurationError(f"Malformed hex color: {value!r}")
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def lerp_rgb(a: Sequence[int], b: Sequence[int], t: float) -> RGB:
    """Channel-wise linear interpolation between two colors, t clamped to 0-1"""
    t = _clamp(t, 0.0, 1.0)
    return (
        int(round(a[0] + (b[0] - a[0]) * t)),
        int(round(a[1] + (b[1] - a[1]) * t)),
        int(round(a[2] + (b[2] - a[2]) * t)),
    )


def hue_array_to_rgb(hues: np.ndarray) -> np.ndarray:
    """
    Vectorised fully saturated hsl_to_rgb (S=100, L=50) for a whole array of hues.

    Returns a uint8 array shaped hues.shape + (3,), matching hsl_to_rgb(h, 100, 50)
    channel for channel.
    """
    h = np.mod(np.asarray(hues, dtype=np.float64), 360.0)
    x = 1.0 - np.abs(np.mod(h / 60.0, 2.0) - 1.0)
    sector = np.clip((h // 60).astype(np.int64), 0, 5)

    one = np.ones_like(h)
    zero = np.zeros_like(h)
    # (r, g, b) per sector, same order as hsl_to_rgb
    r = np.choose(sector, [one, x, zero, zero, x, one])
    g = np.choose(sector, [x, one, one, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, one, one, x])

    rgb = np.stack((r, g, b), axis=-1) * 255.0
    return np.rint(np.clip(rgb, 0, 255)).astype(np.uint8)
