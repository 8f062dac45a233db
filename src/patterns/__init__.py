"""
Static test patterns

Checkerboards, gradients, brightness windows and flat fills rendered onto an
IDrawingSurface.
"""

from .static_patterns import (
    DEAD_PIXEL_COLORS,
    brightness_window,
    checkerboard,
    contrast_pattern,
    gradient_preset_colors,
    grid_overlay,
    linear_gradient,
    solid_fill,
    stepped_gradient,
    uniformity_fill,
    viewing_angle_pattern,
)

__all__ = [
    "DEAD_PIXEL_COLORS",
    "brightness_window",
    "checkerboard",
    "contrast_pattern",
    "gradient_preset_colors",
    "grid_overlay",
    "linear_gradient",
    "solid_fill",
    "stepped_gradient",
    "uniformity_fill",
    "viewing_angle_pattern",
]
