"""
Utility functions for the display test pattern engine
"""

from .colors import (
    hsl_to_rgb,
    hue_array_to_rgb,
    is_valid_hex_color,
    hex_to_rgb,
    rgb_to_hex,
    lerp_rgb,
)
from .math_utils import is_finite, ping_pong, wrap_unit

__all__ = [
    'hsl_to_rgb',
    'hue_array_to_rgb',
    'is_valid_hex_color',
    'hex_to_rgb',
    'rgb_to_hex',
    'lerp_rgb',
    'is_finite',
    'ping_pong',
    'wrap_unit',
]
