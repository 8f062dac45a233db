"""
Color model - Immutable color value

A color arrives either as a 6-digit hex string or as an HSL triple and is
always rendered as 8-bit RGB(A).
"""

from dataclasses import dataclass
from typing import Tuple

from utils.colors import hex_to_rgb, hsl_to_rgb, rgb_to_hex


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB color

    Examples:
        color = Color.from_hex("#00d9ff")
        color = Color.from_hsl(120, 100, 50)   # green
        r, g, b, a = color.to_rgba(0.3)        # 30% alpha for overlays
    """

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"RGB channel out of range: {channel}")

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(int(r), int(g), int(b))

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """
        Create from '#rrggbb'

        Raises:
            ConfigurationError: malformed hex string
        """
        return cls(*hex_to_rgb(value))

    @classmethod
    def from_hsl(cls, hue: float, saturation: float = 100, lightness: float = 50) -> 'Color':
        return cls(*hsl_to_rgb(hue, saturation, lightness))

    @classmethod
    def gray(cls, value: int) -> 'Color':
        value = max(0, min(255, int(value)))
        return cls(value, value, value)

    # === RENDERING ===

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_rgba(self, alpha: float = 1.0) -> Tuple[int, int, int, int]:
        """RGBA tuple with alpha given as 0.0-1.0"""
        a = int(round(max(0.0, min(1.0, alpha)) * 255))
        return (self.r, self.g, self.b, a)

    def to_hex(self) -> str:
        return rgb_to_hex(self.r, self.g, self.b)

    @staticmethod
    def black() -> 'Color':
        return Color(0, 0, 0)

    @staticmethod
    def white() -> 'Color':
        return Color(255, 255, 255)

    @staticmethod
    def red() -> 'Color':
        return Color(255, 0, 0)

    def __str__(self) -> str:
        return f"Color({self.to_hex()})"
