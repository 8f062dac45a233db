"""
Surface - raster dimensions snapshot handed to generators (read-only)
"""

from dataclasses import dataclass

from models.errors import SurfaceUnavailableError


@dataclass(frozen=True)
class Surface:
    """Current raster dimensions in device pixels"""

    width: int
    height: int

    @property
    def is_drawable(self) -> bool:
        return self.width > 0 and self.height > 0

    def require_drawable(self) -> 'Surface':
        """
        Raises:
            SurfaceUnavailableError: zero or negative area
        """
        if not self.is_drawable:
            raise SurfaceUnavailableError(f"Surface has no drawable area ({self.width}x{self.height})")
        return self
