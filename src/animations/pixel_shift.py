"""
Pixel Shift Pattern

Block grid orbiting a few pixels around its rest position.
"""

import math

from animations.base import BasePattern
from models.enums import BurnInPatternID


class PixelShiftPattern(BasePattern):
    """
    20x20 blocks on a 40px pitch, displaced as a whole by
    (sin(offset/50), cos(offset/50)) * shift_amount.
    """

    PATTERN_ID = BurnInPatternID.PIXEL_SHIFT

    BLOCK_SIZE = 20
    PITCH = 40
    ORBIT_DIVISOR = 50

    def draw(self, surface, offset, color, params):
        size = surface.size
        if not size.is_drawable:
            return

        shift_x = math.sin(offset / self.ORBIT_DIVISOR) * params.shift_amount
        shift_y = math.cos(offset / self.ORBIT_DIVISOR) * params.shift_amount
        rgba = color.to_rgba()

        for x in range(0, size.width, self.PITCH):
            for y in range(0, size.height, self.PITCH):
                surface.fill_rect(x + shift_x, y + shift_y, self.BLOCK_SIZE, self.BLOCK_SIZE, rgba)
