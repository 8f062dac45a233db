"""
Spiral Pattern

Archimedean spiral rotating around the surface center.
"""

import math

from animations.base import BasePattern
from models.enums import BurnInPatternID


class SpiralPattern(BasePattern):
    """
    Single stroke, angle 0 -> 8*pi in 0.1 rad steps.

    Radius grows linearly with angle up to min(width, height) / 2; the curve is
    rotated by offset / 50.
    """

    PATTERN_ID = BurnInPatternID.SPIRAL

    TURNS_RAD = math.pi * 8
    ANGLE_STEP = 0.1
    LINE_WIDTH = 3
    ROTATION_DIVISOR = 50

    def draw(self, surface, offset, color, params):
        size = surface.size
        if not size.is_drawable:
            return

        center_x = size.width / 2
        center_y = size.height / 2
        max_radius = min(size.width, size.height) / 2
        rotation = offset / self.ROTATION_DIVISOR

        surface.stroke_begin(color.to_rgba(), self.LINE_WIDTH)
        steps = int(math.ceil(self.TURNS_RAD / self.ANGLE_STEP))
        for i in range(steps):
            angle = i * self.ANGLE_STEP
            radius = angle / self.TURNS_RAD * max_radius
            surface.line_to(
                center_x + math.cos(angle + rotation) * radius,
                center_y + math.sin(angle + rotation) * radius,
            )
        surface.stroke_end()
