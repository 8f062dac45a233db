"""
Bouncing Box Pattern

Solid square sweeping the surface on two independent periods.
"""

import math

from animations.base import BasePattern
from models.enums import BurnInPatternID


class BouncingBoxPattern(BasePattern):
    """
    100x100 box at (|sin(offset/100)| * (W - 100), |cos(offset/80)| * (H - 100))
    with a 30% alpha shadow extending 10px past every edge.
    """

    PATTERN_ID = BurnInPatternID.BOUNCING_BOX

    BOX_SIZE = 100
    SHADOW_MARGIN = 10
    SHADOW_ALPHA = 0.3
    X_PERIOD = 100
    Y_PERIOD = 80

    def draw(self, surface, offset, color, params):
        size = surface.size
        if not size.is_drawable:
            return

        x = abs(math.sin(offset / self.X_PERIOD)) * (size.width - self.BOX_SIZE)
        y = abs(math.cos(offset / self.Y_PERIOD)) * (size.height - self.BOX_SIZE)

        surface.fill_rect(x, y, self.BOX_SIZE, self.BOX_SIZE, color.to_rgba())
        surface.fill_rect(
            x - self.SHADOW_MARGIN,
            y - self.SHADOW_MARGIN,
            self.BOX_SIZE + 2 * self.SHADOW_MARGIN,
            self.BOX_SIZE + 2 * self.SHADOW_MARGIN,
            color.to_rgba(self.SHADOW_ALPHA),
        )
