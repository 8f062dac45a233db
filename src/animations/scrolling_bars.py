"""
Scrolling Bars Pattern

Full-height vertical bars drifting right and wrapping at the edge.
"""

from animations.base import BasePattern
from models.enums import BurnInPatternID


class ScrollingBarsPattern(BasePattern):
    """
    Vertical bars 50 units wide, one every 100 units.

    Every bar is shifted by offset and wrapped modulo (width + spacing), so a
    bar leaving on the right re-enters from the left without a gap.
    """

    PATTERN_ID = BurnInPatternID.SCROLLING_BARS

    # ============================================================
    # Internal tuning constants
    # ============================================================

    BAR_WIDTH = 50
    SPACING = 100

    def draw(self, surface, offset, color, params):
        size = surface.size
        if not size.is_drawable:
            return

        span = size.width + self.SPACING
        rgba = color.to_rgba()

        x = -self.SPACING
        while x < size.width + self.SPACING:
            surface.fill_rect((x + offset) % span, 0, self.BAR_WIDTH, size.height, rgba)
            x += self.SPACING
