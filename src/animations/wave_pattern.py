"""
Wave Pattern

Two families of sinusoidal strokes crossing the whole surface.
"""

import math

from animations.base import BasePattern
from models.enums import BurnInPatternID


class WavePattern(BasePattern):
    """
    8 horizontal and 8 vertical sine strokes.

    Horizontal wave n is centered at (n + 0.5) * height / 8 with amplitude
    height / 8; vertical waves use cosine with amplitude width / 16. Each wave
    is phase-shifted by n * pi / 4 and offset is the time term.
    """

    PATTERN_ID = BurnInPatternID.WAVE_PATTERN

    # ============================================================
    # Internal tuning constants
    # ============================================================

    WAVE_COUNT = 8
    FREQUENCY = 0.015
    SAMPLE_STEP = 2
    LINE_WIDTH = 3
    PHASE_SCALE = 100

    def draw(self, surface, offset, color, params):
        size = surface.size
        if not size.is_drawable:
            return

        width, height = size.width, size.height
        rgba = color.to_rgba()

        amplitude = height / self.WAVE_COUNT
        for wave in range(self.WAVE_COUNT):
            base_y = (wave + 0.5) * height / self.WAVE_COUNT
            phase = wave * math.pi / 4 * self.PHASE_SCALE

            surface.stroke_begin(rgba, self.LINE_WIDTH)
            for x in range(0, width + 1, self.SAMPLE_STEP):
                y = base_y + math.sin((x + offset + phase) * self.FREQUENCY) * amplitude
                surface.line_to(x, y)
            surface.stroke_end()

        amplitude = width / 16
        for wave in range(self.WAVE_COUNT):
            base_x = (wave + 0.5) * width / self.WAVE_COUNT
            phase = wave * math.pi / 4 * self.PHASE_SCALE

            surface.stroke_begin(rgba, self.LINE_WIDTH)
            for y in range(0, height + 1, self.SAMPLE_STEP):
                x = base_x + math.cos((y + offset + phase) * self.FREQUENCY) * amplitude
                surface.line_to(x, y)
            surface.stroke_end()
