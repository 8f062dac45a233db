"""
Animated patterns

Provides the burn-in pattern engine and the response-time motion controller.

Current implementation:
- engine: AnimatedPatternEngine (phase state + pattern registry)
- base: Base pattern class
- scrolling_bars, pixel_shift, etc.: Pattern implementations
- motion: MotionController / MotionRenderer
"""

from .engine import AnimatedPatternEngine
from .motion import MotionController, MotionRenderer, SPEED_PRESETS, position_for

__all__ = [
    "AnimatedPatternEngine",
    "MotionController",
    "MotionRenderer",
    "SPEED_PRESETS",
    "position_for",
]
