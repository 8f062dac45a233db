"""
Motion Controller

Drives the moving object of the response-time test: elapsed-time
accumulation, ping-pong folding, path mapping and the fading trail.
"""

import math
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from engine.surface_interface import IDrawingSurface
from models.color import Color
from models.enums import MotionDirection, ObjectShape, PlaybackState
from models.pattern_params import ResponseTimeParams
from models.state import MotionState, TrailSample
from models.surface import Surface
from utils.logger import get_logger, LogCategory
from utils.math_utils import is_finite, ping_pong, wrap_unit

log = get_logger().for_category(LogCategory.MOTION)


# Period in ms for one full forward-and-back cycle
SPEED_PRESETS: Dict[str, int] = {
    "slow": 2000,
    "normal": 1000,
    "fast": 500,
    "very-fast": 250,
}

OBJECT_SIZE = 60


def position_for(
    direction: MotionDirection,
    p: float,
    raw: float,
    container: Surface,
    object_size: float = OBJECT_SIZE,
) -> Tuple[float, float]:
    """
    Top-left corner of the object.

    Linear paths use the folded fraction p and keep one object_size of padding
    on each side. The circular path uses the unfolded raw fraction so the
    object keeps rotating instead of reversing.
    """
    width, height = container.width, container.height
    padding = object_size

    if direction is MotionDirection.CIRCULAR:
        angle = raw * math.pi * 2
        radius = min(width, height) / 3
        return (
            width / 2 + math.cos(angle) * radius - object_size / 2,
            height / 2 + math.sin(angle) * radius - object_size / 2,
        )

    travel_x = padding + p * (width - 2 * padding - object_size)
    travel_y = padding + p * (height - 2 * padding - object_size)
    center_x = width / 2 - object_size / 2
    center_y = height / 2 - object_size / 2

    if direction is MotionDirection.HORIZONTAL:
        return travel_x, center_y
    if direction is MotionDirection.VERTICAL:
        return center_x, travel_y
    return travel_x, travel_y


class MotionController:
    """
    Owns MotionState.

    Elapsed time is accumulated from per-tick deltas, so pausing simply stops
    the accumulation. The first tick after start or resume only records the
    timestamp (re-baselining); it never applies the time spent paused.
    """

    TRAIL_LENGTH = 5
    TRAIL_SPACING = 0.02
    TRAIL_START_OPACITY = 0.6
    TRAIL_FADE = 0.1

    def __init__(self):
        self.state = MotionState()
        self.playback = PlaybackState.RUNNING

    # ============================================================
    # Time
    # ============================================================

    @staticmethod
    def raw_fraction(elapsed_ms: float, period_ms: float) -> float:
        if period_ms <= 0 or not is_finite(elapsed_ms, period_ms):
            return 0.0
        return wrap_unit(elapsed_ms / period_ms)

    @classmethod
    def advance(cls, state: MotionState, timestamp_ms: float, period_ms: float) -> MotionState:
        """Pure step: accumulate the delta since the last observed timestamp."""
        if state.last_tick_ms is None:
            delta = 0.0
        else:
            # clock going backwards is ignored rather than rewinding
            delta = max(0.0, timestamp_ms - state.last_tick_ms)

        elapsed = state.elapsed_ms + delta
        return MotionState(
            position_fraction=cls.raw_fraction(elapsed, period_ms),
            elapsed_ms=elapsed,
            last_tick_ms=timestamp_ms,
        )

    def tick(self, timestamp_ms: float, period_ms: float) -> MotionState:
        if self.playback is PlaybackState.PAUSED:
            return self.state
        if not is_finite(timestamp_ms):
            return self.state
        self.state = self.advance(self.state, timestamp_ms, period_ms)
        return self.state

    @property
    def raw(self) -> float:
        return self.state.position_fraction

    @property
    def p(self) -> float:
        return ping_pong(self.state.position_fraction)

    # ============================================================
    # Playback
    # ============================================================

    @property
    def is_paused(self) -> bool:
        return self.playback is PlaybackState.PAUSED

    def pause(self) -> None:
        self.playback = PlaybackState.PAUSED
        self.state = replace(self.state, last_tick_ms=None)
        log.debug("Motion paused", elapsed_ms=round(self.state.elapsed_ms, 1))

    def resume(self) -> None:
        self.playback = PlaybackState.RUNNING
        self.state = replace(self.state, last_tick_ms=None)
        log.debug("Motion resumed", elapsed_ms=round(self.state.elapsed_ms, 1))

    def reset(self) -> None:
        self.state = MotionState()

    # ============================================================
    # Geometry
    # ============================================================

    def position(self, direction: MotionDirection, container: Surface, object_size: float = OBJECT_SIZE) -> Tuple[float, float]:
        return position_for(direction, self.p, self.raw, container, object_size)

    def trail(self, direction: MotionDirection, container: Surface, object_size: float = OBJECT_SIZE) -> List[TrailSample]:
        """
        Samples at raw - k * 0.02 (mod 1), k = 0..4, with opacity 0.6 - k * 0.1.
        """
        samples = []
        for k in range(self.TRAIL_LENGTH):
            raw = wrap_unit(self.raw - k * self.TRAIL_SPACING + 1)
            x, y = position_for(direction, ping_pong(raw), raw, container, object_size)
            samples.append(TrailSample(x, y, self.TRAIL_START_OPACITY - k * self.TRAIL_FADE))
        return samples


class MotionRenderer:
    """
    Draws the response-time screen: dark background, optional trail,
    then the object at full opacity.
    """

    BACKGROUND = Color.from_hex("#111111")

    def __init__(self, object_size: float = OBJECT_SIZE):
        self.object_size = object_size

    def draw_shape(self, surface: IDrawingSurface, shape: ObjectShape, x: float, y: float, color: Color, opacity: float = 1.0) -> None:
        size = self.object_size
        rgba = color.to_rgba(opacity)
        if not is_finite(x, y):
            return

        if shape is ObjectShape.CIRCLE:
            surface.fill_circle(x + size / 2, y + size / 2, size / 2, rgba)
        elif shape is ObjectShape.SQUARE:
            surface.fill_rect(x, y, size, size, rgba)
        else:
            # apex up, base along the bottom edge
            surface.fill_polygon([(x + size / 2, y), (x + size, y + size), (x, y + size)], rgba)

    def draw(self, surface: IDrawingSurface, controller: MotionController, params: ResponseTimeParams, object_color: Optional[Color] = None) -> None:
        size = surface.size.require_drawable()
        color = object_color or Color.from_hex(params.object_color)

        surface.fill_rect(0, 0, size.width, size.height, self.BACKGROUND.to_rgba())

        if params.show_trail:
            for sample in controller.trail(params.direction, size, self.object_size):
                self.draw_shape(surface, params.shape, sample.x, sample.y, color, sample.opacity)

        x, y = controller.position(params.direction, size, self.object_size)
        self.draw_shape(surface, params.shape, x, y, color)
