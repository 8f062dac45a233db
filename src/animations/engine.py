"""
Animated Pattern Engine

Owns the PhaseState of the burn-in screen, advances it once per tick and
dispatches drawing to the active pattern.
"""

from dataclasses import replace
from typing import Dict, Optional, Type, Union

from animations.base import BasePattern
from animations.bouncing_box import BouncingBoxPattern
from animations.pixel_shift import PixelShiftPattern
from animations.plasma import PlasmaPattern
from animations.scrolling_bars import ScrollingBarsPattern
from animations.spiral import SpiralPattern
from animations.wave_pattern import WavePattern
from engine.surface_interface import IDrawingSurface
from models.color import Color
from models.enums import BurnInPatternID, PlaybackState
from models.errors import InvalidParameterError
from models.pattern_params import BurnInParams
from models.state import PhaseState
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ANIMATION)


def _build_pattern_registry() -> Dict[BurnInPatternID, BasePattern]:
    """Build pattern registry from BurnInPatternID; every id must have a handler"""
    classes: Dict[BurnInPatternID, Type[BasePattern]] = {
        BurnInPatternID.SCROLLING_BARS: ScrollingBarsPattern,
        BurnInPatternID.PIXEL_SHIFT: PixelShiftPattern,
        BurnInPatternID.WAVE_PATTERN: WavePattern,
        BurnInPatternID.SPIRAL: SpiralPattern,
        BurnInPatternID.BOUNCING_BOX: BouncingBoxPattern,
        BurnInPatternID.PLASMA: PlasmaPattern,
    }

    missing = [pid.value for pid in BurnInPatternID if pid not in classes]
    if missing:
        raise RuntimeError(f"No pattern handler registered for: {', '.join(missing)}")

    for pattern_id, cls in classes.items():
        if cls.PATTERN_ID is not pattern_id:
            raise RuntimeError(f"{cls.__name__} registered under {pattern_id.value} but declares {cls.PATTERN_ID.value}")

    return {pattern_id: cls() for pattern_id, cls in classes.items()}


class AnimatedPatternEngine:
    """
    Burn-in pattern state machine.

    • One state per BurnInPatternID; select_pattern() is the only transition
      and always resets the phase to (0, 0)
    • tick() advances the phase then draws the whole frame
    • pause() freezes the phase; resume() continues from where it stopped

    Example:
        engine = AnimatedPatternEngine()
        engine.select_pattern(BurnInPatternID.PLASMA)
        engine.tick(surface, params)
    """

    PATTERNS: Dict[BurnInPatternID, BasePattern] = _build_pattern_registry()

    OFFSET_DIVISOR = 10
    HUE_STEP = 0.5

    def __init__(self, pattern_id: BurnInPatternID = BurnInPatternID.SCROLLING_BARS):
        self.pattern_id = pattern_id
        self.state = PhaseState()
        self.playback = PlaybackState.RUNNING
        self.frame_count = 0

    # ============================================================
    # Pattern selection
    # ============================================================

    def select_pattern(self, pattern_id: Union[BurnInPatternID, str]) -> None:
        """Switch pattern and reset the phase."""
        if not isinstance(pattern_id, BurnInPatternID):
            try:
                pattern_id = BurnInPatternID(pattern_id)
            except ValueError:
                raise InvalidParameterError(
                    "pattern", pattern_id, [p.value for p in BurnInPatternID]
                ) from None

        self.pattern_id = pattern_id
        self.state = PhaseState()
        self.frame_count = 0
        log.info("Pattern selected", pattern=pattern_id.value)

    @property
    def pattern(self) -> BasePattern:
        return self.PATTERNS[self.pattern_id]

    # ============================================================
    # Phase
    # ============================================================

    @classmethod
    def advance(cls, state: PhaseState, params: BurnInParams, ticks: int = 1) -> PhaseState:
        """
        Pure phase step: offset += speed / 10, hue += 0.5 (mod 360) when
        color cycling. The hue is left untouched while cycling is off.
        """
        offset = state.offset + ticks * params.speed / cls.OFFSET_DIVISOR
        hue = state.hue
        if params.color_cycle:
            hue = (hue + ticks * cls.HUE_STEP) % 360
        return replace(state, offset=offset, hue=hue)

    @staticmethod
    def base_color(state: PhaseState, params: BurnInParams) -> Color:
        """hsl(hue, 100%, 50%) while cycling, else white"""
        if params.color_cycle:
            return Color.from_hsl(state.hue, 100, 50)
        return Color.white()

    # ============================================================
    # Playback
    # ============================================================

    @property
    def is_paused(self) -> bool:
        return self.playback is PlaybackState.PAUSED

    def pause(self) -> None:
        if not self.is_paused:
            self.playback = PlaybackState.PAUSED
            log.info("Animation paused", offset=round(self.state.offset, 2))

    def resume(self) -> None:
        if self.is_paused:
            self.playback = PlaybackState.RUNNING
            log.info("Animation resumed", offset=round(self.state.offset, 2))

    # ============================================================
    # Frame
    # ============================================================

    def draw(self, surface: IDrawingSurface, params: BurnInParams) -> None:
        """Render the current phase without advancing it."""
        size = surface.size.require_drawable()
        surface.clear_rect(0, 0, size.width, size.height)
        self.pattern.draw(surface, self.state.offset, self.base_color(self.state, params), params)

    def tick(self, surface: IDrawingSurface, params: BurnInParams, timestamp_ms: Optional[float] = None) -> bool:
        """
        Advance one tick and draw.

        Returns False when paused (nothing advanced, nothing drawn).

        Raises:
            SurfaceUnavailableError: zero-area surface; the phase is not advanced
        """
        if self.is_paused:
            return False

        surface.size.require_drawable()
        self.state = self.advance(self.state, params)
        self.frame_count += 1
        self.draw(surface, params)

        if self.frame_count % 600 == 0:
            log.debug(
                "Animation frame",
                pattern=self.pattern_id.value,
                frame=self.frame_count,
                offset=round(self.state.offset, 1),
                timestamp=timestamp_ms,
            )
        return True
