"""
Runtime animation state (ephemeral, never persisted)

PhaseState  - owned by AnimatedPatternEngine
MotionState - owned by MotionController
TrailSample - derived on demand from MotionState
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PhaseState:
    """
    Accumulated animation phase for burn-in patterns.

    offset: advances speed/10 per tick
    hue:    advances 0.5 degrees per tick while color cycling
    """

    offset: float = 0.0
    hue: float = 0.0


@dataclass(frozen=True)
class MotionState:
    """
    Response-time object state.

    elapsed_ms accumulates only while running; position_fraction is the raw
    forward fraction (elapsed / period) mod 1, before ping-pong folding.
    last_tick_ms is None until the first tick after a start or resume.
    """

    position_fraction: float = 0.0
    elapsed_ms: float = 0.0
    last_tick_ms: Optional[float] = None


@dataclass(frozen=True)
class TrailSample:
    x: float
    y: float
    opacity: float
