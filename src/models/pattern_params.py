"""
Pattern parameter snapshots

One immutable record per parameter family. Instances are produced only by
ConfigValidation, so every field is already inside its declared domain.
Generators receive a whole snapshot per call and never mutate it.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict

from models.enums import (
    BurnInPatternID,
    GradientDirection,
    GradientPreset,
    MotionDirection,
    ObjectShape,
    UniformityBase,
    ViewingAnglePattern,
)


class PatternParams:
    """Base for parameter snapshots"""

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        return {k: (v.value if isinstance(v, Enum) else v) for k, v in data.items()}


@dataclass(frozen=True)
class DeadPixelParams(PatternParams):
    color_index: int = 0
    auto_mode: bool = False
    interval: int = 2000
    custom_color: str = "#ff6600"
    use_custom_color: bool = False


@dataclass(frozen=True)
class UniformityParams(PatternParams):
    base: UniformityBase = UniformityBase.WHITE
    brightness: int = 100
    grid_enabled: bool = False
    grid_size: int = 3


@dataclass(frozen=True)
class GradientParams(PatternParams):
    direction: GradientDirection = GradientDirection.HORIZONTAL
    steps: int = 256
    preset: GradientPreset = GradientPreset.FULL_SPECTRUM


@dataclass(frozen=True)
class ResponseTimeParams(PatternParams):
    speed: int = 1000
    shape: ObjectShape = ObjectShape.CIRCLE
    direction: MotionDirection = MotionDirection.HORIZONTAL
    show_trail: bool = True
    object_color: str = "#00d9ff"


@dataclass(frozen=True)
class ContrastParams(PatternParams):
    grid_size: int = 8


@dataclass(frozen=True)
class BrightnessParams(PatternParams):
    brightness: int = 100
    window_size: int = 50


@dataclass(frozen=True)
class CheckerboardParams(PatternParams):
    grid_size: int = 8
    color_a: str = "#000000"
    color_b: str = "#ffffff"


@dataclass(frozen=True)
class ViewingAngleParams(PatternParams):
    pattern: ViewingAnglePattern = ViewingAnglePattern.CHECKERBOARD


@dataclass(frozen=True)
class BurnInParams(PatternParams):
    pattern: BurnInPatternID = BurnInPatternID.SCROLLING_BARS
    speed: int = 50
    color_cycle: bool = True
    shift_amount: int = 5
    plasma_stride: int = 2
