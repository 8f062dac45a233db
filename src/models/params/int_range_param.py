from __future__ import annotations
import math
from typing import Any

from models.errors import InvalidParameterError
from .param import Param


def snap_to_step(value: float, minimum: float, maximum: float, step: float) -> float:
    """Clamp into [minimum, maximum] and round to the nearest step above minimum"""
    value = max(minimum, min(maximum, value))
    if step > 0:
        value = minimum + math.floor((value - minimum) / step + 0.5) * step
    return max(minimum, min(maximum, value))


def to_number(field: str, value: Any) -> float:
    """Parse a numeric field, rejecting booleans and non-finite values"""
    if isinstance(value, bool):
        raise InvalidParameterError(field, value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(field, value) from None
    if not math.isfinite(number):
        raise InvalidParameterError(field, value)
    return number


class IntRangeParam(Param):
    """Integer parameter with min/max/step - stateless definition."""

    def __init__(
        self,
        *,
        label: str,
        min_value: int,
        max_value: int,
        default: int,
        step: int = 1,
    ):
        self.label = label
        self.min = min_value
        self.max = max_value
        self.default = default
        self.step = step

    def clamp(self, value: Any) -> int:
        return self.clamp_field(self.label, value)

    def clamp_field(self, field: str, value: Any) -> int:
        """Clamp to [min, max] and snap to step"""
        number = to_number(field, value)
        return int(snap_to_step(number, self.min, self.max, self.step))

    def describe(self) -> dict:
        return {**super().describe(), "min": self.min, "max": self.max, "step": self.step}
