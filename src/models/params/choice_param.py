from __future__ import annotations
from typing import Any, List

from .int_range_param import to_number
from .param import Param


class ChoiceParam(Param):
    """
    Numeric parameter restricted to a fixed list of allowed values
    (grid sizes, gradient steps, speed presets).

    Out-of-list input snaps to the nearest allowed value; ties go to the
    smaller value.
    """

    def __init__(self, *, label: str, values: List[int], default: int):
        self.label = label
        self.values = sorted(values)
        self.default = default

    def clamp(self, value: Any) -> int:
        return self.clamp_field(self.label, value)

    def clamp_field(self, field: str, value: Any) -> int:
        number = to_number(field, value)
        return min(self.values, key=lambda v: (abs(v - number), v))

    def describe(self) -> dict:
        return {**super().describe(), "values": list(self.values)}
