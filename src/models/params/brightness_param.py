from __future__ import annotations

from .int_range_param import IntRangeParam


class BrightnessParam(IntRangeParam):
    def __init__(self, default: int = 100):
        super().__init__(
            label="Brightness",
            min_value=0,
            max_value=100,
            default=default,
            step=1,
        )
