from __future__ import annotations

from .int_range_param import IntRangeParam


class SpeedParam(IntRangeParam):
    """Burn-in pattern speed: phase offset grows by speed/10 per tick"""

    def __init__(self):
        super().__init__(
            label="Speed",
            min_value=10,
            max_value=100,
            default=50,
            step=1,
        )
