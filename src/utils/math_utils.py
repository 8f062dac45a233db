"""
Animation math helpers

Phase folding and finiteness checks shared by the pattern engine and the motion
controller.
"""

import math


def wrap_unit(value: float) -> float:
    """Wrap into [0, 1)"""
    return value % 1.0


def ping_pong(raw: float) -> float:
    """
    Fold a forward time fraction into a rise-then-fall value.

    raw is wrapped into [0, 1) first, so 1.0 folds to 0.

        0.0 -> 0.0, 0.25 -> 0.5, 0.5 -> 1.0, 0.75 -> 0.5
    """
    raw = wrap_unit(raw)
    return raw * 2 if raw <= 0.5 else 2 - raw * 2


def is_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)
