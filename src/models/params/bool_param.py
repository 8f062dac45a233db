from __future__ import annotations
from typing import Any

from models.errors import InvalidParameterError
from .param import Param

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


class BoolParam(Param):
    """Toggle parameter. Accepts bools, 0/1 and common on/off strings."""

    def __init__(self, *, label: str, default: bool):
        self.label = label
        self.default = default

    def clamp(self, value: Any) -> bool:
        return self.clamp_field(self.label, value)

    def clamp_field(self, field: str, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
        raise InvalidParameterError(field, value, [True, False])
