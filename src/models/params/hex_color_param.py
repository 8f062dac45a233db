from __future__ import annotations
from typing import Any

from models.errors import InvalidParameterError
from utils.colors import is_valid_hex_color
from .param import Param


class HexColorParam(Param):
    """'#rrggbb' color parameter, normalized to lower case"""

    def __init__(self, *, label: str, default: str):
        self.label = label
        self.default = default

    def clamp(self, value: Any) -> str:
        return self.clamp_field(self.label, value)

    def clamp_field(self, field: str, value: Any) -> str:
        if not is_valid_hex_color(value):
            raise InvalidParameterError(field, value, "#rrggbb")
        return value.lower()
