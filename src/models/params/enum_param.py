from __future__ import annotations
from enum import Enum
from typing import Any, Type

from models.errors import InvalidParameterError
from .param import Param


class EnumParam(Param):
    """
    Parameter restricted to the members of an Enum.

    Accepts the member itself or its string value; anything else raises
    InvalidParameterError naming the field and the offending value.
    """

    def __init__(self, *, label: str, enum_type: Type[Enum], default: Enum):
        self.label = label
        self.enum_type = enum_type
        self.default = default

    @property
    def values(self) -> list:
        return [member.value for member in self.enum_type]

    def clamp(self, value: Any) -> Enum:
        return self.clamp_field(self.label, value)

    def clamp_field(self, field: str, value: Any) -> Enum:
        if isinstance(value, self.enum_type):
            return value
        try:
            return self.enum_type(value)
        except ValueError:
            raise InvalidParameterError(field, value, self.values) from None

    def describe(self) -> dict:
        return {"label": self.label, "default": self.default.value, "values": self.values}
