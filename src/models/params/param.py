from __future__ import annotations
from typing import Any
from abc import ABC, abstractmethod


class Param(ABC):
    """
    Base class for all tunable pattern parameters.

    Param = a field the operator can edit (slider / select / toggle).
    This class defines:
    - how the field is labelled
    - its default value
    - how raw input is coerced into the declared domain
    """

    label: str
    default: Any

    @abstractmethod
    def clamp(self, value: Any) -> Any:
        """Coerce value into the declared domain"""
        ...

    def validate(self, field: str, value: Any) -> Any:
        """
        Coerce value for the given field name.

        None means "not provided" and yields the default.
        """
        if value is None:
            return self.default
        return self.clamp_field(field, value)

    def clamp_field(self, field: str, value: Any) -> Any:
        return self.clamp(value)

    def describe(self) -> dict:
        """Domain description for UI / CLI help"""
        return {"label": self.label, "default": self.default}
