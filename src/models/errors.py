"""
Error taxonomy

ConfigurationError      - parameter outside its domain or malformed
InvalidParameterError   - enumerated / typed field got an unrecognized value
SurfaceUnavailableError - zero-area or missing surface, draw is skipped
"""

from typing import Any


class DisplayTestError(Exception):
    """Base class for all engine errors"""


class ConfigurationError(DisplayTestError):
    """Parameter outside domain or malformed (e.g. fewer than 2 gradient stops)"""


class InvalidParameterError(ConfigurationError):
    """Unrecognized value for an enumerated or typed parameter field"""

    def __init__(self, field: str, value: Any, allowed: Any = None):
        self.field = field
        self.value = value
        self.allowed = allowed
        message = f"Invalid value for '{field}': {value!r}"
        if allowed is not None:
            message += f" (allowed: {allowed})"
        super().__init__(message)


class SurfaceUnavailableError(DisplayTestError):
    """Surface is missing or has zero area"""
