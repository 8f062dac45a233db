"""
Models package - Data models for the display test pattern engine

Only dependency-free modules are re-exported here. Color depends on
utils.colors (which in turn raises models.errors), so import it from
models.color directly.
"""

from .enums import TestID, BurnInPatternID, ParamFamily, PlaybackState, LogLevel, LogCategory
from .surface import Surface
from .errors import DisplayTestError, ConfigurationError, InvalidParameterError, SurfaceUnavailableError

__all__ = [
    'TestID',
    'BurnInPatternID',
    'ParamFamily',
    'PlaybackState',
    'LogLevel',
    'LogCategory',
    'Surface',
    'DisplayTestError',
    'ConfigurationError',
    'InvalidParameterError',
    'SurfaceUnavailableError',
]
