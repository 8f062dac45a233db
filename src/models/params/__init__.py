"""Parameter domain definitions"""

from .param import Param
from .int_range_param import IntRangeParam
from .choice_param import ChoiceParam
from .enum_param import EnumParam
from .bool_param import BoolParam
from .hex_color_param import HexColorParam
from .speed_param import SpeedParam
from .brightness_param import BrightnessParam

__all__ = [
    "Param",
    "IntRangeParam",
    "ChoiceParam",
    "EnumParam",
    "BoolParam",
    "HexColorParam",
    "SpeedParam",
    "BrightnessParam",
]
