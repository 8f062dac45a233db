"""
ConfigValidation - declared parameter domains per family

Every family maps to an immutable snapshot dataclass plus one Param per
field. validate() is the only way to build a snapshot from raw input:
numeric fields are clamped and snapped to step, enumerated / typed fields
raise InvalidParameterError on unknown values.

Validation runs once when a change is accepted (ConfigStore.update), never
on a draw call.
"""

from dataclasses import fields
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from models.enums import (
    BurnInPatternID,
    GradientDirection,
    GradientPreset,
    MotionDirection,
    ObjectShape,
    ParamFamily,
    UniformityBase,
    ViewingAnglePattern,
)
from models.errors import ConfigurationError
from models.params import (
    BoolParam,
    BrightnessParam,
    ChoiceParam,
    EnumParam,
    HexColorParam,
    IntRangeParam,
    Param,
    SpeedParam,
)
from models.pattern_params import (
    BrightnessParams,
    BurnInParams,
    CheckerboardParams,
    ContrastParams,
    DeadPixelParams,
    GradientParams,
    PatternParams,
    ResponseTimeParams,
    UniformityParams,
    ViewingAngleParams,
)
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)

FamilyDomain = Tuple[Type[PatternParams], Dict[str, Param]]


FAMILY_DOMAINS: Dict[ParamFamily, FamilyDomain] = {
    ParamFamily.DEAD_PIXEL: (DeadPixelParams, {
        "color_index": IntRangeParam(label="Color", min_value=0, max_value=7, default=0),
        "auto_mode": BoolParam(label="Auto Cycle", default=False),
        "interval": IntRangeParam(label="Interval (ms)", min_value=500, max_value=5000, default=2000, step=100),
        "custom_color": HexColorParam(label="Custom Color", default="#ff6600"),
        "use_custom_color": BoolParam(label="Use Custom Color", default=False),
    }),
    ParamFamily.UNIFORMITY: (UniformityParams, {
        "base": EnumParam(label="Base Color", enum_type=UniformityBase, default=UniformityBase.WHITE),
        "brightness": BrightnessParam(),
        "grid_enabled": BoolParam(label="Show Grid", default=False),
        "grid_size": ChoiceParam(label="Grid Size", values=[2, 3, 4, 5], default=3),
    }),
    ParamFamily.GRADIENT: (GradientParams, {
        "direction": EnumParam(label="Direction", enum_type=GradientDirection, default=GradientDirection.HORIZONTAL),
        "steps": ChoiceParam(label="Steps", values=[8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096], default=256),
        "preset": EnumParam(label="Preset", enum_type=GradientPreset, default=GradientPreset.FULL_SPECTRUM),
    }),
    ParamFamily.RESPONSE_TIME: (ResponseTimeParams, {
        "speed": ChoiceParam(label="Speed (ms)", values=[250, 500, 1000, 2000], default=1000),
        "shape": EnumParam(label="Shape", enum_type=ObjectShape, default=ObjectShape.CIRCLE),
        "direction": EnumParam(label="Direction", enum_type=MotionDirection, default=MotionDirection.HORIZONTAL),
        "show_trail": BoolParam(label="Show Trail", default=True),
        "object_color": HexColorParam(label="Object Color", default="#00d9ff"),
    }),
    ParamFamily.CONTRAST: (ContrastParams, {
        "grid_size": ChoiceParam(label="Grid Size", values=[2, 4, 8, 16, 32, 50], default=8),
    }),
    ParamFamily.BRIGHTNESS: (BrightnessParams, {
        "brightness": BrightnessParam(),
        "window_size": IntRangeParam(label="Window Size (%)", min_value=10, max_value=100, default=50),
    }),
    ParamFamily.CHECKERBOARD: (CheckerboardParams, {
        "grid_size": IntRangeParam(label="Grid Size", min_value=1, max_value=256, default=8),
        "color_a": HexColorParam(label="Color A", default="#000000"),
        "color_b": HexColorParam(label="Color B", default="#ffffff"),
    }),
    ParamFamily.VIEWING_ANGLE: (ViewingAngleParams, {
        "pattern": EnumParam(label="Pattern", enum_type=ViewingAnglePattern, default=ViewingAnglePattern.CHECKERBOARD),
    }),
    ParamFamily.BURN_IN: (BurnInParams, {
        "pattern": EnumParam(label="Pattern", enum_type=BurnInPatternID, default=BurnInPatternID.SCROLLING_BARS),
        "speed": SpeedParam(),
        "color_cycle": BoolParam(label="Color Cycling", default=True),
        "shift_amount": IntRangeParam(label="Shift Amount (px)", min_value=1, max_value=20, default=5),
        "plasma_stride": IntRangeParam(label="Plasma Sample Stride", min_value=1, max_value=8, default=2),
    }),
}


def _check_domains() -> None:
    """Every family has a domain table whose fields match the snapshot dataclass"""
    for family in ParamFamily:
        if family not in FAMILY_DOMAINS:
            raise RuntimeError(f"No parameter domains for family {family.value}")
        params_cls, field_params = FAMILY_DOMAINS[family]
        declared = {f.name for f in fields(params_cls)}
        if declared != set(field_params):
            raise RuntimeError(f"Parameter domains for {family.value} does not match {params_cls.__name__}")


_check_domains()


def resolve_family(family: Union[ParamFamily, str]) -> ParamFamily:
    """
    Raises:
        ConfigurationError: unknown family name
    """
    if isinstance(family, ParamFamily):
        return family
    try:
        return ParamFamily(family)
    except ValueError:
        raise ConfigurationError(
            f"Unknown parameter family: {family!r} (known: {[f.value for f in ParamFamily]})"
        ) from None


def family_domain(family: Union[ParamFamily, str]) -> FamilyDomain:
    return FAMILY_DOMAINS[resolve_family(family)]


def defaults(family: Union[ParamFamily, str]) -> PatternParams:
    params_cls, field_params = family_domain(family)
    return params_cls(**{name: param.default for name, param in field_params.items()})


def validate(family: Union[ParamFamily, str], raw: Optional[Mapping[str, Any]] = None) -> PatternParams:
    """
    Build a validated snapshot for a family.

    Missing fields take their defaults; unknown keys are ignored (with a
    warning).

    Raises:
        ConfigurationError: unknown family
        InvalidParameterError: enumerated / typed field with unrecognized value
    """
    family = resolve_family(family)
    params_cls, field_params = FAMILY_DOMAINS[family]
    raw = dict(raw or {})

    unknown = sorted(set(raw) - set(field_params))
    if unknown:
        log.warn("Ignoring unknown parameters", family=family.value, keys=", ".join(unknown))

    values = {}
    for name, param in field_params.items():
        value = param.validate(name, raw.get(name))
        if isinstance(param, (IntRangeParam, ChoiceParam)) and name in raw and raw[name] != value:
            log.debug("Parameter clamped", family=family.value, field=name, raw=raw[name], value=value)
        values[name] = value

    return params_cls(**values)


def describe(family: Union[ParamFamily, str]) -> Dict[str, dict]:
    """Field domains for help output"""
    _, field_params = family_domain(family)
    return {name: param.describe() for name, param in field_params.items()}
