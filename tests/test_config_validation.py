"""
Tests for parameter domains and snapshot validation.
"""

import dataclasses

import pytest

from models.enums import BurnInPatternID, GradientDirection, ParamFamily, UniformityBase
from models.errors import ConfigurationError, InvalidParameterError
from models.params import BoolParam, ChoiceParam, EnumParam, HexColorParam, IntRangeParam
from models.pattern_params import BurnInParams, DeadPixelParams
from services import config_validation


class TestParams:

    def test_int_range_clamps_and_snaps(self):
        param = IntRangeParam(label="Interval", min_value=500, max_value=5000, default=2000, step=100)

        assert param.clamp(100) == 500
        assert param.clamp(9000) == 5000
        assert param.clamp(2040) == 2000
        assert param.clamp(2050) == 2100
        assert param.clamp("750") == 800

    def test_choice_snaps_to_nearest(self):
        param = ChoiceParam(label="Grid", values=[2, 4, 8, 16, 32, 50], default=8)

        assert param.clamp(10) == 8
        assert param.clamp(12) == 8  # tie goes to the smaller value
        assert param.clamp(45) == 50
        assert param.clamp(1000) == 50

    def test_enum_accepts_member_or_value(self):
        param = EnumParam(label="Base", enum_type=UniformityBase, default=UniformityBase.WHITE)

        assert param.clamp("gray") is UniformityBase.GRAY
        assert param.clamp(UniformityBase.BLACK) is UniformityBase.BLACK

    def test_enum_rejects_unknown(self):
        param = EnumParam(label="Base", enum_type=UniformityBase, default=UniformityBase.WHITE)

        with pytest.raises(InvalidParameterError) as exc_info:
            param.validate("base", "purple")
        assert exc_info.value.field == "base"
        assert exc_info.value.value == "purple"

    @pytest.mark.parametrize("raw, expected", [(True, True), (0, False), ("on", True), ("No", False)])
    def test_bool_coercion(self, raw, expected):
        assert BoolParam(label="Flag", default=False).clamp(raw) is expected

    def test_bool_rejects_other_values(self):
        with pytest.raises(InvalidParameterError):
            BoolParam(label="Flag", default=False).clamp("maybe")

    def test_hex_color_normalised(self):
        assert HexColorParam(label="Color", default="#000000").clamp("#00D9FF") == "#00d9ff"

    def test_hex_color_rejects_short_form(self):
        with pytest.raises(InvalidParameterError):
            HexColorParam(label="Color", default="#000000").clamp("#fff")

    def test_hex_color_rejects_trailing_newline(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            config_validation.validate(ParamFamily.RESPONSE_TIME, {"object_color": "#00d9ff\n"})
        assert exc_info.value.field == "object_color"

    def test_none_means_default(self):
        param = IntRangeParam(label="Speed", min_value=10, max_value=100, default=50)

        assert param.validate("speed", None) == 50

    def test_describe(self):
        info = ChoiceParam(label="Grid", values=[4, 2], default=2).describe()

        assert info == {"label": "Grid", "default": 2, "values": [2, 4]}


class TestValidate:

    def test_defaults_for_every_family(self):
        for family in ParamFamily:
            params = config_validation.defaults(family)
            assert config_validation.validate(family) == params

    def test_burn_in_defaults(self):
        params = config_validation.defaults(ParamFamily.BURN_IN)

        assert params == BurnInParams(
            pattern=BurnInPatternID.SCROLLING_BARS,
            speed=50,
            color_cycle=True,
            shift_amount=5,
            plasma_stride=2,
        )

    def test_numeric_fields_are_clamped(self):
        params = config_validation.validate("burn_in", {"speed": 500, "shift_amount": 0})

        assert params.speed == 100
        assert params.shift_amount == 1

    def test_interval_snaps_to_step(self):
        params = config_validation.validate(ParamFamily.DEAD_PIXEL, {"interval": 2040})

        assert isinstance(params, DeadPixelParams)
        assert params.interval == 2000

    def test_gradient_steps_snap_to_allowed_values(self):
        params = config_validation.validate(ParamFamily.GRADIENT, {"steps": 300, "direction": "diagonal"})

        assert params.steps == 256
        assert params.direction is GradientDirection.DIAGONAL

    def test_gradient_steps_upper_bound(self):
        params = config_validation.validate(ParamFamily.GRADIENT, {"steps": 100000})

        assert params.steps == 4096

    def test_unknown_enum_value_names_field(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            config_validation.validate(ParamFamily.BURN_IN, {"pattern": "laser"})

        assert exc_info.value.field == "pattern"
        assert exc_info.value.value == "laser"
        assert "plasma" in exc_info.value.allowed

    def test_unknown_family(self):
        with pytest.raises(ConfigurationError):
            config_validation.validate("karaoke", {})

    def test_unknown_keys_are_ignored(self):
        params = config_validation.validate(ParamFamily.CONTRAST, {"grid_size": 16, "volume": 11})

        assert params.grid_size == 16
        assert not hasattr(params, "volume")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "fast", True])
    def test_non_numeric_speed(self, value):
        with pytest.raises(InvalidParameterError):
            config_validation.validate(ParamFamily.BURN_IN, {"speed": value})

    def test_snapshots_are_immutable(self):
        params = config_validation.defaults(ParamFamily.BRIGHTNESS)

        with pytest.raises(dataclasses.FrozenInstanceError):
            params.brightness = 10

    def test_to_dict_uses_enum_values(self):
        data = config_validation.defaults(ParamFamily.UNIFORMITY).to_dict()

        assert data == {"base": "white", "brightness": 100, "grid_enabled": False, "grid_size": 3}

    def test_describe_lists_every_field(self):
        info = config_validation.describe(ParamFamily.RESPONSE_TIME)

        assert set(info) == {"speed", "shape", "direction", "show_trail", "object_color"}
        assert info["speed"]["values"] == [250, 500, 1000, 2000]
