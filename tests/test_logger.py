"""
Tests for the structured console logger.
"""

import io

from models.enums import BurnInPatternID, LogCategory, LogLevel, ParamFamily
from services import config_validation
from utils.logger import Logger, format_value


class TestLogger:

    def test_message_and_details(self, capsys):
        logger = Logger(use_colors=False)
        logger.info(LogCategory.ANIMATION, "Pattern selected", pattern="plasma", speed=50)

        lines = capsys.readouterr().out.splitlines()
        assert "ANIMATION" in lines[0]
        assert lines[0].endswith("Pattern selected")
        assert lines[1].strip() == "├─ pattern: plasma"
        assert lines[2].strip() == "└─ speed: 50"

    def test_level_filter(self, capsys):
        logger = Logger(min_level=LogLevel.WARN, use_colors=False)
        logger.info(LogCategory.CONFIG, "hidden")
        logger.error(LogCategory.CONFIG, "shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_bound_logger_category(self, capsys):
        log = Logger(use_colors=False).for_category(LogCategory.SURFACE)
        log.warn("Frame saved")

        assert "SURFACE" in capsys.readouterr().out

    def test_colors_disabled(self, capsys):
        Logger(use_colors=False).info(LogCategory.SYSTEM, "plain")

        assert "\033[" not in capsys.readouterr().out

    def test_is_enabled_follows_min_level(self):
        logger = Logger(min_level=LogLevel.INFO, use_colors=False)

        assert not logger.is_enabled(LogLevel.DEBUG)
        assert logger.for_category(LogCategory.EVENT).is_enabled(LogLevel.WARN)

    def test_explicit_stream(self, capsys):
        buffer = io.StringIO()
        Logger(use_colors=False, stream=buffer).info(LogCategory.RENDER, "to buffer")

        assert "to buffer" in buffer.getvalue()
        assert capsys.readouterr().out == ""


class TestFormatValue:

    def test_enum_prints_value(self):
        assert format_value(BurnInPatternID.PLASMA) == "plasma"

    def test_float_is_shortened(self):
        assert format_value(0.5) == "0.5"
        assert format_value(1 / 3) == "0.333"
        assert format_value(2.0) == "2"

    def test_snapshot_prints_as_dict(self):
        params = config_validation.defaults(ParamFamily.CHECKERBOARD)

        assert format_value(params) == str(params.to_dict())
