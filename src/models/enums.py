"""
Enums for the display test pattern engine
"""

from enum import Enum, auto


class TestID(Enum):
    """Display test identifiers (one screen per test)"""
    __test__ = False
    DEAD_PIXEL = "dead-pixel"
    UNIFORMITY = "uniformity"
    GRADIENT = "gradient"
    RESPONSE_TIME = "response-time"
    CONTRAST = "contrast"
    BRIGHTNESS = "brightness"
    VIEWING_ANGLE = "viewing-angle"
    BURN_IN_FIX = "burn-in-fix"
    CHECKERBOARD = "checkerboard"  # generic two-color grid screen


class BurnInPatternID(Enum):
    """Burn-in mitigation patterns driven by AnimatedPatternEngine"""
    SCROLLING_BARS = "scrolling-bars"
    PIXEL_SHIFT = "pixel-shift"
    WAVE_PATTERN = "wave-pattern"
    SPIRAL = "spiral"
    BOUNCING_BOX = "bouncing-box"
    PLASMA = "plasma"


class ParamFamily(Enum):
    """Parameter families - one immutable snapshot per family"""
    DEAD_PIXEL = "dead_pixel"
    UNIFORMITY = "uniformity"
    GRADIENT = "gradient"
    RESPONSE_TIME = "response_time"
    CONTRAST = "contrast"
    BRIGHTNESS = "brightness"
    CHECKERBOARD = "checkerboard"
    VIEWING_ANGLE = "viewing_angle"
    BURN_IN = "burn_in"


class GradientDirection(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


class MotionDirection(Enum):
    """Paths for the response-time test object"""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"
    CIRCULAR = "circular"


class ObjectShape(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"


class UniformityBase(Enum):
    """Base fill for the uniformity test"""
    WHITE = "white"
    GRAY = "gray"
    BLACK = "black"


class GradientPreset(Enum):
    RED_GREEN = "red-green"
    GREEN_BLUE = "green-blue"
    BLUE_RED = "blue-red"
    FULL_SPECTRUM = "full-spectrum"


class ViewingAnglePattern(Enum):
    CHECKERBOARD = "checkerboard"
    GRADIENT = "gradient"


class PlaybackState(Enum):
    RUNNING = auto()
    PAUSED = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    COLOR = auto()       # Color parsing / conversion
    RENDER = auto()      # Static pattern rendering
    ANIMATION = auto()   # Burn-in pattern engine
    MOTION = auto()      # Response-time motion controller
    SURFACE = auto()     # Pixel surface, resize
    SCHEDULER = auto()   # Tick delivery
    EVENT = auto()       # Event bus events and handling
    SESSION = auto()     # Test selection, pause / resume
    SYSTEM = auto()      # Startup, shutdown, errors
