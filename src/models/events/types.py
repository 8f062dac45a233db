from enum import Enum, auto


class EventType(Enum):
    # Configuration
    CONFIG_CHANGED = auto()

    # Burn-in / test selection
    PATTERN_SELECTED = auto()
    TEST_SELECTED = auto()

    # Host
    SURFACE_RESIZED = auto()
    PLAYBACK_CHANGED = auto()
