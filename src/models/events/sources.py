from enum import Enum, auto


class EventSource(Enum):
    """Event source identifiers for application events"""
    CONFIG_STORE = auto()       # Accepted parameter changes
    TEST_SESSION = auto()       # Test / pattern selection and playback
    HOST = auto()               # Window / surface events
    APPLICATION = auto()        # Generic application events
