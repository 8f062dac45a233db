"""Services layer"""

from .event_bus import EventBus
from .config_store import ConfigStore
from .test_session import TestSession

__all__ = [
    "EventBus",
    "ConfigStore",
    "TestSession",
]
