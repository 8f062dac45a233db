"""
Event system for the display test pattern engine

Configuration changes, pattern / test selection and host events are published
on the EventBus as typed events.
"""

# Event type, base class, and sources
from models.events.types import EventType
from models.events.base import Event
from models.events.sources import EventSource

# Session events
from models.events.session_events import (
    ConfigChangedEvent,
    PatternSelectedEvent,
    TestSelectedEvent,
    SurfaceResizedEvent,
    PlaybackChangedEvent,
)

__all__ = [
    "EventType",
    "Event",
    "EventSource",
    "ConfigChangedEvent",
    "PatternSelectedEvent",
    "TestSelectedEvent",
    "SurfaceResizedEvent",
    "PlaybackChangedEvent",
]
