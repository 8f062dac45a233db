import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from engine.frame_scheduler import ManualClock
from engine.pixel_surface import PixelSurface
from services.config_store import ConfigStore
from services.event_bus import EventBus
from services.test_session import TestSession


@pytest.fixture
def surface():
    """100x100 transparent surface."""
    return PixelSurface(100, 100)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def store(event_bus):
    return ConfigStore(event_bus)


@pytest.fixture
def session(event_bus, store):
    return TestSession(PixelSurface(64, 48), store, event_bus)
