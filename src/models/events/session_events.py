from dataclasses import dataclass

from models.events.base import Event
from models.events.types import EventType
from models.events.sources import EventSource
from models.enums import BurnInPatternID, ParamFamily, PlaybackState, TestID
from models.pattern_params import PatternParams


@dataclass(init=False)
class ConfigChangedEvent(Event):
    """A family snapshot was replaced; params is the new validated snapshot"""
    family: ParamFamily
    params: PatternParams

    def __init__(self, family: ParamFamily, params: PatternParams):
        super().__init__(
            type=EventType.CONFIG_CHANGED,
            source=EventSource.CONFIG_STORE,
        )
        self.family = family
        self.params = params


@dataclass(init=False)
class PatternSelectedEvent(Event):
    pattern_id: BurnInPatternID

    def __init__(self, pattern_id: BurnInPatternID):
        super().__init__(
            type=EventType.PATTERN_SELECTED,
            source=EventSource.TEST_SESSION,
        )
        self.pattern_id = pattern_id


@dataclass(init=False)
class TestSelectedEvent(Event):
    __test__ = False

    test_id: TestID

    def __init__(self, test_id: TestID):
        super().__init__(
            type=EventType.TEST_SELECTED,
            source=EventSource.TEST_SESSION,
        )
        self.test_id = test_id


@dataclass(init=False)
class SurfaceResizedEvent(Event):
    width: int
    height: int

    def __init__(self, width: int, height: int):
        super().__init__(
            type=EventType.SURFACE_RESIZED,
            source=EventSource.HOST,
        )
        self.width = width
        self.height = height


@dataclass(init=False)
class PlaybackChangedEvent(Event):
    state: PlaybackState

    def __init__(self, state: PlaybackState):
        super().__init__(
            type=EventType.PLAYBACK_CHANGED,
            source=EventSource.TEST_SESSION,
        )
        self.state = state
