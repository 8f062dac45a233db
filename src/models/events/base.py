from __future__ import annotations

import time
from dataclasses import dataclass, field, fields
from typing import Any, Dict

from models.events.types import EventType
from models.events.sources import EventSource

_ENVELOPE = ("type", "source", "timestamp")


@dataclass(init=False)
class Event:
    """
    Envelope shared by every session event.

    Subclasses declare their payload as dataclass fields and set type and
    source through this constructor; timestamp is wall-clock seconds.
    """

    type: EventType
    source: EventSource | None
    timestamp: float = field(default_factory=time.time)

    def __init__(self, *, type: EventType, source: EventSource | None):
        self.type = type
        self.source = source
        self.timestamp = time.time()

    def to_data(self) -> Dict[str, Any]:
        """Payload fields only, for history and log output."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in _ENVELOPE
        }
