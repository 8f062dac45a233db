"""
EventBus middleware

Each middleware takes an Event and returns it (possibly replaced) or None
to drop it before any handler runs.
"""

from models.enums import LogLevel
from models.events import Event
from utils.logger import format_value, get_logger, LogCategory

log = get_logger().for_category(LogCategory.EVENT)


def log_middleware(event: Event) -> Event:
    """
    Trace every event at DEBUG level; never blocks.

        event_bus.add_middleware(log_middleware)
    """
    if not log.is_enabled(LogLevel.DEBUG):
        return event

    payload = {k: format_value(v) for k, v in event.to_data().items()}
    log.debug(
        f"Event {event.type.name}",
        source=event.source.name if event.source else "-",
        **payload
    )
    return event
