"""
Event Bus - routes session events between the config store, the test
session and the host.

Publishers await publish(event). Subscribers register per EventType with an
optional priority and filter. Middleware sees every event first and may
replace it or drop it (return None).
"""

import inspect
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, List, Optional

from models.events import Event, EventType
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.EVENT)

Handler = Callable[[Event], None]
Middleware = Callable[[Event], Optional[Event]]


def _name(fn) -> str:
    return getattr(fn, "__name__", repr(fn))


@dataclass
class Subscription:
    handler: Handler
    priority: int
    filter_fn: Optional[Callable[[Event], bool]]

    def accepts(self, event: Event) -> bool:
        return self.filter_fn is None or bool(self.filter_fn(event))


class EventBus:
    """
    Pub-sub bus for session events

    Handlers for one event type run highest priority first; ties keep
    subscription order. Sync and async handlers are both accepted. A handler
    that raises is logged and skipped, the rest still run.

    Example:
        bus = EventBus()
        bus.subscribe(
            EventType.CONFIG_CHANGED,
            session.on_config_changed,
            filter_fn=lambda e: e.family == ParamFamily.BURN_IN,
        )
        await bus.publish(ConfigChangedEvent(ParamFamily.BURN_IN, params))
    """

    def __init__(self, history_limit: int = 100):
        self._subscriptions: Dict[EventType, List[Subscription]] = {}
        self._middleware: List[Middleware] = []
        self._history: Deque[Event] = deque(maxlen=history_limit)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def subscribe(
        self,
        event_type: EventType,
        handler: Handler,
        priority: int = 0,
        filter_fn: Optional[Callable[[Event], bool]] = None
    ) -> None:
        subs = self._subscriptions.setdefault(event_type, [])
        subs.append(Subscription(handler, priority, filter_fn))
        # list.sort is stable, equal priorities stay in subscription order
        subs.sort(key=lambda s: s.priority, reverse=True)

        log.debug(
            "Handler subscribed",
            event_type=event_type.name,
            handler=_name(handler),
            priority=priority
        )

    def unsubscribe(self, event_type: EventType, handler: Handler) -> bool:
        """Remove a handler; returns True if it was registered"""
        subs = self._subscriptions.get(event_type, [])
        kept = [s for s in subs if s.handler != handler]
        self._subscriptions[event_type] = kept
        return len(kept) != len(subs)

    def handler_count(self, event_type: EventType) -> int:
        return len(self._subscriptions.get(event_type, []))

    def add_middleware(self, middleware: Middleware) -> None:
        """Append to the pipeline; middleware runs in registration order"""
        self._middleware.append(middleware)
        log.debug("Middleware registered", middleware=_name(middleware))

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------

    async def publish(self, event: Event) -> None:
        """Run middleware, record the event, then deliver it to matching handlers"""
        processed = self._apply_middleware(event)
        if processed is None:
            return

        self._history.append(processed)
        await self._dispatch(processed)

    def _apply_middleware(self, event: Event) -> Optional[Event]:
        for middleware in self._middleware:
            event = middleware(event)
            if event is None:
                return None
        return event

    async def _dispatch(self, event: Event) -> None:
        subs = self._subscriptions.get(event.type)
        if not subs:
            log.debug("No handlers for event", event_type=event.type.name)
            return

        # Copy so handlers may (un)subscribe while we iterate
        for sub in list(subs):
            if not sub.accepts(event):
                continue
            try:
                result = sub.handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                log.error(
                    "Event handler failed",
                    handler=_name(sub.handler),
                    event_type=event.type.name,
                    error_type=type(e).__name__,
                    error=str(e)
                )

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def get_event_history(self, limit: int = 10) -> List[Event]:
        """Most recent events, oldest first"""
        if limit <= 0:
            return []
        return list(self._history)[-limit:]

    def clear_history(self) -> None:
        self._history.clear()
