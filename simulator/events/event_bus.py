"""
Event bus module for the simulator.

An explicit observer list keyed by event class. Handlers subscribed to a base
class also receive its subclasses. Notification order is not part of the
contract.
"""

from collections import defaultdict
from collections.abc import Callable

from catchery import log_warning

from events.event_system import CombatEvent

EventHandler = Callable[[CombatEvent], None]


class EventBus:
    """Dispatches combat events to their subscribers."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[type[CombatEvent], list[EventHandler]] = (
            defaultdict(list)
        )
        self.published_count: int = 0

    def subscribe(self, event_class: type[CombatEvent], handler: EventHandler) -> None:
        """
        Subscribes a handler to an event class.

        Args:
            event_class (type[CombatEvent]): The event class, base classes included.
            handler (EventHandler): The callable receiving the events.

        """
        if handler not in self._subscribers[event_class]:
            self._subscribers[event_class].append(handler)

    def unsubscribe(self, event_class: type[CombatEvent], handler: EventHandler) -> None:
        """Removes a handler; unknown handlers are ignored."""
        handlers = self._subscribers.get(event_class)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, event: CombatEvent) -> None:
        """
        Delivers an event to every matching subscriber.

        A failing handler is logged and does not prevent the delivery to the
        other handlers, nor does it propagate to the publisher.

        Args:
            event (CombatEvent): The event to deliver.

        """
        self.published_count += 1
        for event_class, handlers in list(self._subscribers.items()):
            if not isinstance(event, event_class):
                continue
            for handler in list(handlers):
                try:
                    handler(event)
                except Exception as e:
                    log_warning(
                        f"Event handler failed for {type(event).__name__}",
                        {
                            "event": type(event).__name__,
                            "handler": getattr(handler, "__qualname__", repr(handler)),
                            "error": str(e),
                        },
                    )

    def subscriber_count(self, event_class: type[CombatEvent]) -> int:
        return len(self._subscribers.get(event_class, []))

    def clear(self) -> None:
        self._subscribers.clear()
