"""Event sink interface and the in-process dispatcher behind it."""

import logging
from collections.abc import Callable
from typing import Protocol

from qpush_gateway.models import Notification, NotificationEvent, NotificationKind, event_name

logger = logging.getLogger(__name__)

ALL_QUEUES = "*"

Listener = Callable[[NotificationEvent], None]


class EventSink(Protocol):
    """Receives one call per notification handled by the gateway."""

    def emit(self, queue_name: str, kind: NotificationKind, notification: Notification) -> None:
        ...


class EventDispatcher:
    """Synchronous dispatcher keyed by "<queue>.notification".

    Listeners run in registration order; wildcard listeners run after the
    queue-specific ones. Listener errors propagate to the caller.
    """

    def __init__(self):
        self._listeners: dict[str, list[tuple[NotificationKind | None, Listener]]] = {}

    def subscribe(
        self,
        queue_name: str,
        listener: Listener,
        kind: NotificationKind | None = None,
    ) -> None:
        """Register a listener for a queue ("*" for every queue), optionally for one kind."""
        key = ALL_QUEUES if queue_name == ALL_QUEUES else event_name(queue_name)
        self._listeners.setdefault(key, []).append((kind, listener))

    def listeners(self) -> list[str]:
        return sorted(self._listeners)

    def emit(self, queue_name: str, kind: NotificationKind, notification: Notification) -> None:
        event = NotificationEvent(queue_name=queue_name, kind=kind, notification=notification)
        registered = self._listeners.get(event.name, []) + self._listeners.get(ALL_QUEUES, [])

        for wanted, listener in registered:
            if wanted is None or wanted == event.kind:
                listener(event)


def log_event(event: NotificationEvent) -> None:
    logger.info(
        f"{event.name} [{event.kind.value}] message_id={event.notification.message_id}"
    )
