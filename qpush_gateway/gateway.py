"""Dispatch gateway - picks the provider adapter for a request and emits its event."""

import logging

from pydantic import BaseModel, ConfigDict

from qpush_gateway.errors import NotificationError
from qpush_gateway.events import EventSink
from qpush_gateway.models import NotificationEvent
from qpush_gateway.providers import BaseAdapter, InboundRequest, IronMqAdapter, SnsAdapter

logger = logging.getLogger(__name__)


class Handled(BaseModel):
    """One or more providers recognized the request."""
    model_config = ConfigDict(frozen=True)

    ack: str
    events: list[NotificationEvent]


class Unhandled(BaseModel):
    """No provider header present; the request belongs to someone else."""
    model_config = ConfigDict(frozen=True)


class Failed(BaseModel):
    """A provider adapter rejected the request."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: NotificationError


RouteResult = Handled | Unhandled | Failed


def default_adapters() -> list[BaseAdapter]:
    # Order matters: when both headers are present the IronMQ ack wins
    return [SnsAdapter(), IronMqAdapter()]


def route(request: InboundRequest, adapters: list[BaseAdapter]) -> RouteResult:
    """Translate a request without side effects."""
    ack = None
    events = []

    for adapter in adapters:
        if not adapter.matches(request):
            continue
        try:
            result = adapter.parse(request)
        except NotificationError as e:
            logger.warning(f"{adapter.provider_name} notification rejected: {e}")
            return Failed(error=e)
        ack = result.ack
        events.append(result.event())

    if ack is None:
        return Unhandled()
    return Handled(ack=ack, events=events)


class DispatchGateway:
    """Routes inbound requests and hands their events to the sink."""

    def __init__(self, sink: EventSink, adapters: list[BaseAdapter] | None = None):
        self.sink = sink
        self.adapters = adapters if adapters is not None else default_adapters()

    def matches(self, request: InboundRequest) -> bool:
        """True when any provider header is present."""
        return any(adapter.matches(request) for adapter in self.adapters)

    def handle(self, request: InboundRequest) -> RouteResult:
        result = route(request, self.adapters)

        if isinstance(result, Handled):
            for event in result.events:
                logger.info(f"Dispatching {event.kind.value} for queue '{event.queue_name}'")
                self.sink.emit(event.queue_name, event.kind, event.notification)

        return result
