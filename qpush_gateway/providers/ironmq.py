"""IronMQ push queue adapter."""

from qpush_gateway.errors import DecodeError
from qpush_gateway.models import NotificationKind
from .base import AdapterResult, BaseAdapter, InboundRequest
from .resolver import QUEUE_KEY, resolve_queue_name

MESSAGE_ID_HEADER = "iron-message-id"
SUBSCRIBER_MESSAGE_ID_HEADER = "iron-subscriber-message-id"
SUBSCRIBER_MESSAGE_URL_HEADER = "iron-subscriber-message-url"

ACK = "IronMQ Notification Received."


class IronMqAdapter(BaseAdapter):
    """Translates messages pushed from an IronMQ push queue."""

    @property
    def provider_name(self) -> str:
        return "ironmq"

    @property
    def trigger_header(self) -> str:
        return MESSAGE_ID_HEADER

    def parse(self, request: InboundRequest) -> AdapterResult:
        message = self.decode_json(request.body)
        if not isinstance(message, dict):
            raise DecodeError("Unable to decode JSON")

        subscriber_url = request.header(SUBSCRIBER_MESSAGE_URL_HEADER)
        queue = resolve_queue_name(message, subscriber_url)
        metadata = {
            SUBSCRIBER_MESSAGE_ID_HEADER: request.header(SUBSCRIBER_MESSAGE_ID_HEADER),
            SUBSCRIBER_MESSAGE_URL_HEADER: subscriber_url,
        }

        # Routing key must not reach subscribers
        body = {key: value for key, value in message.items() if key != QUEUE_KEY}

        return self.build(
            queue,
            NotificationKind.MESSAGE,
            request.header(MESSAGE_ID_HEADER),
            body,
            metadata,
            ACK,
        )
