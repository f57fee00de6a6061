"""AWS SNS push notification adapter."""

import logging

from qpush_gateway.errors import DecodeError
from qpush_gateway.models import NotificationKind
from .base import AdapterResult, BaseAdapter, InboundRequest
from .resolver import strip_queue_prefix

logger = logging.getLogger(__name__)

MESSAGE_TYPE_HEADER = "x-amz-sns-message-type"
NOTIFICATION_TYPE = "Notification"

MESSAGE_ACK = "SNS Message Notification Received."
SUBSCRIPTION_ACK = "SNS Subscription Confirmation Received."


def queue_from_topic_arn(topic_arn: str) -> str:
    """arn:aws:sns:<region>:<account>:qpush_<queue> -> <queue>"""
    return strip_queue_prefix(topic_arn.split(":")[-1])


class SnsAdapter(BaseAdapter):
    """Translates SNS notifications and subscription confirmations."""

    @property
    def provider_name(self) -> str:
        return "sns"

    @property
    def trigger_header(self) -> str:
        return MESSAGE_TYPE_HEADER

    def parse(self, request: InboundRequest) -> AdapterResult:
        payload = self.decode_json(request.body)
        if not isinstance(payload, dict):
            raise DecodeError("SNS payload is not a JSON object")

        message_type = request.header(MESSAGE_TYPE_HEADER)
        metadata = {
            "Type": payload.get("Type"),
            "TopicArn": payload.get("TopicArn"),
            "Timestamp": payload.get("Timestamp"),
        }

        if message_type == NOTIFICATION_TYPE:
            # Publishers put the queue name in the Subject field
            queue = payload.get("Subject")
            metadata["Subject"] = queue
            return self.build(
                queue,
                NotificationKind.MESSAGE,
                payload.get("MessageId"),
                payload.get("Message"),
                metadata,
                MESSAGE_ACK,
            )

        # Confirmations carry no Subject, so the queue comes from the topic
        topic_arn = payload.get("TopicArn")
        if not isinstance(topic_arn, str):
            raise DecodeError("SNS subscription confirmation has no TopicArn")
        logger.debug(f"SNS {message_type} for topic {topic_arn}")

        metadata["Token"] = payload.get("Token")
        return self.build(
            queue_from_topic_arn(topic_arn),
            NotificationKind.SUBSCRIPTION,
            payload.get("MessageId"),
            payload.get("Message"),
            metadata,
            SUBSCRIPTION_ACK,
        )
