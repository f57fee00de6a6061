"""Shared fixtures for provider payloads and the HTTP app."""

import json

import pytest
from fastapi.testclient import TestClient

from qpush_gateway.events import EventDispatcher
from qpush_gateway.main import create_app
from qpush_gateway.models import Notification, NotificationKind

TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:qpush_orders"
SUBSCRIBER_URL = "https://api/2/projects/p/queues/qpush_billing/messages/m"


class RecordingSink:
    """Event sink that keeps every emitted call."""

    def __init__(self):
        self.calls: list[tuple[str, NotificationKind, Notification]] = []

    def emit(self, queue_name: str, kind: NotificationKind, notification: Notification) -> None:
        self.calls.append((queue_name, kind, notification))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def sns_notification() -> dict:
    return {
        "Type": "Notification",
        "MessageId": "22b80b92-fdea-4c2c-8f9d-bdfb0c7bf324",
        "TopicArn": TOPIC_ARN,
        "Subject": "orders",
        "Message": '{"order_id": 42}',
        "Timestamp": "2014-01-21T12:34:56.789Z",
        "SignatureVersion": "1",
        "Signature": "EXAMPLE",
        "UnsubscribeURL": "https://sns.us-east-1.amazonaws.com/?Action=Unsubscribe",
    }


@pytest.fixture
def sns_confirmation() -> dict:
    return {
        "Type": "SubscriptionConfirmation",
        "MessageId": "165545c9-2a5c-472c-8df2-7ff2be2b3b1b",
        "Token": "2336412f37fb687f5d51e6e241d09c805a5a57b30d712f794cc5f6a988666d92",
        "TopicArn": TOPIC_ARN,
        "Message": "You have chosen to subscribe to the topic. To confirm, visit the SubscribeURL.",
        "SubscribeURL": "https://sns.us-east-1.amazonaws.com/?Action=ConfirmSubscription",
        "Timestamp": "2014-01-21T12:00:00.000Z",
    }


def sns_headers(message_type: str = "Notification") -> dict[str, str]:
    return {"x-amz-sns-message-type": message_type, "content-type": "text/plain"}


def iron_headers(url: str | None = None) -> dict[str, str]:
    headers = {"iron-message-id": "6012345678901234567", "iron-subscriber-message-id": "6098765432109876543"}
    if url is not None:
        headers["iron-subscriber-message-url"] = url
    return headers


def dumps(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def dispatcher() -> EventDispatcher:
    return EventDispatcher()


@pytest.fixture
def client(dispatcher: EventDispatcher) -> TestClient:
    return TestClient(create_app(dispatcher=dispatcher))
