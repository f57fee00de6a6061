"""IronMQ adapter and queue-name resolution."""

import pytest

from qpush_gateway.errors import DecodeError, QueueResolutionError
from qpush_gateway.models import NotificationKind
from qpush_gateway.providers import InboundRequest, IronMqAdapter, resolve_queue_name
from qpush_gateway.providers.ironmq import ACK
from tests.conftest import SUBSCRIBER_URL, dumps, iron_headers


def _parse(payload, url=None):
    request = InboundRequest.from_headers(iron_headers(url), dumps(payload))
    return IronMqAdapter().parse(request)


def test_queue_key_in_body_wins_and_is_removed():
    result = _parse({"_qpush_queue": "invoices", "invoice": 7}, SUBSCRIBER_URL)

    assert result.queue_name == "invoices"
    assert result.kind == NotificationKind.MESSAGE
    assert result.ack == ACK
    assert result.notification.body == {"invoice": 7}
    assert result.notification.message_id == "6012345678901234567"


def test_queue_from_subscriber_url():
    result = _parse({"invoice": 7}, SUBSCRIBER_URL)

    assert result.queue_name == "billing"
    assert result.notification.metadata == {
        "iron-subscriber-message-id": "6098765432109876543",
        "iron-subscriber-message-url": SUBSCRIBER_URL,
    }


def test_absent_subscriber_headers_are_none():
    request = InboundRequest.from_headers(
        {"Iron-Message-Id": "1"}, dumps({"_qpush_queue": "invoices"})
    )
    result = IronMqAdapter().parse(request)

    assert result.notification.metadata == {
        "iron-subscriber-message-id": None,
        "iron-subscriber-message-url": None,
    }


def test_unresolvable_queue_raises():
    with pytest.raises(QueueResolutionError, match="Unable to determine queue name"):
        _parse({"invoice": 7}, "https://example.com/hooks/billing")


@pytest.mark.parametrize("body", [b"not json", b"null", b"\"text\"", b"[1]"])
def test_body_must_be_json_object(body):
    request = InboundRequest.from_headers(iron_headers(SUBSCRIBER_URL), body)

    with pytest.raises(DecodeError):
        IronMqAdapter().parse(request)


def test_empty_queue_key_is_rejected():
    with pytest.raises(DecodeError):
        _parse({"_qpush_queue": ""})


def test_decoded_message_is_not_mutated():
    message = {"_qpush_queue": "invoices", "invoice": 7}

    assert resolve_queue_name(message, None) == "invoices"
    assert message == {"_qpush_queue": "invoices", "invoice": 7}


@pytest.mark.parametrize(
    ("url", "queue"),
    [
        ("https://api/2/projects/p/queues/qpush_billing/messages/m", "billing"),
        ("https://api/2/projects/p/queues/billing/messages/m", "billing"),
        ("https://api/2/projects/p/QUEUES/Qpush_Mixed-Case/Messages/m", "Qpush_Mixed-Case"),
        ("https://api/2/projects/p/queues/qpush_a_qpush_b/messages/m", "a_qpush_b"),
    ],
)
def test_resolve_from_url(url, queue):
    assert resolve_queue_name({}, url) == queue


@pytest.mark.parametrize(
    "url",
    [
        None,
        "https://api/2/projects/p/queues/billing",
        "https://api/2/projects/p/queues/bill.ing/messages/m",
    ],
)
def test_resolve_fails_without_match(url):
    with pytest.raises(QueueResolutionError):
        resolve_queue_name({"invoice": 7}, url)
