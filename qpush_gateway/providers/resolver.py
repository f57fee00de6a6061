"""Logical queue name recovery for IronMQ push messages."""

import re
from typing import Any

from qpush_gateway.errors import QueueResolutionError

QUEUE_PREFIX = "qpush_"
QUEUE_KEY = "_qpush_queue"

# e.g. https://mq-aws-us-east-1.iron.io/1/projects/<id>/queues/qpush_orders/messages/<id>
_SUBSCRIBER_URL_QUEUE = re.compile(r"/queues/([a-z0-9_-]+)/messages/", re.IGNORECASE)


def strip_queue_prefix(name: str) -> str:
    """Drop the provisioning prefix from a provider-side queue name."""
    if name.startswith(QUEUE_PREFIX):
        return name[len(QUEUE_PREFIX):]
    return name


def resolve_queue_name(body: dict[str, Any], subscriber_url: str | None) -> Any:
    """Find the logical queue for a decoded IronMQ message.

    The routing key embedded in the body wins; it is left in place for the
    caller to remove. Otherwise the queue is read from the subscriber message
    URL IronMQ sends along with the push.
    """
    if QUEUE_KEY in body:
        return body[QUEUE_KEY]

    if subscriber_url is not None:
        match = _SUBSCRIBER_URL_QUEUE.search(subscriber_url)
        if match:
            return strip_queue_prefix(match.group(1))

    raise QueueResolutionError()
