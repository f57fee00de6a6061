"""Internal notification model shared by every provider adapter."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationKind(str, Enum):
    MESSAGE = "message"
    SUBSCRIPTION = "subscription"   # Provider subscription handshake


class Notification(BaseModel):
    """A provider message normalized into one shape."""
    model_config = ConfigDict(frozen=True)

    message_id: str = Field(..., min_length=1)
    body: Any = None
    metadata: dict[str, str | None] = Field(default_factory=dict)


class NotificationEvent(BaseModel):
    """A notification bound to the logical queue it was pushed for."""
    model_config = ConfigDict(frozen=True)

    queue_name: str = Field(..., min_length=1)
    kind: NotificationKind
    notification: Notification

    @property
    def name(self) -> str:
        """Dispatch event name subscribers listen on."""
        return event_name(self.queue_name)


def event_name(queue_name: str) -> str:
    return f"{queue_name}.notification"
