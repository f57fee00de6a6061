"""Base adapter interface for push-queue providers."""

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from qpush_gateway.errors import DecodeError
from qpush_gateway.models import Notification, NotificationEvent, NotificationKind


class InboundRequest(BaseModel):
    """Headers and raw body of a pushed HTTP request."""
    model_config = ConfigDict(frozen=True)

    headers: dict[str, str] = {}
    body: bytes = b""

    @field_validator("headers", mode="before")
    @classmethod
    def _lowercase_names(cls, value: Mapping[str, str]) -> dict[str, str]:
        return {name.lower(): header for name, header in value.items()}

    @classmethod
    def from_headers(cls, headers: Mapping[str, str], body: bytes | str = b"") -> "InboundRequest":
        if isinstance(body, str):
            body = body.encode("utf-8")
        return cls(headers=dict(headers.items()), body=body)

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup, None when absent."""
        return self.headers.get(name.lower())

    def has_header(self, name: str) -> bool:
        return name.lower() in self.headers


class AdapterResult(BaseModel):
    """What an adapter extracted from one request."""
    model_config = ConfigDict(frozen=True)

    queue_name: str = Field(..., min_length=1)
    kind: NotificationKind
    notification: Notification
    ack: str

    def event(self) -> NotificationEvent:
        return NotificationEvent(
            queue_name=self.queue_name,
            kind=self.kind,
            notification=self.notification,
        )


class BaseAdapter(ABC):
    """Abstract base class for provider adapters."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return provider identifier."""
        pass

    @property
    @abstractmethod
    def trigger_header(self) -> str:
        """Header whose presence routes a request to this adapter."""
        pass

    @abstractmethod
    def parse(self, request: InboundRequest) -> AdapterResult:
        """Translate the request, raising NotificationError on bad input."""
        pass

    def matches(self, request: InboundRequest) -> bool:
        return request.has_header(self.trigger_header)

    def decode_json(self, body: bytes) -> Any:
        """Decode a JSON body, raising DecodeError when it is not valid JSON."""
        try:
            return json.loads(body)
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"Unable to decode JSON: {e}") from e

    def build(
        self,
        queue_name: Any,
        kind: NotificationKind,
        message_id: Any,
        body: Any,
        metadata: dict[str, Any],
        ack: str,
    ) -> AdapterResult:
        """Assemble the result, turning validation failures into DecodeError."""
        try:
            notification = Notification(message_id=message_id, body=body, metadata=metadata)
            return AdapterResult(
                queue_name=queue_name,
                kind=kind,
                notification=notification,
                ack=ack,
            )
        except ValidationError as e:
            raise DecodeError(f"Malformed {self.provider_name} notification: {e}") from e
