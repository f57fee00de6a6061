"""Request-local errors raised while translating provider notifications."""


class NotificationError(Exception):
    """Base class for failures while handling an inbound notification."""

    status_code = 400


class DecodeError(NotificationError):
    """The request body is not the JSON the provider protocol expects."""


class QueueResolutionError(NotificationError):
    """No logical queue name could be recovered from the request."""

    def __init__(self, message: str = "Unable to determine queue name"):
        super().__init__(message)
