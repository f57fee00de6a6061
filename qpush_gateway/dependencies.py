"""Shared FastAPI dependencies."""

from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader

from qpush_gateway.config import settings
from qpush_gateway.events import EventDispatcher

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: str | None = Security(api_key_header)):
    """Reject the request when API_KEY is configured and the header does not match."""
    if settings.api_key and api_key != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")


def get_dispatcher(request: Request) -> EventDispatcher:
    return request.app.state.dispatcher
