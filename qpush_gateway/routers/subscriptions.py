"""Listener directory for the in-process event dispatcher."""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address

from qpush_gateway.config import settings
from qpush_gateway.dependencies import get_dispatcher
from qpush_gateway.events import EventDispatcher

router = APIRouter()

limiter = Limiter(key_func=get_remote_address)


class SubscriptionsResponse(BaseModel):
    events: list[str]


@router.get("", response_model=SubscriptionsResponse)
@limiter.limit(settings.rate_limit)
async def list_subscriptions(request: Request, dispatcher: EventDispatcher = Depends(get_dispatcher)):
    """Event names that currently have at least one listener."""
    return SubscriptionsResponse(events=dispatcher.listeners())
