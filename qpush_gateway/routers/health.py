from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from qpush_gateway import __version__


router = APIRouter(tags=["health"])

_startup_time = datetime.now(timezone.utc)


class EndpointInfo(BaseModel):
    path: str
    description: str
    provider: str | None = None


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float
    endpoints: list[EndpointInfo]


ENDPOINTS = [
    EndpointInfo(path="/health", description="Gateway status and API directory"),
    EndpointInfo(path="/subscriptions", description="Registered notification listeners"),
    EndpointInfo(
        path="*",
        description="Push notifications (recognized by x-amz-sns-message-type)",
        provider="AWS SNS",
    ),
    EndpointInfo(
        path="*",
        description="Push queue messages (recognized by iron-message-id)",
        provider="IronMQ",
    ),
]


@router.get("/health", response_model=HealthResponse)
async def health_check():
    uptime = (datetime.now(timezone.utc) - _startup_time).total_seconds()

    return HealthResponse(
        status="ok",
        version=__version__,
        uptime_seconds=round(uptime, 2),
        endpoints=ENDPOINTS,
    )
