"""QPush Gateway - FastAPI application entry point."""

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from qpush_gateway import __version__
from qpush_gateway.config import settings
from qpush_gateway.dependencies import verify_api_key
from qpush_gateway.events import ALL_QUEUES, EventDispatcher, EventSink, log_event
from qpush_gateway.gateway import DispatchGateway
from qpush_gateway.middleware import NotificationMiddleware
from qpush_gateway.routers import health, subscriptions

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def create_app(dispatcher: EventDispatcher | None = None, sink: EventSink | None = None) -> FastAPI:
    """Build the application around a dispatcher.

    The event logger is only registered on a dispatcher built here; a
    dispatcher passed in keeps the listeners it already has.

    `sink` overrides where gateway events go; by default they are emitted to
    the dispatcher.
    """
    if dispatcher is None:
        dispatcher = EventDispatcher()
        if settings.log_events:
            dispatcher.subscribe(ALL_QUEUES, log_event)

    app = FastAPI(
        title="QPush Gateway",
        description="Push queue notification ingestion for SNS and IronMQ",
        version=__version__,
    )
    app.state.dispatcher = dispatcher

    # Rate limiting
    app.state.limiter = subscriptions.limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Provider pushes (added last so it runs before CORS and routing)
    app.add_middleware(NotificationMiddleware, gateway=DispatchGateway(sink if sink is not None else dispatcher))

    # Routers (health is public; others require API key when API_KEY is set)
    app.include_router(health.router)
    app.include_router(
        subscriptions.router,
        prefix="/subscriptions",
        tags=["subscriptions"],
        dependencies=[Depends(verify_api_key)],
    )

    return app


app = create_app()
