"""HTTP binding for the dispatch gateway.

Provider pushes are recognized by their headers alone, so they are
intercepted before routing and never need a dedicated endpoint. Requests
without a provider header continue to the application untouched.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from qpush_gateway.gateway import DispatchGateway, Failed, Handled
from qpush_gateway.providers import InboundRequest

logger = logging.getLogger(__name__)


class NotificationMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, gateway: DispatchGateway):
        super().__init__(app)
        self.gateway = gateway

    async def dispatch(self, request: Request, call_next):
        inbound = InboundRequest.from_headers(request.headers)
        if not self.gateway.matches(inbound):
            return await call_next(request)

        inbound = InboundRequest.from_headers(request.headers, await request.body())
        result = self.gateway.handle(inbound)

        if isinstance(result, Handled):
            return PlainTextResponse(result.ack, status_code=200)
        if isinstance(result, Failed):
            logger.warning(f"Rejected push to {request.url.path}: {result.error}")
            return JSONResponse(
                status_code=result.error.status_code,
                content={"detail": str(result.error)},
            )
        return await call_next(request)
