# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Request context middleware."""

import uuid
from collections.abc import Callable

from fastapi import Request, Response  # type: ignore
from starlette.middleware.base import BaseHTTPMiddleware  # type: ignore

from .context import RequestContext

REQUEST_ID_HEADER = 'X-Request-ID'


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set the request id for clients and logs."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request inside a fresh request context."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        async with RequestContext.scope():
            RequestContext.update_state(request_id=request_id)
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id

        return response
