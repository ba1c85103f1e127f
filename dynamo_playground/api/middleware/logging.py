# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Logging middleware."""

import time
from collections.abc import Callable

from fastapi import Request, Response  # type: ignore
from loguru import logger  # type: ignore
from starlette.middleware.base import BaseHTTPMiddleware  # type: ignore

from .context import RequestContext

# Scraped frequently; logging every scrape is noise
QUIET_PATHS = ('/api/metrics',)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request and log details."""
        start_time = time.time()

        method = request.method
        path = request.url.path
        client_host = request.client.host if request.client else 'unknown'
        request_id = RequestContext.get_state().request_id or 'unknown'
        quiet = path.endswith(QUIET_PATHS)

        if not quiet:
            logger.info(
                f'Request started: {method} {path} from {client_host} [request_id={request_id}]'
            )

        response = await call_next(request)
        duration = time.time() - start_time

        if not quiet:
            logger.info(
                f'Request completed: {method} {path} from {client_host} '
                f'[request_id={request_id}, status={response.status_code}, duration={duration:.3f}s]'
            )

        return response
