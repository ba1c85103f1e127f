# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Middleware setup utilities."""

from fastapi import FastAPI
from loguru import logger
from starlette.middleware.cors import CORSMiddleware

from dynamo_playground.config import Settings

from .error_handling import ErrorHandlingMiddleware
from .logging import LoggingMiddleware
from .metrics import MetricsMiddleware
from .request_context import RequestContextMiddleware


def setup_basic_middleware(app: FastAPI, settings: Settings) -> None:
    """Set up the middleware stack.

    Starlette runs the last added middleware first, so the request context
    is set before metrics, error handling and logging see the request.
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=['*'],
            allow_headers=['*'],
        )

    app.add_middleware(LoggingMiddleware)
    logger.debug('Added middleware: LoggingMiddleware')

    app.add_middleware(
        ErrorHandlingMiddleware, include_details=not settings.is_production
    )
    logger.debug('Added middleware: ErrorHandlingMiddleware')

    app.add_middleware(MetricsMiddleware)
    logger.debug('Added middleware: MetricsMiddleware')

    app.add_middleware(RequestContextMiddleware)
    logger.debug('Added middleware: RequestContextMiddleware')
