# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""FastAPI application setup."""

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from dynamo_playground.api.middleware import setup_basic_middleware
from dynamo_playground.api.routes import router
from dynamo_playground.api.routes.health import router as health_router
from dynamo_playground.api.routes.metrics import router as metrics_router
from dynamo_playground.api.state import (
    ApplicationState,
    cleanup_app_state,
    init_app_state,
)
from dynamo_playground.config import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for the FastAPI application.

    Creates the client registry before the first request and closes every
    client on shutdown.
    """
    worker_id = os.getpid()

    await init_app_state(app)
    logger.info(f'Worker {worker_id}: Application fully initialized and ready')

    yield

    logger.info(
        f'Worker {worker_id}: Application shutting down - cleaning up resources'
    )
    await cleanup_app_state(app)
    logger.info(
        f'Worker {worker_id}: Application shutdown complete - all resources cleaned up'
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app_config = settings.app

    # Conditionally disable docs in production
    is_prod = settings.is_production
    docs_url = '/api/docs' if not is_prod else None
    redoc_url = '/api/redoc' if not is_prod else None
    openapi_url = '/api/openapi.json' if not is_prod else None

    app = FastAPI(
        title=app_config.title,
        description=app_config.description,
        version=app_config.version,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
        lifespan=lifespan,
    )

    # The lifespan populates the registry
    app.state = ApplicationState()

    setup_basic_middleware(app, settings)

    # Operational endpoints live under /api
    app.include_router(health_router, prefix='/api')
    app.include_router(metrics_router, prefix='/api')

    # Object routes are served at the root, e.g. /objects/{object_id}
    app.include_router(router)

    return app
