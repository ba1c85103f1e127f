# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Application state management."""

import os
import time
from typing import Any

from fastapi import FastAPI
from loguru import logger
from starlette.datastructures import State as StarletteState

from dynamo_playground.clients.dynamodb.client import DynamoDBClient
from dynamo_playground.clients.registry import ClientRegistry
from dynamo_playground.config import Settings, get_settings


class ApplicationState(StarletteState):
    """
    Application state with its expected attributes declared.

    Starlette's State accepts arbitrary attributes; declaring them here keeps
    static type checkers and readers aware of what the lifespan sets.
    """

    client_registry: Any = None
    fully_initialized: bool = False

    def __init__(self):
        """Initialize internal state with properly typed values"""
        super().__init__()
        object.__setattr__(self, 'client_registry', None)
        object.__setattr__(self, 'fully_initialized', False)


async def ensure_records_table(
    client_registry: ClientRegistry, settings: Settings
) -> None:
    """Create the records table at startup when configured to."""
    if not settings.dynamodb.ensure_table:
        return

    dynamodb_client, is_available = await client_registry.get_typed_client(
        'dynamodb', DynamoDBClient
    )
    if not dynamodb_client or not is_available:
        logger.error('Cannot ensure records table - DynamoDB client not available')
        return

    logger.info(f'Ensuring table {settings.dynamodb.table_name} exists')
    await dynamodb_client.ensure_table()
    logger.info('DynamoDB table ready')


async def init_app_state(app: FastAPI) -> None:
    """Initialize application state in a deterministic, sequential order."""
    worker_id = os.getpid()
    start_time = time.time()
    logger.info(f'Worker {worker_id}: Starting application initialization')

    if not isinstance(app.state, ApplicationState):
        app.state = ApplicationState()

    settings = get_settings()

    # 1. Create the client registry and register its containers
    logger.info('Creating client registry')
    client_registry = ClientRegistry(settings)
    await client_registry.setup()
    object.__setattr__(app.state, 'client_registry', client_registry)

    # 2. Initialize clients; failures are recorded per container and reported by /api/health
    await client_registry.initialize_all()

    # 3. Optional table provisioning for local development
    await ensure_records_table(client_registry, settings)

    object.__setattr__(app.state, 'fully_initialized', True)
    logger.info(
        f'Worker {worker_id}: Application initialization complete in {time.time() - start_time:.2f}s'
    )


async def cleanup_app_state(app: FastAPI) -> None:
    """Clean up application state."""
    worker_id = os.getpid()

    client_registry = getattr(app.state, 'client_registry', None)
    if client_registry is not None:
        try:
            await client_registry.cleanup_all()
        except Exception as e:
            logger.error(f'Error during client registry cleanup: {e}')
    else:
        logger.warning('Client registry not found or None during cleanup')

    object.__setattr__(app.state, 'fully_initialized', False)
    logger.info(f'Worker {worker_id}: Application state cleaned up')
