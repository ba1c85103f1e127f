# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Client dependencies for FastAPI routes."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import Depends, HTTPException, Request
from loguru import logger

from dynamo_playground.clients.base import BaseClient
from dynamo_playground.clients.dynamodb.client import DynamoDBClient
from dynamo_playground.clients.registry import ClientRegistry

T = TypeVar('T', bound=BaseClient)


def get_client_registry(request: Request) -> ClientRegistry:
    """Get client registry from application state.

    The lifespan sets the registry before any request is served; a missing
    registry means the app was not started through it.
    """
    registry = getattr(request.app.state, 'client_registry', None)
    if registry is None:
        logger.critical(
            'Client registry not found in application state. '
            'This indicates the application was not properly initialized.'
        )
        raise HTTPException(
            status_code=503,
            detail='Service unavailable: Application not properly initialized',
        )
    return registry


def get_typed_client(
    client_name: str, client_type: type[T], required: bool = True
) -> Callable[[ClientRegistry], Awaitable[tuple[T | None, bool]]]:
    """
    Create a dependency for accessing a specific client with type checking and availability status.

    Args:
        client_name: The name of the client to retrieve
        client_type: The expected type of the client
        required: If True, will raise HTTP 503 when client is unavailable

    Returns:
        A callable that returns a tuple of (client, is_available)
    """

    async def _get_typed_client(
        registry: ClientRegistry = Depends(get_client_registry),
    ) -> tuple[T | None, bool]:
        client, available = await registry.get_typed_client(client_name, client_type)

        if required and (client is None or not available):
            raise HTTPException(
                status_code=503, detail=f'Required client {client_name} is unavailable'
            )

        return client, available

    return _get_typed_client


def get_dynamodb_client(
    required: bool = True,
) -> Callable[[ClientRegistry], Awaitable[tuple[DynamoDBClient | None, bool]]]:
    """Get DynamoDB client with availability status."""
    return get_typed_client('dynamodb', DynamoDBClient, required)
