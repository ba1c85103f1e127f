# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Client registry implementation."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar, cast

from loguru import logger

from dynamo_playground.clients.base import BaseClient
from dynamo_playground.clients.container import ClientContainer
from dynamo_playground.config import Settings

T = TypeVar('T', bound=BaseClient)


class ClientRegistry:
    """Registry for managing service clients by name."""

    def __init__(self, settings: Settings) -> None:
        """Initialize client registry."""
        self.settings = settings
        self._containers: dict[str, ClientContainer] = {}

    async def setup(self) -> None:
        """Register the containers for every client the application uses."""
        # Import here to avoid circular imports
        from dynamo_playground.clients.dynamodb.client import DynamoDBClient

        self.register_container(
            'dynamodb', lambda: self._create_client(DynamoDBClient, self.settings)
        )

    def register_container(
        self, name: str, factory: Callable[[], Awaitable[T]]
    ) -> None:
        """Register a new client container."""
        if name in self._containers:
            logger.warning(f'Client {name} already registered, replacing')
        self._containers[name] = ClientContainer(factory, name)

    async def _create_client(self, client_class: type[T], settings: Settings) -> T:
        """Create and initialize a client instance."""
        client = client_class(settings)
        await client.initialize()
        return client

    async def get_client(self, name: str) -> tuple[BaseClient | None, bool]:
        """
        Get a client by name with availability status.

        Returns:
            A tuple containing (client, is_available)
        """
        container = self._containers.get(name)
        if not container:
            logger.warning(f'Client {name} not found in registry')
            return None, False

        client = await container.get()
        return client, container.is_available

    async def get_typed_client(
        self, name: str, client_type: type[T]
    ) -> tuple[T | None, bool]:
        """
        Get a client by name with type checking and availability status.

        Returns:
            A tuple containing (client, is_available)
        """
        client, available = await self.get_client(name)

        if client is None:
            return None, False

        if not isinstance(client, client_type):
            logger.error(f'Client {name} is not of type {client_type.__name__}')
            return None, False

        return cast(T, client), available

    def client_info(self) -> list[dict[str, Any]]:
        """Get information about all registered clients."""
        return [
            {
                'name': name,
                'type': container.client.__class__.__name__
                if container.client
                else 'Unknown',
                'initialized': container.is_available,
                'error': str(container.error) if container.error else None,
            }
            for name, container in self._containers.items()
        ]

    async def initialize_all(self) -> None:
        """Initialize all registered clients concurrently."""
        logger.info('Initializing all clients')

        results = await asyncio.gather(
            *(container.initialize() for container in self._containers.values()),
            return_exceptions=True,
        )
        for name, result in zip(self._containers.keys(), results):
            if isinstance(result, Exception):
                logger.error(f'Failed to initialize client {name}: {result}')

        logger.info('All clients initialized')

    async def cleanup_all(self) -> None:
        """Clean up all registered clients."""
        logger.info('Cleaning up all clients')

        results = await asyncio.gather(
            *(container.shutdown() for container in self._containers.values()),
            return_exceptions=True,
        )
        for name, result in zip(self._containers.keys(), results):
            if isinstance(result, Exception):
                logger.error(f'Failed to clean up client {name}: {result}')

        logger.info('All clients cleaned up')

