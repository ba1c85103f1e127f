# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Client container for lazy, single-shot client initialization."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from loguru import logger

from dynamo_playground.clients.base import BaseClient

T = TypeVar('T', bound=BaseClient)


class ClientContainer(Generic[T]):
    """Holds one client and creates it on first use."""

    def __init__(self, client_factory: Callable[[], Awaitable[T]], name: str):
        """
        Initialize a client container.

        Args:
            client_factory: Coroutine factory that creates and initializes the client
            name: Name of the client for logging and lookups
        """
        self.client_factory = client_factory
        self.name = name
        self._client: T | None = None
        self._initialized: bool = False
        self._initialization_error: Exception | None = None
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Create the client once; concurrent callers wait on the same attempt."""
        async with self._lock:
            if self._initialized:
                return

            try:
                logger.debug(f'Initializing client container: {self.name}')
                self._client = await self.client_factory()
                self._initialized = True
                self._initialization_error = None
                logger.info(f'Successfully initialized client: {self.name}')
            except Exception as e:
                self._initialization_error = e
                logger.error(f'Failed to initialize client {self.name}: {e}')

    async def get(self) -> T | None:
        """Get the client, initializing if needed."""
        if not self._initialized:
            await self.initialize()
        return self._client

    @property
    def client(self) -> T | None:
        """The client if it has been created."""
        return self._client

    @property
    def is_available(self) -> bool:
        """Check if client is available."""
        return self._initialized and self._client is not None

    @property
    def error(self) -> Exception | None:
        """Get initialization error if any."""
        return self._initialization_error

    async def shutdown(self) -> None:
        """Clean up the client and reset the container."""
        if not self._client:
            return

        try:
            await self._client.cleanup()
            logger.debug(f'Client {self.name} cleaned up successfully')
        except Exception as e:
            logger.error(f'Error during client {self.name} cleanup: {e}')

        self._client = None
        self._initialized = False
        logger.debug(f'Client container {self.name} shutdown complete')
