# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Base repository for the single-table DynamoDB design."""

from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

from loguru import logger

from dynamo_playground.clients.dynamodb.client import DynamoDBClient
from dynamo_playground.config import get_settings

T = TypeVar('T')  # Model type


class RepositoryOperationError(Exception):
    """Error raised when a repository operation cannot be attempted."""

    def __init__(self, operation: str, error: Exception) -> None:
        """Initialize with operation details."""
        self.operation = operation
        self.error = error
        super().__init__(f"Repository operation '{operation}' failed: {error}")


class BaseRepository(Generic[T]):
    """Base repository for entities stored in the single table.

    Storage errors are not caught here: every call is attempted once and
    failures propagate to the caller unchanged.
    """

    def __init__(
        self,
        dynamodb_client: Optional[DynamoDBClient | tuple[DynamoDBClient, bool]],
        model_class: type[T],
    ):
        """Initialize the base repository.

        Args:
            dynamodb_client: The DynamoDB client (may be None) or tuple of (client, is_available)
            model_class: The model class for this repository
        """
        # Handle the case where dynamodb_client is a tuple of (client, is_available)
        if isinstance(dynamodb_client, tuple) and len(dynamodb_client) == 2:
            self.dynamodb = dynamodb_client[0]
            self.client_available = dynamodb_client[1]
        else:
            self.dynamodb = dynamodb_client
            self.client_available = dynamodb_client is not None

        self.model_class = model_class
        self.settings = get_settings()

    def _client(self, operation_name: str) -> DynamoDBClient:
        """Return the DynamoDB client or fail before any request is sent."""
        if self.dynamodb is None or not self.client_available:
            logger.warning(
                f'Cannot perform {operation_name}: DynamoDB client not available'
            )
            raise RepositoryOperationError(
                operation_name, ValueError('DynamoDB client is not available')
            )
        return self.dynamodb

    async def _query_all(
        self,
        operation_name: str,
        params: dict[str, Any],
        to_model: Callable[[dict[str, Any]], T],
        limit: int | None = None,
    ) -> list[T]:
        """Run a query, following LastEvaluatedKey until exhausted or limit is reached.

        Args:
            operation_name: Name of the operation for logging
            params: Query parameters, without TableName
            to_model: Converts one deserialized item to a model
            limit: Maximum number of models to return (optional)

        Returns:
            Models in the order DynamoDB returned them
        """
        client = self._client(operation_name)
        results: list[T] = []
        last_key: dict[str, Any] | None = None

        while True:
            page_params = dict(params)
            if limit is not None:
                page_params['Limit'] = limit - len(results)
            if last_key:
                page_params['ExclusiveStartKey'] = last_key

            response = await client.query(**page_params)
            results.extend(to_model(item) for item in response.get('Items', []))

            last_key = response.get('LastEvaluatedKey')
            if not last_key or (limit is not None and len(results) >= limit):
                break

        logger.debug(f'{operation_name} returned {len(results)} items')
        return results
