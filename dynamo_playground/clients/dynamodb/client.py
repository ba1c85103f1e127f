# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""DynamoDB client implementation."""

from typing import Any

from aiobotocore.session import AioSession
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from loguru import logger

from dynamo_playground.clients.base import BaseClient, CircuitOpenError
from dynamo_playground.utils import get_function_name


class DynamoDBClient(BaseClient):
    """DynamoDB client with async operations.

    Every call goes out once. Failures from the service are logged and
    counted by the operation monitor and then re-raised as-is.
    """

    _client: Any | None = None

    async def initialize(self) -> None:
        """Initialize DynamoDB client."""
        if not self.circuit_breaker.can_execute():
            self.circuit_breaker.record_failure()
            raise CircuitOpenError('Circuit breaker is open')

        with self.monitor_operation(get_function_name()):
            session = AioSession()
            dynamodb_config = self.settings.aws.dynamodb

            # Use dynamodb-specific endpoint if available, otherwise fall back to aws general endpoint
            endpoint_url = dynamodb_config.endpoint_url or self.settings.aws.endpoint_url
            logger.info(f'Initializing DynamoDB with endpoint: {endpoint_url}')

            client_kwargs: dict[str, Any] = {
                'region_name': dynamodb_config.region,
                'endpoint_url': endpoint_url,
                'config': self.settings.aws.get_boto_config('dynamodb'),
            }
            if dynamodb_config.local_mode:
                # DynamoDB Local accepts any static credentials
                logger.info('DynamoDB local mode enabled - using static credentials')
                client_kwargs['aws_access_key_id'] = dynamodb_config.local_access_key_id
                client_kwargs['aws_secret_access_key'] = (
                    dynamodb_config.local_secret_access_key
                )

            self._client = await session.create_client(
                'dynamodb', **client_kwargs
            ).__aenter__()
            logger.info('DynamoDB client initialized')

    async def cleanup(self) -> None:
        """Cleanup DynamoDB client."""
        if self._client:
            with self.monitor_operation(get_function_name()):
                await self._client.__aexit__(None, None, None)
                self._client = None
                logger.info('DynamoDB client closed')

    @property
    def table_name(self) -> str:
        """Get the configured table name."""
        return self.settings.dynamodb.table_name

    def _require_client(self) -> Any:
        if not self._client:
            raise ValueError('DynamoDB client not initialized')
        return self._client

    async def put_item(self, item: dict[str, Any]) -> None:
        """Put an item in the table, replacing any item with the same key."""
        client = self._require_client()

        params: dict[str, Any] = {
            'TableName': self.table_name,
            'Item': self._serialize_item(item),
        }

        with self.monitor_operation(get_function_name()):
            logger.debug(f'Sending to DynamoDB: {params["Item"]}')
            await client.put_item(**params)

    async def get_item(
        self, key: dict[str, Any], consistent_read: bool = False
    ) -> dict[str, Any] | None:
        """Get an item by primary key, or None when it does not exist."""
        client = self._require_client()

        with self.monitor_operation(get_function_name()):
            response = await client.get_item(
                TableName=self.table_name,
                Key=self._serialize_item(key),
                ConsistentRead=consistent_read,
            )
            item = response.get('Item')
            return self._deserialize_item(item) if item else None

    async def update_item(
        self,
        key: dict[str, Any],
        update_expression: str,
        expression_attribute_names: dict[str, str] | None = None,
        expression_attribute_values: dict[str, Any] | None = None,
        return_values: str = 'NONE',
    ) -> dict[str, Any] | None:
        """Update an item in DynamoDB.

        This is an upsert: DynamoDB creates the item when no item exists
        under ``key``.
        """
        client = self._require_client()

        params: dict[str, Any] = {
            'TableName': self.table_name,
            'Key': self._serialize_item(key),
            'UpdateExpression': update_expression,
            'ReturnValues': return_values,
        }
        if expression_attribute_names:
            params['ExpressionAttributeNames'] = expression_attribute_names
        if expression_attribute_values:
            params['ExpressionAttributeValues'] = self._serialize_item(
                expression_attribute_values
            )

        with self.monitor_operation(get_function_name()):
            response = await client.update_item(**params)
            if 'Attributes' in response:
                return self._deserialize_item(response['Attributes'])
            return None

    async def query(self, **params: Any) -> dict[str, Any]:
        """Execute a query against the table or one of its indexes."""
        client = self._require_client()

        params['TableName'] = self.table_name
        if 'ExpressionAttributeValues' in params:
            params['ExpressionAttributeValues'] = self._serialize_item(
                params['ExpressionAttributeValues']
            )
        if 'ExclusiveStartKey' in params:
            params['ExclusiveStartKey'] = self._serialize_item(
                params['ExclusiveStartKey']
            )

        with self.monitor_operation(get_function_name()):
            response = await client.query(**params)

            if 'Items' in response:
                response['Items'] = [
                    self._deserialize_item(item) for item in response['Items']
                ]
            if 'LastEvaluatedKey' in response:
                response['LastEvaluatedKey'] = self._deserialize_item(
                    response['LastEvaluatedKey']
                )
            return response

    def _serialize_item(self, item: dict[str, Any]) -> dict[str, dict[str, Any]]:
        """Convert Python dict to DynamoDB format using boto3 TypeSerializer."""
        return {key: self._serialize_value(value) for key, value in item.items()}

    def _serialize_value(self, value: Any) -> dict[str, Any]:
        """Serialize a single value for DynamoDB."""
        return TypeSerializer().serialize(value)

    def _deserialize_item(self, item: dict[str, dict[str, Any]]) -> dict[str, Any]:
        """Convert DynamoDB format to Python dict using boto3 TypeDeserializer."""
        if not item:
            return {}

        deserializer = TypeDeserializer()
        return {k: deserializer.deserialize(v) for k, v in item.items()}

    async def table_exists(self) -> bool:
        """Check if the table exists."""
        client = self._require_client()

        with self.monitor_operation(get_function_name()):
            try:
                await client.describe_table(TableName=self.table_name)
                return True
            except client.exceptions.ResourceNotFoundException:
                return False

    async def create_table(self, schema: dict[str, Any] | None = None) -> dict[str, Any]:
        """Issue a CreateTable request and return the service response.

        The request is sent as-is; an existing table surfaces as the
        service's ``ResourceInUseException``.
        """
        from dynamo_playground.clients.dynamodb.schema import get_schema

        client = self._require_client()
        request = schema or get_schema(self.table_name)

        with self.monitor_operation(get_function_name()):
            logger.info(f'Creating table {request["TableName"]}')
            return await client.create_table(**request)

    async def ensure_table(self) -> None:
        """Create the table if it doesn't exist and wait until it is active."""
        client = self._require_client()
        table_name = self.table_name

        if not await self.table_exists():
            await self.create_table()
            with self.monitor_operation(get_function_name()):
                waiter = client.get_waiter('table_exists')
                await waiter.wait(TableName=table_name)
            logger.info(f'Table {table_name} created successfully')
