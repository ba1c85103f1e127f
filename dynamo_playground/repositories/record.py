# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Record repository implementation."""

from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from dynamo_playground.clients.dynamodb.client import DynamoDBClient
from dynamo_playground.clients.dynamodb.schema import (
    CREATED_DATE_TIME_OFFSET_ATTRIBUTE,
    CREATED_OFFSET_INDEX,
    LOCATION_ATTRIBUTE,
    NAME_ATTRIBUTE,
    ON_SITE_ATTRIBUTE,
    ON_SITE_INDEX,
    PARTITION_KEY_ATTRIBUTE,
    UPDATED_DATE_TIME_ATTRIBUTE,
)
from dynamo_playground.monitoring import track_record_lookup, track_record_write
from dynamo_playground.records.codecs import (
    BOOLEAN_NUMBER,
    DATE_TIME,
    SORTABLE_DATE_TIME_OFFSET,
)
from dynamo_playground.records.mapping import item_to_record, record_key, record_to_item
from dynamo_playground.records.models import Record
from dynamo_playground.repositories.base import BaseRepository, RepositoryOperationError
from dynamo_playground.utils import generate_record_id

_UPDATE_EXPRESSION = (
    'SET #Name = :name, #Location = :location, '
    '#OnSite = :on_site, #UpdatedDateTime = :updated_date_time'
)


class RecordRepository(BaseRepository[Record]):
    """Repository for record operations.

    All records share one partition value, taken from settings unless given.
    """

    def __init__(
        self,
        dynamodb_client: Optional[DynamoDBClient | tuple[DynamoDBClient, bool]],
        partition_key: str | None = None,
    ):
        """Initialize record repository."""
        super().__init__(dynamodb_client, Record)
        self.partition_key = partition_key or self.settings.dynamodb.partition_key

    async def create(self, name: str, location: str, on_site: bool = False) -> Record:
        """Write a new record under a freshly generated id.

        The write is unconditional. Both creation timestamps are stamped from
        a single clock reading.
        """
        client = self._client('create_record')

        now = datetime.now().astimezone()
        record = Record(
            partition_key=self.partition_key,
            record_id=generate_record_id(),
            name=name,
            location=location,
            on_site=on_site,
            created_date_time=now.astimezone(timezone.utc).replace(tzinfo=None),
            created_date_time_offset=now,
        )

        await client.put_item(record_to_item(record))
        track_record_write('create')
        logger.debug(f'Created record {record.record_id}')
        return record

    async def update(
        self, record_id: str, name: str, location: str, on_site: bool
    ) -> Record:
        """Set the mutable attributes of a record and stamp the update time.

        This is an upsert: an id that was never created is written as a new
        item without creation timestamps. Creation timestamps of an existing
        item are left as they are.

        Returns:
            The stored record after the write
        """
        client = self._client('update_record')

        updated_date_time = datetime.now(timezone.utc).replace(tzinfo=None)
        attributes = await client.update_item(
            key=record_key(self.partition_key, record_id),
            update_expression=_UPDATE_EXPRESSION,
            expression_attribute_names={
                '#Name': NAME_ATTRIBUTE,
                '#Location': LOCATION_ATTRIBUTE,
                '#OnSite': ON_SITE_ATTRIBUTE,
                '#UpdatedDateTime': UPDATED_DATE_TIME_ATTRIBUTE,
            },
            expression_attribute_values={
                ':name': name,
                ':location': location,
                ':on_site': BOOLEAN_NUMBER.encode(on_site),
                ':updated_date_time': DATE_TIME.encode(updated_date_time),
            },
            return_values='ALL_NEW',
        )
        track_record_write('update')

        if attributes is None:
            raise RepositoryOperationError(
                'update_record', ValueError('UpdateItem returned no attributes')
            )
        return item_to_record(attributes)

    async def get(self, record_id: str) -> Record | None:
        """Get a record by id, or None if it does not exist."""
        client = self._client('get_record')

        item = await client.get_item(record_key(self.partition_key, record_id))
        track_record_lookup(item is not None)

        if item is None:
            return None
        return item_to_record(item)

    async def list_by_on_site(
        self, on_site: bool, limit: int | None = None
    ) -> list[Record]:
        """List records with the given on-site flag using the on-site index."""
        params = {
            'IndexName': ON_SITE_INDEX,
            'KeyConditionExpression': '#OnSite = :on_site',
            'ExpressionAttributeNames': {'#OnSite': ON_SITE_ATTRIBUTE},
            'ExpressionAttributeValues': {':on_site': BOOLEAN_NUMBER.encode(on_site)},
        }
        return await self._query_all('list_by_on_site', params, item_to_record, limit)

    async def list_created_between(
        self, start: datetime, end: datetime, limit: int | None = None
    ) -> list[Record]:
        """List records created in [start, end], oldest first.

        Bounds must be timezone-aware; records match on instant whatever
        offset they were created with.

        Raises:
            ValueError: If start is after end, or a bound has no offset
        """
        lower = SORTABLE_DATE_TIME_OFFSET.lower_bound(start)
        upper = SORTABLE_DATE_TIME_OFFSET.upper_bound(end)
        if start > end:
            raise ValueError('start must not be after end')

        params = {
            'IndexName': CREATED_OFFSET_INDEX,
            'KeyConditionExpression': '#PK = :pk AND #Created BETWEEN :start AND :end',
            'ExpressionAttributeNames': {
                '#PK': PARTITION_KEY_ATTRIBUTE,
                '#Created': CREATED_DATE_TIME_OFFSET_ATTRIBUTE,
            },
            'ExpressionAttributeValues': {
                ':pk': self.partition_key,
                ':start': lower,
                ':end': upper,
            },
            'ScanIndexForward': True,
        }
        return await self._query_all(
            'list_created_between', params, item_to_record, limit
        )
