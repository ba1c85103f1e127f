# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

from typing import Any

from dynamo_playground.api.routes.objects.models import (
    ObjectRequest,
    StoredObject,
    UpdatedObject,
)
from dynamo_playground.clients.dynamodb.client import DynamoDBClient
from dynamo_playground.records.models import Record
from dynamo_playground.repositories.record import RecordRepository


async def handle_create_table(dynamodb_client: DynamoDBClient) -> dict[str, Any]:
    """Issue the create-table request for the records table."""
    response = await dynamodb_client.create_table()
    response.pop('ResponseMetadata', None)
    return response


async def handle_create_object(
    record_repo: RecordRepository, request: ObjectRequest
) -> Record:
    """Create a new object."""
    return await record_repo.create(
        name=request.name, location=request.location, on_site=request.on_site
    )


async def handle_update_object(
    record_repo: RecordRepository, object_id: str, request: ObjectRequest
) -> UpdatedObject:
    """Update an object, creating it if the id is unknown."""
    record = await record_repo.update(
        object_id,
        name=request.name,
        location=request.location,
        on_site=request.on_site,
    )
    return UpdatedObject.from_record(record)


async def handle_get_object(
    record_repo: RecordRepository, object_id: str
) -> StoredObject | None:
    """Get an object by id."""
    record = await record_repo.get(object_id)
    if record is None:
        return None
    return StoredObject.from_record(record)
