# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.encoders import jsonable_encoder

from dynamo_playground.api.dependencies.clients import get_dynamodb_client
from dynamo_playground.api.routes.objects.handlers import (
    handle_create_object,
    handle_create_table,
    handle_get_object,
    handle_update_object,
)
from dynamo_playground.api.routes.objects.models import (
    ObjectRequest,
    StoredObject,
    UpdatedObject,
)
from dynamo_playground.clients.dynamodb.client import DynamoDBClient
from dynamo_playground.repositories.record import RecordRepository

router = APIRouter(prefix='/objects', tags=['objects'])


def get_record_repository(
    dynamodb_client: tuple[DynamoDBClient | None, bool] = Depends(
        get_dynamodb_client()
    ),
) -> RecordRepository:
    """Get record repository instance."""
    return RecordRepository(dynamodb_client)


@router.post('/table')
async def create_table(
    dynamodb_client: Annotated[
        tuple[DynamoDBClient | None, bool], Depends(get_dynamodb_client())
    ],
) -> dict[str, Any]:
    """Create the records table with its secondary indexes."""
    client, _ = dynamodb_client
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail='Required client dynamodb is unavailable',
        )
    return jsonable_encoder(await handle_create_table(client))


@router.post('', status_code=status.HTTP_201_CREATED)
async def create_object(
    request: ObjectRequest,
    response: Response,
    record_repo: Annotated[RecordRepository, Depends(get_record_repository)],
) -> ObjectRequest:
    """Create a new object and echo the request back."""
    record = await handle_create_object(record_repo, request)
    response.headers['Location'] = f'{router.prefix}/{record.record_id}'
    return request


@router.put('/{object_id}')
async def update_object(
    object_id: str,
    request: ObjectRequest,
    record_repo: Annotated[RecordRepository, Depends(get_record_repository)],
) -> UpdatedObject:
    """Update an object."""
    return await handle_update_object(record_repo, object_id, request)


@router.get(
    '/{object_id}',
    response_model=StoredObject,
    responses={status.HTTP_404_NOT_FOUND: {'description': 'Object not found'}},
)
async def get_object(
    object_id: str,
    record_repo: Annotated[RecordRepository, Depends(get_record_repository)],
) -> StoredObject | Response:
    """Get an object by id."""
    stored = await handle_get_object(record_repo, object_id)
    if stored is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return stored
