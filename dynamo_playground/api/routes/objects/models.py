# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dynamo_playground.records.models import Record


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ObjectRequest(CamelModel):
    name: str = Field(..., min_length=1, description='Object name')
    location: str = Field(..., min_length=1, description='Object location')
    on_site: bool = Field(default=False, description='Whether the object is on site')


class UpdatedObject(CamelModel):
    id: str
    name: str
    location: str
    on_site: bool
    updated_date_time: datetime | None = None

    @classmethod
    def from_record(cls, record: Record) -> 'UpdatedObject':
        return cls(
            id=record.record_id,
            name=record.name,
            location=record.location,
            on_site=record.on_site,
            updated_date_time=record.updated_date_time,
        )


class StoredObject(CamelModel):
    id: str
    name: str
    location: str
    on_site: bool
    created_date_time: datetime | None = None
    created_date_time_offset: datetime | None = None
    updated_date_time: datetime | None = None

    @classmethod
    def from_record(cls, record: Record) -> 'StoredObject':
        return cls(
            id=record.record_id,
            name=record.name,
            location=record.location,
            on_site=record.on_site,
            created_date_time=record.created_date_time,
            created_date_time_offset=record.created_date_time_offset,
            updated_date_time=record.updated_date_time,
        )
