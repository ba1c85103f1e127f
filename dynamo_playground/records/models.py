# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

from datetime import datetime

from pydantic import BaseModel, Field


class Record(BaseModel):
    """A stored object, keyed by (partition_key, record_id)."""

    partition_key: str = Field(..., description='Shared partition value')
    record_id: str = Field(..., description='Sort key, assigned once at creation')
    name: str
    location: str
    on_site: bool = False
    created_date_time: datetime | None = Field(
        default=None, description='Naive UTC creation time'
    )
    created_date_time_offset: datetime | None = Field(
        default=None, description='Timezone-aware creation time'
    )
    updated_date_time: datetime | None = Field(
        default=None, description='Naive UTC time of the last update'
    )
