# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Translation between `Record` and the stored DynamoDB item."""

from typing import Any

from dynamo_playground.clients.dynamodb.schema import (
    CREATED_DATE_TIME_ATTRIBUTE,
    CREATED_DATE_TIME_OFFSET_ATTRIBUTE,
    LOCATION_ATTRIBUTE,
    NAME_ATTRIBUTE,
    ON_SITE_ATTRIBUTE,
    PARTITION_KEY_ATTRIBUTE,
    SORT_KEY_ATTRIBUTE,
    UPDATED_DATE_TIME_ATTRIBUTE,
)
from dynamo_playground.records.codecs import (
    BOOLEAN_NUMBER,
    DATE_TIME,
    SORTABLE_DATE_TIME_OFFSET,
)
from dynamo_playground.records.models import Record


def record_key(partition_key: str, record_id: str) -> dict[str, Any]:
    """Build the primary key of a record item."""
    return {
        PARTITION_KEY_ATTRIBUTE: partition_key,
        SORT_KEY_ATTRIBUTE: record_id,
    }


def record_to_item(record: Record) -> dict[str, Any]:
    """Build the attribute map for a record, leaving out unset attributes."""
    attributes = {
        **record_key(record.partition_key, record.record_id),
        NAME_ATTRIBUTE: record.name,
        LOCATION_ATTRIBUTE: record.location,
        ON_SITE_ATTRIBUTE: BOOLEAN_NUMBER.encode(record.on_site),
        CREATED_DATE_TIME_ATTRIBUTE: DATE_TIME.encode(record.created_date_time),
        CREATED_DATE_TIME_OFFSET_ATTRIBUTE: SORTABLE_DATE_TIME_OFFSET.encode(
            record.created_date_time_offset
        ),
        UPDATED_DATE_TIME_ATTRIBUTE: DATE_TIME.encode(record.updated_date_time),
    }
    return {key: value for key, value in attributes.items() if value is not None}


def item_to_record(item: dict[str, Any]) -> Record:
    """Decode a stored item into a record.

    Raises:
        InvalidAttributeValueError: If a stored timestamp or flag is malformed
        KeyError: If a required attribute is missing
    """
    return Record(
        partition_key=item[PARTITION_KEY_ATTRIBUTE],
        record_id=item[SORT_KEY_ATTRIBUTE],
        name=item[NAME_ATTRIBUTE],
        location=item[LOCATION_ATTRIBUTE],
        on_site=BOOLEAN_NUMBER.decode(item.get(ON_SITE_ATTRIBUTE)) or False,
        created_date_time=DATE_TIME.decode(item.get(CREATED_DATE_TIME_ATTRIBUTE)),
        created_date_time_offset=SORTABLE_DATE_TIME_OFFSET.decode(
            item.get(CREATED_DATE_TIME_OFFSET_ATTRIBUTE)
        ),
        updated_date_time=DATE_TIME.decode(item.get(UPDATED_DATE_TIME_ATTRIBUTE)),
    )
