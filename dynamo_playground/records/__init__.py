# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Record domain type, attribute codecs and item mapping."""

from dynamo_playground.records.codecs import (
    AttributeCodec,
    BooleanNumberCodec,
    DateTimeCodec,
    InvalidAttributeValueError,
    SortableDateTimeOffsetCodec,
)
from dynamo_playground.records.mapping import item_to_record, record_key, record_to_item
from dynamo_playground.records.models import Record

__all__ = [
    'AttributeCodec',
    'BooleanNumberCodec',
    'DateTimeCodec',
    'InvalidAttributeValueError',
    'Record',
    'SortableDateTimeOffsetCodec',
    'item_to_record',
    'record_key',
    'record_to_item',
]
