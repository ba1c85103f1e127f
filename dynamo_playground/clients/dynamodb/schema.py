# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""DynamoDB schema definitions for the records table."""

from typing import Any

from dynamo_playground.config import get_settings

# Primary key attributes
PARTITION_KEY_ATTRIBUTE = 'PK'
SORT_KEY_ATTRIBUTE = 'SK'

# Record attributes
NAME_ATTRIBUTE = 'Name'
LOCATION_ATTRIBUTE = 'Location'
ON_SITE_ATTRIBUTE = 'OnSite'
CREATED_DATE_TIME_ATTRIBUTE = 'CreatedDateTime'
CREATED_DATE_TIME_OFFSET_ATTRIBUTE = 'CreatedDateTimeOffset'
UPDATED_DATE_TIME_ATTRIBUTE = 'UpdatedDateTime'

# Secondary indexes
ON_SITE_INDEX = 'onsite-gsi'
CREATED_OFFSET_INDEX = 'partitionkey-createdoffset-lsi'


def get_schema(table_name: str | None = None) -> dict[str, Any]:
    """Get the create-table request for the records table.

    Args:
        table_name: Table name override, defaults to the configured table

    Returns:
        Keyword arguments for ``CreateTable``
    """
    if table_name is None:
        table_name = get_settings().dynamodb.table_name

    return {
        'TableName': table_name,
        'AttributeDefinitions': [
            {'AttributeName': PARTITION_KEY_ATTRIBUTE, 'AttributeType': 'S'},
            {'AttributeName': SORT_KEY_ATTRIBUTE, 'AttributeType': 'S'},
            {'AttributeName': ON_SITE_ATTRIBUTE, 'AttributeType': 'N'},
            {'AttributeName': CREATED_DATE_TIME_OFFSET_ATTRIBUTE, 'AttributeType': 'S'},
        ],
        'KeySchema': [
            {'AttributeName': PARTITION_KEY_ATTRIBUTE, 'KeyType': 'HASH'},
            {'AttributeName': SORT_KEY_ATTRIBUTE, 'KeyType': 'RANGE'},
        ],
        'BillingMode': 'PAY_PER_REQUEST',
        'GlobalSecondaryIndexes': [
            {
                'IndexName': ON_SITE_INDEX,
                'KeySchema': [
                    {'AttributeName': ON_SITE_ATTRIBUTE, 'KeyType': 'HASH'},
                ],
                'Projection': {'ProjectionType': 'ALL'},
            },
        ],
        'LocalSecondaryIndexes': [
            {
                'IndexName': CREATED_OFFSET_INDEX,
                'KeySchema': [
                    {'AttributeName': PARTITION_KEY_ATTRIBUTE, 'KeyType': 'HASH'},
                    {
                        'AttributeName': CREATED_DATE_TIME_OFFSET_ATTRIBUTE,
                        'KeyType': 'RANGE',
                    },
                ],
                'Projection': {'ProjectionType': 'ALL'},
            },
        ],
    }
