# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Public interface for API dependencies."""

from dynamo_playground.api.dependencies.clients import (
    get_client_registry,
    get_dynamodb_client,
    get_typed_client,
)

__all__ = [
    'get_client_registry',
    'get_dynamodb_client',
    'get_typed_client',
]
