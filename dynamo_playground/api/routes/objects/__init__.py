# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Object-level API."""

from dynamo_playground.api.routes.objects import handlers
from dynamo_playground.api.routes.objects.endpoints import router

__all__ = ['handlers', 'router']
