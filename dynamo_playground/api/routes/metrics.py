# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Metrics endpoints."""

import prometheus_client
from fastapi import APIRouter, Response

router = APIRouter(tags=['system'])


@router.get('/metrics')
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=prometheus_client.generate_latest(prometheus_client.REGISTRY),
        media_type=prometheus_client.CONTENT_TYPE_LATEST,
    )
