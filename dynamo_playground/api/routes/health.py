# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Health check endpoints for the API."""

from datetime import datetime, timezone
from typing import Annotated, Literal

from fastapi import APIRouter, Depends
from loguru import logger
from pydantic import BaseModel

from dynamo_playground.api.dependencies import get_client_registry
from dynamo_playground.clients.registry import ClientRegistry
from dynamo_playground.version import get_version

# Clients without which no object route can be served
CRITICAL_CLIENTS = ('dynamodb',)


class ClientHealth(BaseModel):
    """Health information for a single client."""

    available: bool
    type: str
    error: str | None = None


class ServiceHealth(BaseModel):
    """Health information for the service."""

    status: Literal['healthy', 'critical']
    timestamp: str
    clients: dict[str, ClientHealth]
    version: str


router = APIRouter(tags=['Health'])


@router.get('/health')
async def check_health(
    client_registry: Annotated[ClientRegistry, Depends(get_client_registry)],
) -> ServiceHealth:
    """
    Check the health of all registered clients.

    - healthy: every critical client is available
    - critical: a critical client is missing or failed to initialize
    """
    client_health = {
        info['name']: ClientHealth(
            available=info['initialized'],
            type=info['type'],
            error=info['error'],
        )
        for info in client_registry.client_info()
    }

    critical_available = all(
        name in client_health and client_health[name].available
        for name in CRITICAL_CLIENTS
    )

    if critical_available:
        status = 'healthy'
        logger.debug('Health check: HEALTHY - All critical clients are available')
    else:
        status = 'critical'
        logger.warning('Health check: CRITICAL - Some critical clients are unavailable')

    return ServiceHealth(
        status=status,
        timestamp=datetime.now(timezone.utc).isoformat(),
        clients=client_health,
        version=get_version(),
    )
