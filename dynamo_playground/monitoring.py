# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Monitoring utilities for the application."""

import prometheus_client as prom  # type: ignore
from loguru import logger  # type: ignore

# Client metrics
CLIENT_REQUEST_COUNT = prom.Counter(
    'client_requests_total', 'Total client requests', ['client', 'operation', 'status']
)

CLIENT_REQUEST_LATENCY = prom.Histogram(
    'client_latency_seconds',
    'Client request latency in seconds',
    ['client', 'operation'],
)

CLIENT_ERRORS = prom.Counter(
    'client_errors_total', 'Total client errors', ['client', 'operation', 'error_type']
)

# Circuit breaker metrics
CIRCUIT_BREAKER_STATE = prom.Gauge(
    'circuit_breaker_state', 'Circuit breaker state (1=closed, 0=open)', ['client']
)

# Record store metrics
RECORD_WRITES = prom.Counter(
    'record_writes_total', 'Total record writes', ['operation']
)

RECORD_LOOKUPS = prom.Counter(
    'record_lookups_total', 'Total record point lookups', ['result']
)


def track_client_request(
    client: str, operation: str, status: str, duration: float
) -> None:
    """Track a client request."""
    logger.debug(
        f'TRACKING CLIENT REQUEST: {client=}, {operation=}, {status=}, {duration=}'
    )
    CLIENT_REQUEST_COUNT.labels(client=client, operation=operation, status=status).inc()
    CLIENT_REQUEST_LATENCY.labels(client=client, operation=operation).observe(duration)


def track_client_error(client: str, operation: str, error_type: str) -> None:
    """Track a client error."""
    logger.debug(f'TRACKING CLIENT ERROR: {client=}, {operation=}, {error_type=}')
    CLIENT_ERRORS.labels(
        client=client, operation=operation, error_type=error_type
    ).inc()


def set_circuit_breaker_state(client: str, is_closed: bool) -> None:
    """Set the circuit breaker state."""
    logger.debug(f'SETTING CIRCUIT BREAKER STATE: {client=}, {is_closed=}')
    CIRCUIT_BREAKER_STATE.labels(client=client).set(1.0 if is_closed else 0.0)


def track_record_write(operation: str) -> None:
    """Track a record create or update."""
    RECORD_WRITES.labels(operation=operation).inc()


def track_record_lookup(found: bool) -> None:
    """Track a record point lookup by outcome."""
    RECORD_LOOKUPS.labels(result='found' if found else 'not_found').inc()
