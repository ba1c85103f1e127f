# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Tests for base client and circuit breaker functionality."""

import asyncio
import time
from unittest.mock import MagicMock, patch

import pytest

from dynamo_playground.clients.base import (
    BaseClient,
    CircuitBreaker,
    OperationMonitor,
)
from dynamo_playground.config import Settings


class TestCircuitBreaker:
    """Tests for CircuitBreaker class."""

    @pytest.mark.unit
    def test_circuit_breaker_initialization(self):
        """Test CircuitBreaker initialization with default values."""
        cb = CircuitBreaker()
        assert cb.failure_threshold == 5
        assert cb.reset_timeout == 30
        assert cb.half_open_max_calls == 1
        assert cb.failures == 0
        assert cb.state == 'closed'

    @pytest.mark.unit
    def test_opens_after_threshold(self):
        """Test the breaker opens once failures reach the threshold."""
        cb = CircuitBreaker(failure_threshold=3)

        cb.record_failure()
        cb.record_failure()
        assert cb.state == 'closed'

        cb.record_failure()
        assert cb.state == 'open'
        assert cb.metrics['open_count'] == 1
        assert cb.can_execute() is False

    @pytest.mark.unit
    def test_success_resets_failures_when_closed(self):
        """Test a success clears the failure streak."""
        cb = CircuitBreaker(failure_threshold=3)
        cb.record_failure()
        cb.record_failure()

        cb.record_success()

        assert cb.failures == 0
        assert cb.state == 'closed'

    @pytest.mark.unit
    def test_half_open_after_timeout(self):
        """Test the breaker lets one call through after the reset timeout."""
        cb = CircuitBreaker(failure_threshold=1, reset_timeout=10)
        cb.record_failure()
        cb.last_failure_time = time.time() - 11

        assert cb.can_execute() is True
        assert cb.state == 'half-open'

        cb.half_open_calls = cb.half_open_max_calls
        assert cb.can_execute() is False

    @pytest.mark.unit
    def test_half_open_success_closes(self):
        """Test a successful trial call closes the breaker."""
        cb = CircuitBreaker()
        cb.state = 'half-open'

        cb.record_success()

        assert cb.state == 'closed'
        assert cb.failures == 0

    @pytest.mark.unit
    def test_half_open_failure_reopens(self):
        """Test a failed trial call reopens the breaker."""
        cb = CircuitBreaker()
        cb.state = 'half-open'

        cb.record_failure()

        assert cb.state == 'open'

    @pytest.mark.unit
    def test_get_metrics(self):
        """Test circuit breaker metrics."""
        cb = CircuitBreaker()
        cb.record_failure()

        metrics = cb.get_metrics()

        assert metrics['current_state'] == 'closed'
        assert metrics['current_failures'] == 1
        assert metrics['failure_count'] == 1

    @pytest.mark.unit
    @patch('dynamo_playground.clients.base.set_circuit_breaker_state')
    def test_prometheus_gauge_follows_state(self, mock_set_state):
        """Test the gauge reports closed as healthy and open as not."""
        cb = CircuitBreaker(failure_threshold=1)
        cb.client_name = 'stub'

        cb.record_failure()
        mock_set_state.assert_called_with('stub', False)

        cb.state = 'half-open'
        cb.record_success()
        mock_set_state.assert_called_with('stub', True)


class StubClient(BaseClient):
    """Concrete BaseClient for testing."""

    def __init__(self, settings: Settings):
        super().__init__(settings)
        self.initialized = False
        self.cleaned_up = False

    async def initialize(self) -> None:
        self.initialized = True

    async def cleanup(self) -> None:
        self.cleaned_up = True


class TestBaseClient:
    """Tests for BaseClient class."""

    @pytest.fixture
    def stub_client(self, test_settings):
        """Create a stub client instance."""
        return StubClient(test_settings)

    @pytest.mark.unit
    def test_base_client_initialization(self, stub_client):
        """Test BaseClient initialization."""
        assert stub_client.settings is not None
        assert isinstance(stub_client.circuit_breaker, CircuitBreaker)
        assert stub_client.circuit_breaker.client_name == 'stub'

    @pytest.mark.unit
    async def test_abstract_methods_implemented(self, stub_client):
        """Test that concrete client implements abstract methods."""
        await stub_client.initialize()
        assert stub_client.initialized is True

        await stub_client.cleanup()
        assert stub_client.cleaned_up is True

    @pytest.mark.unit
    def test_monitor_operation(self, stub_client):
        """Test operation monitor creation."""
        monitor = stub_client.monitor_operation('get_item')
        assert isinstance(monitor, OperationMonitor)
        assert monitor.operation_name == 'get_item'
        assert monitor.client is stub_client


class TestOperationMonitor:
    """Tests for OperationMonitor context manager."""

    @pytest.fixture
    def stub_client(self, test_settings):
        """Create a stub client for monitoring tests."""
        return StubClient(test_settings)

    @pytest.mark.unit
    @patch('dynamo_playground.clients.base.RequestContext.get_state')
    def test_captures_request_id(self, mock_get_state, stub_client):
        """Test the monitor picks up the current request id."""
        mock_get_state.return_value = MagicMock(request_id='req_123')

        monitor = OperationMonitor(stub_client, 'put_item')

        assert monitor.request_id == 'req_123'
        assert monitor.client_name == 'stub'

    @pytest.mark.unit
    @patch('dynamo_playground.clients.base.track_client_request')
    def test_success(self, mock_track_request, stub_client):
        """Test a successful operation is tracked and recorded."""
        with stub_client.monitor_operation('put_item'):
            pass

        mock_track_request.assert_called_once()
        client_name, operation, status, duration = mock_track_request.call_args[0]
        assert (client_name, operation, status) == ('stub', 'put_item', 'success')
        assert duration >= 0
        assert stub_client.circuit_breaker.metrics['success_count'] == 1

    @pytest.mark.unit
    @patch('dynamo_playground.clients.base.track_client_error')
    def test_failure_propagates(self, mock_track_error, stub_client):
        """Test a failure is tracked, recorded and re-raised unchanged."""
        with pytest.raises(ValueError, match='boom'):
            with stub_client.monitor_operation('put_item'):
                raise ValueError('boom')

        mock_track_error.assert_called_once_with('stub', 'put_item', 'ValueError')
        assert stub_client.circuit_breaker.failures == 1

    @pytest.mark.unit
    @patch('dynamo_playground.clients.base.track_client_error')
    def test_cancellation_is_not_a_failure(self, mock_track_error, stub_client):
        """Test cancellation propagates without counting against the breaker."""
        with pytest.raises(asyncio.CancelledError):
            with stub_client.monitor_operation('query'):
                raise asyncio.CancelledError()

        mock_track_error.assert_called_once_with('stub', 'query', 'Cancelled')
        assert stub_client.circuit_breaker.failures == 0
