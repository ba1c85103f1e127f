# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Tests for monitoring module."""

from unittest.mock import patch

import prometheus_client
import pytest

from dynamo_playground.monitoring import (
    CIRCUIT_BREAKER_STATE,
    CLIENT_ERRORS,
    CLIENT_REQUEST_COUNT,
    CLIENT_REQUEST_LATENCY,
    RECORD_LOOKUPS,
    RECORD_WRITES,
    set_circuit_breaker_state,
    track_client_error,
    track_client_request,
    track_record_lookup,
    track_record_write,
)


class TestPrometheusMetrics:
    """Test Prometheus metrics are properly defined."""

    @pytest.mark.unit
    def test_metric_labels(self):
        """Test that metrics have expected labels."""
        assert CLIENT_REQUEST_COUNT._labelnames == ('client', 'operation', 'status')
        assert CLIENT_REQUEST_LATENCY._labelnames == ('client', 'operation')
        assert CLIENT_ERRORS._labelnames == ('client', 'operation', 'error_type')
        assert CIRCUIT_BREAKER_STATE._labelnames == ('client',)
        assert RECORD_WRITES._labelnames == ('operation',)
        assert RECORD_LOOKUPS._labelnames == ('result',)


class TestClientTracking:
    """Test client tracking functions."""

    @pytest.mark.unit
    @patch('dynamo_playground.monitoring.CLIENT_REQUEST_COUNT')
    @patch('dynamo_playground.monitoring.CLIENT_REQUEST_LATENCY')
    def test_track_client_request(self, mock_latency, mock_count):
        """Test track_client_request function."""
        track_client_request('dynamodb', 'put_item', 'success', 0.5)

        mock_count.labels.assert_called_with(
            client='dynamodb', operation='put_item', status='success'
        )
        mock_count.labels.return_value.inc.assert_called_once()
        mock_latency.labels.assert_called_with(client='dynamodb', operation='put_item')
        mock_latency.labels.return_value.observe.assert_called_once_with(0.5)

    @pytest.mark.unit
    @patch('dynamo_playground.monitoring.CLIENT_ERRORS')
    def test_track_client_error(self, mock_errors):
        """Test track_client_error function."""
        track_client_error('dynamodb', 'get_item', 'ClientError')

        mock_errors.labels.assert_called_with(
            client='dynamodb', operation='get_item', error_type='ClientError'
        )

    @pytest.mark.unit
    def test_set_circuit_breaker_state(self):
        """Test set_circuit_breaker_state writes 1 for closed and 0 for open."""
        set_circuit_breaker_state('monitoring-test', True)
        assert (
            prometheus_client.REGISTRY.get_sample_value(
                'circuit_breaker_state', {'client': 'monitoring-test'}
            )
            == 1.0
        )

        set_circuit_breaker_state('monitoring-test', False)
        assert (
            prometheus_client.REGISTRY.get_sample_value(
                'circuit_breaker_state', {'client': 'monitoring-test'}
            )
            == 0.0
        )


class TestRecordTracking:
    """Test record store tracking functions."""

    @pytest.mark.unit
    @patch('dynamo_playground.monitoring.RECORD_WRITES')
    def test_track_record_write(self, mock_writes):
        track_record_write('create')

        mock_writes.labels.assert_called_with(operation='create')
        mock_writes.labels.return_value.inc.assert_called_once()

    @pytest.mark.unit
    @patch('dynamo_playground.monitoring.RECORD_LOOKUPS')
    def test_track_record_lookup(self, mock_lookups):
        track_record_lookup(True)
        mock_lookups.labels.assert_called_with(result='found')

        track_record_lookup(False)
        mock_lookups.labels.assert_called_with(result='not_found')
