# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Shared test fixtures and configuration."""

import os
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

from dynamo_playground.api.app import create_app
from dynamo_playground.clients.dynamodb.client import DynamoDBClient
from dynamo_playground.clients.dynamodb.schema import get_schema
from dynamo_playground.config import Settings, get_settings
from dynamo_playground.repositories.record import RecordRepository

TEST_TABLE_NAME = 'test-table-records'


@pytest.fixture
def test_settings():
    """Test settings with safe defaults."""
    os.environ.update(
        {
            'AWS_ACCESS_KEY_ID': 'testing',
            'AWS_SECRET_ACCESS_KEY': 'testing',
            'AWS_SECURITY_TOKEN': 'testing',
            'AWS_SESSION_TOKEN': 'testing',
            'AWS_DEFAULT_REGION': 'us-east-1',
        }
    )

    return Settings(
        api_host='localhost',
        api_port=8000,
        aws_region='us-east-1',
        dynamodb_table_name=TEST_TABLE_NAME,
        dynamodb_partition_key='object',
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    """Create FastAPI app for testing (lifespan is not run)."""
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """FastAPI test client."""
    return TestClient(app)


# AWS Mocking Fixtures
@pytest.fixture
def aws_credentials():
    """Mocked AWS credentials for moto."""
    return {
        'aws_access_key_id': 'testing',
        'aws_secret_access_key': 'testing',
        'aws_session_token': 'testing',
    }


@pytest.fixture
def dynamodb_client(aws_credentials):
    """Mocked DynamoDB client."""
    with mock_aws():
        yield boto3.client('dynamodb', region_name='us-east-1', **aws_credentials)


@pytest.fixture
def mock_records_table(dynamodb_client):
    """Create the records table with its indexes in moto."""
    dynamodb_client.create_table(**get_schema(TEST_TABLE_NAME))
    return TEST_TABLE_NAME


# Mock client and repository fixtures
@pytest.fixture
def mock_dynamodb():
    """DynamoDB client double with async methods."""
    return AsyncMock(spec=DynamoDBClient)


@pytest.fixture
def record_repository(mock_dynamodb, test_settings):
    """Record repository backed by the client double."""
    return RecordRepository(mock_dynamodb, partition_key='object')


@pytest.fixture
def mock_record_repository():
    """Record repository double for route tests."""
    return AsyncMock(spec=RecordRepository)


# Test data factories
@pytest.fixture
def sample_created_at():
    """A creation instant recorded at UTC+02:00."""
    return datetime(2024, 5, 1, 10, 0, 0, 123456, tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture
def sample_item():
    """Stored item for a record that has been created and updated."""
    return {
        'PK': 'object',
        'SK': '5b0c7d0e-8a8e-4d61-9a51-2f3c3a0e8d11',
        'Name': 'Alpha',
        'Location': 'Building 1',
        'OnSite': Decimal(1),
        'CreatedDateTime': '2024-05-01T08:00:00.123Z',
        'CreatedDateTimeOffset': '2024-05-01T08:00:00.123456Z[+02:00]',
        'UpdatedDateTime': '2024-05-02T09:30:00.000Z',
    }
