# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Tests for dynamo_playground/repositories/base.py."""

from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from dynamo_playground.clients.dynamodb.client import DynamoDBClient
from dynamo_playground.config import Settings
from dynamo_playground.repositories.base import BaseRepository, RepositoryOperationError


@dataclass
class Widget:
    widget_id: str


def to_widget(item):
    return Widget(widget_id=item['SK'])


class TestBaseRepository:
    """Tests for BaseRepository."""

    @pytest.fixture
    def mock_dynamodb_client(self):
        """Mock DynamoDB client."""
        return AsyncMock(spec=DynamoDBClient)

    @pytest.fixture
    def mock_settings(self):
        """Mock settings."""
        mock_settings = MagicMock(spec=Settings)
        mock_settings.dynamodb = MagicMock(table_name='test-table')
        return mock_settings

    @pytest.fixture
    def base_repository(self, mock_dynamodb_client, mock_settings):
        """Create BaseRepository instance with test configuration."""
        with patch(
            'dynamo_playground.repositories.base.get_settings',
            return_value=mock_settings,
        ):
            return BaseRepository(mock_dynamodb_client, Widget)

    @pytest.mark.unit
    def test_init_with_client(self, base_repository, mock_dynamodb_client):
        """Test repository initialization with a client."""
        assert base_repository.dynamodb is mock_dynamodb_client
        assert base_repository.client_available is True
        assert base_repository.model_class is Widget

    @pytest.mark.unit
    def test_init_with_tuple(self, mock_dynamodb_client):
        """Test repository initialization with a (client, available) tuple."""
        repo = BaseRepository((mock_dynamodb_client, False), Widget)

        assert repo.dynamodb is mock_dynamodb_client
        assert repo.client_available is False

    @pytest.mark.unit
    def test_init_with_none(self):
        repo = BaseRepository(None, Widget)
        assert repo.client_available is False

    @pytest.mark.unit
    def test_client_unavailable_raises(self, mock_dynamodb_client):
        """Test operations fail before sending a request when the client is down."""
        repo = BaseRepository((mock_dynamodb_client, False), Widget)

        with pytest.raises(RepositoryOperationError) as exc_info:
            repo._client('get_widget')

        assert exc_info.value.operation == 'get_widget'
        assert 'not available' in str(exc_info.value)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_query_all_follows_pages(self, base_repository, mock_dynamodb_client):
        """Test pagination continues from LastEvaluatedKey until exhausted."""
        mock_dynamodb_client.query.side_effect = [
            {'Items': [{'SK': 'a'}, {'SK': 'b'}], 'LastEvaluatedKey': {'SK': 'b'}},
            {'Items': [{'SK': 'c'}]},
        ]

        results = await base_repository._query_all(
            'list_widgets', {'IndexName': 'idx'}, to_widget
        )

        assert [w.widget_id for w in results] == ['a', 'b', 'c']
        assert mock_dynamodb_client.query.call_count == 2
        first_call = mock_dynamodb_client.query.call_args_list[0].kwargs
        second_call = mock_dynamodb_client.query.call_args_list[1].kwargs
        assert 'ExclusiveStartKey' not in first_call
        assert 'Limit' not in first_call
        assert second_call['ExclusiveStartKey'] == {'SK': 'b'}
        assert second_call['IndexName'] == 'idx'

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_query_all_respects_limit(self, base_repository, mock_dynamodb_client):
        """Test the limit shrinks per page and stops pagination once reached."""
        mock_dynamodb_client.query.side_effect = [
            {'Items': [{'SK': 'a'}, {'SK': 'b'}], 'LastEvaluatedKey': {'SK': 'b'}},
            {'Items': [{'SK': 'c'}], 'LastEvaluatedKey': {'SK': 'c'}},
        ]

        results = await base_repository._query_all(
            'list_widgets', {}, to_widget, limit=3
        )

        assert len(results) == 3
        assert mock_dynamodb_client.query.call_count == 2
        assert mock_dynamodb_client.query.call_args_list[0].kwargs['Limit'] == 3
        assert mock_dynamodb_client.query.call_args_list[1].kwargs['Limit'] == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_query_all_empty(self, base_repository, mock_dynamodb_client):
        mock_dynamodb_client.query.return_value = {'Items': []}

        assert await base_repository._query_all('list_widgets', {}, to_widget) == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_query_all_propagates_errors(
        self, base_repository, mock_dynamodb_client
    ):
        """Test storage errors are raised once and not retried."""
        mock_dynamodb_client.query.side_effect = RuntimeError('boom')

        with pytest.raises(RuntimeError, match='boom'):
            await base_repository._query_all('list_widgets', {}, to_widget)

        assert mock_dynamodb_client.query.call_count == 1
