# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Tests for record and item translation."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from dynamo_playground.records.codecs import InvalidAttributeValueError
from dynamo_playground.records.mapping import item_to_record, record_key, record_to_item
from dynamo_playground.records.models import Record


class TestRecordMapping:
    """Tests for the record mapping helpers."""

    @pytest.mark.unit
    def test_record_key(self):
        assert record_key('object', 'abc') == {'PK': 'object', 'SK': 'abc'}

    @pytest.mark.unit
    def test_record_to_item(self, sample_created_at):
        """Test every attribute is encoded to its stored form."""
        record = Record(
            partition_key='object',
            record_id='abc',
            name='Alpha',
            location='Building 1',
            on_site=True,
            created_date_time=datetime(2024, 5, 1, 8, 0, 0, 123456),
            created_date_time_offset=sample_created_at,
        )

        item = record_to_item(record)

        assert item == {
            'PK': 'object',
            'SK': 'abc',
            'Name': 'Alpha',
            'Location': 'Building 1',
            'OnSite': Decimal(1),
            'CreatedDateTime': '2024-05-01T08:00:00.123Z',
            'CreatedDateTimeOffset': '2024-05-01T08:00:00.123456Z[+02:00]',
        }

    @pytest.mark.unit
    def test_record_to_item_omits_unset_timestamps(self):
        record = Record(
            partition_key='object', record_id='abc', name='Beta', location='Lab'
        )

        item = record_to_item(record)

        assert item['OnSite'] == Decimal(0)
        assert 'CreatedDateTime' not in item
        assert 'CreatedDateTimeOffset' not in item
        assert 'UpdatedDateTime' not in item

    @pytest.mark.unit
    def test_item_to_record(self, sample_item):
        """Test a stored item decodes with its original offset."""
        record = item_to_record(sample_item)

        assert record.partition_key == 'object'
        assert record.record_id == sample_item['SK']
        assert record.name == 'Alpha'
        assert record.location == 'Building 1'
        assert record.on_site is True
        assert record.created_date_time == datetime(2024, 5, 1, 8, 0, 0, 123000)
        assert record.created_date_time_offset == datetime(
            2024, 5, 1, 10, 0, 0, 123456, tzinfo=timezone(timedelta(hours=2))
        )
        assert record.created_date_time_offset.utcoffset() == timedelta(hours=2)
        assert record.updated_date_time == datetime(2024, 5, 2, 9, 30)

    @pytest.mark.unit
    def test_item_to_record_without_optional_attributes(self):
        """Test an item written only by an update decodes with empty timestamps."""
        record = item_to_record(
            {
                'PK': 'object',
                'SK': 'abc',
                'Name': 'Beta',
                'Location': 'Lab',
                'UpdatedDateTime': '2024-05-02T09:30:00.000Z',
            }
        )

        assert record.on_site is False
        assert record.created_date_time is None
        assert record.created_date_time_offset is None
        assert record.updated_date_time is not None

    @pytest.mark.unit
    def test_item_to_record_rejects_malformed_timestamp(self, sample_item):
        sample_item['CreatedDateTimeOffset'] = 'yesterday'

        with pytest.raises(InvalidAttributeValueError):
            item_to_record(sample_item)

    @pytest.mark.unit
    @pytest.mark.parametrize('attribute', ['Name', 'Location'])
    def test_item_to_record_requires_name_and_location(self, sample_item, attribute):
        """Test a stored item without its name or location fails to decode."""
        del sample_item[attribute]

        with pytest.raises(KeyError):
            item_to_record(sample_item)
