# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Attribute codecs for record items.

Each codec converts one Python value to the value stored in a DynamoDB
attribute and back. ``None`` always maps to ``None`` so optional attributes
can be omitted from the item.

The sortable offset timestamp codec writes the UTC instant first, at fixed
width, followed by the original offset in brackets::

    2024-05-01T08:00:00.000000Z[+02:00]

Comparing two encoded values as strings therefore orders them by instant,
whatever offsets they were recorded with, and decoding restores both the
instant and the offset.
"""

import abc
import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Generic, TypeVar

T = TypeVar('T')
W = TypeVar('W')

_SORTABLE_PATTERN = re.compile(
    r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.(\d{6})Z'
    r'\[([+-])(\d{2}):(\d{2})\]$'
)

# Round-trip format written by older items, e.g. 2024-05-01T10:00:00.0000000+02:00
_ISO_OFFSET_PATTERN = re.compile(
    r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,7}))?'
    r'(Z|([+-])(\d{2}):(\d{2}))$'
)

_UTC_PATTERN = re.compile(
    r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,7}))?Z$'
)


class InvalidAttributeValueError(ValueError):
    """Raised when a stored attribute value cannot be decoded."""

    def __init__(self, attribute_type: str, value: Any) -> None:
        super().__init__(f'Invalid {attribute_type} value: {value!r}')
        self.attribute_type = attribute_type
        self.value = value


class AttributeCodec(abc.ABC, Generic[T, W]):
    """Converts between a Python value and its stored attribute value."""

    @abc.abstractmethod
    def encode(self, value: T | None) -> W | None:
        """Convert a Python value to its stored form."""

    @abc.abstractmethod
    def decode(self, value: W | None) -> T | None:
        """Convert a stored value back to Python."""


def _microseconds(fraction: str | None) -> int:
    """Convert a fractional-second digit string to microseconds, truncating."""
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, '0'))


def _format_instant(value: datetime) -> str:
    # strftime does not zero-pad years below 1000 on every platform
    return (
        f'{value.year:04d}-{value.month:02d}-{value.day:02d}'
        f'T{value.hour:02d}:{value.minute:02d}:{value.second:02d}'
    )


def _offset(sign: str, hours: str, minutes: str) -> timezone:
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    return timezone(-delta if sign == '-' else delta)


class SortableDateTimeOffsetCodec(AttributeCodec[datetime, str]):
    """Timezone-aware timestamps stored as lexicographically sortable strings."""

    name = 'sortable date-time offset'

    def encode(self, value: datetime | None) -> str | None:
        if value is None:
            return None
        return self._encode_aware(value)

    def _encode_aware(self, value: datetime) -> str:
        offset = value.utcoffset()
        if offset is None:
            raise InvalidAttributeValueError(self.name, value)
        if offset % timedelta(minutes=1):
            raise InvalidAttributeValueError(self.name, value)

        try:
            instant = value.astimezone(timezone.utc)
        except OverflowError as e:
            raise InvalidAttributeValueError(self.name, value) from e

        total_minutes = int(offset.total_seconds()) // 60
        sign = '-' if total_minutes < 0 else '+'
        hours, minutes = divmod(abs(total_minutes), 60)
        return (
            f'{_format_instant(instant)}.{instant.microsecond:06d}Z'
            f'[{sign}{hours:02d}:{minutes:02d}]'
        )

    def lower_bound(self, value: datetime | None) -> str:
        """Smallest encoded string for the instant of ``value``, any offset."""
        if value is None:
            raise InvalidAttributeValueError(self.name, value)
        encoded = self._encode_aware(value)
        return encoded[: encoded.index('[')]

    def upper_bound(self, value: datetime | None) -> str:
        """Largest encoded string for the instant of ``value``, any offset."""
        # '~' sorts after both offset signs
        return f'{self.lower_bound(value)}[~'

    def decode(self, value: str | None) -> datetime | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise InvalidAttributeValueError(self.name, value)

        try:
            match = _SORTABLE_PATTERN.match(value)
            if match:
                year, month, day, hour, minute, second, fraction = match.groups()[:7]
                sign, offset_hours, offset_minutes = match.groups()[7:]
                instant = datetime(
                    int(year),
                    int(month),
                    int(day),
                    int(hour),
                    int(minute),
                    int(second),
                    _microseconds(fraction),
                    tzinfo=timezone.utc,
                )
                return instant.astimezone(
                    _offset(sign, offset_hours, offset_minutes)
                )

            match = _ISO_OFFSET_PATTERN.match(value)
            if match:
                year, month, day, hour, minute, second, fraction = match.groups()[:7]
                designator, sign, offset_hours, offset_minutes = match.groups()[7:]
                tzinfo = (
                    timezone.utc
                    if designator == 'Z'
                    else _offset(sign, offset_hours, offset_minutes)
                )
                return datetime(
                    int(year),
                    int(month),
                    int(day),
                    int(hour),
                    int(minute),
                    int(second),
                    _microseconds(fraction),
                    tzinfo=tzinfo,
                )
        except (ValueError, OverflowError) as e:
            raise InvalidAttributeValueError(self.name, value) from e

        raise InvalidAttributeValueError(self.name, value)


class DateTimeCodec(AttributeCodec[datetime, str]):
    """Naive UTC timestamps stored as ISO-8601 strings with millisecond precision."""

    name = 'date-time'

    def encode(self, value: datetime | None) -> str | None:
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return f'{_format_instant(value)}.{value.microsecond // 1000:03d}Z'

    def decode(self, value: str | None) -> datetime | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise InvalidAttributeValueError(self.name, value)

        match = _UTC_PATTERN.match(value)
        if not match:
            raise InvalidAttributeValueError(self.name, value)

        year, month, day, hour, minute, second, fraction = match.groups()
        try:
            return datetime(
                int(year),
                int(month),
                int(day),
                int(hour),
                int(minute),
                int(second),
                _microseconds(fraction),
            )
        except ValueError as e:
            raise InvalidAttributeValueError(self.name, value) from e


class BooleanNumberCodec(AttributeCodec[bool, Decimal]):
    """Booleans stored as the numbers 1 and 0."""

    name = 'boolean number'

    def encode(self, value: bool | None) -> Decimal | None:
        if value is None:
            return None
        return Decimal(1) if value else Decimal(0)

    def decode(self, value: Decimal | None) -> bool | None:
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, Decimal)) and value in (0, 1):
            return value == 1
        raise InvalidAttributeValueError(self.name, value)


SORTABLE_DATE_TIME_OFFSET = SortableDateTimeOffsetCodec()
DATE_TIME = DateTimeCodec()
BOOLEAN_NUMBER = BooleanNumberCodec()
