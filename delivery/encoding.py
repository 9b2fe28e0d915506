"""
Value encoding for the query string.

Callers pass raw logical values; each one is encoded exactly once, here.

    encode_value('red & blue')          => 'red%20%26%20blue'
    encode_value(4.50)                  => '4.5'
    encode_value(True)                  => 'true'
    encode_value(datetime(2020, 1, 1))  => '2020-01-01T00%3A00%3A00.000Z'
    encode_value(['a', 'b,c'])          => 'a,b%2Cc'
"""

import decimal
import math
from datetime import date, datetime, timezone
from urllib.parse import quote, unquote

from .errors import InvalidArity, UnsupportedValueType

VALUE_SEPARATOR = ','


def encode_value(raw) -> str:
    """Encode one logical value (or a list of them) into a query-string token."""
    if isinstance(raw, (list, tuple)):
        if not raw:
            raise InvalidArity("a value list must contain at least one value", value=raw)
        return VALUE_SEPARATOR.join(_encode_scalar(v) for v in raw)
    return _encode_scalar(raw)


def decode_value(token: str) -> str:
    """Inverse of the percent-encoding applied to a single value token."""
    return unquote(token)


def _encode_scalar(value) -> str:
    return quote(normalize_value(value), safe='')


def normalize_value(value) -> str:
    """Textual form of a scalar value before percent-encoding."""
    # bool before int: True is an int
    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, str):
        return value

    if isinstance(value, int):
        return str(value)

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise UnsupportedValueType("NaN and Infinity cannot be encoded", value=value)
        if value.is_integer():
            return str(int(value))
        return format(decimal.Decimal(repr(value)), 'f')

    if isinstance(value, decimal.Decimal):
        if not value.is_finite():
            raise UnsupportedValueType("NaN and Infinity cannot be encoded", value=value)
        return format(value.normalize(), 'f')

    # datetime before date: datetime is a date
    if isinstance(value, datetime):
        return format_timestamp(value)

    if isinstance(value, date):
        return format_timestamp(datetime(value.year, value.month, value.day))

    raise UnsupportedValueType(f"no encoding rule for {type(value).__name__} value {value!r}", value=value)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision. Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        utc = value
    else:
        utc = value.astimezone(timezone.utc).replace(tzinfo=None)
    return utc.isoformat(timespec='milliseconds') + 'Z'
