"""Line protocol encoder for measurements.

Output format:

    name[,tag_key=tag_value,...][ field_key=field_value,...][ unix_nanoseconds]
"""

import math
from collections.abc import Iterable
from datetime import datetime, timezone
from decimal import Decimal
from operator import attrgetter

from lineprotopy.core.models import (
    BoolValue,
    Field,
    FieldValue,
    FloatValue,
    IntValue,
    Measurement,
    Tag,
    TextValue,
)

# Space, comma, equals sign and double quote. Backslash is left alone.
_ESCAPE_TABLE = str.maketrans({c: "\\" + c for c in ' ,="'})

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_by_key = attrgetter("key")


def escape(text: str) -> str:
    """Backslash-escape the reserved characters in text.

    Args:
        text: Measurement name, tag key, tag value or field key.

    Returns:
        Copy of text with every space, comma, equals sign and double quote
        preceded by a backslash.
    """
    return text.translate(_ESCAPE_TABLE)


def format_float(value: float) -> str:
    """Render a float as its shortest round-trip decimal literal.

    Integral values drop the trailing ``.0``. Exponent notation with at
    least two exponent digits is used below 1e-4 or from 1e6 up
    (``1e+06``, ``1.5e-05``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    number = Decimal(repr(value)).normalize()
    if number and not -4 <= number.adjusted() < 6:
        mantissa, _, exponent = format(number, "e").partition("e")
        return f"{mantissa}e{int(exponent):+03d}"
    return format(number, "f")


def _printed_form(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return f"{value}i"
    if isinstance(value, float):
        return format_float(value)
    return str(value)


def encode_tag(tag: Tag) -> str:
    """Encode a tag as ``key=value``.

    Non-text values are not escaped; integers keep the ``i`` suffix.
    """
    value = tag.value
    if isinstance(value, str):
        return f"{escape(tag.key)}={escape(value)}"
    return f"{escape(tag.key)}={_printed_form(value)}"


def format_field_value(value: FieldValue) -> str:
    """Render a field value literal according to its variant."""
    if isinstance(value, IntValue):
        return f"{value.value}i"
    if isinstance(value, FloatValue):
        return format_float(value.value)
    if isinstance(value, BoolValue):
        return "true" if value.value else "false"
    if isinstance(value, TextValue):
        # Embedded double quotes are not escaped.
        return f'"{value.value}"'
    return value.value


def encode_field(field: Field) -> str:
    """Encode a field as ``key=literal``."""
    return f"{escape(field.key)}={format_field_value(field.value)}"


def encode_tags(tags: Iterable[Tag]) -> str:
    """Encode tags sorted by key and joined with commas.

    Args:
        tags: Tags in any order. Duplicate keys are kept in input order.

    Returns:
        Comma-joined fragment, or empty string if there are no tags.
    """
    return ",".join(encode_tag(tag) for tag in sorted(tags, key=_by_key))


def encode_fields(fields: Iterable[Field]) -> str:
    """Encode fields sorted by key and joined with commas.

    Args:
        fields: Fields in any order. Duplicate keys are kept in input order.

    Returns:
        Comma-joined fragment, or empty string if there are no fields.
    """
    return ",".join(encode_field(field) for field in sorted(fields, key=_by_key))


def timestamp_nanoseconds(timestamp: datetime | int) -> int:
    """Convert a timestamp to integer nanoseconds since the epoch.

    Naive datetimes are taken to be UTC. Integers are returned unchanged.
    """
    if isinstance(timestamp, int):
        return timestamp
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    delta = timestamp - _EPOCH
    seconds = delta.days * 86_400 + delta.seconds
    return seconds * 1_000_000_000 + delta.microseconds * 1_000


def encode_measurement(measurement: Measurement) -> str:
    """Encode a measurement to a single line protocol line.

    Args:
        measurement: The measurement to encode.

    Returns:
        The line without a trailing newline. Absent or empty sections are
        omitted together with their separator.
    """
    parts = [escape(measurement.name)]
    if measurement.tags is not None:
        tags = encode_tags(measurement.tags)
        if tags:
            parts.append(",")
            parts.append(tags)
    if measurement.fields is not None:
        fields = encode_fields(measurement.fields)
        if fields:
            parts.append(" ")
            parts.append(fields)
    if measurement.timestamp is not None:
        parts.append(" ")
        parts.append(str(timestamp_nanoseconds(measurement.timestamp)))
    return "".join(parts)


class LineProtocolEncoder:
    """Stateless LineEncoderPort implementation."""

    def encode(self, measurement: Measurement) -> str:
        """Encode one measurement with encode_measurement()."""
        return encode_measurement(measurement)
