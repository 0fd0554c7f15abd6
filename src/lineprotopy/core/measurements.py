"""Measurement helper functions for creating Measurement objects."""

import time
from collections.abc import Mapping
from datetime import datetime

from lineprotopy.core.models import Field, Measurement, Tag


def measurement(
    name: str,
    tags: Mapping[str, str | int | float | bool] | None = None,
    fields: Mapping[str, object] | None = None,
    timestamp: datetime | int | None = None,
) -> Measurement:
    """Create a measurement from plain dicts.

    Args:
        name: Measurement name (e.g., "cpu")
        tags: Optional tag key/value pairs; None leaves tags absent
        fields: Optional field key/value pairs; None leaves fields absent
        timestamp: Optional datetime or nanoseconds since the epoch

    Returns:
        Measurement holding Tag and Field tuples
    """
    return Measurement(
        name=name,
        tags=None if tags is None else tuple(Tag(k, v) for k, v in tags.items()),
        fields=(
            None if fields is None else tuple(Field(k, v) for k, v in fields.items())
        ),
        timestamp=timestamp,
    )


def point(
    name: str,
    fields: Mapping[str, object],
    tags: Mapping[str, str | int | float | bool] | None = None,
) -> Measurement:
    """Create a measurement stamped with the current time.

    Args:
        name: Measurement name (e.g., "cpu")
        fields: Field key/value pairs
        tags: Optional tag key/value pairs

    Returns:
        Measurement with current timestamp in nanoseconds
    """
    return measurement(name, tags=tags, fields=fields, timestamp=time.time_ns())
