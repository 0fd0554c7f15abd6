"""Shared test fixtures for all test modules."""

from datetime import datetime, timezone

import pytest

from lineprotopy.core.models import Field, Measurement, Tag


@pytest.fixture
def reference_timestamp() -> datetime:
    """Timestamp equal to 1434055562000000000 nanoseconds since the epoch."""
    return datetime(2015, 6, 11, 20, 46, 2, tzinfo=timezone.utc)


@pytest.fixture
def cpu_measurement(reference_timestamp: datetime) -> Measurement:
    """Fully populated measurement with tags given out of key order."""
    return Measurement(
        name="cpu",
        tags=(Tag("region", "uswest"), Tag("host", "server01")),
        fields=(Field("value", 1.0),),
        timestamp=reference_timestamp,
    )
