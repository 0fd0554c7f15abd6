"""Core domain models for line protocol data."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class IntValue:
    """Integer field value, rendered with a trailing ``i``."""

    value: int


@dataclass(frozen=True)
class FloatValue:
    """Floating point field value."""

    value: float


@dataclass(frozen=True)
class BoolValue:
    """Boolean field value."""

    value: bool


@dataclass(frozen=True)
class TextValue:
    """Text field value, rendered double-quoted."""

    value: str


@dataclass(frozen=True)
class RawValue:
    """Pre-formatted field value for types with no literal rule."""

    value: str


FieldValue = IntValue | FloatValue | BoolValue | TextValue | RawValue

_VARIANTS = (IntValue, FloatValue, BoolValue, TextValue, RawValue)


def field_value(value: object) -> FieldValue:
    """Wrap a Python value in the matching field value variant.

    Args:
        value: A raw value or an existing variant.

    Returns:
        The variant for ``value``. Types without a literal rule become
        ``RawValue(str(value))``.
    """
    if isinstance(value, _VARIANTS):
        return value
    # bool is a subclass of int
    if isinstance(value, bool):
        return BoolValue(value)
    if isinstance(value, int):
        return IntValue(value)
    if isinstance(value, float):
        return FloatValue(value)
    if isinstance(value, str):
        return TextValue(value)
    return RawValue(str(value))


@dataclass(frozen=True)
class Tag:
    """An indexed key/value pair on a measurement.

    Attributes:
        key: Tag key.
        value: Tag value. Text is escaped; other types use their printed form.
    """

    key: str
    value: str | int | float | bool


@dataclass(frozen=True)
class Field:
    """A measured key/value pair carrying a typed literal.

    Attributes:
        key: Field key.
        value: Field value. Raw Python values are coerced with field_value().
    """

    key: str
    value: FieldValue

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", field_value(self.value))


@dataclass(frozen=True)
class Measurement:
    """A named event record encoded as one line.

    Attributes:
        name: Measurement name.
        tags: Tags, or None when absent.
        fields: Fields, or None when absent.
        timestamp: Point in time as a datetime or integer nanoseconds since
            the epoch, or None when absent.
    """

    name: str
    tags: tuple[Tag, ...] | None = None
    fields: tuple[Field, ...] | None = None
    timestamp: datetime | int | None = None

    def __post_init__(self) -> None:
        if self.tags is not None:
            object.__setattr__(self, "tags", _freeze(self.tags))
        if self.fields is not None:
            object.__setattr__(self, "fields", _freeze(self.fields))


def _freeze(items: Iterable) -> tuple:
    return items if isinstance(items, tuple) else tuple(items)
