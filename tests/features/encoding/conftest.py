"""BDD step definitions for line protocol encoding features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from lineprotopy.core.encoding.line_protocol import encode_measurement
from lineprotopy.core.models import Field, Measurement, Tag

_FIELD_TYPES = {
    "int": int,
    "float": float,
    "bool": lambda text: text == "true",
    "str": str,
}


@dataclass
class EncodingScenarioContext:
    """Mutable state shared between steps of one scenario."""

    name: str = ""
    tags: list[Tag] | None = None
    fields: list[Field] | None = None
    timestamp: int | None = None
    line: str = ""


def _rows(datatable: list[list[str]]) -> list[dict[str, str]]:
    header, *body = datatable
    return [dict(zip(header, row)) for row in body]


@pytest.fixture
def ctx() -> EncodingScenarioContext:
    """Fresh scenario context for each test."""
    return EncodingScenarioContext()


@given(parsers.parse('a measurement named "{name}"'))
def step_measurement_named(ctx: EncodingScenarioContext, name: str) -> None:
    ctx.name = name


@given("the tags:")
def step_tags(ctx: EncodingScenarioContext, datatable: list[list[str]]) -> None:
    ctx.tags = [Tag(row["key"], row["value"]) for row in _rows(datatable)]


@given("the fields:")
def step_fields(ctx: EncodingScenarioContext, datatable: list[list[str]]) -> None:
    ctx.fields = [
        Field(row["key"], _FIELD_TYPES[row["type"]](row["value"]))
        for row in _rows(datatable)
    ]


@given(parsers.parse("the timestamp {ns:d}"))
def step_timestamp(ctx: EncodingScenarioContext, ns: int) -> None:
    ctx.timestamp = ns


@when("the measurement is encoded")
def step_encode(ctx: EncodingScenarioContext) -> None:
    ctx.line = encode_measurement(
        Measurement(
            name=ctx.name,
            tags=ctx.tags,
            fields=ctx.fields,
            timestamp=ctx.timestamp,
        )
    )


@then(parsers.parse('the line is "{expected}"'))
def step_line_is(ctx: EncodingScenarioContext, expected: str) -> None:
    assert ctx.line == expected
