"""lineprotopy - encode measurements as metrics line protocol.

Example:
    ```python
    from lineprotopy import encode_measurement, measurement

    line = encode_measurement(
        measurement("cpu", tags={"host": "server01"}, fields={"value": 0.64})
    )
    # cpu,host=server01 value=0.64
    ```
"""

from lineprotopy.adapters.logging import LineProtocolFormatter
from lineprotopy.core.encoding.line_protocol import (
    LineProtocolEncoder,
    encode_field,
    encode_fields,
    encode_measurement,
    encode_tag,
    encode_tags,
    escape,
)
from lineprotopy.core.measurements import measurement, point
from lineprotopy.core.models import (
    BoolValue,
    Field,
    FieldValue,
    FloatValue,
    IntValue,
    Measurement,
    RawValue,
    Tag,
    TextValue,
    field_value,
)
from lineprotopy.core.ports import LineEncoderPort

__all__ = [
    "BoolValue",
    "Field",
    "FieldValue",
    "FloatValue",
    "IntValue",
    "LineEncoderPort",
    "LineProtocolEncoder",
    "LineProtocolFormatter",
    "Measurement",
    "RawValue",
    "Tag",
    "TextValue",
    "encode_field",
    "encode_fields",
    "encode_measurement",
    "encode_tag",
    "encode_tags",
    "escape",
    "field_value",
    "measurement",
    "point",
]
