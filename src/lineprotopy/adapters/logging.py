"""Python logging formatter adapter for lineprotopy.

This adapter bridges Python's standard library logging module to the
LineEncoderPort, rendering each log record as one line protocol line.
"""

import logging

from lineprotopy.core.encoding.line_protocol import LineProtocolEncoder
from lineprotopy.core.models import Field, Measurement, Tag
from lineprotopy.core.ports import LineEncoderPort

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno"]


class LineProtocolFormatter(logging.Formatter):
    """Logging formatter that renders log records as line protocol.

    Text fields are quoted but not escaped, so a message containing a
    newline produces output spanning more than one line.

    Example:
        ```python
        from lineprotopy import LineProtocolFormatter

        handler = logging.StreamHandler()
        handler.setFormatter(LineProtocolFormatter(measurement="app_log"))
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        measurement: str = "log",
        include_attrs: list[str] | None = None,
        encoder: LineEncoderPort | None = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            measurement: Measurement name used for every line.
            include_attrs: List of LogRecord attributes to include as fields.
                Defaults to ["module", "funcName", "lineno"].
            encoder: Encoder implementing LineEncoderPort. Defaults to
                LineProtocolEncoder.
        """
        super().__init__()
        self._measurement = measurement
        self._include_attrs = (
            include_attrs if include_attrs is not None else _DEFAULT_INCLUDE_ATTRS
        )
        self._encoder = encoder or LineProtocolEncoder()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a single line.

        Args:
            record: The log record to format.

        Returns:
            Line protocol text for the record.
        """
        attr_mapping: dict[str, str | int | float | bool] = {
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }

        fields: dict[str, object] = {"message": record.getMessage()}
        for key in self._include_attrs:
            if key in attr_mapping:
                fields[key] = attr_mapping[key]

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                fields[key] = value

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                fields["exc_type"] = exc_type.__name__
            if exc_value is not None:
                fields["exc_message"] = str(exc_value)

        return self._encoder.encode(
            Measurement(
                name=self._measurement,
                tags=(Tag("level", record.levelname), Tag("logger", record.name)),
                fields=tuple(Field(k, v) for k, v in fields.items()),
                timestamp=int(record.created * 1_000_000_000),
            )
        )
