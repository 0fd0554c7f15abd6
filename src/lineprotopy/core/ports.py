"""Port interfaces for measurement encoders.

Collaborators that turn measurements into text depend only on this
protocol, not on a concrete encoder.
"""

from typing import Protocol, runtime_checkable

from lineprotopy.core.models import Measurement


@runtime_checkable
class LineEncoderPort(Protocol):
    """Port for encoding a measurement into a single line.

    Examples: LineProtocolEncoder.
    """

    def encode(self, measurement: Measurement) -> str:
        """Encode one measurement.

        Args:
            measurement: The measurement to encode.

        Returns:
            One line of text with no trailing newline.
        """
        ...
