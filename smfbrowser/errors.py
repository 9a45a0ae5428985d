"""
Exceptions raised while decoding Standard MIDI Files.

All decode failures derive from SMFDecodeError, which is a ValueError so
callers that already guard parsing with ``except ValueError`` keep working.
Every error is terminal for the decode pass that raised it: the byte stream
is static, so re-reading would only reproduce the same failure.
"""

from typing import Optional


class SMFDecodeError(ValueError):
    """Base class for all SMF decoding errors."""

    def __init__(self, message: str, offset: Optional[int] = None):
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset 0x{offset:X})"
        super().__init__(message)


class TruncatedStream(SMFDecodeError):
    """Not enough bytes remain for a required read."""

    description = "Unexpected end of stream"

    def __init__(self, offset: int, needed: int = 1, available: int = 0, message: str = ""):
        self.needed = needed
        self.available = available
        text = message or f"{self.description}: needed {needed} byte(s), {available} available"
        super().__init__(text, offset)


class TruncatedChunkHeader(TruncatedStream):
    """Fewer than 8 bytes remain where a chunk header is expected."""

    description = "Truncated chunk header"


class TruncatedHeader(TruncatedStream):
    """The MThd body is shorter than its 6 fixed bytes."""

    description = "Truncated MThd header"


class TruncatedEvent(TruncatedStream):
    """A track event runs past the end of its chunk."""

    description = "Truncated track event"


class QuantityOverflow(SMFDecodeError):
    """A variable-length quantity is longer than 63 bits."""


class RunningStatusWithNoPriorEvent(SMFDecodeError):
    """A data byte appeared where a status byte was needed and none was seen yet."""


class ChunkLengthExceedsStream(SMFDecodeError):
    """A chunk declares more bytes than the stream holds (strict mode only)."""


class UnsupportedStatus(SMFDecodeError):
    """A status byte with no known payload length (strict status mode only)."""


class MalformedEndOfTrack(UserWarning):
    """End-of-Track meta event with a non-zero length."""
