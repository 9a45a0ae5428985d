"""
MTrk event decoder.

Track Event Format:
    event := delta-time (varlen) status? data

    status 0xFF: meta       type (1) length (varlen) payload
    status 0xF0: sysex      length (varlen) payload
    status 0x80-0xEF: channel message, 1 or 2 data bytes

A data byte (bit 7 clear) where a status byte is expected means running
status: the previous status is reused and the byte is read again as data.
"""

import logging
import warnings
from typing import Iterator, Optional

from smfbrowser.config import DEFAULT_OPTIONS, DecoderOptions
from smfbrowser.errors import (
    MalformedEndOfTrack,
    RunningStatusWithNoPriorEvent,
    TruncatedEvent,
    UnsupportedStatus,
)
from smfbrowser.formats.smf.source import ByteCursor, ByteSource
from smfbrowser.models.chunk import ChunkDescriptor
from smfbrowser.models.events import (
    CHANNEL_DATA_LENGTHS,
    UNKNOWN_DATA_LENGTH,
    EndOfTrack,
    EventType,
    MidiEvent,
    SystemExclusive,
    build_channel_event,
    build_meta_event,
)

logger = logging.getLogger(__name__)


class TrackEventDecoder:
    """
    Lazy, restartable sequence of the events in one MTrk chunk.

    Every iteration opens a fresh cursor bounded by the chunk's content end
    and starts with no running status. Decoding advances only as events are
    pulled; abandoning the iteration leaves nothing behind.

    Example:
        for event in TrackEventDecoder(source, descriptor):
            print(event.describe())
    """

    def __init__(
        self,
        source: ByteSource,
        descriptor: ChunkDescriptor,
        options: Optional[DecoderOptions] = None,
    ):
        self.source = source
        self.descriptor = descriptor
        self.options = options or DEFAULT_OPTIONS

    def __iter__(self) -> Iterator[MidiEvent]:
        cursor = self.source.cursor(
            self.descriptor.content_offset,
            self.descriptor.content_end,
            truncated_error=TruncatedEvent,
        )
        last_status: Optional[int] = None
        last_status_offset = 0
        count = 0

        logger.debug(
            "Decoding track at 0x%X (%d bytes)",
            self.descriptor.start_offset,
            self.descriptor.declared_length,
        )

        while not cursor.at_end:
            event_offset = cursor.position
            delta_time = cursor.read_quantity()
            status_offset = cursor.position
            status = cursor.read_byte()

            if not status & 0x80:
                if last_status is None:
                    raise RunningStatusWithNoPriorEvent(
                        f"Data byte 0x{status:02X} with no prior status", event_offset
                    )
                cursor.unread()
                status = last_status
                status_offset = last_status_offset

            if status == EventType.META:
                event = self._read_meta_event(cursor, delta_time)
            elif status == EventType.SYSEX:
                event = self._read_sysex_event(cursor, delta_time)
            else:
                event = self._read_channel_event(cursor, delta_time, status, status_offset)

            last_status = status
            last_status_offset = status_offset
            count += 1
            yield event

            if isinstance(event, EndOfTrack) and self.options.stop_at_end_of_track:
                if not cursor.at_end:
                    logger.warning(
                        "%d byte(s) after End Of Track in track at 0x%X ignored",
                        cursor.end - cursor.position,
                        self.descriptor.start_offset,
                    )
                break

        logger.debug("Track at 0x%X: %d event(s)", self.descriptor.start_offset, count)

    def _read_meta_event(self, cursor: ByteCursor, delta_time: int) -> MidiEvent:
        """Read type, length and payload of a meta event."""
        meta_type = cursor.read_byte()
        length = cursor.read_quantity()
        data = cursor.read(length)

        event = build_meta_event(delta_time, meta_type, data)

        if isinstance(event, EndOfTrack) and data and self.options.warn_malformed_end_of_track:
            warnings.warn(
                f"End Of Track with {len(data)} byte payload in track at "
                f"0x{self.descriptor.start_offset:X}",
                MalformedEndOfTrack,
                stacklevel=3,
            )

        return event

    def _read_sysex_event(self, cursor: ByteCursor, delta_time: int) -> MidiEvent:
        """Read a length-prefixed SysEx payload, kept verbatim."""
        length = cursor.read_quantity()
        return SystemExclusive(delta_time, cursor.read(length))

    def _read_channel_event(
        self, cursor: ByteCursor, delta_time: int, status: int, status_offset: int
    ) -> MidiEvent:
        """
        Read the data bytes of a channel message and build its event.

        ``status_offset`` is where the status byte was read, which under running
        status is the offset of the earlier event that set it.
        """
        message_type = status >> 4
        data_length = CHANNEL_DATA_LENGTHS.get(message_type)

        if data_length is None:
            if self.options.strict_status:
                raise UnsupportedStatus(
                    f"Status 0x{status:02X} has no known length", status_offset
                )
            logger.warning(
                "Unknown status 0x%02X at 0x%X, assuming %d data bytes",
                status,
                status_offset,
                UNKNOWN_DATA_LENGTH,
            )
            data_length = UNKNOWN_DATA_LENGTH

        return build_channel_event(delta_time, status, cursor.read(data_length))


def decode_track(
    source: ByteSource, descriptor: ChunkDescriptor, options: Optional[DecoderOptions] = None
) -> Iterator[MidiEvent]:
    """Iterate once over the events of an MTrk chunk."""
    return iter(TrackEventDecoder(source, descriptor, options))
