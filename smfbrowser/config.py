"""
Decoder configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DecoderOptions:
    """
    Switches between lenient and strict decoding.

    Attributes:
        strict_chunk_lengths: Raise ChunkLengthExceedsStream when a chunk
            declares more bytes than remain, instead of clamping to the end
        stop_at_end_of_track: Stop a track pass after End-of-Track even if
            the chunk still holds bytes
        strict_status: Raise UnsupportedStatus for 0xF1-0xFE status bytes
            instead of emitting UnknownChannelEvent
        warn_malformed_end_of_track: Issue MalformedEndOfTrack for
            End-of-Track events with a payload
    """

    strict_chunk_lengths: bool = False
    stop_at_end_of_track: bool = True
    strict_status: bool = False
    warn_malformed_end_of_track: bool = True


DEFAULT_OPTIONS = DecoderOptions()
