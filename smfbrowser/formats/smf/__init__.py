"""Standard MIDI File container and event stream decoding."""

from smfbrowser.formats.smf.source import ByteSource, ByteCursor
from smfbrowser.formats.smf.chunks import ChunkScanner, scan_chunks
from smfbrowser.formats.smf.header import HeaderDecoder
from smfbrowser.formats.smf.track_decoder import TrackEventDecoder, decode_track

__all__ = [
    "ByteSource",
    "ByteCursor",
    "ChunkScanner",
    "scan_chunks",
    "HeaderDecoder",
    "TrackEventDecoder",
    "decode_track",
]
