"""
SMFBrowser - Lazy decoder and browser for Standard MIDI Files.

This library provides tools to:
- Walk the chunks of a .mid file without reading their bodies
- Decode MThd headers and MTrk event streams (running status, meta,
  SysEx, channel voice and mode messages)
- Browse a file as a tree of describable nodes
- Export a track's note-ons to a compact hex record file

Example usage:
    from smfbrowser import SMFReader

    midi = SMFReader.read("song.mid")
    for node in midi.items():
        print(node.describe())

    for event in midi.tracks()[0].events():
        print(event.describe())
"""

__version__ = "0.1.0"
__author__ = "SMFBrowser Contributors"

from smfbrowser.config import DecoderOptions
from smfbrowser.errors import SMFDecodeError
from smfbrowser.formats.smf.reader import SMFReader
from smfbrowser.browser import MidiFileNode, HeaderNode, TrackNode, UnknownChunkNode, ErrorNode
from smfbrowser.formats.smf.source import ByteSource
from smfbrowser.formats.smf.chunks import ChunkScanner
from smfbrowser.formats.smf.header import HeaderDecoder
from smfbrowser.formats.smf.track_decoder import TrackEventDecoder

__all__ = [
    "DecoderOptions",
    "SMFDecodeError",
    "SMFReader",
    "MidiFileNode",
    "HeaderNode",
    "TrackNode",
    "UnknownChunkNode",
    "ErrorNode",
    "ByteSource",
    "ChunkScanner",
    "HeaderDecoder",
    "TrackEventDecoder",
]
