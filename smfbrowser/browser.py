"""
Browsable nodes over a decoded MIDI file.

The nodes are what a tree view or property inspector works with. Each node
can describe itself; container nodes expand lazily through ``items()``;
nodes with a property set expose ``properties()``; nodes with actions list
them in ``actions`` and run them through ``execute()``.

    MidiFileNode
     ├─ HeaderNode          (MThd)
     ├─ TrackNode           (MTrk) → MidiEvent, MidiEvent, ...
     └─ UnknownChunkNode    (any other tag)

A decode failure while expanding a node ends that node's listing with an
ErrorNode; siblings decode independently.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from smfbrowser.config import DEFAULT_OPTIONS, DecoderOptions
from smfbrowser.errors import SMFDecodeError
from smfbrowser.export.note_export import DEFAULT_EXPORT_FILENAME, export_track
from smfbrowser.formats.smf.chunks import ChunkScanner
from smfbrowser.formats.smf.header import HeaderDecoder
from smfbrowser.formats.smf.source import ByteSource
from smfbrowser.formats.smf.track_decoder import TrackEventDecoder
from smfbrowser.models.chunk import ChunkDescriptor
from smfbrowser.models.events import MidiEvent
from smfbrowser.models.header import Header

logger = logging.getLogger(__name__)


class ErrorNode:
    """Stands in for the part of a listing that could not be decoded."""

    def __init__(self, error: SMFDecodeError):
        self.error = error

    def describe(self) -> str:
        return f"Error: {self.error}"

    def __str__(self) -> str:
        return self.describe()


class ChunkNode:
    """Base for nodes backed by one top-level chunk."""

    def __init__(
        self,
        source: ByteSource,
        descriptor: ChunkDescriptor,
        options: Optional[DecoderOptions] = None,
    ):
        self.source = source
        self.descriptor = descriptor
        self.options = options or DEFAULT_OPTIONS

    def describe(self) -> str:
        return self.descriptor.type_tag

    @property
    def raw(self) -> bytes:
        """Chunk bytes, prologue included."""
        return self.source.slice(self.descriptor.start_offset, self.descriptor.content_end)

    def __str__(self) -> str:
        return self.describe()


class HeaderNode(ChunkNode):
    """MThd chunk; its header is decoded on demand."""

    def header(self) -> Header:
        return HeaderDecoder.decode(self.source, self.descriptor)

    def properties(self) -> Dict[str, int]:
        return self.header().properties()


class TrackNode(ChunkNode):
    """MTrk chunk; expands to its events and supports Export."""

    actions: Tuple[str, ...] = ("Export",)

    def items(self) -> Iterator[Union[MidiEvent, ErrorNode]]:
        try:
            for event in self.events():
                yield event
        except SMFDecodeError as e:
            logger.warning("Track at 0x%X: %s", self.descriptor.start_offset, e)
            yield ErrorNode(e)

    def events(self) -> TrackEventDecoder:
        """Decoder over this track; errors propagate."""
        return TrackEventDecoder(self.source, self.descriptor, self.options)

    def execute(self, action: str, output: Union[str, Path, None] = None) -> int:
        """
        Run a named action.

        Args:
            action: One of ``actions``
            output: Export destination (defaults to export.xml)

        Returns:
            Number of export records written
        """
        if action == "Export":
            return self.export(output or DEFAULT_EXPORT_FILENAME)
        raise ValueError(f"Unknown action {action!r} for {self.describe()}")

    def export(self, output: Union[str, Path]) -> int:
        count = export_track(self.events(), output)
        logger.debug("Exported %d record(s) to %s", count, output)
        return count


class UnknownChunkNode(ChunkNode):
    """Chunk with an unrecognized tag; opaque."""


class MidiFileNode:
    """
    Root node for one MIDI file.

    Example:
        node = MidiFileNode.open("song.mid")
        for child in node.items():
            print(child.describe())
    """

    def __init__(
        self,
        source: ByteSource,
        name: str,
        path: Optional[Path] = None,
        options: Optional[DecoderOptions] = None,
    ):
        self.source = source
        self.name = name
        self.path = path
        self.options = options or DEFAULT_OPTIONS

    @classmethod
    def open(
        cls, filepath: Union[str, Path], options: Optional[DecoderOptions] = None
    ) -> "MidiFileNode":
        filepath = Path(filepath)
        return cls(ByteSource.from_file(filepath), filepath.name, filepath, options)

    def describe(self) -> str:
        return self.name

    def properties(self) -> Dict[str, str]:
        return {"Path": str(self.path) if self.path else self.name}

    def chunks(self) -> ChunkScanner:
        """Scanner over this file's chunks; errors propagate."""
        return ChunkScanner(self.source, self.options)

    def items(self) -> Iterator[Union[ChunkNode, ErrorNode]]:
        try:
            for descriptor in self.chunks():
                yield self.node_for(descriptor)
        except SMFDecodeError as e:
            logger.warning("%s: %s", self.name, e)
            yield ErrorNode(e)

    def node_for(self, descriptor: ChunkDescriptor) -> ChunkNode:
        if descriptor.is_header:
            return HeaderNode(self.source, descriptor, self.options)
        if descriptor.is_track:
            return TrackNode(self.source, descriptor, self.options)
        return UnknownChunkNode(self.source, descriptor, self.options)

    def tracks(self) -> List[TrackNode]:
        """All track nodes, in file order."""
        return [node for node in self.items() if isinstance(node, TrackNode)]

    def __str__(self) -> str:
        return self.describe()
