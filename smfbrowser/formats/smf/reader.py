"""
Standard MIDI File reader.

Opens .mid files and hands back a browsable MidiFileNode.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from smfbrowser.browser import MidiFileNode
from smfbrowser.config import DEFAULT_OPTIONS, DecoderOptions
from smfbrowser.errors import SMFDecodeError
from smfbrowser.formats.smf.chunks import ChunkScanner
from smfbrowser.formats.smf.header import HeaderDecoder
from smfbrowser.formats.smf.source import ByteSource
from smfbrowser.models.chunk import HEADER_TAG

logger = logging.getLogger(__name__)


class SMFReader:
    """
    Reader for Standard MIDI Files.

    Nothing is decoded up front: the returned node scans chunks and decodes
    tracks as it is expanded.

    Example:
        midi = SMFReader.read("song.mid")
        for track in midi.tracks():
            print(track.describe())
    """

    MAGIC = HEADER_TAG.encode("ascii")

    def __init__(self, options: Optional[DecoderOptions] = None):
        self.options = options or DEFAULT_OPTIONS

    @classmethod
    def read(
        cls, filepath: Union[str, Path], options: Optional[DecoderOptions] = None
    ) -> MidiFileNode:
        """
        Read a MIDI file.

        Args:
            filepath: Path to .mid file
            options: Decoder options

        Returns:
            Root node of the file
        """
        reader = cls(options)
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> MidiFileNode:
        """
        Open a MIDI file.

        Args:
            filepath: Path to .mid file

        Returns:
            Root node of the file
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        logger.debug("Reading %s", filepath)
        return MidiFileNode(ByteSource.from_file(filepath), filepath.name, filepath, self.options)

    def parse_bytes(self, data: bytes, name: str = "<memory>") -> MidiFileNode:
        """
        Wrap in-memory MIDI data.

        Args:
            data: Raw file contents
            name: Label for the root node

        Returns:
            Root node of the data
        """
        return MidiFileNode(ByteSource(data), name, None, self.options)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file starts like a Standard MIDI File.

        Args:
            filepath: Path to check

        Returns:
            True if the first chunk tag is MThd
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        with open(filepath, "rb") as f:
            return f.read(4) == cls.MAGIC

    @classmethod
    def get_file_info(
        cls, filepath: Union[str, Path], options: Optional[DecoderOptions] = None
    ) -> dict:
        """
        Get basic information about a MIDI file without decoding tracks.

        Args:
            filepath: Path to .mid file

        Returns:
            Dictionary with file info
        """
        source = ByteSource.from_file(filepath)

        info = {
            "valid": source.slice(0, 4) == cls.MAGIC,
            "size": len(source),
            "chunks": 0,
            "tracks": 0,
            "unknown_chunks": 0,
        }

        try:
            for descriptor in ChunkScanner(source, options):
                info["chunks"] += 1
                if descriptor.is_track:
                    info["tracks"] += 1
                elif descriptor.is_header:
                    if "format" not in info:
                        header = HeaderDecoder.decode(source, descriptor)
                        info["format"] = header.format
                        info["track_count"] = header.track_count
                        info["division"] = header.division
                else:
                    info["unknown_chunks"] += 1
        except SMFDecodeError as e:
            info["valid"] = False
            info["error"] = str(e)

        return info
