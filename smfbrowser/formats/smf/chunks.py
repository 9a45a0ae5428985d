"""
Top-level chunk scanner.

SMF File Structure:
    chunk := tag (4 bytes ASCII) length (4 bytes big-endian) body (length bytes)
    file  := chunk*

The scanner only reads chunk prologues. Bodies are skipped by seeking, so
listing the chunks of a large file costs 8 bytes per chunk.
"""

import logging
from typing import Iterator, Optional

from smfbrowser.config import DEFAULT_OPTIONS, DecoderOptions
from smfbrowser.errors import ChunkLengthExceedsStream, TruncatedChunkHeader
from smfbrowser.formats.smf.source import ByteSource
from smfbrowser.models.chunk import CHUNK_PROLOGUE_SIZE, ChunkDescriptor

logger = logging.getLogger(__name__)


class ChunkScanner:
    """
    Lazy, restartable sequence of chunk descriptors.

    Each iteration starts again from offset 0 with its own cursor.

    Example:
        for chunk in ChunkScanner(ByteSource.from_file("song.mid")):
            print(chunk.type_tag, chunk.declared_length)
    """

    def __init__(self, source: ByteSource, options: Optional[DecoderOptions] = None):
        self.source = source
        self.options = options or DEFAULT_OPTIONS

    def __iter__(self) -> Iterator[ChunkDescriptor]:
        cursor = self.source.cursor(truncated_error=TruncatedChunkHeader)

        while not cursor.at_end:
            start = cursor.position
            if cursor.remaining < CHUNK_PROLOGUE_SIZE:
                raise TruncatedChunkHeader(
                    start, needed=CHUNK_PROLOGUE_SIZE, available=cursor.remaining
                )

            tag = cursor.read(4).decode("latin-1")
            length = cursor.read_u32()

            available = cursor.remaining
            if length > available:
                if self.options.strict_chunk_lengths:
                    raise ChunkLengthExceedsStream(
                        f"Chunk {tag!r} declares {length} bytes but only {available} remain",
                        start,
                    )
                logger.warning(
                    "Chunk %r at 0x%X declares %d bytes, only %d remain; clamping",
                    tag,
                    start,
                    length,
                    available,
                )

            descriptor = ChunkDescriptor(type_tag=tag, start_offset=start, declared_length=length)
            logger.debug("Chunk %s at 0x%X, %d bytes", tag, start, length)

            cursor.skip(length)
            yield descriptor


def scan_chunks(
    source: ByteSource, options: Optional[DecoderOptions] = None
) -> Iterator[ChunkDescriptor]:
    """Iterate over the chunks of ``source`` once."""
    return iter(ChunkScanner(source, options))


def chunk_span(descriptor: ChunkDescriptor) -> int:
    """Total bytes a chunk occupies, prologue included."""
    return CHUNK_PROLOGUE_SIZE + descriptor.declared_length
