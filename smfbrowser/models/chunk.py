"""
Chunk descriptor model.
"""

from dataclasses import dataclass

CHUNK_PROLOGUE_SIZE = 8  # 4-byte tag + 4-byte length

HEADER_TAG = "MThd"
TRACK_TAG = "MTrk"


@dataclass(frozen=True)
class ChunkDescriptor:
    """
    Location of one top-level chunk.

    Attributes:
        type_tag: Four-character chunk type ("MThd", "MTrk", ...)
        start_offset: Offset of the chunk's type tag
        declared_length: Body length from the chunk prologue
    """

    type_tag: str
    start_offset: int
    declared_length: int

    @property
    def content_offset(self) -> int:
        """Offset of the first body byte."""
        return self.start_offset + CHUNK_PROLOGUE_SIZE

    @property
    def content_end(self) -> int:
        """Offset one past the last body byte, as declared."""
        return self.content_offset + self.declared_length

    @property
    def is_header(self) -> bool:
        return self.type_tag == HEADER_TAG

    @property
    def is_track(self) -> bool:
        return self.type_tag == TRACK_TAG

    def __str__(self) -> str:
        return self.type_tag
