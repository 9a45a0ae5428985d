"""
MThd header decoder.
"""

from smfbrowser.errors import TruncatedHeader
from smfbrowser.formats.smf.source import ByteSource
from smfbrowser.models.chunk import ChunkDescriptor
from smfbrowser.models.header import HEADER_SIZE, Header


class HeaderDecoder:
    """
    Decoder for the 6-byte MThd body.

    Reads format, track count and division as big-endian 16-bit words
    immediately after the chunk prologue. The declared chunk length is not
    checked beyond requiring the 6 bytes to be readable.

    Example:
        header = HeaderDecoder.decode(source, descriptor)
        print(header.format, header.track_count, header.division)
    """

    @classmethod
    def decode(cls, source: ByteSource, descriptor: ChunkDescriptor) -> Header:
        """
        Decode the header of an MThd chunk.

        Args:
            source: File contents
            descriptor: MThd chunk location

        Returns:
            Decoded Header

        Raises:
            TruncatedHeader: If fewer than 6 bytes follow the prologue
        """
        cursor = source.cursor(
            descriptor.content_offset,
            descriptor.content_offset + HEADER_SIZE,
            truncated_error=TruncatedHeader,
        )

        return Header(
            format=cursor.read_u16(),
            track_count=cursor.read_u16(),
            division=cursor.read_u16(),
        )
