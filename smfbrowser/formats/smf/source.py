"""
Read-only byte buffer and cursors over it.

A ByteSource holds the file contents and is never mutated after creation.
Every decode pass opens its own ByteCursor, so independent passes over the
same source (listing chunks, decoding one track, reading a header) can
interleave freely.
"""

import struct
from pathlib import Path
from typing import Optional, Type, Union

from smfbrowser.errors import TruncatedStream
from smfbrowser.utils.varlen import decode_varlen


class ByteSource:
    """
    Immutable, randomly addressable file contents.

    Example:
        source = ByteSource.from_file("song.mid")
        cursor = source.cursor()
        tag = cursor.read(4)
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview]):
        self._data = bytes(data)

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "ByteSource":
        """Load a whole file into a new source."""
        with open(filepath, "rb") as f:
            return cls(f.read())

    def __len__(self) -> int:
        return len(self._data)

    @property
    def data(self) -> bytes:
        return self._data

    def slice(self, start: int, end: int) -> bytes:
        """Return the bytes in [start, end), clamped to the buffer."""
        return self._data[start:end]

    def cursor(
        self,
        position: int = 0,
        end: Optional[int] = None,
        truncated_error: Type[TruncatedStream] = TruncatedStream,
    ) -> "ByteCursor":
        """
        Open a cursor over this source.

        Args:
            position: Starting offset
            end: Logical end of the readable range (defaults to end of data);
                may lie past the end of the data, in which case reads fail
                once the data runs out
            truncated_error: Exception class raised on short reads
        """
        return ByteCursor(self, position, len(self._data) if end is None else end, truncated_error)


class ByteCursor:
    """
    Position within a ByteSource, bounded by a logical end offset.

    Reads never cross ``end``; a read that would is reported with the
    cursor's ``truncated_error`` class, so the same cursor code yields
    TruncatedChunkHeader, TruncatedHeader or TruncatedEvent depending on
    who opened it.
    """

    def __init__(
        self,
        source: ByteSource,
        position: int,
        end: int,
        truncated_error: Type[TruncatedStream] = TruncatedStream,
    ):
        self.source = source
        self._view = memoryview(source.data)
        self.position = position
        self.end = end
        self.truncated_error = truncated_error

    @property
    def limit(self) -> int:
        """Offset past which no byte can be read."""
        return min(self.end, len(self.source))

    @property
    def remaining(self) -> int:
        return max(0, self.limit - self.position)

    @property
    def at_end(self) -> bool:
        """True once the logical end has been reached."""
        return self.position >= self.end

    def _require(self, count: int) -> None:
        if self.remaining < count:
            raise self.truncated_error(self.position, needed=count, available=self.remaining)

    def read(self, count: int) -> bytes:
        """Read exactly ``count`` bytes."""
        self._require(count)
        start = self.position
        self.position += count
        return self.source.data[start : self.position]

    def read_byte(self) -> int:
        self._require(1)
        value = self.source.data[self.position]
        self.position += 1
        return value

    def read_u16(self) -> int:
        """Read a big-endian unsigned 16-bit integer."""
        return struct.unpack(">H", self.read(2))[0]

    def read_u32(self) -> int:
        """Read a big-endian unsigned 32-bit integer."""
        return struct.unpack(">I", self.read(4))[0]

    def read_quantity(self) -> int:
        """
        Read one variable-length quantity.

        Raises:
            truncated_error: If the range ends before a terminating byte
            QuantityOverflow: If the quantity spans more than 9 bytes
        """
        try:
            value, consumed = decode_varlen(self._view[: self.limit], self.position)
        except TruncatedStream as e:
            raise self.truncated_error(e.offset, needed=e.needed, available=e.available) from e

        self.position += consumed
        return value

    def unread(self, count: int = 1) -> None:
        """Step back over bytes that were read but belong to the next field."""
        self.position -= count

    def skip(self, count: int) -> int:
        """
        Advance by ``count`` bytes, clamping at the end of the data.

        Returns:
            Number of bytes actually skipped
        """
        target = min(self.position + count, len(self.source))
        skipped = target - self.position
        self.position = target
        return skipped
