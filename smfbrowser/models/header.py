"""
MThd header model.
"""

from dataclasses import dataclass
from typing import Dict, Optional

HEADER_SIZE = 6

FORMAT_NAMES = {
    0: "Single track",
    1: "Multiple tracks, synchronous",
    2: "Multiple tracks, asynchronous",
}


@dataclass(frozen=True)
class Header:
    """
    Decoded MThd chunk body.

    Attributes:
        format: SMF format (0, 1 or 2)
        track_count: Number of MTrk chunks announced
        division: Raw time division word
    """

    format: int
    track_count: int
    division: int

    @property
    def is_smpte(self) -> bool:
        """True if the division is SMPTE-based rather than metrical."""
        return bool(self.division & 0x8000)

    @property
    def ticks_per_quarter(self) -> Optional[int]:
        """Ticks per quarter note, for metrical division."""
        if self.is_smpte:
            return None
        return self.division

    @property
    def smpte_format(self) -> Optional[int]:
        """Frames per second (24, 25, 29 or 30), for SMPTE division."""
        if not self.is_smpte:
            return None
        # High byte is the frame rate as a negative two's complement number
        return 256 - (self.division >> 8)

    @property
    def ticks_per_frame(self) -> Optional[int]:
        if not self.is_smpte:
            return None
        return self.division & 0xFF

    @property
    def format_name(self) -> str:
        return FORMAT_NAMES.get(self.format, f"Unknown ({self.format})")

    def describe(self) -> str:
        if self.is_smpte:
            timing = f"{self.smpte_format} fps, {self.ticks_per_frame} ticks/frame"
        else:
            timing = f"{self.ticks_per_quarter} ticks/quarter"
        return f"Format {self.format}, {self.track_count} track(s), {timing}"

    def properties(self) -> Dict[str, int]:
        return {
            "Format": self.format,
            "Tracks": self.track_count,
            "Division": self.division,
        }
