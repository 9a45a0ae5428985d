"""
MIDI track event models.

Every event decoded from an MTrk chunk is one of the frozen dataclasses
below. The hierarchy is closed: channel voice messages, channel mode
messages, meta events, system exclusive events and unknown channel events.
Each event can describe itself as a one-line label and expose its fields as
an ordered property mapping.
"""

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import ClassVar, Dict, Optional


class EventType(IntEnum):
    """Status byte high nibbles (and whole status for SysEx/Meta)."""

    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    POLY_PRESSURE = 0xA0
    CONTROL_CHANGE = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_BEND = 0xE0
    SYSEX = 0xF0
    META = 0xFF


class ChannelMode(IntEnum):
    """Controller numbers reserved for channel mode messages."""

    ALL_SOUND_OFF = 0x78
    RESET_ALL_CONTROLLERS = 0x79
    LOCAL_CONTROL = 0x7A
    ALL_NOTES_OFF = 0x7B
    OMNI_MODE_OFF = 0x7C
    OMNI_MODE_ON = 0x7D
    MONO_MODE_ON = 0x7E
    POLY_MODE_ON = 0x7F


class MetaType(IntEnum):
    """Meta event type codes."""

    SEQUENCE_NUMBER = 0x00
    TEXT = 0x01
    COPYRIGHT = 0x02
    TRACK_NAME = 0x03
    INSTRUMENT_NAME = 0x04
    LYRIC = 0x05
    MARKER = 0x06
    CUE_POINT = 0x07
    CHANNEL_PREFIX = 0x20
    PORT_PREFIX = 0x21
    END_OF_TRACK = 0x2F
    SET_TEMPO = 0x51
    SMPTE_OFFSET = 0x54
    TIME_SIGNATURE = 0x58
    KEY_SIGNATURE = 0x59
    SEQUENCER_SPECIFIC = 0x7F


MODE_LABELS = {
    ChannelMode.ALL_SOUND_OFF: "All Sound Off",
    ChannelMode.RESET_ALL_CONTROLLERS: "Reset All Controllers",
    ChannelMode.LOCAL_CONTROL: "Local Control",
    ChannelMode.ALL_NOTES_OFF: "All Notes Off",
    ChannelMode.OMNI_MODE_OFF: "Omni Mode Off",
    ChannelMode.OMNI_MODE_ON: "Omni Mode On",
    ChannelMode.MONO_MODE_ON: "Mono Mode On",
    ChannelMode.POLY_MODE_ON: "Poly Mode On",
}

META_LABELS = {
    MetaType.SEQUENCE_NUMBER: "Sequence Number",
    MetaType.TEXT: "Text Event",
    MetaType.COPYRIGHT: "Copyright Notice",
    MetaType.TRACK_NAME: "Sequence/Track Name",
    MetaType.INSTRUMENT_NAME: "Instrument Name",
    MetaType.LYRIC: "Lyric",
    MetaType.MARKER: "Marker",
    MetaType.CUE_POINT: "Cue Point",
    MetaType.CHANNEL_PREFIX: "MIDI Channel Prefix",
    MetaType.PORT_PREFIX: "MIDI Port Prefix",
    MetaType.END_OF_TRACK: "End Of Track",
    MetaType.SET_TEMPO: "Set Tempo",
    MetaType.SMPTE_OFFSET: "SMPTE Offset",
    MetaType.TIME_SIGNATURE: "Time Signature",
    MetaType.KEY_SIGNATURE: "Key Signature",
    MetaType.SEQUENCER_SPECIFIC: "Sequencer Event",
}

# Meta types whose payload is decoded as text
TEXT_META_TYPES = frozenset(
    {
        MetaType.TEXT,
        MetaType.COPYRIGHT,
        MetaType.TRACK_NAME,
        MetaType.INSTRUMENT_NAME,
        MetaType.LYRIC,
    }
)

# Data bytes following the status byte, keyed by high nibble
CHANNEL_DATA_LENGTHS = {
    0x8: 2,
    0x9: 2,
    0xA: 2,
    0xB: 2,
    0xC: 1,
    0xD: 1,
    0xE: 2,
}

UNKNOWN_DATA_LENGTH = 2

# Display names for fields that are not simply title-cased
PROPERTY_NAMES = {
    "delta_time": "Delay",
    "meta_type": "Type",
    "data": "Data",
}


def property_name(field_name: str) -> str:
    return PROPERTY_NAMES.get(field_name, field_name.replace("_", " ").title())


@dataclass(frozen=True)
class MidiEvent:
    """
    Base for all track events.

    Attributes:
        delta_time: Ticks since the previous event in the same track
    """

    delta_time: int

    label: ClassVar[str] = "Event"

    def properties(self) -> Dict[str, object]:
        """Ordered field mapping for property inspectors."""
        return {property_name(f.name): getattr(self, f.name) for f in fields(self)}

    def describe(self) -> str:
        details = " ".join(f"{name} {value}" for name, value in self.properties().items())
        return f"{self.label}: {details}"

    def __str__(self) -> str:
        return self.describe()


# ─────────────────────────────────────────────────────────────────────────────
# Channel voice and mode messages
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ChannelEvent(MidiEvent):
    """A message addressed to one of the 16 MIDI channels (0-15)."""

    channel: int

    event_type: ClassVar[EventType] = EventType.CONTROL_CHANGE

    @property
    def status(self) -> int:
        return self.event_type | (self.channel & 0x0F)


@dataclass(frozen=True)
class NoteOff(ChannelEvent):
    key: int
    velocity: int

    label: ClassVar[str] = "Note Off"
    event_type: ClassVar[EventType] = EventType.NOTE_OFF


@dataclass(frozen=True)
class NoteOn(ChannelEvent):
    key: int
    velocity: int

    label: ClassVar[str] = "Note On"
    event_type: ClassVar[EventType] = EventType.NOTE_ON

    @property
    def is_note_off(self) -> bool:
        """Note-on with velocity 0 acts as a note-off."""
        return self.velocity == 0


@dataclass(frozen=True)
class PolyphonicKeyPressure(ChannelEvent):
    key: int
    velocity: int

    label: ClassVar[str] = "Polyphonic Key Pressure"
    event_type: ClassVar[EventType] = EventType.POLY_PRESSURE


@dataclass(frozen=True)
class ControlChange(ChannelEvent):
    controller: int
    value: int

    label: ClassVar[str] = "Control Change"
    event_type: ClassVar[EventType] = EventType.CONTROL_CHANGE


@dataclass(frozen=True)
class ChannelModeMessage(ChannelEvent):
    """
    Control change on controllers 0x78-0x7F.

    The second data byte is kept as ``value`` (Local Control on/off, Mono
    Mode channel count) but never changes the kind of message.
    """

    mode: ChannelMode
    value: int

    event_type: ClassVar[EventType] = EventType.CONTROL_CHANGE

    @property
    def label(self) -> str:  # type: ignore[override]
        return MODE_LABELS[self.mode]

    def describe(self) -> str:
        return f"{self.label}: Delay {self.delta_time} Channel {self.channel} Value {self.value}"


@dataclass(frozen=True)
class ProgramChange(ChannelEvent):
    patch: int

    label: ClassVar[str] = "Program Change"
    event_type: ClassVar[EventType] = EventType.PROGRAM_CHANGE


@dataclass(frozen=True)
class ChannelPressure(ChannelEvent):
    velocity: int

    label: ClassVar[str] = "Channel Pressure"
    event_type: ClassVar[EventType] = EventType.CHANNEL_PRESSURE


@dataclass(frozen=True)
class PitchBendChange(ChannelEvent):
    """Pitch bend with its 14-bit value (0x2000 is centre)."""

    value: int

    label: ClassVar[str] = "Pitch Bend Change"
    event_type: ClassVar[EventType] = EventType.PITCH_BEND

    @property
    def bend(self) -> int:
        """Signed offset from centre, -8192..8191."""
        return self.value - 0x2000


@dataclass(frozen=True)
class UnknownChannelEvent(MidiEvent):
    """Status byte with no known meaning; two data bytes were assumed."""

    status: int
    data1: int
    data2: int

    label: ClassVar[str] = "Unknown"

    def describe(self) -> str:
        return f"{self.label}: Delay {self.delta_time} Status 0x{self.status:02X}"


# ─────────────────────────────────────────────────────────────────────────────
# System exclusive
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SystemExclusive(MidiEvent):
    """SysEx payload, kept verbatim (without the leading F0)."""

    data: bytes

    label: ClassVar[str] = "System Exclusive"

    def describe(self) -> str:
        return f"{self.label}: {len(self.data)} bytes"


# ─────────────────────────────────────────────────────────────────────────────
# Meta events
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MetaEvent(MidiEvent):
    """
    Meta event with its raw payload.

    Types without a richer model (Sequence Number, Marker, Key Signature,
    ...) are represented by this class directly.
    """

    meta_type: int
    data: bytes

    @property
    def kind(self) -> Optional[MetaType]:
        try:
            return MetaType(self.meta_type)
        except ValueError:
            return None

    @property
    def label(self) -> str:  # type: ignore[override]
        kind = self.kind
        if kind is None:
            return "Unknown Meta-Event"
        return META_LABELS[kind]

    def describe(self) -> str:
        return self.label


@dataclass(frozen=True)
class TextEvent(MetaEvent):
    """Text-bearing meta event; bytes map 1:1 to characters."""

    text: str

    def describe(self) -> str:
        return f"{self.label}: {self.text}"


@dataclass(frozen=True)
class PortPrefix(MetaEvent):
    port: int

    def describe(self) -> str:
        return f"{self.label}: {self.port}"


@dataclass(frozen=True)
class EndOfTrack(MetaEvent):
    pass


@dataclass(frozen=True)
class SetTempo(MetaEvent):
    """Tempo in microseconds per quarter note."""

    tempo: int

    @property
    def bpm(self) -> float:
        return 60_000_000 / self.tempo if self.tempo else 0.0

    def describe(self) -> str:
        return f"{self.label}: {self.tempo}"


@dataclass(frozen=True)
class TimeSignature(MetaEvent):
    """
    Time signature.

    Attributes:
        numerator: Beats per bar
        denominator: Beat unit as a power of two (2 means quarter note)
        clocks_per_tick: MIDI clocks per metronome click
        thirtysecond_notes_per_quarter: 32nd notes per MIDI quarter note
    """

    numerator: int
    denominator: int
    clocks_per_tick: int
    thirtysecond_notes_per_quarter: int

    @property
    def beat_unit(self) -> int:
        return 1 << self.denominator

    def describe(self) -> str:
        return (
            f"{self.label}: {self.numerator}/{self.denominator} "
            f"({self.clocks_per_tick}) [{self.thirtysecond_notes_per_quarter}]"
        )


@dataclass(frozen=True)
class UnknownMeta(MetaEvent):
    """Meta event whose type code is not in the catalog."""

    def describe(self) -> str:
        return f"{self.label}: Type 0x{self.meta_type:02X}"


# ─────────────────────────────────────────────────────────────────────────────
# Builders
# ─────────────────────────────────────────────────────────────────────────────


def build_meta_event(delta_time: int, meta_type: int, data: bytes) -> MetaEvent:
    """
    Build the most specific meta event for a type code and payload.

    Fixed-layout types whose payload is too short fall back to a plain
    MetaEvent of the same type.
    """
    try:
        kind = MetaType(meta_type)
    except ValueError:
        return UnknownMeta(delta_time, meta_type, data)

    if kind in TEXT_META_TYPES:
        return TextEvent(delta_time, meta_type, data, data.decode("latin-1"))

    if kind == MetaType.END_OF_TRACK:
        return EndOfTrack(delta_time, meta_type, data)

    if kind == MetaType.SET_TEMPO and len(data) >= 3:
        return SetTempo(delta_time, meta_type, data, int.from_bytes(data[:3], "big"))

    if kind == MetaType.TIME_SIGNATURE and len(data) >= 4:
        return TimeSignature(delta_time, meta_type, data, data[0], data[1], data[2], data[3])

    if kind == MetaType.PORT_PREFIX and data:
        return PortPrefix(delta_time, meta_type, data, data[0])

    return MetaEvent(delta_time, meta_type, data)


def build_channel_event(delta_time: int, status: int, data: bytes) -> MidiEvent:
    """
    Build a channel voice/mode event from its status and data bytes.

    Args:
        delta_time: Ticks since previous event
        status: Status byte (0x80-0xFE)
        data: Data bytes, CHANNEL_DATA_LENGTHS[status >> 4] of them
    """
    message_type = status >> 4
    channel = status & 0x0F

    if message_type == 0x8:
        return NoteOff(delta_time, channel, data[0], data[1])
    if message_type == 0x9:
        return NoteOn(delta_time, channel, data[0], data[1])
    if message_type == 0xA:
        return PolyphonicKeyPressure(delta_time, channel, data[0], data[1])
    if message_type == 0xB:
        controller, value = data[0], data[1]
        if ChannelMode.ALL_SOUND_OFF <= controller <= ChannelMode.POLY_MODE_ON:
            return ChannelModeMessage(delta_time, channel, ChannelMode(controller), value)
        return ControlChange(delta_time, channel, controller, value)
    if message_type == 0xC:
        return ProgramChange(delta_time, channel, data[0])
    if message_type == 0xD:
        return ChannelPressure(delta_time, channel, data[0])
    if message_type == 0xE:
        return PitchBendChange(delta_time, channel, (data[1] << 7) | data[0])

    return UnknownChannelEvent(delta_time, status, data[0], data[1])
