"""Tests for event models and the meta event catalog."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from smfbrowser.models.events import (
    ChannelMode,
    ChannelModeMessage,
    ControlChange,
    EndOfTrack,
    MetaEvent,
    MetaType,
    NoteOff,
    NoteOn,
    PitchBendChange,
    PortPrefix,
    SetTempo,
    SystemExclusive,
    TextEvent,
    TimeSignature,
    UnknownChannelEvent,
    UnknownMeta,
    build_channel_event,
    build_meta_event,
)


class TestDescribe:
    """Test one-line event labels."""

    def test_note_on(self):
        event = NoteOn(0, 0, 64, 127)
        assert event.describe() == "Note On: Delay 0 Channel 0 Key 64 Velocity 127"
        assert str(event) == event.describe()

    def test_note_off(self):
        assert NoteOff(12, 9, 36, 0).describe() == "Note Off: Delay 12 Channel 9 Key 36 Velocity 0"

    def test_control_change(self):
        event = ControlChange(5, 1, 7, 100)
        assert event.describe() == "Control Change: Delay 5 Channel 1 Controller 7 Value 100"

    def test_mode_message(self):
        event = ChannelModeMessage(0, 2, ChannelMode.ALL_SOUND_OFF, 0)
        assert event.describe() == "All Sound Off: Delay 0 Channel 2 Value 0"

    def test_meta_events(self):
        assert build_meta_event(0, 0x51, b"\x07\xa1\x20").describe() == "Set Tempo: 500000"
        assert (
            build_meta_event(0, 0x58, b"\x04\x02\x18\x08").describe()
            == "Time Signature: 4/2 (24) [8]"
        )
        assert build_meta_event(0, 0x03, b"Piano").describe() == "Sequence/Track Name: Piano"
        assert build_meta_event(0, 0x21, b"\x01").describe() == "MIDI Port Prefix: 1"
        assert build_meta_event(0, 0x2F, b"").describe() == "End Of Track"
        assert build_meta_event(0, 0x06, b"Verse").describe() == "Marker"

    def test_sysex(self):
        assert SystemExclusive(0, b"\x01\x02\xf7").describe() == "System Exclusive: 3 bytes"

    def test_unknown(self):
        event = UnknownChannelEvent(4, 0xF5, 1, 2)
        assert event.describe() == "Unknown: Delay 4 Status 0xF5"


class TestProperties:
    """Test property sets exposed to inspectors."""

    def test_field_order(self):
        props = NoteOn(3, 1, 60, 90).properties()

        assert list(props) == ["Delay", "Channel", "Key", "Velocity"]
        assert props["Delay"] == 3

    def test_meta_properties(self):
        props = build_meta_event(0, 0x51, b"\x07\xa1\x20").properties()

        assert props["Type"] == 0x51
        assert props["Data"] == b"\x07\xa1\x20"
        assert props["Tempo"] == 500000

    def test_time_signature_properties(self):
        props = build_meta_event(0, 0x58, b"\x04\x02\x18\x08").properties()

        assert props["Numerator"] == 4
        assert props["Thirtysecond Notes Per Quarter"] == 8


class TestBuildMetaEvent:
    """Test the meta type catalog."""

    def test_text_types(self):
        for meta_type in (0x01, 0x02, 0x03, 0x04, 0x05):
            event = build_meta_event(0, meta_type, b"abc")
            assert isinstance(event, TextEvent)
            assert event.text == "abc"

    def test_raw_types(self):
        """Test types kept as raw payload."""
        for meta_type in (0x00, 0x06, 0x07, 0x20, 0x54, 0x59, 0x7F):
            event = build_meta_event(0, meta_type, b"\x01\x02")
            assert type(event) is MetaEvent
            assert event.kind == MetaType(meta_type)

    def test_specific_types(self):
        assert isinstance(build_meta_event(0, 0x2F, b""), EndOfTrack)
        assert isinstance(build_meta_event(0, 0x51, b"\x0f\x42\x40"), SetTempo)
        assert isinstance(build_meta_event(0, 0x58, b"\x03\x02\x18\x08"), TimeSignature)
        assert build_meta_event(0, 0x21, b"\x03") == PortPrefix(0, 0x21, b"\x03", 3)

    def test_short_fixed_payloads_fall_back(self):
        """Test that too-short tempo/signature/port payloads stay raw."""
        assert type(build_meta_event(0, 0x51, b"\x07\xa1")) is MetaEvent
        assert type(build_meta_event(0, 0x58, b"\x04\x02")) is MetaEvent
        assert type(build_meta_event(0, 0x21, b"")) is MetaEvent

    def test_unknown_type(self):
        event = build_meta_event(7, 0x4B, b"\x00")

        assert isinstance(event, UnknownMeta)
        assert event.delta_time == 7
        assert event.describe() == "Unknown Meta-Event: Type 0x4B"

    def test_tempo_bpm(self):
        assert build_meta_event(0, 0x51, b"\x0f\x42\x40").bpm == 60.0


class TestBuildChannelEvent:
    """Test channel message construction."""

    def test_channel_and_status(self):
        event = build_channel_event(0, 0x9A, b"\x3c\x40")

        assert event == NoteOn(0, 10, 0x3C, 0x40)
        assert event.status == 0x9A

    def test_note_on_zero_velocity(self):
        assert build_channel_event(0, 0x90, b"\x3c\x00").is_note_off

    def test_pitch_bend(self):
        event = build_channel_event(0, 0xE0, b"\x00\x00")

        assert event == PitchBendChange(0, 0, 0)
        assert event.bend == -8192

    def test_mode_boundary(self):
        assert isinstance(build_channel_event(0, 0xB0, b"\x77\x00"), ControlChange)
        assert isinstance(build_channel_event(0, 0xB0, b"\x78\x00"), ChannelModeMessage)
