"""Tests for the note-on exporter."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from smfbrowser.export.note_export import (
    EndRecord,
    NoteRecord,
    collect_records,
    export_track,
    format_records,
)
from smfbrowser.models.events import (
    ChannelMode,
    ChannelModeMessage,
    ControlChange,
    EndOfTrack,
    NoteOff,
    NoteOn,
    SetTempo,
)


def sample_events():
    return [
        NoteOn(10, 0, 0x40, 0x7F),
        ControlChange(5, 0, 0x07, 0x64),
        NoteOn(0, 0, 0x43, 0x60),
        EndOfTrack(0, 0x2F, b""),
    ]


class TestCollectRecords:
    """Test the note-on projection."""

    def test_two_notes_and_terminator(self):
        records = list(collect_records(sample_events()))

        assert records == [
            NoteRecord(10, 0, 0x40, 0x7F),
            NoteRecord(5, 0, 0x43, 0x60),
            EndRecord(),
        ]

    def test_all_event_kinds_accumulate(self):
        """Test that every non-note event adds its delay."""
        events = [
            SetTempo(3, 0x51, b"\x07\xa1\x20", 500000),
            NoteOff(4, 1, 0x40, 0),
            ChannelModeMessage(5, 1, ChannelMode.ALL_NOTES_OFF, 0),
            NoteOn(6, 1, 0x3C, 0x50),
        ]

        assert list(collect_records(events)) == [NoteRecord(18, 1, 0x3C, 0x50)]

    def test_accumulator_resets(self):
        events = [NoteOn(7, 0, 1, 1), NoteOn(0, 0, 2, 2), NoteOn(9, 0, 3, 3)]

        assert [r.delay for r in collect_records(events)] == [7, 0, 9]

    def test_no_notes(self):
        assert list(collect_records([ControlChange(1, 0, 1, 1)])) == []


class TestFormat:
    """Test the record text format."""

    def test_note_fields(self):
        assert NoteRecord(10, 3, 0x40, 0x7F).fields() == ["000a", "03", "40", "7f"]

    def test_large_delay_not_truncated(self):
        assert NoteRecord(0x12345, 0, 0, 0).fields()[0] == "12345"

    def test_format_records(self):
        text = format_records(collect_records(sample_events()))

        assert text == (
            "<hex>000a</hex>\n"
            "<hex>00</hex>\n"
            "<hex>40</hex>\n"
            "<hex>7f</hex>\n"
            "\n"
            "<hex>0005</hex>\n"
            "<hex>00</hex>\n"
            "<hex>43</hex>\n"
            "<hex>60</hex>\n"
            "\n"
            "<hex>f2</hex>\n"
        )

    def test_export_track(self, tmp_path):
        output = tmp_path / "export.xml"

        count = export_track(sample_events(), output)

        assert count == 3
        assert output.read_text() == format_records(collect_records(sample_events()))
