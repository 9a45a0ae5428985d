"""Track exporters."""

from smfbrowser.export.note_export import (
    NoteRecord,
    EndRecord,
    collect_records,
    format_records,
    export_track,
)

__all__ = [
    "NoteRecord",
    "EndRecord",
    "collect_records",
    "format_records",
    "export_track",
]
