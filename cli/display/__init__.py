"""
CLI display modules.
"""

from cli.display.tables import (
    display_file_info,
    display_chunk_table,
    display_header,
    display_events,
    display_properties,
    display_tree,
)
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_file_info",
    "display_chunk_table",
    "display_header",
    "display_events",
    "display_properties",
    "display_tree",
    "display_hex_dump",
]
