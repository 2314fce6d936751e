"""Line view of ChordPro sheets.

This module provides the chord/lyric line model used by the visual chord
editor, the edits it performs, and transposition of the chords written in
a document.
"""

from chordpro_engine.sheet.models import (
    BLANK_LINE,
    ChordLyricLine,
    ChordSegment,
    CommentLine,
    DirectiveLine,
    EmptyLine,
    SheetLine,
)
from chordpro_engine.sheet.parser import (
    add_line_after,
    append_chord,
    insert_chord_at,
    parse_line,
    parse_sheet,
    remove_line,
    sheet_to_chordpro,
    update_segment_chord,
)
from chordpro_engine.sheet.transpose import render_for_player, transpose_chords

__all__ = [
    "BLANK_LINE",
    "ChordLyricLine",
    "ChordSegment",
    "CommentLine",
    "DirectiveLine",
    "EmptyLine",
    "SheetLine",
    "add_line_after",
    "append_chord",
    "insert_chord_at",
    "parse_line",
    "parse_sheet",
    "remove_line",
    "render_for_player",
    "sheet_to_chordpro",
    "transpose_chords",
    "update_segment_chord",
]
