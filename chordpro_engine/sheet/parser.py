"""Line view of a ChordPro sheet and the edits made on it.

This module turns a document into :data:`SheetLine` values, serializes them
back, and provides the structural edits of the visual chord editor. Edits
never mutate their input; they return a new tuple of lines.
"""

from __future__ import annotations

from chordpro_engine.lexer.models import Token
from chordpro_engine.lexer.tokenizer import tokenize_line
from chordpro_engine.sheet.models import (
    BLANK_LINE,
    ChordLyricLine,
    ChordSegment,
    CommentLine,
    DirectiveLine,
    EmptyLine,
    SheetLine,
)


def preprocess(text: str) -> list[str]:
    """Preprocess input text into lines.

    Normalizes line endings and preserves original line content
    (only strips the newline character).

    Parameters
    ----------
    text : str
        The raw input text.

    Returns
    -------
    list[str]
        List of lines without trailing newlines.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def is_closed_chord_atom(token: Token) -> bool:
    """Check that a chord atom token is a complete, non-empty ``[...]``."""
    return token.kind == "chord_atom" and len(token.text) > 2 and token.text.endswith("]")


def _as_directive(tokens: list[Token]) -> DirectiveLine | None:
    """Return the directive of a line holding nothing else, if any."""
    significant = [t for t in tokens if not (t.kind == "plain_text" and not t.text.strip())]
    kinds = [t.kind for t in significant]
    texts = [t.text.strip() for t in significant]

    if kinds == ["punctuation", "directive_keyword", "punctuation"] and texts[2] == "}":
        return DirectiveLine(name=texts[1])
    if (
        kinds == ["punctuation", "directive_keyword", "punctuation", "directive_value", "punctuation"]
        and texts[4] == "}"
    ):
        return DirectiveLine(name=texts[1], value=texts[3])
    if kinds == ["punctuation", "directive_keyword", "punctuation", "punctuation"] and texts[3] == "}":
        return DirectiveLine(name=texts[1])
    return None


def parse_line(line: str) -> SheetLine:
    """Classify and split a single line.

    Parameters
    ----------
    line : str
        The line to parse, without its line break.

    Returns
    -------
    SheetLine
        The parsed line.

    Examples
    --------
    >>> parse_line("{title: Amazing Grace}")
    DirectiveLine(name='title', value='Amazing Grace')
    >>> parse_line("[G]Amazing [C]grace").segments[1]
    ChordSegment(chord='C', lyric='grace')
    """
    if not line:
        return EmptyLine()

    tokens, _ = tokenize_line(line)
    if tokens[0].kind == "comment":
        return CommentLine(raw=line)

    directive = _as_directive(tokens)
    if directive is not None:
        return directive

    segments: list[ChordSegment] = []
    chord: str | None = None
    lyric: list[str] = []

    for token in tokens:
        if is_closed_chord_atom(token):
            if chord is not None or lyric:
                segments.append(ChordSegment(chord=chord, lyric="".join(lyric)))
            chord = token.text[1:-1]
            lyric = []
        else:
            lyric.append(token.text)

    segments.append(ChordSegment(chord=chord, lyric="".join(lyric)))
    return ChordLyricLine(segments=tuple(segments))


def parse_sheet(text: str) -> tuple[SheetLine, ...]:
    """Parse a document into sheet lines.

    Parameters
    ----------
    text : str
        The ChordPro document.

    Returns
    -------
    tuple[SheetLine, ...]
        One entry per line. A blank document gives a single empty
        chord-lyric line, so there is always a line to edit.
    """
    if not text.strip():
        return (BLANK_LINE,)
    return tuple(parse_line(line) for line in preprocess(text))


def line_to_chordpro(line: SheetLine) -> str:
    """Serialize one sheet line."""
    if isinstance(line, EmptyLine):
        return ""
    if isinstance(line, DirectiveLine):
        return line.raw
    if isinstance(line, CommentLine):
        return line.raw
    return "".join(segment.to_chordpro() for segment in line.segments)


def sheet_to_chordpro(lines: tuple[SheetLine, ...] | list[SheetLine]) -> str:
    """Serialize sheet lines back into a ChordPro document.

    Examples
    --------
    >>> sheet_to_chordpro(parse_sheet("{t:Song}\\n\\n[G]Hi"))
    '{t: Song}\\n\\n[G]Hi'
    """
    return "\n".join(line_to_chordpro(line) for line in lines)


def normalize_segments(segments: list[ChordSegment]) -> list[ChordSegment]:
    """Merge consecutive segments that both have no chord."""
    result: list[ChordSegment] = []
    for segment in segments:
        if result and result[-1].chord is None and segment.chord is None:
            result[-1] = ChordSegment(chord=None, lyric=result[-1].lyric + segment.lyric)
        else:
            result.append(segment)
    return result


def _replace_line(
    lines: tuple[SheetLine, ...], line_idx: int, line: SheetLine
) -> tuple[SheetLine, ...]:
    new_lines = list(lines)
    new_lines[line_idx] = line
    return tuple(new_lines)


def insert_chord_at(
    lines: tuple[SheetLine, ...],
    line_idx: int,
    segment_idx: int,
    offset: int,
    chord: str,
) -> tuple[SheetLine, ...]:
    """Insert a chord inside a segment's lyric, splitting the segment.

    Parameters
    ----------
    lines : tuple[SheetLine, ...]
        The sheet.
    line_idx : int
        Index of the chord-lyric line.
    segment_idx : int
        Index of the segment to split.
    offset : int
        Character offset within the segment's lyric.
    chord : str
        Chord name to insert.

    Returns
    -------
    tuple[SheetLine, ...]
        The edited sheet; unchanged if the line is not a chord-lyric line.

    Examples
    --------
    >>> sheet = parse_sheet("Amazing grace")
    >>> sheet_to_chordpro(insert_chord_at(sheet, 0, 0, 8, "C"))
    'Amazing [C]grace'
    """
    line = lines[line_idx]
    if not isinstance(line, ChordLyricLine):
        return tuple(lines)

    segments = list(line.segments)
    segment = segments[segment_idx]
    segments[segment_idx : segment_idx + 1] = [
        ChordSegment(chord=segment.chord, lyric=segment.lyric[:offset]),
        ChordSegment(chord=chord, lyric=segment.lyric[offset:]),
    ]
    return _replace_line(lines, line_idx, ChordLyricLine(segments=tuple(segments)))


def update_segment_chord(
    lines: tuple[SheetLine, ...],
    line_idx: int,
    segment_idx: int,
    chord: str | None,
) -> tuple[SheetLine, ...]:
    """Replace or remove (``chord=None``) the chord of a segment.

    Removing a chord merges its lyric into a preceding chordless segment.
    """
    line = lines[line_idx]
    if not isinstance(line, ChordLyricLine):
        return tuple(lines)

    segments = list(line.segments)
    segments[segment_idx] = ChordSegment(chord=chord, lyric=segments[segment_idx].lyric)
    segments = normalize_segments(segments)
    return _replace_line(lines, line_idx, ChordLyricLine(segments=tuple(segments)))


def append_chord(lines: tuple[SheetLine, ...], line_idx: int, chord: str) -> tuple[SheetLine, ...]:
    """Add a chord at the end of a line.

    An empty trailing chordless segment receives the chord; otherwise a new
    chord-only segment is appended.
    """
    line = lines[line_idx]
    if not isinstance(line, ChordLyricLine):
        return tuple(lines)

    segments = list(line.segments)
    last = segments[-1] if segments else None
    if last is not None and last.chord is None and last.lyric == "":
        segments[-1] = ChordSegment(chord=chord, lyric="")
    else:
        segments.append(ChordSegment(chord=chord, lyric=""))
    return _replace_line(lines, line_idx, ChordLyricLine(segments=tuple(segments)))


def add_line_after(lines: tuple[SheetLine, ...], after_idx: int) -> tuple[SheetLine, ...]:
    """Insert an empty chord-lyric line after ``after_idx``."""
    new_lines = list(lines)
    new_lines.insert(after_idx + 1, BLANK_LINE)
    return tuple(new_lines)


def remove_line(lines: tuple[SheetLine, ...], idx: int) -> tuple[SheetLine, ...]:
    """Remove the line at ``idx``; the sheet never becomes empty."""
    new_lines = list(lines)
    del new_lines[idx]
    return tuple(new_lines) if new_lines else (BLANK_LINE,)
