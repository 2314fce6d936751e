"""Data models for the line view of a ChordPro sheet.

Each line of a sheet is one of a small set of line types; chord-and-lyric
lines are split into segments, each starting at a chord atom.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChordSegment:
    """A chord and the lyric text sung from it until the next chord.

    Parameters
    ----------
    chord : str | None
        Chord name without brackets, or None for text before the first chord.
    lyric : str
        The lyric text of the segment (may be empty).

    Examples
    --------
    >>> ChordSegment(chord="G", lyric="Amazing ").to_chordpro()
    '[G]Amazing '
    """

    chord: str | None
    lyric: str = ""

    def to_chordpro(self) -> str:
        prefix = f"[{self.chord}]" if self.chord else ""
        return f"{prefix}{self.lyric}"


@dataclass(frozen=True)
class ChordLyricLine:
    """A line of lyrics with inline chords.

    Parameters
    ----------
    segments : tuple[ChordSegment, ...]
        Segments in line order.
    """

    segments: tuple[ChordSegment, ...]


@dataclass(frozen=True)
class DirectiveLine:
    """A line holding a single directive.

    Parameters
    ----------
    name : str
        The directive keyword (e.g., "title", "soc").
    value : str
        The directive value, empty for section directives.
    """

    name: str
    value: str = ""

    @property
    def raw(self) -> str:
        """The directive in normalized ``{name: value}`` / ``{name}`` form."""
        return f"{{{self.name}: {self.value}}}" if self.value else f"{{{self.name}}}"


@dataclass(frozen=True)
class CommentLine:
    """A ``#`` comment line.

    Parameters
    ----------
    raw : str
        The raw line text, including the marker.
    """

    raw: str


@dataclass(frozen=True)
class EmptyLine:
    """An empty line."""

    pass


SheetLine = ChordLyricLine | DirectiveLine | CommentLine | EmptyLine

BLANK_LINE = ChordLyricLine(segments=(ChordSegment(chord=None, lyric=""),))
