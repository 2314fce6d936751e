"""ChordPro lyric sheet engine.

This library provides the pieces of a lyrics-and-chords editor that are
more than plumbing: a line lexer for ChordPro-like documents with a
directive catalog for autocompletion, key transposition with capo
handling, and the bounded display adjustments of a lyrics view.

Examples
--------
>>> from chordpro_engine import tokenize_document, transpose_key

>>> [t.kind for t in tokenize_document("{title: Amazing Grace}")]
['punctuation', 'directive_keyword', 'punctuation', 'directive_value', 'punctuation']

>>> transpose_key("G#maj7", 1)
'Amaj7'

>>> from chordpro_engine import calculate_capo_key, calculate_effective_key
>>> calculate_effective_key("G", 0, 2)
'A'
>>> calculate_capo_key("A", 2)
'G'
"""

from chordpro_engine.converter import build_chord_string, is_chord, parse_chord, split_chord_string
from chordpro_engine.lexer import (
    DIRECTIVES,
    DirectiveEntry,
    LexerState,
    Token,
    complete_directive,
    completion_context,
    find_unknown_directives,
    lookup_directive,
    tokenize_document,
    tokenize_line,
)
from chordpro_engine.models import Chord
from chordpro_engine.pitch_class import (
    MUSICAL_KEYS,
    ChromaticNote,
    KeySpec,
    calculate_capo_key,
    calculate_effective_key,
    parse_key,
    same_pitch_class,
    transpose_key,
    transpose_note,
)
from chordpro_engine.settings import AdjustmentController, AdjustmentSnapshot, BoundedCounter

__all__ = [
    "DIRECTIVES",
    "MUSICAL_KEYS",
    "AdjustmentController",
    "AdjustmentSnapshot",
    "BoundedCounter",
    "Chord",
    "ChromaticNote",
    "DirectiveEntry",
    "KeySpec",
    "LexerState",
    "Token",
    "build_chord_string",
    "calculate_capo_key",
    "calculate_effective_key",
    "complete_directive",
    "completion_context",
    "find_unknown_directives",
    "is_chord",
    "lookup_directive",
    "parse_chord",
    "parse_key",
    "same_pitch_class",
    "split_chord_string",
    "tokenize_document",
    "tokenize_line",
    "transpose_key",
    "transpose_note",
]
