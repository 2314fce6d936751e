"""Transposition of the chords written in a ChordPro document.

Only chord atoms holding a valid chord name and the value of the ``key``
directive are rewritten; every other character of the document is kept.
"""

from __future__ import annotations

import logging

from chordpro_engine.converter import parse_chord
from chordpro_engine.lexer.directives import lookup_directive
from chordpro_engine.lexer.tokenizer import tokenize_document
from chordpro_engine.pitch_class import transpose_key
from chordpro_engine.sheet.parser import is_closed_chord_atom

logger = logging.getLogger(__name__)

KEY_DIRECTIVE = "key"


def _is_key_directive(keyword: str | None) -> bool:
    if keyword is None:
        return False
    entry = lookup_directive(keyword.strip())
    return entry is not None and entry.alias_group == KEY_DIRECTIVE


def transpose_chords(text: str, semitones: int) -> str:
    """Transpose every chord of a document by ``semitones``.

    Parameters
    ----------
    text : str
        The ChordPro document.
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    str
        The document with chord roots, slash basses and the ``{key: ...}``
        value moved; bracketed text that is not a chord (``[Verse]``) and
        comment lines are left alone.

    Examples
    --------
    >>> transpose_chords("{key: G}\\n[G]Amazing [D/F#]grace [N.C.]", 2)
    '{key: A}\\n[A]Amazing [E/G#]grace [N.C.]'
    """
    if semitones == 0:
        return text

    parts: list[str] = []
    last = 0
    keyword: str | None = None
    skipped = 0

    for token in tokenize_document(text):
        replacement: str | None = None

        if token.kind == "directive_keyword":
            keyword = token.text
        elif token.kind == "punctuation" and token.text == "{":
            keyword = None
        elif token.kind == "directive_value" and _is_key_directive(keyword):
            replacement = transpose_key(token.text, semitones)
        elif is_closed_chord_atom(token):
            chord = parse_chord(token.text[1:-1])
            if chord is None:
                skipped += 1
            else:
                replacement = f"[{chord.transposed(semitones)}]"

        if replacement is not None:
            parts.append(text[last : token.start])
            parts.append(replacement)
            last = token.end

    parts.append(text[last:])
    if skipped:
        logger.debug("Left %d non-chord atoms untransposed", skipped)
    return "".join(parts)


def render_for_player(text: str, transpose: int, capo: int) -> str:
    """Return the document as played with the given transpose and capo.

    The transpose is applied first; the chords are then lowered by the capo
    fret so they show the shapes to play.

    Examples
    --------
    >>> render_for_player("[A]Hey", 0, 2)
    '[G]Hey'
    """
    result = transpose_chords(text, transpose)
    if capo > 0:
        result = transpose_chords(result, -capo)
    return result
