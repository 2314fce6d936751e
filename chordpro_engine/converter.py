"""Chord name parsing for chord atoms.

This module splits chord names into root, quality and bass, and tells real
chords apart from other bracketed text (``[Verse]``, ``[N.C.]``) by
validating them with pychord.
"""

from __future__ import annotations

import logging
import re

from chordpro_engine.models import Chord

logger = logging.getLogger(__name__)

# Constants for chord detection
MAX_CHORD_LENGTH = 15

# Regex pre-filter for chord names
# Matches: root (A-G), optional accidental (b/#), optional quality, optional slash bass
CHORD_RE = re.compile(
    r"^[A-G][b#]?"  # Root note with optional accidental
    r"(?:"
    r"m(?:aj)?(?:7|9|11|13)?|"  # minor variants: m, maj, maj7, m7, m9, etc.
    r"M(?:aj)?(?:7|9|11|13)?|"  # major variants: M, Maj, Maj7, M7, etc.
    r"dim(?:7)?|"  # diminished
    r"aug(?:7)?|"  # augmented
    r"sus[24]?(?:7)?|"  # suspended
    r"add[29]|"  # added tones
    r"[679]|"  # extensions
    r"7|9|11|13|"  # dominant extensions
    r"m7-5|m7b5|"  # half-diminished
    r"[b#](?:5|9|11|13)|"  # altered extensions: b5, #9, #11, b13, etc.
    r"mM7|mmaj7|"  # minor-major seventh
    r"5"  # power chord
    r")*"
    r"(?:/[A-G][b#]?)?$",  # Optional slash bass
)

ROOT_RE = re.compile(r"^([A-G][#b]?)(.*)$")


def split_chord_string(chord: str) -> tuple[str, str, str | None]:
    """Split a chord name into root, quality and bass.

    No validation is done; a name without a recognizable root comes back
    whole as the root with an empty quality.

    Parameters
    ----------
    chord : str
        Chord name (e.g., "F#m7/C#").

    Returns
    -------
    tuple[str, str, str | None]
        Root, quality and bass (None when there is no slash).

    Examples
    --------
    >>> split_chord_string("F#m7/C#")
    ('F#', 'm7', 'C#')
    >>> split_chord_string("N.C.")
    ('N.C.', '', None)
    """
    main, slash, bass = chord.partition("/")
    match = ROOT_RE.match(main)
    if match is None:
        return chord, "", bass if slash else None
    return match.group(1), match.group(2), bass if slash else None


def build_chord_string(root: str, quality: str, bass: str | None) -> str:
    """Join root, quality and optional bass into a chord name.

    Examples
    --------
    >>> build_chord_string("C", "maj7", "E")
    'Cmaj7/E'
    """
    return f"{root}{quality}/{bass}" if bass else f"{root}{quality}"


def from_pychord(chord_str: str) -> Chord:
    """Parse a chord name into a Chord, validated by pychord.

    Parameters
    ----------
    chord_str : str
        Chord name (e.g., "Gm7", "C", "F#dim7/A").

    Returns
    -------
    Chord
        The chord, keeping the quality exactly as written.

    Raises
    ------
    ValueError
        If pychord does not recognize the chord.

    Examples
    --------
    >>> from_pychord("Bbm7")
    Chord(root='Bb', quality='m7', bass=None)
    """
    from pychord import Chord as PyChord

    # Validation only; the quality is kept as written, not as pychord names it
    PyChord(chord_str)
    root, quality, bass = split_chord_string(chord_str)
    return Chord(root=root, quality=quality, bass=bass)


def parse_chord(text: str) -> Chord | None:
    """Parse a chord name, returning None if it is not a chord.

    Parameters
    ----------
    text : str
        The chord name to parse.

    Returns
    -------
    Chord | None
        The parsed Chord object, or None if parsing fails.

    Examples
    --------
    >>> parse_chord("Gm7").quality
    'm7'
    >>> parse_chord("Verse") is None
    True
    """
    if not text or len(text) > MAX_CHORD_LENGTH:
        return None
    if not CHORD_RE.match(text):
        return None
    try:
        return from_pychord(text)
    except ValueError:
        logger.debug("pychord rejected chord name %r", text)
        return None


def is_chord(text: str) -> bool:
    """Check if text is a valid chord name.

    Examples
    --------
    >>> is_chord("C/E")
    True
    >>> is_chord("Hello")
    False
    """
    return parse_chord(text) is not None
