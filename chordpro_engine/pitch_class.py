"""Pitch class arithmetic for key transposition and capo handling.

This module models the 12-tone chromatic scale (C=0 ... B=11) and provides
the key transposition used to display the key a song is played in and the
key that actually sounds once transpose and capo adjustments are applied.

Key strings are treated leniently: anything that does not start with a
known note name is returned unchanged rather than rejected, because the key
field of a song is often free text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

Spelling = Literal["sharp", "flat"]

# Sharp-spelled note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "D": 2,
    "D#": 3,
    "E": 4,
    "F": 5,
    "F#": 6,
    "G": 7,
    "G#": 8,
    "A": 9,
    "A#": 10,
    "B": 11,
}

# Flat spellings accepted as key roots
FLAT_TO_SHARP: dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

# Chord roots outside the key table, respelled before transposing
ENHARMONIC_NOTES: dict[str, str] = {
    "Cb": "B",
    "Fb": "E",
    "E#": "F",
    "B#": "C",
}

SHARP_NOTES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NOTES = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Root note with optional accidental, then any quality suffix
KEY_RE = re.compile(r"([A-G][#b]?)(.*)")

# Keys offered when picking the key of a song
MUSICAL_KEYS: tuple[str, ...] = (
    *SHARP_NOTES,
    *(f"{note}m" for note in SHARP_NOTES),
)


@dataclass(frozen=True)
class ChromaticNote:
    """A pitch class with a preferred spelling.

    Parameters
    ----------
    index : int
        Pitch class (0-11, where C=0).
    spelling : Spelling
        Whether the note is rendered with sharps or flats.

    Examples
    --------
    >>> ChromaticNote.from_name("Bb")
    ChromaticNote(index=10, spelling='flat')
    >>> ChromaticNote(index=10, spelling="sharp").name
    'A#'
    """

    index: int
    spelling: Spelling = "sharp"

    @classmethod
    def from_name(cls, name: str) -> ChromaticNote:
        """Build a note from its name, raising ValueError if unknown."""
        spelling: Spelling = "flat" if name.endswith("b") else "sharp"
        return cls(index=note_to_pc(name), spelling=spelling)

    @property
    def name(self) -> str:
        """The note name in the preferred spelling."""
        notes = SHARP_NOTES if self.spelling == "sharp" else FLAT_NOTES
        return notes[self.index]

    def shifted(self, semitones: int, spelling: Spelling | None = None) -> ChromaticNote:
        """Return the note ``semitones`` away, wrapping around the octave."""
        return ChromaticNote(
            index=(self.index + semitones) % 12,
            spelling=spelling or self.spelling,
        )


@dataclass(frozen=True)
class KeySpec:
    """A key split into its root note and quality suffix.

    Parameters
    ----------
    root : str
        Root note as written (e.g., "G", "Bb", "F#").
    quality_suffix : str
        Everything after the root, kept verbatim (e.g., "m", "maj7").
    """

    root: str
    quality_suffix: str = ""

    def __str__(self) -> str:
        return f"{self.root}{self.quality_suffix}"


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("Bb")
    10
    """
    normalized = FLAT_TO_SHARP.get(note, note)
    if normalized in NOTE_TO_PC:
        return NOTE_TO_PC[normalized]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def parse_key(key: str) -> KeySpec | None:
    """Split a key string into root and suffix.

    Returns None for empty strings, strings that do not start with a note
    name, and roots outside the note table (e.g., "Cb").

    Examples
    --------
    >>> parse_key("G#maj7")
    KeySpec(root='G#', quality_suffix='maj7')
    >>> parse_key("Cb") is None
    True
    >>> parse_key("hello") is None
    True
    """
    if not key:
        return None
    match = KEY_RE.fullmatch(key)
    if match is None:
        return None
    root, suffix = match.groups()
    if FLAT_TO_SHARP.get(root, root) not in NOTE_TO_PC:
        return None
    return KeySpec(root=root, quality_suffix=suffix)


def same_pitch_class(key1: str, key2: str) -> bool:
    """Check if the roots of two keys are enharmonically equivalent.

    Examples
    --------
    >>> same_pitch_class("C#m", "Dbm")
    True
    >>> same_pitch_class("C", "nope")
    False
    """
    spec1 = parse_key(key1)
    spec2 = parse_key(key2)
    if spec1 is None or spec2 is None:
        return False
    return note_to_pc(spec1.root) == note_to_pc(spec2.root)


def transpose_key(key: str, semitones: int) -> str:
    """Transpose a key by a number of semitones.

    Upward transposition and keys whose root is written with a sharp are
    spelled with sharps; downward transposition of natural or flat roots is
    spelled with flats. The quality suffix is kept as written.

    Parameters
    ----------
    key : str
        The key to transpose (e.g., "G", "Gm", "C#").
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    str
        The transposed key, or ``key`` unchanged if it cannot be parsed.

    Examples
    --------
    >>> transpose_key("Cm", 2)
    'Dm'
    >>> transpose_key("B", 1)
    'C'
    >>> transpose_key("D", -1)
    'Db'
    >>> transpose_key("not a key", 3)
    'not a key'
    """
    if not key or semitones == 0:
        return key

    spec = parse_key(key)
    if spec is None:
        return key

    spelling: Spelling = "sharp" if semitones >= 0 or "#" in spec.root else "flat"
    note = ChromaticNote.from_name(spec.root).shifted(semitones, spelling)
    return f"{note.name}{spec.quality_suffix}"


def transpose_note(note: str, semitones: int) -> str:
    """Transpose a chord root or bass note.

    Like :func:`transpose_key`, but notes that keys never use (``Cb``,
    ``Fb``, ``E#``, ``B#``) are respelled first so they move too.

    Examples
    --------
    >>> transpose_note("Cb", 1)
    'C'
    >>> transpose_note("E#", 1)
    'F#'
    >>> transpose_note("Cb", 0)
    'Cb'
    """
    if semitones == 0:
        return note
    return transpose_key(ENHARMONIC_NOTES.get(note, note), semitones)


def calculate_capo_key(original_key: str, capo_fret: int) -> str:
    """Return the key whose chord shapes are played with a capo.

    A capo raises the pitch of every string, so sounding ``original_key``
    takes the shapes of a key ``capo_fret`` semitones lower.

    Examples
    --------
    >>> calculate_capo_key("A", 2)
    'G'
    >>> calculate_capo_key("G", 0)
    'G'
    """
    if capo_fret == 0:
        return original_key
    return transpose_key(original_key, -capo_fret)


def calculate_effective_key(original_key: str, transpose: int, capo: int) -> str:
    """Return the key that actually sounds after transpose and capo.

    The transpose is applied to the stored key first; the capo then raises
    the result by ``capo`` semitones as a separate transposition.

    Examples
    --------
    >>> calculate_effective_key("G", 2, 0)
    'A'
    >>> calculate_effective_key("G", 0, 2)
    'A'
    """
    effective_key = transpose_key(original_key, transpose)
    if capo > 0:
        effective_key = transpose_key(effective_key, capo)
    return effective_key
