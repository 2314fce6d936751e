"""Chord data model for chordpro-engine.

This module provides the chord value found inside ChordPro chord atoms
(``[Gm7]``, ``[C/E]``), kept in the spelling it was written in.
"""

from dataclasses import dataclass

from chordpro_engine.pitch_class import transpose_note


@dataclass(frozen=True)
class Chord:
    """Chord as written in a lyric sheet.

    Parameters
    ----------
    root : str
        The root note of the chord (e.g., "C", "F#", "Bb").
    quality : str
        Everything between root and slash, verbatim (e.g., "m7", "sus4", "").
    bass : str | None
        The bass note if different from root (for slash chords).

    Examples
    --------
    >>> chord = Chord(root="G", quality="m7")
    >>> chord.to_chordpro()
    'Gm7'
    >>> chord.transposed(2).to_chordpro()
    'Am7'
    """

    root: str
    quality: str = ""
    bass: str | None = None

    def to_chordpro(self) -> str:
        """Convert to the chord name written inside a chord atom.

        Returns
        -------
        str
            Chord name (e.g., "Gm7", "C/E").
        """
        result = f"{self.root}{self.quality}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    def transposed(self, semitones: int) -> "Chord":
        """Return the chord moved by ``semitones``, quality unchanged.

        Root and bass follow the spelling rules of
        :func:`~chordpro_engine.pitch_class.transpose_note`.
        """
        return Chord(
            root=transpose_note(self.root, semitones),
            quality=self.quality,
            bass=transpose_note(self.bass, semitones) if self.bass else None,
        )

    def __str__(self) -> str:
        """Return the ChordPro chord name as default string representation."""
        return self.to_chordpro()
