"""Data models for ChordPro line lexing.

This module defines the token record produced by the lexer and the small
state value carried from one line to the next.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TokenKind = Literal[
    "comment",
    "chord_atom",
    "punctuation",
    "directive_keyword",
    "directive_value",
    "plain_text",
]


@dataclass(frozen=True)
class Token:
    """A classified span of a ChordPro line.

    Parameters
    ----------
    text : str
        The exact source text covered by the token.
    start : int
        Inclusive start offset.
    end : int
        Exclusive end offset.
    kind : TokenKind
        The lexical category of the span.
    line : int
        Zero-based line number the token was read from.

    Examples
    --------
    >>> token = Token(text="[G]", start=0, end=3, kind="chord_atom")
    >>> token.start, token.end
    (0, 3)
    """

    text: str
    start: int
    end: int
    kind: TokenKind
    line: int = 0


@dataclass(frozen=True)
class LexerState:
    """Directive state of the lexer between two scan steps.

    Parameters
    ----------
    in_directive : bool
        True after an unclosed ``{`` on the current line.
    after_colon : bool
        True once the keyword/value separator of the open directive was read.
    """

    in_directive: bool = False
    after_colon: bool = False


INITIAL_STATE = LexerState()
