"""Line-at-a-time lexer for ChordPro-like lyric sheets.

The lexer classifies every character of a line into one of the token kinds
of :data:`~chordpro_engine.lexer.models.TokenKind`. It never drops or
rewrites text: joining the ``text`` of the returned tokens reproduces the
input line exactly.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from chordpro_engine.lexer.models import INITIAL_STATE, LexerState, Token

# Span patterns, matched at the current scan position
DIRECTIVE_KEYWORD_RE = re.compile(r"[^:}]*")
DIRECTIVE_VALUE_RE = re.compile(r"[^}]*")
PLAIN_TEXT_RE = re.compile(r"[^\[{]*")
SPACE_RE = re.compile(r"\s*")

COMMENT_MARKER = "#"


def tokenize_line(
    line: str,
    state: LexerState = INITIAL_STATE,
    *,
    offset: int = 0,
    line_number: int = 0,
) -> tuple[list[Token], LexerState]:
    """Tokenize a single line.

    Scans left to right; at each position the first matching rule wins:
    a ``#`` in column 0 makes the whole line a comment, ``[`` starts a chord
    atom, ``{`` opens a directive, and inside a directive the keyword, the
    ``:`` separator, the value and the closing ``}`` are told apart. Any
    other run of characters is plain text.

    Parameters
    ----------
    line : str
        The line to tokenize, without its line break.
    state : LexerState
        Directive state at the start of the line.
    offset : int
        Offset added to every token position (document offset of the line).
    line_number : int
        Line number stored on every token.

    Returns
    -------
    tuple[list[Token], LexerState]
        Tokens in source order and the state for the next line. Directives
        never span lines, so the returned state is always the initial one.

    Examples
    --------
    >>> tokens, _ = tokenize_line("[G]Amazing [C]grace")
    >>> [(t.kind, t.text) for t in tokens]
    [('chord_atom', '[G]'), ('plain_text', 'Amazing '), ('chord_atom', '[C]'), ('plain_text', 'grace')]
    """
    tokens: list[Token] = []
    n = len(line)

    if line.startswith(COMMENT_MARKER):
        tokens.append(Token(text=line, start=offset, end=offset + n, kind="comment", line=line_number))
        return tokens, INITIAL_STATE

    in_directive = state.in_directive
    after_colon = state.after_colon
    i = 0
    # Next "]" at or after the scan position; -1 once none is left
    close = 0

    while i < n:
        start = i
        ch = line[i]

        if ch == "[":
            if close != -1 and close <= i:
                close = line.find("]", i + 1)
            # An unterminated chord only claims its bracket
            i = close + 1 if close != -1 else i + 1
            kind = "chord_atom"
        elif not in_directive and ch == "{":
            i += 1
            in_directive = True
            after_colon = False
            kind = "punctuation"
        elif in_directive:
            if ch == "}":
                i += 1
                in_directive = False
                after_colon = False
                kind = "punctuation"
            elif ch == ":" and not after_colon:
                # Whitespace after the separator belongs to the separator
                i = SPACE_RE.match(line, i + 1).end()
                after_colon = True
                kind = "punctuation"
            elif after_colon:
                i = DIRECTIVE_VALUE_RE.match(line, i).end()
                kind = "directive_value"
            else:
                i = DIRECTIVE_KEYWORD_RE.match(line, i).end()
                kind = "directive_keyword"
        else:
            i = PLAIN_TEXT_RE.match(line, i + 1).end()
            kind = "plain_text"

        tokens.append(
            Token(
                text=line[start:i],
                start=offset + start,
                end=offset + i,
                kind=kind,
                line=line_number,
            )
        )

    return tokens, INITIAL_STATE


def tokenize_document(text: str) -> Iterator[Token]:
    """Lazily tokenize a whole document.

    Lines are split on ``\\n`` and processed top to bottom. Token offsets are
    document offsets; line breaks themselves are not covered by any token.

    Parameters
    ----------
    text : str
        The document text.

    Yields
    ------
    Token
        Tokens in document order.

    Examples
    --------
    >>> [t.text for t in tokenize_document("{soc}\\n[G]Hi")]
    ['{', 'soc', '}', '[G]', 'Hi']
    """
    state = INITIAL_STATE
    offset = 0

    for line_number, line in enumerate(text.split("\n")):
        if not line.strip():
            state = INITIAL_STATE
        tokens, state = tokenize_line(line, state, offset=offset, line_number=line_number)
        yield from tokens
        offset += len(line) + 1
