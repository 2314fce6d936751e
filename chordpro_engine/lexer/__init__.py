"""ChordPro lexer for syntax highlighting and directive autocompletion.

This module classifies lines of a lyrics-and-chords document into comments,
chord atoms, directive parts and plain text, and exposes the catalog of
known directives used to complete and validate directive keywords.
"""

from chordpro_engine.lexer.directives import (
    DIRECTIVES,
    CompletionContext,
    DirectiveEntry,
    DirectiveIntent,
    complete_directive,
    completion_context,
    find_unknown_directives,
    is_known_directive,
    lookup_directive,
)
from chordpro_engine.lexer.models import INITIAL_STATE, LexerState, Token, TokenKind
from chordpro_engine.lexer.tokenizer import tokenize_document, tokenize_line

__all__ = [
    "DIRECTIVES",
    "INITIAL_STATE",
    "CompletionContext",
    "DirectiveEntry",
    "DirectiveIntent",
    "LexerState",
    "Token",
    "TokenKind",
    "complete_directive",
    "completion_context",
    "find_unknown_directives",
    "is_known_directive",
    "lookup_directive",
    "tokenize_document",
    "tokenize_line",
]
