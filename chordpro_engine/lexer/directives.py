"""Catalog of known ChordPro directives.

The catalog is a fixed table; it backs directive autocompletion in the
editor and the validation of directive keywords found by the lexer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from chordpro_engine.lexer.models import Token
from chordpro_engine.lexer.tokenizer import tokenize_document

DirectiveIntent = Literal[
    "metadata",
    "section_open",
    "section_close",
    "comment",
    "chord_definition",
    "formatting",
]

# "{" followed by a partially typed keyword, right before the cursor
COMPLETION_RE = re.compile(r"\{(\w*)$")


@dataclass(frozen=True)
class DirectiveEntry:
    """A known directive keyword.

    Parameters
    ----------
    keyword : str
        The keyword as typed between the braces (e.g., "title", "t").
    alias_group : str
        The long form shared by a keyword and its short aliases.
    description : str
        Human readable description shown next to completions.
    insertion_template : str
        Text inserted after ``{`` when the completion is accepted.
    intent : DirectiveIntent
        What the directive is used for.
    """

    keyword: str
    alias_group: str
    description: str
    insertion_template: str
    intent: DirectiveIntent

    @property
    def takes_value(self) -> bool:
        """Whether the directive is written as ``{keyword: value}``."""
        return self.intent not in ("section_open", "section_close")


@dataclass(frozen=True)
class CompletionContext:
    """Where a directive completion applies.

    Parameters
    ----------
    start : int
        Offset right after the unmatched ``{``; accepted completions replace
        the text from here to the cursor.
    prefix : str
        The keyword characters typed so far.
    """

    start: int
    prefix: str


def _valued(
    keyword: str, description: str, intent: DirectiveIntent, alias_group: str | None = None
) -> DirectiveEntry:
    return DirectiveEntry(
        keyword=keyword,
        alias_group=alias_group or keyword,
        description=description,
        insertion_template=f"{keyword}: ",
        intent=intent,
    )


def _section(
    keyword: str, description: str, intent: DirectiveIntent, alias_group: str | None = None
) -> DirectiveEntry:
    # Section directives carry no value, so the template closes the brace
    return DirectiveEntry(
        keyword=keyword,
        alias_group=alias_group or keyword,
        description=description,
        insertion_template=f"{keyword}}}",
        intent=intent,
    )


DIRECTIVES: tuple[DirectiveEntry, ...] = (
    # Metadata
    _valued("title", "Song title", "metadata"),
    _valued("t", "Song title (short)", "metadata", "title"),
    _valued("subtitle", "Subtitle", "metadata"),
    _valued("artist", "Artist name", "metadata"),
    _valued("composer", "Composer", "metadata"),
    _valued("lyricist", "Lyricist", "metadata"),
    _valued("copyright", "Copyright info", "metadata"),
    _valued("album", "Album name", "metadata"),
    _valued("year", "Release year", "metadata"),
    _valued("key", "Song key", "metadata"),
    _valued("k", "Song key (short)", "metadata", "key"),
    _valued("time", "Time signature", "metadata"),
    _valued("tempo", "Tempo in BPM", "metadata"),
    _valued("duration", "Song duration", "metadata"),
    _valued("capo", "Capo fret position", "metadata"),
    _valued("ca", "Capo (short)", "metadata", "capo"),
    _valued("meta", "Custom metadata", "metadata"),
    # Sections
    _section("start_of_chorus", "Begin chorus section", "section_open"),
    _section("soc", "Begin chorus (short)", "section_open", "start_of_chorus"),
    _section("end_of_chorus", "End chorus section", "section_close"),
    _section("eoc", "End chorus (short)", "section_close", "end_of_chorus"),
    _section("start_of_verse", "Begin verse section", "section_open"),
    _section("sov", "Begin verse (short)", "section_open", "start_of_verse"),
    _section("end_of_verse", "End verse section", "section_close"),
    _section("eov", "End verse (short)", "section_close", "end_of_verse"),
    _section("start_of_tab", "Begin tablature section", "section_open"),
    _section("sot", "Begin tab (short)", "section_open", "start_of_tab"),
    _section("end_of_tab", "End tablature section", "section_close"),
    _section("eot", "End tab (short)", "section_close", "end_of_tab"),
    _section("start_of_grid", "Begin chord grid section", "section_open"),
    _section("sog", "Begin grid (short)", "section_open", "start_of_grid"),
    _section("end_of_grid", "End chord grid section", "section_close"),
    _section("eog", "End grid (short)", "section_close", "end_of_grid"),
    # Comments
    _valued("comment", "Inline annotation", "comment"),
    _valued("c", "Comment (short)", "comment", "comment"),
    _valued("comment_italic", "Italic comment", "comment"),
    _valued("comment_box", "Boxed comment", "comment"),
    # Chord definitions
    _valued("define", "Define a chord shape", "chord_definition"),
    _valued("chord", "Chord definition", "chord_definition"),
    # Formatting
    _valued("textfont", "Lyrics text font", "formatting"),
    _valued("textsize", "Lyrics text size", "formatting"),
    _valued("textcolour", "Lyrics text colour", "formatting"),
    _valued("textcolor", "Lyrics text color (US)", "formatting", "textcolour"),
    _valued("chordfont", "Chord text font", "formatting"),
    _valued("chordsize", "Chord text size", "formatting"),
    _valued("chordcolour", "Chord text colour", "formatting"),
    _valued("chordcolor", "Chord text color (US)", "formatting", "chordcolour"),
)

DIRECTIVES_BY_KEYWORD: dict[str, DirectiveEntry] = {d.keyword: d for d in DIRECTIVES}


def lookup_directive(keyword: str) -> DirectiveEntry | None:
    """Return the catalog entry for ``keyword``, or None if unknown.

    Examples
    --------
    >>> lookup_directive("t").alias_group
    'title'
    >>> lookup_directive("nope") is None
    True
    """
    return DIRECTIVES_BY_KEYWORD.get(keyword)


def is_known_directive(keyword: str) -> bool:
    """Check whether ``keyword`` is in the catalog."""
    return keyword in DIRECTIVES_BY_KEYWORD


def complete_directive(prefix: str) -> list[DirectiveEntry]:
    """Return catalog entries whose keyword starts with ``prefix``.

    Entries come back in catalog order. An empty prefix returns the whole
    catalog.

    Parameters
    ----------
    prefix : str
        Partially typed keyword following an unmatched ``{``.

    Returns
    -------
    list[DirectiveEntry]
        Matching entries, each carrying its insertion template.

    Examples
    --------
    >>> [d.keyword for d in complete_directive("start_of_c")]
    ['start_of_chorus']
    >>> complete_directive("soc")[0].insertion_template
    'soc}'
    """
    return [d for d in DIRECTIVES if d.keyword.startswith(prefix)]


def completion_context(text_before_cursor: str) -> CompletionContext | None:
    """Find the directive being typed at the end of ``text_before_cursor``.

    Completion only applies directly after an unmatched ``{`` followed by
    word characters.

    Examples
    --------
    >>> completion_context("[G]Hello {ti")
    CompletionContext(start=10, prefix='ti')
    >>> completion_context("{title} more") is None
    True
    """
    match = COMPLETION_RE.search(text_before_cursor)
    if match is None:
        return None
    return CompletionContext(start=match.start() + 1, prefix=match.group(1))


def find_unknown_directives(text: str) -> list[Token]:
    """Return directive keyword tokens that are not in the catalog.

    Surrounding whitespace of a keyword (``{ title }``) is ignored.

    Parameters
    ----------
    text : str
        The document text.

    Returns
    -------
    list[Token]
        Offending keyword tokens, in document order.
    """
    return [
        token
        for token in tokenize_document(text)
        if token.kind == "directive_keyword" and not is_known_directive(token.text.strip())
    ]
