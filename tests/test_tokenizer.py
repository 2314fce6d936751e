"""Tests for the ChordPro line lexer."""

import pytest

from chordpro_engine.lexer.models import INITIAL_STATE, LexerState, Token
from chordpro_engine.lexer.tokenizer import tokenize_document, tokenize_line


def kinds_and_texts(tokens: list[Token]) -> list[tuple[str, str]]:
    return [(t.kind, t.text) for t in tokens]


class TestTokenizeLineChords:
    """Chord atom handling."""

    def test_chord_bracket_isolation(self) -> None:
        """Chords and lyrics alternate as separate tokens."""
        tokens, _ = tokenize_line("[G]Amazing [C]grace")
        assert kinds_and_texts(tokens) == [
            ("chord_atom", "[G]"),
            ("plain_text", "Amazing "),
            ("chord_atom", "[C]"),
            ("plain_text", "grace"),
        ]

    def test_token_spans(self) -> None:
        """Test that token spans are correct."""
        tokens, _ = tokenize_line("[G]Amazing [C]grace")
        assert [(t.start, t.end) for t in tokens] == [(0, 3), (3, 11), (11, 14), (14, 19)]

    def test_unterminated_chord_claims_only_bracket(self) -> None:
        """An unclosed [ does not swallow the rest of the line."""
        tokens, _ = tokenize_line("[G Amazing")
        assert kinds_and_texts(tokens) == [
            ("chord_atom", "["),
            ("plain_text", "G Amazing"),
        ]

    def test_empty_brackets(self) -> None:
        tokens, _ = tokenize_line("[]x")
        assert kinds_and_texts(tokens) == [("chord_atom", "[]"), ("plain_text", "x")]

    def test_long_run_of_open_brackets(self) -> None:
        """Every unterminated [ becomes its own one-character atom."""
        line = "[" * 20000
        tokens, _ = tokenize_line(line)
        assert len(tokens) == 20000
        assert all(t.kind == "chord_atom" and t.text == "[" for t in tokens)
        assert "".join(t.text for t in tokens) == line

    def test_open_brackets_before_a_close(self) -> None:
        """Brackets before the first ] all belong to one atom."""
        tokens, _ = tokenize_line("[[[G]x[")
        assert kinds_and_texts(tokens) == [
            ("chord_atom", "[[[G]"),
            ("plain_text", "x"),
            ("chord_atom", "["),
        ]

    def test_brackets_after_last_close(self) -> None:
        tokens, _ = tokenize_line("[G]a[b[c]d[e[")
        assert kinds_and_texts(tokens) == [
            ("chord_atom", "[G]"),
            ("plain_text", "a"),
            ("chord_atom", "[b[c]"),
            ("plain_text", "d"),
            ("chord_atom", "["),
            ("plain_text", "e"),
            ("chord_atom", "["),
        ]

    def test_adjacent_chords(self) -> None:
        tokens, _ = tokenize_line("[G][D/F#]")
        assert kinds_and_texts(tokens) == [("chord_atom", "[G]"), ("chord_atom", "[D/F#]")]


class TestTokenizeLineDirectives:
    """Directive handling."""

    def test_directive_with_value(self) -> None:
        """Keyword, separator, value and braces are told apart."""
        tokens, _ = tokenize_line("{title: Amazing Grace}")
        assert [t.kind for t in tokens] == [
            "punctuation",
            "directive_keyword",
            "punctuation",
            "directive_value",
            "punctuation",
        ]
        assert tokens[0].text == "{"
        assert tokens[1].text == "title"
        assert tokens[2].text.strip() == ":"
        assert tokens[3].text == "Amazing Grace"
        assert tokens[4].text == "}"

    def test_space_after_colon_belongs_to_separator(self) -> None:
        tokens, _ = tokenize_line("{title: Amazing Grace}")
        assert tokens[2].text == ": "

    def test_directive_without_space(self) -> None:
        tokens, _ = tokenize_line("{t:Song}")
        assert kinds_and_texts(tokens) == [
            ("punctuation", "{"),
            ("directive_keyword", "t"),
            ("punctuation", ":"),
            ("directive_value", "Song"),
            ("punctuation", "}"),
        ]

    def test_section_directive(self) -> None:
        tokens, _ = tokenize_line("{start_of_chorus}")
        assert kinds_and_texts(tokens) == [
            ("punctuation", "{"),
            ("directive_keyword", "start_of_chorus"),
            ("punctuation", "}"),
        ]

    def test_second_colon_is_part_of_value(self) -> None:
        tokens, _ = tokenize_line("{time: 3:4}")
        assert tokens[3].kind == "directive_value"
        assert tokens[3].text == "3:4"

    def test_unclosed_directive_value(self) -> None:
        """An unclosed directive runs to the end of the line."""
        tokens, _ = tokenize_line("{title: Amazing")
        assert kinds_and_texts(tokens)[-1] == ("directive_value", "Amazing")

    def test_unclosed_directive_keyword(self) -> None:
        tokens, _ = tokenize_line("{soc")
        assert kinds_and_texts(tokens) == [("punctuation", "{"), ("directive_keyword", "soc")]

    def test_text_after_directive_is_plain(self) -> None:
        tokens, _ = tokenize_line("{soc} [G]la")
        assert kinds_and_texts(tokens)[3:] == [("plain_text", " "), ("chord_atom", "[G]"), ("plain_text", "la")]

    def test_chord_inside_directive_value(self) -> None:
        """A [ at the scan position is a chord even inside a directive."""
        tokens, _ = tokenize_line("{c: [G] x}")
        assert ("chord_atom", "[G]") in kinds_and_texts(tokens)
        assert kinds_and_texts(tokens)[-2:] == [("directive_value", " x"), ("punctuation", "}")]

    def test_brace_inside_directive_is_keyword_text(self) -> None:
        tokens, _ = tokenize_line("{a{b}")
        assert kinds_and_texts(tokens) == [
            ("punctuation", "{"),
            ("directive_keyword", "a{b"),
            ("punctuation", "}"),
        ]


class TestTokenizeLineComments:
    """Comment handling."""

    def test_comment_line(self) -> None:
        tokens, _ = tokenize_line("# capo 2 [G]")
        assert kinds_and_texts(tokens) == [("comment", "# capo 2 [G]")]

    def test_hash_not_at_start_is_plain(self) -> None:
        tokens, _ = tokenize_line(" # not a comment")
        assert [t.kind for t in tokens] == ["plain_text"]

    def test_hash_after_chord_is_plain(self) -> None:
        tokens, _ = tokenize_line("[G]#1")
        assert kinds_and_texts(tokens) == [("chord_atom", "[G]"), ("plain_text", "#1")]


class TestTokenizeLineState:
    """State passed between lines."""

    def test_state_is_reset_after_unclosed_directive(self) -> None:
        _, state = tokenize_line("{title: Amazing")
        assert state == INITIAL_STATE

    def test_incoming_directive_state_is_honoured(self) -> None:
        tokens, state = tokenize_line("Grace}", LexerState(in_directive=True, after_colon=True))
        assert kinds_and_texts(tokens) == [("directive_value", "Grace"), ("punctuation", "}")]
        assert state == INITIAL_STATE

    def test_state_is_immutable(self) -> None:
        with pytest.raises(AttributeError):
            INITIAL_STATE.in_directive = True  # type: ignore[misc]


class TestTokenizeLineEdges:
    """Empty and whitespace lines."""

    def test_empty_line(self) -> None:
        tokens, state = tokenize_line("")
        assert tokens == []
        assert state == INITIAL_STATE

    def test_whitespace_only(self) -> None:
        tokens, _ = tokenize_line("   ")
        assert kinds_and_texts(tokens) == [("plain_text", "   ")]

    def test_offset_and_line_number(self) -> None:
        tokens, _ = tokenize_line("[G]la", offset=10, line_number=3)
        assert (tokens[0].start, tokens[0].end, tokens[0].line) == (10, 13, 3)


class TestLossless:
    """Joining token texts gives back the line."""

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "[G]Amazing [C]grace",
            "{title: Amazing Grace}",
            "{title:   spaced   }",
            "{title: Amazing",
            "{t:}",
            "# comment {with} [stuff]",
            "[unterminated chord",
            "}}{{::]][[",
            "Plain lyric line, no markup.",
            "{c: [G] inside} after [D",
            "\ttabbed\t[Am]\t",
        ],
    )
    def test_lossless(self, line: str) -> None:
        tokens, _ = tokenize_line(line)
        assert "".join(t.text for t in tokens) == line

    @pytest.mark.parametrize("line", ["[G]Amazing [C]grace", "{a: b} c [d", "x}y{z:w"])
    def test_spans_are_contiguous(self, line: str) -> None:
        tokens, _ = tokenize_line(line)
        assert tokens[0].start == 0
        assert tokens[-1].end == len(line)
        for left, right in zip(tokens, tokens[1:]):
            assert left.end == right.start
        for token in tokens:
            assert line[token.start : token.end] == token.text


class TestTokenizeDocument:
    """Whole-document tokenization."""

    def test_is_lazy(self) -> None:
        tokens = tokenize_document("[G]la")
        assert not isinstance(tokens, list)
        assert next(tokens).text == "[G]"

    def test_document_offsets(self) -> None:
        text = "{soc}\n[G]Hi\n\n# end"
        for token in tokenize_document(text):
            assert text[token.start : token.end] == token.text

    def test_line_numbers(self) -> None:
        tokens = list(tokenize_document("{soc}\n[G]Hi\n\n# end"))
        assert [t.line for t in tokens] == [0, 0, 0, 1, 1, 3]

    def test_unclosed_directive_does_not_leak(self) -> None:
        """Directive state never crosses a line break."""
        tokens = list(tokenize_document("{title: Amazing\nGrace}"))
        second_line = [t for t in tokens if t.line == 1]
        assert kinds_and_texts(second_line) == [("plain_text", "Grace}")]

    def test_empty_document(self) -> None:
        assert list(tokenize_document("")) == []
