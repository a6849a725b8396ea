"""Tests for the Solidity lexer."""

from __future__ import annotations

import pytest

from solpragma.lexer import Comment, LexError, Lexer, Token, TokenKind, tokenize


def _items(source: str, **kwargs) -> list:
    return list(tokenize(source, **kwargs))


def _kinds(source: str) -> list:
    return [i.kind if isinstance(i, Token) else LexError for i in _items(source)]


def _texts(source: str) -> list[str]:
    return [i.text for i in _items(source) if isinstance(i, Token)]


# ── Basic tokens ─────────────────────────────────────────────────────────


class TestBasicTokens:
    def test_empty_source(self):
        assert _items("") == []

    def test_whitespace_only(self):
        assert _items("  \n\t\r\n ") == []

    def test_keywords_and_identifiers(self):
        assert _kinds("contract Token is ERC20") == [
            TokenKind.CONTRACT,
            TokenKind.IDENTIFIER,
            TokenKind.IDENTIFIER,
            TokenKind.IDENTIFIER,
        ]

    def test_solidity_is_an_identifier(self):
        (tok,) = _items("solidity")
        assert tok.kind is TokenKind.IDENTIFIER
        assert tok.text == "solidity"

    def test_dollar_and_underscore_identifiers(self):
        assert _texts("$foo _bar baz_1$") == ["$foo", "_bar", "baz_1$"]

    def test_delimiters(self):
        assert _kinds("{}();,") == [
            TokenKind.OPEN_BRACE,
            TokenKind.CLOSE_BRACE,
            TokenKind.OPEN_PAREN,
            TokenKind.CLOSE_PAREN,
            TokenKind.SEMICOLON,
            TokenKind.COMMA,
        ]

    def test_longest_operator_wins(self):
        items = _items("a >>= b => c >>>= d")
        ops = [i.text for i in items if i.kind is TokenKind.OPERATOR]
        assert ops == [">>=", "=>", ">>>="]

    def test_numbers(self):
        items = _items("0x1F 1_000 1.5e-3 .5")
        assert [i.kind for i in items] == [TokenKind.NUMBER] * 4
        assert [i.text for i in items] == ["0x1F", "1_000", "1.5e-3", ".5"]

    def test_positions(self):
        items = _items("ab  cd")
        assert [(i.start, i.end) for i in items] == [(0, 2), (4, 6)]


# ── String literals ──────────────────────────────────────────────────────


class TestStringLiterals:
    def test_double_quoted(self):
        (tok,) = _items('"hello world"')
        assert tok.kind is TokenKind.STRING_LITERAL
        assert tok.text == "hello world"
        assert (tok.start, tok.end) == (0, 13)

    def test_single_quoted(self):
        (tok,) = _items("'hi'")
        assert tok.text == "hi"

    def test_escapes_kept_verbatim(self):
        (tok,) = _items('"a\\"b"')
        assert tok.text == 'a\\"b'

    def test_other_quote_inside(self):
        (tok,) = _items("\"it's\"")
        assert tok.text == "it's"

    def test_unicode_literal(self):
        (tok,) = _items('unicode"café"')
        assert tok.kind is TokenKind.STRING_LITERAL
        assert tok.text == "café"
        assert tok.start == 0

    def test_hex_literal(self):
        (tok,) = _items('hex"00ff"')
        assert tok.kind is TokenKind.HEX_LITERAL
        assert tok.text == "00ff"

    def test_hex_identifier_without_quote(self):
        (tok,) = _items("hex")
        assert tok.kind is TokenKind.IDENTIFIER

    def test_unterminated_resumes_on_next_line(self):
        items = _items('"abc\nfoo;')
        assert isinstance(items[0], LexError)
        assert items[0].message == "unterminated string literal"
        assert [i.kind for i in items[1:]] == [TokenKind.IDENTIFIER, TokenKind.SEMICOLON]

    def test_unterminated_at_eof(self):
        (err,) = _items('"abc')
        assert isinstance(err, LexError)
        assert (err.start, err.end) == (0, 4)


# ── Comments ─────────────────────────────────────────────────────────────


class TestComments:
    def test_comments_are_collected_not_yielded(self):
        comments: list[Comment] = []
        items = _items("// a\n/* b */ /// c\n/** d */ x", comments=comments)
        assert [i.text for i in items] == ["x"]
        assert [c.kind for c in comments] == ["line", "block", "doc_line", "doc_block"]
        assert comments[0].text == "// a"
        assert comments[1].text == "/* b */"

    def test_empty_block_comment_is_not_doc(self):
        comments: list[Comment] = []
        _items("/**/", comments=comments)
        assert [c.kind for c in comments] == ["block"]

    def test_sink_is_the_given_list(self):
        comments: list[Comment] = []
        lexer = Lexer("// hi", comments=comments)
        list(lexer)
        assert lexer.comments is comments
        assert len(comments) == 1

    def test_default_sink(self):
        lexer = Lexer("/* x */ y")
        list(lexer)
        assert [c.text for c in lexer.comments] == ["/* x */"]

    def test_unterminated_block_comment(self):
        items = _items("a /* never closed")
        assert items[0].kind is TokenKind.IDENTIFIER
        assert isinstance(items[1], LexError)
        assert items[1].message == "unterminated block comment"
        assert len(items) == 2

    def test_pragma_inside_comment_is_not_a_token(self):
        assert _items("// pragma solidity ^0.8.0;") == []


# ── Lex errors ───────────────────────────────────────────────────────────


class TestLexErrors:
    def test_invalid_character_then_continue(self):
        items = _items("a # b")
        assert items[0].text == "a"
        assert isinstance(items[1], LexError)
        assert (items[1].start, items[1].end) == (2, 3)
        assert items[2].text == "b"

    def test_non_ascii_outside_string(self):
        items = _items("éx")
        assert isinstance(items[0], LexError)
        assert items[1].text == "x"

    def test_errors_only(self):
        items = _items("# @ #")
        assert items
        assert all(isinstance(i, LexError) for i in items)


# ── Pragma values ────────────────────────────────────────────────────────


class TestPragmaValue:
    def test_raw_value_is_one_string_literal(self):
        items = _items("pragma solidity ^0.8.0;")
        assert [i.kind for i in items] == [
            TokenKind.PRAGMA,
            TokenKind.IDENTIFIER,
            TokenKind.STRING_LITERAL,
            TokenKind.SEMICOLON,
        ]
        assert items[2].text == "^0.8.0"

    def test_raw_value_with_spaces_is_trimmed(self):
        items = _items("pragma solidity   >=0.7.0  <0.9.0 ;")
        assert items[2].text == ">=0.7.0  <0.9.0"
        assert items[3].kind is TokenKind.SEMICOLON

    def test_raw_value_spanning_lines(self):
        items = _items("pragma solidity >=0.7.0\n    <0.9.0;")
        assert items[2].text == ">=0.7.0\n    <0.9.0"

    def test_quoted_value(self):
        items = _items('pragma solidity "^0.8.0";')
        assert items[2].kind is TokenKind.STRING_LITERAL
        assert items[2].text == "^0.8.0"

    def test_other_pragma_names_also_get_a_value(self):
        items = _items("pragma abicoder v2;")
        assert items[2].kind is TokenKind.STRING_LITERAL
        assert items[2].text == "v2"

    def test_empty_value(self):
        assert _kinds("pragma solidity ;") == [
            TokenKind.PRAGMA,
            TokenKind.IDENTIFIER,
            TokenKind.SEMICOLON,
        ]

    def test_value_without_terminator_at_eof(self):
        items = _items("pragma solidity ^0.8.0")
        assert isinstance(items[2], LexError)
        assert items[2].message == "unterminated pragma value"
        assert len(items) == 3

    def test_value_cut_by_brace(self):
        items = _items("pragma solidity ^0.8.0 contract C {}")
        assert isinstance(items[2], LexError)
        assert [i.kind for i in items[3:]] == [TokenKind.OPEN_BRACE, TokenKind.CLOSE_BRACE]

    def test_pragma_followed_by_non_identifier(self):
        assert _kinds("pragma { x") == [
            TokenKind.PRAGMA,
            TokenKind.OPEN_BRACE,
            TokenKind.IDENTIFIER,
        ]

    def test_mode_resets_after_value(self):
        items = _items("pragma solidity ^0.8.0; uint x;")
        assert [i.kind for i in items[3:]] == [
            TokenKind.SEMICOLON,
            TokenKind.IDENTIFIER,
            TokenKind.IDENTIFIER,
            TokenKind.SEMICOLON,
        ]
        assert [i.text for i in items[4:6]] == ["uint", "x"]


# ── Offsets and laziness ─────────────────────────────────────────────────


class TestLexerStream:
    def test_start_offset(self):
        items = _items("xx pragma", start=3)
        assert len(items) == 1
        assert items[0].kind is TokenKind.PRAGMA
        assert (items[0].start, items[0].end) == (3, 9)

    def test_start_offset_out_of_range(self):
        with pytest.raises(ValueError):
            Lexer("abc", start=4)
        with pytest.raises(ValueError):
            Lexer("abc", start=-1)

    def test_lexer_is_a_forward_only_iterator(self):
        lexer = Lexer("a b")
        assert iter(lexer) is lexer
        assert next(lexer).text == "a"
        assert next(lexer).text == "b"
        with pytest.raises(StopIteration):
            next(lexer)
