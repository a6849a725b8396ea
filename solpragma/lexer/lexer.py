"""Solidity lexer.

Turns source text into a lazy stream of :class:`Token` values. Spans that
cannot be lexed are reported in the same stream as :class:`LexError` values
and lexing carries on after them, so a consumer always sees the whole file.

Pragma values get special treatment: in ``pragma solidity ^0.8.0 <0.9.0;``
everything between the pragma name and the terminating ``;`` is a single
string literal token, because version constraints are not made of ordinary
tokens (``^0.8.0`` would otherwise lex as an operator and a malformed number).
"""

from __future__ import annotations

from enum import Enum

from solpragma.lexer.tokens import Comment, LexError, LexResult, Token, TokenKind

KEYWORDS: dict[str, TokenKind] = {
    "pragma": TokenKind.PRAGMA,
    "import": TokenKind.IMPORT,
    "as": TokenKind.AS,
    "from": TokenKind.FROM,
    "contract": TokenKind.CONTRACT,
    "abstract": TokenKind.ABSTRACT,
    "interface": TokenKind.INTERFACE,
    "library": TokenKind.LIBRARY,
    "function": TokenKind.FUNCTION,
    "modifier": TokenKind.MODIFIER,
    "event": TokenKind.EVENT,
    "error": TokenKind.ERROR,
    "struct": TokenKind.STRUCT,
    "enum": TokenKind.ENUM,
    "using": TokenKind.USING,
    "type": TokenKind.TYPE,
    "constructor": TokenKind.CONSTRUCTOR,
    "fallback": TokenKind.FALLBACK,
    "receive": TokenKind.RECEIVE,
    "returns": TokenKind.RETURNS,
    "return": TokenKind.RETURN,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "for": TokenKind.FOR,
    "while": TokenKind.WHILE,
    "do": TokenKind.DO,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
    "assembly": TokenKind.ASSEMBLY,
    "unchecked": TokenKind.UNCHECKED,
    "try": TokenKind.TRY,
    "catch": TokenKind.CATCH,
    "emit": TokenKind.EMIT,
    "revert": TokenKind.REVERT,
    "new": TokenKind.NEW,
    "delete": TokenKind.DELETE,
    "mapping": TokenKind.MAPPING,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}

_DELIMITERS: dict[str, TokenKind] = {
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    ":": TokenKind.COLON,
    "?": TokenKind.QUESTION,
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
}

# Longest first so ">>>=" wins over ">>" and ">".
_OPERATORS: tuple[str, ...] = tuple(
    sorted(
        [
            ">>>=", ">>>", "<<=", ">>=", "**", "=>", "->", ":=", "==", "!=",
            "<=", ">=", "&&", "||", "++", "--", "+=", "-=", "*=", "/=", "%=",
            "|=", "&=", "^=", "<<", ">>", "+", "-", "*", "/", "%", "<", ">",
            "=", "!", "~", "&", "|", "^",
        ],
        key=len,
        reverse=True,
    )
)

_QUOTES = ("'", '"')

# Characters that end a raw (unquoted) pragma value.
_PRAGMA_VALUE_STOP = ";{}"


class _PragmaMode(Enum):
    OFF = "off"
    AWAIT_NAME = "await_name"  # just saw `pragma`
    AWAIT_VALUE = "await_value"  # saw `pragma <identifier>`


def _is_ident_start(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch in "_$")


def _is_ident_part(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch in "_$")


class Lexer:
    """Forward-only iterator over ``Token | LexError`` for one source string.

    Args:
        source: Full text of one compilation unit.
        start: Offset into ``source`` at which lexing begins. Reported
            positions are always offsets into ``source``.
        comments: Sink that receives every comment encountered. A fresh
            list is used when omitted.
    """

    def __init__(
        self,
        source: str,
        start: int = 0,
        comments: list[Comment] | None = None,
    ) -> None:
        if start < 0 or start > len(source):
            raise ValueError(f"start offset {start} outside source of length {len(source)}")
        self._source = source
        self._pos = start
        self.comments: list[Comment] = comments if comments is not None else []
        self._pragma_mode = _PragmaMode.OFF

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> LexResult:
        item = self._next_item()
        if item is None:
            raise StopIteration
        return item

    # ── pragma handling ──────────────────────────────────────────────────

    def _next_item(self) -> LexResult | None:
        if self._pragma_mode is _PragmaMode.AWAIT_VALUE:
            self._pragma_mode = _PragmaMode.OFF
            value = self._pragma_value()
            if value is not None:
                return value

        item = self._next_token()

        if isinstance(item, Token) and item.kind is TokenKind.PRAGMA:
            self._pragma_mode = _PragmaMode.AWAIT_NAME
        elif self._pragma_mode is _PragmaMode.AWAIT_NAME:
            if isinstance(item, Token) and item.kind is TokenKind.IDENTIFIER:
                self._pragma_mode = _PragmaMode.AWAIT_VALUE
            else:
                self._pragma_mode = _PragmaMode.OFF
        return item

    def _pragma_value(self) -> LexResult | None:
        """Lex the value of ``pragma <name> <value>;``.

        Quoted values are ordinary string literals. Anything else runs up to
        the terminating ``;`` and is returned trimmed as one string literal.
        Returns None when there is no value, leaving the terminator (or
        whatever follows) to the regular lexer.
        """
        source = self._source
        pos = self._pos
        while pos < len(source) and source[pos].isspace():
            pos += 1
        self._pos = pos

        if pos >= len(source) or source[pos] in _PRAGMA_VALUE_STOP:
            return None
        if source[pos] in _QUOTES:
            return self._string(pos, pos, TokenKind.STRING_LITERAL)

        end = pos
        while end < len(source) and source[end] not in _PRAGMA_VALUE_STOP:
            end += 1
        if end >= len(source) or source[end] != ";":
            self._pos = end
            return LexError("unterminated pragma value", pos, end)

        value = source[pos:end].rstrip()
        self._pos = pos + len(value)
        return Token(TokenKind.STRING_LITERAL, value, pos, self._pos)

    # ── regular tokens ───────────────────────────────────────────────────

    def _next_token(self) -> LexResult | None:
        error = self._skip_trivia()
        if error is not None:
            return error

        source = self._source
        start = self._pos
        if start >= len(source):
            return None
        ch = source[start]

        if _is_ident_start(ch):
            end = start + 1
            while end < len(source) and _is_ident_part(source[end]):
                end += 1
            word = source[start:end]
            if word in ("hex", "unicode") and end < len(source) and source[end] in _QUOTES:
                kind = TokenKind.HEX_LITERAL if word == "hex" else TokenKind.STRING_LITERAL
                return self._string(start, end, kind)
            self._pos = end
            return Token(KEYWORDS.get(word, TokenKind.IDENTIFIER), word, start, end)

        if ch.isdigit() or (ch == "." and source[start + 1 : start + 2].isdigit()):
            return self._number(start)

        if ch in _QUOTES:
            return self._string(start, start, TokenKind.STRING_LITERAL)

        if ch in _DELIMITERS:
            self._pos = start + 1
            return Token(_DELIMITERS[ch], ch, start, start + 1)

        for op in _OPERATORS:
            if source.startswith(op, start):
                self._pos = start + len(op)
                return Token(TokenKind.OPERATOR, op, start, self._pos)

        self._pos = start + 1
        return LexError(f"unrecognised character {ch!r}", start, start + 1)

    def _skip_trivia(self) -> LexError | None:
        """Skip whitespace and comments, recording comments in the sink."""
        source = self._source
        while self._pos < len(source):
            ch = source[self._pos]
            if ch.isspace():
                self._pos += 1
            elif source.startswith("//", self._pos):
                start = self._pos
                end = start
                while end < len(source) and source[end] not in "\r\n":
                    end += 1
                text = source[start:end]
                kind = "doc_line" if text.startswith("///") and not text.startswith("////") else "line"
                self.comments.append(Comment(kind, text, start, end))
                self._pos = end
            elif source.startswith("/*", self._pos):
                start = self._pos
                close = source.find("*/", start + 2)
                if close == -1:
                    self._pos = len(source)
                    return LexError("unterminated block comment", start, len(source))
                end = close + 2
                text = source[start:end]
                kind = "doc_block" if text.startswith("/**") and text != "/**/" else "block"
                self.comments.append(Comment(kind, text, start, end))
                self._pos = end
            else:
                break
        return None

    def _string(self, start: int, quote_pos: int, kind: TokenKind) -> LexResult:
        """Lex a quoted literal whose opening quote sits at ``quote_pos``.

        ``start`` includes any ``hex``/``unicode`` prefix. Escapes are kept
        verbatim in the token text. A literal cut off by a newline or the end
        of input is an error; lexing resumes at that line break.
        """
        source = self._source
        quote = source[quote_pos]
        pos = quote_pos + 1
        while pos < len(source):
            ch = source[pos]
            if ch == "\\":
                pos += 2
                continue
            if ch == quote:
                self._pos = pos + 1
                return Token(kind, source[quote_pos + 1 : pos], start, pos + 1)
            if ch in "\r\n":
                break
            pos += 1
        end = min(pos, len(source))
        self._pos = end
        return LexError("unterminated string literal", start, end)

    def _number(self, start: int) -> Token:
        source = self._source
        end = start
        if source.startswith(("0x", "0X"), start):
            end = start + 2
            while end < len(source) and (source[end] in "0123456789abcdefABCDEF_"):
                end += 1
        else:
            while end < len(source) and (source[end].isdigit() or source[end] in "_."):
                end += 1
            if end < len(source) and source[end] in "eE":
                exp = end + 1
                if exp < len(source) and source[exp] == "-":
                    exp += 1
                if exp < len(source) and source[exp].isdigit():
                    end = exp
                    while end < len(source) and source[end].isdigit():
                        end += 1
        self._pos = end
        return Token(TokenKind.NUMBER, source[start:end], start, end)


def tokenize(
    source: str,
    start: int = 0,
    comments: list[Comment] | None = None,
) -> Lexer:
    """Return a lazy ``Token | LexError`` stream over ``source``."""
    return Lexer(source, start, comments)
