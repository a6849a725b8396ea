"""Token types produced by the Solidity lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class TokenKind(Enum):
    """Lexical token kinds.

    The pragma scanner only distinguishes PRAGMA, IDENTIFIER, STRING_LITERAL,
    SEMICOLON, OPEN_BRACE and CLOSE_BRACE; everything else is carried so the
    stream stays faithful to the source.
    """

    # Keywords
    PRAGMA = "pragma"
    IMPORT = "import"
    AS = "as"
    FROM = "from"
    CONTRACT = "contract"
    ABSTRACT = "abstract"
    INTERFACE = "interface"
    LIBRARY = "library"
    FUNCTION = "function"
    MODIFIER = "modifier"
    EVENT = "event"
    ERROR = "error"
    STRUCT = "struct"
    ENUM = "enum"
    USING = "using"
    TYPE = "type"
    CONSTRUCTOR = "constructor"
    FALLBACK = "fallback"
    RECEIVE = "receive"
    RETURNS = "returns"
    RETURN = "return"
    IF = "if"
    ELSE = "else"
    FOR = "for"
    WHILE = "while"
    DO = "do"
    BREAK = "break"
    CONTINUE = "continue"
    ASSEMBLY = "assembly"
    UNCHECKED = "unchecked"
    TRY = "try"
    CATCH = "catch"
    EMIT = "emit"
    REVERT = "revert"
    NEW = "new"
    DELETE = "delete"
    MAPPING = "mapping"
    TRUE = "true"
    FALSE = "false"

    # Literals
    IDENTIFIER = "identifier"
    STRING_LITERAL = "string literal"
    HEX_LITERAL = "hex literal"
    NUMBER = "number"

    # Delimiters
    SEMICOLON = ";"
    COMMA = ","
    DOT = "."
    COLON = ":"
    QUESTION = "?"
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"

    # Everything from the operator table
    OPERATOR = "operator"


@dataclass(frozen=True)
class Token:
    """A lexed token.

    ``text`` is the identifier name, the string literal content without its
    quotes, or the raw lexeme for everything else. ``start``/``end`` are
    character offsets into the source.
    """

    kind: TokenKind
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class LexError:
    """A span the lexer could not turn into a token.

    Yielded in the token stream in place of a token; it is a value, not an
    exception, so consumers decide whether to skip it.
    """

    message: str
    start: int
    end: int


@dataclass(frozen=True)
class Comment:
    """A comment collected while lexing."""

    kind: str  # "line" | "block" | "doc_line" | "doc_block"
    text: str
    start: int
    end: int


LexResult = Union[Token, LexError]
