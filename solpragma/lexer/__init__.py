"""Solidity lexer — lazy token stream with in-band lex errors."""

from solpragma.lexer.lexer import KEYWORDS, Lexer, tokenize
from solpragma.lexer.tokens import Comment, LexError, LexResult, Token, TokenKind

__all__ = ["KEYWORDS", "Comment", "LexError", "LexResult", "Lexer", "Token", "TokenKind", "tokenize"]
