"""Pragma scanner — pull ``pragma solidity`` constraints out of a token stream.

A single left-to-right pass with no lookahead. Only statements at the top
level count; brace-delimited regions (contract, function and any other
bodies) are skipped by depth counting, so nothing inside them is ever read
as a pragma. Lex errors are ignored and never change state.
"""

from __future__ import annotations

from collections.abc import Iterable

from solpragma.lexer.tokens import LexResult, Token, TokenKind
from solpragma.scanner.models import ScanResult
from solpragma.scanner.state import (
    PRAGMA_SEEN,
    PRAGMA_SOLIDITY_TARGETED,
    SKIPPING_STATEMENT,
    TOP_LEVEL,
    ScanState,
    StateTag,
)

SOLIDITY_PRAGMA_NAME = "solidity"


class PragmaScanner:
    """Incremental form of :func:`scan`: ``feed`` tokens, then ``result``."""

    def __init__(self) -> None:
        self.state: ScanState = TOP_LEVEL
        self._version_pragmas: list[str] = []

    def feed(self, item: LexResult) -> None:
        if not isinstance(item, Token):
            return
        self.state = self._transition(self.state, item)

    def result(self) -> ScanResult:
        return ScanResult(version_pragmas=tuple(self._version_pragmas))

    def _transition(self, state: ScanState, token: Token) -> ScanState:
        kind = token.kind
        tag = state.tag

        if tag is StateTag.IN_BLOCK:
            if kind is TokenKind.OPEN_BRACE:
                return ScanState.in_block(state.depth + 1)
            if kind is TokenKind.CLOSE_BRACE:
                return TOP_LEVEL if state.depth == 1 else ScanState.in_block(state.depth - 1)
            return state

        # Outside a block a brace opener or terminator ends whatever
        # statement was in progress.
        if kind is TokenKind.OPEN_BRACE:
            return ScanState.in_block(1)
        if kind is TokenKind.SEMICOLON:
            return TOP_LEVEL

        if tag is StateTag.TOP_LEVEL:
            return PRAGMA_SEEN if kind is TokenKind.PRAGMA else SKIPPING_STATEMENT

        if tag is StateTag.PRAGMA_SEEN:
            if kind is TokenKind.IDENTIFIER and token.text == SOLIDITY_PRAGMA_NAME:
                return PRAGMA_SOLIDITY_TARGETED
            return SKIPPING_STATEMENT

        if tag is StateTag.PRAGMA_SOLIDITY_TARGETED:
            if kind is TokenKind.STRING_LITERAL:
                self._version_pragmas.append(token.text)
            return SKIPPING_STATEMENT

        return SKIPPING_STATEMENT


def scan(tokens: Iterable[LexResult]) -> ScanResult:
    """Scan a token stream and return every top-level solidity version pragma.

    Never raises on the stream's contents: lex errors are skipped, unbalanced
    braces are tolerated, and a pragma still in progress when the stream
    ends is dropped.
    """
    scanner = PragmaScanner()
    for item in tokens:
        scanner.feed(item)
    return scanner.result()
