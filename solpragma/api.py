"""Public entry points: analyze source text or a single file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from solpragma.core.logging import get_logger
from solpragma.exceptions import InvalidInputError, SourceDecodeError
from solpragma.lexer.lexer import Lexer
from solpragma.lexer.tokens import Comment, LexError, LexResult
from solpragma.scanner.scanner import scan
from solpragma.schemas import AnalysisResult, FileAnalysis

log = get_logger("solpragma.api")


class _LexErrorCounter:
    """Pass-through over a token stream that counts the lex errors in it."""

    def __init__(self, items: Iterable[LexResult]) -> None:
        self._items = items
        self.count = 0

    def __iter__(self) -> Iterator[LexResult]:
        for item in self._items:
            if isinstance(item, LexError):
                self.count += 1
            yield item


def _coerce_source(value: object, source_file: str | None = None) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise SourceDecodeError(str(e), source_file) from e
    raise InvalidInputError(value)


def analyze(source: str | bytes) -> AnalysisResult:
    """Extract the top-level ``pragma solidity`` constraints from ``source``.

    Accepts text or UTF-8 bytes. Malformed Solidity never raises; only a
    wrong argument type (:class:`InvalidInputError`) or undecodable bytes
    (:class:`SourceDecodeError`) do.
    """
    text = _coerce_source(source)
    comments: list[Comment] = []
    stream = _LexErrorCounter(Lexer(text, 0, comments))
    result = scan(stream)
    log.debug(
        "analyze.done",
        pragmas=len(result.version_pragmas),
        lex_errors=stream.count,
        comments=len(comments),
    )
    return AnalysisResult.from_scan(result)


def analyze_file(path: Path, source_file: str | None = None) -> FileAnalysis:
    """Read ``path`` and analyze it. ``source_file`` defaults to the path as given."""
    label = source_file or str(path)
    text = _coerce_source(path.read_bytes(), label)
    result = analyze(text)
    return FileAnalysis(
        source_file=label,
        version_pragmas=result.version_pragmas,
        imports=result.imports,
    )
