"""Find Solidity sources under a path and analyze each of them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from solpragma.api import analyze_file
from solpragma.core.logging import get_logger
from solpragma.exceptions import SourceDecodeError
from solpragma.schemas import FileAnalysis

log = get_logger("solpragma.discovery")

DEFAULT_PATTERNS: tuple[str, ...] = ("**/*.sol",)


def discover_sources(root: Path, patterns: Sequence[str] = DEFAULT_PATTERNS) -> list[Path]:
    """Return the source files matching ``patterns`` under ``root``, sorted.

    A file passed as ``root`` is returned as-is, whatever its suffix.
    """
    if root.is_file():
        return [root]
    hits: set[Path] = set()
    for pattern in patterns:
        for hit in root.glob(pattern):
            if hit.is_file():
                hits.add(hit)
    return sorted(hits)


def scan_paths(
    paths: Iterable[Path],
    patterns: Sequence[str] = DEFAULT_PATTERNS,
) -> list[FileAnalysis]:
    """Analyze every source file found under ``paths``.

    ``source_file`` is relative to the directory that was searched, or the
    file name when a file was given directly. Files that cannot be read or
    decoded are logged and skipped.
    """
    results: list[FileAnalysis] = []
    for root in paths:
        base = root if root.is_dir() else root.parent
        for file_path in discover_sources(root, patterns):
            rel = str(file_path.relative_to(base))
            try:
                results.append(analyze_file(file_path, rel))
            except (OSError, SourceDecodeError) as e:
                log.warning("discovery.read_failed", source_file=rel, error=str(e))
    log.debug("discovery.done", files=len(results))
    return results
