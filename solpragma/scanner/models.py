"""Data models for the pragma scanner."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanResult:
    """What one scan extracted from a token stream.

    ``version_pragmas`` keeps source order. ``imports`` is a reserved slot:
    the scanner never fills it, import extraction is not implemented.
    """

    version_pragmas: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()
