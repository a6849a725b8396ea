"""Marshaled analysis results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from solpragma.scanner.models import ScanResult


class AnalysisResult(BaseModel):
    """Result handed to callers; serializes as ``versionPragmas``/``imports``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version_pragmas: list[str] = Field(default_factory=list, alias="versionPragmas")
    # Reserved: import extraction is not implemented, this is always empty.
    imports: list[str] = Field(default_factory=list)

    @classmethod
    def from_scan(cls, result: ScanResult) -> AnalysisResult:
        return cls(
            version_pragmas=list(result.version_pragmas),
            imports=list(result.imports),
        )


class FileAnalysis(AnalysisResult):
    """Analysis of one file; ``source_file`` is relative to the scanned root."""

    source_file: str = Field(alias="sourceFile")
