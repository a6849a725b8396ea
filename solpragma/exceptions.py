"""Custom exceptions for solpragma."""


class SolPragmaError(Exception):
    """Base exception for all solpragma errors."""


class InvalidInputError(SolPragmaError, TypeError):
    """Raised when analyze() is called with something other than source text."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"expected source text as str or UTF-8 bytes, got {type(value).__name__}"
        )


class SourceDecodeError(SolPragmaError, ValueError):
    """Raised when source bytes are not valid UTF-8."""

    def __init__(self, reason: str, source_file: str | None = None):
        self.reason = reason
        self.source_file = source_file
        where = f" in {source_file}" if source_file else ""
        super().__init__(f"cannot decode source{where}: {reason}")
