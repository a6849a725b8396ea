"""solpragma: find the compiler versions a Solidity source declares."""

__version__ = "0.1.0"

import logging

# Silent until the application configures logging.
logging.getLogger("solpragma").addHandler(logging.NullHandler())

from solpragma.api import analyze, analyze_file
from solpragma.discovery import discover_sources, scan_paths
from solpragma.exceptions import InvalidInputError, SolPragmaError, SourceDecodeError
from solpragma.scanner import PragmaScanner, ScanResult, scan
from solpragma.schemas import AnalysisResult, FileAnalysis

__all__ = [
    "AnalysisResult",
    "FileAnalysis",
    "InvalidInputError",
    "PragmaScanner",
    "ScanResult",
    "SolPragmaError",
    "SourceDecodeError",
    "analyze",
    "analyze_file",
    "discover_sources",
    "scan",
    "scan_paths",
]
