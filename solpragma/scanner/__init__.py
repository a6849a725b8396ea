"""Pragma scanner engine — top-level version pragmas from a token stream."""

from solpragma.scanner.models import ScanResult
from solpragma.scanner.scanner import PragmaScanner, scan
from solpragma.scanner.state import ScanState, StateTag

__all__ = ["PragmaScanner", "ScanResult", "ScanState", "StateTag", "scan"]
