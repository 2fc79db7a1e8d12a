"""
LambdaScript Scanner Package

Implements the lexical scanner for the LambdaScript language: a declarative,
ordered rule table compiled into one combined pattern, applied line by line.

Key Features:
- Priority by rule order (first listed rule that matches wins)
- Identifiers directly followed by '(' scan as calls
- Every unrecognized symbol in the input is reported in one pass
- Zero-based line/column positions on every token and error
"""

from .tokens import Token, TokenKind, TokenPosition
from .rules import RULES, Rule, compile_rules
from .scanner import Scanner, ScanResult, find_matches, scan, scan_file, scan_string
from .errors import (
    Diagnostic, RuleTableError, ScanFailed, ScannerError, UnrecognizedSymbol
)

__all__ = [
    "Scanner",
    "ScanResult",
    "Token",
    "TokenKind",
    "TokenPosition",
    "Rule",
    "RULES",
    "compile_rules",
    "find_matches",
    "scan",
    "scan_string",
    "scan_file",
    "Diagnostic",
    "UnrecognizedSymbol",
    "ScannerError",
    "RuleTableError",
    "ScanFailed",
]
