"""
LambdaScript Language Package

The front end of the LambdaScript language. Source text is turned into a
stream of positioned tokens for a later parsing stage.

Architecture:
    lambdascript/
    └── scanner/         # Tokenization and lexical analysis

License: MIT
"""

__version__ = "0.1.0-alpha"
__license__ = "MIT"

from .scanner import (
    Scanner, ScanResult, Token, TokenKind, TokenPosition,
    ScannerError, RuleTableError, ScanFailed, scan, scan_string, scan_file,
)

__all__ = [
    # Core classes
    "Scanner",
    "ScanResult",
    "Token",
    "TokenKind",
    "TokenPosition",

    # Errors
    "ScannerError",
    "RuleTableError",
    "ScanFailed",

    # Scanning functions
    "scan",
    "scan_string",
    "scan_file",

    # Version info
    "__version__",
    "__license__",
]
