"""
Error handling for the LambdaScript scanner.

Two classes of failure exist. Configuration errors (a malformed rule table)
are fatal and raised once, when the table is compiled. Unrecognized symbols
in the scanned input are collected, never raised during a scan, and handed
back all at once so that every problem in the input can be reported in one
pass.
"""

from typing import Optional, List, Sequence
from dataclasses import dataclass
from .tokens import TokenPosition


@dataclass
class Diagnostic:
    """A renderable report about one position in the scanned input."""
    message: str
    position: TokenPosition
    severity: str  # "error", "warning"
    filename: str = "<input>"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.filename}:{self.position.line}:{self.position.column}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


@dataclass(frozen=True)
class UnrecognizedSymbol:
    """A maximal run of non-whitespace text that no scanning rule matched."""
    position: TokenPosition
    text: str

    def to_diagnostic(self, filename: str = "<input>") -> Diagnostic:
        suggestions = ErrorRecovery.suggest_ascii_spellings(self.text)
        help_text = None

        if suggestions:
            help_text = "Did you mean: " + ", ".join(suggestions) + "?"
        elif self.text.startswith("_"):
            help_text = "Builtin names are only valid when called, e.g. _name(...)."
        elif not self.text.isprintable():
            codes = ", ".join(f"U+{ord(c):04X}" for c in self.text if not c.isprintable())
            help_text = f"Non-printable characters ({codes}) are not allowed."

        return Diagnostic(
            message=f"{ERROR_CODES['L001']}: '{self.text}'",
            position=self.position,
            severity="error",
            filename=filename,
            code="L001",
            help_text=help_text,
            suggestions=suggestions or None,
        )


class ScannerError(Exception):
    """Base class for all scanner errors."""


class RuleTableError(ScannerError):
    """
    Raised when a rule table cannot be compiled into a combined pattern.

    This is a configuration error, detected once before any input is scanned.
    """

    def __init__(self, message: str, rule_name: Optional[str] = None, pattern: Optional[str] = None):
        super().__init__(message)
        self.rule_name = rule_name
        self.pattern = pattern

    def __str__(self) -> str:
        if self.rule_name is None:
            return self.args[0]
        return f"rule {self.rule_name} ({self.pattern!r}): {self.args[0]}"


class ScanFailed(ScannerError):
    """
    Raised when the tokens of a failed scan are requested.

    Carries every unrecognized symbol found in the input, in input order.
    """

    def __init__(self, errors: Sequence[UnrecognizedSymbol], filename: str = "<input>"):
        super().__init__(f"{len(errors)} unrecognized symbol(s) in {filename}")
        self.errors = list(errors)
        self.filename = filename

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return [error.to_diagnostic(self.filename) for error in self.errors]

    def __str__(self) -> str:
        return self.args[0] + "\n" + "".join(str(d) for d in self.diagnostics)


class ErrorRecovery:
    """
    Suggestions attached to unrecognized symbols.

    Suggestions only enrich diagnostics; they never change what was scanned.
    """

    ASCII_SPELLINGS = {
        '≠': '!=',
        '≤': '<=',
        '≥': '>=',
        '≡': '==',
        '¬': '!',
        '∧': '&&',
        '∨': '||',
        '⊕': '^',
        '×': '*',
        '⋅': '*',
        '÷': '/',
        '−': '-',
        '←': '=',
        'λ': '\\',
        '‘': "'",
        '’': "'",
    }

    @staticmethod
    def suggest_ascii_spellings(text: str) -> List[str]:
        """Suggest ASCII operators for Unicode look-alikes found in text."""
        suggestions = []
        for char in text:
            spelling = ErrorRecovery.ASCII_SPELLINGS.get(char)
            if spelling is not None:
                suggestion = f"'{spelling}' instead of '{char}'"
                if suggestion not in suggestions:
                    suggestions.append(suggestion)
        return suggestions[:3]


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized symbol",
}
