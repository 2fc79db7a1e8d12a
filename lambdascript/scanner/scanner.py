"""
LambdaScript scanner - turns lines of source text into positioned tokens

Every line is matched against the combined rule pattern from left to right.
Each match is either a token (built by the rule that matched) or an
unrecognized symbol (caught by the catch-all group). Both are collected
across the whole input, and only at the end is the outcome decided: all
tokens if nothing went wrong, otherwise all errors.
"""

import io
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Pattern, Sequence, Tuple, Union

from .tokens import Token, TokenPosition
from .rules import RULES, PATTERN, Rule, compile_rules
from .errors import Diagnostic, ScanFailed, UnrecognizedSymbol

logger = logging.getLogger(__name__)

PositionedToken = Tuple[TokenPosition, Token]

# (rule, matched text, start, end); rule is None for the catch-all
LineMatch = Tuple[Optional[Rule], str, int, int]


def find_matches(pattern: Pattern[str], rules: Sequence[Rule], line: str) -> List[LineMatch]:
    """
    Find all disjoint matches of a combined rule pattern in one line.

    Args:
        pattern: Pattern built by compile_rules(rules)
        rules: The rule table the pattern was built from
        line: A single line of text, without its line terminator

    Returns:
        Matches in left-to-right order
    """
    matches = []
    for match in pattern.finditer(line):
        # Rule groups hold no nested groups, so the last group closed is
        # the only one that participated.
        index = match.lastindex - 1
        matched_rule = rules[index] if index < len(rules) else None
        matches.append((matched_rule, match.group(), match.start(), match.end()))
    return matches


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of scanning one input.

    A failed scan carries only errors, a successful one only tokens
    (possibly none, for empty input).
    """
    tokens: Tuple[PositionedToken, ...] = ()
    errors: Tuple[UnrecognizedSymbol, ...] = ()
    filename: str = "<input>"

    @property
    def ok(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> List[PositionedToken]:
        """
        Get the scanned tokens.

        Raises:
            ScanFailed: If the input contained unrecognized symbols
        """
        if self.errors:
            raise ScanFailed(self.errors, self.filename)
        return list(self.tokens)

    def diagnostics(self) -> List[Diagnostic]:
        return [error.to_diagnostic(self.filename) for error in self.errors]


class Scanner:
    """
    LambdaScript lexical scanner.

    Holds a rule table and its compiled pattern. The default table is
    compiled once at import and shared; a custom table is compiled when the
    scanner is created. A scanner keeps no state between scans.
    """

    def __init__(self, rules: Optional[Sequence[Rule]] = None, filename: str = "<input>"):
        """
        Initialize the scanner.

        Args:
            rules: Ordered rule table, highest priority first (default: RULES)
            filename: Name of the scanned source, used in diagnostics

        Raises:
            RuleTableError: If a custom rule table cannot be compiled
        """
        if rules is None:
            self.rules = RULES
            self.pattern = PATTERN
        else:
            self.rules = tuple(rules)
            self.pattern = compile_rules(self.rules)
        self.filename = filename

    def scan(self, lines: Union[str, Iterable[str]]) -> ScanResult:
        """
        Scan every line of the input.

        Args:
            lines: Iterable of text lines (a text file, a list of strings),
                   or a whole source text as a single string

        Returns:
            ScanResult holding either all tokens or all unrecognized symbols
        """
        if isinstance(lines, str):
            lines = io.StringIO(lines)

        tokens: List[PositionedToken] = []
        errors: List[UnrecognizedSymbol] = []
        line_count = 0

        for line_num, line in enumerate(lines):
            line_count += 1
            line = _strip_line_terminator(line)

            for matched_rule, text, start, _end in find_matches(self.pattern, self.rules, line):
                position = TokenPosition(line_num, start)
                if matched_rule is None:
                    errors.append(UnrecognizedSymbol(position, text))
                else:
                    tokens.append((position, matched_rule.construct(text)))

        logger.debug(
            "scanned %s: %d line(s), %d token(s), %d error(s)",
            self.filename, line_count, len(tokens), len(errors),
        )

        if errors:
            return ScanResult(errors=tuple(errors), filename=self.filename)
        return ScanResult(tokens=tuple(tokens), filename=self.filename)


def _strip_line_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


_default_scanner = Scanner()


def scan(lines: Union[str, Iterable[str]]) -> ScanResult:
    """
    Scan lines of LambdaScript with the default rule table.

    Args:
        lines: Iterable of text lines, or a whole source text

    Returns:
        ScanResult holding either all tokens or all unrecognized symbols
    """
    return _default_scanner.scan(lines)


def scan_string(source: str, filename: str = "<string>") -> ScanResult:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics

    Returns:
        ScanResult for the whole string
    """
    return Scanner(filename=filename).scan(io.StringIO(source))


def scan_file(filepath: str, encoding: str = "utf-8") -> ScanResult:
    """
    Convenience function to scan a source file, one line at a time.

    Args:
        filepath: Path to source file
        encoding: Text encoding of the file

    Returns:
        ScanResult for the whole file

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding=encoding, newline='\n') as f:
        return Scanner(filename=str(filepath)).scan(f)
