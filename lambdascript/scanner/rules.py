"""
Scanning rules for LambdaScript.

Each rule pairs a token kind with a regular expression that matches the
lexeme body and a function that builds the token from the matched text.
Rules are prioritized in order: when several rules can match at the same
position, the first one listed wins, regardless of match length. Specific
rules therefore come before general ones (FLOAT before INT, '==' before '=',
CALL before NAME).

The whole table is compiled into one alternation, each rule wrapped in its
own capturing group, followed by a catch-all group for any other run of
non-whitespace characters.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern, Sequence

from .tokens import Token, TokenKind
from .errors import RuleTableError

logger = logging.getLogger(__name__)

# Matches whatever no rule claims; its group follows the last rule's group.
CATCH_ALL_PATTERN = r"\S+"


@dataclass(frozen=True)
class Rule:
    """
    A scanning rule.

    `construct` must accept every string `pattern` can match. It is never
    called with anything else, and its result is not checked.
    """
    kind: TokenKind
    pattern: str
    construct: Callable[[str], Token]

    @property
    def name(self) -> str:
        return self.kind.name


# ============================================================================
# Token construction functions
# ============================================================================

def make_float(text: str) -> Token:
    return Token(TokenKind.FLOAT, float(text))


def make_int(text: str) -> Token:
    return Token(TokenKind.INT, int(text))


def make_char(text: str) -> Token:
    # 'A' -> 65
    return Token(TokenKind.CHAR, ord(text[1]))


def make_call(text: str) -> Token:
    return Token(TokenKind.CALL, text[:-1])


def make_builtin(text: str) -> Token:
    # _print( -> print
    return Token(TokenKind.BUILTIN, text[1:-1])


def make_name(text: str) -> Token:
    return Token(TokenKind.NAME, text)


def constant(kind: TokenKind) -> Callable[[str], Token]:
    """Build a construction function for a token kind without a value."""
    token = Token(kind)

    def construct(text: str) -> Token:
        return token

    return construct


def rule(kind: TokenKind, pattern: str, construct: Optional[Callable[[str], Token]] = None) -> Rule:
    if construct is None:
        construct = constant(kind)
    return Rule(kind, pattern, construct)


# ============================================================================
# The rule table
# ============================================================================

RULES = (
    # Numbers
    rule(TokenKind.FLOAT, r"[0-9]*\.[0-9]+", make_float),
    rule(TokenKind.INT, r"[0-9]+", make_int),
    rule(TokenKind.CHAR, r"'[A-Za-z\n]'", make_char),
    # Comparators
    rule(TokenKind.EQUAL, r"=="),
    rule(TokenKind.NEQ, r"!="),
    rule(TokenKind.LEQ, r"<="),
    rule(TokenKind.GEQ, r">="),
    rule(TokenKind.LESS, r"<"),
    rule(TokenKind.GREATER, r">"),
    # Arithmetic operators
    rule(TokenKind.ADD, r"\+"),
    rule(TokenKind.SUB, r"-"),
    rule(TokenKind.MUL, r"\*"),
    rule(TokenKind.DIV, r"/"),
    rule(TokenKind.ASSIGN, r"="),
    # Logical operators
    rule(TokenKind.NOT, r"!"),
    rule(TokenKind.AND, r"&&"),
    rule(TokenKind.OR, r"\|\|"),
    # Bitwise operators
    rule(TokenKind.BNOT, r"~"),
    rule(TokenKind.BAND, r"&"),
    rule(TokenKind.BOR, r"\|"),
    rule(TokenKind.XOR, r"\^"),
    # Structure tokens
    rule(TokenKind.LAMBDA, r"\\"),
    rule(TokenKind.COMMA, r","),
    rule(TokenKind.PERIOD, r"\."),
    rule(TokenKind.SEMICOLON, r";"),
    rule(TokenKind.LPAR, r"\("),
    rule(TokenKind.RPAR, r"\)"),
    # Calls and bindings
    rule(TokenKind.CALL, r"[A-Za-z][A-Za-z0-9_]*\(", make_call),
    rule(TokenKind.BUILTIN, r"_[A-Za-z][A-Za-z0-9_]*\(", make_builtin),
    rule(TokenKind.NAME, r"[A-Za-z][A-Za-z0-9_]*", make_name),
)


# ============================================================================
# Pattern compilation
# ============================================================================

def _check_rule(candidate: Rule):
    """Reject patterns that would break the group-to-rule mapping."""
    try:
        compiled = re.compile(candidate.pattern)
    except re.error as e:
        raise RuleTableError(f"invalid pattern: {e}", candidate.name, candidate.pattern) from e

    if compiled.groups:
        raise RuleTableError(
            "pattern contains capturing groups, use (?:...) instead",
            candidate.name, candidate.pattern,
        )
    if compiled.fullmatch("") is not None:
        raise RuleTableError("pattern matches the empty string", candidate.name, candidate.pattern)


def compile_rules(rules: Sequence[Rule]) -> Pattern[str]:
    """
    Combine an ordered rule table into a single pattern.

    The result is equivalent to (rule1)|(rule2)|...|(ruleN)|(\\S+); group K
    belongs to rule K and group N+1 to the catch-all.

    Raises:
        RuleTableError: If the table is empty or any pattern is unusable
    """
    if not rules:
        raise RuleTableError("rule table is empty")

    for candidate in rules:
        _check_rule(candidate)

    alternatives = [f"({candidate.pattern})" for candidate in rules]
    alternatives.append(f"({CATCH_ALL_PATTERN})")

    try:
        combined = re.compile("|".join(alternatives))
    except re.error as e:
        raise RuleTableError(f"combined pattern failed to compile: {e}") from e

    logger.debug("compiled %d scanning rules into %d groups", len(rules), combined.groups)
    return combined


# Compiled once at import and shared read-only by every scan.
PATTERN = compile_rules(RULES)
