"""
Token definitions for the LambdaScript scanner.

This module defines the closed set of token kinds produced by the scanner:
- Literals (floats, integers, characters)
- Operators (comparison, arithmetic, logical, bitwise)
- Structure tokens (lambda, punctuation, parentheses)
- Calls, builtin calls and names

The order of TokenKind members follows the order of the rule table in
rules.py. Adding a rule adds a kind.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional


class TokenKind(Enum):
    """
    Enumeration of all token kinds in LambdaScript.

    Organized by category, in scanning priority order.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    FLOAT = auto()                  # 3.14, .5
    INT = auto()                    # 42
    CHAR = auto()                   # 'A'

    # ========================================================================
    # Operators
    # ========================================================================

    # Comparators
    EQUAL = auto()                  # ==
    NEQ = auto()                    # !=
    LEQ = auto()                    # <=
    GEQ = auto()                    # >=
    LESS = auto()                   # <
    GREATER = auto()                # >

    # Arithmetic operators
    ADD = auto()                    # +
    SUB = auto()                    # -
    MUL = auto()                    # *
    DIV = auto()                    # /
    ASSIGN = auto()                 # =

    # Logical operators
    NOT = auto()                    # !
    AND = auto()                    # &&
    OR = auto()                     # ||

    # Bitwise operators
    BNOT = auto()                   # ~
    BAND = auto()                   # &
    BOR = auto()                    # |
    XOR = auto()                    # ^

    # ========================================================================
    # Structure
    # ========================================================================
    LAMBDA = auto()                 # \
    COMMA = auto()                  # ,
    PERIOD = auto()                 # .
    SEMICOLON = auto()              # ;
    LPAR = auto()                   # (
    RPAR = auto()                   # )

    # ========================================================================
    # Calls and bindings
    # ========================================================================
    CALL = auto()                   # f(
    BUILTIN = auto()                # _print(
    NAME = auto()                   # x

    @property
    def has_payload(self) -> bool:
        """Check if tokens of this kind carry a value."""
        return self in PAYLOAD_KINDS


PAYLOAD_KINDS = frozenset({
    TokenKind.FLOAT, TokenKind.INT, TokenKind.CHAR,
    TokenKind.CALL, TokenKind.BUILTIN, TokenKind.NAME,
})

LITERAL_KINDS = frozenset({TokenKind.FLOAT, TokenKind.INT, TokenKind.CHAR})

OPERATOR_KINDS = frozenset({
    TokenKind.EQUAL, TokenKind.NEQ, TokenKind.LEQ, TokenKind.GEQ,
    TokenKind.LESS, TokenKind.GREATER,
    TokenKind.ADD, TokenKind.SUB, TokenKind.MUL, TokenKind.DIV, TokenKind.ASSIGN,
    TokenKind.NOT, TokenKind.AND, TokenKind.OR,
    TokenKind.BNOT, TokenKind.BAND, TokenKind.BOR, TokenKind.XOR,
})


@dataclass(frozen=True)
class TokenPosition:
    """
    Zero-based line index and column offset where a token starts.

    Attached to every token and every scan error.
    """
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token: its kind and, for literal and identifier kinds, its value.

    Structural tokens such as ASSIGN or COMMA have value None.
    """
    kind: TokenKind
    value: Optional[Any] = None

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.name
        return f"{self.kind.name}({self.value!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind in LITERAL_KINDS

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.kind in OPERATOR_KINDS

    @property
    def is_identifier(self) -> bool:
        """Check if this token names something (a binding, call or builtin)."""
        return self.kind in (TokenKind.NAME, TokenKind.CALL, TokenKind.BUILTIN)
