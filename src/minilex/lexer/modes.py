"""Scanner states and character tables.

This module defines the two-state machine the scanner runs and the
constant tables used by the character-class scanners.
"""

from __future__ import annotations

from enum import Enum, auto

from minilex.tokens import TokenKind


class ScannerState(Enum):
    """Scanner states.

    - SCANNING: tokens are still being produced
    - EXHAUSTED: END_OF_INPUT has been produced; terminal

    """

    SCANNING = auto()
    EXHAUSTED = auto()


# Skipped between tokens. Newline is significant and is not in this set.
WHITESPACE: frozenset[str] = frozenset(" \t\r")

# Characters that may continue an identifier besides letters and digits
IDENTIFIER_EXTRA: frozenset[str] = frozenset("_")

SINGLE_CHAR_KINDS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "=": TokenKind.ASSIGN,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ":": TokenKind.COLON,
    "\n": TokenKind.NEWLINE,
}

# Comparison operators: (kind alone, kind when followed by "=")
COMPARISON_KINDS: dict[str, tuple[TokenKind, TokenKind]] = {
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}
