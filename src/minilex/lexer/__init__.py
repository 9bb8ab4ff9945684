"""Scanner for the minilex mini-language.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ScannerState
├── core.py              # Scanner class (dispatch + cursor navigation)
├── modes.py             # ScannerState enum, character tables
└── scanners/            # Character-class scanners
    ├── word.py          # Identifiers and keywords
    ├── number.py        # Integer literals
    └── operator.py      # Operators, punctuation, newline

Usage:
    >>> from minilex.lexer import Scanner
    >>> for token in Scanner("x = 1").tokenize():
    ...     print(token)
Token(IDENTIFIER, x)
Token(ASSIGN, =)
Token(INTEGER, 1)
Token(END_OF_INPUT, )

"""

from minilex.lexer.core import Scanner
from minilex.lexer.modes import ScannerState

__all__ = ["Scanner", "ScannerState"]
