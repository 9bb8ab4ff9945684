"""Character-class scanners for the minilex scanner.

Each scanner is a mixin that consumes one lexical unit starting with a
particular class of character (letter, digit, operator).
"""

from __future__ import annotations

from minilex.lexer.scanners.number import NumberScannerMixin
from minilex.lexer.scanners.operator import OperatorScannerMixin
from minilex.lexer.scanners.word import WordScannerMixin

__all__ = [
    "NumberScannerMixin",
    "OperatorScannerMixin",
    "WordScannerMixin",
]
