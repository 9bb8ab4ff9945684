"""Token and TokenKind definitions for the minilex scanner.

The scanner produces a stream of Token objects for a downstream consumer.
Each Token has a kind, the verbatim text it matched, and a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minilex.location import SourceLocation


class TokenKind(Enum):
    """Token kinds produced by the scanner.

    STRING, CHAR, INCREMENT and EQUAL are reserved: no scanning rule
    produces them.

    """

    # Names and literals
    IDENTIFIER = auto()
    INTEGER = auto()
    STRING = auto()  # reserved
    CHAR = auto()  # reserved

    # Arithmetic
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /

    # Punctuation
    ASSIGN = auto()  # =
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    COLON = auto()  # :
    INCREMENT = auto()  # reserved
    EQUAL = auto()  # reserved

    # Comparisons
    LESS = auto()  # <
    GREATER = auto()  # >
    LESS_EQUAL = auto()  # <=
    GREATER_EQUAL = auto()  # >=

    # Keywords
    FOR = auto()
    IN = auto()
    RANGE = auto()
    IF = auto()
    ELSE = auto()
    PRINT = auto()

    # Structure
    NEWLINE = auto()
    END_OF_INPUT = auto()


# Reserved spellings, checked once after an identifier has been scanned
KEYWORDS: MappingProxyType[str, TokenKind] = MappingProxyType(
    {
        "for": TokenKind.FOR,
        "in": TokenKind.IN,
        "range": TokenKind.RANGE,
        "if": TokenKind.IF,
        "else": TokenKind.ELSE,
        "print": TokenKind.PRINT,
    }
)

# Kinds that are never produced by the scanner
RESERVED_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.STRING, TokenKind.CHAR, TokenKind.INCREMENT, TokenKind.EQUAL}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        kind: The token kind (from TokenKind enum)
        text: The verbatim source slice; empty for END_OF_INPUT
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    kind: TokenKind
    text: str
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from minilex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def is_end(self) -> bool:
        """True for the END_OF_INPUT terminator."""
        return self.kind is TokenKind.END_OF_INPUT

    def __str__(self) -> str:
        """Diagnostic form: ``Token(KIND, text)``."""
        return f"Token({self.kind.name}, {self.text})"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
