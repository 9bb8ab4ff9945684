"""Source location tracking for diagnostics.

Provides SourceLocation dataclass for tracking positions in source text.
Used by tokens and by ScanError messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for diagnostics.

    Line and column are 1-indexed; offsets are 0-indexed positions in the
    source string (end exclusive).

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=10, end_offset=12)
            >>> str(loc)
            '2:5'

            >>> loc = SourceLocation(1, 1, source_file="loop.mini")
            >>> str(loc)
            'loop.mini:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location as "file:line:col" or "line:col"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered."""
        return self.end_offset - self.offset
