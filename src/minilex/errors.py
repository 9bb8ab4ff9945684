"""Exception classes for minilex.

The scanner itself never raises under the default configuration. These
exceptions surface only when a caller opts into strict scanning.
"""

from __future__ import annotations


class MinilexError(Exception):
    """Base exception for all minilex errors."""

    pass


class ScanError(MinilexError):
    """A scanner diagnostic tied to a position in mini-language source.

    The message is prefixed with whatever part of ``file:line:col`` is
    known, e.g. ``loop.mini:3:7 unrecognized character '#'``.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """
        Args:
            message: What the scanner rejected
            lineno: Line of the offending character (1-indexed)
            col_offset: Column of the offending character (1-indexed);
                ignored without lineno
            source_file: Name passed to Scanner(source_file=...)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        parts = [source_file] if source_file else []
        if lineno is not None:
            parts.append(str(lineno))
            if col_offset is not None:
                parts.append(str(col_offset))
        prefix = ":".join(parts)

        super().__init__(f"{prefix} {message}" if prefix else message)


class UnrecognizedCharacterError(ScanError):
    """A character matched no scanning rule.

    Raised only under ``UnrecognizedPolicy.ERROR``.
    """

    def __init__(
        self,
        char: str,
        offset: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.char = char
        self.offset = offset
        super().__init__(
            f"unrecognized character {char!r}",
            lineno=lineno,
            col_offset=col_offset,
            source_file=source_file,
        )
