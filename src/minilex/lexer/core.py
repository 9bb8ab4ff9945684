"""Single-pass scanner for the mini-language.

Dispatches on the character under the cursor, consumes one lexical unit
with a maximal-munch loop, and commits the cursor. The cursor never moves
backwards and nothing is re-read.

No regex in the hot path.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from minilex.config import ScanConfig, UnrecognizedPolicy, get_scan_config
from minilex.errors import UnrecognizedCharacterError
from minilex.lexer.modes import WHITESPACE, ScannerState
from minilex.lexer.scanners import (
    NumberScannerMixin,
    OperatorScannerMixin,
    WordScannerMixin,
)
from minilex.tokens import Token, TokenKind
from minilex.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    WordScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
):
    """Scanner turning mini-language source into tokens.

    Each call to next_token() skips spaces, tabs and carriage returns,
    then dispatches in priority order: letter, digit, operator. A
    character matching none of these is consumed and handled according
    to the configured UnrecognizedPolicy.

    Usage:
            >>> scanner = Scanner("i = 0\\nprint(i)")
            >>> for token in scanner.tokenize():
            ...     print(repr(token))
        Token(IDENTIFIER, 'i', 1:1)
        Token(ASSIGN, '=', 1:3)
        Token(INTEGER, '0', 1:5)
        Token(NEWLINE, '\\n', 1:6)
        Token(PRINT, 'print', 2:1)
        Token(LPAREN, '(', 2:6)
        Token(IDENTIFIER, 'i', 2:7)
        Token(RPAREN, ')', 2:8)
        Token(END_OF_INPUT, '', 2:9)

    Thread Safety:
        Scanner instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_col",
        "_state",
        "_source_file",
        "_policy",
        "_unrecognized",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Mini-language source text (may be empty)
            source_file: Optional source file path for diagnostics
            config: Scan configuration; the context's config when None
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._state = ScannerState.SCANNING
        self._source_file = source_file
        self._policy = (config or get_scan_config()).on_unrecognized
        self._unrecognized: str | None = None

        self._saved_lineno: int = 1
        self._saved_col: int = 1

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def source(self) -> str:
        """The text being scanned."""
        return self._source

    @property
    def position(self) -> int:
        """Cursor offset into the source."""
        return self._pos

    @property
    def state(self) -> ScannerState:
        return self._state

    @property
    def exhausted(self) -> bool:
        return self._state is ScannerState.EXHAUSTED

    @property
    def unrecognized(self) -> str | None:
        """Last unrecognized character consumed, if any.

        Lets callers tell a true end of input from a STOP on an unknown
        character, which both surface as END_OF_INPUT.
        """
        return self._unrecognized

    def next_token(self) -> Token:
        """Produce the next token.

        Once END_OF_INPUT has been returned, every further call returns an
        equal END_OF_INPUT token without moving the cursor.

        Raises:
            UnrecognizedCharacterError: Only under UnrecognizedPolicy.ERROR.
        """
        if self._state is ScannerState.EXHAUSTED:
            return self._make_end_token()

        while True:
            self._skip_whitespace()
            if self._pos >= self._source_len:
                return self._finish()

            self._save_location()
            char = self._source[self._pos]

            if char.isalpha():
                return self._scan_word()
            if char.isdecimal():
                return self._scan_integer()
            token = self._scan_operator(char)
            if token is not None:
                return token

            self._consume_unrecognized(char)
            if self._policy is UnrecognizedPolicy.STOP:
                return self._finish()

    def tokenize(self) -> list[Token]:
        """Scan to the end, returning every token through END_OF_INPUT.

        Complexity: O(n) where n = len(source)
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens lazily, stopping after END_OF_INPUT."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END_OF_INPUT:
                return

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Advance past spaces, tabs and carriage returns (never newlines)."""
        pos = self._pos
        source = self._source
        while pos < self._source_len and source[pos] in WHITESPACE:
            pos += 1
        self._commit_to(pos)

    def _peek(self, ahead: int = 0) -> str:
        """Peek at a character without advancing.

        Returns:
            Character at cursor + ahead, or empty string past the end.
        """
        pos = self._pos + ahead
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _commit_to(self, end: int) -> None:
        """Commit position to end, updating line/column tracking.

        Args:
            end: New cursor position (never before the current one).
        """
        if end <= self._pos:
            return

        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)

        self._pos = end

    def _consume_unrecognized(self, char: str) -> None:
        """Consume one character that matched no rule and apply the policy."""
        offset = self._pos
        self._commit_to(offset + 1)
        self._unrecognized = char
        logger.debug(
            "Unrecognized character %r at %d:%d (policy=%s)",
            char,
            self._saved_lineno,
            self._saved_col,
            self._policy.value,
        )

        if self._policy is UnrecognizedPolicy.ERROR:
            self._state = ScannerState.EXHAUSTED
            raise UnrecognizedCharacterError(
                char,
                offset,
                lineno=self._saved_lineno,
                col_offset=self._saved_col,
                source_file=self._source_file,
            )

    def _finish(self) -> Token:
        """Enter the terminal state and return END_OF_INPUT."""
        self._state = ScannerState.EXHAUSTED
        return self._make_end_token()

    # =========================================================================
    # Token creation
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location. Call at the start of each token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, kind: TokenKind, start_pos: int) -> Token:
        """Create a token for source[start_pos:pos] at the saved location."""
        return Token(
            kind=kind,
            text=self._source[start_pos : self._pos],
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=start_pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )

    def _make_end_token(self) -> Token:
        """Create END_OF_INPUT at the current position with empty text."""
        return Token(
            kind=TokenKind.END_OF_INPUT,
            text="",
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )
