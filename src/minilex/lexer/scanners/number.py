"""Integer literal scanner mixin."""

from minilex.tokens import Token, TokenKind


class NumberScannerMixin:
    """Mixin providing integer literal scanning.

    Digits only: no sign, no decimal point, no range check. The digits
    are passed through as text.

    """

    __slots__ = ()

    _source: str
    _source_len: int
    _pos: int

    def _commit_to(self, end: int) -> None:
        """Commit position to end. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start_pos: int) -> Token:
        """Create token for source[start_pos:pos]. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_integer(self) -> Token:
        """Scan the maximal run of decimal digits at the cursor."""
        source = self._source
        start = self._pos
        end = start + 1
        while end < self._source_len and source[end].isdecimal():
            end += 1

        self._commit_to(end)
        return self._make_token(TokenKind.INTEGER, start)
