"""Operator, punctuation and newline scanner mixin."""

from minilex.lexer.modes import COMPARISON_KINDS, SINGLE_CHAR_KINDS
from minilex.tokens import Token, TokenKind


class OperatorScannerMixin:
    """Mixin providing operator scanning.

    Single-character operators map straight to a kind. ``<`` and ``>``
    look one character ahead so ``<=`` and ``>=`` are taken greedily.

    """

    __slots__ = ()

    _source: str
    _pos: int

    def _peek(self, ahead: int = 0) -> str:
        """Peek at a character without advancing. Implemented by Scanner."""
        raise NotImplementedError

    def _commit_to(self, end: int) -> None:
        """Commit position to end. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start_pos: int) -> Token:
        """Create token for source[start_pos:pos]. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_operator(self, char: str) -> Token | None:
        """Scan an operator, punctuation mark or newline.

        Args:
            char: Character under the cursor

        Returns:
            Token, or None if char starts no operator (nothing is consumed).
        """
        start = self._pos

        kind = SINGLE_CHAR_KINDS.get(char)
        if kind is not None:
            self._commit_to(start + 1)
            return self._make_token(kind, start)

        pair = COMPARISON_KINDS.get(char)
        if pair is not None:
            alone, with_equals = pair
            if self._peek(1) == "=":
                self._commit_to(start + 2)
                return self._make_token(with_equals, start)
            self._commit_to(start + 1)
            return self._make_token(alone, start)

        return None
